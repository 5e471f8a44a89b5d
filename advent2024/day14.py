"""Restroom redoubt: robots patrolling a wrapping grid."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from math import prod

from advent2024.geometry import Point, Vector

_POSITION_AND_VELOCITY = re.compile(r"=(-?\d+),(-?\d+)")
_WIDTH = 101
_HEIGHT = 103
_PART1_SECONDS = 100
_PART2_SECOND_LIMIT = 100_000


class GridQuadrant(Enum):
    NORTH_EAST = "north_east"
    NORTH_WEST = "north_west"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    AMBIGUOUS = "ambiguous"  # on the middle line of one or both axes


@dataclass(frozen=True)
class RobotPosition:
    position: Point
    velocity: Vector


@dataclass
class Robot:
    """A robot moving by its velocity each second, wrapping at the grid's edges."""

    position: Point
    velocity: Vector
    width: int
    height: int

    def walk(self) -> None:
        """Advance one second, wrapping once around either axis."""
        x = self.position.x + self.velocity.dx
        y = self.position.y + self.velocity.dy
        if x >= self.width:
            x -= self.width
        elif x < 0:
            x += self.width
        if y >= self.height:
            y -= self.height
        elif y < 0:
            y += self.height
        self.position = Point(x, y)

    @property
    def quadrant(self) -> GridQuadrant:
        half_width = (self.width - 1) // 2
        half_height = (self.height - 1) // 2
        x, y = self.position.x, self.position.y
        if x == half_width or y == half_height:
            return GridQuadrant.AMBIGUOUS
        if y < half_height:
            return GridQuadrant.NORTH_EAST if x < half_width else GridQuadrant.NORTH_WEST
        return GridQuadrant.SOUTH_EAST if x < half_width else GridQuadrant.SOUTH_WEST


@dataclass
class ParsedInput:
    robot_positions: list[RobotPosition] = field(default_factory=list)


def parse_input(text: str) -> ParsedInput:
    """Read lines of the form 'p=X,Y v=DX,DY'."""
    robots = []
    for line in text.splitlines():
        matches = _POSITION_AND_VELOCITY.findall(line)
        if len(matches) != 2:
            raise ValueError(f"expected a position and a velocity in {line!r}")
        (px, py), (vx, vy) = matches
        robots.append(RobotPosition(Point(int(px), int(py)), Vector(int(vx), int(vy))))
    return ParsedInput(robots)


def _robots(parsed: ParsedInput, width: int, height: int) -> list[Robot]:
    return [Robot(r.position, r.velocity, width, height) for r in parsed.robot_positions]


def puzzle_part1(parsed: ParsedInput, width: int, height: int) -> int:
    """The product of the robot counts in each quadrant after a hundred seconds."""
    robots = _robots(parsed, width, height)
    for _ in range(_PART1_SECONDS):
        for robot in robots:
            robot.walk()
    counts = Counter(robot.quadrant for robot in robots)
    return prod(
        counts[quadrant] for quadrant in GridQuadrant if quadrant is not GridQuadrant.AMBIGUOUS
    )


def puzzle_part2(parsed: ParsedInput, width: int, height: int) -> int:
    """The first second after which no two robots share a square."""
    robots = _robots(parsed, width, height)
    second = 0
    while second < _PART2_SECOND_LIMIT:
        for robot in robots:
            robot.walk()
        occupied = Counter(robot.position for robot in robots)
        if all(count == 1 for count in occupied.values()):
            break
        second += 1
    return second + 1


def part1(parsed: ParsedInput) -> int:
    return puzzle_part1(parsed, _WIDTH, _HEIGHT)


def part2(parsed: ParsedInput) -> int:
    return puzzle_part2(parsed, _WIDTH, _HEIGHT)