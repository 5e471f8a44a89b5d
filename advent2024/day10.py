"""Hoof It: hiking trails that climb from height 0 to height 9 one step at a time."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from advent2024.geometry import Grid, Point, parse_grid


@dataclass
class ParsedInput:
    grid: Grid


def parse_input(text: str) -> ParsedInput:
    return ParsedInput(parse_grid(text))


def _square(grid: Grid, point: Point) -> str:
    square = grid.get(point)
    if square is None:
        raise ValueError(f"{point} lies outside the grid")
    return square


def _uphill_neighbours(grid: Grid, point: Point) -> list[Point]:
    height = ord(_square(grid, point))
    return [
        neighbour
        for neighbour in grid.adjacent_points(point)
        if ord(_square(grid, neighbour)) - height == 1
    ]


def trailhead_score(grid: Grid, start: Point) -> int:
    """How many distinct height-9 squares can be reached from start."""
    _square(grid, start)
    explored = {start}
    queue = deque([start])
    score = 0
    while queue:
        point = queue.popleft()
        if grid.get(point) == "9":
            score += 1
        for neighbour in _uphill_neighbours(grid, point):
            if neighbour not in explored:
                explored.add(neighbour)
                queue.append(neighbour)
    return score


def trailhead_rating(grid: Grid, start: Point) -> int:
    """How many distinct trails lead from start to any height-9 square."""
    _square(grid, start)
    stack = [start]
    rating = 0
    while stack:
        point = stack.pop()
        if grid.get(point) == "9":
            rating += 1
        stack.extend(_uphill_neighbours(grid, point))
    return rating


def _trailheads(grid: Grid) -> list[Point]:
    return [point for point, square in grid.items() if square == "0"]


def part1(parsed: ParsedInput) -> int:
    return sum(trailhead_score(parsed.grid, head) for head in _trailheads(parsed.grid))


def part2(parsed: ParsedInput) -> int:
    return sum(trailhead_rating(parsed.grid, head) for head in _trailheads(parsed.grid))