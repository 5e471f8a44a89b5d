"""Garden groups: fence prices by perimeter and by number of sides."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable

from advent2024.geometry import Direction, Grid, Point, Vector, parse_grid


@dataclass(frozen=True)
class Edge:
    """The side of a square facing direction that borders another region."""

    direction: Direction
    point: Point


@dataclass(frozen=True)
class Region:
    """A connected set of same-plant squares and the length of fence it needs."""

    points: frozenset[Point]
    fence: int

    @property
    def area(self) -> int:
        return len(self.points)

    @property
    def price(self) -> int:
        return self.area * self.fence


@dataclass
class ParsedInput:
    grid: Grid


def parse_input(text: str) -> ParsedInput:
    return ParsedInput(parse_grid(text))


def _region_name(grid: Grid, start: Point) -> str:
    name = grid.get(start)
    if name is None:
        raise ValueError(f"{start} lies outside the grid")
    return name


def find_region(grid: Grid, start: Point) -> Region:
    """The region holding start, fenced by its perimeter."""
    name = _region_name(grid, start)
    explored = {start}
    queue = deque([start])
    perimeter = 0
    while queue:
        point = queue.popleft()
        adjacent = grid.adjacent_points(point)
        perimeter += 4 - len(adjacent)
        for neighbour in adjacent:
            if grid.get(neighbour) != name:
                perimeter += 1
            elif neighbour not in explored:
                explored.add(neighbour)
                queue.append(neighbour)
    return Region(frozenset(explored), perimeter)


def count_sides(edges: Iterable[Edge]) -> int:
    """The number of straight fence sides that the edges form."""
    edge_set = set(edges)

    def starts_side(edge: Edge) -> bool:
        horizontal = edge.direction in (Direction.NORTH, Direction.SOUTH)
        step = Vector(1, 0) if horizontal else Vector(0, 1)
        return Edge(edge.direction, edge.point - step) not in edge_set

    return sum(1 for edge in edge_set if starts_side(edge))


def find_region_with_sides(grid: Grid, start: Point) -> Region:
    """The region holding start, fenced by its number of sides."""
    name = _region_name(grid, start)
    explored = {start}
    queue = deque([start])
    edges: list[Edge] = []
    while queue:
        point = queue.popleft()
        for direction in Direction:
            neighbour = point + direction.vector
            if grid.get(neighbour) != name:
                edges.append(Edge(direction, point))
            elif neighbour not in explored:
                explored.add(neighbour)
                queue.append(neighbour)
    return Region(frozenset(explored), count_sides(edges))


def _total_price(grid: Grid, finder) -> int:
    accounted: set[Point] = set()
    total = 0
    for point, _ in grid.items():
        if point in accounted:
            continue
        region = finder(grid, point)
        total += region.price
        accounted |= region.points
    return total


def part1(parsed: ParsedInput) -> int:
    return _total_price(parsed.grid, find_region)


def part2(parsed: ParsedInput) -> int:
    return _total_price(parsed.grid, find_region_with_sides)