"""Resonant antennas: the antinodes that pairs of same-frequency antennas produce."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations

from advent2024.geometry import Grid, Point, parse_grid


@dataclass
class ParsedInput:
    grid: Grid


def parse_input(text: str) -> ParsedInput:
    return ParsedInput(parse_grid(text))


def _antennas_by_frequency(grid: Grid) -> dict[str, list[Point]]:
    antennas: dict[str, list[Point]] = defaultdict(list)
    for point, square in grid.items():
        if square != ".":
            antennas[square].append(point)
    return antennas


def _antenna_pairs(grid: Grid):
    for positions in _antennas_by_frequency(grid).values():
        if len(positions) >= 2:
            yield positions, combinations(positions, 2)


def part1(parsed: ParsedInput) -> int:
    """Points in the grid twice as far from one antenna of a pair as from the other."""
    grid = parsed.grid
    antinodes: set[Point] = set()
    for _, pairs in _antenna_pairs(grid):
        for a, b in pairs:
            for candidate in (a + (b - a) * 2, b + (a - b) * 2):
                if grid.get(candidate) is not None:
                    antinodes.add(candidate)
    return len(antinodes)


def part2(parsed: ParsedInput) -> int:
    """Points in the grid in line with a pair, at whole multiples of their spacing."""
    grid = parsed.grid
    antinodes: set[Point] = set()
    for positions, pairs in _antenna_pairs(grid):
        antinodes.update(positions)
        for a, b in pairs:
            for origin, step in ((a, b - a), (b, a - b)):
                candidate = origin + step * 2
                while grid.get(candidate) is not None:
                    antinodes.add(candidate)
                    candidate = candidate + step
    return len(antinodes)