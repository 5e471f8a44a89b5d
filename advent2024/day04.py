"""Word search: XMAS in eight directions and MAS crossed in an X."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from advent2024.geometry import Grid, Point, parse_grid

_DIRECTIONS = [(0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1)]
_WORD = "XMAS"


@dataclass
class ParsedInput:
    grid: Grid


def parse_input(text: str) -> ParsedInput:
    return ParsedInput(parse_grid(text))


def can_find_xmas_in_direction(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    """Whether XMAS is spelt from (x, y) stepping by (dx, dy)."""
    return all(
        grid.get(Point(x + step * dx, y + step * dy)) == letter
        for step, letter in enumerate(_WORD)
    )


def get_diagonal_string(grid: Grid, x: int, y: int, dx: int, dy: int) -> Optional[str]:
    """The three letters centred on (x, y) along (dx, dy), or None off the grid."""
    letters = []
    for step in (-1, 0, 1):
        square = grid.get(Point(x + step * dx, y + step * dy))
        if square is None:
            return None
        letters.append(square)
    return "".join(letters)


def can_find_x_shaped_mas(grid: Grid, x: int, y: int) -> bool:
    if grid.get(Point(x, y)) != "A":
        return False
    return all(
        get_diagonal_string(grid, x, y, 1, dy) in ("MAS", "SAM")
        for dy in (1, -1)
    )


def part1(parsed: ParsedInput) -> int:
    grid = parsed.grid
    return sum(
        can_find_xmas_in_direction(grid, point.x, point.y, dx, dy)
        for point, _ in grid.items()
        for dx, dy in _DIRECTIONS
    )


def part2(parsed: ParsedInput) -> int:
    grid = parsed.grid
    return sum(can_find_x_shaped_mas(grid, point.x, point.y) for point, _ in grid.items())