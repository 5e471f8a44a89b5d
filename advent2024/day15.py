"""Warehouse woes: a robot pushing boxes, narrow and then double width."""

from __future__ import annotations

from dataclasses import dataclass, field

from advent2024.geometry import Direction, Grid, Point, Vector, parse_grid

_MOVES = {
    "^": Direction.NORTH,
    ">": Direction.EAST,
    "v": Direction.SOUTH,
    "<": Direction.WEST,
}

_WIDENED = {
    "#": "##",
    "O": "[]",
    ".": "..",
    "@": "@.",
}


@dataclass
class ParsedInput:
    grid: Grid
    moves: list[Direction] = field(default_factory=list)


def parse_input(text: str) -> ParsedInput:
    """A map, a blank line, then the robot's moves spread over any number of lines."""
    lines = text.split("\n")
    grid_lines: list[str] = []
    rest: list[str] = []
    for index, line in enumerate(lines):
        if not line:
            rest = lines[index + 1:]
            break
        grid_lines.append(line)
    moves = []
    for char in "\n".join(rest):
        if char == "\n":
            continue
        if char not in _MOVES:
            raise ValueError(f"invalid character in input: {char!r}")
        moves.append(_MOVES[char])
    return ParsedInput(parse_grid("\n".join(grid_lines)), moves)


def try_move_obstacle(grid: Grid, position: Point, offset: Vector) -> bool:
    """Push the row of boxes starting at position one step along offset, if there is room."""
    candidate = position + offset
    while grid.get(candidate) == "O":
        candidate = candidate + offset
    if grid.get(candidate) != ".":
        return False
    grid.set(candidate, "O")
    grid.set(position, ".")
    return True


@dataclass(frozen=True)
class _WideMove:
    old_pos: Point
    old_pos_2: Point
    new_pos: Point
    new_pos_2: Point
    char: str
    char_2: str


def _collect_wide_moves(grid: Grid, position: Point, offset: Vector, moves: list[_WideMove]) -> bool:
    char = grid.get(position)
    position_2 = position + (Vector(1, 0) if char == "[" else Vector(-1, 0))
    char_2 = grid.get(position_2)
    if char == char_2:
        raise ValueError(f"invalid box at {position}")

    candidate = position + offset
    candidate_2 = position_2 + offset
    square = grid.get(candidate)
    square_2 = grid.get(candidate_2)
    if square is None or square_2 is None or square == "#" or square_2 == "#":
        return False

    if candidate != position_2 and square != "." and not _collect_wide_moves(
        grid, candidate, offset, moves
    ):
        return False
    if candidate_2 != position and square_2 != "." and not _collect_wide_moves(
        grid, candidate_2, offset, moves
    ):
        return False

    moves.append(_WideMove(position, position_2, candidate, candidate_2, char, char_2))
    return True


def try_move_wide_obstacle(grid: Grid, position: Point, offset: Vector) -> bool:
    """Push the wide box at position and every box it touches, only if all of them can move."""
    moves: list[_WideMove] = []
    if not _collect_wide_moves(grid, position, offset, moves):
        return False
    for move in moves:
        grid.set(move.old_pos, ".")
        grid.set(move.old_pos_2, ".")
    for move in moves:
        grid.set(move.new_pos, move.char)
        grid.set(move.new_pos_2, move.char_2)
    return True


def calculate_gps(point: Point) -> int:
    return point.y * 100 + point.x


def widen_grid(grid: Grid) -> Grid:
    """Double every square horizontally; boxes become '[]'."""
    squares = []
    for square in grid:
        if square not in _WIDENED:
            raise ValueError(f"unknown character: {square!r}")
        squares.extend(_WIDENED[square])
    return Grid(squares, grid.width * 2)


def _run_robot(grid: Grid, moves: list[Direction], boxes: str, push) -> None:
    robot = grid.find("@")
    if robot is None:
        raise ValueError("failed to find the robot")
    for move in moves:
        offset = move.vector
        target = robot + offset
        square = grid.get(target)
        if square is None:
            raise ValueError("robot tried to move out of bounds; the map needs walls")
        if square == "#":
            continue
        if square in boxes and not push(grid, target, offset):
            continue
        if square == "." or square in boxes:
            grid.set(robot, ".")
            grid.set(target, "@")
            robot = target


def _gps_sum(grid: Grid, box: str) -> int:
    return sum(calculate_gps(point) for point, square in grid.items() if square == box)


def part1(parsed: ParsedInput) -> int:
    grid = parsed.grid.copy()
    _run_robot(grid, parsed.moves, "O", try_move_obstacle)
    return _gps_sum(grid, "O")


def part2(parsed: ParsedInput) -> int:
    grid = widen_grid(parsed.grid)
    _run_robot(grid, parsed.moves, "[]", try_move_wide_obstacle)
    return _gps_sum(grid, "[")