"""Guard patrol: the squares walked and the obstacles that trap the guard in a loop."""

from __future__ import annotations

from dataclasses import dataclass

from advent2024.geometry import Direction, Grid, Point, Vector, parse_grid

_START_DIRECTION = Direction.NORTH.vector
_OBSTACLE = "#"


@dataclass(frozen=True)
class GuardState:
    position: Point
    direction: Vector


@dataclass
class ParsedInput:
    grid: Grid
    guard_start_point: Point


def parse_input(text: str) -> ParsedInput:
    """Read the map; the guard starts on the square marked '^'."""
    grid = parse_grid(text)
    start = grid.find("^")
    if start is None:
        raise ValueError("failed to find the guard")
    return ParsedInput(grid, start)


def simulate_finite_guard_walk(grid: Grid, start: Point) -> set[Point]:
    """Every square the guard stands on before leaving the grid."""
    position = start
    direction = _START_DIRECTION
    path = {start}
    while True:
        ahead = position + direction
        square = grid.get(ahead)
        if square == _OBSTACLE:
            direction = direction.rotate_clockwise()
        elif square is None:
            break
        else:
            position = ahead
            path.add(position)
    return path


def _advance(grid: Grid, state: GuardState) -> GuardState:
    ahead = state.position + state.direction
    if grid.get(ahead) == _OBSTACLE:
        return GuardState(state.position, state.direction.rotate_clockwise())
    return GuardState(ahead, state.direction)


def check_for_cycle(grid: Grid, start: Point) -> bool:
    """Whether the guard walks forever, found by racing a fast walker against a slow one."""
    hare = GuardState(start, _START_DIRECTION)
    tortoise = hare
    while grid.get(hare.position) is not None:
        hare = _advance(grid, _advance(grid, hare))
        tortoise = _advance(grid, tortoise)
        if hare == tortoise:
            return True
    return False


def check_for_cycle_faster(grid: Grid, start: Point) -> bool:
    """Whether the guard walks forever, jumping straight from obstacle to obstacle."""
    state = GuardState(start, _START_DIRECTION)
    obstacle_hits: set[GuardState] = set()
    while grid.get(state.position) is not None:
        ahead = state.position
        while True:
            ahead = ahead + state.direction
            square = grid.get(ahead)
            if square is None or square == _OBSTACLE:
                break
        if square is None:
            break
        state = GuardState(ahead - state.direction, state.direction.rotate_clockwise())
        if state in obstacle_hits:
            return True
        obstacle_hits.add(state)
    return False


def part1(parsed: ParsedInput) -> int:
    return len(simulate_finite_guard_walk(parsed.grid, parsed.guard_start_point))


def part2(parsed: ParsedInput) -> int:
    """Squares on the guard's path where a new obstacle causes a loop."""
    path = simulate_finite_guard_walk(parsed.grid, parsed.guard_start_point)
    return sum(
        check_for_cycle(parsed.grid.with_square(point, _OBSTACLE), parsed.guard_start_point)
        for point in path
    )


def part2_faster(parsed: ParsedInput) -> int:
    """The same count as part2, reusing one grid and the faster cycle check."""
    path = simulate_finite_guard_walk(parsed.grid, parsed.guard_start_point)
    grid = parsed.grid.copy()
    count = 0
    for point in path:
        original = grid.get(point)
        grid.set(point, _OBSTACLE)
        if check_for_cycle_faster(grid, parsed.guard_start_point):
            count += 1
        grid.set(point, original)
    return count