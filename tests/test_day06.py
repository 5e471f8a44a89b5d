import pytest

from advent2024.day06 import (
    GuardState,
    check_for_cycle,
    check_for_cycle_faster,
    parse_input,
    part1,
    part2,
    part2_faster,
    simulate_finite_guard_walk,
)
from advent2024.geometry import Point, Vector

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


@pytest.fixture
def parsed():
    return parse_input(EXAMPLE)


def test_parse_finds_guard(parsed):
    assert parsed.guard_start_point == Point(4, 6)


def test_parse_without_guard_raises():
    with pytest.raises(ValueError):
        parse_input("....\n.#..\n")


def test_part1_example(parsed):
    assert part1(parsed) == 41


def test_walk_contains_start(parsed):
    path = simulate_finite_guard_walk(parsed.grid, parsed.guard_start_point)
    assert Point(4, 6) in path
    assert Point(4, 1) in path
    assert len(path) == 41


def test_part2_example(parsed):
    assert part2(parsed) == 6


def test_part2_faster_matches_part2(parsed):
    assert part2_faster(parsed) == part2(parsed)


def test_part2_faster_leaves_input_unchanged(parsed):
    before = parsed.grid.copy()
    part2_faster(parsed)
    assert parsed.grid == before


@pytest.mark.parametrize("point", [Point(3, 6), Point(6, 7), Point(7, 7), Point(1, 8), Point(3, 8), Point(7, 9)])
def test_known_loop_obstacles(parsed, point):
    grid = parsed.grid.with_square(point, "#")
    assert check_for_cycle(grid, parsed.guard_start_point) is True
    assert check_for_cycle_faster(grid, parsed.guard_start_point) is True


def test_no_loop_without_new_obstacle(parsed):
    assert check_for_cycle(parsed.grid, parsed.guard_start_point) is False
    assert check_for_cycle_faster(parsed.grid, parsed.guard_start_point) is False


def test_guard_state_equality():
    assert GuardState(Point(1, 2), Vector(0, -1)) == GuardState(Point(1, 2), Vector(0, -1))
    assert len({GuardState(Point(1, 2), Vector(0, -1)), GuardState(Point(1, 2), Vector(1, 0))}) == 2