import pytest

from advent2024.day10 import parse_input, part1, part2, trailhead_rating, trailhead_score
from advent2024.geometry import Point

LARGE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""

SIMPLE = """\
0123
1234
8765
9876
"""

FORK = """\
...0...
...1...
...2...
6543456
7.....7
8.....8
9.....9
"""

FOUR = """\
..90..9
...1.98
...2..7
6543456
765.987
876....
987....
"""

TWO_HEADS = """\
10..9..
2...8..
3...7..
4567654
...8..3
...9..2
.....01
"""

RATING_THREE = """\
.....0.
..4321.
..5..2.
..6543.
..7..4.
..8765.
..9....
"""

RATING_MANY = """\
012345
123456
234567
345678
4.6789
56789.
"""


@pytest.mark.parametrize(
    ("text", "expected"),
    [(LARGE, 36), (SIMPLE, 1), (FORK, 2), (FOUR, 4), (TWO_HEADS, 3)],
)
def test_part1_examples(text, expected):
    assert part1(parse_input(text)) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [(LARGE, 81), (RATING_THREE, 3), (FOUR, 13), (RATING_MANY, 227)],
)
def test_part2_examples(text, expected):
    assert part2(parse_input(text)) == expected


def test_trailhead_score_single_head():
    grid = parse_input(FORK).grid
    assert trailhead_score(grid, Point(3, 0)) == 2


def test_trailhead_rating_single_head():
    grid = parse_input(RATING_THREE).grid
    assert trailhead_rating(grid, Point(5, 0)) == 3


def test_rating_never_below_score():
    grid = parse_input(LARGE).grid
    heads = [point for point, square in grid.items() if square == "0"]
    assert heads
    for head in heads:
        assert trailhead_rating(grid, head) >= trailhead_score(grid, head)


def test_start_outside_grid_raises():
    grid = parse_input(SIMPLE).grid
    with pytest.raises(ValueError):
        trailhead_score(grid, Point(10, 10))
    with pytest.raises(ValueError):
        trailhead_rating(grid, Point(-1, 0))