import pytest

from advent2024.day14 import (
    GridQuadrant,
    ParsedInput,
    Robot,
    RobotPosition,
    parse_input,
    puzzle_part1,
    puzzle_part2,
)
from advent2024.geometry import Point, Vector

EXAMPLE = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


def test_example_part1_on_small_grid():
    assert puzzle_part1(parse_input(EXAMPLE), 11, 7) == 12


def test_parse_input_reads_positions_and_velocities():
    parsed = parse_input("p=0,4 v=3,-3\np=6,3 v=-1,-3\n")
    assert parsed.robot_positions == [
        RobotPosition(Point(0, 4), Vector(3, -3)),
        RobotPosition(Point(6, 3), Vector(-1, -3)),
    ]


def test_parse_input_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_input("p=0,4\n")


def test_robot_walk_wraps_around_edges():
    robot = Robot(Point(2, 4), Vector(2, -3), 11, 7)
    seen = []
    for _ in range(5):
        robot.walk()
        seen.append(robot.position)
    assert seen == [Point(4, 1), Point(6, 5), Point(8, 2), Point(10, 6), Point(1, 3)]


@pytest.mark.parametrize(
    "point, quadrant",
    [
        (Point(0, 0), GridQuadrant.NORTH_EAST),
        (Point(10, 0), GridQuadrant.NORTH_WEST),
        (Point(0, 6), GridQuadrant.SOUTH_EAST),
        (Point(10, 6), GridQuadrant.SOUTH_WEST),
        (Point(5, 0), GridQuadrant.AMBIGUOUS),
        (Point(0, 3), GridQuadrant.AMBIGUOUS),
    ],
)
def test_robot_quadrant(point, quadrant):
    assert Robot(point, Vector(0, 0), 11, 7).quadrant is quadrant


def test_part1_without_robots_is_zero():
    assert puzzle_part1(ParsedInput(), 11, 7) == 0


def test_part2_distinct_from_first_second():
    parsed = parse_input("p=0,0 v=1,0\np=0,1 v=1,0\n")
    assert puzzle_part2(parsed, 5, 3) == 1


def test_part2_waits_for_collision_to_clear():
    parsed = parse_input("p=0,0 v=1,0\np=2,0 v=-1,0\n")
    assert puzzle_part2(parsed, 5, 1) == 2