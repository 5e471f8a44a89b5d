import pytest

from advent2024.day13 import (
    ClawMachine,
    LongPoint,
    ParsedInput,
    invert_2x2,
    is_integer,
    parse_button,
    parse_input,
    parse_prize,
    part1,
    part2,
)
from advent2024.geometry import Vector

EXAMPLE = (
    "Button A: X+94, Y+34\n"
    "Button B: X+22, Y+67\n"
    "Prize: X=8400, Y=5400\n"
    "\n"
    "Button A: X+26, Y+66\n"
    "Button B: X+67, Y+21\n"
    "Prize: X=12748, Y=12176\n"
    "\n"
    "Button A: X+17, Y+86\n"
    "Button B: X+84, Y+37\n"
    "Prize: X=7870, Y=6450\n"
    "\n"
    "Button A: X+69, Y+23\n"
    "Button B: X+27, Y+71\n"
    "Prize: X=18641, Y=10279\n"
)


def test_parse_input_example():
    parsed = parse_input(EXAMPLE)
    assert len(parsed.claw_machines) == 4
    assert parsed.claw_machines[0] == ClawMachine(
        Vector(94, 34), Vector(22, 67), LongPoint(8400, 5400)
    )
    assert parsed.claw_machines[3].prize_location == LongPoint(18641, 10279)


def test_parse_input_truncated_machine():
    with pytest.raises(ValueError):
        parse_input("Button A: X+1, Y+2\nButton B: X+3, Y+4\n")


def test_parse_button():
    assert parse_button("Button B: X+67, Y+21") == Vector(67, 21)


def test_parse_button_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_button("Button B: X=67, Y=21")


def test_parse_prize():
    assert parse_prize("Prize: X=12748, Y=12176") == LongPoint(12748, 12176)


def test_parse_prize_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_prize("Prize: nowhere")


def test_invert_2x2_round_trip():
    matrix = ((94.0, 22.0), (34.0, 67.0))
    (a, b), (c, d) = invert_2x2(matrix)
    product = (
        (a * 94 + b * 34, a * 22 + b * 67),
        (c * 94 + d * 34, c * 22 + d * 67),
    )
    assert product[0] == pytest.approx((1.0, 0.0), abs=1e-12)
    assert product[1] == pytest.approx((0.0, 1.0), abs=1e-12)


def test_invert_2x2_singular():
    with pytest.raises(ValueError):
        invert_2x2(((1.0, 2.0), (2.0, 4.0)))


@pytest.mark.parametrize(
    ("value", "expected"),
    [(2.0, True), (2.0004, True), (1.9996, True), (2.01, False), (2.5, False)],
)
def test_is_integer(value, expected):
    assert is_integer(value) is expected


def test_part1_example():
    assert part1(parse_input(EXAMPLE)) == 480


def test_part2_example():
    assert part2(parse_input(EXAMPLE)) == 875318608908


def test_part1_single_machine_cost():
    machine = ClawMachine(Vector(94, 34), Vector(22, 67), LongPoint(8400, 5400))
    assert part1(ParsedInput([machine])) == 280


def test_part1_rejects_negative_presses():
    machine = ClawMachine(Vector(1, 0), Vector(0, 1), LongPoint(0, 0))
    with pytest.raises(ValueError):
        part1(ParsedInput([machine]))