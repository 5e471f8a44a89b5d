import pytest

from advent2024.day07 import (
    Operation,
    check_operation_possible,
    concat,
    digit_count,
    ends_with,
    inverse_concat,
    parse_input,
    part1,
    part1_faster,
    part2,
    part2_faster,
)

EXAMPLE = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


@pytest.fixture
def parsed():
    return parse_input(EXAMPLE)


def test_parse_first_line(parsed):
    assert parsed.operations[0] == Operation(190, (10, 19))
    assert len(parsed.operations) == 9


@pytest.mark.parametrize("line", ["abc: 1 2", "0: 1", "5", "7: 1 x"])
def test_parse_errors(line):
    with pytest.raises(ValueError):
        parse_input(line)


def test_part1_example(parsed):
    assert part1(parsed) == 3749


def test_part2_example(parsed):
    assert part2(parsed) == 11387


def test_part1_faster_example(parsed):
    assert part1_faster(parsed) == part1(parsed) == 3749


def test_part2_faster_example(parsed):
    assert part2_faster(parsed) == 11387


def test_concat():
    assert concat(15, 6) == 156
    assert concat(12, 345) == 12345
    assert concat(1, 10) == 110


def test_concat_rejects_zero():
    with pytest.raises(ValueError):
        concat(5, 0)


@pytest.mark.parametrize("value, expected", [(1, 1), (9, 1), (10, 2), (99, 2), (100, 3), (12345, 5)])
def test_digit_count(value, expected):
    assert digit_count(value) == expected


def test_digit_count_too_large():
    with pytest.raises(ValueError):
        digit_count(10 ** 11)


def test_inverse_concat_undoes_concat():
    assert inverse_concat(156, 6) == 15
    assert inverse_concat(concat(486, 6), 6) == 486
    assert inverse_concat(12345, 345) == 12


def test_ends_with():
    assert ends_with(156, 56) is True
    assert ends_with(156, 6) is True
    assert ends_with(156, 5) is False


@pytest.mark.parametrize(
    "operation, plain, with_concat",
    [
        (Operation(156, (15, 6)), False, True),
        (Operation(190, (10, 19)), True, True),
        (Operation(83, (17, 5)), False, False),
        (Operation(7290, (6, 8, 6, 15)), False, True),
    ],
)
def test_check_operation_possible(operation, plain, with_concat):
    assert check_operation_possible(operation, False) is plain
    assert check_operation_possible(operation, True) is with_concat