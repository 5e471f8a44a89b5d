"""Claw contraption: the cheapest button presses that reach each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import islice
from typing import Sequence

from advent2024.geometry import Vector

_BUTTON = re.compile(r"X\+(\d+), Y\+(\d+)")
_PRIZE = re.compile(r"X=(\d+), Y=(\d+)")
_EPSILON = 1e-3
_PART2_OFFSET = 10_000_000_000_000
_A_COST = 3


@dataclass(frozen=True)
class LongPoint:
    x: int
    y: int


@dataclass(frozen=True)
class ClawMachine:
    a_button: Vector
    b_button: Vector
    prize_location: LongPoint


@dataclass
class ParsedInput:
    claw_machines: list[ClawMachine] = field(default_factory=list)


def parse_button(line: str) -> Vector:
    """Read 'Button A: X+94, Y+34' into the movement it makes."""
    match = _BUTTON.search(line)
    if match is None:
        raise ValueError(f"button line did not match: {line!r}")
    return Vector(int(match.group(1)), int(match.group(2)))


def parse_prize(line: str) -> LongPoint:
    """Read 'Prize: X=8400, Y=5400' into the prize's location."""
    match = _PRIZE.search(line)
    if match is None:
        raise ValueError(f"prize line did not match: {line!r}")
    return LongPoint(int(match.group(1)), int(match.group(2)))


def parse_input(text: str) -> ParsedInput:
    """Read machines as two button lines and a prize line, each followed by a blank line."""
    lines = iter(text.splitlines())
    machines = []
    while chunk := list(islice(lines, 4)):
        chunk += [""] * (3 - len(chunk))
        machines.append(
            ClawMachine(parse_button(chunk[0]), parse_button(chunk[1]), parse_prize(chunk[2]))
        )
    return ParsedInput(machines)


def invert_2x2(matrix: Sequence[Sequence[float]]) -> tuple[tuple[float, float], tuple[float, float]]:
    """The inverse of a 2x2 matrix given as rows."""
    (a, b), (c, d) = matrix
    determinant = a * d - b * c
    if determinant == 0:
        raise ValueError("matrix cannot be inverted")
    return (d / determinant, -b / determinant), (-c / determinant, a / determinant)


def is_integer(value: float) -> bool:
    """Whether value lies within a small tolerance of a whole number."""
    return abs(value - round(value)) < _EPSILON


def part1(parsed: ParsedInput) -> int:
    """Total tokens to win every prize that a whole number of presses can reach."""
    total = 0
    for machine in parsed.claw_machines:
        (i00, i01), (i10, i11) = invert_2x2(
            (
                (float(machine.a_button.dx), float(machine.b_button.dx)),
                (float(machine.a_button.dy), float(machine.b_button.dy)),
            )
        )
        x = float(machine.prize_location.x)
        y = float(machine.prize_location.y)
        presses_a = i00 * x + i01 * y
        presses_b = i10 * x + i11 * y
        if is_integer(presses_a) and is_integer(presses_b):
            if presses_a <= 0 or presses_b <= 0:
                raise ValueError("negative button presses are not valid")
            total += int(round(presses_a) * _A_COST)
            total += int(round(presses_b))
    return total


def part2(parsed: ParsedInput) -> int:
    """As part1, with every prize moved far along both axes."""
    moved = [
        ClawMachine(
            machine.a_button,
            machine.b_button,
            LongPoint(
                machine.prize_location.x + _PART2_OFFSET,
                machine.prize_location.y + _PART2_OFFSET,
            ),
        )
        for machine in parsed.claw_machines
    ]
    return part1(ParsedInput(moved))