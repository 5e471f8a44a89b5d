"""Reactor reports: count the safe ones, with and without the dampener."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise


@dataclass
class ParsedInput:
    reports: list[list[int]] = field(default_factory=list)


def is_pair_safe(current: int, previous: int, increasing: bool) -> bool:
    """A step keeps the direction and changes by one to three."""
    if current > previous and not increasing:
        return False
    if current < previous and increasing:
        return False
    return 1 <= abs(current - previous) <= 3


def is_safe(report: list[int]) -> bool:
    if len(report) < 2:
        raise ValueError("a report needs at least two levels")
    increasing = report[1] > report[0]
    return all(is_pair_safe(current, previous, increasing) for previous, current in pairwise(report))


def is_safe_with_dampener(report: list[int]) -> bool:
    """Safe as is, or safe once any single level is removed."""
    if is_safe(report):
        return True
    return any(is_safe(report[:index] + report[index + 1:]) for index in range(len(report)))


def parse_input(text: str) -> ParsedInput:
    return ParsedInput([[int(level) for level in line.split(" ")] for line in text.splitlines()])


def part1(parsed: ParsedInput) -> int:
    return sum(1 for report in parsed.reports if is_safe(report))


def part2(parsed: ParsedInput) -> int:
    return sum(1 for report in parsed.reports if is_safe_with_dampener(report))