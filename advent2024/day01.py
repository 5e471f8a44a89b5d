"""Two location lists: distance and similarity score."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

_DELIMITER = "   "


@dataclass
class ParsedInput:
    left: list[int] = field(default_factory=list)
    right: list[int] = field(default_factory=list)


def parse_input(text: str) -> ParsedInput:
    """Read lines holding two numbers separated by three spaces."""
    parsed = ParsedInput()
    for line in text.splitlines():
        left, _, rest = line.partition(_DELIMITER)
        right = rest.split(_DELIMITER)[0]
        parsed.left.append(int(left))
        parsed.right.append(int(right))
    return parsed


def part1(parsed: ParsedInput) -> int:
    """Sum of the distances between the numbers paired line by line."""
    return sum(abs(left - right) for left, right in zip(parsed.left, parsed.right))


def part2(parsed: ParsedInput) -> int:
    """Each left number weighted by how often it appears on the right."""
    occurrences = Counter(parsed.right)
    return sum(number * occurrences[number] for number in parsed.left)