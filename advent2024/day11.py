"""Plutonian pebbles: stones that change or split every time you blink."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Stone:
    """A stone engraved with a non-negative number."""

    number: int

    def blink(self) -> tuple[Stone, ...]:
        """The one or two stones this stone becomes after a blink."""
        if self.number < 0:
            raise ValueError(f"negative stone number: {self.number}")
        if self.number == 0:
            return (Stone(1),)
        digits = str(self.number)
        if len(digits) % 2 == 0:
            half = len(digits) // 2
            return Stone(int(digits[:half])), Stone(int(digits[half:]))
        return (Stone(self.number * 2024),)

    def __str__(self) -> str:
        return str(self.number)


@dataclass
class ParsedInput:
    stones: list[Stone] = field(default_factory=list)


def parse_input(text: str) -> ParsedInput:
    """Read the whitespace-separated stone numbers on the first line."""
    lines = text.splitlines()
    line = lines[0] if lines else ""
    return ParsedInput([Stone(int(token)) for token in line.split()])


def puzzle(parsed: ParsedInput, num_blinks: int) -> int:
    """How many stones there are after blinking num_blinks times."""
    counts = Counter(parsed.stones)
    for _ in range(num_blinks):
        next_counts: Counter[Stone] = Counter()
        for stone, count in counts.items():
            for result in stone.blink():
                next_counts[result] += count
        counts = next_counts
    return sum(counts.values())


def part1(parsed: ParsedInput) -> int:
    return puzzle(parsed, 25)


def part2(parsed: ParsedInput) -> int:
    return puzzle(parsed, 75)