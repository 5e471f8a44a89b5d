"""Corrupted memory: multiply instructions switched by do() and don't()."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

_INSTRUCTION = re.compile(r"(mul|don't|do)\((?:(\d+),(\d+))?\)")


@dataclass(frozen=True)
class MultiplyInstruction:
    multiplier: int
    multiplicand: int


@dataclass(frozen=True)
class EnableDisableInstruction:
    should_enable: bool


Instruction = Union[MultiplyInstruction, EnableDisableInstruction]


@dataclass
class ParsedInput:
    instructions: list[Instruction] = field(default_factory=list)


def parse_input(text: str) -> ParsedInput:
    instructions: list[Instruction] = []
    for match in _INSTRUCTION.finditer(text):
        name, multiplier, multiplicand = match.groups()
        if name == "mul":
            if multiplier is None or multiplicand is None:
                raise ValueError(f"multiply instruction without operands: {match.group(0)!r}")
            instructions.append(MultiplyInstruction(int(multiplier), int(multiplicand)))
        else:
            instructions.append(EnableDisableInstruction(name == "do"))
    return ParsedInput(instructions)


def part1(parsed: ParsedInput) -> int:
    """Sum of every product, ignoring do() and don't()."""
    return sum(
        instruction.multiplier * instruction.multiplicand
        for instruction in parsed.instructions
        if isinstance(instruction, MultiplyInstruction)
    )


def part2(parsed: ParsedInput) -> int:
    """Sum of the products made while the counter is enabled."""
    total = 0
    enabled = True
    for instruction in parsed.instructions:
        match instruction:
            case EnableDisableInstruction(should_enable=should_enable):
                enabled = should_enable
            case MultiplyInstruction(multiplier=multiplier, multiplicand=multiplicand):
                if enabled:
                    total += multiplier * multiplicand
    return total