"""Bridge repair: which calibration equations can be made true with +, * and ||."""

from __future__ import annotations

from dataclasses import dataclass, field

_MAX_POWER = 10


@dataclass(frozen=True)
class Operation:
    result: int
    operands: tuple[int, ...]


@dataclass
class ParsedInput:
    operations: list[Operation] = field(default_factory=list)


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"failed to parse {what} {text!r}") from None


def parse_input(text: str) -> ParsedInput:
    """Read lines of the form 'result: operand operand ...'."""
    operations = []
    for line in text.splitlines():
        parts = line.split(":")
        if len(parts) != 2:
            raise ValueError(f"malformed line {line!r}")
        result = _parse_int(parts[0].strip(), "result")
        if result <= 0:
            raise ValueError(f"result must be positive: {result}")
        operands = tuple(_parse_int(token, "operand") for token in parts[1].split())
        if not operands:
            raise ValueError(f"line has no operands: {line!r}")
        operations.append(Operation(result, operands))
    return ParsedInput(operations)


def concat(a: int, b: int) -> int:
    """The digits of a followed by the digits of b."""
    if b <= 0:
        raise ValueError("the right-hand side of a concatenation must be positive")
    return a * 10 ** len(str(b)) + b


def digit_count(a: int) -> int:
    """The number of decimal digits in a, for values up to ten to the tenth."""
    for exponent in range(1, _MAX_POWER + 1):
        power = 10 ** exponent
        if power == a:
            return exponent + 1
        if power > a:
            return exponent
    raise ValueError(f"failed to get digit count of {a}")


def _truncated_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _truncated_mod(a: int, b: int) -> int:
    return a - b * _truncated_div(a, b)


def inverse_concat(a: int, b: int) -> int:
    """Strip the digits of b off the end of a."""
    return _truncated_div(a - b, 10 ** digit_count(b))


def ends_with(a: int, b: int) -> bool:
    """Whether the decimal digits of a end with those of b."""
    return _truncated_mod(a, 10 ** digit_count(b)) == b


def _can_make_forward(target: int, value: int, rest: tuple[int, ...], enable_concat: bool) -> bool:
    if not rest:
        return value == target
    operand, tail = rest[0], rest[1:]
    if _can_make_forward(target, value * operand, tail, enable_concat):
        return True
    if _can_make_forward(target, value + operand, tail, enable_concat):
        return True
    return enable_concat and _can_make_forward(target, concat(value, operand), tail, enable_concat)


def _can_make_backward(operands: tuple[int, ...], enable_concat: bool, index: int, target: int) -> bool:
    operand = operands[index]
    if index == 0:
        return operand == target
    if _truncated_mod(target, operand) == 0 and _can_make_backward(
        operands, enable_concat, index - 1, _truncated_div(target, operand)
    ):
        return True
    if enable_concat and ends_with(target, operand) and _can_make_backward(
        operands, enable_concat, index - 1, inverse_concat(target, operand)
    ):
        return True
    return _can_make_backward(operands, enable_concat, index - 1, target - operand)


def check_operation_possible(operation: Operation, enable_concat: bool) -> bool:
    """Work back from the result, undoing the operators right to left."""
    if not operation.operands:
        raise ValueError("operation has no operands")
    return _can_make_backward(
        operation.operands, enable_concat, len(operation.operands) - 1, operation.result
    )


def _sum_possible_forward(parsed: ParsedInput, enable_concat: bool) -> int:
    total = 0
    for operation in parsed.operations:
        if not operation.operands:
            raise ValueError("operation has no operands")
        first, rest = operation.operands[0], operation.operands[1:]
        if _can_make_forward(operation.result, first, rest, enable_concat):
            total += operation.result
    return total


def part1(parsed: ParsedInput) -> int:
    return _sum_possible_forward(parsed, enable_concat=False)


def part2(parsed: ParsedInput) -> int:
    return _sum_possible_forward(parsed, enable_concat=True)


def part1_faster(parsed: ParsedInput) -> int:
    return sum(op.result for op in parsed.operations if check_operation_possible(op, False))


def part2_faster(parsed: ParsedInput) -> int:
    return sum(op.result for op in parsed.operations if check_operation_possible(op, True))