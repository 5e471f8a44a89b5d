"""Disk fragmenter: compact a disk map block by block or whole files at a time."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum
from itertools import groupby
from typing import Union


class BlockType(Enum):
    FILE = "file"
    FREE_SPACE = "free_space"


@dataclass(frozen=True)
class FreeSpaceBlock:
    """One block of empty disk."""

    @property
    def type(self) -> BlockType:
        return BlockType.FREE_SPACE

    def __str__(self) -> str:
        return "."


@dataclass(frozen=True)
class FileBlock:
    """One block belonging to the file with the given id."""

    id: int

    @property
    def type(self) -> BlockType:
        return BlockType.FILE

    def __str__(self) -> str:
        return str(self.id)


Block = Union[FreeSpaceBlock, FileBlock]


@dataclass
class ParsedInput:
    blocks: list[Block] = field(default_factory=list)


def _digit(char: str) -> int:
    if len(char) != 1 or not "0" <= char <= "9":
        raise ValueError(f"failed to parse block count {char!r}")
    return int(char)


def parse_input(text: str) -> ParsedInput:
    """Expand the dense disk map into one entry per block; whitespace is skipped."""
    blocks: list[Block] = []
    digits = [char for char in text if not char.isspace()]
    for index, char in enumerate(digits):
        count = _digit(char)
        if index % 2 == 0:
            blocks.extend([FileBlock(index // 2)] * count)
        else:
            blocks.extend([FreeSpaceBlock()] * count)
    return ParsedInput(blocks)


def _checksum(blocks: list[Block]) -> int:
    return sum(
        block.id * position
        for position, block in enumerate(blocks)
        if isinstance(block, FileBlock)
    )


def _is_free(block: Block) -> bool:
    return block.type is BlockType.FREE_SPACE


def part1(parsed: ParsedInput) -> int:
    """Move single blocks from the end into the leftmost free space, then checksum."""
    blocks = list(parsed.blocks)
    left, right = 0, len(blocks) - 1
    while True:
        while right >= 0 and _is_free(blocks[right]):
            right -= 1
        while left < len(blocks) and not _is_free(blocks[left]):
            left += 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], blocks[left]
    return _checksum(blocks)


def _contiguous_files(blocks: list[Block]) -> list[tuple[int, int]]:
    """The (position, size) of each run of blocks of one file, left to right."""
    runs = []
    for block, group in groupby(enumerate(blocks), key=lambda pair: pair[1]):
        positions = [position for position, _ in group]
        if isinstance(block, FileBlock):
            runs.append((positions[0], len(positions)))
    return runs


def part2(parsed: ParsedInput) -> int:
    """Move whole files, highest id first, into the leftmost gap that fits them."""
    blocks = list(parsed.blocks)
    for position, size in reversed(_contiguous_files(parsed.blocks)):
        search = 0
        while search < len(blocks) and search < position:
            space = next(
                (index for index in range(search, len(blocks)) if _is_free(blocks[index])),
                len(blocks),
            )
            if space >= position:
                break
            end = space
            while end < len(blocks) and _is_free(blocks[end]):
                end += 1
            if end - space >= size:
                moving = blocks[position:position + size]
                blocks[position:position + size] = blocks[space:space + size]
                blocks[space:space + size] = moving
                break
            search = end
    return _checksum(blocks)


@dataclass(frozen=True)
class FileSpan:
    position: int
    id: int
    size: int


@dataclass
class FreeSpan:
    position: int
    size: int


@dataclass
class CompactInput:
    file_spans: list[FileSpan] = field(default_factory=list)
    free_spans: deque[FreeSpan] = field(default_factory=deque)


def parse_compact_input(text: str) -> CompactInput:
    """Read the first line of the disk map as runs of files and free space."""
    lines = text.splitlines()
    line = lines[0] if lines else ""
    parsed = CompactInput()
    position = 0
    for index, char in enumerate(line):
        size = _digit(char)
        if index % 2 == 0:
            parsed.file_spans.append(FileSpan(position, index // 2, size))
        else:
            parsed.free_spans.append(FreeSpan(position, size))
        position += size
    return parsed


def calculate_checksum(file_spans: list[FileSpan]) -> int:
    """Sum of position times file id over every block of every span."""
    return sum(
        position * span.id
        for span in sorted(file_spans, key=lambda span: span.position)
        for position in range(span.position, span.position + span.size)
    )


def _copy_free_spans(parsed: CompactInput) -> deque[FreeSpan]:
    return deque(replace(span) for span in parsed.free_spans)


def _require_free_space(free_spans: deque[FreeSpan]) -> None:
    if not free_spans:
        raise ValueError("failed to get free space")


def part1_faster(parsed: CompactInput) -> int:
    """Block-by-block compaction working on spans rather than single blocks."""
    free_spans = _copy_free_spans(parsed)
    moved: list[FileSpan] = []
    for file in reversed(parsed.file_spans):
        _require_free_space(free_spans)
        free = free_spans[0]
        if free.position >= file.position:
            moved.append(file)
            continue
        if free.size >= file.size:
            moved.append(FileSpan(free.position, file.id, file.size))
            free.size -= file.size
            free.position += file.size
            if free.size == 0:
                free_spans.popleft()
            continue
        remaining = file.size
        while remaining > 0:
            if free.position >= file.position:
                moved.append(FileSpan(file.position, file.id, remaining))
                break
            size = min(remaining, free.size)
            moved.append(FileSpan(free.position, file.id, size))
            remaining -= size
            free.size -= size
            free.position += size
            if free.size == 0:
                free_spans.popleft()
                _require_free_space(free_spans)
                free = free_spans[0]
    return calculate_checksum(moved)


def part2_faster(parsed: CompactInput) -> int:
    """Whole-file compaction working on spans rather than single blocks."""
    free_spans = _copy_free_spans(parsed)
    moved: list[FileSpan] = []
    for file in reversed(parsed.file_spans):
        _require_free_space(free_spans)
        target = next(
            (
                index
                for index, free in enumerate(free_spans)
                if free.size >= file.size or free.position >= file.position
            ),
            None,
        )
        if target is None or free_spans[target].position >= file.position:
            moved.append(file)
            continue
        free = free_spans[target]
        moved.append(FileSpan(free.position, file.id, file.size))
        free.size -= file.size
        free.position += file.size
        if free.size == 0:
            del free_spans[target]
        free_spans.append(FreeSpan(file.position, file.size))
    return calculate_checksum(moved)