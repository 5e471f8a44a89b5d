"""Print queue: page ordering rules and the updates they govern."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Update:
    pages: list[int]

    @property
    def middle(self) -> int:
        """The page in the middle of an update with an odd number of pages."""
        if len(self.pages) % 2 == 0:
            raise ValueError("update has an even number of pages; its middle is undefined")
        index = len(self.pages) // 2
        if index == 0:
            raise ValueError("update is too short to have a middle page")
        return self.pages[index]


@dataclass(frozen=True)
class PageRule:
    before: int
    after: int

    def _indices(self, update: Update) -> tuple[Optional[int], Optional[int]]:
        before_index = after_index = None
        for index, page in enumerate(update.pages):
            if page == self.before:
                before_index = index
            elif page == self.after:
                after_index = index
        return before_index, after_index

    def validate(self, update: Update) -> bool:
        """True unless both pages appear and are in the wrong order."""
        before_index, after_index = self._indices(update)
        if before_index is None or after_index is None:
            return True
        return before_index < after_index

    def fix_with_swap(self, update: Update) -> bool:
        """Swap the two pages if they break the rule; report whether a swap happened."""
        before_index, after_index = self._indices(update)
        if before_index is None or after_index is None or before_index < after_index:
            return False
        pages = update.pages
        pages[before_index], pages[after_index] = pages[after_index], pages[before_index]
        return True


@dataclass
class ParsedInput:
    updates: list[Update] = field(default_factory=list)
    rules: list[PageRule] = field(default_factory=list)


def _parse_page(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"cannot parse page number {text!r}") from None


def parse_input(text: str) -> ParsedInput:
    """Rules of the form XX|YY, a blank line, then comma-separated updates."""
    lines = iter(text.splitlines())
    rules = []
    for line in lines:
        if not line:
            break
        rules.append(PageRule(_parse_page(line[0:2]), _parse_page(line[3:5])))
    updates = [Update([_parse_page(part) for part in line.split(",")]) for line in lines]
    return ParsedInput(updates, rules)


def part1(parsed: ParsedInput) -> int:
    """Sum of the middle pages of updates that obey every rule."""
    return sum(
        update.middle
        for update in parsed.updates
        if all(rule.validate(update) for rule in parsed.rules)
    )


def part2(parsed: ParsedInput) -> int:
    """Sum of the middle pages of updates that had to be reordered."""
    total = 0
    for original in parsed.updates:
        update = Update(list(original.pages))
        reordered = False
        while True:
            swapped = False
            for rule in parsed.rules:
                if rule.fix_with_swap(update):
                    swapped = True
            if not swapped:
                break
            reordered = True
        if reordered:
            total += update.middle
    return total