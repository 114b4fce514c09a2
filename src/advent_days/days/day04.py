from __future__ import annotations

import re
from dataclasses import dataclass

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import input_lines, match_line
from advent_days.models.answer import Answer

DAY = 4
TITLE = "Camp Cleanup"
DESCRIPTION = """\
Range [a, b] contains [c, d] when a <= c and d <= b, and the two overlap when
a <= d and c <= b.

Each line is parsed into a pair of inclusive section ranges. Task 1 counts the
pairs where either range contains the other, task 2 counts the pairs that
overlap at all."""

_PAIR_PATTERN = re.compile(r"(\d+)-(\d+),(\d+)-(\d+)")


@dataclass(frozen=True, slots=True)
class Sections:
    start: int
    end: int

    def contains(self, other: Sections) -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: Sections) -> bool:
        return self.start <= other.end and other.start <= self.end


def parse_pair(line: str) -> tuple[Sections, Sections]:
    matched = match_line(_PAIR_PATTERN, line, what="assignment pair")
    a, b, c, d = (int(group) for group in matched.groups())
    if a > b or c > d:
        raise PuzzleParseError(f"section range runs backwards: {line!r}")
    return Sections(a, b), Sections(c, d)


def task_1(puzzle_input: str) -> Answer:
    pairs = [parse_pair(line) for line in input_lines(puzzle_input)]
    count = sum(1 for first, second in pairs if first.contains(second) or second.contains(first))
    return Answer(
        value=count,
        summary=f"the count of pairs where one job contains the other is {count}",
    )


def task_2(puzzle_input: str) -> Answer:
    pairs = [parse_pair(line) for line in input_lines(puzzle_input)]
    count = sum(1 for first, second in pairs if first.overlaps(second))
    return Answer(
        value=count,
        summary=f"the count of pairs where one job overlaps the other is {count}",
    )
