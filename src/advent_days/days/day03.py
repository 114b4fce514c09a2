from __future__ import annotations

import string
from collections.abc import Iterable

from advent_days.errors import NoSolutionError, PuzzleParseError
from advent_days.lib.parsing import input_lines
from advent_days.models.answer import Answer

DAY = 3
TITLE = "Rucksack Reorganization"
DESCRIPTION = """\
There are only 52 item types, so every rucksack compartment becomes an integer
bitmask with one bit per item priority (bits 1-26 for a-z, 27-52 for A-Z).

Task 1 ANDs the masks of the two compartments; the single bit left over is the
misplaced item. Task 2 takes the rucksacks three at a time and ANDs the masks of
whole rucksacks to find the group badge. Both run in linear time."""

PRIORITIES = {
    letter: priority
    for priority, letter in enumerate(string.ascii_lowercase + string.ascii_uppercase, start=1)
}


def item_mask(items: Iterable[str]) -> int:
    mask = 0
    for item in items:
        try:
            mask |= 1 << PRIORITIES[item]
        except KeyError as exc:
            raise PuzzleParseError(f"invalid item {item!r}") from exc
    return mask


def _single_priority(mask: int, *, what: str) -> int:
    if mask == 0:
        raise NoSolutionError(f"no item shared by {what}")
    return mask.bit_length() - 1


def _misplaced_priority(rucksack: str) -> int:
    if len(rucksack) % 2:
        raise PuzzleParseError(f"rucksack has an odd number of items: {rucksack!r}")
    half = len(rucksack) // 2
    shared = item_mask(rucksack[:half]) & item_mask(rucksack[half:])
    return _single_priority(shared, what=f"both compartments of {rucksack!r}")


def task_1(puzzle_input: str) -> Answer:
    total = sum(_misplaced_priority(line) for line in input_lines(puzzle_input))
    return Answer(value=total, summary=f"The sum of all duplicate items is {total}")


def task_2(puzzle_input: str) -> Answer:
    rucksacks = input_lines(puzzle_input)
    if len(rucksacks) % 3:
        raise PuzzleParseError("rucksacks do not split evenly into groups of three")

    total = 0
    for start in range(0, len(rucksacks), 3):
        group = rucksacks[start : start + 3]
        shared = item_mask(group[0]) & item_mask(group[1]) & item_mask(group[2])
        total += _single_priority(shared, what=f"group starting at line {start + 1}")
    return Answer(value=total, summary=f"sum of all badges is {total}")
