from __future__ import annotations

import pytest

from advent_days.days.day03 import PRIORITIES, task_1, task_2
from advent_days.errors import NoSolutionError, PuzzleParseError

SAMPLE = """\
vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw
"""


def test_priorities() -> None:
    assert PRIORITIES["a"] == 1
    assert PRIORITIES["z"] == 26
    assert PRIORITIES["A"] == 27
    assert PRIORITIES["Z"] == 52


def test_sample() -> None:
    assert task_1(SAMPLE).value == 157
    assert task_2(SAMPLE).value == 70


def test_no_shared_item() -> None:
    with pytest.raises(NoSolutionError):
        task_1("abcd\n")


def test_odd_rucksack() -> None:
    with pytest.raises(PuzzleParseError, match="odd number"):
        task_1("abc\n")


def test_groups_of_three_required() -> None:
    with pytest.raises(PuzzleParseError, match="groups of three"):
        task_2("aa\nbb\n")
