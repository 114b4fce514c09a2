from __future__ import annotations

import pytest

from advent_days.days.day14 import parse_rocks, pour_sand, task_1, task_2
from advent_days.errors import PuzzleParseError

SAMPLE = """\
498,4 -> 498,6 -> 496,6
503,4 -> 502,4 -> 502,9 -> 494,9
"""


def test_parse_rocks() -> None:
    rocks = parse_rocks(SAMPLE)

    assert (498, 5) in rocks
    assert (494, 9) in rocks
    assert len(rocks) == 20


def test_sample() -> None:
    assert task_1(SAMPLE).value == 24
    assert task_2(SAMPLE).value == 93


def test_single_rock_with_floor() -> None:
    # Floor at y=2: the source and the three cells below it fill up.
    assert pour_sand({(600, 0)}, floor=True) == 4


def test_diagonal_segment() -> None:
    with pytest.raises(PuzzleParseError, match="straight"):
        parse_rocks("1,1 -> 2,2\n")
