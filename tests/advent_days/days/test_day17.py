from __future__ import annotations

import pytest

from advent_days.days.day17 import Chamber, parse_jets, task_1, task_2, tower_height
from advent_days.errors import PuzzleParseError

SAMPLE = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>\n"


def test_parse_jets() -> None:
    assert parse_jets("<>>\n") == [-1, 1, 1]
    with pytest.raises(PuzzleParseError):
        parse_jets("<^>")
    with pytest.raises(PuzzleParseError, match="empty"):
        parse_jets("\n")


def test_first_rocks() -> None:
    chamber = Chamber(parse_jets(SAMPLE))

    chamber.drop()
    assert chamber.height == 1
    chamber.drop()
    assert chamber.height == 4


def test_cycle_detection_matches_plain_simulation() -> None:
    jets = parse_jets(SAMPLE)

    assert tower_height(jets, 2022) == tower_height(jets, 2022, detect_cycles=False)


def test_sample() -> None:
    assert task_1(SAMPLE).value == 3068
    assert task_2(SAMPLE).value == 1514285714288
