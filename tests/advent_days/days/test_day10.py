from __future__ import annotations

from itertools import islice
from pathlib import Path

import pytest

from advent_days.days.day10 import (
    parse_program,
    register_values,
    render_screen,
    signal_strength,
    task_1,
    task_2,
)
from advent_days.errors import PuzzleParseError

SAMPLE_PATH = Path("assets/inputs/day10.txt")
SMALL_PROGRAM = "noop\naddx 3\naddx -5\n"
SAMPLE_SCREEN = "\n".join(
    [
        "##..##..##..##..##..##..##..##..##..##..",
        "###...###...###...###...###...###...###.",
        "####....####....####....####....####....",
        "#####.....#####.....#####.....#####.....",
        "######......######......######......####",
        "#######.......#######.......#######.....",
    ]
)


def test_sample() -> None:
    sample = SAMPLE_PATH.read_text()

    assert len(parse_program(sample)) == 146
    assert task_1(sample).value == 13140
    assert task_2(sample).value == SAMPLE_SCREEN


def test_sample_register_values() -> None:
    values = list(islice(register_values(parse_program(SAMPLE_PATH.read_text())), 220))

    assert [values[cycle - 1] for cycle in (20, 60, 100, 140, 180, 220)] == [
        21,
        19,
        18,
        21,
        16,
        18,
    ]


def test_register_values_hold_after_program_ends() -> None:
    values = list(islice(register_values(parse_program(SMALL_PROGRAM)), 8))

    assert values == [1, 1, 1, 4, 4, -1, -1, -1]


def test_signal_strength() -> None:
    # X during cycle c is 1 + (c - 1) // 2 for a run of `addx 1`.
    program = parse_program("addx 1\n" * 110)

    assert signal_strength(program) == 57200


def test_render_screen_with_steady_sprite() -> None:
    screen = render_screen(parse_program("noop\n" * 240))

    assert screen.splitlines() == ["###" + "." * 37] * 6


def test_task_2_returns_screen_text() -> None:
    answer = task_2("noop\n" * 240)

    assert answer.kind == "text"
    assert answer.value in answer.summary
    assert len(answer.value.splitlines()) == 6


def test_unknown_instruction() -> None:
    with pytest.raises(PuzzleParseError, match="unknown instruction"):
        parse_program("mul 3\n")
