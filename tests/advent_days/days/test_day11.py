from __future__ import annotations

import pytest

from advent_days.days.day11 import Operation, parse_monkeys, task_1, task_2
from advent_days.errors import PuzzleParseError

SAMPLE = """\
Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def test_parse_monkeys() -> None:
    monkeys = parse_monkeys(SAMPLE)

    assert len(monkeys) == 4
    assert monkeys[1].items == [54, 65, 75, 74]
    assert monkeys[2].operation == Operation("old", "*", "old")
    assert (monkeys[3].divisor, monkeys[3].if_true, monkeys[3].if_false) == (17, 0, 1)


def test_operation_apply() -> None:
    assert Operation("old", "*", "old").apply(7) == 49
    assert Operation("old", "+", "6").apply(7) == 13


def test_sample() -> None:
    first = task_1(SAMPLE)

    assert first.value == 10605
    assert first.summary.endswith("amount of monkey business is 105 * 101 = 10605")
    assert task_2(SAMPLE).value == 2713310158


def test_throw_to_unknown_monkey() -> None:
    text = SAMPLE.replace("throw to monkey 3", "throw to monkey 7", 1)

    with pytest.raises(PuzzleParseError, match="unknown monkey 7"):
        parse_monkeys(text)
