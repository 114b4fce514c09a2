from __future__ import annotations

import logging
import math
import operator
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import blocks, match_line, parse_int
from advent_days.models.answer import Answer

logger = logging.getLogger(__name__)

DAY = 11
TITLE = "Monkey in the Middle"
DESCRIPTION = """\
Each monkey is parsed into a small dataclass: its items, an operation built from
the `operator` module, the divisor of its test and the two monkeys it throws to.
A round walks the monkeys in order and every monkey inspects and throws all of
the items it holds.

Task 1 runs 20 rounds and divides each worry level by 3 after inspection.

Task 2 runs 10000 rounds without that relief, so worry levels would grow
without bound. Only divisibility by each monkey's divisor matters, and that is
preserved modulo the product of all divisors, so every worry level is reduced
modulo that product after each operation. The answer is the product of the two
highest inspection counts."""

RELIEF_ROUNDS = 20
RELIEF_DIVISOR = 3
WORRY_ROUNDS = 10_000

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}

_HEADER_PATTERN = re.compile(r"Monkey (\d+):")
_ITEMS_PATTERN = re.compile(r"Starting items:\s*(.*)")
_OPERATION_PATTERN = re.compile(r"Operation: new = (old|\d+) ([+*-]) (old|\d+)")
_TEST_PATTERN = re.compile(r"Test: divisible by (\d+)")
_TRUE_PATTERN = re.compile(r"If true: throw to monkey (\d+)")
_FALSE_PATTERN = re.compile(r"If false: throw to monkey (\d+)")


@dataclass(frozen=True, slots=True)
class Operation:
    left: str
    symbol: str
    right: str

    def apply(self, old: int) -> int:
        left = old if self.left == "old" else int(self.left)
        right = old if self.right == "old" else int(self.right)
        return _OPERATORS[self.symbol](left, right)


@dataclass(slots=True)
class Monkey:
    items: list[int]
    operation: Operation
    divisor: int
    if_true: int
    if_false: int
    inspected: int = field(default=0)

    def target(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


def parse_monkey(lines: list[str]) -> Monkey:
    if len(lines) != 6:
        raise PuzzleParseError(f"monkey description must have 6 lines, got {len(lines)}")
    match_line(_HEADER_PATTERN, lines[0], what="monkey header")
    items_text = match_line(_ITEMS_PATTERN, lines[1], what="starting items").group(1)
    items = [parse_int(item, what="starting item") for item in items_text.split(",") if item.strip()]
    op = match_line(_OPERATION_PATTERN, lines[2], what="operation")
    divisor = int(match_line(_TEST_PATTERN, lines[3], what="test").group(1))
    if divisor == 0:
        raise PuzzleParseError("monkey test cannot divide by zero")
    return Monkey(
        items=items,
        operation=Operation(op.group(1), op.group(2), op.group(3)),
        divisor=divisor,
        if_true=int(match_line(_TRUE_PATTERN, lines[4], what="true branch").group(1)),
        if_false=int(match_line(_FALSE_PATTERN, lines[5], what="false branch").group(1)),
    )


def parse_monkeys(puzzle_input: str) -> list[Monkey]:
    monkeys = [parse_monkey(block) for block in blocks(puzzle_input)]
    for index, monkey in enumerate(monkeys):
        for target in (monkey.if_true, monkey.if_false):
            if not 0 <= target < len(monkeys):
                raise PuzzleParseError(f"monkey {index} throws to unknown monkey {target}")
    return monkeys


def play(monkeys: list[Monkey], rounds: int, relief: Callable[[int], int]) -> None:
    for round_number in range(1, rounds + 1):
        for monkey in monkeys:
            held, monkey.items = monkey.items, []
            monkey.inspected += len(held)
            for worry in held:
                worry = relief(monkey.operation.apply(worry))
                monkeys[monkey.target(worry)].items.append(worry)
        if round_number % 1000 == 0:
            logger.debug("Finished round %d of %d", round_number, rounds)


def _answer(monkeys: list[Monkey]) -> Answer:
    summary = "\n".join(
        f"monkey {index}: inspected items {monkey.inspected} times"
        for index, monkey in enumerate(monkeys)
    )
    counts = sorted((monkey.inspected for monkey in monkeys), reverse=True)
    if len(counts) < 2:
        raise PuzzleParseError("monkey business needs at least two monkeys")
    highest, second = counts[0], counts[1]
    business = highest * second
    return Answer(
        value=business,
        summary=(
            f"summary: \n{summary}\n"
            f"amount of monkey business is {highest} * {second} = {business}"
        ),
    )


def task_1(puzzle_input: str) -> Answer:
    monkeys = parse_monkeys(puzzle_input)
    play(monkeys, RELIEF_ROUNDS, lambda worry: worry // RELIEF_DIVISOR)
    return _answer(monkeys)


def task_2(puzzle_input: str) -> Answer:
    monkeys = parse_monkeys(puzzle_input)
    modulus = math.prod(monkey.divisor for monkey in monkeys)
    play(monkeys, WORRY_ROUNDS, lambda worry: worry % modulus)
    return _answer(monkeys)
