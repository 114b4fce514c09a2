from __future__ import annotations

import re
from dataclasses import dataclass

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import blocks, match_line
from advent_days.models.answer import Answer

DAY = 5
TITLE = "Supply Stacks"
DESCRIPTION = """\
The crates are held as a list of stacks (plain lists, top of the stack at the
end) and the rearrangement procedure as a list of move instructions.

The drawing is parsed column by column: crate letters sit at every fourth
character, and the numbered line underneath tells how many stacks there are.
Instruction lines are matched with a regular expression.

Task 1 moves crates one at a time, reversing their order. Task 2 moves each
batch at once, keeping the order. The answer reads the top crate of every
stack."""

_MOVE_PATTERN = re.compile(r"move (\d+) from (\d+) to (\d+)")

CrateStack = list[str]


@dataclass(frozen=True, slots=True)
class Move:
    amount: int
    source: int
    target: int


def parse_stacks(drawing: list[str]) -> list[CrateStack]:
    *crate_rows, labels = drawing
    stack_count = len(labels.split())
    if stack_count == 0:
        raise PuzzleParseError("stack drawing has no numbered stacks")

    stacks: list[CrateStack] = [[] for _ in range(stack_count)]
    for row in reversed(crate_rows):
        for index in range(stack_count):
            column = 1 + index * 4
            if column < len(row) and row[column].strip():
                stacks[index].append(row[column])
    return stacks


def parse_moves(lines: list[str], stack_count: int) -> list[Move]:
    moves: list[Move] = []
    for line in lines:
        matched = match_line(_MOVE_PATTERN, line, what="move instruction")
        amount, source, target = (int(group) for group in matched.groups())
        if not (1 <= source <= stack_count and 1 <= target <= stack_count):
            raise PuzzleParseError(f"move refers to a stack that does not exist: {line!r}")
        moves.append(Move(amount=amount, source=source - 1, target=target - 1))
    return moves


def _parse(puzzle_input: str) -> tuple[list[CrateStack], list[Move]]:
    sections = blocks(puzzle_input)
    if len(sections) != 2:
        raise PuzzleParseError("expected a stack drawing and a move list separated by a blank line")
    drawing, move_lines = sections
    stacks = parse_stacks(drawing)
    return stacks, parse_moves(move_lines, len(stacks))


def _take(stacks: list[CrateStack], move: Move) -> CrateStack:
    source = stacks[move.source]
    if move.amount > len(source):
        raise PuzzleParseError(
            f"cannot move {move.amount} crates from stack {move.source + 1} holding {len(source)}"
        )
    taken = source[len(source) - move.amount :]
    del source[len(source) - move.amount :]
    return taken


def apply_single_moves(stacks: list[CrateStack], moves: list[Move]) -> None:
    for move in moves:
        stacks[move.target].extend(reversed(_take(stacks, move)))


def apply_batch_moves(stacks: list[CrateStack], moves: list[Move]) -> None:
    for move in moves:
        stacks[move.target].extend(_take(stacks, move))


def top_crates(stacks: list[CrateStack]) -> str:
    return "".join(stack[-1] if stack else " " for stack in stacks)


def task_1(puzzle_input: str) -> Answer:
    stacks, moves = _parse(puzzle_input)
    apply_single_moves(stacks, moves)
    password = top_crates(stacks)
    return Answer(value=password, summary=f"the password from the top crates is {password!r}")


def task_2(puzzle_input: str) -> Answer:
    stacks, moves = _parse(puzzle_input)
    apply_batch_moves(stacks, moves)
    password = top_crates(stacks)
    return Answer(value=password, summary=f"the password from the top crates is {password!r}")
