from __future__ import annotations

import logging

from advent_days.errors import PuzzleParseError
from advent_days.models.answer import Answer

logger = logging.getLogger(__name__)

DAY = 17
TITLE = "Pyroclastic Flow"
DESCRIPTION = """\
Task 1: simulate Tetris.
Task 2: simulate Tetris until the tower starts repeating itself, then skip the
repeats and only simulate what is left.

The chamber is a set of filled cells plus the highest filled row of each
column. Each rock is pushed by the next jet (if it fits) and then falls one row
(if it fits); when it cannot fall it comes to rest.

For task 2, after every rock the state is keyed by the next rock shape, the
next jet and the depth of every column below the top of the tower. When a key
comes back, the rocks and the height gained since its first sighting form one
period; whole periods are skipped arithmetically and the remainder is
simulated."""

CHAMBER_WIDTH = 7
SPAWN_LEFT = 2
SPAWN_GAP = 3
SHORT_RUN = 2022
LONG_RUN = 1_000_000_000_000

Point = tuple[int, int]
State = tuple[int, int, tuple[int, ...]]

# Cell offsets from the bottom-left corner, y growing upwards.
ROCKS: tuple[tuple[Point, ...], ...] = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),
    ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),
    ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 0), (1, 0), (0, 1), (1, 1)),
)


def parse_jets(puzzle_input: str) -> list[int]:
    pattern = puzzle_input.strip()
    if not pattern:
        raise PuzzleParseError("jet pattern is empty")
    jets: list[int] = []
    for char in pattern:
        if char == "<":
            jets.append(-1)
        elif char == ">":
            jets.append(1)
        else:
            raise PuzzleParseError(f"invalid jet {char!r}")
    return jets


class Chamber:
    def __init__(self, jets: list[int]) -> None:
        self._jets = jets
        self._jet_index = 0
        self._rock_index = 0
        self._filled: set[Point] = set()
        self._tops = [-1] * CHAMBER_WIDTH
        self.height = 0

    def _fits(self, rock: tuple[Point, ...], x: int, y: int) -> bool:
        for dx, dy in rock:
            cell = (x + dx, y + dy)
            if not 0 <= cell[0] < CHAMBER_WIDTH or cell[1] < 0 or cell in self._filled:
                return False
        return True

    def drop(self) -> None:
        rock = ROCKS[self._rock_index]
        self._rock_index = (self._rock_index + 1) % len(ROCKS)
        x, y = SPAWN_LEFT, self.height + SPAWN_GAP

        while True:
            push = self._jets[self._jet_index]
            self._jet_index = (self._jet_index + 1) % len(self._jets)
            if self._fits(rock, x + push, y):
                x += push
            if not self._fits(rock, x, y - 1):
                break
            y -= 1

        for dx, dy in rock:
            column, row = x + dx, y + dy
            self._filled.add((column, row))
            self._tops[column] = max(self._tops[column], row)
            self.height = max(self.height, row + 1)

    def state(self) -> State:
        return (
            self._rock_index,
            self._jet_index,
            tuple(self.height - top for top in self._tops),
        )


def tower_height(jets: list[int], rock_count: int, *, detect_cycles: bool = True) -> int:
    chamber = Chamber(jets)
    seen: dict[State, tuple[int, int]] = {}
    dropped = 0
    skipped_height = 0

    while dropped < rock_count:
        chamber.drop()
        dropped += 1
        if not detect_cycles or skipped_height:
            continue

        state = chamber.state()
        if state not in seen:
            seen[state] = (dropped, chamber.height)
            continue

        first_dropped, first_height = seen[state]
        period = dropped - first_dropped
        repeats = (rock_count - dropped) // period
        skipped_height = repeats * (chamber.height - first_height)
        dropped += repeats * period
        logger.debug(
            "Tower repeats every %d rocks after rock %d; skipping %d periods",
            period,
            first_dropped,
            repeats,
        )

    return chamber.height + skipped_height


def task_1(puzzle_input: str) -> Answer:
    height = tower_height(parse_jets(puzzle_input), SHORT_RUN, detect_cycles=False)
    return Answer(value=height, summary=f"the highest point in the stack is {height}")


def task_2(puzzle_input: str) -> Answer:
    height = tower_height(parse_jets(puzzle_input), LONG_RUN)
    return Answer(
        value=height,
        summary=f"the highest point in the stack after {LONG_RUN} rocks is {height}",
    )
