from __future__ import annotations

from dataclasses import dataclass

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import input_lines, parse_int
from advent_days.models.answer import Answer

DAY = 9
TITLE = "Rope Bridge"
DESCRIPTION = """\
The rope is a list of knot positions, head first. The head moves one step at a
time; every following knot then catches up with the knot ahead of it whenever
they stop touching, by stepping one cell along each axis toward it (sign of the
difference). Because every knot follows the same rule, a 2-knot rope (task 1)
and a 10-knot rope (task 2) share the same code.

After each step the tail position goes into a set, and the answer is the size
of that set."""

Position = tuple[int, int]

_DIRECTIONS: dict[str, Position] = {"L": (-1, 0), "R": (1, 0), "U": (0, -1), "D": (0, 1)}

SHORT_ROPE_KNOTS = 2
LONG_ROPE_KNOTS = 10


@dataclass(frozen=True, slots=True)
class Motion:
    direction: Position
    steps: int


def parse_motions(puzzle_input: str) -> list[Motion]:
    motions: list[Motion] = []
    for line in input_lines(puzzle_input):
        parts = line.split()
        if len(parts) != 2 or parts[0] not in _DIRECTIONS:
            raise PuzzleParseError(f"invalid motion: {line!r}")
        steps = parse_int(parts[1], what="motion steps")
        if steps < 0:
            raise PuzzleParseError(f"motion steps cannot be negative: {line!r}")
        motions.append(Motion(_DIRECTIONS[parts[0]], steps))
    return motions


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def follow(knot: Position, lead: Position) -> Position:
    dx, dy = lead[0] - knot[0], lead[1] - knot[1]
    if abs(dx) <= 1 and abs(dy) <= 1:
        return knot
    return knot[0] + _sign(dx), knot[1] + _sign(dy)


def tail_visits(motions: list[Motion], knot_count: int) -> set[Position]:
    knots: list[Position] = [(0, 0)] * knot_count
    visited = {knots[-1]}
    for motion in motions:
        for _ in range(motion.steps):
            head_x, head_y = knots[0]
            knots[0] = (head_x + motion.direction[0], head_y + motion.direction[1])
            for index in range(1, knot_count):
                knots[index] = follow(knots[index], knots[index - 1])
            visited.add(knots[-1])
    return visited


def task_1(puzzle_input: str) -> Answer:
    count = len(tail_visits(parse_motions(puzzle_input), SHORT_ROPE_KNOTS))
    return Answer(value=count, summary=f"the tail visited {count} unique locations")


def task_2(puzzle_input: str) -> Answer:
    count = len(tail_visits(parse_motions(puzzle_input), LONG_ROPE_KNOTS))
    return Answer(value=count, summary=f"the tail visited {count} unique locations")
