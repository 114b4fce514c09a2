from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import input_lines, parse_int
from advent_days.models.answer import Answer

DAY = 10
TITLE = "Cathode-Ray Tube"
DESCRIPTION = """\
The CPU is modelled as a generator that yields the value of the X register
during every cycle: `noop` yields once, `addx` yields twice and only then
applies its operand. Once the program runs out, X keeps its last value.

Task 1 samples that stream at cycles 20, 60, ..., 220 and sums cycle * X.

Task 2 drives a 40x6 CRT from the same stream: during cycle c the beam draws
pixel (c - 1) % 40 of its row, and the pixel is lit when the three-pixel sprite
centred on X covers it. The rows are joined into the text that spells the
answer."""

SIGNAL_CYCLES = (20, 60, 100, 140, 180, 220)
SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6
LIT = "#"
DARK = "."


@dataclass(frozen=True, slots=True)
class Instruction:
    cycles: int
    delta: int = 0


NOOP = Instruction(cycles=1)


def parse_program(puzzle_input: str) -> list[Instruction]:
    program: list[Instruction] = []
    for line in input_lines(puzzle_input):
        parts = line.split()
        if parts == ["noop"]:
            program.append(NOOP)
        elif len(parts) == 2 and parts[0] == "addx":
            program.append(Instruction(cycles=2, delta=parse_int(parts[1], what="addx operand")))
        else:
            raise PuzzleParseError(f"unknown instruction: {line!r}")
    return program


def register_values(program: list[Instruction]) -> Iterator[int]:
    """Yield X during cycle 1, 2, 3, ... forever."""
    x = 1
    for instruction in program:
        for _ in range(instruction.cycles):
            yield x
        x += instruction.delta
    while True:
        yield x


def signal_strength(program: list[Instruction]) -> int:
    values = list(islice(register_values(program), max(SIGNAL_CYCLES)))
    return sum(cycle * values[cycle - 1] for cycle in SIGNAL_CYCLES)


def render_screen(program: list[Instruction]) -> str:
    values = islice(register_values(program), SCREEN_WIDTH * SCREEN_HEIGHT)
    pixels = [
        LIT if abs(index % SCREEN_WIDTH - x) <= 1 else DARK for index, x in enumerate(values)
    ]
    return "\n".join(
        "".join(pixels[row * SCREEN_WIDTH : (row + 1) * SCREEN_WIDTH])
        for row in range(SCREEN_HEIGHT)
    )


def task_1(puzzle_input: str) -> Answer:
    total = signal_strength(parse_program(puzzle_input))
    return Answer(value=total, summary=f"the sum of signal strength is {total}")


def task_2(puzzle_input: str) -> Answer:
    screen = render_screen(parse_program(puzzle_input))
    return Answer(value=screen, summary=f"The text displaying on the monitor is\n{screen}")
