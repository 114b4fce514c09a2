from __future__ import annotations

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import input_lines, parse_int
from advent_days.models.answer import Answer

DAY = 14
TITLE = "Regolith Reservoir"
DESCRIPTION = """\
Each rock path is a list of points joined by " -> "; walking the segments
between consecutive points fills a set of blocked cells. Sand is then added to
that same set as it comes to rest.

A grain falls straight down, then down-left, then down-right, and rests when all
three are blocked. Instead of dropping every grain from the source, the path of
the previous grain is kept as a stack: the next grain starts from the last
position on that path that is still free, which skips most of the fall.

Task 1 stops when a grain drops below the lowest rock into the abyss. Task 2
adds an endless floor two rows below the lowest rock (checked by comparing y,
never drawn) and stops when the source itself is blocked."""

Point = tuple[int, int]

SOURCE: Point = (500, 0)


def _parse_point(text: str) -> Point:
    parts = text.split(",")
    if len(parts) != 2:
        raise PuzzleParseError(f"invalid rock point: {text!r}")
    return parse_int(parts[0], what="rock x"), parse_int(parts[1], what="rock y")


def parse_rocks(puzzle_input: str) -> set[Point]:
    rocks: set[Point] = set()
    for line in input_lines(puzzle_input):
        points = [_parse_point(part) for part in line.split(" -> ")]
        if len(points) == 1:
            rocks.add(points[0])
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            if x1 != x2 and y1 != y2:
                raise PuzzleParseError(f"rock segments must be straight: {line!r}")
            for x in range(min(x1, x2), max(x1, x2) + 1):
                for y in range(min(y1, y2), max(y1, y2) + 1):
                    rocks.add((x, y))
    if not rocks:
        raise PuzzleParseError("scan contains no rock")
    return rocks


def pour_sand(rocks: set[Point], *, floor: bool) -> int:
    """Drop sand from the source and return how many grains come to rest."""
    blocked = set(rocks)
    lowest = max(y for _, y in rocks)
    floor_y = lowest + 2
    path: list[Point] = [SOURCE]
    rested = 0

    while path:
        x, y = path[-1]
        if not floor and y > lowest:
            break
        for nx in (x, x - 1, x + 1):
            below = (nx, y + 1)
            if below not in blocked and (not floor or y + 1 < floor_y):
                path.append(below)
                break
        else:
            blocked.add(path.pop())
            rested += 1
    return rested


def task_1(puzzle_input: str) -> Answer:
    rested = pour_sand(parse_rocks(puzzle_input), floor=False)
    return Answer(
        value=rested,
        summary=f"{rested} grains of sand rested before reaching the abyss",
    )


def task_2(puzzle_input: str) -> Answer:
    rested = pour_sand(parse_rocks(puzzle_input), floor=True)
    return Answer(
        value=rested,
        summary=f"{rested} grains of sand rested before filling up to the top",
    )
