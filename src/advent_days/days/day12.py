from __future__ import annotations

from collections import deque
from collections.abc import Callable

from advent_days.errors import NoSolutionError, PuzzleParseError
from advent_days.lib.parsing import input_lines
from advent_days.models.answer import Answer

DAY = 12
TITLE = "Hill Climbing Algorithm"
DESCRIPTION = """\
BFS day.

The heightmap is a directed graph: a step is allowed onto a square at most one
higher than the current one, and onto any lower square. S has elevation a and E
has elevation z.

Task 1 runs a plain breadth-first search from S and stops at E.

Task 2 asks for the closest square of elevation a to E. Instead of running one
search per starting square, a single search runs backwards from E with the edge
rule reversed (climbing down at most one, climbing up freely) and stops at the
first square of elevation a."""

Grid = list[str]
Point = tuple[int, int]

START = "S"
END = "E"


def elevation(char: str) -> int:
    if char == START:
        return ord("a")
    if char == END:
        return ord("z")
    return ord(char)


def parse_grid(puzzle_input: str) -> Grid:
    grid = input_lines(puzzle_input)
    if not grid or any(len(row) != len(grid[0]) for row in grid):
        raise PuzzleParseError("heightmap must be a non-empty rectangle")
    for row in grid:
        for char in row:
            if not (char.islower() or char in (START, END)):
                raise PuzzleParseError(f"invalid heightmap square {char!r}")
    return grid


def find(grid: Grid, char: str) -> Point:
    for y, row in enumerate(grid):
        x = row.find(char)
        if x >= 0:
            return x, y
    raise PuzzleParseError(f"heightmap has no {char!r} square")


def shortest_path(
    grid: Grid,
    start: Point,
    is_goal: Callable[[str], bool],
    can_step: Callable[[int, int], bool],
) -> int:
    queue: deque[tuple[Point, int]] = deque([(start, 0)])
    seen = {start}
    while queue:
        (x, y), distance = queue.popleft()
        here = grid[y][x]
        if is_goal(here):
            return distance
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if not (0 <= ny < len(grid) and 0 <= nx < len(grid[0])):
                continue
            if (nx, ny) in seen or not can_step(elevation(here), elevation(grid[ny][nx])):
                continue
            seen.add((nx, ny))
            queue.append(((nx, ny), distance + 1))
    raise NoSolutionError("no way out")


def task_1(puzzle_input: str) -> Answer:
    grid = parse_grid(puzzle_input)
    distance = shortest_path(
        grid,
        find(grid, START),
        is_goal=lambda char: char == END,
        can_step=lambda here, there: there - here <= 1,
    )
    return Answer(value=distance, summary=f"the shortest path to the exit is {distance}")


def task_2(puzzle_input: str) -> Answer:
    grid = parse_grid(puzzle_input)
    distance = shortest_path(
        grid,
        find(grid, END),
        is_goal=lambda char: elevation(char) == ord("a"),
        can_step=lambda here, there: here - there <= 1,
    )
    return Answer(
        value=distance,
        summary=f"the shortest hiking trail from any 'a' spot is {distance}",
    )
