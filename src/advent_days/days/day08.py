from __future__ import annotations

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import input_lines
from advent_days.models.answer import Answer

DAY = 8
TITLE = "Treetop Tree House"
DESCRIPTION = """\
The forest is parsed into a list of rows of digit heights.

For task 1, a tree is visible from one side when it is taller than the tallest
tree in front of it. Sweeping each row and column once from each end while
keeping a running maximum marks every visible tree in linear time.

For task 2, each tree looks in all four directions until it meets a tree at
least as tall (or the edge). The viewing distances are multiplied and the
highest scenic score wins. This is the straightforward quadratic-per-line walk,
which is fast enough for a 99x99 forest."""

Forest = list[list[int]]


def parse_forest(puzzle_input: str) -> Forest:
    forest: Forest = []
    for line in input_lines(puzzle_input):
        if not line.isdigit():
            raise PuzzleParseError(f"forest row must contain digits only: {line!r}")
        forest.append([int(char) for char in line])
    if not forest or any(len(row) != len(forest[0]) for row in forest):
        raise PuzzleParseError("forest must be a non-empty rectangle")
    return forest


def _lines_of_sight(forest: Forest) -> list[list[tuple[int, int]]]:
    rows, cols = len(forest), len(forest[0])
    lines: list[list[tuple[int, int]]] = []
    for y in range(rows):
        row = [(y, x) for x in range(cols)]
        lines.extend([row, row[::-1]])
    for x in range(cols):
        col = [(y, x) for y in range(rows)]
        lines.extend([col, col[::-1]])
    return lines


def visible_trees(forest: Forest) -> set[tuple[int, int]]:
    visible: set[tuple[int, int]] = set()
    for line in _lines_of_sight(forest):
        tallest = -1
        for y, x in line:
            if forest[y][x] > tallest:
                visible.add((y, x))
                tallest = forest[y][x]
    return visible


def _viewing_distance(forest: Forest, y: int, x: int, dy: int, dx: int) -> int:
    height = forest[y][x]
    distance = 0
    y, x = y + dy, x + dx
    while 0 <= y < len(forest) and 0 <= x < len(forest[0]):
        distance += 1
        if forest[y][x] >= height:
            break
        y, x = y + dy, x + dx
    return distance


def scenic_score(forest: Forest, y: int, x: int) -> int:
    score = 1
    for dy, dx in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        score *= _viewing_distance(forest, y, x, dy, dx)
    return score


def task_1(puzzle_input: str) -> Answer:
    count = len(visible_trees(parse_forest(puzzle_input)))
    return Answer(value=count, summary=f"count of trees visible from the outside is {count}")


def task_2(puzzle_input: str) -> Answer:
    forest = parse_forest(puzzle_input)
    best = max(
        scenic_score(forest, y, x) for y in range(len(forest)) for x in range(len(forest[0]))
    )
    return Answer(value=best, summary=f"the highest scenic score for a tree is {best}")
