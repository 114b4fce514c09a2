from __future__ import annotations

import re
from collections import defaultdict

from advent_days.errors import NoSolutionError, PuzzleParseError
from advent_days.lib.parsing import input_lines
from advent_days.models.answer import Answer

DAY = 7
TITLE = "No Space Left On Device"
DESCRIPTION = """\
Every directory is identified by its path as a tuple of names, and the sizes
live in a flat dict keyed by that tuple. Replaying the terminal session keeps
track of the current path; whenever `ls` lists a file, its size is added to the
current directory and to every ancestor up to the root, so no tree needs to be
built or walked afterwards.

Task 1 sums every directory of at most 100000. Task 2 works out how much must be
freed to fit the 30000000 update on the 70000000 disk and picks the smallest
directory that frees at least that much."""

SMALL_DIR_LIMIT = 100_000
TOTAL_DISK_SIZE = 70_000_000
REQUIRED_FREE_SPACE = 30_000_000

_CD_PATTERN = re.compile(r"\$ cd (.+)")
_FILE_PATTERN = re.compile(r"(\d+) .+")

DirPath = tuple[str, ...]
ROOT: DirPath = ()


def directory_sizes(lines: list[str]) -> dict[DirPath, int]:
    sizes: dict[DirPath, int] = defaultdict(int)
    sizes[ROOT] = 0
    cwd: DirPath = ROOT

    for line in lines:
        if line == "$ ls":
            continue
        if cd := _CD_PATTERN.fullmatch(line):
            target = cd.group(1)
            if target == "/":
                cwd = ROOT
            elif target == "..":
                if cwd == ROOT:
                    raise PuzzleParseError("cannot leave the root directory")
                cwd = cwd[:-1]
            else:
                cwd = (*cwd, target)
                sizes[cwd] += 0
            continue
        if line.startswith("dir "):
            sizes[(*cwd, line[4:])] += 0
            continue
        if listed := _FILE_PATTERN.fullmatch(line):
            size = int(listed.group(1))
            for depth in range(len(cwd) + 1):
                sizes[cwd[:depth]] += size
            continue
        raise PuzzleParseError(f"unrecognised terminal line: {line!r}")

    return dict(sizes)


def task_1(puzzle_input: str) -> Answer:
    sizes = directory_sizes(input_lines(puzzle_input))
    small = [size for size in sizes.values() if size <= SMALL_DIR_LIMIT]
    total = sum(small)
    return Answer(
        value=total,
        summary=(
            f"there are {len(small)} dirs sized under {SMALL_DIR_LIMIT}, "
            f"with total size of {total}"
        ),
    )


def task_2(puzzle_input: str) -> Answer:
    sizes = directory_sizes(input_lines(puzzle_input))
    to_free = sizes[ROOT] - (TOTAL_DISK_SIZE - REQUIRED_FREE_SPACE)
    candidates = [size for size in sizes.values() if size >= to_free]
    if not candidates:
        raise NoSolutionError("no directory is large enough to free the required space")
    smallest = min(candidates)
    return Answer(
        value=smallest,
        summary=(
            "the smallest dir to delete that will yield us enough space for update "
            f"has total size of {smallest}"
        ),
    )
