from __future__ import annotations

import pytest

from advent_days.days.day07 import ROOT, directory_sizes, task_1, task_2
from advent_days.errors import PuzzleParseError

SAMPLE = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


def test_directory_sizes() -> None:
    sizes = directory_sizes(SAMPLE.splitlines())

    assert sizes[("a", "e")] == 584
    assert sizes[("a",)] == 94853
    assert sizes[("d",)] == 24933642
    assert sizes[ROOT] == 48381165


def test_sample() -> None:
    assert task_1(SAMPLE).value == 95437
    assert task_2(SAMPLE).value == 24933642


def test_cannot_leave_root() -> None:
    with pytest.raises(PuzzleParseError, match="root"):
        directory_sizes(["$ cd /", "$ cd .."])


def test_unrecognised_line() -> None:
    with pytest.raises(PuzzleParseError):
        directory_sizes(["$ rm -rf /"])
