from __future__ import annotations

import pytest

from advent_days.days.day13 import compare, parse_packet, task_1, task_2
from advent_days.errors import PuzzleParseError

SAMPLE = """\
[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""


def test_compare() -> None:
    assert compare([1, 1, 3], [1, 1, 5]) == -1
    assert compare([[1], [2, 3, 4]], [[1], 4]) == -1
    assert compare([9], [[8, 7, 6]]) == 1
    assert compare([[2]], [2]) == 0


def test_sample() -> None:
    assert task_1(SAMPLE).value == 13
    assert task_2(SAMPLE).value == 140


def test_invalid_packet() -> None:
    with pytest.raises(PuzzleParseError):
        parse_packet("[1,2")
    with pytest.raises(PuzzleParseError, match="must be a list"):
        parse_packet("3")


def test_unpaired_packets() -> None:
    with pytest.raises(PuzzleParseError, match="pairs"):
        task_1("[1]\n")


@pytest.mark.parametrize("line", ["[1.5]", '["a"]', "[[1],[true]]", '[{"a":1}]', "[null]"])
def test_nested_values_must_be_integers_or_lists(line: str) -> None:
    with pytest.raises(PuzzleParseError, match="invalid packet"):
        parse_packet(line)


def test_malformed_nested_packet_fails_task() -> None:
    with pytest.raises(PuzzleParseError):
        task_1('["ab"]\n["c"]\n')
    with pytest.raises(PuzzleParseError):
        task_2("[1.5]\n[2]\n")
