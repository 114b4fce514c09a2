from __future__ import annotations

import pytest

from advent_days.days.day06 import find_marker, task_1, task_2
from advent_days.errors import NoSolutionError


@pytest.mark.parametrize(
    ("stream", "packet", "message"),
    [
        ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 7, 19),
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5, 23),
        ("nppdvjthqldpwncqszvftbrmjlhg", 6, 23),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10, 29),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11, 26),
    ],
)
def test_samples(stream: str, packet: int, message: int) -> None:
    assert task_1(stream + "\n").value == packet
    assert task_2(stream).value == message


def test_no_marker() -> None:
    with pytest.raises(NoSolutionError):
        find_marker("aabbaabb", 4)
