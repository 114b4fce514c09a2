from __future__ import annotations

from collections import Counter

from advent_days.errors import NoSolutionError
from advent_days.models.answer import Answer

DAY = 6
TITLE = "Tuning Trouble"
DESCRIPTION = """\
A window of fixed size slides over the datastream. A Counter tracks how many
times each character appears inside the window, so moving the window by one
character is two updates and the uniqueness check is just comparing the number
of distinct keys with the window size.

Task 1 looks for the first window of 4 distinct characters (start-of-packet),
task 2 for the first window of 14 (start-of-message)."""

PACKET_MARKER_SIZE = 4
MESSAGE_MARKER_SIZE = 14


def find_marker(stream: str, size: int) -> int:
    """Return how many characters are processed before the first ``size`` distinct ones end."""
    window: Counter[str] = Counter()
    for index, char in enumerate(stream):
        window[char] += 1
        if index >= size:
            dropped = stream[index - size]
            window[dropped] -= 1
            if window[dropped] == 0:
                del window[dropped]
        if len(window) == size:
            return index + 1
    raise NoSolutionError(f"no run of {size} distinct characters in the datastream")


def task_1(puzzle_input: str) -> Answer:
    position = find_marker(puzzle_input.strip(), PACKET_MARKER_SIZE)
    return Answer(
        value=position,
        summary=f"there are {position} characters before the first start-of-packet",
    )


def task_2(puzzle_input: str) -> Answer:
    position = find_marker(puzzle_input.strip(), MESSAGE_MARKER_SIZE)
    return Answer(
        value=position,
        summary=f"there are {position} characters before the first start-of-message",
    )
