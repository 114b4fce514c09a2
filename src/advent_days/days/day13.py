from __future__ import annotations

import json
from functools import cmp_to_key
from typing import Union

from advent_days.errors import PuzzleParseError
from advent_days.lib.parsing import blocks
from advent_days.models.answer import Answer

DAY = 13
TITLE = "Distress Signal"
DESCRIPTION = """\
Every packet line happens to be valid JSON, so json.loads does the parsing.

The comparison follows the puzzle rules as a classic cmp function returning -1,
0 or 1: integers compare by value, lists compare element by element and then by
length, and a lone integer compared with a list is wrapped in a list first.

Task 1 sums the 1-based indices of the pairs already in the right order.
Task 2 adds the two divider packets, sorts everything with
functools.cmp_to_key and multiplies the positions of the dividers."""

Packet = Union[int, list["Packet"]]

DIVIDER_PACKETS: tuple[Packet, Packet] = ([[2]], [[6]])


def parse_packet(line: str) -> Packet:
    try:
        packet = json.loads(line)
    except json.JSONDecodeError as exc:
        raise PuzzleParseError(f"invalid packet: {line!r}") from exc
    if not isinstance(packet, list):
        raise PuzzleParseError(f"packet must be a list: {line!r}")
    if not _is_packet(packet):
        raise PuzzleParseError(f"invalid packet: {line!r}")
    return packet


def _is_packet(value: object) -> bool:
    # bool is an int subclass but never appears in a packet.
    if isinstance(value, int):
        return not isinstance(value, bool)
    if isinstance(value, list):
        return all(_is_packet(item) for item in value)
    return False


def compare(left: Packet, right: Packet) -> int:
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for left_item, right_item in zip(left, right):
        order = compare(left_item, right_item)
        if order:
            return order
    return (len(left) > len(right)) - (len(left) < len(right))


def parse_pairs(puzzle_input: str) -> list[tuple[Packet, Packet]]:
    pairs: list[tuple[Packet, Packet]] = []
    for block in blocks(puzzle_input):
        if len(block) != 2:
            raise PuzzleParseError(f"expected packets in pairs, got a group of {len(block)}")
        pairs.append((parse_packet(block[0]), parse_packet(block[1])))
    return pairs


def task_1(puzzle_input: str) -> Answer:
    pairs = parse_pairs(puzzle_input)
    total = sum(
        index for index, (left, right) in enumerate(pairs, start=1) if compare(left, right) < 0
    )
    return Answer(value=total, summary=f"sum of indices of pairs in right order is {total}")


def task_2(puzzle_input: str) -> Answer:
    packets = [packet for pair in parse_pairs(puzzle_input) for packet in pair]
    packets.extend(DIVIDER_PACKETS)
    packets.sort(key=cmp_to_key(compare))

    first = packets.index(DIVIDER_PACKETS[0]) + 1
    second = packets.index(DIVIDER_PACKETS[1]) + 1
    key = first * second
    return Answer(
        value=key,
        summary=(
            f"index of first packet is {first}, of second is {second}, "
            f"their product is {key}"
        ),
    )
