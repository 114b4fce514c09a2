from __future__ import annotations

import re

from advent_days.errors import PuzzleParseError


def input_lines(puzzle_input: str) -> list[str]:
    """Split input into lines, dropping the trailing blank lines editors leave behind."""
    lines = puzzle_input.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def blocks(puzzle_input: str) -> list[list[str]]:
    """Split input into groups of lines separated by blank lines."""
    groups: list[list[str]] = []
    current: list[str] = []
    for line in input_lines(puzzle_input):
        if line.strip():
            current.append(line)
            continue
        if current:
            groups.append(current)
            current = []
    if current:
        groups.append(current)
    return groups


def parse_int(value: str, *, what: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise PuzzleParseError(f"expected an integer for {what}, got {value!r}") from exc


def match_line(pattern: re.Pattern[str], line: str, *, what: str) -> re.Match[str]:
    matched = pattern.fullmatch(line.strip())
    if matched is None:
        raise PuzzleParseError(f"invalid {what}: {line!r}")
    return matched
