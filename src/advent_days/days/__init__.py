"""One module per puzzle day; each exposes DAY, TITLE, DESCRIPTION, task_1 and task_2."""

from advent_days.days import (
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
)

DAY_MODULES = (
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
)

__all__ = ["DAY_MODULES"]
