from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

MIN_DAY = 2
MAX_DAY = 30
TASKS = (1, 2)


@dataclass(frozen=True, slots=True, order=True)
class Selector:
    day: int
    task: int

    @property
    def is_valid(self) -> bool:
        return MIN_DAY <= self.day <= MAX_DAY and self.task in TASKS

    def __str__(self) -> str:
        return f"day {self.day} task {self.task}"


@dataclass(frozen=True, slots=True)
class Answer:
    """Result of a single solver run.

    ``value`` is the puzzle answer itself, ``summary`` the sentence shown to the user.
    """

    value: int | str
    summary: str

    @property
    def kind(self) -> Literal["number", "text"]:
        return "number" if isinstance(self.value, int) else "text"
