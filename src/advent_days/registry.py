from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import BaseModel, ValidationError

from advent_days.errors import UnknownSelectorError
from advent_days.lib.inputs import input_filename
from advent_days.models.answer import MAX_DAY, MIN_DAY, TASKS, Answer, Selector

logger = logging.getLogger(__name__)


class DayModule(Protocol):
    DAY: int
    TITLE: str
    DESCRIPTION: str

    def task_1(self, puzzle_input: str, /, *args: Any) -> Answer: ...

    def task_2(self, puzzle_input: str, /, *args: Any) -> Answer: ...


@dataclass(frozen=True, slots=True)
class SolverEntry:
    selector: Selector
    title: str
    description: str
    input_file: str
    compute: Callable[..., Answer]
    options_model: type[BaseModel] | None = None

    def parse_options(self, raw: Mapping[str, Any]) -> BaseModel | None:
        if self.options_model is None:
            if raw:
                raise ValueError(
                    f"day {self.selector.day} does not accept options (got {sorted(raw)})"
                )
            return None
        try:
            return self.options_model.model_validate(dict(raw))
        except ValidationError as exc:
            raise ValueError(f"Invalid options for day {self.selector.day}: {exc}") from exc

    def solve(self, puzzle_input: str, options: BaseModel | None = None) -> Answer:
        if self.options_model is None:
            return self.compute(puzzle_input)
        if options is None:
            options = self.options_model()
        return self.compute(puzzle_input, options)


class SolverRegistry:
    """Maps (day, task) selectors to the solver that answers them."""

    def __init__(self) -> None:
        self._entries: dict[Selector, SolverEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, selector: object) -> bool:
        return selector in self._entries

    def register(self, entry: SolverEntry) -> None:
        if not entry.selector.is_valid:
            raise ValueError(f"cannot register solver for invalid selector ({entry.selector})")
        if entry.selector in self._entries:
            raise ValueError(f"a solver is already registered for {entry.selector}")
        self._entries[entry.selector] = entry

    def register_day(self, module: DayModule) -> None:
        options_model: type[BaseModel] | None = getattr(module, "OPTIONS", None)
        for task, compute in ((1, module.task_1), (2, module.task_2)):
            self.register(
                SolverEntry(
                    selector=Selector(day=module.DAY, task=task),
                    title=module.TITLE,
                    description=module.DESCRIPTION,
                    input_file=input_filename(module.DAY),
                    compute=compute,
                    options_model=options_model,
                )
            )

    def resolve(self, day: int, task: int) -> SolverEntry:
        if not MIN_DAY <= day <= MAX_DAY:
            raise UnknownSelectorError(
                f"invalid day {day} (expected a value between {MIN_DAY} and {MAX_DAY})",
                day=day,
                task=task,
            )
        if task not in TASKS:
            raise UnknownSelectorError(
                f"invalid task {task} (expected 1 or 2)",
                day=day,
                task=task,
            )
        entry = self._entries.get(Selector(day=day, task=task))
        if entry is None:
            raise UnknownSelectorError(
                f"no solver registered for day {day} task {task}",
                day=day,
                task=task,
            )
        logger.debug("Resolved %s to %s", entry.selector, entry.title)
        return entry

    def selectors(self) -> list[Selector]:
        return sorted(self._entries)


def build_registry(modules: Iterable[DayModule] | None = None) -> SolverRegistry:
    if modules is None:
        from advent_days.days import DAY_MODULES

        modules = DAY_MODULES

    registry = SolverRegistry()
    for module in modules:
        registry.register_day(module)
    return registry
