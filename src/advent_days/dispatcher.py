from __future__ import annotations

import logging
from dataclasses import dataclass

from advent_days.lib.inputs import read_input
from advent_days.models.answer import Answer, Selector
from advent_days.models.config import AppConfig
from advent_days.registry import SolverRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchReport:
    selector: Selector
    title: str
    answer: Answer
    description: str | None = None

    def render(self) -> str:
        lines = [f"Day {self.selector.day}", self.title, ""]
        if self.description is not None:
            lines.extend([self.description, ""])
        lines.append(f"Task: {self.selector.task}")
        lines.append(f"Result: {self.answer.summary}")
        return "\n".join(lines)


class Dispatcher:
    """Resolves a selector, feeds the solver its input file and collects the answer."""

    def __init__(self, *, registry: SolverRegistry, app_config: AppConfig) -> None:
        self._registry = registry
        self._app_config = app_config

    def run(self, selector: Selector, *, describe: bool = False) -> DispatchReport:
        entry = self._registry.resolve(selector.day, selector.task)
        options = entry.parse_options(self._app_config.options_for(selector.day))
        puzzle_input = read_input(self._app_config.inputs_dir, entry.input_file)

        logger.debug("Running %s (%s)", selector, entry.title)
        answer = entry.solve(puzzle_input, options)
        logger.debug("%s answered %r", selector, answer.value)

        return DispatchReport(
            selector=entry.selector,
            title=entry.title,
            answer=answer,
            description=entry.description if describe else None,
        )
