from __future__ import annotations

import pytest

from advent_days.days import DAY_MODULES
from advent_days.days import day02
from advent_days.errors import UnknownSelectorError
from advent_days.models.answer import Answer, Selector
from advent_days.registry import SolverEntry, SolverRegistry, build_registry


def _entry(day: int, task: int) -> SolverEntry:
    return SolverEntry(
        selector=Selector(day=day, task=task),
        title="Test Day",
        description="",
        input_file=f"day{day}.txt",
        compute=lambda puzzle_input: Answer(value=len(puzzle_input), summary="len"),
    )


def test_every_registered_selector_resolves_to_exactly_one_solver() -> None:
    registry = build_registry()

    selectors = registry.selectors()
    assert len(selectors) == len(set(selectors)) == 2 * len(DAY_MODULES)
    for selector in selectors:
        entry = registry.resolve(selector.day, selector.task)
        assert entry.selector == selector
        assert entry.input_file == f"day{selector.day}.txt"


def test_registry_covers_days_two_to_seventeen() -> None:
    registry = build_registry()

    assert {selector.day for selector in registry.selectors()} == set(range(2, 18))


@pytest.mark.parametrize(
    ("day", "task", "match"),
    [
        (1, 1, "invalid day"),
        (31, 2, "invalid day"),
        (2, 0, "invalid task"),
        (2, 3, "invalid task"),
        (25, 1, "no solver registered"),
    ],
)
def test_resolve_rejects_unknown_selectors(day: int, task: int, match: str) -> None:
    registry = build_registry()

    with pytest.raises(UnknownSelectorError, match=match) as exc_info:
        registry.resolve(day, task)

    assert exc_info.value.day == day
    assert exc_info.value.task == task


def test_unknown_selector_is_a_lookup_error() -> None:
    with pytest.raises(LookupError):
        SolverRegistry().resolve(2, 1)


def test_register_rejects_duplicates() -> None:
    registry = SolverRegistry()
    registry.register(_entry(20, 1))

    with pytest.raises(ValueError, match="already registered"):
        registry.register(_entry(20, 1))


def test_register_rejects_invalid_selector() -> None:
    with pytest.raises(ValueError, match="invalid selector"):
        SolverRegistry().register(_entry(1, 1))


def test_build_registry_from_explicit_modules() -> None:
    registry = build_registry([day02])

    assert len(registry) == 2
    assert Selector(day=2, task=1) in registry
    assert registry.resolve(2, 2).title == "Rock Paper Scissors"


def test_entry_without_options_rejects_configured_options() -> None:
    entry = build_registry().resolve(2, 1)

    assert entry.parse_options({}) is None
    with pytest.raises(ValueError, match="does not accept options"):
        entry.parse_options({"row": 10})


def test_entry_with_options_validates_them() -> None:
    entry = build_registry().resolve(15, 1)

    options = entry.parse_options({"row": 10})
    assert options is not None
    assert options.model_dump() == {"row": 10, "search_bound": 4_000_000}

    with pytest.raises(ValueError, match="Invalid options for day 15"):
        entry.parse_options({"search_bound": -1})
    with pytest.raises(ValueError, match="Invalid options for day 15"):
        entry.parse_options({"colum": 3})
