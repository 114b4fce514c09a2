from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from advent_days.models.answer import MAX_DAY, MIN_DAY

DEFAULT_INPUTS_DIR = Path("assets/inputs")


class AppConfig(BaseModel):
    inputs_dir: Path = DEFAULT_INPUTS_DIR
    # Raw per-day options; each day validates its own section against its
    # options model when it runs.
    days: dict[int, dict[str, Any]] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @field_validator("days")
    @classmethod
    def _validate_day_numbers(cls, value: dict[int, dict[str, Any]]) -> dict[int, dict[str, Any]]:
        for day in value:
            if not MIN_DAY <= day <= MAX_DAY:
                raise ValueError(f"day {day} is out of range ({MIN_DAY}-{MAX_DAY})")
        return value

    def options_for(self, day: int) -> dict[str, Any]:
        return dict(self.days.get(day, {}))
