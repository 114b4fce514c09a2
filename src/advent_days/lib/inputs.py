from __future__ import annotations

import logging
from pathlib import Path

from advent_days.errors import InputFileError

logger = logging.getLogger(__name__)


def input_filename(day: int) -> str:
    return f"day{day}.txt"


def read_input(inputs_dir: Path, filename: str) -> str:
    path = inputs_dir / filename
    logger.debug("Reading puzzle input from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InputFileError(f"missing input file: {path}", path=str(path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"could not read input file {path}: {exc}", path=str(path)) from exc
