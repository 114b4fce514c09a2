from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import ValidationError

from advent_days.models.config import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("advent.yaml")


def load_app_config(config_path: Path | None) -> AppConfig:
    if config_path is None:
        logger.info("No config path provided; using defaults")
        return AppConfig()

    if not config_path.exists():
        raise ValueError(f"Config file {config_path} not found")

    try:
        loaded: Any = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Config file is not valid YAML: {config_path}") from exc

    if not isinstance(loaded, dict):
        raise ValueError("Top-level config must be a mapping")

    try:
        config = AppConfig.model_validate(cast(dict[str, Any], loaded))
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration in {config_path}: {exc}") from exc

    if not config.inputs_dir.is_absolute():
        # Relative input dirs are resolved against the config file, not the cwd.
        config = config.model_copy(
            update={"inputs_dir": config_path.parent / config.inputs_dir}
        )
    return config
