from __future__ import annotations

import logging
from pathlib import Path

import click

from advent_days.config import DEFAULT_CONFIG_PATH, load_app_config
from advent_days.dispatcher import Dispatcher
from advent_days.errors import SolverError
from advent_days.models.answer import Selector
from advent_days.registry import build_registry

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--day", type=int, required=True, help="Which day of the competition to run [2-30].")
@click.option("--task", type=int, required=True, help="Which task to run [1-2].")
@click.option(
    "--describe",
    is_flag=True,
    default=False,
    help="Print a description of how the solver works.",
)
@click.option(
    "--config",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Path to YAML config. [default: {DEFAULT_CONFIG_PATH} if present]",
)
@click.option(
    "--inputs-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory holding the dayN.txt input files (overrides the config).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level.",
)
def cli(
    day: int,
    task: int,
    describe: bool,
    config: Path | None,
    inputs_dir: Path | None,
    log_level: str,
) -> None:
    """Run the solver for a single day and task of the puzzle calendar."""
    _configure_logging(log_level)

    if config is None and DEFAULT_CONFIG_PATH.exists():
        config = DEFAULT_CONFIG_PATH

    try:
        app_config = load_app_config(config)
    except ValueError as exc:
        raise click.ClickException(f"Config error: {exc}") from exc

    if inputs_dir is not None:
        app_config = app_config.model_copy(update={"inputs_dir": inputs_dir})

    dispatcher = Dispatcher(registry=build_registry(), app_config=app_config)
    try:
        report = dispatcher.run(Selector(day=day, task=task), describe=describe)
    except (SolverError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(report.render())


def _parse_log_level(level_str: str) -> int:
    normalized = level_str.strip().upper()
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    if normalized in mapping:
        return mapping[normalized]
    raise ValueError(f"Invalid log level: {level_str}")


def _configure_logging(level_str: str) -> None:
    log_level = _parse_log_level(level_str)
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("advent_days").setLevel(log_level)


if __name__ == "__main__":
    cli()
