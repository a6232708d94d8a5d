"""Shared Typer app object, shared option types, and store utility."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from ..core.calendar import parse_instant, utc_now
from ..core.engine.config_loader import load_engine_settings
from ..core.models import EngineSettings
from ..io.workout_store import WorkoutStore, get_default_data_dir

# Shared --data-dir option type used across all commands
DataDirOption = Annotated[
    Optional[Path],
    typer.Option("--data-dir", "-d", help="Data directory (default: ~/.repboard)"),
]

# Shared --now option: fixes the reference instant for reproducible output
NowOption = Annotated[
    Optional[str],
    typer.Option("--now", help="Reference instant, ISO-8601 (default: current UTC time)"),
]

JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="repboard",
    help="Workout log with a consistency leaderboard and progress summaries.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """
    Log workouts, climb the consistency leaderboard, track progress.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def get_store(data_dir: Path | None) -> WorkoutStore:
    """Get workout store from path or default location."""
    if data_dir is None:
        data_dir = get_default_data_dir()
    return WorkoutStore(data_dir)


def get_settings(data_dir: Path | None) -> EngineSettings:
    """Engine settings with the data directory's YAML override applied."""
    return load_engine_settings(data_dir)


def resolve_now(now: str | None) -> datetime:
    """
    Parse --now, or return the current UTC time.

    Raises:
        typer.BadParameter: If the value is not ISO-8601
    """
    if now is None:
        return utc_now()
    try:
        return parse_instant(now)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid --now value: {now!r}") from e
