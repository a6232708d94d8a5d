"""
CLI entry point using Typer.

Provides commands for the workout log and its analytics:
- init / add-user / users: data directory and user directory
- log-workout / workouts / delete-workout: workout records
- leaderboard: consistency ranking across users
- progress: per-user activity, volume and personal records
- exercises: reference exercise library
"""

from .app import app
from .commands import analysis, users, workouts  # noqa: F401  (registers commands)

__all__ = ["app"]


if __name__ == "__main__":
    app()
