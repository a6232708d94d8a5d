"""Workout commands: log-workout, workouts, recent, delete-workout."""

import json
from typing import Annotated, Optional

import typer

from ...core.assembler import recent_payload
from ...core.calendar import utc_now
from ...core.config import RECENT_WORKOUT_LIMIT
from ...core.exercises import EXERCISE_LIBRARY
from ...core.progress import recent_activity
from ...core.validation import InputContractError
from ...io.serializers import (
    ValidationError,
    parse_exercise_string,
    validate_date,
    workout_to_dict,
)
from .. import views
from ..app import DataDirOption, JsonOption, app, get_settings, get_store

UserOption = Annotated[
    str,
    typer.Option("--user", "-u", help="User id"),
]


@app.command("log-workout")
def log_workout(
    user_id: UserOption,
    exercises: Annotated[
        Optional[list[str]],
        typer.Option(
            "--exercise", "-x",
            help="Exercise as NAME:SETSxREPS[@KG], repeatable. e.g. 'Squat:5x5@100'",
        ),
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", help="Session date/time, ISO-8601 (default: now, UTC)"),
    ] = None,
    name: Annotated[
        Optional[str],
        typer.Option("--name", "-n", help="Workout title"),
    ] = None,
    duration: Annotated[
        Optional[int],
        typer.Option("--duration", help="Duration in minutes"),
    ] = None,
    notes: Annotated[
        Optional[str],
        typer.Option("--notes", help="Session notes"),
    ] = None,
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Log a completed workout.

      repboard log-workout --user alice --date 2026-02-18T18:00 \\
        -x "Squat:5x5@100" -x "Pull-Up:4x8"
    """
    store = get_store(data_dir)

    if not exercises:
        views.print_error("Give at least one --exercise, e.g. -x 'Squat:5x5@100'")
        raise typer.Exit(1)

    try:
        if store.get_user(user_id) is None:
            views.print_error(f"Unknown user: {user_id}. Add it with 'add-user'.")
            raise typer.Exit(1)
        entries = [parse_exercise_string(x) for x in exercises]
        when = validate_date(date) if date is not None else utc_now()
        record = store.add_workout(
            user_id,
            entries,
            when,
            name=name,
            duration_minutes=duration,
            notes=notes,
        )
    except (FileNotFoundError, ValidationError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps(workout_to_dict(record), indent=2))
        return

    views.print_success(
        f"Logged {record.name} with {len(record.exercises)} exercise(s) (id: {record.id})"
    )
    unknown = [e.name for e in record.exercises if e.name not in EXERCISE_LIBRARY]
    if unknown:
        views.print_info(f"Not in the exercise library: {', '.join(unknown)}")


@app.command()
def workouts(
    user_id: UserOption,
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show a user's workouts, newest first.
    """
    store = get_store(data_dir)
    try:
        records = store.list_user_workouts(user_id)
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps([workout_to_dict(r) for r in records], indent=2))
        return

    views.print_workouts(records)


@app.command()
def recent(
    user_id: UserOption,
    limit: Annotated[
        int,
        typer.Option("--limit", "-l", help="Number of sessions to show"),
    ] = RECENT_WORKOUT_LIMIT,
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Summarize a user's latest sessions: count, total sets, exercises.
    """
    store = get_store(data_dir)
    try:
        settings = get_settings(data_dir)
        user = store.get_user(user_id)
        activity = recent_activity(store.list_user_workouts(user_id), limit)
    except (FileNotFoundError, ValidationError, InputContractError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps(recent_payload(activity), indent=2))
        return

    views.print_recent(user.name if user is not None else settings.unknown_user_name, activity)


@app.command("delete-workout")
def delete_workout(
    workout_id: Annotated[str, typer.Argument(help="Workout id (see 'workouts')")],
    user_id: UserOption,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Delete without confirmation"),
    ] = False,
    data_dir: DataDirOption = None,
) -> None:
    """
    Delete one of your own workouts.
    """
    store = get_store(data_dir)

    if not force and not views.confirm_action(f"Delete workout {workout_id}?"):
        views.print_info("Cancelled.")
        raise typer.Exit(0)

    try:
        deleted = store.delete_workout(workout_id, user_id)
    except KeyError:
        views.print_error(f"Workout not found: {workout_id}")
        raise typer.Exit(1)
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_success(f"Deleted {deleted.name} ({deleted.id})")
