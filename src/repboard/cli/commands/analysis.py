"""Analysis commands: leaderboard, progress, exercises."""

import json
from typing import Annotated, Optional

import typer

from ...core.assembler import leaderboard_payload, progress_payload
from ...core.exercises import search_exercises
from ...core.models import Snapshot
from ...core.progress import summarize_progress
from ...core.ranking import rank_entries
from ...core.scoring import compute_scores
from ...core.validation import InputContractError
from ...io.serializers import ValidationError
from .. import views
from ..app import DataDirOption, JsonOption, NowOption, app, get_settings, get_store, resolve_now


@app.command()
def leaderboard(
    user_id: Annotated[
        Optional[str],
        typer.Option("--user", "-u", help="Highlight this user and show their rank"),
    ] = None,
    now: NowOption = None,
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show the cross-user consistency leaderboard.
    """
    reference = resolve_now(now)
    store = get_store(data_dir)

    try:
        settings = get_settings(data_dir)
        snapshot = Snapshot.from_source(store)
        entries = compute_scores(snapshot.records, snapshot.users, reference, settings)
    except (FileNotFoundError, ValidationError, InputContractError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    ranked = rank_entries(entries, [u.user_id for u in snapshot.users])

    if json_out:
        print(json.dumps(leaderboard_payload(ranked), indent=2))
        return

    views.print_leaderboard(ranked, viewer_id=user_id)


@app.command()
def progress(
    user_id: Annotated[
        str,
        typer.Option("--user", "-u", help="User id"),
    ],
    now: NowOption = None,
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show a user's weekly activity, training volume and personal records.
    """
    reference = resolve_now(now)
    store = get_store(data_dir)

    try:
        settings = get_settings(data_dir)
        user = store.get_user(user_id)
        records = store.list_user_workouts(user_id)
        summary = summarize_progress(records, reference, settings)
    except (FileNotFoundError, ValidationError, InputContractError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps(progress_payload(summary), indent=2))
        return

    views.print_progress(user.name if user is not None else settings.unknown_user_name, summary)


@app.command()
def exercises(
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Case-insensitive filter on name or muscle group"),
    ] = None,
    group: Annotated[
        Optional[str],
        typer.Option("--group", "-g", help="Only this primary muscle group (e.g. Chest, Legs)"),
    ] = None,
    limit: Annotated[
        int,
        typer.Option("--limit", "-l", help="Maximum number of results"),
    ] = 50,
    details: Annotated[
        bool,
        typer.Option("--details", help="Also print description and instructions"),
    ] = False,
    json_out: JsonOption = False,
) -> None:
    """
    Browse the reference exercise library.
    """
    try:
        found = search_exercises(search or "", limit=limit, muscle_group=group)
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps([
            {
                "name": ex.name,
                "muscleGroup": ex.muscle_group,
                "secondaryMuscles": list(ex.secondary_muscles),
                "description": ex.description,
                "difficulty": ex.difficulty,
                "equipment": ex.equipment,
                "instructions": ex.instructions,
            }
            for ex in found
        ], indent=2))
        return

    views.print_exercises(found, details=details)
