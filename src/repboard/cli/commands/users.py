"""User directory commands: init, add-user, users."""

import json
from typing import Annotated, Optional

import typer

from ...io.serializers import ValidationError, user_to_dict
from .. import views
from ..app import DataDirOption, JsonOption, app, get_store


@app.command()
def init(data_dir: DataDirOption = None) -> None:
    """
    Create the data directory with an empty user list and workout log.
    """
    store = get_store(data_dir)
    already = store.exists()
    store.init()
    if already:
        views.print_info(f"Data directory already initialized: {store.data_dir}")
    else:
        views.print_success(f"Initialized data directory: {store.data_dir}")


@app.command("add-user")
def add_user(
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Display name"),
    ],
    user_id: Annotated[
        Optional[str],
        typer.Option("--user-id", "-u", help="Explicit user id (default: generated)"),
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """
    Register a user in the directory.
    """
    store = get_store(data_dir)
    try:
        user = store.add_user(name, user_id)
    except (FileNotFoundError, ValidationError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_success(f"Added user {user.name} (id: {user.user_id})")


@app.command()
def users(
    data_dir: DataDirOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    List registered users in directory order.
    """
    store = get_store(data_dir)
    try:
        directory = store.list_users()
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps([user_to_dict(u) for u in directory], indent=2))
        return

    views.print_users(directory)
