"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of leaderboard and progress data.
"""

from typing import Sequence

from rich.console import Console
from rich.table import Table

from ..core.ascii_plot import create_daily_activity_chart, create_weekly_volume_chart
from ..core.calendar import to_utc
from ..core.exercises import ExerciseInfo
from ..core.models import ProgressSummary, RecentActivity, UserRef, UserScoreEntry, WorkoutRecord
from ..core.progress import record_volume
from ..core.ranking import find_rank, score_share, top_entries

console = Console()

MEDALS = ("🥇", "🥈", "🥉")
SCORE_BAR_WIDTH = 20


def _fmt_weight(kg: float) -> str:
    return f"{kg:g} kg" if kg > 0 else "BW"


def format_leaderboard_table(
    ranked: Sequence[UserScoreEntry],
    viewer_id: str | None = None,
) -> Table:
    """
    Create a Rich table for the ranked leaderboard.

    Args:
        ranked: Entries in rank order
        viewer_id: User whose row is highlighted

    Returns:
        Rich Table object
    """
    table = Table(title="Consistency Leaderboard", show_header=True, header_style="bold")

    table.add_column("#", justify="right", style="dim")
    table.add_column("Name")
    table.add_column("Score", justify="right", style="bold")
    table.add_column("", no_wrap=True)
    table.add_column("Total", justify="right")
    table.add_column("7d", justify="right", style="green")
    table.add_column("30d", justify="right", style="cyan")
    table.add_column("Days", justify="right")

    for rank, entry in enumerate(ranked, 1):
        medal = MEDALS[rank - 1] if rank <= len(MEDALS) and entry.score > 0 else str(rank)
        bar = "█" * int(score_share(entry, ranked) * SCORE_BAR_WIDTH)
        name = entry.name
        style = None
        if viewer_id is not None and entry.user_id == viewer_id:
            name = f"{name} (you)"
            style = "bold yellow"
        table.add_row(
            medal,
            name,
            str(entry.score),
            bar,
            str(entry.total),
            str(entry.last7),
            str(entry.last30),
            str(entry.unique_days),
            style=style,
        )

    return table


def print_leaderboard(ranked: Sequence[UserScoreEntry], viewer_id: str | None = None) -> None:
    """
    Print the leaderboard with the viewer's rank banner.

    Args:
        ranked: Entries in rank order
        viewer_id: Optional user to highlight
    """
    if not ranked:
        console.print("[yellow]No users yet. Add one with 'add-user'.[/yellow]")
        return

    if viewer_id is not None:
        rank = find_rank(ranked, viewer_id)
        if rank is None:
            print_warning(f"User {viewer_id} is not on the leaderboard.")
        else:
            console.print(f"[bold]Your rank:[/bold] #{rank} of {len(ranked)}")

    podium = [e for e in top_entries(ranked) if e.score > 0]
    if podium:
        console.print(
            "  ".join(f"{MEDALS[i]} {e.name} ({e.score})" for i, e in enumerate(podium))
        )

    console.print(format_leaderboard_table(ranked, viewer_id))
    console.print(
        "[dim]Score = total ×2 + last 7 days ×5 + last 30 days ×3 + unique training days.[/dim]"
    )


def format_workout_table(records: Sequence[WorkoutRecord]) -> Table:
    """
    Create a Rich table for a user's workouts.

    Args:
        records: Workouts to display (already ordered)

    Returns:
        Rich Table object
    """
    table = Table(title="Workouts", show_header=True, header_style="bold")

    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Exercises")
    table.add_column("Min", justify="right")
    table.add_column("Volume", justify="right", style="bold")
    table.add_column("ID", style="dim", no_wrap=True)

    for record in records:
        exercises = ", ".join(
            f"{e.name} {e.sets}×{e.reps} @ {_fmt_weight(e.weight)}" for e in record.exercises
        )
        table.add_row(
            to_utc(record.date).strftime("%Y-%m-%d %H:%M"),
            record.name,
            exercises or "-",
            str(record.duration_minutes) if record.duration_minutes is not None else "-",
            f"{record_volume(record):,.0f}",
            record.id,
        )

    return table


def print_workouts(records: Sequence[WorkoutRecord]) -> None:
    if not records:
        console.print("[yellow]No workouts logged yet.[/yellow]")
        return
    console.print(format_workout_table(records))


def print_recent(name: str, activity: RecentActivity) -> None:
    """Latest sessions with their session, set and exercise totals."""
    console.print(f"\n[bold]Recent activity: {name}[/bold]")
    if not activity.workouts:
        console.print("[yellow]No workouts logged yet.[/yellow] Start your first session with 'log-workout'.")
        return

    console.print(
        f"Sessions: [bold]{activity.session_count}[/bold]   "
        f"Total sets: [bold]{activity.total_sets}[/bold]   "
        f"Exercises: [bold]{activity.exercise_count}[/bold]"
    )
    for record in activity.workouts:
        console.print(
            f"  [cyan]{to_utc(record.date).strftime('%a %d %b')}[/cyan]  {record.name}  "
            f"[dim]{len(record.exercises)} exercise(s)[/dim]"
        )


def print_progress(name: str, summary: ProgressSummary) -> None:
    """
    Print headline stats, activity charts and personal records.

    A user without records gets a dedicated "no data yet" message instead
    of empty charts.
    """
    console.print()
    console.print(f"[bold cyan]Progress — {name}[/bold cyan]")

    if not summary.has_data:
        console.print("[yellow]No data yet.[/yellow] Log workouts to see progress charts.")
        return

    console.print(
        f"  Sessions: [bold]{summary.session_count}[/bold]   "
        f"Volume: [bold]{round(summary.total_volume / 1000)}k[/bold]   "
        f"Exercises: [bold]{summary.distinct_exercises}[/bold]"
    )
    console.print()
    console.print(create_daily_activity_chart(summary.daily_counts))
    console.print()
    console.print(create_weekly_volume_chart(summary.weekly_volume))

    if summary.personal_records:
        console.print()
        table = Table(title="Personal Records", show_header=True, header_style="bold")
        table.add_column("Exercise")
        table.add_column("Max weight", justify="right", style="blue")
        table.add_column("Max sets", justify="right")
        for pr in summary.personal_records:
            table.add_row(
                pr.exercise,
                f"{pr.max_weight:g} kg" if pr.max_weight > 0 else "-",
                str(pr.max_sets),
            )
        console.print(table)
    console.print()


def print_users(users: Sequence[UserRef]) -> None:
    if not users:
        console.print("[yellow]No users registered yet.[/yellow]")
        return

    table = Table(title="Users", show_header=True, header_style="bold")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    for user in users:
        table.add_row(user.user_id, user.name)
    console.print(table)


def print_exercises(exercises: Sequence[ExerciseInfo], details: bool = False) -> None:
    """Library table; with *details*, each exercise's description and instructions follow it."""
    if not exercises:
        console.print("[yellow]No matching exercises.[/yellow]")
        return

    table = Table(title="Exercise Library", show_header=True, header_style="bold")
    table.add_column("Name", style="bold")
    table.add_column("Muscle group", style="cyan")
    table.add_column("Also works")
    table.add_column("Level")
    table.add_column("Equipment")
    for ex in exercises:
        table.add_row(
            ex.name,
            ex.muscle_group,
            ", ".join(ex.secondary_muscles) or "-",
            ex.difficulty,
            ex.equipment,
        )
    console.print(table)

    if details:
        for ex in exercises:
            console.print(f"\n[bold]{ex.name}[/bold] [dim]({ex.muscle_group})[/dim]")
            console.print(f"  {ex.description}")
            if ex.instructions:
                console.print(f"  [cyan]How:[/cyan] {ex.instructions}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{message} [y/N]: ")
    return response.lower() in ("y", "yes")
