"""
ASCII charts for progress visualization.

Creates terminal-friendly bar charts from progress summaries.
"""

from typing import Sequence

from .models import DailyCount, WeeklyVolume


def create_simple_bar_chart(
    labels: list[str],
    values: list[float],
    width: int = 40,
    title: str = "",
    value_format: str = "{:.1f}",
) -> str:
    """
    Create a simple horizontal bar chart.

    Args:
        labels: Labels for each bar
        values: Values for each bar
        width: Maximum bar width
        title: Chart title
        value_format: Format string applied to each value

    Returns:
        ASCII bar chart string
    """
    if not values:
        return "No data to display."

    max_val = max(values)
    max_label_len = max(len(l) for l in labels) if labels else 0

    lines = []

    if title:
        lines.append(title)
        lines.append("─" * (max_label_len + width + 5))

    for label, value in zip(labels, values):
        bar_len = int((value / max_val) * width) if max_val > 0 else 0
        bar = "█" * bar_len
        lines.append(f"{label:>{max_label_len}} │{bar} {value_format.format(value)}")

    return "\n".join(lines)


def create_daily_activity_chart(days: Sequence[DailyCount], width: int = 30) -> str:
    """
    Chart of sessions per day for the trailing week.

    Labels are "Mon 13" style so repeated weekday names stay distinct.
    """
    labels = [f"{d.weekday_label} {d.day.day:02d}" for d in days]
    values = [float(d.count) for d in days]
    return create_simple_bar_chart(
        labels, values, width=width, title="This Week (sessions/day)", value_format="{:.0f}"
    )


def create_weekly_volume_chart(weeks: Sequence[WeeklyVolume], width: int = 40) -> str:
    """
    Chart of training volume per ISO week.

    Args:
        weeks: Weekly volume series, oldest first

    Returns:
        ASCII chart string
    """
    if not weeks:
        return "No training volume yet."

    labels = [f"wk {w.label}" for w in weeks]
    values = [float(w.volume) for w in weeks]
    return create_simple_bar_chart(
        labels, values, width=width, title="Weekly Volume (sets × reps × kg)", value_format="{:,.0f}"
    )
