"""
Response shaping for the boundary layer.

Field renaming and nesting only; no business logic.  Keys follow the
camelCase JSON contract consumed by the front end.
"""

from typing import Any, Sequence

from .calendar import to_utc
from .models import ProgressSummary, RecentActivity, UserScoreEntry


def score_entry_to_dict(entry: UserScoreEntry) -> dict[str, Any]:
    return {
        "userId": entry.user_id,
        "name": entry.name,
        "total": entry.total,
        "last7": entry.last7,
        "last30": entry.last30,
        "uniqueDays": entry.unique_days,
        "score": entry.score,
    }


def leaderboard_payload(ranked: Sequence[UserScoreEntry]) -> list[dict[str, Any]]:
    """
    Leaderboard response: ranked entries, best first.

    Args:
        ranked: Output of ranking.rank_entries

    Returns:
        List of JSON-compatible dicts in the same order
    """
    return [score_entry_to_dict(e) for e in ranked]


def progress_payload(summary: ProgressSummary) -> dict[str, Any]:
    """
    Progress response for one user.

    Args:
        summary: Output of progress.summarize_progress

    Returns:
        JSON-compatible dict
    """
    return {
        "dailyCounts": [
            {"day": d.day.isoformat(), "count": d.count} for d in summary.daily_counts
        ],
        "weeklyVolume": [
            {"week": w.label, "volume": w.volume} for w in summary.weekly_volume
        ],
        "personalRecords": [
            {"exercise": pr.exercise, "maxWeight": pr.max_weight, "maxSets": pr.max_sets}
            for pr in summary.personal_records
        ],
        "totalVolume": summary.total_volume,
        "sessionCount": summary.session_count,
        "distinctExercises": summary.distinct_exercises,
    }


def recent_payload(activity: RecentActivity) -> dict[str, Any]:
    """Recent-activity response: newest sessions first, plus their totals."""
    return {
        "workouts": [
            {
                "id": r.id,
                "name": r.name,
                "date": to_utc(r.date).isoformat(),
                "exercises": [e.name for e in r.exercises],
            }
            for r in activity.workouts
        ],
        "sessionCount": activity.session_count,
        "totalSets": activity.total_sets,
        "exerciseCount": activity.exercise_count,
    }
