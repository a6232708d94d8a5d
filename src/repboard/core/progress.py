"""
Per-user progress aggregation.

Volume of one exercise entry is sets × reps × max(weight, 1); the floor
keeps bodyweight work (weight 0) proportional to sets × reps.

dailyCounts is dense (always one entry per day of the window), while
weeklyVolume is sparse (weeks without records are never emitted).
"""

import logging
from collections import Counter
from datetime import date, datetime
from typing import Sequence

from .calendar import calendar_date, days_ending, to_utc, week_start
from .config import RECENT_WORKOUT_LIMIT, VOLUME_WEIGHT_FLOOR
from .models import (
    DEFAULT_SETTINGS,
    DailyCount,
    EngineSettings,
    ExerciseEntry,
    PersonalRecord,
    ProgressSummary,
    RecentActivity,
    WeeklyVolume,
    WorkoutRecord,
)
from .validation import check_records

logger = logging.getLogger(__name__)


def entry_volume(entry: ExerciseEntry) -> float:
    """sets × reps × max(weight, 1) for a single exercise entry."""
    return entry.sets * entry.reps * max(entry.weight, VOLUME_WEIGHT_FLOOR)


def record_volume(record: WorkoutRecord) -> float:
    """Total volume of every exercise entry in one record."""
    return sum(entry_volume(e) for e in record.exercises)


def total_volume(records: Sequence[WorkoutRecord]) -> float:
    """Total volume across all records."""
    return sum(record_volume(r) for r in records)


def daily_counts(
    records: Sequence[WorkoutRecord],
    now: datetime,
    days: int = DEFAULT_SETTINGS.daily_window_days,
) -> list[DailyCount]:
    """
    Session counts for each of the *days* calendar days ending today.

    Args:
        records: One user's records
        now: Reference instant; its UTC date is "today"
        days: Window length

    Returns:
        Exactly *days* entries, oldest first, zero-filled
    """
    per_day = Counter(calendar_date(r.date) for r in records)
    return [DailyCount(day=d, count=per_day.get(d, 0)) for d in days_ending(calendar_date(now), days)]


def weekly_volume(
    records: Sequence[WorkoutRecord],
    weeks: int = DEFAULT_SETTINGS.weekly_volume_weeks,
) -> list[WeeklyVolume]:
    """
    Volume per Monday-starting ISO week.

    Args:
        records: One user's records
        weeks: Maximum number of (most recent) non-empty weeks to keep

    Returns:
        Chronological list of at most *weeks* entries, oldest first
    """
    buckets: dict[date, float] = {}
    for record in records:
        monday = week_start(calendar_date(record.date))
        buckets[monday] = buckets.get(monday, 0) + record_volume(record)

    ordered = [WeeklyVolume(week_start=k, volume=buckets[k]) for k in sorted(buckets)]
    return ordered[-weeks:]


def personal_records(
    records: Sequence[WorkoutRecord],
    limit: int = DEFAULT_SETTINGS.personal_record_limit,
) -> list[PersonalRecord]:
    """
    Best weight and best set count per exercise name.

    Names are matched exactly.  The two maxima are independent of each
    other.  Results are sorted by max weight descending; equal weights keep
    the order in which the exercise names were first seen.

    Args:
        records: One user's records
        limit: Number of exercises to keep

    Returns:
        At most *limit* PersonalRecord entries
    """
    best: dict[str, list[float]] = {}  # name -> [max_weight, max_sets]
    for record in records:
        for entry in record.exercises:
            current = best.get(entry.name)
            if current is None:
                best[entry.name] = [entry.weight, entry.sets]
                continue
            if entry.weight > current[0]:
                current[0] = entry.weight
            if entry.sets > current[1]:
                current[1] = entry.sets

    prs = [
        PersonalRecord(exercise=name, max_weight=w, max_sets=int(s))
        for name, (w, s) in best.items()
    ]
    prs.sort(key=lambda pr: -pr.max_weight)
    return prs[:limit]


def distinct_exercise_count(records: Sequence[WorkoutRecord]) -> int:
    """Number of distinct exercise names across all records."""
    return len({e.name for r in records for e in r.exercises})


def summarize_progress(
    records: Sequence[WorkoutRecord],
    now: datetime,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> ProgressSummary:
    """
    Compute the full progress summary for one user.

    An empty record set is not an error: it yields seven zero days,
    no weeks, no personal records and zero volume.

    Args:
        records: One user's records (any order)
        now: Reference instant
        settings: Window and selection sizes

    Returns:
        ProgressSummary

    Raises:
        InputContractError: If any record is malformed
    """
    check_records(records)

    summary = ProgressSummary(
        daily_counts=tuple(daily_counts(records, now, settings.daily_window_days)),
        weekly_volume=tuple(weekly_volume(records, settings.weekly_volume_weeks)),
        personal_records=tuple(personal_records(records, settings.personal_record_limit)),
        total_volume=total_volume(records),
        session_count=len(records),
        distinct_exercises=distinct_exercise_count(records),
    )
    logger.debug(
        "Progress over %d records: %d weeks, %d PRs",
        len(records),
        len(summary.weekly_volume),
        len(summary.personal_records),
    )
    return summary


def recent_activity(
    records: Sequence[WorkoutRecord],
    limit: int = RECENT_WORKOUT_LIMIT,
) -> RecentActivity:
    """
    Latest *limit* sessions, newest first, with set and exercise totals.

    Records on the same instant keep their input order.

    Raises:
        InputContractError: If any record is malformed
        ValueError: If limit is not positive
    """
    if limit <= 0:
        raise ValueError("limit must be positive")
    check_records(records)

    latest = sorted(records, key=lambda r: to_utc(r.date), reverse=True)[:limit]
    return RecentActivity(
        workouts=tuple(latest),
        total_sets=sum(e.sets for r in latest for e in r.exercises),
        exercise_count=sum(len(r.exercises) for r in latest),
    )
