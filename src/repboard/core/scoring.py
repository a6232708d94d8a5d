"""
Consistency score computation.

score = total × 2 + last7 × 5 + last30 × 3 + uniqueDays

Recent activity is rewarded most heavily; uniqueDays rewards distinct
training days over several same-day sessions.  All functions are pure.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from .calendar import calendar_date, to_utc
from .models import DEFAULT_SETTINGS, EngineSettings, UserRef, UserScoreEntry, WorkoutRecord
from .validation import check_records

logger = logging.getLogger(__name__)


def consistency_score(
    total: int,
    last7: int,
    last30: int,
    unique_days: int,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> int:
    """
    Weighted combination of activity counts.

    Args:
        total: All-time record count
        last7: Records inside the short window
        last30: Records inside the long window
        unique_days: Distinct calendar dates with a record
        settings: Weights to apply

    Returns:
        Integer consistency score
    """
    return (
        total * settings.weight_total
        + last7 * settings.weight_last7
        + last30 * settings.weight_last30
        + unique_days * settings.weight_unique_days
    )


def score_user(
    user_id: str,
    name: str,
    records: Sequence[WorkoutRecord],
    now: datetime,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> UserScoreEntry:
    """
    Build the leaderboard row for one user.

    Window boundaries are inclusive: a record exactly N days old counts
    toward the N-day window.

    Args:
        user_id: Owning user
        name: Display name
        records: That user's records (any order)
        now: Reference instant
        settings: Weights and window lengths

    Returns:
        UserScoreEntry for the user
    """
    now_utc = to_utc(now)
    short_cutoff = now_utc - timedelta(days=settings.short_window_days)
    long_cutoff = now_utc - timedelta(days=settings.long_window_days)

    instants = [to_utc(r.date) for r in records]
    total = len(instants)
    last7 = sum(1 for t in instants if t >= short_cutoff)
    last30 = sum(1 for t in instants if t >= long_cutoff)
    unique_days = len({calendar_date(t) for t in instants})

    return UserScoreEntry(
        user_id=user_id,
        name=name,
        total=total,
        last7=last7,
        last30=last30,
        unique_days=unique_days,
        score=consistency_score(total, last7, last30, unique_days, settings),
    )


def group_by_user(records: Iterable[WorkoutRecord]) -> dict[str, list[WorkoutRecord]]:
    """Group records by owning user id, preserving first-seen order."""
    grouped: dict[str, list[WorkoutRecord]] = {}
    for record in records:
        grouped.setdefault(record.user_id, []).append(record)
    return grouped


def compute_scores(
    records: Sequence[WorkoutRecord],
    users: Sequence[UserRef],
    now: datetime,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> list[UserScoreEntry]:
    """
    Score every known user plus any user id that only appears on records.

    Directory users come first, in directory order; users with no records
    get an all-zero entry.  Record-only user ids follow in ascending id
    order with the placeholder name.

    Args:
        records: Full record snapshot spanning all users
        users: User directory
        now: Reference instant
        settings: Weights, windows and placeholder name

    Returns:
        Unsorted list of UserScoreEntry (see ranking.rank_entries)

    Raises:
        InputContractError: If any record is malformed
    """
    check_records(records)

    by_user = group_by_user(records)
    seen: set[str] = set()

    entries: list[UserScoreEntry] = []
    for user in users:
        if user.user_id in seen:
            logger.debug("Skipping duplicate directory entry for user %s", user.user_id)
            continue
        seen.add(user.user_id)
        entries.append(
            score_user(user.user_id, user.name, by_user.get(user.user_id, []), now, settings)
        )

    orphans = sorted(uid for uid in by_user if uid not in seen)
    for uid in orphans:
        entries.append(score_user(uid, settings.unknown_user_name, by_user[uid], now, settings))

    if orphans:
        logger.debug("Scored %d record-only user id(s) without a directory entry", len(orphans))
    logger.debug("Scored %d users from %d records", len(entries), len(records))
    return entries
