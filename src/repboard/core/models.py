"""
Data models for repboard.

Workout records are read-only snapshots supplied by a record source; the
derived types (score entries, progress summaries) are produced by the
engine and never persisted.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Protocol, Sequence

from .config import (
    DAILY_WINDOW_DAYS,
    DEFAULT_WORKOUT_NAME,
    LONG_WINDOW_DAYS,
    PERSONAL_RECORD_LIMIT,
    SHORT_WINDOW_DAYS,
    UNKNOWN_USER_NAME,
    WEEKLY_VOLUME_WEEKS,
    WEIGHT_LAST7,
    WEIGHT_LAST30,
    WEIGHT_TOTAL,
    WEIGHT_UNIQUE_DAYS,
)


@dataclass(frozen=True)
class ExerciseEntry:
    """
    One exercise performed within a session.

    weight is in kilograms; 0 means bodyweight or unspecified.
    """

    name: str
    sets: int
    reps: int
    weight: float = 0.0
    notes: str | None = None


@dataclass(frozen=True)
class WorkoutRecord:
    """
    One logged session, owned by exactly one user.

    ``date`` is the instant the session happened, which may differ from
    when it was logged.  Naive datetimes are interpreted as UTC.
    """

    id: str
    user_id: str
    date: datetime
    exercises: tuple[ExerciseEntry, ...] = ()
    name: str = DEFAULT_WORKOUT_NAME
    duration_minutes: int | None = None
    notes: str | None = None


@dataclass(frozen=True)
class UserRef:
    """A row of the user directory."""

    user_id: str
    name: str

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("user_id must be non-empty")


@dataclass(frozen=True)
class UserScoreEntry:
    """One leaderboard row."""

    user_id: str
    name: str
    total: int = 0
    last7: int = 0
    last30: int = 0
    unique_days: int = 0
    score: int = 0


@dataclass(frozen=True)
class DailyCount:
    """Number of sessions logged on one calendar day."""

    day: date
    count: int

    @property
    def weekday_label(self) -> str:
        return self.day.strftime("%a")


@dataclass(frozen=True)
class WeeklyVolume:
    """Training volume for one Monday-starting ISO week."""

    week_start: date
    volume: float

    @property
    def label(self) -> str:
        return self.week_start.isoformat()


@dataclass(frozen=True)
class PersonalRecord:
    """
    Best marks ever logged for one exercise name.

    max_weight and max_sets are tracked independently and need not come
    from the same entry.
    """

    exercise: str
    max_weight: float
    max_sets: int


@dataclass(frozen=True)
class ProgressSummary:
    """Per-user analytics derived from that user's records."""

    daily_counts: tuple[DailyCount, ...]
    weekly_volume: tuple[WeeklyVolume, ...] = ()
    personal_records: tuple[PersonalRecord, ...] = ()
    total_volume: float = 0
    session_count: int = 0
    distinct_exercises: int = 0

    @property
    def has_data(self) -> bool:
        """False when the user has not logged anything yet."""
        return self.session_count > 0


@dataclass(frozen=True)
class RecentActivity:
    """A user's latest sessions and the totals across just those sessions."""

    workouts: tuple[WorkoutRecord, ...] = ()
    total_sets: int = 0
    exercise_count: int = 0

    @property
    def session_count(self) -> int:
        return len(self.workouts)


@dataclass(frozen=True)
class EngineSettings:
    """
    Tunable parameters for scoring and aggregation.

    Defaults mirror core/config.py; see config_loader.load_engine_settings()
    for YAML overrides.
    """

    weight_total: int = WEIGHT_TOTAL
    weight_last7: int = WEIGHT_LAST7
    weight_last30: int = WEIGHT_LAST30
    weight_unique_days: int = WEIGHT_UNIQUE_DAYS
    short_window_days: int = SHORT_WINDOW_DAYS
    long_window_days: int = LONG_WINDOW_DAYS
    daily_window_days: int = DAILY_WINDOW_DAYS
    weekly_volume_weeks: int = WEEKLY_VOLUME_WEEKS
    personal_record_limit: int = PERSONAL_RECORD_LIMIT
    unknown_user_name: str = UNKNOWN_USER_NAME

    def __post_init__(self) -> None:
        """Validate settings."""
        counts = (
            "weight_total",
            "weight_last7",
            "weight_last30",
            "weight_unique_days",
            "short_window_days",
            "long_window_days",
            "daily_window_days",
            "weekly_volume_weeks",
            "personal_record_limit",
        )
        for name in counts:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in counts[:4]:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        for name in counts[4:]:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if not isinstance(self.unknown_user_name, str) or not self.unknown_user_name.strip():
            raise ValueError("unknown_user_name must be non-empty")


DEFAULT_SETTINGS = EngineSettings()


class WorkoutSource(Protocol):
    """Read interface the engine's callers fetch snapshots from."""

    def list_all_workouts(self) -> Sequence[WorkoutRecord]: ...

    def list_user_workouts(self, user_id: str) -> Sequence[WorkoutRecord]: ...

    def list_users(self) -> Sequence[UserRef]: ...


@dataclass
class Snapshot:
    """
    Records plus user directory fetched together for one request.
    """

    records: list[WorkoutRecord] = field(default_factory=list)
    users: list[UserRef] = field(default_factory=list)

    @classmethod
    def from_source(cls, source: WorkoutSource) -> "Snapshot":
        return cls(records=list(source.list_all_workouts()), users=list(source.list_users()))
