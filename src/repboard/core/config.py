"""
Configuration constants for the consistency scoring and progress engine.

All adjustable parameters are centralized here for easy tuning.
User overrides are merged on top of these by core/engine/config_loader.py.
"""

from typing import Final

# =============================================================================
# CONSISTENCY SCORE WEIGHTS
# =============================================================================
# score = total × W_TOTAL + last7 × W_LAST7 + last30 × W_LAST30 + uniqueDays × W_UNIQUE_DAYS

WEIGHT_TOTAL: Final[int] = 2  # Long-term engagement
WEIGHT_LAST7: Final[int] = 5  # Freshness bonus
WEIGHT_LAST30: Final[int] = 3  # Smooths short-term gaps
WEIGHT_UNIQUE_DAYS: Final[int] = 1  # Distinct training days

# =============================================================================
# ACTIVITY WINDOWS (days, inclusive lower boundary)
# =============================================================================

SHORT_WINDOW_DAYS: Final[int] = 7
LONG_WINDOW_DAYS: Final[int] = 30

# =============================================================================
# PROGRESS SUMMARY BOUNDS
# =============================================================================

DAILY_WINDOW_DAYS: Final[int] = 7  # Dense histogram ending today
WEEKLY_VOLUME_WEEKS: Final[int] = 6  # Most recent non-empty ISO weeks
PERSONAL_RECORD_LIMIT: Final[int] = 5  # Top exercises by max weight

# Floor applied to weight when computing volume so bodyweight work counts
VOLUME_WEIGHT_FLOOR: Final[float] = 1.0

# =============================================================================
# PRESENTATION / STORAGE
# =============================================================================

UNKNOWN_USER_NAME: Final[str] = "Unknown"
DEFAULT_WORKOUT_NAME: Final[str] = "Workout"
EXERCISE_SEARCH_LIMIT: Final[int] = 8
RECENT_WORKOUT_LIMIT: Final[int] = 3  # Sessions in the recent-activity summary

DATA_DIR_NAME: Final[str] = ".repboard"
USERS_FILE_NAME: Final[str] = "users.json"
WORKOUTS_FILE_NAME: Final[str] = "workouts.jsonl"
CONFIG_FILE_NAME: Final[str] = "repboard.yaml"
