"""
JSON serialization for workout data models.

Handles conversion between dataclasses and JSON-compatible dicts, and
parsing of the compact exercise strings accepted on the command line.
"""

import json
import math
import re
from datetime import datetime
from typing import Any

from ..core.calendar import parse_instant, to_utc
from ..core.config import DEFAULT_WORKOUT_NAME
from ..core.models import ExerciseEntry, UserRef, WorkoutRecord


class ValidationError(Exception):
    """Raised when stored or user-supplied data fails validation."""

    pass


def validate_date(value: str) -> datetime:
    """
    Parse an ISO-8601 date or datetime string.

    Args:
        value: e.g. "2026-02-16", "2026-02-16T18:30:00", "2026-02-16T18:30:00Z"

    Returns:
        Aware UTC datetime

    Raises:
        ValidationError: If the string is not a valid ISO-8601 instant
    """
    if not isinstance(value, str):
        raise ValidationError(f"Invalid date: {value!r}. Expected an ISO-8601 string")
    try:
        return parse_instant(value)
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value!r}. Expected ISO-8601 (YYYY-MM-DD[THH:MM[:SS]])") from e


def validate_non_negative(value: int | float, name: str) -> int | float:
    """
    Validate that a value is a finite, non-negative number.

    Raises:
        ValidationError: If value is not a number, is NaN or infinite, or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def exercise_entry_to_dict(entry: ExerciseEntry) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": entry.name,
        "sets": entry.sets,
        "reps": entry.reps,
        "weight": entry.weight,
    }
    if entry.notes:
        d["notes"] = entry.notes
    return d


def dict_to_exercise_entry(data: dict[str, Any]) -> ExerciseEntry:
    """
    Convert dict to ExerciseEntry.

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Exercise entry must be an object, got {data!r}")
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"Invalid exercise name: {name!r}")
    validate_non_negative(data.get("sets", 0), "sets")
    validate_non_negative(data.get("reps", 0), "reps")
    validate_non_negative(data.get("weight", 0), "weight")

    return ExerciseEntry(
        name=name,
        sets=int(data.get("sets", 0)),
        reps=int(data.get("reps", 0)),
        weight=float(data.get("weight", 0.0)),
        notes=data.get("notes"),
    )


def workout_to_dict(record: WorkoutRecord) -> dict[str, Any]:
    """
    Convert WorkoutRecord to JSON-compatible dict.

    Dates are written as ISO-8601 UTC with an explicit offset.
    """
    return {
        "id": record.id,
        "user_id": record.user_id,
        "name": record.name,
        "date": to_utc(record.date).isoformat(),
        "exercises": [exercise_entry_to_dict(e) for e in record.exercises],
        "duration_minutes": record.duration_minutes,
        "notes": record.notes,
    }


def dict_to_workout(data: dict[str, Any]) -> WorkoutRecord:
    """
    Convert dict to WorkoutRecord.

    Raises:
        ValidationError: If data is invalid
        KeyError: If a required key (id, user_id, date) is missing
    """
    duration = data.get("duration_minutes")
    if duration is not None:
        validate_non_negative(duration, "duration_minutes")
    exercises = data.get("exercises", [])
    if not isinstance(exercises, list):
        raise ValidationError(f"exercises must be a list, got {exercises!r}")

    return WorkoutRecord(
        id=str(data["id"]),
        user_id=str(data["user_id"]),
        date=validate_date(data["date"]),
        exercises=tuple(dict_to_exercise_entry(e) for e in exercises),
        name=data.get("name") or DEFAULT_WORKOUT_NAME,
        duration_minutes=int(duration) if duration is not None else None,
        notes=data.get("notes"),
    )


def workout_to_json_line(record: WorkoutRecord) -> str:
    """Serialize a record to a single JSON line (no trailing newline)."""
    return json.dumps(workout_to_dict(record), separators=(",", ":"))


def json_line_to_workout(line: str) -> WorkoutRecord:
    """
    Parse a JSON line into a WorkoutRecord.

    Raises:
        ValidationError: If the line is not valid JSON or the data is invalid
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError("Workout line must be a JSON object")
    try:
        return dict_to_workout(data)
    except KeyError as e:
        raise ValidationError(f"Missing field: {e}") from e


def user_to_dict(user: UserRef) -> dict[str, Any]:
    return {"id": user.user_id, "name": user.name}


def dict_to_user(data: dict[str, Any]) -> UserRef:
    """
    Convert dict to UserRef.

    Raises:
        ValidationError: If id or name is missing
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Invalid user record: {data!r}")
    user_id = data.get("id")
    name = data.get("name")
    if not user_id or not isinstance(name, str):
        raise ValidationError(f"Invalid user record: {data!r}")
    return UserRef(user_id=str(user_id), name=name)


_EXERCISE_RE = re.compile(
    r"^(?P<name>.+?)\s*:\s*(?P<sets>\d+)\s*[xX×]\s*(?P<reps>\d+)"
    r"(?:\s*@\s*\+?(?P<weight>\d+(?:\.\d+)?)\s*(?:kg)?)?$",
    re.IGNORECASE,
)


def parse_exercise_string(text: str) -> ExerciseEntry:
    """
    Parse one exercise given on the command line.

    Format:
        NAME:SETSxREPS[@WEIGHT[kg]]

    Examples:
        "Barbell Bench Press:3x10@60"   → 3 sets × 10 reps @ 60 kg
        "Pull-Up: 4x8"                  → bodyweight (weight 0)
        "Squat:5x5 @ 102.5kg"

    Args:
        text: Exercise string

    Returns:
        ExerciseEntry

    Raises:
        ValidationError: If format is invalid
    """
    if not text or not text.strip():
        raise ValidationError("Exercise string cannot be empty")

    m = _EXERCISE_RE.match(text.strip())
    if m is None:
        raise ValidationError(
            f"Invalid exercise format: '{text}'.\n"
            "Use: NAME:SETSxREPS[@WEIGHT] (e.g. 'Squat:5x5@100' or 'Pull-Up:4x8')."
        )

    return ExerciseEntry(
        name=m.group("name").strip(),
        sets=int(m.group("sets")),
        reps=int(m.group("reps")),
        weight=float(m.group("weight")) if m.group("weight") else 0.0,
    )
