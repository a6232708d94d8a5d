"""
JSONL-based workout storage.

Implements the record-source interface the engine's callers read from:
list_all_workouts(), list_user_workouts() and list_users().
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Sequence

from ..core.calendar import to_utc
from ..core.config import DATA_DIR_NAME, DEFAULT_WORKOUT_NAME, USERS_FILE_NAME, WORKOUTS_FILE_NAME
from ..core.models import ExerciseEntry, UserRef, WorkoutRecord
from .serializers import (
    ValidationError,
    dict_to_user,
    json_line_to_workout,
    user_to_dict,
    workout_to_json_line,
)

logger = logging.getLogger(__name__)


class WorkoutStore:
    """
    Manages workouts and the user directory inside one data directory.

    Layout:
    - users.json: JSON list of {"id", "name"} in registration order
    - workouts.jsonl: one workout record per line, in logging order
    """

    def __init__(self, data_dir: str | Path):
        """
        Initialize the store.

        Args:
            data_dir: Directory holding users.json and workouts.jsonl
        """
        self.data_dir = Path(data_dir)
        self.users_path = self.data_dir / USERS_FILE_NAME
        self.workouts_path = self.data_dir / WORKOUTS_FILE_NAME

    def exists(self) -> bool:
        """Check if the store has been initialized."""
        return self.users_path.exists() and self.workouts_path.exists()

    def init(self) -> None:
        """
        Create the data directory and empty files if missing.
        """
        self.data_dir.mkdir(parents=True, exist_ok=True)

        if not self.users_path.exists():
            self.users_path.write_text("[]\n")
        if not self.workouts_path.exists():
            self.workouts_path.touch()

    def _require(self) -> None:
        if not self.exists():
            raise FileNotFoundError(
                f"Data directory not initialized: {self.data_dir}. Run 'init' first."
            )

    # ── Users ────────────────────────────────────────────────────────────────

    def list_users(self) -> list[UserRef]:
        """
        Load the user directory in registration order.

        Raises:
            FileNotFoundError: If the store is not initialized
            ValidationError: If users.json is malformed
        """
        self._require()
        try:
            with open(self.users_path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Error parsing {self.users_path}: {e}") from e
        if not isinstance(data, list):
            raise ValidationError(f"{self.users_path} must contain a JSON list")
        return [dict_to_user(item) for item in data]

    def get_user(self, user_id: str) -> UserRef | None:
        """Return the directory entry for *user_id*, or None."""
        for user in self.list_users():
            if user.user_id == user_id:
                return user
        return None

    def add_user(self, name: str, user_id: str | None = None) -> UserRef:
        """
        Register a user.

        Args:
            name: Display name
            user_id: Explicit id; a random hex id is generated when omitted

        Returns:
            The new UserRef

        Raises:
            ValueError: If the name is blank or the id is already taken
        """
        if not name.strip():
            raise ValueError("User name cannot be empty")

        users = self.list_users()
        user = UserRef(user_id=user_id or uuid.uuid4().hex, name=name.strip())
        if any(u.user_id == user.user_id for u in users):
            raise ValueError(f"User id already exists: {user.user_id}")

        users.append(user)
        self._write_users(users)
        logger.debug("Added user %s (%s)", user.user_id, user.name)
        return user

    def _write_users(self, users: Sequence[UserRef]) -> None:
        with open(self.users_path, "w") as f:
            json.dump([user_to_dict(u) for u in users], f, indent=2)

    # ── Workouts ─────────────────────────────────────────────────────────────

    def list_all_workouts(self) -> list[WorkoutRecord]:
        """
        Load every workout, in file (logging) order.

        Raises:
            FileNotFoundError: If the store is not initialized
            ValidationError: If a line cannot be parsed
        """
        self._require()

        records: list[WorkoutRecord] = []
        with open(self.workouts_path, "r") as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    records.append(json_line_to_workout(line))
                except ValidationError as e:
                    raise ValidationError(
                        f"Error parsing line {line_num} in {self.workouts_path}: {e}"
                    ) from e

        logger.debug("Loaded %d workouts from %s", len(records), self.workouts_path)
        return records

    def list_user_workouts(self, user_id: str) -> list[WorkoutRecord]:
        """
        Workouts owned by *user_id*, newest first.

        Records on the same instant keep their logging order.
        """
        own = [r for r in self.list_all_workouts() if r.user_id == user_id]
        own.sort(key=lambda r: to_utc(r.date), reverse=True)
        return own

    def add_workout(
        self,
        user_id: str,
        exercises: Sequence[ExerciseEntry],
        date: datetime,
        name: str | None = None,
        duration_minutes: int | None = None,
        notes: str | None = None,
    ) -> WorkoutRecord:
        """
        Append a workout for *user_id*.

        Exercise rows with a blank name are dropped; at least one row must
        remain.

        Returns:
            The stored record with its newly assigned id

        Raises:
            ValueError: If no named exercise remains or duration is negative
        """
        self._require()

        kept = tuple(e for e in exercises if e.name.strip())
        if not kept:
            raise ValueError("A workout needs at least one named exercise")
        if duration_minutes is not None and duration_minutes < 0:
            raise ValueError("duration_minutes must be non-negative")

        record = WorkoutRecord(
            id=uuid.uuid4().hex,
            user_id=user_id,
            date=to_utc(date),
            exercises=kept,
            name=(name or "").strip() or DEFAULT_WORKOUT_NAME,
            duration_minutes=duration_minutes,
            notes=notes,
        )
        with open(self.workouts_path, "a") as f:
            f.write(workout_to_json_line(record) + "\n")

        logger.debug("Appended workout %s for user %s", record.id, user_id)
        return record

    def delete_workout(self, workout_id: str, user_id: str) -> WorkoutRecord:
        """
        Delete one of *user_id*'s workouts.

        Returns:
            The deleted record

        Raises:
            KeyError: If no workout with that id belongs to the user
        """
        records = self.list_all_workouts()
        for i, record in enumerate(records):
            if record.id == workout_id and record.user_id == user_id:
                del records[i]
                self._write_workouts(records)
                logger.debug("Deleted workout %s", workout_id)
                return record
        raise KeyError(f"Workout not found: {workout_id}")

    def _write_workouts(self, records: Sequence[WorkoutRecord]) -> None:
        with open(self.workouts_path, "w") as f:
            for record in records:
                f.write(workout_to_json_line(record) + "\n")


def get_default_data_dir() -> Path:
    """Default data directory: ~/.repboard"""
    return Path.home() / DATA_DIR_NAME
