"""
Tests for JSONL workout storage and serialization.
"""

import json
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from repboard.core.models import ExerciseEntry, UserRef, WorkoutRecord
from repboard.io.serializers import (
    ValidationError,
    dict_to_workout,
    json_line_to_workout,
    parse_exercise_string,
    validate_date,
    workout_to_dict,
    workout_to_json_line,
)
from repboard.io.workout_store import WorkoutStore


@pytest.fixture
def store():
    """Initialized store in a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        s = WorkoutStore(Path(tmpdir) / "data")
        s.init()
        yield s


T0 = datetime(2026, 3, 18, 12, 0, tzinfo=timezone.utc)


class TestParseExerciseString:
    def test_weighted(self):
        assert parse_exercise_string("Barbell Bench Press:3x10@60") == ExerciseEntry(
            "Barbell Bench Press", 3, 10, 60.0
        )

    def test_bodyweight(self):
        entry = parse_exercise_string("Pull-Up: 4x8")
        assert (entry.name, entry.sets, entry.reps, entry.weight) == ("Pull-Up", 4, 8, 0.0)

    def test_spacing_and_kg_suffix(self):
        entry = parse_exercise_string("Squat : 5 × 5 @ 102.5kg")
        assert (entry.name, entry.sets, entry.reps, entry.weight) == ("Squat", 5, 5, 102.5)

    @pytest.mark.parametrize("text", ["", "Squat", "Squat:5", "Squat:5x5@-10", ":3x10"])
    def test_invalid(self, text):
        with pytest.raises(ValidationError):
            parse_exercise_string(text)


class TestSerializers:
    def test_validate_date(self):
        assert validate_date("2026-03-18T12:00:00Z") == T0
        with pytest.raises(ValidationError):
            validate_date("yesterday")

    def test_dict_roundtrip_preserves_fields(self):
        record = WorkoutRecord(
            id="abc",
            user_id="alice",
            date=T0,
            exercises=(ExerciseEntry("Squat", 5, 5, 100.0, notes="belt"),),
            name="Leg day",
            duration_minutes=45,
            notes="felt good",
        )
        assert json_line_to_workout(workout_to_json_line(record)) == record

    def test_defaults_for_optional_fields(self):
        record = dict_to_workout({"id": 1, "user_id": "u", "date": "2026-03-18"})
        assert record.id == "1"
        assert record.name == "Workout"
        assert record.exercises == ()
        assert record.duration_minutes is None

    def test_negative_values_rejected(self):
        data = workout_to_dict(WorkoutRecord("a", "u", T0, (ExerciseEntry("Squat", 1, 1, 1.0),)))
        data["exercises"][0]["reps"] = -1
        with pytest.raises(ValidationError):
            dict_to_workout(data)

    def test_missing_field_is_validation_error(self):
        with pytest.raises(ValidationError):
            json_line_to_workout('{"id": "a", "date": "2026-03-18"}')


class TestUsers:
    def test_add_and_list_in_order(self, store):
        store.add_user("Alice", "alice")
        store.add_user("Bob", "bob")
        assert store.list_users() == [UserRef("alice", "Alice"), UserRef("bob", "Bob")]
        assert store.get_user("bob") == UserRef("bob", "Bob")
        assert store.get_user("nobody") is None

    def test_generated_id(self, store):
        user = store.add_user("  Carol ")
        assert user.name == "Carol"
        assert len(user.user_id) == 32

    def test_duplicate_id_rejected(self, store):
        store.add_user("Alice", "alice")
        with pytest.raises(ValueError):
            store.add_user("Alice 2", "alice")

    def test_uninitialized_store(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(FileNotFoundError):
                WorkoutStore(Path(tmpdir) / "missing").list_users()


class TestWorkouts:
    def test_add_assigns_id_and_persists(self, store):
        record = store.add_workout("alice", [ExerciseEntry("Squat", 5, 5, 100)], T0, name="Legs")

        assert record.id
        assert store.list_all_workouts() == [record]
        line = json.loads(store.workouts_path.read_text().splitlines()[0])
        assert line["date"] == "2026-03-18T12:00:00+00:00"

    def test_blank_rows_dropped(self, store):
        record = store.add_workout(
            "alice",
            [ExerciseEntry("  ", 3, 10, 0), ExerciseEntry("Plank", 3, 1, 0)],
            T0,
        )
        assert [e.name for e in record.exercises] == ["Plank"]
        assert record.name == "Workout"

    def test_no_named_exercise_rejected(self, store):
        with pytest.raises(ValueError):
            store.add_workout("alice", [ExerciseEntry("", 3, 10, 0)], T0)

    def test_user_workouts_newest_first(self, store):
        old = store.add_workout("alice", [ExerciseEntry("A", 1, 1, 0)], T0 - timedelta(days=3))
        new = store.add_workout("alice", [ExerciseEntry("B", 1, 1, 0)], T0)
        store.add_workout("bob", [ExerciseEntry("C", 1, 1, 0)], T0 + timedelta(days=1))
        mid = store.add_workout("alice", [ExerciseEntry("D", 1, 1, 0)], T0 - timedelta(days=1))

        assert [r.id for r in store.list_user_workouts("alice")] == [new.id, mid.id, old.id]
        assert len(store.list_all_workouts()) == 4

    def test_delete_own_workout(self, store):
        keep = store.add_workout("alice", [ExerciseEntry("A", 1, 1, 0)], T0)
        gone = store.add_workout("alice", [ExerciseEntry("B", 1, 1, 0)], T0)

        assert store.delete_workout(gone.id, "alice") == gone
        assert store.list_all_workouts() == [keep]

    def test_cannot_delete_someone_elses_workout(self, store):
        record = store.add_workout("alice", [ExerciseEntry("A", 1, 1, 0)], T0)
        with pytest.raises(KeyError):
            store.delete_workout(record.id, "bob")
        assert store.list_all_workouts() == [record]

    def test_corrupt_line_reports_line_number(self, store):
        store.add_workout("alice", [ExerciseEntry("A", 1, 1, 0)], T0)
        with open(store.workouts_path, "a") as f:
            f.write("{not json}\n")

        with pytest.raises(ValidationError, match="line 2"):
            store.list_all_workouts()


class TestStoredValueTypes:
    """Hand-edited files with wrong value types fail as ValidationError."""

    def _line(self, exercise) -> str:
        return json.dumps({
            "id": "w1", "user_id": "alice", "date": "2026-03-18", "exercises": [exercise],
        })

    @pytest.mark.parametrize(
        "exercise",
        [
            {"name": "Squat", "sets": "3", "reps": 5, "weight": 100},
            {"name": "Squat", "sets": True, "reps": 5, "weight": 100},
            {"name": "Squat", "sets": 3, "reps": None, "weight": 100},
            {"name": "Squat", "sets": 3, "reps": 5, "weight": float("nan")},
            {"name": "Squat", "sets": 3, "reps": 5, "weight": float("inf")},
            "Squat:3x5@100",
        ],
    )
    def test_bad_exercise_values(self, exercise):
        with pytest.raises(ValidationError):
            json_line_to_workout(self._line(exercise))

    def test_exercises_must_be_a_list(self):
        line = json.dumps({"id": "w1", "user_id": "a", "date": "2026-03-18", "exercises": "Squat"})
        with pytest.raises(ValidationError):
            json_line_to_workout(line)

    def test_string_duration_rejected(self):
        with pytest.raises(ValidationError):
            dict_to_workout({"id": "w1", "user_id": "a", "date": "2026-03-18", "duration_minutes": "45"})

    def test_wrong_type_in_store_file(self, store):
        with open(store.workouts_path, "a") as f:
            f.write(self._line({"name": "Squat", "sets": "3", "reps": 5, "weight": 100}) + "\n")

        with pytest.raises(ValidationError, match="line 1"):
            store.list_user_workouts("alice")

    @pytest.mark.parametrize("item", ["alice", 7, ["alice", "Alice"]])
    def test_user_item_not_an_object(self, store, item):
        with open(store.users_path, "w") as f:
            json.dump([item], f)

        with pytest.raises(ValidationError):
            store.list_users()
