"""
Input contract checks for record snapshots.

The engine rejects a whole computation when any record violates the
contract, so that a partially aggregated result is never returned.
"""

import math
from datetime import datetime
from typing import Iterable

from .models import WorkoutRecord


class InputContractError(ValueError):
    """
    Raised when a record reaching the engine is malformed.

    Attributes:
        record_id: Identifier of the offending record
        field: Dotted path of the offending field (e.g. "exercises[2].reps")
    """

    def __init__(self, record_id: str, field: str, message: str):
        self.record_id = record_id
        self.field = field
        super().__init__(f"record {record_id!r}, field {field!r}: {message}")


def _quantity_problem(value) -> str | None:
    """Describe why a set/rep/weight value is unusable, or None if it is fine."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f"expected a number, got {type(value).__name__}"
    if not math.isfinite(value):
        return f"must be finite, got {value}"
    if value < 0:
        return f"must be non-negative, got {value}"
    return None


def check_record(record: WorkoutRecord) -> None:
    """
    Verify a single record against the engine's input contract.

    Args:
        record: Record to check

    Raises:
        InputContractError: On the first violation found
    """
    if not isinstance(record.date, datetime):
        raise InputContractError(
            record.id, "date", f"expected a datetime, got {type(record.date).__name__}"
        )
    if record.duration_minutes is not None and record.duration_minutes < 0:
        raise InputContractError(record.id, "duration_minutes", "must be non-negative")

    for i, entry in enumerate(record.exercises):
        prefix = f"exercises[{i}]"
        if not isinstance(entry.name, str) or not entry.name:
            raise InputContractError(record.id, f"{prefix}.name", "must be a non-empty string")
        for name in ("sets", "reps", "weight"):
            problem = _quantity_problem(getattr(entry, name))
            if problem:
                raise InputContractError(record.id, f"{prefix}.{name}", problem)


def check_records(records: Iterable[WorkoutRecord]) -> None:
    """Check every record; raise on the first violation."""
    for record in records:
        check_record(record)
