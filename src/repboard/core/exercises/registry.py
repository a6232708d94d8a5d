"""
Exercise registry.

Use get_exercise() for an exact (case-sensitive) lookup and
search_exercises() for library browsing and the suggestions shown while
logging a workout.
"""

from ..config import EXERCISE_SEARCH_LIMIT
from .base import ExerciseInfo
from .library import DEFAULT_EXERCISES

EXERCISE_LIBRARY: dict[str, ExerciseInfo] = {ex.name: ex for ex in DEFAULT_EXERCISES}

# Primary muscle groups in first-seen library order
MUSCLE_GROUPS: tuple[str, ...] = tuple(dict.fromkeys(ex.muscle_group for ex in DEFAULT_EXERCISES))


def get_exercise(name: str) -> ExerciseInfo:
    """
    Return the ExerciseInfo with exactly this name.

    Raises:
        KeyError: If the name is not in the library
    """
    if name not in EXERCISE_LIBRARY:
        raise KeyError(f"Unknown exercise '{name}'")
    return EXERCISE_LIBRARY[name]


def search_exercises(
    query: str = "",
    limit: int = EXERCISE_SEARCH_LIMIT,
    muscle_group: str | None = None,
) -> list[ExerciseInfo]:
    """
    Case-insensitive substring search over exercise names and muscle groups.

    An empty query matches everything.  Results keep library order.

    Args:
        query: Text to look for in the name or primary muscle group
        limit: Maximum number of results
        muscle_group: Only return exercises whose primary group equals
            this one (case-insensitive); None means all groups

    Returns:
        At most *limit* matching exercises

    Raises:
        ValueError: If muscle_group is not one of MUSCLE_GROUPS
    """
    group = None
    if muscle_group is not None:
        group = muscle_group.strip().lower()
        if group not in {g.lower() for g in MUSCLE_GROUPS}:
            raise ValueError(
                f"Unknown muscle group '{muscle_group}'. Choose from: {', '.join(MUSCLE_GROUPS)}"
            )

    needle = query.strip().lower()
    matches = [
        ex for ex in EXERCISE_LIBRARY.values()
        if (group is None or ex.muscle_group.lower() == group)
        and (needle in ex.name.lower() or needle in ex.muscle_group.lower())
    ]
    return matches[:limit]
