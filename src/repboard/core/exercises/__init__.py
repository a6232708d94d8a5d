"""
Reference exercise library for repboard.
"""

from .base import ExerciseInfo
from .registry import EXERCISE_LIBRARY, MUSCLE_GROUPS, get_exercise, search_exercises

__all__ = [
    "ExerciseInfo",
    "EXERCISE_LIBRARY",
    "MUSCLE_GROUPS",
    "get_exercise",
    "search_exercises",
]
