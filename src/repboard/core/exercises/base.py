"""
Base type for reference exercise definitions.

The reference library backs name suggestions when logging a workout.
Logged ExerciseEntry names are free text and are not required to appear
here.
"""

from dataclasses import dataclass, field
from typing import Literal

Difficulty = Literal["beginner", "intermediate", "advanced"]


@dataclass(frozen=True)
class ExerciseInfo:
    """One exercise in the reference library."""

    name: str                 # e.g. "Barbell Bench Press"
    muscle_group: str         # e.g. "Chest"
    description: str
    difficulty: Difficulty = "beginner"
    equipment: str = "none"
    secondary_muscles: tuple[str, ...] = field(default_factory=tuple)
    instructions: str = ""    # step-by-step cue text

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Exercise name must be non-empty")
        if self.difficulty not in ("beginner", "intermediate", "advanced"):
            raise ValueError(f"Invalid difficulty: {self.difficulty}")
