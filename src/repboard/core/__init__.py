"""
Consistency scoring and progress aggregation engine.

Pure functions over a snapshot of workout records; no I/O.
"""

from .assembler import leaderboard_payload, progress_payload, recent_payload
from .progress import recent_activity, summarize_progress
from .ranking import find_rank, rank_entries
from .scoring import compute_scores
from .validation import InputContractError

__all__ = [
    "InputContractError",
    "compute_scores",
    "find_rank",
    "leaderboard_payload",
    "progress_payload",
    "rank_entries",
    "recent_activity",
    "recent_payload",
    "summarize_progress",
]
