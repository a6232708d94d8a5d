"""
Leaderboard ordering.

The sort here is the single ordering authority: entries are ordered by
score descending, ties broken by user-directory position, then by
ascending user id.
"""

from typing import Sequence

from .models import UserScoreEntry


def rank_entries(
    entries: Sequence[UserScoreEntry],
    directory_order: Sequence[str] | None = None,
) -> list[UserScoreEntry]:
    """
    Sort score entries into a leaderboard.

    Args:
        entries: Score entries, one per user
        directory_order: User ids in directory order.  Users listed here
            win ties in listed order; anyone missing from it (or everyone,
            when None) is tie-broken by ascending user id after them.

    Returns:
        New list, best score first
    """
    position: dict[str, int] = {}
    for i, uid in enumerate(directory_order or ()):
        position.setdefault(uid, i)
    unlisted = len(position)

    def key(entry: UserScoreEntry) -> tuple[int, int, str]:
        idx = position.get(entry.user_id)
        if idx is None:
            return (-entry.score, unlisted, entry.user_id)
        return (-entry.score, idx, "")

    return sorted(entries, key=key)


def find_rank(ranked: Sequence[UserScoreEntry], user_id: str) -> int | None:
    """
    1-based rank of *user_id* in an already ranked list.

    Returns:
        Rank, or None when the user is not on the board
    """
    for i, entry in enumerate(ranked, 1):
        if entry.user_id == user_id:
            return i
    return None


def top_entries(ranked: Sequence[UserScoreEntry], n: int = 3) -> list[UserScoreEntry]:
    """The podium: first *n* entries of a ranked list."""
    return list(ranked[:n])


def score_share(entry: UserScoreEntry, ranked: Sequence[UserScoreEntry]) -> float:
    """
    Entry score as a fraction of the leader's score (0.0–1.0).

    A board whose leader has score 0 yields 0.0 for everyone.
    """
    if not ranked or ranked[0].score <= 0:
        return 0.0
    return entry.score / ranked[0].score
