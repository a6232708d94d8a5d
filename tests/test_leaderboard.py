"""
Tests for leaderboard scoring across users, ranking and payload shaping.
"""

from datetime import datetime, timedelta, timezone

import pytest

from repboard.core.assembler import leaderboard_payload
from repboard.core.models import EngineSettings, ExerciseEntry, UserRef, UserScoreEntry, WorkoutRecord
from repboard.core.ranking import find_rank, rank_entries, score_share, top_entries
from repboard.core.scoring import compute_scores
from repboard.core.validation import InputContractError

NOW = datetime(2026, 3, 18, 12, 0, tzinfo=timezone.utc)

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _rec(
    rec_id: str,
    user_id: str,
    days_ago: float = 0,
    exercises: tuple[ExerciseEntry, ...] = (ExerciseEntry("Squat", 3, 5, 80),),
) -> WorkoutRecord:
    return WorkoutRecord(
        id=rec_id,
        user_id=user_id,
        date=NOW - timedelta(days=days_ago),
        exercises=exercises,
    )


def _entry(user_id: str, score: int) -> UserScoreEntry:
    return UserScoreEntry(user_id=user_id, name=user_id.title(), score=score)


USERS = [UserRef("alice", "Alice"), UserRef("bob", "Bob"), UserRef("carol", "Carol")]


# ---------------------------------------------------------------------------
# compute_scores
# ---------------------------------------------------------------------------


class TestComputeScores:
    def test_one_entry_per_directory_user(self):
        records = [_rec("1", "alice"), _rec("2", "bob", 3)]
        entries = compute_scores(records, USERS, NOW)
        assert [e.user_id for e in entries] == ["alice", "bob", "carol"]

    def test_zero_record_user_is_included(self):
        """A known user with no workouts appears with score 0, not omitted."""
        entries = compute_scores([_rec("1", "alice")], USERS, NOW)
        carol = next(e for e in entries if e.user_id == "carol")
        assert carol == UserScoreEntry(user_id="carol", name="Carol")
        assert carol.score == 0

    def test_names_resolved_from_directory(self):
        entries = compute_scores([_rec("1", "bob")], USERS, NOW)
        assert {e.user_id: e.name for e in entries}["bob"] == "Bob"

    def test_unknown_user_gets_placeholder_name(self):
        """A record whose owner is not in the directory still scores."""
        records = [_rec("1", "ghost"), _rec("2", "ghost", 1)]
        entries = compute_scores(records, USERS, NOW)

        ghost = entries[-1]
        assert ghost.user_id == "ghost"
        assert ghost.name == "Unknown"
        assert ghost.total == 2
        assert ghost.score > 0

    def test_placeholder_name_is_configurable(self):
        settings = EngineSettings(unknown_user_name="(deleted)")
        entries = compute_scores([_rec("1", "ghost")], [], NOW, settings)
        assert entries[0].name == "(deleted)"

    def test_record_only_users_sorted_by_id(self):
        records = [_rec("1", "zed"), _rec("2", "amy"), _rec("3", "mo")]
        entries = compute_scores(records, [], NOW)
        assert [e.user_id for e in entries] == ["amy", "mo", "zed"]

    def test_duplicate_directory_id_yields_one_row(self):
        users = [UserRef("alice", "Alice"), UserRef("bob", "Bob"), UserRef("alice", "Alice again")]
        entries = compute_scores([_rec("1", "alice")], users, NOW)

        assert [e.user_id for e in entries] == ["alice", "bob"]
        assert entries[0].name == "Alice"
        assert entries[0].total == 1

    def test_empty_inputs(self):
        assert compute_scores([], [], NOW) == []

    def test_does_not_mutate_input(self):
        records = [_rec("2", "bob"), _rec("1", "alice")]
        before = list(records)
        compute_scores(records, USERS, NOW)
        assert records == before

    def test_deterministic(self):
        records = [_rec(str(i), u, d) for i, (u, d) in enumerate(
            [("alice", 0), ("bob", 2), ("alice", 9), ("carol", 40), ("bob", 2.2)]
        )]
        assert compute_scores(records, USERS, NOW) == compute_scores(records, USERS, NOW)


class TestInputContract:
    """Malformed records reject the whole computation."""

    def test_negative_sets_rejected_with_context(self):
        bad = _rec("bad-1", "alice", exercises=(
            ExerciseEntry("Squat", 3, 5, 80),
            ExerciseEntry("Bench", -1, 5, 60),
        ))
        with pytest.raises(InputContractError) as exc_info:
            compute_scores([_rec("ok", "bob"), bad], USERS, NOW)

        assert exc_info.value.record_id == "bad-1"
        assert exc_info.value.field == "exercises[1].sets"

    def test_negative_weight_rejected(self):
        bad = _rec("bad-2", "alice", exercises=(ExerciseEntry("Squat", 3, 5, -20),))
        with pytest.raises(InputContractError) as exc_info:
            compute_scores([bad], USERS, NOW)
        assert exc_info.value.field == "exercises[0].weight"

    def test_unparsed_date_rejected(self):
        bad = WorkoutRecord(id="bad-3", user_id="alice", date="2026-13-45")  # type: ignore[arg-type]
        with pytest.raises(InputContractError) as exc_info:
            compute_scores([bad], USERS, NOW)
        assert exc_info.value.field == "date"

    @pytest.mark.parametrize("weight", [float("nan"), float("inf")])
    def test_non_finite_weight_rejected(self, weight):
        bad = _rec("bad-5", "alice", exercises=(ExerciseEntry("Squat", 3, 5, weight),))
        with pytest.raises(InputContractError) as exc_info:
            compute_scores([bad], USERS, NOW)
        assert exc_info.value.field == "exercises[0].weight"

    def test_non_numeric_sets_rejected(self):
        bad = _rec("bad-6", "alice", exercises=(ExerciseEntry("Squat", "3", 5, 80),))  # type: ignore[arg-type]
        with pytest.raises(InputContractError) as exc_info:
            compute_scores([bad], USERS, NOW)
        assert exc_info.value.field == "exercises[0].sets"

    def test_error_is_a_value_error(self):
        bad = _rec("bad-4", "alice", exercises=(ExerciseEntry("", 3, 5, 0),))
        with pytest.raises(ValueError):
            compute_scores([bad], USERS, NOW)


# ---------------------------------------------------------------------------
# rank_entries
# ---------------------------------------------------------------------------


class TestRanking:
    def test_sorted_by_score_descending(self):
        ranked = rank_entries([_entry("a", 5), _entry("b", 20), _entry("c", 10)], ["a", "b", "c"])
        assert [e.user_id for e in ranked] == ["b", "c", "a"]

    def test_ties_follow_directory_order(self):
        entries = [_entry("alice", 7), _entry("bob", 7), _entry("carol", 7)]
        ranked = rank_entries(entries, ["carol", "alice", "bob"])
        assert [e.user_id for e in ranked] == ["carol", "alice", "bob"]

    def test_ties_stable_across_runs(self):
        entries = [_entry("bob", 3), _entry("alice", 3), _entry("carol", 9)]
        order = ["bob", "alice", "carol"]
        runs = {tuple(e.user_id for e in rank_entries(entries, order)) for _ in range(5)}
        assert runs == {("carol", "bob", "alice")}

    def test_ties_independent_of_input_order(self):
        order = ["bob", "alice"]
        a = rank_entries([_entry("alice", 3), _entry("bob", 3)], order)
        b = rank_entries([_entry("bob", 3), _entry("alice", 3)], order)
        assert a == b

    def test_unlisted_users_tie_break_by_id_after_listed(self):
        entries = [_entry("zed", 4), _entry("amy", 4), _entry("bob", 4)]
        ranked = rank_entries(entries, ["bob"])
        assert [e.user_id for e in ranked] == ["bob", "amy", "zed"]

    def test_without_directory_order_ties_by_user_id(self):
        entries = [_entry("c", 1), _entry("a", 1), _entry("b", 2)]
        ranked = rank_entries(entries)
        assert [e.user_id for e in ranked] == ["b", "a", "c"]

    def test_all_zero_scores_use_tie_break_only(self):
        entries = [_entry("alice", 0), _entry("bob", 0)]
        assert [e.user_id for e in rank_entries(entries, ["bob", "alice"])] == ["bob", "alice"]

    def test_duplicate_in_directory_order_keeps_first_position(self):
        entries = [_entry("alice", 3), _entry("bob", 3)]
        ranked = rank_entries(entries, ["alice", "bob", "alice"])
        assert [e.user_id for e in ranked] == ["alice", "bob"]

    def test_empty(self):
        assert rank_entries([], []) == []

    def test_find_rank_is_one_based(self):
        ranked = rank_entries([_entry("a", 1), _entry("b", 9)], ["a", "b"])
        assert find_rank(ranked, "b") == 1
        assert find_rank(ranked, "a") == 2
        assert find_rank(ranked, "nobody") is None

    def test_top_entries_and_score_share(self):
        ranked = rank_entries([_entry("a", 10), _entry("b", 40), _entry("c", 20), _entry("d", 0)])
        assert [e.user_id for e in top_entries(ranked)] == ["b", "c", "a"]
        assert score_share(ranked[1], ranked) == pytest.approx(0.5)

    def test_score_share_with_zero_leader(self):
        ranked = rank_entries([_entry("a", 0)])
        assert score_share(ranked[0], ranked) == 0.0


# ---------------------------------------------------------------------------
# End to end + payload
# ---------------------------------------------------------------------------


class TestLeaderboardPayload:
    def test_end_to_end(self):
        records = [
            _rec("1", "bob", 0),
            _rec("2", "bob", 1),
            _rec("3", "alice", 20),
        ]
        entries = compute_scores(records, USERS, NOW)
        ranked = rank_entries(entries, [u.user_id for u in USERS])
        payload = leaderboard_payload(ranked)

        # bob: total 2, last7 2, last30 2, days 2 → 4 + 10 + 6 + 2 = 22
        # alice: total 1, last7 0, last30 1, days 1 → 2 + 0 + 3 + 1 = 6
        assert payload == [
            {"userId": "bob", "name": "Bob", "total": 2, "last7": 2, "last30": 2, "uniqueDays": 2, "score": 22},
            {"userId": "alice", "name": "Alice", "total": 1, "last7": 0, "last30": 1, "uniqueDays": 1, "score": 6},
            {"userId": "carol", "name": "Carol", "total": 0, "last7": 0, "last30": 0, "uniqueDays": 0, "score": 0},
        ]

    def test_empty_payload(self):
        assert leaderboard_payload([]) == []
