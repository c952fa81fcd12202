"""Tests for goal_priorities.active."""

from __future__ import annotations

from goal_priorities.active import active_ids, select_active_goal
from goal_priorities.models import Goal


def _goals(*specs):
    return [Goal.from_raw(s) for s in specs]


class TestSelectActiveGoal:
    def test_hint_on_queued_goal(self):
        goals = _goals({"id": "a", "status": "queued"}, {"id": "b", "status": "queued"})
        assert select_active_goal(goals, "b").id == "b"

    def test_hint_overrides_active_status(self):
        goals = _goals({"id": "a", "status": "active"}, {"id": "b", "status": "queued"})
        assert select_active_goal(goals, "b").id == "b"

    def test_terminal_hint_ignored(self):
        goals = _goals({"id": "a", "status": "active"}, {"id": "b", "status": "done"})
        assert select_active_goal(goals, "b").id == "a"

    def test_abandoned_hint_ignored(self):
        goals = _goals({"id": "b", "status": "abandoned"})
        assert select_active_goal(goals, "b") is None

    def test_dangling_hint(self):
        goals = _goals({"id": "a", "status": "active"})
        assert select_active_goal(goals, "missing").id == "a"

    def test_multiple_actives_lowest_order(self):
        goals = _goals(
            {"id": "a", "status": "active", "order": 5},
            {"id": "b", "status": "active", "order": 2},
            {"id": "c", "status": "active"},
        )
        assert select_active_goal(goals).id == "b"

    def test_multiple_actives_label_tiebreak(self):
        goals = _goals(
            {"id": "x", "title": "Write", "status": "active", "order": 1},
            {"id": "y", "title": "Read", "status": "active", "order": 1},
        )
        assert select_active_goal(goals).id == "y"

    def test_full_tie_keeps_input_order(self):
        goals = _goals(
            {"id": "first", "title": "Same", "status": "active"},
            {"id": "second", "title": "Same", "status": "active"},
        )
        assert select_active_goal(goals).id == "first"

    def test_none_active(self):
        goals = _goals({"id": "a"}, {"id": "b", "status": "done"})
        assert select_active_goal(goals) is None

    def test_empty(self):
        assert select_active_goal([]) is None
        assert select_active_goal([], "a") is None

    def test_duplicate_ids_first_wins(self):
        goals = _goals({"id": "a", "status": "done"}, {"id": "a", "status": "queued"})
        assert select_active_goal(goals, "a") is None


class TestActiveIds:
    def test_collects_active(self):
        goals = _goals(
            {"id": "a", "status": "active"},
            {"id": "b"},
            {"id": "c", "status": "active"},
        )
        assert active_ids(goals) == ["a", "c"]

    def test_drops_empty_ids(self):
        goals = _goals({"status": "active"}, {"id": "", "status": "active"})
        assert active_ids(goals) == []
