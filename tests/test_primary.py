"""Tests for goal_priorities.primary."""

from __future__ import annotations

import copy

import pytest

from goal_priorities.primary import (
    is_primary_category,
    is_primary_goal,
    normalize_priorities,
    set_primary_category,
    set_primary_goal_for_category,
)


@pytest.fixture
def state():
    return {
        "categories": [
            {"id": "health", "priorityLevel": "primary"},
            {"id": "work", "priorityLevel": "normal"},
        ],
        "goals": [
            {"id": "run", "categoryId": "health", "priority": "prioritaire"},
            {"id": "swim", "categoryId": "health", "priority": "secondaire"},
            {"id": "ship", "categoryId": "work", "priority": "bonus"},
        ],
    }


class TestPredicates:
    def test_primary_category(self):
        assert is_primary_category({"priorityLevel": "primary"})
        assert not is_primary_category({"priorityLevel": "normal"})
        assert not is_primary_category(None)

    def test_primary_goal(self):
        assert is_primary_goal({"priority": "prioritaire"})
        assert not is_primary_goal({"priority": "bonus"})
        assert not is_primary_goal("prioritaire")


class TestNormalizePriorities:
    def test_consistent_state_returned_as_is(self, state):
        assert normalize_priorities(state) is state

    def test_second_primary_category_demoted(self, state):
        state["categories"][1]["priorityLevel"] = "primary"
        out = normalize_priorities(state)
        assert [c["priorityLevel"] for c in out["categories"]] == ["primary", "normal"]

    def test_missing_level_becomes_normal(self):
        data = {"categories": [{"id": "a"}], "goals": []}
        out = normalize_priorities(data)
        assert out["categories"] == [{"id": "a", "priorityLevel": "normal"}]

    def test_one_prioritaire_per_category(self, state):
        state["goals"][1]["priority"] = "prioritaire"
        out = normalize_priorities(state)
        assert [g["priority"] for g in out["goals"]] == ["prioritaire", "secondaire", "bonus"]

    def test_unknown_priority_becomes_secondaire(self):
        data = {"goals": [{"id": "a", "priority": "urgent"}, {"id": "b"}]}
        out = normalize_priorities(data)
        assert [g["priority"] for g in out["goals"]] == ["secondaire", "secondaire"]

    def test_uncategorized_goals_share_a_bucket(self):
        data = {
            "goals": [
                {"id": "a", "priority": "prioritaire"},
                {"id": "b", "categoryId": "", "priority": "prioritaire"},
            ]
        }
        out = normalize_priorities(data)
        assert [g["priority"] for g in out["goals"]] == ["prioritaire", "secondaire"]

    def test_input_not_mutated(self, state):
        state["goals"][1]["priority"] = "prioritaire"
        before = copy.deepcopy(state)
        normalize_priorities(state)
        assert state == before

    def test_non_mapping(self):
        assert normalize_priorities(None) is None
        assert normalize_priorities([1]) == [1]

    def test_non_mapping_entries_kept(self):
        data = {"categories": [None], "goals": ["x", {"id": "a"}]}
        out = normalize_priorities(data)
        assert out["goals"][0] == "x"
        assert out["categories"] == [None]


class TestSetPrimaryCategory:
    def test_switch(self, state):
        out = set_primary_category(state, "work")
        assert [c["priorityLevel"] for c in out["categories"]] == ["normal", "primary"]
        assert state["categories"][0]["priorityLevel"] == "primary"

    def test_already_primary(self, state):
        assert set_primary_category(state, "health") is state

    def test_unknown_category(self, state):
        assert set_primary_category(state, "travel") is state

    def test_missing_id(self, state):
        assert set_primary_category(state, None) is state


class TestSetPrimaryGoalForCategory:
    def test_switch(self, state):
        out = set_primary_goal_for_category(state, "health", "swim")
        priorities = {g["id"]: g["priority"] for g in out["goals"]}
        assert priorities == {"run": "secondaire", "swim": "prioritaire", "ship": "bonus"}
        assert out["categories"][0]["mainGoalId"] == "swim"
        assert "mainGoalId" not in out["categories"][1]

    def test_input_not_mutated(self, state):
        before = copy.deepcopy(state)
        set_primary_goal_for_category(state, "health", "swim")
        assert state == before

    def test_goal_in_other_category(self, state):
        assert set_primary_goal_for_category(state, "health", "ship") is state

    def test_already_prioritaire(self, state):
        assert set_primary_goal_for_category(state, "health", "run") is state

    def test_fills_missing_priority(self):
        data = {
            "categories": [{"id": "c"}],
            "goals": [{"id": "a", "categoryId": "c"}, {"id": "b", "categoryId": "c"}],
        }
        out = set_primary_goal_for_category(data, "c", "b")
        assert [g["priority"] for g in out["goals"]] == ["secondaire", "prioritaire"]

    def test_missing_ids(self, state):
        assert set_primary_goal_for_category(state, "", "run") is state
        assert set_primary_goal_for_category(state, "health", None) is state
