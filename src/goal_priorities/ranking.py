"""Deterministic ranking of queued goals.

Goals are ordered by score (descending), then by the tie-break chain:
ascending order, ascending display label (case-sensitive), then input
position. Python's sort is stable, so the last link comes for free.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from goal_priorities.config import ScoreWeights
from goal_priorities.models import Goal, GoalStatus, StateSnapshot
from goal_priorities.scoring import score_breakdown


@dataclass(frozen=True)
class RankedGoal:
    """A queued goal with its score and the diagnostics behind it."""

    goal: Goal
    score: float
    next_planned_at: datetime | None = None
    days_until_deadline: int | None = None


def tie_break_key(goal: Goal) -> tuple[float, str]:
    """Secondary sort key shared by the ranker and the active selector."""
    return (goal.effective_order, goal.display_label)


def rank_scored(entries: Iterable[RankedGoal]) -> list[RankedGoal]:
    """Sort scored entries into the canonical total order."""
    return sorted(entries, key=lambda e: (-e.score, *tie_break_key(e.goal)))


def score_goal(
    goal: Goal, now: datetime, weights: ScoreWeights | None = None
) -> RankedGoal:
    """Score a queued goal with its full breakdown."""
    breakdown = score_breakdown(goal, now, weights)
    return RankedGoal(
        goal=goal,
        score=breakdown.total,
        next_planned_at=breakdown.next_planned_at,
        days_until_deadline=breakdown.days_until_deadline,
    )


def queued_goals(data: Any) -> list[Goal]:
    """Goals whose canonical status is queued, in input order."""
    snapshot = StateSnapshot.from_raw(data)
    return [g for g in snapshot.goals if g.status is GoalStatus.QUEUED]


def rank_queued_goals(
    data: Any, now: datetime, weights: ScoreWeights | None = None
) -> list[RankedGoal]:
    """Score and rank every queued goal in a state snapshot.

    Args:
        data: A StateSnapshot or the raw persisted state mapping.
        now: Reference instant.
        weights: Score component multipliers.

    Returns:
        Ranked entries, best first. Active and terminal goals never appear.
    """
    return rank_scored(score_goal(g, now, weights) for g in queued_goals(data))
