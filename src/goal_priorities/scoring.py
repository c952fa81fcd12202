"""Composite priority score for a single goal.

Pure math module -- no I/O, no side effects.

Active goals score +inf and terminal goals -inf, so they dominate or drop out
of any ranking. A queued goal's score is the sum of five weighted components:

    order     -order * 1000          lower order => higher score
    recency   -minutes until next    sooner session => higher score
    deadline  urgency * 50           urgency in [-60, 60]
    whyLink   whyLink * 500          whyLink in [0, 1]
    impact    impact * 30            impact in [0, 10]

Order dominates under typical spacing, but an imminent session or deadline
can outweigh one order step.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from goal_priorities.config import ScoreWeights
from goal_priorities.deadline import (
    days_until_deadline,
    deadline_urgency,
    millis_between,
)
from goal_priorities.models import Goal, GoalStatus
from goal_priorities.schedule import next_occurrence

# Stands in for "no planned session": about 694 days, far beyond the
# 15-day scan horizon, so unscheduled goals trail any scheduled one.
MISSING_NEXT_MINUTES = 999_999

DEFAULT_WEIGHTS = ScoreWeights()


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-component contributions to a queued goal's score."""

    order: float
    recency: float
    deadline: float
    why_link: float
    impact: float
    next_planned_at: datetime | None = None
    days_until_deadline: int | None = None

    @property
    def total(self) -> float:
        return self.order + self.recency + self.deadline + self.why_link + self.impact


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def minutes_until(next_at: datetime | None, now: datetime) -> int:
    """Rounded minutes from *now* to *next_at*, or the missing sentinel."""
    if next_at is None:
        return MISSING_NEXT_MINUTES
    return max(0, _round_half_up(millis_between(next_at, now) / 60_000))


def score_breakdown(
    goal: Goal, now: datetime, weights: ScoreWeights | None = None
) -> ScoreBreakdown:
    """Compute the weighted components of a goal's queued score.

    Status is not consulted here; see compute_priority_score.
    """
    w = weights or DEFAULT_WEIGHTS
    next_at = next_occurrence(goal.schedule, now)
    days = days_until_deadline(goal, now)
    return ScoreBreakdown(
        order=-goal.effective_order * w.order,
        recency=-minutes_until(next_at, now) * w.recency,
        deadline=deadline_urgency(days) * w.deadline,
        why_link=goal.why_link * w.why_link,
        impact=goal.impact * w.impact,
        next_planned_at=next_at,
        days_until_deadline=days,
    )


def compute_priority_score(
    goal: Any, now: datetime, weights: ScoreWeights | None = None
) -> float:
    """Score a goal; higher means more important.

    Args:
        goal: A Goal or a stored goal mapping. Anything else scores -inf.
        now: Reference instant.
        weights: Component multipliers (defaults reproduce production scores).

    Returns:
        +inf for active goals, -inf for done/invalid goals, otherwise the
        weighted component sum.
    """
    g = Goal.coerce(goal)
    if g is None:
        return -math.inf
    if g.status is GoalStatus.ACTIVE:
        return math.inf
    if g.status.is_terminal:
        return -math.inf
    return score_breakdown(g, now, weights).total
