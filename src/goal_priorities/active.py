"""Resolution of the single current active goal.

Stored data may mark several goals active at once. The selector tolerates
that and always resolves to one goal deterministically; it never corrects
the underlying data.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from goal_priorities.models import Goal, GoalStatus
from goal_priorities.ranking import tie_break_key


def active_ids(goals: Iterable[Goal]) -> list[Any]:
    """Ids of goals whose canonical status is active (empty ids dropped)."""
    return [g.id for g in goals if g.status is GoalStatus.ACTIVE and g.id]


def select_active_goal(goals: Iterable[Goal], hint: Any = None) -> Goal | None:
    """Pick the goal to present as in progress.

    Precedence:
        1. The UI hint, when it names an existing non-terminal goal (even a
           queued one).
        2. Among goals marked active, the lowest order, then label, then
           input position.
        3. None.
    """
    goals = list(goals)
    if hint:
        for goal in goals:
            if goal.id == hint:
                if not goal.status.is_terminal:
                    return goal
                break

    actives = [g for g in goals if g.status is GoalStatus.ACTIVE]
    if not actives:
        return None
    return min(actives, key=tie_break_key)
