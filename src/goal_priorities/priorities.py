"""Priorities facade: everything the home screen needs in one call.

Single entry point consumed by the UI layer. Reads a state snapshot, never
writes to it, and returns freshly built records:
- the resolved active goal,
- the top-N queued goals,
- the full ranked queue with per-goal diagnostics,
- metadata flagging inconsistent data (several goals marked active).

Import direction: priorities -> {active, ranking} -> scoring ->
{schedule, deadline} -> models.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from goal_priorities.active import active_ids, select_active_goal
from goal_priorities.config import EngineConfig, config_from_env
from goal_priorities.models import Goal, StateSnapshot
from goal_priorities.ranking import RankedGoal, rank_queued_goals

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PrioritiesMeta:
    """Data-consistency diagnostics. Informational only."""

    has_multiple_active: bool = False
    active_ids: list[Any] = field(default_factory=list)
    ui_active_id: Any = None

    @property
    def warning_multi_active(self) -> bool:
        """Legacy alias of has_multiple_active."""
        return self.has_multiple_active

    def to_dict(self) -> dict[str, Any]:
        return {
            "hasMultipleActive": self.has_multiple_active,
            "warningMultiActive": self.warning_multi_active,
            "activeIds": list(self.active_ids),
            "uiActiveId": self.ui_active_id,
        }


@dataclass(frozen=True)
class Priorities:
    """Result of compute_priorities."""

    active_goal: Goal | None
    next_goals: list[Goal]
    ranked_queued: list[RankedGoal]
    meta: PrioritiesMeta

    def to_dict(self) -> dict[str, Any]:
        """External camelCase shape consumed by the UI."""
        return {
            "activeGoal": self.active_goal.to_dict() if self.active_goal else None,
            "nextGoals": [g.to_dict() for g in self.next_goals],
            "rankedQueued": [
                {
                    "goal": entry.goal.to_dict(),
                    "score": entry.score,
                    "meta": {
                        "nextPlannedAt": format_instant(entry.next_planned_at),
                        "daysUntilDeadline": entry.days_until_deadline,
                    },
                }
                for entry in self.ranked_queued
            ],
            "meta": self.meta.to_dict(),
        }


def format_instant(value: datetime | None) -> str | None:
    """ISO-8601 with millisecond precision; aware values are rendered in UTC."""
    if value is None:
        return None
    if value.tzinfo is not None:
        utc = value.astimezone(UTC).replace(tzinfo=None)
        return utc.isoformat(timespec="milliseconds") + "Z"
    return value.isoformat(timespec="milliseconds")


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


def _resolve_top_n(top_n: Any, default: int) -> int:
    if not isinstance(top_n, int) or isinstance(top_n, bool):
        top_n = default
    return max(0, top_n)


def compute_priorities(
    data: Any,
    now: datetime | None = None,
    top_n: int | None = None,
    *,
    config: EngineConfig | None = None,
) -> Priorities:
    """Compute the active goal and the ranked queue for a state snapshot.

    Does NOT enforce state: several active goals are resolved for display
    and reported in meta, never corrected.

    Args:
        data: Persisted state mapping (``goals``, ``ui.activeGoalId``) or a
            StateSnapshot. Malformed input degrades to an empty result.
        now: Reference instant; wall-clock time when omitted.
        top_n: Number of queued goals to surface in next_goals (config
            default, 3, when omitted or not an integer).
        config: Engine configuration; read from the environment when omitted.

    Returns:
        Priorities with independent copies of every goal.
    """
    cfg = config or config_from_env()
    if now is None:
        now = datetime.now()
    limit = _resolve_top_n(top_n, cfg.top_n)

    snapshot = StateSnapshot.from_raw(data)
    ids = active_ids(snapshot.goals)
    meta = PrioritiesMeta(
        has_multiple_active=len(ids) > 1,
        active_ids=ids,
        ui_active_id=snapshot.active_goal_id,
    )
    if meta.has_multiple_active and cfg.dev_mode:
        logger.warning("Multiple active goals detected: %s", ids)

    ranked = rank_queued_goals(snapshot, now, cfg.weights)
    return Priorities(
        active_goal=select_active_goal(snapshot.goals, snapshot.active_goal_id),
        next_goals=[entry.goal for entry in ranked[:limit]],
        ranked_queued=ranked,
        meta=meta,
    )
