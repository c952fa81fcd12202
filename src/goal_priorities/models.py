"""Goal and state snapshot records for the priority engine.

Raw goals arrive as loosely-typed mappings owned by the persisted app state.
Everything here is built from them without touching the source objects:
each record keeps a private copy of its mapping and exposes the normalized
attributes the scorer and selector need.

Pure Python -- no I/O.
"""

from __future__ import annotations

import copy
import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Missing order sorts after any realistic user ordering (lists stay far below).
MISSING_ORDER = 9999

WHY_LINK_RANGE = (0.0, 1.0)
IMPACT_RANGE = (0.0, 10.0)


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------


class GoalStatus(str, Enum):
    """Canonical goal lifecycle status."""

    QUEUED = "queued"
    ACTIVE = "active"
    DONE = "done"
    INVALID = "invalid"

    @property
    def is_terminal(self) -> bool:
        return self in (GoalStatus.DONE, GoalStatus.INVALID)

    @classmethod
    def normalize(cls, value: Any) -> GoalStatus:
        """Map any stored status value to a canonical status.

        Absent or empty values are queued, legacy aliases are translated and
        anything unrecognized falls back to queued. Never raises.
        """
        if isinstance(value, GoalStatus):
            return value
        if not value or not isinstance(value, str):
            return cls.QUEUED
        if value in _CANONICAL:
            return cls(value)
        return _LEGACY_ALIASES.get(value, cls.QUEUED)


_CANONICAL = frozenset(s.value for s in GoalStatus)

_LEGACY_ALIASES: dict[str, GoalStatus] = {
    "abandoned": GoalStatus.INVALID,
}


def normalize_status(value: Any) -> GoalStatus:
    """Module-level alias for GoalStatus.normalize."""
    return GoalStatus.normalize(value)


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_float(value: Any) -> float:
    """Lenient numeric coercion: falsy, non-numeric and NaN become 0.

    Integers too large for a float saturate to +/-inf so callers can clamp.
    """
    if not value:
        return 0.0
    try:
        number = float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Schedule:
    """Weekly recurrence: ISO weekdays (1=Monday..7=Sunday) and HH:MM slots."""

    days_of_week: tuple[int, ...] = ()
    time_slots: tuple[str, ...] = ()

    @classmethod
    def from_raw(cls, raw: Any) -> Schedule | None:
        """Build a schedule from a stored mapping, or None if not a mapping."""
        if isinstance(raw, Schedule):
            return raw
        if not isinstance(raw, Mapping):
            return None
        days = raw.get("daysOfWeek")
        slots = raw.get("timeSlots")
        days_of_week = tuple(
            int(d)
            for d in (days if isinstance(days, (list, tuple)) else ())
            if _is_number(d) and d in range(1, 8)
        )
        time_slots = tuple(slots) if isinstance(slots, (list, tuple)) else ()
        return cls(days_of_week=days_of_week, time_slots=time_slots)


@dataclass(frozen=True)
class Goal:
    """Read-only view of a stored goal with its status normalized.

    Attributes:
        id: Identifier, unique within a snapshot (may be empty for bad data).
        status: Canonical status.
        order: User ordering as stored; see effective_order.
        schedule: Weekly recurrence, if any.
        deadline: Raw deadline value (expected "YYYY-MM-DD").
        why_link: Link strength to the user's motivation, clamped to 0..1.
        impact: Self-rated impact, clamped to 0..10.
        raw: Private copy of the source mapping.
    """

    id: Any = None
    status: GoalStatus = GoalStatus.QUEUED
    order: Any = None
    schedule: Schedule | None = None
    deadline: Any = None
    why_link: float = 0.0
    impact: float = 0.0
    title: Any = None
    name: Any = None
    label: Any = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "status", GoalStatus.normalize(self.status))

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> Goal:
        data = copy.deepcopy(dict(raw))
        return cls(
            id=data.get("id"),
            status=GoalStatus.normalize(data.get("status")),
            order=data.get("order"),
            schedule=Schedule.from_raw(data.get("schedule")),
            deadline=data.get("deadline"),
            why_link=clamp(_to_float(data.get("whyLink")), *WHY_LINK_RANGE),
            impact=clamp(_to_float(data.get("impact")), *IMPACT_RANGE),
            title=data.get("title"),
            name=data.get("name"),
            label=data.get("label"),
            raw=data,
        )

    @classmethod
    def coerce(cls, value: Any) -> Goal | None:
        """Return a Goal for a Goal or mapping, None for anything else."""
        if isinstance(value, Goal):
            return value
        if isinstance(value, Mapping):
            return cls.from_raw(value)
        return None

    @property
    def effective_order(self) -> float:
        if not _is_number(self.order):
            return MISSING_ORDER
        try:
            finite = math.isfinite(self.order)
        except OverflowError:
            return MISSING_ORDER
        return self.order if finite else MISSING_ORDER

    @property
    def display_label(self) -> str:
        for candidate in (self.title, self.name, self.label, self.id):
            if candidate:
                return str(candidate)
        return ""

    def to_dict(self) -> dict[str, Any]:
        """Fresh copy of the stored goal with its canonical status."""
        data = copy.deepcopy(dict(self.raw)) if self.raw else self._field_dict()
        data["status"] = self.status.value
        return data

    def _field_dict(self) -> dict[str, Any]:
        # Goals built directly rather than from stored data.
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "name": self.name,
            "label": self.label,
            "order": self.order,
            "deadline": self.deadline,
        }
        if self.schedule is not None:
            data["schedule"] = {
                "daysOfWeek": list(self.schedule.days_of_week),
                "timeSlots": list(self.schedule.time_slots),
            }
        data = {k: v for k, v in data.items() if v is not None}
        data["whyLink"] = self.why_link
        data["impact"] = self.impact
        return data


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable view of the app state the engine reads per call."""

    goals: tuple[Goal, ...] = ()
    active_goal_id: Any = None

    @classmethod
    def from_raw(cls, data: Any) -> StateSnapshot:
        """Build a snapshot from the persisted state mapping. Never raises."""
        if isinstance(data, StateSnapshot):
            return data
        if not isinstance(data, Mapping):
            return cls()

        raw_goals = data.get("goals")
        goals: list[Goal] = []
        if isinstance(raw_goals, Sequence) and not isinstance(raw_goals, (str, bytes)):
            for index, entry in enumerate(raw_goals):
                goal = Goal.coerce(entry)
                if goal is None:
                    logger.debug("Skipping non-mapping goal at index %d", index)
                    continue
                goals.append(goal)

        ui = data.get("ui")
        hint = ui.get("activeGoalId") if isinstance(ui, Mapping) else None
        return cls(goals=tuple(goals), active_goal_id=hint or None)
