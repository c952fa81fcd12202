"""Deadline urgency.

Deadlines are stored as "YYYY-MM-DD" and mean the end of that local day.
Urgency is a bounded value the scorer weighs; goals without a deadline are
neutral.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import UTC, date, datetime, time, timedelta
from typing import Any

from goal_priorities.models import Goal

MS_PER_DAY = 86_400_000

URGENCY_HORIZON_DAYS = 60
URGENCY_BOUND = 60

_DEADLINE_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")
_END_OF_DAY = time(23, 59, 59, 999_000)


def parse_deadline(value: Any) -> date | None:
    """Parse a strict YYYY-MM-DD string into a date, else None.

    A plain `date` (what YAML loaders produce for an unquoted date) passes
    through unchanged; a `datetime` is not a calendar day and is rejected.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if not value or not isinstance(value, str):
        return None
    m = _DEADLINE_RE.match(value.strip())
    if not m:
        return None
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def millis_between(later: datetime, earlier: datetime) -> float:
    """Milliseconds from *earlier* to *later*.

    Aware values are compared on the UTC timeline so DST shifts count;
    naive values are compared as wall-clock time.
    """
    if later.tzinfo is not None and earlier.tzinfo is not None:
        delta = later.astimezone(UTC) - earlier.astimezone(UTC)
    else:
        delta = later - earlier
    return delta / timedelta(milliseconds=1)


def days_until_deadline(goal: Any, now: datetime) -> int | None:
    """Whole days between *now* and the end of the deadline day.

    Args:
        goal: A Goal, a stored goal mapping, or a bare deadline string.
        now: Reference instant.

    Returns:
        0 when the deadline is later today, 1 for tomorrow, negative once the
        deadline day has passed; None if the deadline is missing or malformed.
    """
    if isinstance(goal, Goal):
        raw = goal.deadline
    elif isinstance(goal, Mapping):
        raw = goal.get("deadline")
    else:
        raw = goal

    deadline = parse_deadline(raw)
    if deadline is None:
        return None

    deadline_at = datetime.combine(deadline, _END_OF_DAY, tzinfo=now.tzinfo)
    return math.floor(millis_between(deadline_at, now) / MS_PER_DAY)


def deadline_urgency(days: int | None) -> int:
    """Urgency in [-60, 60]; higher as the deadline approaches."""
    if days is None:
        return 0
    return max(-URGENCY_BOUND, min(URGENCY_BOUND, URGENCY_HORIZON_DAYS - days))
