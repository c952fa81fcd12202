"""Next-occurrence resolution for weekly recurring goal schedules.

A schedule declares ISO weekdays (1=Monday..7=Sunday) and "HH:MM" time slots.
The next occurrence is the earliest (weekday, slot) instant at or after the
reference time. Pure function of its inputs -- the reference instant is always
passed in.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, time, timedelta
from typing import Any

from goal_priorities.models import Schedule

logger = logging.getLogger(__name__)

# Two weeks plus today always contains every weekday at least twice, so a
# valid (weekday, slot) pair is always found; the bound keeps the scan finite.
SCHEDULE_HORIZON_DAYS = 14

_SLOT_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def parse_time_slot(slot: Any) -> time | None:
    """Parse an "H:MM" or "HH:MM" slot. Returns None for anything else."""
    if not isinstance(slot, str):
        return None
    m = _SLOT_RE.match(slot.strip())
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def _start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def next_occurrence(schedule: Any, now: datetime) -> datetime | None:
    """Find the earliest scheduled instant at or after *now*.

    Args:
        schedule: A Schedule, a stored schedule mapping, or None.
        now: Reference instant. Naive values are treated as local wall time;
            aware values keep their tzinfo on the returned instant.

    Returns:
        The earliest matching datetime (seconds zeroed), or None when the
        schedule is missing, has no weekdays or slots, or nothing matches
        within the horizon.
    """
    sched = Schedule.from_raw(schedule)
    if sched is None or not sched.days_of_week or not sched.time_slots:
        return None

    slots: list[time] = []
    for raw_slot in sched.time_slots:
        parsed = parse_time_slot(raw_slot)
        if parsed is None:
            logger.debug("Skipping unparseable time slot %r", raw_slot)
            continue
        slots.append(parsed)

    today = _start_of_day(now)
    candidates: list[datetime] = []
    for weekday in sched.days_of_week:
        for slot in slots:
            for offset in range(SCHEDULE_HORIZON_DAYS + 1):
                day = today + timedelta(days=offset)
                if day.isoweekday() != weekday:
                    continue
                at = day.replace(hour=slot.hour, minute=slot.minute)
                if at >= now:
                    candidates.append(at)
                    break

    if not candidates:
        return None
    return min(candidates)
