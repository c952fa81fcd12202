"""Shared fixtures for goal_priorities tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from goal_priorities.config import ENV_VAR


@pytest.fixture(autouse=True)
def _clear_engine_env(monkeypatch):
    monkeypatch.delenv(ENV_VAR, raising=False)


@pytest.fixture
def monday_morning():
    """2025-01-06 is a Monday."""
    return datetime(2025, 1, 6, 8, 0)


@pytest.fixture
def sample_state():
    return {
        "goals": [
            {"id": "run", "title": "Run 5k", "status": "queued", "order": 2},
            {"id": "read", "title": "Read", "status": "active", "order": 1},
            {"id": "piano", "title": "Piano", "status": "abandoned", "order": 0},
            {
                "id": "spanish",
                "title": "Spanish",
                "status": "queued",
                "order": 1,
                "schedule": {"daysOfWeek": [1], "timeSlots": ["09:00"]},
            },
            {"id": "tax", "title": "Taxes", "status": "done", "order": 3},
        ],
        "ui": {"activeGoalId": None},
    }
