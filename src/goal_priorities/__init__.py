"""goal_priorities: Active-goal selection and queued-goal ranking engine."""

__version__ = "0.1.0"

from goal_priorities.active import select_active_goal
from goal_priorities.config import EngineConfig, ScoreWeights, load_config
from goal_priorities.deadline import days_until_deadline, deadline_urgency
from goal_priorities.models import (
    MISSING_ORDER,
    Goal,
    GoalStatus,
    Schedule,
    StateSnapshot,
    normalize_status,
)
from goal_priorities.primary import (
    normalize_priorities,
    set_primary_category,
    set_primary_goal_for_category,
)
from goal_priorities.priorities import Priorities, PrioritiesMeta, compute_priorities
from goal_priorities.ranking import RankedGoal, rank_queued_goals, rank_scored
from goal_priorities.schedule import (
    SCHEDULE_HORIZON_DAYS,
    next_occurrence,
    parse_time_slot,
)
from goal_priorities.scoring import MISSING_NEXT_MINUTES, compute_priority_score

__all__ = [
    # models
    "MISSING_ORDER",
    "Goal",
    "GoalStatus",
    "Schedule",
    "StateSnapshot",
    "normalize_status",
    # schedule
    "SCHEDULE_HORIZON_DAYS",
    "next_occurrence",
    "parse_time_slot",
    # deadline
    "days_until_deadline",
    "deadline_urgency",
    # scoring
    "MISSING_NEXT_MINUTES",
    "compute_priority_score",
    # ranking
    "RankedGoal",
    "rank_queued_goals",
    "rank_scored",
    # active
    "select_active_goal",
    # priorities
    "Priorities",
    "PrioritiesMeta",
    "compute_priorities",
    # config
    "EngineConfig",
    "ScoreWeights",
    "load_config",
    # primary
    "normalize_priorities",
    "set_primary_category",
    "set_primary_goal_for_category",
]
