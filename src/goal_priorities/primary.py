"""Primary category and primary goal designation.

At most one category is "primary" and, within each category, at most one
goal is "prioritaire". These helpers repair or change that designation with
copy-on-write semantics: the input state is never mutated, and it is returned
as-is when nothing needs to change so callers can detect no-ops by identity.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

PRIMARY = "primary"
NORMAL = "normal"

PRIORITAIRE = "prioritaire"
SECONDAIRE = "secondaire"
BONUS = "bonus"

_GOAL_PRIORITIES = (PRIORITAIRE, BONUS)


def is_primary_category(category: Any) -> bool:
    return isinstance(category, Mapping) and category.get("priorityLevel") == PRIMARY


def is_primary_goal(goal: Any) -> bool:
    return isinstance(goal, Mapping) and goal.get("priority") == PRIORITAIRE


def _items(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    return value if isinstance(value, list) else []


def normalize_priorities(data: Any) -> Any:
    """Enforce a single primary category and one prioritaire goal per category.

    The first primary category wins and every other category becomes normal.
    Goal priorities outside prioritaire/bonus become secondaire, and only
    the first prioritaire goal of each category keeps it.

    Returns:
        *data* itself when already consistent, else a new mapping with new
        ``categories``/``goals`` lists.
    """
    if not isinstance(data, Mapping):
        return data

    categories = _items(data, "categories")
    goals = _items(data, "goals")

    next_categories = None
    primary_seen = False
    for index, cat in enumerate(categories):
        if not isinstance(cat, Mapping):
            continue
        level = PRIMARY if cat.get("priorityLevel") == PRIMARY else NORMAL
        if level == PRIMARY:
            if primary_seen:
                level = NORMAL
            primary_seen = True
        if cat.get("priorityLevel") != level:
            if next_categories is None:
                next_categories = list(categories)
            next_categories[index] = {**cat, "priorityLevel": level}

    next_goals = None
    primary_by_category: set[Any] = set()
    for index, goal in enumerate(goals):
        if not isinstance(goal, Mapping):
            continue
        category_id = goal.get("categoryId") or None
        priority = goal.get("priority")
        if priority not in _GOAL_PRIORITIES:
            priority = SECONDAIRE
        if priority == PRIORITAIRE:
            if category_id in primary_by_category:
                priority = SECONDAIRE
            else:
                primary_by_category.add(category_id)
        if goal.get("priority") != priority:
            if next_goals is None:
                next_goals = list(goals)
            next_goals[index] = {**goal, "priority": priority}

    if next_categories is None and next_goals is None:
        return data
    return {
        **data,
        "categories": next_categories if next_categories is not None else categories,
        "goals": next_goals if next_goals is not None else goals,
    }


def set_primary_category(data: Any, category_id: Any) -> Any:
    """Make *category_id* the only primary category.

    Returns *data* unchanged when the category is unknown or already the
    sole primary with every level set.
    """
    if not isinstance(data, Mapping) or not category_id:
        return data

    found = False
    changed = False
    next_categories: list[Any] = []
    for cat in _items(data, "categories"):
        if not isinstance(cat, Mapping):
            next_categories.append(cat)
            continue
        is_target = cat.get("id") == category_id
        found = found or is_target
        level = PRIMARY if is_target else NORMAL
        if cat.get("priorityLevel") != level:
            changed = True
            cat = {**cat, "priorityLevel": level}
        next_categories.append(cat)

    if not found or not changed:
        return data
    return {**data, "categories": next_categories}


def set_primary_goal_for_category(data: Any, category_id: Any, goal_id: Any) -> Any:
    """Make *goal_id* the prioritaire goal of *category_id*.

    The previous prioritaire goal of that category is demoted to secondaire
    and the category records the goal as its ``mainGoalId``. Goals in other
    categories are untouched.
    """
    if not isinstance(data, Mapping) or not category_id or not goal_id:
        return data

    found = False
    changed = False
    next_goals: list[Any] = []
    for goal in _items(data, "goals"):
        if not isinstance(goal, Mapping) or goal.get("categoryId") != category_id:
            next_goals.append(goal)
            continue
        current = goal.get("priority")
        if goal.get("id") == goal_id:
            found = True
            priority = PRIORITAIRE
        elif current == PRIORITAIRE:
            priority = SECONDAIRE
        else:
            priority = current or SECONDAIRE
        if current != priority:
            changed = True
            goal = {**goal, "priority": priority}
        next_goals.append(goal)

    if not found or not changed:
        return data

    next_categories = [
        {**cat, "mainGoalId": goal_id}
        if isinstance(cat, Mapping) and cat.get("id") == category_id
        else cat
        for cat in _items(data, "categories")
    ]
    return {**data, "goals": next_goals, "categories": next_categories}
