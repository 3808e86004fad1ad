"""Rep-range lookup by exercise and goal.

Strength work stays heavy on the primary lifts; hypertrophy work moves
isolation and easy bodyweight movements into higher rep ranges.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from strength_engine.catalog.library import ExerciseCatalog, default_catalog
from strength_engine.catalog.movement_patterns import (
    ISOLATION_PATTERNS,
    PRIMARY_PATTERNS,
    SECONDARY_PATTERNS,
)
from strength_engine.models.enums import Goal

STRENGTH_PRIMARY_REPS = "4-6"
STRENGTH_DEFAULT_REPS = "6-8"
HYPERTROPHY_DEFAULT_REPS = "8-12"
HYPERTROPHY_HIGH_REPS = "10-15"

# Bodyweight movements too light to reach failure in the compound range
HIGH_REP_BODYWEIGHT: tuple[str, ...] = ("pushup", "incline_pushup")

GOAL_DEFAULT_REPS: dict[Goal, str] = {
    Goal.STRENGTH: STRENGTH_DEFAULT_REPS,
    Goal.HYPERTROPHY: HYPERTROPHY_DEFAULT_REPS,
}


def _ids(patterns) -> list[str]:
    return [i for p in patterns for i in p.exercise_ids]


def _build_table() -> Mapping[Goal, Mapping[str, str]]:
    primary = _ids(PRIMARY_PATTERNS)
    secondary = _ids(SECONDARY_PATTERNS)
    isolation = _ids(ISOLATION_PATTERNS)

    strength = {i: STRENGTH_PRIMARY_REPS for i in primary}
    strength.update({i: STRENGTH_DEFAULT_REPS for i in secondary + isolation if i not in strength})

    hypertrophy = {i: HYPERTROPHY_DEFAULT_REPS for i in primary + secondary}
    hypertrophy.update({i: HYPERTROPHY_HIGH_REPS for i in isolation})
    hypertrophy.update({i: HYPERTROPHY_HIGH_REPS for i in HIGH_REP_BODYWEIGHT})

    return MappingProxyType({
        Goal.STRENGTH: MappingProxyType(strength),
        Goal.HYPERTROPHY: MappingProxyType(hypertrophy),
    })


REP_RANGE_TABLE: Mapping[Goal, Mapping[str, str]] = _build_table()


def resolve_rep_range(
    exercise: str,
    goal: Goal,
    catalog: ExerciseCatalog | None = None,
) -> str:
    """Rep range for an exercise id or display name.

    Unlisted exercises get the goal default ("6-8" for strength, "8-12"
    for hypertrophy).
    """
    goal = Goal(goal)
    found = (catalog or default_catalog()).resolve(exercise)
    exercise_id = found.id if found is not None else exercise
    return REP_RANGE_TABLE[goal].get(exercise_id, GOAL_DEFAULT_REPS[goal])
