"""Per-session volume allocation with a per-muscle-group set cap."""

from __future__ import annotations

from collections.abc import Sequence

from strength_engine.catalog.library import ExerciseCatalog
from strength_engine.models.enums import (
    MAX_SETS_PER_MUSCLE_GROUP,
    MIN_SETS_PER_ALLOCATION,
    MINUTES_PER_SET,
    WARMUP_DURATION_MIN,
    MuscleGroup,
)
from strength_engine.models.program import VolumeAllocation


def _sets_label(sets: int) -> str:
    return f"{sets} set" if sets == 1 else f"{sets} sets"


def allocate_volume(
    exercise_ids: Sequence[str],
    sets_per_exercise: int,
    catalog: ExerciseCatalog,
    max_sets_per_muscle_group: int = MAX_SETS_PER_MUSCLE_GROUP,
) -> list[VolumeAllocation]:
    """Grant sets to each exercise in order without overloading a muscle.

    A running total is kept per primary muscle group. Each exercise gets
    ``min(sets_per_exercise, cap - running)`` sets but never fewer than one.

    Args:
        exercise_ids: Exercises in session order.
        sets_per_exercise: Requested sets for every exercise.
        catalog: Supplies each exercise's primary muscle.
        max_sets_per_muscle_group: Per-session ceiling for one muscle group.

    Returns:
        One VolumeAllocation per exercise, in input order.
    """
    running: dict[MuscleGroup, int] = {}
    allocations: list[VolumeAllocation] = []

    for exercise_id in exercise_ids:
        exercise = catalog.get(exercise_id)
        muscle = exercise.primary_muscle
        used = running.get(muscle, 0)
        remaining = max_sets_per_muscle_group - used
        sets = max(MIN_SETS_PER_ALLOCATION, min(sets_per_exercise, remaining))
        capped = sets < sets_per_exercise

        if capped:
            reason = (
                f"{_sets_label(sets)} (capped at {max_sets_per_muscle_group} sets "
                f"for {muscle.value} - volume management)"
            )
        else:
            reason = f"{_sets_label(sets)} as requested"

        running[muscle] = used + sets
        allocations.append(
            VolumeAllocation(
                exercise_id=exercise.id,
                exercise_name=exercise.name,
                recommended_sets=sets,
                reason=reason,
                capped=capped,
            )
        )
    return allocations


def muscle_group_distribution(
    allocations: Sequence[VolumeAllocation],
    catalog: ExerciseCatalog,
) -> dict[MuscleGroup, int]:
    """Total sets per primary muscle group, in MuscleGroup declaration order."""
    totals: dict[MuscleGroup, int] = {}
    for allocation in allocations:
        muscle = catalog.get(allocation.exercise_id).primary_muscle
        totals[muscle] = totals.get(muscle, 0) + allocation.recommended_sets
    return {m: totals[m] for m in MuscleGroup if m in totals}


def overtrained_muscle_groups(
    allocations: Sequence[VolumeAllocation],
    catalog: ExerciseCatalog,
    max_sets_per_muscle_group: int = MAX_SETS_PER_MUSCLE_GROUP,
) -> list[MuscleGroup]:
    """Muscle groups whose session total exceeds the cap.

    Only possible when the one-set floor pushes a saturated group over.
    """
    distribution = muscle_group_distribution(allocations, catalog)
    return [m for m, sets in distribution.items() if sets > max_sets_per_muscle_group]


def estimate_workout_duration(total_sets: int) -> int:
    """Minutes for a session: work plus rest per set, plus the warm-up."""
    return total_sets * MINUTES_PER_SET + WARMUP_DURATION_MIN
