"""Superset composition and superset conflict checks."""

from __future__ import annotations

from collections.abc import Sequence

from strength_engine.catalog.library import ExerciseCatalog
from strength_engine.models.enums import SupersetType
from strength_engine.models.program import ExerciseAllocation, SupersetStructure


def compose_supersets(allocations: Sequence[ExerciseAllocation]) -> list[SupersetStructure]:
    """Pair consecutive exercises; an odd one out is performed on its own.

    Selection order puts complementary patterns next to each other, so for
    3/4/5/6 exercises this yields 1+1, 2, 2+1 and 3 groups.
    """
    structures: list[SupersetStructure] = []
    for start in range(0, len(allocations) - 1, 2):
        structures.append(
            SupersetStructure(
                type=SupersetType.SUPERSET,
                exercises=(allocations[start], allocations[start + 1]),
            )
        )
    if len(allocations) % 2:
        structures.append(
            SupersetStructure(type=SupersetType.SINGLE, exercises=(allocations[-1],))
        )
    return structures


def validate_superset(
    exercise_ids: Sequence[str], catalog: ExerciseCatalog
) -> tuple[bool, list[str]]:
    """Check every pair in a proposed superset.

    Returns:
        ``(valid, conflicts)`` with one message per conflicting pair.
    """
    conflicts: list[str] = []
    for i, first in enumerate(exercise_ids):
        for second in exercise_ids[i + 1:]:
            kind = catalog.conflict_kind(first, second)
            if kind is None:
                continue
            first_name = catalog.get(first).name if first in catalog else first
            second_name = catalog.get(second).name if second in catalog else second
            conflicts.append(
                f"{first_name} and {second_name} should not be paired in a superset "
                f"({kind.value})"
            )
    return not conflicts, conflicts
