"""Pattern-first, conflict-free exercise selection.

Primary patterns are visited in catalog order (squat, hinge, push, pull),
one exercise each. Remaining slots are filled from the pooled secondary
patterns. A candidate is accepted only if it is not already selected and
has no conflict with anything selected so far. Ranking is table driven:
the experience level's equipment preference, then catalog order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from strength_engine.catalog.library import ExerciseCatalog
from strength_engine.models.enums import (
    LOWER_SHARE_NUMERATOR,
    SPLIT_DENOMINATOR,
    UPPER_SHARE_NUMERATOR,
    BodyRegion,
    EquipmentType,
    ExperienceLevel,
    MuscleGroup,
    PatternTier,
)

logger = logging.getLogger(__name__)

# Beginners start on fixed-path machines and cables before free weights
EQUIPMENT_PREFERENCE: dict[ExperienceLevel, tuple[EquipmentType, ...]] = {
    ExperienceLevel.BEGINNER: (
        EquipmentType.MACHINE,
        EquipmentType.CABLE,
        EquipmentType.DUMBBELL,
        EquipmentType.BODYWEIGHT,
        EquipmentType.BARBELL,
    ),
    ExperienceLevel.INTERMEDIATE: (
        EquipmentType.BARBELL,
        EquipmentType.DUMBBELL,
        EquipmentType.MACHINE,
        EquipmentType.CABLE,
        EquipmentType.BODYWEIGHT,
    ),
    ExperienceLevel.ADVANCED: (
        EquipmentType.BARBELL,
        EquipmentType.DUMBBELL,
        EquipmentType.BODYWEIGHT,
        EquipmentType.CABLE,
        EquipmentType.MACHINE,
    ),
}


def get_equipment_preference(experience: ExperienceLevel) -> tuple[EquipmentType, ...]:
    """Equipment types in priority order for an experience level.

    Raises:
        KeyError: If the experience level has no preference defined.
    """
    return EQUIPMENT_PREFERENCE[experience]


def split_upper_lower(count: int) -> tuple[int, int]:
    """Split an exercise count ~60/40: upper rounded up, lower rounded down."""
    upper = -(-count * UPPER_SHARE_NUMERATOR // SPLIT_DENOMINATOR)
    lower = count * LOWER_SHARE_NUMERATOR // SPLIT_DENOMINATOR
    return upper, lower


def rank_candidates(
    catalog: ExerciseCatalog,
    candidate_ids: Iterable[str],
    experience: ExperienceLevel,
    focus: Sequence[MuscleGroup] = (),
) -> list[str]:
    """Order candidates: focus muscles first, then equipment preference.

    The sort is stable, so ties keep catalog order.
    """
    preference = get_equipment_preference(experience)
    focus_set = frozenset(focus)

    def _key(exercise_id: str) -> tuple[int, int]:
        exercise = catalog.get(exercise_id)
        focus_rank = 0 if exercise.primary_muscle in focus_set else 1
        try:
            equipment_rank = preference.index(exercise.equipment)
        except ValueError:
            equipment_rank = len(preference)
        return focus_rank, equipment_rank

    return sorted(dict.fromkeys(candidate_ids), key=_key)


def _first_compatible(
    catalog: ExerciseCatalog, ranked: Iterable[str], selected: Sequence[str]
) -> str | None:
    for candidate in ranked:
        if candidate in selected:
            continue
        if catalog.conflicts_with_any(candidate, selected):
            continue
        return candidate
    return None


def select_exercises(
    catalog: ExerciseCatalog,
    count: int,
    experience: ExperienceLevel,
    region: BodyRegion | None = None,
    focus: Sequence[MuscleGroup] = (),
    exclude: Sequence[str] = (),
) -> list[str]:
    """Pick up to ``count`` mutually compatible exercise ids.

    Args:
        catalog: Exercise catalog supplying patterns and conflicts.
        count: Number of exercises wanted.
        experience: Drives the equipment preference.
        region: Restrict to upper- or lower-body patterns; None for all.
        focus: Muscle groups that rank first when filling secondary slots.
        exclude: Ids that must not be picked.

    Returns:
        Selected ids in selection order. The list is shorter than ``count``
        when no compatible candidate remains; callers treat that as a soft
        shortfall.
    """
    selected: list[str] = []
    if count <= 0:
        return selected

    for pattern in catalog.patterns_for(PatternTier.PRIMARY, region):
        if len(selected) >= count:
            break
        ranked = rank_candidates(
            catalog,
            (i for i in pattern.exercise_ids if i not in exclude),
            experience,
        )
        pick = _first_compatible(catalog, ranked, selected)
        if pick is None:
            logger.debug("No compatible exercise for %s", pattern.tag)
            continue
        selected.append(pick)

    if len(selected) < count:
        pool = [
            exercise_id
            for pattern in catalog.patterns_for(PatternTier.SECONDARY, region)
            for exercise_id in pattern.exercise_ids
            if exercise_id not in exclude
        ]
        for candidate in rank_candidates(catalog, pool, experience, focus):
            if len(selected) >= count:
                break
            if candidate in selected or catalog.conflicts_with_any(candidate, selected):
                continue
            selected.append(candidate)

    if len(selected) < count:
        logger.info(
            "Selected %d of %d requested exercises (region=%s)",
            len(selected), count, region.value if region else "all",
        )
    return selected
