"""Beginner starting weights for users with no training history.

Base weight by exercise name and gender, scaled by an age multiplier and
rounded to the user's equipment increment. Equipment is classified from
the exercise name so host exercises outside the built-in catalog still get
a sensible increment.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from strength_engine.catalog.base_weights import DEFAULT_BASE_WEIGHTS, get_base_weight
from strength_engine.exceptions import ConfigurationError, ValidationError
from strength_engine.loading.rounding import round_for_equipment
from strength_engine.models.enums import (
    AGE_MULTIPLIER_OLDEST,
    AGE_MULTIPLIER_TIERS,
    MAX_AGE,
    MIN_AGE,
    EquipmentType,
    Gender,
)
from strength_engine.models.loading import ExerciseRef, ExerciseWeight, UserEquipmentSettings

logger = logging.getLogger(__name__)

# (name substrings, equipment), first match wins; unmatched names load like a barbell
_EQUIPMENT_KEYWORDS: tuple[tuple[tuple[str, ...], EquipmentType], ...] = (
    (("barbell", "trap bar"), EquipmentType.BARBELL),
    (("dumbbell",), EquipmentType.DUMBBELL),
    (("cable",), EquipmentType.CABLE),
    (("machine", "leg press", "leg extension", "hamstring curl"), EquipmentType.MACHINE),
)


def classify_equipment(exercise_name: str) -> EquipmentType:
    name = exercise_name.lower()
    for keywords, equipment in _EQUIPMENT_KEYWORDS:
        if any(k in name for k in keywords):
            return equipment
    return EquipmentType.BARBELL


def get_age_multiplier(age: int) -> float:
    """1.0 up to 40, 0.9 from 41 to 50, 0.8 above 50."""
    for upper_bound, multiplier in AGE_MULTIPLIER_TIERS:
        if age <= upper_bound:
            return multiplier
    return AGE_MULTIPLIER_OLDEST


def _as_ref(exercise: ExerciseRef | tuple[str, str]) -> ExerciseRef:
    if isinstance(exercise, ExerciseRef):
        return exercise
    exercise_id, exercise_name = exercise
    return ExerciseRef(str(exercise_id), exercise_name)


def _validate_inputs(age: int, gender: Gender | str) -> Gender:
    errors: list[str] = []
    if isinstance(age, bool) or not isinstance(age, int) or not MIN_AGE <= age <= MAX_AGE:
        errors.append(f"Age must be between {MIN_AGE} and {MAX_AGE}")
    try:
        parsed = Gender(gender)
    except ValueError:
        parsed = None
        errors.append('Gender must be either "male" or "female"')
    if errors:
        raise ValidationError(errors)
    return parsed


def calculate_starting_weights(
    user_id: str | int,
    exercises: Iterable[ExerciseRef | tuple[str, str]],
    age: int,
    gender: Gender | str,
    equipment_settings: UserEquipmentSettings | None,
    base_weights: Mapping[str, Mapping[Gender, float]] | None = None,
) -> list[ExerciseWeight]:
    """Compute a first-session weight for each exercise.

    Args:
        user_id: Host user id, used for logging only.
        exercises: ExerciseRef records or ``(id, name)`` pairs. Repeated ids
            are calculated once.
        age: Age in years.
        gender: "male" or "female".
        equipment_settings: The user's loading increments.
        base_weights: Alternative base-weight table (normalised names).

    Returns:
        One ExerciseWeight per distinct exercise id, in input order.

    Raises:
        ConfigurationError: If the user has no equipment settings.
        ValidationError: If age or gender is invalid.
    """
    if equipment_settings is None:
        raise ConfigurationError(f"Equipment settings not found for user {user_id}")
    parsed_gender = _validate_inputs(age, gender)
    table = base_weights if base_weights is not None else DEFAULT_BASE_WEIGHTS
    multiplier = get_age_multiplier(age)

    results: list[ExerciseWeight] = []
    seen: set[str] = set()
    for exercise in map(_as_ref, exercises):
        if exercise.exercise_id in seen:
            continue
        seen.add(exercise.exercise_id)

        base = get_base_weight(exercise.exercise_name, parsed_gender, table)
        if base is None:
            logger.debug(
                "No base weight for %r (user %s); defaulting to 0", exercise.exercise_name, user_id
            )
            results.append(
                ExerciseWeight(
                    exercise_id=exercise.exercise_id,
                    weight=0.0,
                    note=f"No base weight for {exercise.exercise_name}; "
                    "assuming bodyweight (0 kg)",
                )
            )
            continue

        equipment = classify_equipment(exercise.exercise_name)
        weight = round_for_equipment(base * multiplier, equipment, equipment_settings)
        results.append(ExerciseWeight(exercise_id=exercise.exercise_id, weight=max(0.0, weight)))

    logger.info(
        "Calculated %d starting weights for user %s (age multiplier %.1f)",
        len(results), user_id, multiplier,
    )
    return results
