"""Progressive-overload calculator.

Given one completed exercise and the prescription it was performed
against, decide the next session's weight and reps:

1. Reps below the rep floor are a failure. Enough consecutive failures
   trigger a deload.
2. A high rating with the target met adds one equipment increment.
3. A low rating or a missed target holds the weight and aims for one
   more rep than was achieved.
4. A moderate rating with the target met adds a rep, then weight once the
   top of the rep range is reached (double progression).

Bodyweight exercises without external load progress by reps only.
"""

from __future__ import annotations

import logging

from strength_engine.exceptions import ValidationError
from strength_engine.loading.rounding import round_for_equipment
from strength_engine.models.enums import (
    MAX_RATING,
    MIN_RATING,
    MIN_REPS,
    EquipmentType,
    ProgressionAction,
)
from strength_engine.models.loading import (
    ExerciseData,
    ProgressionConfig,
    ProgressionResult,
    UserEquipmentSettings,
)

logger = logging.getLogger(__name__)


def _validate(data: ExerciseData) -> None:
    errors: list[str] = []
    if isinstance(data.rating, bool) or not isinstance(data.rating, int) or not (
        MIN_RATING <= data.rating <= MAX_RATING
    ):
        errors.append(f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}")
    if data.sets < 1:
        errors.append("Sets must be at least 1")
    if data.reps < 0:
        errors.append("Reps cannot be negative")
    if data.weight < 0:
        errors.append("Weight cannot be negative")
    if data.consecutive_failures < 0:
        errors.append("Consecutive failures cannot be negative")
    if data.target_reps is not None and data.target_reps < MIN_REPS:
        errors.append(f"Target reps must be at least {MIN_REPS}")
    if errors:
        raise ValidationError(errors)


def _increase(data: ExerciseData, settings: UserEquipmentSettings) -> float:
    """One increment up, always strictly heavier than the current weight."""
    increment = settings.increment_for(data.equipment_type)
    new_weight = round_for_equipment(data.weight + increment, data.equipment_type, settings)
    if new_weight <= data.weight:
        new_weight = round(data.weight + increment, 2)
    return new_weight


def _deload(
    data: ExerciseData, settings: UserEquipmentSettings, config: ProgressionConfig
) -> float:
    """Cut the weight by the deload fraction, always strictly lighter when possible."""
    fraction = (
        config.compound_deload_fraction if data.is_compound
        else config.isolation_deload_fraction
    )
    new_weight = round_for_equipment(
        data.weight * (1 - fraction), data.equipment_type, settings
    )
    if new_weight >= data.weight and data.weight > 0:
        increment = settings.increment_for(data.equipment_type)
        new_weight = round_for_equipment(
            data.weight - increment, data.equipment_type, settings
        )
    return max(0.0, new_weight)


def calculate_progression(
    exercise_data: ExerciseData,
    equipment_settings: UserEquipmentSettings,
    config: ProgressionConfig | None = None,
) -> ProgressionResult:
    """Compute the next prescription for one exercise.

    Pure and idempotent: the same input always yields the same result.

    Args:
        exercise_data: What was performed and what was prescribed.
        equipment_settings: The user's loading increments.
        config: State-machine thresholds; defaults apply when None.

    Returns:
        ProgressionResult with the new weight, reps, failure counter and
        the decision taken.

    Raises:
        ValidationError: If the performance record is out of range.
    """
    config = config or ProgressionConfig()
    data = exercise_data
    _validate(data)

    floor = max(MIN_REPS, data.rep_range.low)
    target = max(floor, data.effective_target)
    bodyweight_only = data.equipment_type == EquipmentType.BODYWEIGHT and data.weight == 0
    ceiling = config.bodyweight_max_reps if bodyweight_only else data.rep_range.high
    ceiling = max(ceiling, target)

    # 1. Below the rep floor
    if data.reps < floor:
        failures = data.consecutive_failures + 1
        if failures >= config.deload_after_failures:
            new_weight = 0.0 if bodyweight_only else _deload(data, equipment_settings, config)
            result = ProgressionResult(
                new_weight=new_weight,
                new_reps=floor,
                deload=True,
                consecutive_failures=0,
                action=ProgressionAction.DELOAD,
                reason=(
                    f"{failures} consecutive sessions below {floor} reps; "
                    f"deload to {new_weight:g} kg"
                ),
            )
        else:
            result = ProgressionResult(
                new_weight=data.weight,
                new_reps=floor,
                deload=False,
                consecutive_failures=failures,
                action=ProgressionAction.HOLD,
                reason=f"{data.reps} reps is below the {floor}-rep floor; holding weight",
            )
        logger.debug("%s: %s", data.exercise_name, result.reason)
        return result

    target_met = data.reps >= target
    high = data.rating >= config.high_rating_threshold
    low = data.rating <= config.low_rating_threshold

    # 2. Easy session with the target met
    if high and target_met and not bodyweight_only:
        new_weight = _increase(data, equipment_settings)
        result = ProgressionResult(
            new_weight=new_weight,
            new_reps=floor,
            deload=False,
            consecutive_failures=0,
            action=ProgressionAction.INCREASE_WEIGHT,
            reason=f"Target met with rating {data.rating}; increase to {new_weight:g} kg",
        )
    # 3. Hard session or missed target
    elif low or not target_met:
        new_reps = max(floor, min(data.reps + 1, ceiling))
        why = f"rating {data.rating}" if low else f"{data.reps} of {target} target reps"
        result = ProgressionResult(
            new_weight=data.weight,
            new_reps=new_reps,
            deload=False,
            consecutive_failures=0,
            action=ProgressionAction.HOLD,
            reason=f"Holding weight after {why}; aim for {new_reps} reps",
        )
    # 4. Double progression
    elif target < ceiling:
        result = ProgressionResult(
            new_weight=data.weight,
            new_reps=target + 1,
            deload=False,
            consecutive_failures=0,
            action=ProgressionAction.ADD_REPS,
            reason=f"Target met; add a rep ({target + 1} of {ceiling})",
        )
    elif bodyweight_only:
        result = ProgressionResult(
            new_weight=0.0,
            new_reps=ceiling,
            deload=False,
            consecutive_failures=0,
            action=ProgressionAction.HOLD,
            reason=f"At the {ceiling}-rep ceiling for bodyweight work",
        )
    else:
        new_weight = _increase(data, equipment_settings)
        result = ProgressionResult(
            new_weight=new_weight,
            new_reps=floor,
            deload=False,
            consecutive_failures=0,
            action=ProgressionAction.INCREASE_WEIGHT,
            reason=f"Top of the rep range reached; increase to {new_weight:g} kg",
        )

    logger.debug("%s: %s", data.exercise_name, result.reason)
    return result
