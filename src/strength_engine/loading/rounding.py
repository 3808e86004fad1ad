"""Weight rounding to loadable increments.

Both the starting-weight calculator and the progression calculator round
through here, so a prescribed weight is always something the user can
actually load.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from strength_engine.models.enums import (
    SMALL_DUMBBELL_MAX_KG,
    SMALL_DUMBBELL_STEP_KG,
    EquipmentType,
)
from strength_engine.models.loading import UserEquipmentSettings


def round_half_up(
    weights: Sequence[float] | np.ndarray,
    increments: Sequence[float] | np.ndarray | float,
) -> np.ndarray:
    """Round each weight to the nearest multiple of its increment, ties upward.

    ``np.round`` rounds ties to even, which would turn 3.75 kg on a 2.5 kg
    increment into 2.5 instead of 5.0; flooring ``x + 0.5`` does not.

    Args:
        weights: Raw weights in kg.
        increments: One positive increment per weight, or a scalar.

    Returns:
        Array of rounded weights, clamped at 0 and trimmed to 2 decimals.
    """
    w = np.asarray(weights, dtype=float)
    inc = np.broadcast_to(np.asarray(increments, dtype=float), w.shape)
    if np.any(inc <= 0):
        raise ValueError("Increments must be positive")
    # The small epsilon absorbs binary representation error at exact ties
    steps = np.floor(w / inc + 0.5 + 1e-9)
    return np.maximum(np.round(steps * inc, 2), 0.0)


def round_to_increment(weight: float, increment: float) -> float:
    return float(round_half_up([weight], increment)[0])


def round_dumbbell_weight(weight: float, increment: float) -> float:
    """Dumbbells up to 10 kg come in 1 kg steps regardless of the increment."""
    if weight <= SMALL_DUMBBELL_MAX_KG:
        return round_to_increment(weight, SMALL_DUMBBELL_STEP_KG)
    return round_to_increment(weight, increment)


def round_for_equipment(
    weight: float,
    equipment: EquipmentType,
    settings: UserEquipmentSettings,
) -> float:
    """Round a weight with the rule for its equipment type."""
    increment = settings.increment_for(equipment)
    if equipment in (EquipmentType.DUMBBELL, EquipmentType.BODYWEIGHT):
        return round_dumbbell_weight(weight, increment)
    return round_to_increment(weight, increment)
