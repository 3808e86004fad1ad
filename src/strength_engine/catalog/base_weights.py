"""Beginner base weights in kg, keyed by lowercase exercise name.

Values are conservative first-session loads for an untrained adult; the
age multiplier and increment rounding are applied on top.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from strength_engine.models.enums import Gender

# name -> (male, female)
_BASE_WEIGHTS: dict[str, tuple[float, float]] = {
    "barbell high bar squat": (40.0, 25.0),
    "lat pulldown (neutral grip)": (40.0, 20.0),
    "trap bar deadlift": (50.0, 30.0),
    "dumbbell bench press": (12.0, 8.0),
    "single arm dumbbell row": (16.0, 8.0),
    "leg press": (80.0, 50.0),
    "incline push-up": (0.0, 0.0),  # bodyweight
    "leg extension": (40.0, 20.0),
    "cable tricep pushdown": (20.0, 10.0),
    "machine hamstring curl": (30.0, 20.0),
    "dumbbell lateral raise": (6.0, 3.0),
    # Catalog spellings of the beginner selection
    "barbell deadlift": (50.0, 30.0),
    "barbell bent over row": (30.0, 20.0),
    "seated dumbbell overhead press": (10.0, 6.0),
    "lat pulldown neutral wide": (40.0, 20.0),
    "incline pushup": (0.0, 0.0),
    "pushup": (0.0, 0.0),
}


def normalize_name(name: str) -> str:
    return " ".join(name.strip().lower().split())


def build_base_weights(
    table: Mapping[str, tuple[float, float]],
) -> Mapping[str, Mapping[Gender, float]]:
    """Index a (male, female) table by normalised name and gender."""
    return MappingProxyType({
        normalize_name(name): MappingProxyType({Gender.MALE: male, Gender.FEMALE: female})
        for name, (male, female) in table.items()
    })


DEFAULT_BASE_WEIGHTS: Mapping[str, Mapping[Gender, float]] = build_base_weights(_BASE_WEIGHTS)


def get_base_weight(
    name: str,
    gender: Gender,
    table: Mapping[str, Mapping[Gender, float]] = DEFAULT_BASE_WEIGHTS,
) -> float | None:
    """Base weight for an exercise name, or None when the name is unlisted."""
    entry = table.get(normalize_name(name))
    if entry is None:
        return None
    return entry[gender]
