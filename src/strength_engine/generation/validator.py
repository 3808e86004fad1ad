"""Preference validation.

Every field is checked and every violation reported, so a host can show
the user all problems at once.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from strength_engine.exceptions import ValidationError
from strength_engine.models.enums import (
    MAX_EXERCISE_COUNT,
    MAX_FREQUENCY,
    MAX_SESSION_TIME_MIN,
    MAX_SETS_PER_EXERCISE,
    MIN_EXERCISE_COUNT,
    MIN_FREQUENCY,
    MIN_SESSION_TIME_MIN,
    MIN_SETS_PER_EXERCISE,
    ExperienceLevel,
    Goal,
    MuscleGroup,
)
from strength_engine.models.preferences import UserPreferences, ValidationResult

# field -> (minimum, maximum, label)
_INTEGER_BOUNDS: dict[str, tuple[int, int, str]] = {
    "frequency": (MIN_FREQUENCY, MAX_FREQUENCY, "Frequency"),
    "session_time": (MIN_SESSION_TIME_MIN, MAX_SESSION_TIME_MIN, "Session time"),
    "exercise_count": (MIN_EXERCISE_COUNT, MAX_EXERCISE_COUNT, "Exercise count"),
    "sets_per_exercise": (MIN_SETS_PER_EXERCISE, MAX_SETS_PER_EXERCISE, "Sets per exercise"),
}

_UNITS = {
    "frequency": " days per week",
    "session_time": " minutes",
    "exercise_count": "",
    "sets_per_exercise": "",
}


def _coerce_enum(enum_cls: type[Enum], value: Any) -> Enum | None:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _check_integer(name: str, value: Any) -> str | None:
    low, high, label = _INTEGER_BOUNDS[name]
    if isinstance(value, bool) or not isinstance(value, int):
        return f"{label} must be an integer"
    if value < low or value > high:
        return f"{label} must be between {low} and {high}{_UNITS[name]}"
    return None


def validate_preferences(prefs: UserPreferences) -> ValidationResult:
    """Check every preference field.

    Args:
        prefs: Preferences as received from the host.

    Returns:
        ValidationResult with ``valid`` False and one message per bad field.
    """
    errors: list[str] = []

    for name in _INTEGER_BOUNDS:
        error = _check_integer(name, getattr(prefs, name))
        if error:
            errors.append(error)

    if _coerce_enum(Goal, prefs.goal) is None:
        errors.append("Goal must be either STRENGTH or HYPERTROPHY")
    if _coerce_enum(ExperienceLevel, prefs.experience) is None:
        errors.append("Experience must be BEGINNER, INTERMEDIATE, or ADVANCED")

    focus = prefs.focus_muscle_groups or ()
    if isinstance(focus, str):
        focus = (focus,)
    unknown = [str(m) for m in focus if _coerce_enum(MuscleGroup, m) is None]
    if unknown:
        errors.append(f"Unknown focus muscle groups: {', '.join(unknown)}")

    return ValidationResult(valid=not errors, errors=tuple(errors))


def ensure_valid_preferences(prefs: UserPreferences) -> UserPreferences:
    """Validate and return a normalised copy with enum-typed fields.

    Raises:
        ValidationError: Listing every violated field.
    """
    result = validate_preferences(prefs)
    if not result.valid:
        raise ValidationError(result.errors)

    focus = prefs.focus_muscle_groups or ()
    if isinstance(focus, str):
        focus = (focus,)
    return dataclasses.replace(
        prefs,
        goal=Goal(prefs.goal),
        experience=ExperienceLevel(prefs.experience),
        focus_muscle_groups=tuple(dict.fromkeys(MuscleGroup(m) for m in focus)),
    )
