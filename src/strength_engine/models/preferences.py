"""User training preferences and their validation result."""

from __future__ import annotations

from dataclasses import dataclass, field

from strength_engine.models.enums import ExperienceLevel, Goal, MuscleGroup


@dataclass(frozen=True)
class UserPreferences:
    """What the user asked for.

    Fields are typed for the normalised form. Raw host values (plain
    strings, floats) may still arrive here; the validator reports them
    and ``ensure_valid_preferences`` returns the normalised copy.
    """

    frequency: int  # sessions per week, 2-6
    goal: Goal
    experience: ExperienceLevel
    session_time: int  # minutes, 25-120
    exercise_count: int  # per session, 3-6
    sets_per_exercise: int  # 2-4
    focus_muscle_groups: tuple[MuscleGroup, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)
