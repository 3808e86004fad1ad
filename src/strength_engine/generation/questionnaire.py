"""Beginner questionnaire and quick-setup defaults.

The questionnaire is the entry point for users with no training history:
a handful of answers are mapped onto full UserPreferences.
"""

from __future__ import annotations

from dataclasses import dataclass

from strength_engine.exceptions import ValidationError
from strength_engine.models.enums import MAX_AGE, MIN_AGE, ExperienceLevel, Gender, Goal
from strength_engine.models.preferences import UserPreferences, ValidationResult

BEGINNER_FREQUENCIES = (2, 3)
EXPERIENCE_ANSWERS = ("none", "some")


@dataclass(frozen=True)
class SessionSlot:
    """What fits into one of the questionnaire's time slots."""

    session_time: int
    exercise_count: int
    sets_per_exercise: int


# available-time answer -> session shape
SESSION_SLOTS: dict[str, SessionSlot] = {
    "25-35": SessionSlot(session_time=35, exercise_count=4, sets_per_exercise=2),
    "40-50": SessionSlot(session_time=50, exercise_count=6, sets_per_exercise=2),
}

# experience -> (frequency, session_time, exercise_count, sets_per_exercise, goal)
QUICK_SETUP_DEFAULTS: dict[ExperienceLevel, tuple[int, int, int, int, Goal]] = {
    ExperienceLevel.BEGINNER: (3, 45, 4, 3, Goal.HYPERTROPHY),
    ExperienceLevel.INTERMEDIATE: (4, 60, 5, 4, Goal.HYPERTROPHY),
    ExperienceLevel.ADVANCED: (5, 75, 6, 4, Goal.STRENGTH),
}


@dataclass(frozen=True)
class BeginnerQuestionnaire:
    age: int
    gender: Gender
    available_time: str  # "25-35" or "40-50"
    frequency: int  # 2 or 3
    experience: str | None = None  # "none" or "some"


def validate_questionnaire(answers: BeginnerQuestionnaire) -> ValidationResult:
    errors: list[str] = []
    age = answers.age
    if isinstance(age, bool) or not isinstance(age, int) or not MIN_AGE <= age <= MAX_AGE:
        errors.append(f"Age must be between {MIN_AGE} and {MAX_AGE}")
    if answers.gender not in (Gender.MALE, Gender.FEMALE, "male", "female"):
        errors.append('Gender must be either "male" or "female"')
    if answers.experience is not None and answers.experience not in EXPERIENCE_ANSWERS:
        errors.append('Experience must be either "none" or "some"')
    if answers.available_time not in SESSION_SLOTS:
        errors.append('Available time must be either "25-35" or "40-50"')
    if isinstance(answers.frequency, bool) or answers.frequency not in BEGINNER_FREQUENCIES:
        errors.append("Frequency must be either 2 or 3")
    return ValidationResult(valid=not errors, errors=tuple(errors))


def questionnaire_to_preferences(answers: BeginnerQuestionnaire) -> UserPreferences:
    """Map questionnaire answers onto generation preferences.

    Raises:
        ValidationError: If any answer is invalid.
    """
    result = validate_questionnaire(answers)
    if not result.valid:
        raise ValidationError(result.errors)

    slot = SESSION_SLOTS[answers.available_time]
    return UserPreferences(
        frequency=answers.frequency,
        goal=Goal.HYPERTROPHY,
        experience=ExperienceLevel.BEGINNER,
        session_time=slot.session_time,
        exercise_count=slot.exercise_count,
        sets_per_exercise=slot.sets_per_exercise,
    )


def quick_setup_preferences(experience: ExperienceLevel | str) -> UserPreferences:
    """Recommended starting preferences for an experience level.

    Unknown levels fall back to the beginner defaults.
    """
    try:
        level = ExperienceLevel(experience)
    except ValueError:
        level = ExperienceLevel.BEGINNER
    frequency, session_time, exercise_count, sets, goal = QUICK_SETUP_DEFAULTS[level]
    return UserPreferences(
        frequency=frequency,
        goal=goal,
        experience=level,
        session_time=session_time,
        exercise_count=exercise_count,
        sets_per_exercise=sets,
    )

