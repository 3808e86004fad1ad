"""Shared test fixtures: catalog, preference profiles, equipment settings, session records."""

from __future__ import annotations

from typing import Callable

import pytest

from strength_engine.catalog.library import ExerciseCatalog, default_catalog
from strength_engine.models.enums import EquipmentType, ExperienceLevel, Goal
from strength_engine.models.loading import ExerciseData, RepRange, UserEquipmentSettings
from strength_engine.models.preferences import UserPreferences


@pytest.fixture
def catalog() -> ExerciseCatalog:
    """The built-in exercise catalog."""
    return default_catalog()


@pytest.fixture
def beginner_prefs() -> UserPreferences:
    """Beginner, 3 days/week hypertrophy, 4 exercises x 3 sets in 45 minutes."""
    return UserPreferences(
        frequency=3,
        goal=Goal.HYPERTROPHY,
        experience=ExperienceLevel.BEGINNER,
        session_time=45,
        exercise_count=4,
        sets_per_exercise=3,
    )


@pytest.fixture
def intermediate_prefs() -> UserPreferences:
    """Intermediate, 4 days/week strength, 5 exercises x 3 sets in 60 minutes."""
    return UserPreferences(
        frequency=4,
        goal=Goal.STRENGTH,
        experience=ExperienceLevel.INTERMEDIATE,
        session_time=60,
        exercise_count=5,
        sets_per_exercise=3,
    )


@pytest.fixture
def default_settings() -> UserEquipmentSettings:
    """Stock increments: barbell 2.5, dumbbell 2.0, cable 2.5, machine 5.0."""
    return UserEquipmentSettings()


@pytest.fixture
def make_session() -> Callable[..., ExerciseData]:
    """Factory for a completed bench-press session: 3x8 @ 60 kg, rating 6, range 8-12."""

    def _make(**overrides) -> ExerciseData:
        values = {
            "exercise_name": "Barbell bench press",
            "equipment_type": EquipmentType.BARBELL,
            "sets": 3,
            "reps": 8,
            "weight": 60.0,
            "rating": 6,
            "is_compound": True,
            "rep_range": RepRange(8, 12),
        }
        values.update(overrides)
        return ExerciseData(**values)

    return _make
