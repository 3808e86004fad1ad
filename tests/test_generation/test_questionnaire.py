"""Tests for the beginner questionnaire and quick-setup defaults."""

from __future__ import annotations

import pytest

from strength_engine.exceptions import ValidationError
from strength_engine.generation.questionnaire import (
    BeginnerQuestionnaire,
    questionnaire_to_preferences,
    quick_setup_preferences,
    validate_questionnaire,
)
from strength_engine.models.enums import ExperienceLevel, Gender, Goal


def _answers(**overrides) -> BeginnerQuestionnaire:
    fields = dict(age=30, gender=Gender.MALE, available_time="25-35", frequency=3)
    fields.update(overrides)
    return BeginnerQuestionnaire(**fields)


class TestValidateQuestionnaire:
    def test_valid_answers(self) -> None:
        result = validate_questionnaire(_answers())
        assert result.valid
        assert result.errors == ()

    def test_gender_as_plain_string(self) -> None:
        assert validate_questionnaire(_answers(gender="female")).valid

    @pytest.mark.parametrize("age", [12, 101, 30.5, True])
    def test_age_out_of_range(self, age) -> None:
        result = validate_questionnaire(_answers(age=age))
        assert result.errors == ("Age must be between 13 and 100",)

    def test_age_bounds_inclusive(self) -> None:
        assert validate_questionnaire(_answers(age=13)).valid
        assert validate_questionnaire(_answers(age=100)).valid

    def test_bad_gender(self) -> None:
        result = validate_questionnaire(_answers(gender="other"))
        assert result.errors == ('Gender must be either "male" or "female"',)

    def test_bad_time_slot(self) -> None:
        result = validate_questionnaire(_answers(available_time="60"))
        assert result.errors == ('Available time must be either "25-35" or "40-50"',)

    @pytest.mark.parametrize("frequency", [1, 4, True])
    def test_bad_frequency(self, frequency) -> None:
        result = validate_questionnaire(_answers(frequency=frequency))
        assert result.errors == ("Frequency must be either 2 or 3",)

    def test_experience_answer(self) -> None:
        assert validate_questionnaire(_answers(experience="some")).valid
        result = validate_questionnaire(_answers(experience="lots"))
        assert result.errors == ('Experience must be either "none" or "some"',)

    def test_collects_every_error(self) -> None:
        result = validate_questionnaire(
            _answers(age=5, gender="x", available_time="?", frequency=7)
        )
        assert len(result.errors) == 4


class TestQuestionnaireToPreferences:
    def test_short_slot(self) -> None:
        prefs = questionnaire_to_preferences(_answers())
        assert prefs.frequency == 3
        assert prefs.session_time == 35
        assert prefs.exercise_count == 4
        assert prefs.sets_per_exercise == 2
        assert prefs.goal == Goal.HYPERTROPHY
        assert prefs.experience == ExperienceLevel.BEGINNER

    def test_long_slot(self) -> None:
        prefs = questionnaire_to_preferences(_answers(available_time="40-50", frequency=2))
        assert prefs.frequency == 2
        assert prefs.session_time == 50
        assert prefs.exercise_count == 6

    def test_invalid_answers_raise(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            questionnaire_to_preferences(_answers(age=200))
        assert exc_info.value.errors == ("Age must be between 13 and 100",)


class TestQuickSetup:
    @pytest.mark.parametrize(
        "level, frequency, session_time, count, sets, goal",
        [
            (ExperienceLevel.BEGINNER, 3, 45, 4, 3, Goal.HYPERTROPHY),
            (ExperienceLevel.INTERMEDIATE, 4, 60, 5, 4, Goal.HYPERTROPHY),
            (ExperienceLevel.ADVANCED, 5, 75, 6, 4, Goal.STRENGTH),
        ],
    )
    def test_defaults(
        self,
        level: ExperienceLevel,
        frequency: int,
        session_time: int,
        count: int,
        sets: int,
        goal: Goal,
    ) -> None:
        prefs = quick_setup_preferences(level)
        assert prefs.experience == level
        assert (prefs.frequency, prefs.session_time) == (frequency, session_time)
        assert (prefs.exercise_count, prefs.sets_per_exercise) == (count, sets)
        assert prefs.goal == goal

    def test_string_level(self) -> None:
        assert quick_setup_preferences("ADVANCED").experience == ExperienceLevel.ADVANCED

    def test_unknown_level_falls_back_to_beginner(self) -> None:
        assert quick_setup_preferences("ELITE") == quick_setup_preferences(ExperienceLevel.BEGINNER)
