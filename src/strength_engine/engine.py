"""ProgramEngine, the orchestrator for program generation and loading."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping

from strength_engine.catalog.library import ExerciseCatalog, default_catalog
from strength_engine.generation.program_type import select_program_type
from strength_engine.generation.questionnaire import (
    BeginnerQuestionnaire,
    questionnaire_to_preferences,
)
from strength_engine.generation.strategies import STRATEGIES, ProgramStrategy
from strength_engine.generation.validator import ensure_valid_preferences
from strength_engine.loading.progression import calculate_progression
from strength_engine.loading.starting_weights import calculate_starting_weights
from strength_engine.models.enums import MAX_SETS_PER_MUSCLE_GROUP, Gender, ProgramType
from strength_engine.models.loading import (
    ExerciseData,
    ExerciseRef,
    ExerciseWeight,
    ProgressionConfig,
    ProgressionResult,
    UserEquipmentSettings,
)
from strength_engine.models.preferences import UserPreferences
from strength_engine.models.program import GeneratedProgram

logger = logging.getLogger(__name__)


class ProgramEngine:
    """Bundles generation, starting weights and progression over one catalog.

    Usage:
        engine = ProgramEngine()
        program = engine.generate_program(preferences)
        result = engine.calculate_progression(exercise_data, settings)
    """

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        max_sets_per_muscle_group: int = MAX_SETS_PER_MUSCLE_GROUP,
        progression_config: ProgressionConfig | None = None,
        strategies: Mapping[ProgramType, ProgramStrategy] | None = None,
    ) -> None:
        self.catalog = catalog or default_catalog()
        self.max_sets_per_muscle_group = max_sets_per_muscle_group
        self.progression_config = progression_config or ProgressionConfig()
        self.strategies = dict(strategies or STRATEGIES)

    def generate_program(self, preferences: UserPreferences) -> GeneratedProgram:
        """Validate preferences and build a program for the matching archetype.

        Raises:
            ValidationError: If any preference is out of range.
        """
        prefs = ensure_valid_preferences(preferences)
        program_type = select_program_type(prefs.frequency)
        strategy = self.strategies[program_type]
        program = strategy.generate(prefs, self.catalog, self.max_sets_per_muscle_group)
        logger.info(
            "Generated %s program: %d workout(s), %d exercises, %d warning(s)",
            program.program_type.value,
            len(program.workouts),
            program.exercise_count,
            len(program.volume_analysis.warnings),
        )
        return program

    def generate_beginner_program(
        self,
        answers: BeginnerQuestionnaire,
        user_id: str | int,
        equipment_settings: UserEquipmentSettings | None,
    ) -> GeneratedProgram:
        """Build a beginner program from questionnaire answers with starting weights.

        Raises:
            ValidationError: If any answer is invalid.
            ConfigurationError: If the user has no equipment settings.
        """
        program = self.generate_program(questionnaire_to_preferences(answers))
        refs = [
            ExerciseRef(e.exercise_id, e.exercise_name)
            for workout in program.workouts
            for e in workout.exercises
        ]
        weights = {
            w.exercise_id: w
            for w in self.calculate_starting_weights(
                user_id, refs, answers.age, answers.gender, equipment_settings
            )
        }
        return _attach_weights(program, weights)

    def calculate_starting_weights(
        self,
        user_id: str | int,
        exercises: Iterable[ExerciseRef | tuple[str, str]],
        age: int,
        gender: Gender | str,
        equipment_settings: UserEquipmentSettings | None,
    ) -> list[ExerciseWeight]:
        return calculate_starting_weights(user_id, exercises, age, gender, equipment_settings)

    def calculate_progression(
        self,
        exercise_data: ExerciseData,
        equipment_settings: UserEquipmentSettings,
    ) -> ProgressionResult:
        return calculate_progression(exercise_data, equipment_settings, self.progression_config)


def _attach_weights(
    program: GeneratedProgram, weights: Mapping[str, ExerciseWeight]
) -> GeneratedProgram:
    workouts = []
    for workout in program.workouts:
        supersets = []
        for superset in workout.supersets:
            exercises = tuple(
                dataclasses.replace(
                    e,
                    starting_weight=weights[e.exercise_id].weight,
                    notes=weights[e.exercise_id].note,
                )
                for e in superset.exercises
            )
            supersets.append(dataclasses.replace(superset, exercises=exercises))
        workouts.append(dataclasses.replace(workout, supersets=tuple(supersets)))
    return dataclasses.replace(program, workouts=tuple(workouts))


def generate_program(
    preferences: UserPreferences, catalog: ExerciseCatalog | None = None
) -> GeneratedProgram:
    """Generate a program with a default-configured engine."""
    return ProgramEngine(catalog=catalog).generate_program(preferences)
