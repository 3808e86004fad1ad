"""Program strategies, one per archetype.

Each strategy turns validated preferences into a GeneratedProgram by
running selection, volume allocation, rep-range lookup and superset
composition for each of its workouts.
"""

from __future__ import annotations

import dataclasses
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from strength_engine.catalog.library import ExerciseCatalog
from strength_engine.generation.rep_ranges import resolve_rep_range
from strength_engine.generation.selector import select_exercises, split_upper_lower
from strength_engine.generation.supersets import compose_supersets
from strength_engine.generation.volume import (
    allocate_volume,
    estimate_workout_duration,
    muscle_group_distribution,
)
from strength_engine.models.enums import (
    MAX_SETS_PER_MUSCLE_GROUP,
    BodyRegion,
    ProgramType,
)
from strength_engine.models.preferences import UserPreferences
from strength_engine.models.program import (
    ExerciseAllocation,
    GeneratedProgram,
    GeneratedWorkout,
    VolumeAllocation,
    VolumeAnalysis,
)

logger = logging.getLogger(__name__)


class ProgramStrategy(ABC):
    """Base class for archetype-specific program generation."""

    program_type: ProgramType

    @abstractmethod
    def generate(
        self,
        prefs: UserPreferences,
        catalog: ExerciseCatalog,
        max_sets_per_muscle_group: int = MAX_SETS_PER_MUSCLE_GROUP,
    ) -> GeneratedProgram:
        """Build a program from already-validated preferences."""
        ...

    def _build_workout(
        self,
        name: str,
        requested: int,
        region: BodyRegion | None,
        prefs: UserPreferences,
        catalog: ExerciseCatalog,
        max_sets_per_muscle_group: int,
        warnings: list[str],
    ) -> tuple[GeneratedWorkout, list[VolumeAllocation]]:
        exercise_ids = select_exercises(
            catalog,
            requested,
            prefs.experience,
            region=region,
            focus=prefs.focus_muscle_groups,
        )
        if len(exercise_ids) < requested:
            warnings.append(
                f"{name}: only {len(exercise_ids)} of {requested} exercises could be "
                "selected without conflicts"
            )

        volume = allocate_volume(
            exercise_ids, prefs.sets_per_exercise, catalog, max_sets_per_muscle_group
        )
        for allocation in volume:
            if allocation.capped:
                warnings.append(f"{allocation.exercise_name}: {allocation.reason}")

        exercises = [
            ExerciseAllocation(
                exercise_id=v.exercise_id,
                exercise_name=v.exercise_name,
                sets=v.recommended_sets,
                reps=resolve_rep_range(v.exercise_id, prefs.goal, catalog),
            )
            for v in volume
        ]
        supersets = compose_supersets(exercises)
        duration = estimate_workout_duration(sum(v.recommended_sets for v in volume))
        if duration > prefs.session_time:
            warnings.append(
                f"{name} is estimated at {duration} minutes, over the "
                f"{prefs.session_time}-minute session limit"
            )

        workout = GeneratedWorkout(
            name=name,
            supersets=tuple(supersets),
            estimated_duration=duration,
        )
        return workout, volume

    def _assemble(
        self,
        program_type: ProgramType,
        prefs: UserPreferences,
        workouts: Sequence[GeneratedWorkout],
        allocations: Sequence[VolumeAllocation],
        catalog: ExerciseCatalog,
        warnings: Sequence[str],
    ) -> GeneratedProgram:
        # Sessions cycle through the workouts: 4 days of upper/lower is A/B/A/B
        weekly_time = sum(
            workouts[day % len(workouts)].estimated_duration
            for day in range(prefs.frequency)
        ) if workouts else 0
        distribution = muscle_group_distribution(allocations, catalog)

        return GeneratedProgram(
            program_type=program_type,
            frequency=prefs.frequency,
            goal=prefs.goal,
            workouts=tuple(workouts),
            total_weekly_time=weekly_time,
            volume_analysis=VolumeAnalysis(
                total_sets=sum(a.recommended_sets for a in allocations),
                muscle_group_distribution=tuple((m.value, s) for m, s in distribution.items()),
                warnings=tuple(warnings),
            ),
        )


class FullBodyStrategy(ProgramStrategy):
    """One full-body workout repeated on every training day."""

    program_type = ProgramType.FULL_BODY

    def generate(
        self,
        prefs: UserPreferences,
        catalog: ExerciseCatalog,
        max_sets_per_muscle_group: int = MAX_SETS_PER_MUSCLE_GROUP,
    ) -> GeneratedProgram:
        warnings: list[str] = []
        workout, volume = self._build_workout(
            "Full Body Workout",
            prefs.exercise_count,
            None,
            prefs,
            catalog,
            max_sets_per_muscle_group,
            warnings,
        )
        return self._assemble(
            ProgramType.FULL_BODY, prefs, [workout], volume, catalog, warnings
        )


class UpperLowerStrategy(ProgramStrategy):
    """Alternating upper-body and lower-body workouts.

    The exercise count is split 60/40 in favour of the upper body, which
    has more movement patterns to cover.
    """

    program_type = ProgramType.UPPER_LOWER

    def generate(
        self,
        prefs: UserPreferences,
        catalog: ExerciseCatalog,
        max_sets_per_muscle_group: int = MAX_SETS_PER_MUSCLE_GROUP,
    ) -> GeneratedProgram:
        warnings: list[str] = []
        upper_count, lower_count = split_upper_lower(prefs.exercise_count)

        upper, upper_volume = self._build_workout(
            "Upper Body", upper_count, BodyRegion.UPPER, prefs, catalog,
            max_sets_per_muscle_group, warnings,
        )
        lower, lower_volume = self._build_workout(
            "Lower Body", lower_count, BodyRegion.LOWER, prefs, catalog,
            max_sets_per_muscle_group, warnings,
        )
        return self._assemble(
            ProgramType.UPPER_LOWER,
            prefs,
            [upper, lower],
            upper_volume + lower_volume,
            catalog,
            warnings,
        )


class PushPullLegsStrategy(FullBodyStrategy):
    """Push/pull/legs is not built out; it falls back to full body.

    The generated program reports FULL_BODY and carries a warning, so the
    host can tell the fallback happened.
    """

    program_type = ProgramType.PPL

    def generate(
        self,
        prefs: UserPreferences,
        catalog: ExerciseCatalog,
        max_sets_per_muscle_group: int = MAX_SETS_PER_MUSCLE_GROUP,
    ) -> GeneratedProgram:
        logger.info("PPL requested for %d days; falling back to full body", prefs.frequency)
        program = super().generate(prefs, catalog, max_sets_per_muscle_group)
        fallback = (
            "Push/pull/legs programs are not available yet; "
            "generated a full-body program instead"
        )
        analysis = dataclasses.replace(
            program.volume_analysis,
            warnings=(fallback,) + program.volume_analysis.warnings,
        )
        return dataclasses.replace(program, volume_analysis=analysis)


STRATEGIES: dict[ProgramType, ProgramStrategy] = {
    ProgramType.FULL_BODY: FullBodyStrategy(),
    ProgramType.UPPER_LOWER: UpperLowerStrategy(),
    ProgramType.PPL: PushPullLegsStrategy(),
}


def get_strategy(program_type: ProgramType) -> ProgramStrategy:
    """Look up the strategy for an archetype.

    Raises:
        KeyError: If no strategy is registered for the archetype.
    """
    return STRATEGIES[program_type]
