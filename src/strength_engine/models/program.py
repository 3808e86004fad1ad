"""Generated program structures, from per-exercise volume up to the week."""

from __future__ import annotations

from dataclasses import dataclass, field

from strength_engine.models.enums import Goal, ProgramType, SupersetType


@dataclass(frozen=True)
class VolumeAllocation:
    """Sets granted to one exercise after the per-muscle cap is applied."""

    exercise_id: str
    exercise_name: str
    recommended_sets: int
    reason: str
    capped: bool = False


@dataclass(frozen=True)
class ExerciseAllocation:
    """One exercise as it appears in a workout."""

    exercise_id: str
    exercise_name: str
    sets: int
    reps: str  # rep range, e.g. "8-12"
    starting_weight: float | None = None
    notes: str | None = None


@dataclass(frozen=True)
class SupersetStructure:
    """A single exercise or a pair performed back to back."""

    type: SupersetType
    exercises: tuple[ExerciseAllocation, ...]

    def __post_init__(self) -> None:
        expected = 1 if self.type == SupersetType.SINGLE else 2
        if len(self.exercises) != expected:
            raise ValueError(
                f"{self.type.value} structure needs {expected} exercise(s), "
                f"got {len(self.exercises)}"
            )

    @property
    def total_sets(self) -> int:
        return sum(e.sets for e in self.exercises)


@dataclass(frozen=True)
class GeneratedWorkout:
    name: str
    supersets: tuple[SupersetStructure, ...]
    estimated_duration: int  # minutes

    @property
    def exercises(self) -> tuple[ExerciseAllocation, ...]:
        """All exercises in performance order."""
        return tuple(e for s in self.supersets for e in s.exercises)

    @property
    def total_sets(self) -> int:
        return sum(s.total_sets for s in self.supersets)


@dataclass(frozen=True)
class VolumeAnalysis:
    """Weekly-template volume summary plus any soft warnings."""

    total_sets: int
    muscle_group_distribution: tuple[tuple[str, int], ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GeneratedProgram:
    """Complete output of program generation.

    ``program_type`` is the archetype actually generated, which differs from
    the selected one when a fallback applies.
    """

    program_type: ProgramType
    frequency: int
    goal: Goal
    workouts: tuple[GeneratedWorkout, ...]
    total_weekly_time: int  # minutes
    volume_analysis: VolumeAnalysis

    @property
    def exercise_count(self) -> int:
        return sum(len(w.exercises) for w in self.workouts)
