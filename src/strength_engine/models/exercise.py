"""Catalog value types: exercises, movement patterns and conflicts."""

from __future__ import annotations

from dataclasses import dataclass, field

from strength_engine.models.enums import (
    BodyRegion,
    ConflictKind,
    EquipmentType,
    Movement,
    MuscleGroup,
    PatternTier,
)


@dataclass(frozen=True)
class Exercise:
    """A single catalog exercise keyed by a stable slug id.

    Sets allocated to the exercise count against ``primary_muscle`` only;
    ``secondary_muscles`` is informational.
    """

    id: str
    name: str
    equipment: EquipmentType
    primary_muscle: MuscleGroup
    is_compound: bool = True
    secondary_muscles: tuple[MuscleGroup, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MovementPattern:
    """An ordered group of interchangeable exercises.

    Isolation patterns carry no movement category; they are never visited
    by the selector.
    """

    tag: str  # e.g. "PRIMARY_SQUAT"
    tier: PatternTier
    exercise_ids: tuple[str, ...]
    movement: Movement | None = None
    region: BodyRegion | None = None


@dataclass(frozen=True)
class ExerciseConflict:
    """Symmetric relation: the two exercises should not share a session."""

    first_id: str
    second_id: str
    kind: ConflictKind

    def involves(self, exercise_id: str) -> bool:
        return exercise_id in (self.first_id, self.second_id)
