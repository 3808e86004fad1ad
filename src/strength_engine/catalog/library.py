"""Immutable, pre-indexed exercise catalog."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from strength_engine.catalog.conflicts import DEFAULT_CONFLICTS
from strength_engine.catalog.exercises import DEFAULT_EXERCISES
from strength_engine.catalog.movement_patterns import DEFAULT_PATTERNS
from strength_engine.exceptions import ConfigurationError
from strength_engine.models.enums import BodyRegion, ConflictKind, PatternTier
from strength_engine.models.exercise import Exercise, ExerciseConflict, MovementPattern


@dataclass(frozen=True)
class ExerciseCatalog:
    """Exercises, movement patterns and the conflict table, indexed by id.

    Build instances with :meth:`build`, which validates cross references.
    All lookups are read-only, so one catalog can be shared freely.
    """

    exercises: Mapping[str, Exercise]
    patterns: tuple[MovementPattern, ...]
    conflicts: Mapping[str, Mapping[str, ConflictKind]]
    names: Mapping[str, str]  # lowercase display name -> id

    @classmethod
    def build(
        cls,
        exercises: Iterable[Exercise],
        patterns: Iterable[MovementPattern],
        conflicts: Iterable[ExerciseConflict] = (),
    ) -> ExerciseCatalog:
        """Index catalog data supplied by the host.

        Raises:
            ConfigurationError: On duplicate ids or names, or when a pattern
                or conflict references an exercise that does not exist.
        """
        by_id: dict[str, Exercise] = {}
        by_name: dict[str, str] = {}
        for exercise in exercises:
            if exercise.id in by_id:
                raise ConfigurationError(f"Duplicate exercise id: {exercise.id}")
            name_key = exercise.name.strip().lower()
            if name_key in by_name:
                raise ConfigurationError(f"Duplicate exercise name: {exercise.name}")
            by_id[exercise.id] = exercise
            by_name[name_key] = exercise.id

        pattern_list = tuple(patterns)
        for pattern in pattern_list:
            missing = [i for i in pattern.exercise_ids if i not in by_id]
            if missing:
                raise ConfigurationError(
                    f"Pattern {pattern.tag} references unknown exercises: {', '.join(missing)}"
                )

        index: dict[str, dict[str, ConflictKind]] = {}
        for conflict in conflicts:
            for exercise_id in (conflict.first_id, conflict.second_id):
                if exercise_id not in by_id:
                    raise ConfigurationError(
                        f"Conflict references unknown exercise: {exercise_id}"
                    )
            index.setdefault(conflict.first_id, {})[conflict.second_id] = conflict.kind
            index.setdefault(conflict.second_id, {})[conflict.first_id] = conflict.kind

        return cls(
            exercises=MappingProxyType(by_id),
            patterns=pattern_list,
            conflicts=MappingProxyType({k: MappingProxyType(v) for k, v in index.items()}),
            names=MappingProxyType(by_name),
        )

    def get(self, exercise_id: str) -> Exercise:
        """Look up an exercise by id.

        Raises:
            KeyError: If the id is not in the catalog.
        """
        return self.exercises[exercise_id]

    def resolve(self, key: str) -> Exercise | None:
        """Find an exercise by id or by display name (case-insensitive)."""
        exercise = self.exercises.get(key)
        if exercise is not None:
            return exercise
        exercise_id = self.names.get(key.strip().lower())
        return self.exercises[exercise_id] if exercise_id is not None else None

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self.exercises

    def __len__(self) -> int:
        return len(self.exercises)

    def pattern(self, tag: str) -> MovementPattern:
        """Look up a movement pattern by tag.

        Raises:
            KeyError: If no pattern has the tag.
        """
        for pattern in self.patterns:
            if pattern.tag == tag:
                return pattern
        raise KeyError(tag)

    def patterns_for(
        self, tier: PatternTier, region: BodyRegion | None = None
    ) -> tuple[MovementPattern, ...]:
        """Patterns of one tier in catalog order, optionally limited to a region."""
        return tuple(
            p for p in self.patterns
            if p.tier == tier and (region is None or p.region == region)
        )

    def tier_of(self, exercise_id: str) -> PatternTier | None:
        """Tier of the first pattern listing the exercise."""
        for pattern in self.patterns:
            if exercise_id in pattern.exercise_ids:
                return pattern.tier
        return None

    def conflict_kind(self, first_id: str, second_id: str) -> ConflictKind | None:
        if first_id == second_id:
            return ConflictKind.SAME_EXERCISE
        return self.conflicts.get(first_id, {}).get(second_id)

    def has_conflict(self, first_id: str, second_id: str) -> bool:
        return self.conflict_kind(first_id, second_id) is not None

    def conflicts_with_any(self, candidate_id: str, selected_ids: Iterable[str]) -> bool:
        return any(self.has_conflict(candidate_id, s) for s in selected_ids)


@lru_cache(maxsize=1)
def default_catalog() -> ExerciseCatalog:
    """The built-in catalog, built once per process."""
    return ExerciseCatalog.build(DEFAULT_EXERCISES, DEFAULT_PATTERNS, DEFAULT_CONFLICTS)
