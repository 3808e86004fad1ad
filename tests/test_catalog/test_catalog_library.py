"""Tests for ExerciseCatalog — indexing, lookups and build-time validation."""

from __future__ import annotations

import pytest

from strength_engine.catalog.exercises import DEFAULT_EXERCISES
from strength_engine.catalog.library import ExerciseCatalog, default_catalog
from strength_engine.catalog.movement_patterns import DEFAULT_PATTERNS
from strength_engine.exceptions import ConfigurationError
from strength_engine.models.enums import (
    BodyRegion,
    ConflictKind,
    EquipmentType,
    MuscleGroup,
    PatternTier,
)
from strength_engine.models.exercise import Exercise, ExerciseConflict, MovementPattern


def _exercise(exercise_id: str, name: str | None = None) -> Exercise:
    return Exercise(exercise_id, name or exercise_id, EquipmentType.BARBELL, MuscleGroup.QUADS)


class TestDefaultCatalog:
    def test_every_pattern_exercise_exists(self, catalog: ExerciseCatalog) -> None:
        for pattern in catalog.patterns:
            for exercise_id in pattern.exercise_ids:
                assert exercise_id in catalog, f"{pattern.tag} lists unknown {exercise_id}"

    def test_size_matches_source_table(self, catalog: ExerciseCatalog) -> None:
        assert len(catalog) == len(DEFAULT_EXERCISES)

    def test_default_catalog_is_cached(self) -> None:
        assert default_catalog() is default_catalog()

    def test_primary_patterns_in_fixed_order(self, catalog: ExerciseCatalog) -> None:
        tags = [p.tag for p in catalog.patterns_for(PatternTier.PRIMARY)]
        assert tags == ["PRIMARY_SQUAT", "PRIMARY_HINGE", "PRIMARY_PUSH", "PRIMARY_PULL"]

    def test_patterns_filtered_by_region(self, catalog: ExerciseCatalog) -> None:
        upper = [p.tag for p in catalog.patterns_for(PatternTier.PRIMARY, BodyRegion.UPPER)]
        lower = [p.tag for p in catalog.patterns_for(PatternTier.SECONDARY, BodyRegion.LOWER)]
        assert upper == ["PRIMARY_PUSH", "PRIMARY_PULL"]
        assert lower == ["SECONDARY_SQUAT", "SECONDARY_HINGE"]

    def test_pattern_lookup_by_tag(self, catalog: ExerciseCatalog) -> None:
        assert catalog.pattern("PRIMARY_HINGE").exercise_ids == (
            "barbell_deadlift",
            "trap_bar_deadlift",
        )
        with pytest.raises(KeyError):
            catalog.pattern("PRIMARY_LUNGE")

    def test_tier_of(self, catalog: ExerciseCatalog) -> None:
        assert catalog.tier_of("barbell_high_bar_squat") == PatternTier.PRIMARY
        assert catalog.tier_of("leg_press") == PatternTier.SECONDARY
        assert catalog.tier_of("cable_fly") == PatternTier.ISOLATION
        assert catalog.tier_of("zercher_squat") is None

    def test_explicit_equipment_field(self, catalog: ExerciseCatalog) -> None:
        assert catalog.get("seated_dumbbell_overhead_press").equipment == EquipmentType.DUMBBELL
        assert catalog.get("lat_pulldown_neutral_wide").equipment == EquipmentType.CABLE
        assert catalog.get("pullup").equipment == EquipmentType.BODYWEIGHT

    def test_isolation_exercises_are_not_compound(self, catalog: ExerciseCatalog) -> None:
        for pattern in catalog.patterns_for(PatternTier.ISOLATION):
            for exercise_id in pattern.exercise_ids:
                assert not catalog.get(exercise_id).is_compound


class TestLookups:
    def test_get_by_id(self, catalog: ExerciseCatalog) -> None:
        assert catalog.get("front_squat").name == "Front squat"

    def test_get_unknown_raises_key_error(self, catalog: ExerciseCatalog) -> None:
        with pytest.raises(KeyError):
            catalog.get("zercher_squat")

    def test_resolve_by_display_name_is_case_insensitive(self, catalog: ExerciseCatalog) -> None:
        exercise = catalog.resolve("  barbell HIGH bar squat ")
        assert exercise is not None
        assert exercise.id == "barbell_high_bar_squat"

    def test_resolve_by_id(self, catalog: ExerciseCatalog) -> None:
        assert catalog.resolve("chin_up").name == "Chin-up"

    def test_resolve_unknown_returns_none(self, catalog: ExerciseCatalog) -> None:
        assert catalog.resolve("Zercher squat") is None

    def test_index_is_read_only(self, catalog: ExerciseCatalog) -> None:
        with pytest.raises(TypeError):
            catalog.exercises["new"] = _exercise("new")  # type: ignore[index]


class TestBuildValidation:
    def test_pattern_with_unknown_exercise_raises(self) -> None:
        pattern = MovementPattern("PRIMARY_SQUAT", PatternTier.PRIMARY, ("a", "ghost"))
        with pytest.raises(ConfigurationError, match="ghost"):
            ExerciseCatalog.build([_exercise("a")], [pattern])

    def test_conflict_with_unknown_exercise_raises(self) -> None:
        conflict = ExerciseConflict("a", "ghost", ConflictKind.SAME_PATTERN)
        with pytest.raises(ConfigurationError, match="ghost"):
            ExerciseCatalog.build([_exercise("a")], [], [conflict])

    def test_duplicate_id_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate exercise id"):
            ExerciseCatalog.build([_exercise("a", "A"), _exercise("a", "B")], [])

    def test_duplicate_name_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate exercise name"):
            ExerciseCatalog.build([_exercise("a", "Squat"), _exercise("b", "squat")], [])

    def test_host_supplied_catalog(self) -> None:
        catalog = ExerciseCatalog.build(
            [_exercise("a"), _exercise("b")],
            [MovementPattern("PRIMARY_SQUAT", PatternTier.PRIMARY, ("a", "b"))],
            [ExerciseConflict("a", "b", ConflictKind.SAME_PATTERN)],
        )
        assert len(catalog) == 2
        assert catalog.has_conflict("b", "a")

    def test_default_data_builds(self) -> None:
        ExerciseCatalog.build(DEFAULT_EXERCISES, DEFAULT_PATTERNS)
