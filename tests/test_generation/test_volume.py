"""Tests for volume allocation — per-muscle caps, one-set floor, monotonicity."""

from __future__ import annotations

import pytest

from strength_engine.catalog.library import ExerciseCatalog
from strength_engine.generation.volume import (
    allocate_volume,
    estimate_workout_duration,
    muscle_group_distribution,
    overtrained_muscle_groups,
)
from strength_engine.models.enums import MuscleGroup

BEGINNER_FULL_BODY = [
    "barbell_high_bar_squat",
    "barbell_deadlift",
    "seated_dumbbell_overhead_press",
    "barbell_bent_over_row",
]

BACK_HEAVY = [
    "barbell_bent_over_row",
    "chest_supported_dumbbell_high_row",
    "lat_pulldown_neutral_wide",
    "pullup",
]


class TestAllocateVolume:
    def test_uncapped_allocation(self, catalog: ExerciseCatalog) -> None:
        allocations = allocate_volume(BEGINNER_FULL_BODY, 3, catalog)
        assert [a.recommended_sets for a in allocations] == [3, 3, 3, 3]
        assert all(not a.capped for a in allocations)
        assert allocations[0].reason == "3 sets as requested"
        assert allocations[0].exercise_name == "Barbell high bar squat"

    def test_cap_reduces_third_back_exercise(self, catalog: ExerciseCatalog) -> None:
        allocations = allocate_volume(BACK_HEAVY[:3], 3, catalog)
        assert [a.recommended_sets for a in allocations] == [3, 3, 2]
        assert allocations[2].capped
        assert allocations[2].reason == (
            "2 sets (capped at 8 sets for back - volume management)"
        )

    def test_never_fewer_than_one_set(self, catalog: ExerciseCatalog) -> None:
        allocations = allocate_volume(BACK_HEAVY, 4, catalog)
        assert [a.recommended_sets for a in allocations] == [4, 4, 1, 1]
        assert allocations[3].reason == (
            "1 set (capped at 8 sets for back - volume management)"
        )

    def test_custom_cap(self, catalog: ExerciseCatalog) -> None:
        allocations = allocate_volume(BACK_HEAVY[:2], 3, catalog, max_sets_per_muscle_group=5)
        assert [a.recommended_sets for a in allocations] == [3, 2]

    def test_only_primary_muscle_counts(self, catalog: ExerciseCatalog) -> None:
        """Deadlifts list back as a secondary muscle; rows are not reduced."""
        allocations = allocate_volume(
            ["barbell_deadlift", "barbell_bent_over_row", "chest_supported_dumbbell_high_row"],
            4,
            catalog,
        )
        assert [a.recommended_sets for a in allocations] == [4, 4, 4]

    def test_order_preserved(self, catalog: ExerciseCatalog) -> None:
        allocations = allocate_volume(list(reversed(BEGINNER_FULL_BODY)), 2, catalog)
        assert [a.exercise_id for a in allocations] == list(reversed(BEGINNER_FULL_BODY))

    def test_unknown_exercise_raises(self, catalog: ExerciseCatalog) -> None:
        with pytest.raises(KeyError):
            allocate_volume(["zercher_squat"], 3, catalog)

    def test_monotonic_in_sets(self, catalog: ExerciseCatalog) -> None:
        for ids in (BEGINNER_FULL_BODY, BACK_HEAVY):
            totals = [
                sum(a.recommended_sets for a in allocate_volume(ids, sets, catalog))
                for sets in (2, 3, 4)
            ]
            assert totals == sorted(totals)

    def test_monotonic_in_exercise_count(self, catalog: ExerciseCatalog) -> None:
        totals = [
            sum(a.recommended_sets for a in allocate_volume(BACK_HEAVY[:n], 3, catalog))
            for n in range(1, len(BACK_HEAVY) + 1)
        ]
        assert totals == sorted(totals)


class TestVolumeSummary:
    def test_distribution_in_declaration_order(self, catalog: ExerciseCatalog) -> None:
        allocations = allocate_volume(list(reversed(BEGINNER_FULL_BODY)), 3, catalog)
        distribution = muscle_group_distribution(allocations, catalog)
        assert list(distribution) == [
            MuscleGroup.QUADS,
            MuscleGroup.HAMSTRINGS,
            MuscleGroup.BACK,
            MuscleGroup.SHOULDERS,
        ]
        assert set(distribution.values()) == {3}

    def test_overtrained_only_past_cap(self, catalog: ExerciseCatalog) -> None:
        assert overtrained_muscle_groups(allocate_volume(BACK_HEAVY[:3], 3, catalog), catalog) == []
        over = overtrained_muscle_groups(allocate_volume(BACK_HEAVY, 4, catalog), catalog)
        assert over == [MuscleGroup.BACK]

    def test_duration_estimate(self) -> None:
        assert estimate_workout_duration(12) == 41
        assert estimate_workout_duration(0) == 5
