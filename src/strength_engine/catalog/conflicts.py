"""Exercise conflict table.

Two exercises in conflict should not appear in the same session. The table
is written as cliques (every member conflicts with every other) plus
explicit pairs, and expanded into symmetric ExerciseConflict records.
"""

from __future__ import annotations

from itertools import combinations

from strength_engine.models.enums import ConflictKind
from strength_engine.models.exercise import ExerciseConflict

# Redundant stimulus: same pattern, same prime movers
CONFLICT_GROUPS: tuple[tuple[ConflictKind, tuple[str, ...]], ...] = (
    (
        ConflictKind.SAME_PATTERN,
        ("barbell_high_bar_squat", "barbell_low_bar_squat", "front_squat", "smith_machine_squat"),
    ),
    (
        ConflictKind.SAME_PATTERN,
        ("barbell_deadlift", "trap_bar_deadlift", "romanian_deadlift"),
    ),
    (
        ConflictKind.SAME_PATTERN,
        (
            "barbell_bench_press",
            "incline_barbell_bench_press",
            "dumbbell_bench_press",
            "incline_dumbbell_bench_press",
            "close_grip_bench_press",
        ),
    ),
    (
        ConflictKind.SAME_PATTERN,
        ("barbell_bent_over_row", "t_bar_row", "single_arm_dumbbell_row"),
    ),
    (
        ConflictKind.SAME_PATTERN,
        (
            "pullup",
            "chin_up",
            "lat_pulldown_neutral_wide",
            "lat_pulldown_neutral",
            "lat_pulldown_pronated",
            "lat_pulldown_supinated",
        ),
    ),
    (ConflictKind.SAME_PATTERN, ("dumbbell_forward_lunge", "backward_lunge")),
    (ConflictKind.SAME_PATTERN, ("pushup", "incline_pushup")),
)

CONFLICT_PAIRS: tuple[tuple[str, str, ConflictKind], ...] = (
    # Horizontal pressing overlap
    ("barbell_bench_press", "pushup", ConflictKind.SAME_PATTERN),
    ("barbell_bench_press", "dips", ConflictKind.SAME_PATTERN),
    ("dumbbell_bench_press", "pushup", ConflictKind.SAME_PATTERN),
    ("incline_dumbbell_bench_press", "pushup", ConflictKind.SAME_PATTERN),
    ("incline_dumbbell_bench_press", "dips", ConflictKind.SAME_PATTERN),
    ("pushup", "dips", ConflictKind.SAME_PATTERN),
    # Grip is the limiter on heavy pulls from the floor and from the bar
    ("barbell_deadlift", "pullup", ConflictKind.HEAVY_GRIP),
    ("barbell_deadlift", "chin_up", ConflictKind.HEAVY_GRIP),
    ("trap_bar_deadlift", "pullup", ConflictKind.HEAVY_GRIP),
    ("trap_bar_deadlift", "chin_up", ConflictKind.HEAVY_GRIP),
    # Spinal erectors loaded isometrically twice
    ("romanian_deadlift", "barbell_bent_over_row", ConflictKind.SHARED_FATIGUE),
    ("romanian_deadlift", "t_bar_row", ConflictKind.SHARED_FATIGUE),
    # Anterior deltoid
    ("seated_dumbbell_overhead_press", "incline_dumbbell_bench_press", ConflictKind.SHARED_FATIGUE),
    ("seated_dumbbell_overhead_press", "incline_barbell_bench_press", ConflictKind.SHARED_FATIGUE),
)


def expand_conflicts(
    groups: tuple[tuple[ConflictKind, tuple[str, ...]], ...] = CONFLICT_GROUPS,
    pairs: tuple[tuple[str, str, ConflictKind], ...] = CONFLICT_PAIRS,
) -> tuple[ExerciseConflict, ...]:
    """Flatten cliques and pairs into one conflict record per unordered pair.

    The first declaration of a pair wins.
    """
    seen: set[frozenset[str]] = set()
    conflicts: list[ExerciseConflict] = []

    def _add(first: str, second: str, kind: ConflictKind) -> None:
        key = frozenset((first, second))
        if first == second or key in seen:
            return
        seen.add(key)
        conflicts.append(ExerciseConflict(first, second, kind))

    for kind, members in groups:
        for first, second in combinations(members, 2):
            _add(first, second, kind)
    for first, second, kind in pairs:
        _add(first, second, kind)
    return tuple(conflicts)


DEFAULT_CONFLICTS: tuple[ExerciseConflict, ...] = expand_conflicts()
