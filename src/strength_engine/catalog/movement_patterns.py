"""Movement-pattern taxonomy: primary/secondary x squat/hinge/push/pull.

Primary patterns are heavy compounds with high CNS demand; the selector
visits them first and in the order listed. Secondary patterns are pooled to
fill the remaining slots. Isolation patterns are used for rep ranges and
conflict lookups only.
"""

from __future__ import annotations

from strength_engine.models.enums import BodyRegion, Movement, PatternTier
from strength_engine.models.exercise import MovementPattern

_P = PatternTier.PRIMARY
_S = PatternTier.SECONDARY
_I = PatternTier.ISOLATION

PRIMARY_PATTERNS: tuple[MovementPattern, ...] = (
    MovementPattern(
        "PRIMARY_SQUAT",
        _P,
        ("barbell_high_bar_squat", "barbell_low_bar_squat", "front_squat"),
        Movement.SQUAT,
        BodyRegion.LOWER,
    ),
    MovementPattern(
        "PRIMARY_HINGE",
        _P,
        ("barbell_deadlift", "trap_bar_deadlift"),
        Movement.HINGE,
        BodyRegion.LOWER,
    ),
    MovementPattern(
        "PRIMARY_PUSH",
        _P,
        (
            "barbell_bench_press",
            "incline_barbell_bench_press",
            "seated_dumbbell_overhead_press",
        ),
        Movement.PUSH,
        BodyRegion.UPPER,
    ),
    MovementPattern(
        "PRIMARY_PULL",
        _P,
        ("barbell_bent_over_row", "t_bar_row"),
        Movement.PULL,
        BodyRegion.UPPER,
    ),
)

SECONDARY_PATTERNS: tuple[MovementPattern, ...] = (
    MovementPattern(
        "SECONDARY_SQUAT",
        _S,
        ("leg_press", "smith_machine_squat", "dumbbell_forward_lunge", "backward_lunge"),
        Movement.SQUAT,
        BodyRegion.LOWER,
    ),
    MovementPattern(
        "SECONDARY_HINGE",
        _S,
        ("romanian_deadlift",),
        Movement.HINGE,
        BodyRegion.LOWER,
    ),
    MovementPattern(
        "SECONDARY_PUSH",
        _S,
        (
            "incline_dumbbell_bench_press",
            "dumbbell_bench_press",
            "close_grip_bench_press",
            "pushup",
            "incline_pushup",
            "dips",
        ),
        Movement.PUSH,
        BodyRegion.UPPER,
    ),
    MovementPattern(
        "SECONDARY_PULL",
        _S,
        (
            "single_arm_dumbbell_row",
            "chest_supported_dumbbell_high_row",
            "pullup",
            "chin_up",
            "lat_pulldown_neutral_wide",
        ),
        Movement.PULL,
        BodyRegion.UPPER,
    ),
)

ISOLATION_PATTERNS: tuple[MovementPattern, ...] = (
    MovementPattern(
        "ISOLATION_CHEST", _I, ("cable_fly", "dumbbell_chest_fly"), region=BodyRegion.UPPER
    ),
    MovementPattern(
        "ISOLATION_BACK",
        _I,
        ("lat_pulldown_neutral", "lat_pulldown_pronated", "lat_pulldown_supinated"),
        region=BodyRegion.UPPER,
    ),
    MovementPattern(
        "ISOLATION_SHOULDERS",
        _I,
        (
            "dumbbell_lateral_raise",
            "seated_dumbbell_lateral_raise",
            "lean_in_dumbbell_lateral_raise",
            "single_arm_cable_lateral_raise",
            "bent_over_dumbbell_rear_delt_fly",
            "cable_rear_delt_fly",
            "chest_supported_dumbbell_rear_delt_fly",
        ),
        region=BodyRegion.UPPER,
    ),
    MovementPattern(
        "ISOLATION_ARMS",
        _I,
        (
            "barbell_bicep_curl",
            "dumbbell_bicep_curl",
            "ez_bar_bicep_curl",
            "incline_dumbbell_bicep_curl",
            "incline_dumbbell_hammer_curl",
            "cable_bicep_curl_straight_bar",
            "single_cable_bicep_curl",
            "dual_cable_bicep_curl",
            "cable_tricep_pushdown_bar",
            "cable_overhead_tricep_press_bar",
            "cable_overhead_tricep_press_rope",
            "dumbbell_skull_crusher",
            "ez_bar_skull_crusher",
            "ez_bar_overhead_tricep_press",
        ),
        region=BodyRegion.UPPER,
    ),
    MovementPattern(
        "ISOLATION_LEGS",
        _I,
        ("leg_extension", "machine_hamstring_curl", "nordic_hamstring"),
        region=BodyRegion.LOWER,
    ),
    MovementPattern(
        "ISOLATION_CALVES",
        _I,
        ("dumbbell_standing_calf_raise", "leg_press_calf_raise", "smith_machine_calf_raise"),
        region=BodyRegion.LOWER,
    ),
    MovementPattern("ISOLATION_CORE", _I, ("ab_rollout",)),
    MovementPattern(
        "ISOLATION_OTHER",
        _I,
        (
            "barbell_shrugs",
            "dumbbell_shrugs",
            "barbell_hip_thrust",
            "back_extension",
            "jefferson_curl",
        ),
    ),
)

DEFAULT_PATTERNS: tuple[MovementPattern, ...] = (
    PRIMARY_PATTERNS + SECONDARY_PATTERNS + ISOLATION_PATTERNS
)
