"""Default exercise table.

Ids are stable slugs; display names match the names hosts store. Equipment
is explicit per exercise, so renaming an exercise never changes how it is
classified for selection.
"""

from __future__ import annotations

from strength_engine.models.enums import EquipmentType, MuscleGroup
from strength_engine.models.exercise import Exercise

_B = EquipmentType.BARBELL
_D = EquipmentType.DUMBBELL
_C = EquipmentType.CABLE
_M = EquipmentType.MACHINE
_BW = EquipmentType.BODYWEIGHT

_Q = MuscleGroup.QUADS
_H = MuscleGroup.HAMSTRINGS
_G = MuscleGroup.GLUTES
_CH = MuscleGroup.CHEST
_BK = MuscleGroup.BACK
_S = MuscleGroup.SHOULDERS
_T = MuscleGroup.TRICEPS
_BI = MuscleGroup.BICEPS
_CA = MuscleGroup.CALVES
_CO = MuscleGroup.CORE


def _compound(
    exercise_id: str,
    name: str,
    equipment: EquipmentType,
    primary: MuscleGroup,
    *secondary: MuscleGroup,
) -> Exercise:
    return Exercise(exercise_id, name, equipment, primary, True, tuple(secondary))


def _isolation(
    exercise_id: str,
    name: str,
    equipment: EquipmentType,
    primary: MuscleGroup,
    *secondary: MuscleGroup,
) -> Exercise:
    return Exercise(exercise_id, name, equipment, primary, False, tuple(secondary))


# --- Primary compounds ------------------------------------------------------
_PRIMARY = (
    _compound("barbell_high_bar_squat", "Barbell high bar squat", _B, _Q, _G),
    _compound("barbell_low_bar_squat", "Barbell low bar squat", _B, _Q, _G),
    _compound("front_squat", "Front squat", _B, _Q),
    _compound("barbell_deadlift", "Barbell deadlift", _B, _H, _G, _BK),
    _compound("trap_bar_deadlift", "Trap bar deadlift", _B, _H, _G, _BK),
    _compound("barbell_bench_press", "Barbell bench press", _B, _CH, _T),
    _compound("incline_barbell_bench_press", "Incline barbell bench press", _B, _CH, _S, _T),
    _compound("seated_dumbbell_overhead_press", "Seated dumbbell overhead press", _D, _S, _T),
    _compound("barbell_bent_over_row", "Barbell bent over row", _B, _BK, _BI),
    _compound("t_bar_row", "T bar row", _B, _BK, _BI),
)

# --- Secondary compounds ----------------------------------------------------
_SECONDARY = (
    _compound("leg_press", "Leg press", _M, _Q),
    _compound("smith_machine_squat", "Smith machine squat", _M, _Q),
    _compound("dumbbell_forward_lunge", "Dumbbell forward lunge", _D, _Q, _H, _G),
    _compound("backward_lunge", "Backward lunge", _BW, _G, _Q, _H),
    _compound("romanian_deadlift", "Romanian deadlift", _B, _H, _G),
    _compound("incline_dumbbell_bench_press", "Incline dumbbell bench press", _D, _CH, _S, _T),
    _compound("dumbbell_bench_press", "Dumbbell bench press", _D, _CH, _T),
    _compound("close_grip_bench_press", "Close grip bench press", _B, _T, _CH),
    _compound("pushup", "Pushup", _BW, _CH, _S, _T),
    _compound("incline_pushup", "Incline pushup", _BW, _CH, _T),
    _compound("dips", "Dips", _BW, _T, _CH),
    _compound("single_arm_dumbbell_row", "Single arm dumbbell row", _D, _BK, _BI),
    _compound(
        "chest_supported_dumbbell_high_row", "Chest supported dumbbell high row", _D, _BK, _BI
    ),
    _compound("pullup", "Pullup", _BW, _BK, _BI),
    _compound("chin_up", "Chin-up", _BW, _BK, _BI),
    _compound("lat_pulldown_neutral_wide", "Lat pulldown neutral wide", _C, _BK, _BI),
)

# --- Isolation --------------------------------------------------------------
_ISOLATION = (
    # chest
    _isolation("cable_fly", "Cable fly", _C, _CH),
    _isolation("dumbbell_chest_fly", "Dumbbell chest fly", _D, _CH),
    # back
    _isolation("lat_pulldown_neutral", "Lat pulldown, neutral", _C, _BK, _BI),
    _isolation("lat_pulldown_pronated", "Lat pulldown, pronated", _C, _BK, _BI),
    _isolation("lat_pulldown_supinated", "Lat pulldown, supinated", _C, _BK, _BI),
    # shoulders
    _isolation("dumbbell_lateral_raise", "Dumbbell lateral raise", _D, _S),
    _isolation("seated_dumbbell_lateral_raise", "Seated dumbbell lateral raise", _D, _S),
    _isolation("lean_in_dumbbell_lateral_raise", "Lean in dumbbell lateral raise", _D, _S),
    _isolation("single_arm_cable_lateral_raise", "Single arm cable lateral raise", _C, _S),
    _isolation("bent_over_dumbbell_rear_delt_fly", "Bent over dumbbell rear delt fly", _D, _S),
    _isolation("cable_rear_delt_fly", "Cable rear delt fly", _C, _S),
    _isolation(
        "chest_supported_dumbbell_rear_delt_fly", "Chest supported dumbbell rear delt fly", _D, _S
    ),
    # biceps
    _isolation("barbell_bicep_curl", "Barbell bicep curl", _B, _BI),
    _isolation("dumbbell_bicep_curl", "Dumbbell bicep curl", _D, _BI),
    _isolation("ez_bar_bicep_curl", "EZ bar bicep curl", _B, _BI),
    _isolation("incline_dumbbell_bicep_curl", "Incline dumbbell bicep curl", _D, _BI),
    _isolation("incline_dumbbell_hammer_curl", "Incline dumbbell hammer curl", _D, _BI),
    _isolation("cable_bicep_curl_straight_bar", "Cable bicep curl, straight bar", _C, _BI),
    _isolation("single_cable_bicep_curl", "Single cable bicep curl", _C, _BI),
    _isolation("dual_cable_bicep_curl", "Dual cable bicep curl", _C, _BI),
    # triceps
    _isolation("cable_tricep_pushdown_bar", "Cable tricep pushdown, bar", _C, _T),
    _isolation("cable_overhead_tricep_press_bar", "Cable overhead tricep press, bar", _C, _T),
    _isolation(
        "cable_overhead_tricep_press_rope", "Cable overhead tricep press, rope attachment", _C, _T
    ),
    _isolation("dumbbell_skull_crusher", "Dumbbell skull crusher", _D, _T),
    _isolation("ez_bar_skull_crusher", "EZ bar skull crusher", _B, _T),
    _isolation("ez_bar_overhead_tricep_press", "EZ bar overhead tricep press", _B, _T),
    # legs
    _isolation("leg_extension", "Leg extension", _M, _Q),
    _isolation("machine_hamstring_curl", "Machine hamstring curl", _M, _H),
    _isolation("nordic_hamstring", "Nordic hamstring", _BW, _H),
    # calves
    _isolation("dumbbell_standing_calf_raise", "Dumbbell standing calf raise", _D, _CA),
    _isolation("leg_press_calf_raise", "Leg press calf raise", _M, _CA),
    _isolation("smith_machine_calf_raise", "Smith machine calf raise", _M, _CA),
    # core
    _isolation("ab_rollout", "Ab rollout", _BW, _CO),
    # other
    _isolation("barbell_shrugs", "Barbell shrugs", _B, _BK),
    _isolation("dumbbell_shrugs", "Dumbbell shrugs", _D, _BK),
    _isolation("barbell_hip_thrust", "Barbell hip thrust", _B, _G, _H),
    _isolation("back_extension", "Back extension", _BW, _H, _G),
    _isolation("jefferson_curl", "Jefferson curl", _B, _H),
)

DEFAULT_EXERCISES: tuple[Exercise, ...] = _PRIMARY + _SECONDARY + _ISOLATION
