"""Host JSON conversion for engine inputs and outputs.

Inputs accept camelCase (as sent by web clients) or snake_case keys.
Outputs use camelCase. All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from strength_engine.exceptions import ConfigurationError, ValidationError
from strength_engine.generation.questionnaire import BeginnerQuestionnaire
from strength_engine.models.enums import EquipmentType, ExperienceLevel
from strength_engine.models.loading import (
    ExerciseData,
    ExerciseWeight,
    ProgressionResult,
    RepRange,
    UserEquipmentSettings,
)
from strength_engine.models.preferences import UserPreferences
from strength_engine.models.program import (
    ExerciseAllocation,
    GeneratedProgram,
    GeneratedWorkout,
    SupersetStructure,
)

_MISSING = object()

_BOOL_STRINGS = {"true": True, "false": False}


def _get(data: Mapping[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    value = data.get(camel, _MISSING)
    if value is _MISSING:
        value = data.get(snake, default)
    return value


def preferences_from_dict(data: Mapping[str, Any]) -> UserPreferences:
    """Build preferences from host JSON.

    Values are passed through unchecked so the validator can report every
    bad field at once.
    """
    focus = _get(data, "focusMuscleGroups", "focus_muscle_groups") or ()
    if isinstance(focus, str):
        focus = (focus,)
    elif not isinstance(focus, (list, tuple)):
        raise ValidationError(
            [f"Focus muscle groups must be a list of muscle groups, got {focus!r}"]
        )
    return UserPreferences(
        frequency=data.get("frequency"),
        goal=data.get("goal"),
        experience=data.get("experience"),
        session_time=_get(data, "sessionTime", "session_time"),
        exercise_count=_get(data, "exerciseCount", "exercise_count"),
        sets_per_exercise=_get(data, "setsPerExercise", "sets_per_exercise"),
        focus_muscle_groups=tuple(focus),
    )


def questionnaire_from_dict(data: Mapping[str, Any]) -> BeginnerQuestionnaire:
    return BeginnerQuestionnaire(
        age=data.get("age"),
        gender=data.get("gender"),
        available_time=_get(data, "availableTime", "available_time"),
        frequency=data.get("frequency"),
        experience=data.get("experience"),
    )


def equipment_settings_from_dict(data: Mapping[str, Any] | None) -> UserEquipmentSettings | None:
    """Equipment increments from a host settings record; None when absent."""
    if data is None:
        return None
    defaults = UserEquipmentSettings()
    kwargs = {
        "barbell_increment": _get(data, "barbellIncrement", "barbell_increment",
                                  defaults.barbell_increment),
        "dumbbell_increment": _get(data, "dumbbellIncrement", "dumbbell_increment",
                                   defaults.dumbbell_increment),
        "cable_increment": _get(data, "cableIncrement", "cable_increment",
                                defaults.cable_increment),
        "machine_increment": _get(data, "machineIncrement", "machine_increment",
                                  defaults.machine_increment),
    }
    experience = _get(data, "experienceLevel", "experience_level")
    if experience is not None:
        try:
            kwargs["experience_level"] = ExperienceLevel(str(experience).upper())
        except ValueError as exc:
            raise ConfigurationError(f"Unknown experience level: {experience}") from exc
    return UserEquipmentSettings(**kwargs)


def exercise_data_from_dict(data: Mapping[str, Any]) -> ExerciseData:
    """Parse one completed-exercise record.

    Raises:
        ValidationError: If required fields are missing or malformed.
    """
    errors: list[str] = []
    required = {
        "exercise_name": _get(data, "exerciseName", "exercise_name"),
        "equipment_type": _get(data, "equipmentType", "equipment_type"),
        "sets": data.get("sets"),
        "reps": data.get("reps"),
        "weight": data.get("weight"),
        "rating": data.get("rating"),
    }
    errors.extend(f"Missing field: {name}" for name, value in required.items() if value is None)

    for name in ("sets", "reps", "rating"):
        value = required[name]
        if value is not None and not _is_int(value):
            errors.append(f"Field {name} must be an integer, got {value!r}")
    weight = required["weight"]
    if weight is not None and not _is_number(weight):
        errors.append(f"Field weight must be a number, got {weight!r}")
    for name, value in (
        ("target_reps", _get(data, "targetReps", "target_reps")),
        ("consecutive_failures", _get(data, "consecutiveFailures", "consecutive_failures")),
    ):
        if value is not None and not _is_int(value):
            errors.append(f"Field {name} must be an integer, got {value!r}")

    is_compound = _get(data, "isCompound", "is_compound", True)
    if isinstance(is_compound, str) and is_compound.lower() in _BOOL_STRINGS:
        is_compound = _BOOL_STRINGS[is_compound.lower()]
    elif not isinstance(is_compound, bool):
        errors.append(f"Field is_compound must be true or false, got {is_compound!r}")

    equipment = None
    if required["equipment_type"] is not None:
        try:
            equipment = EquipmentType(str(required["equipment_type"]).upper())
        except ValueError:
            errors.append(f"Unknown equipment type: {required['equipment_type']}")

    rep_range = RepRange(8, 12)
    raw_range = _get(data, "repRange", "rep_range")
    if raw_range is not None:
        try:
            rep_range = RepRange.parse(raw_range)
        except ValueError:
            errors.append(f"Invalid rep range: {raw_range}")

    if errors:
        raise ValidationError(errors)

    return ExerciseData(
        exercise_name=required["exercise_name"],
        equipment_type=equipment,
        sets=required["sets"],
        reps=required["reps"],
        weight=float(weight),
        rating=required["rating"],
        is_compound=is_compound,
        rep_range=rep_range,
        target_reps=_get(data, "targetReps", "target_reps"),
        consecutive_failures=_get(data, "consecutiveFailures", "consecutive_failures") or 0,
    )


def program_to_dict(program: GeneratedProgram) -> dict:
    """Convert a GeneratedProgram to a JSON-compatible dict."""
    analysis = program.volume_analysis
    return {
        "programType": program.program_type.value,
        "frequency": program.frequency,
        "goal": program.goal.value,
        "workouts": [_workout_to_dict(w) for w in program.workouts],
        "totalWeeklyTime": program.total_weekly_time,
        "volumeAnalysis": {
            "totalSets": analysis.total_sets,
            "muscleGroupDistribution": dict(analysis.muscle_group_distribution),
            "warnings": list(analysis.warnings),
        },
    }


def program_to_json_string(program: GeneratedProgram, indent: int = 2) -> str:
    return json.dumps(program_to_dict(program), indent=indent)


def weights_to_dict(weights: list[ExerciseWeight]) -> list[dict]:
    result = []
    for w in weights:
        entry = {"exerciseId": w.exercise_id, "weight": w.weight}
        if w.note:
            entry["note"] = w.note
        result.append(entry)
    return result


def progression_to_dict(result: ProgressionResult) -> dict:
    return {
        "newWeight": result.new_weight,
        "newReps": result.new_reps,
        "deload": result.deload,
        "consecutiveFailures": result.consecutive_failures,
        "action": result.action.value,
        "reason": result.reason,
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _workout_to_dict(workout: GeneratedWorkout) -> dict:
    return {
        "name": workout.name,
        "supersets": [_superset_to_dict(s) for s in workout.supersets],
        "estimatedDuration": workout.estimated_duration,
    }


def _superset_to_dict(superset: SupersetStructure) -> dict:
    return {
        "type": superset.type.value,
        "exercises": [_exercise_to_dict(e) for e in superset.exercises],
    }


def _exercise_to_dict(exercise: ExerciseAllocation) -> dict:
    result = {
        "exerciseId": exercise.exercise_id,
        "name": exercise.exercise_name,
        "sets": exercise.sets,
        "reps": exercise.reps,
    }
    if exercise.starting_weight is not None:
        result["startingWeight"] = exercise.starting_weight
    if exercise.notes:
        result["notes"] = exercise.notes
    return result
