"""Data models for the strength engine."""

from strength_engine.models.enums import (
    BodyRegion,
    ConflictKind,
    EquipmentType,
    ExperienceLevel,
    Gender,
    Goal,
    Movement,
    MuscleGroup,
    PatternTier,
    ProgramType,
    ProgressionAction,
    SupersetType,
)
from strength_engine.models.exercise import Exercise, ExerciseConflict, MovementPattern
from strength_engine.models.loading import (
    ExerciseData,
    ExerciseRef,
    ExerciseWeight,
    ProgressionConfig,
    ProgressionResult,
    RepRange,
    UserEquipmentSettings,
)
from strength_engine.models.preferences import UserPreferences, ValidationResult
from strength_engine.models.program import (
    ExerciseAllocation,
    GeneratedProgram,
    GeneratedWorkout,
    SupersetStructure,
    VolumeAllocation,
    VolumeAnalysis,
)

__all__ = [
    "BodyRegion",
    "ConflictKind",
    "EquipmentType",
    "Exercise",
    "ExerciseAllocation",
    "ExerciseConflict",
    "ExerciseData",
    "ExerciseRef",
    "ExerciseWeight",
    "ExperienceLevel",
    "Gender",
    "GeneratedProgram",
    "GeneratedWorkout",
    "Goal",
    "Movement",
    "MovementPattern",
    "MuscleGroup",
    "PatternTier",
    "ProgramType",
    "ProgressionAction",
    "ProgressionConfig",
    "ProgressionResult",
    "RepRange",
    "SupersetStructure",
    "SupersetType",
    "UserEquipmentSettings",
    "UserPreferences",
    "ValidationResult",
    "VolumeAllocation",
    "VolumeAnalysis",
]
