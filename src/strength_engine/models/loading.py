"""Loading inputs and outputs: starting weights, equipment settings, progression."""

from __future__ import annotations

from dataclasses import dataclass, field

from strength_engine.exceptions import ConfigurationError
from strength_engine.models.enums import (
    BODYWEIGHT_MAX_REPS,
    COMPOUND_DELOAD_FRACTION,
    DEFAULT_BARBELL_INCREMENT,
    DEFAULT_CABLE_INCREMENT,
    DEFAULT_DUMBBELL_INCREMENT,
    DEFAULT_MACHINE_INCREMENT,
    DELOAD_AFTER_FAILURES,
    HIGH_RATING_THRESHOLD,
    ISOLATION_DELOAD_FRACTION,
    LOW_RATING_THRESHOLD,
    MIN_REPS,
    EquipmentType,
    ExperienceLevel,
    ProgressionAction,
)


@dataclass(frozen=True)
class ExerciseRef:
    """Host-side exercise identity handed to the starting-weight calculator."""

    exercise_id: str
    exercise_name: str


@dataclass(frozen=True)
class ExerciseWeight:
    exercise_id: str
    weight: float  # kg, >= 0
    note: str | None = None


@dataclass(frozen=True)
class UserEquipmentSettings:
    """Per-user loading increments in kg.

    Raises:
        ConfigurationError: If any increment is not a positive number.
    """

    barbell_increment: float = DEFAULT_BARBELL_INCREMENT
    dumbbell_increment: float = DEFAULT_DUMBBELL_INCREMENT
    cable_increment: float = DEFAULT_CABLE_INCREMENT
    machine_increment: float = DEFAULT_MACHINE_INCREMENT
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER

    def __post_init__(self) -> None:
        for name in (
            "barbell_increment",
            "dumbbell_increment",
            "cable_increment",
            "machine_increment",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}")

    def increment_for(self, equipment: EquipmentType) -> float:
        """Smallest load step for an equipment type.

        Weighted bodyweight work (belt, vest) is loaded with dumbbell plates.
        """
        if equipment == EquipmentType.BARBELL:
            return self.barbell_increment
        if equipment == EquipmentType.CABLE:
            return self.cable_increment
        if equipment == EquipmentType.MACHINE:
            return self.machine_increment
        return self.dumbbell_increment


@dataclass(frozen=True)
class RepRange:
    """Inclusive rep target, e.g. 8-12."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low < MIN_REPS or self.high < self.low:
            raise ValueError(f"Invalid rep range {self.low}-{self.high}")

    @classmethod
    def parse(cls, text: str) -> RepRange:
        """Parse "8-12" (or a single "5") into a RepRange."""
        parts = str(text).strip().split("-")
        if len(parts) == 1:
            value = int(parts[0])
            return cls(value, value)
        if len(parts) != 2:
            raise ValueError(f"Invalid rep range {text!r}")
        return cls(int(parts[0]), int(parts[1]))

    def __str__(self) -> str:
        return f"{self.low}-{self.high}"


@dataclass(frozen=True)
class ExerciseData:
    """One completed exercise plus the prescription it was performed against."""

    exercise_name: str
    equipment_type: EquipmentType
    sets: int
    reps: int  # reps achieved per set
    weight: float  # kg, 0 for unloaded bodyweight work
    rating: int  # 1 (awful) to 10 (easy)
    is_compound: bool = True
    rep_range: RepRange = field(default_factory=lambda: RepRange(8, 12))
    target_reps: int | None = None  # defaults to the rep floor
    consecutive_failures: int = 0

    @property
    def effective_target(self) -> int:
        return self.target_reps if self.target_reps is not None else self.rep_range.low


@dataclass(frozen=True)
class ProgressionResult:
    new_weight: float
    new_reps: int
    deload: bool
    consecutive_failures: int
    action: ProgressionAction
    reason: str


@dataclass(frozen=True)
class ProgressionConfig:
    """Thresholds of the progression state machine."""

    high_rating_threshold: int = HIGH_RATING_THRESHOLD
    low_rating_threshold: int = LOW_RATING_THRESHOLD
    deload_after_failures: int = DELOAD_AFTER_FAILURES
    compound_deload_fraction: float = COMPOUND_DELOAD_FRACTION
    isolation_deload_fraction: float = ISOLATION_DELOAD_FRACTION
    bodyweight_max_reps: int = BODYWEIGHT_MAX_REPS

    def __post_init__(self) -> None:
        if self.low_rating_threshold >= self.high_rating_threshold:
            raise ConfigurationError("low_rating_threshold must be below high_rating_threshold")
        if self.deload_after_failures < 1:
            raise ConfigurationError("deload_after_failures must be at least 1")
        for fraction in (self.compound_deload_fraction, self.isolation_deload_fraction):
            if not 0 < fraction < 1:
                raise ConfigurationError(f"Deload fraction must be in (0, 1), got {fraction}")
