"""Enumerations and training constants for the strength engine.

Enumerations are string-valued so raw host input ("STRENGTH", "dumbbell")
maps directly onto members. Constants cite their source where one exists.
"""

from enum import Enum


class Goal(str, Enum):
    """Primary training goal of a program."""

    STRENGTH = "STRENGTH"
    HYPERTROPHY = "HYPERTROPHY"


class ExperienceLevel(str, Enum):
    """Self-reported training experience."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class ProgramType(str, Enum):
    """Program archetype chosen from weekly frequency."""

    FULL_BODY = "FULL_BODY"
    UPPER_LOWER = "UPPER_LOWER"
    PPL = "PPL"


class EquipmentType(str, Enum):
    """Equipment classes, each with its own loading increment."""

    BARBELL = "BARBELL"
    DUMBBELL = "DUMBBELL"
    CABLE = "CABLE"
    MACHINE = "MACHINE"
    BODYWEIGHT = "BODYWEIGHT"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class MuscleGroup(str, Enum):
    """Muscle groups used for volume accounting."""

    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    TRICEPS = "triceps"
    BICEPS = "biceps"
    CALVES = "calves"
    CORE = "core"


class Movement(str, Enum):
    """Functional movement categories used for balanced selection."""

    SQUAT = "squat"
    HINGE = "hinge"
    PUSH = "push"
    PULL = "pull"


class PatternTier(str, Enum):
    """Selection priority of a movement pattern.

    PRIMARY lifts are heavy compounds with high CNS demand, SECONDARY are
    moderate compounds used as fillers, ISOLATION is single-joint work.
    """

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ISOLATION = "isolation"


class BodyRegion(str, Enum):
    UPPER = "upper"
    LOWER = "lower"


class ConflictKind(str, Enum):
    """Why two exercises should not share a session."""

    SAME_EXERCISE = "same-exercise"
    SAME_PATTERN = "same-pattern"      # redundant stimulus
    HEAVY_GRIP = "heavy-grip"          # grip fatigue carries over
    SHARED_FATIGUE = "shared-fatigue"  # same joint/region loaded twice


class SupersetType(str, Enum):
    SINGLE = "single"
    SUPERSET = "superset"


class ProgressionAction(str, Enum):
    """What the progression calculator decided for the next session."""

    INCREASE_WEIGHT = "increase_weight"
    ADD_REPS = "add_reps"
    HOLD = "hold"
    DELOAD = "deload"


# ---------------------------------------------------------------------------
# Preference bounds
# ---------------------------------------------------------------------------
MIN_FREQUENCY = 2
MAX_FREQUENCY = 6
MIN_SESSION_TIME_MIN = 25
MAX_SESSION_TIME_MIN = 120
MIN_EXERCISE_COUNT = 3
MAX_EXERCISE_COUNT = 6
MIN_SETS_PER_EXERCISE = 2
MAX_SETS_PER_EXERCISE = 4

# Program archetype thresholds (days per week)
FULL_BODY_MAX_FREQUENCY = 3
UPPER_LOWER_MAX_FREQUENCY = 4

# Upper/lower exercise split: 60% upper (rounded up), 40% lower (rounded down)
UPPER_SHARE_NUMERATOR = 3
LOWER_SHARE_NUMERATOR = 2
SPLIT_DENOMINATOR = 5

# ---------------------------------------------------------------------------
# Volume management
# ---------------------------------------------------------------------------
# Per-session set ceiling for one muscle group. ~8 hard sets per session is
# the upper end of productive per-session volume before returns diminish
# (Schoenfeld et al. 2017, J Sports Sci 35(11):1073-1082).
MAX_SETS_PER_MUSCLE_GROUP = 8
MIN_SETS_PER_ALLOCATION = 1

# Duration estimate: 1 min work + 2 min rest per set, plus warm-up
MINUTES_PER_SET = 3
WARMUP_DURATION_MIN = 5

# ---------------------------------------------------------------------------
# Starting weights
# ---------------------------------------------------------------------------
MIN_AGE = 13
MAX_AGE = 100

# Age tiers (inclusive upper bound, multiplier). Older lifters start lighter.
AGE_MULTIPLIER_TIERS: tuple[tuple[int, float], ...] = (
    (40, 1.0),
    (50, 0.9),
)
AGE_MULTIPLIER_OLDEST = 0.8

# Dumbbells at or below this load are available in 1 kg steps
SMALL_DUMBBELL_MAX_KG = 10.0
SMALL_DUMBBELL_STEP_KG = 1.0

# Default equipment increments (kg), matching the user settings defaults
DEFAULT_BARBELL_INCREMENT = 2.5
DEFAULT_DUMBBELL_INCREMENT = 2.0
DEFAULT_CABLE_INCREMENT = 2.5
DEFAULT_MACHINE_INCREMENT = 5.0

# ---------------------------------------------------------------------------
# Progression
# ---------------------------------------------------------------------------
MIN_RATING = 1
MAX_RATING = 10
# Session rating at or above which a met target earns a load increase
HIGH_RATING_THRESHOLD = 8
# Session rating at or below which load is held
LOW_RATING_THRESHOLD = 4
# Consecutive sessions below the rep floor before a deload
DELOAD_AFTER_FAILURES = 2
# Deload size: ~10% for compounds is the conventional reset
# (Zourdos et al. 2016, J Strength Cond Res 30(1):267-275); isolation
# work tolerates a larger relative cut.
COMPOUND_DELOAD_FRACTION = 0.10
ISOLATION_DELOAD_FRACTION = 0.15
# Rep cap for bodyweight exercises progressed by reps only
BODYWEIGHT_MAX_REPS = 20
MIN_REPS = 1
