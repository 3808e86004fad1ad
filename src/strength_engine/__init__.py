"""Training-program synthesis and progressive-overload engine."""

from strength_engine.engine import ProgramEngine, generate_program
from strength_engine.exceptions import ConfigurationError, StrengthEngineError, ValidationError
from strength_engine.loading.progression import calculate_progression
from strength_engine.loading.starting_weights import calculate_starting_weights

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ProgramEngine",
    "StrengthEngineError",
    "ValidationError",
    "calculate_progression",
    "calculate_starting_weights",
    "generate_program",
]
