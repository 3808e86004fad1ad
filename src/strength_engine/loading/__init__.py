"""Weight prescription: starting weights, progression and rounding."""

from strength_engine.loading.progression import calculate_progression
from strength_engine.loading.starting_weights import calculate_starting_weights

__all__ = ["calculate_progression", "calculate_starting_weights"]
