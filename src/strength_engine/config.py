"""Environment-variable-based configuration for the command-line interface."""

from __future__ import annotations

import os

from strength_engine.models.enums import MAX_SETS_PER_MUSCLE_GROUP as _DEFAULT_MAX_SETS

LOG_LEVEL: str = os.environ.get("STRENGTH_ENGINE_LOG_LEVEL", "INFO").upper()
MAX_SETS_PER_MUSCLE_GROUP: int = int(
    os.environ.get("STRENGTH_ENGINE_MAX_SETS_PER_MUSCLE_GROUP", str(_DEFAULT_MAX_SETS))
)
