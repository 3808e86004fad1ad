"""Program archetype selection from weekly frequency."""

from __future__ import annotations

from strength_engine.models.enums import (
    FULL_BODY_MAX_FREQUENCY,
    UPPER_LOWER_MAX_FREQUENCY,
    ProgramType,
)


def select_program_type(frequency: int) -> ProgramType:
    """2-3 days: full body. 4 days: upper/lower. 5-6 days: push/pull/legs."""
    if frequency <= FULL_BODY_MAX_FREQUENCY:
        return ProgramType.FULL_BODY
    if frequency <= UPPER_LOWER_MAX_FREQUENCY:
        return ProgramType.UPPER_LOWER
    return ProgramType.PPL
