"""Custom exception hierarchy for the strength engine."""

from __future__ import annotations


class StrengthEngineError(Exception):
    """Base exception for all strength_engine errors."""


class ValidationError(StrengthEngineError):
    """Caller input is malformed. Carries every violation, not just the first."""

    def __init__(self, errors: list[str] | tuple[str, ...], message: str | None = None) -> None:
        self.errors = tuple(errors)
        super().__init__(message or "Invalid input: " + "; ".join(self.errors))


class ConfigurationError(StrengthEngineError):
    """Required external configuration is missing or inconsistent.

    Raised for absent equipment settings or a catalog that references
    unknown exercises. Fatal to the current operation.
    """
