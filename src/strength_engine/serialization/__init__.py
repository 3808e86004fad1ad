"""Serialization module: host JSON in, program JSON out."""

from strength_engine.serialization.program_json import (
    preferences_from_dict,
    program_to_dict,
    program_to_json_string,
)

__all__ = ["preferences_from_dict", "program_to_dict", "program_to_json_string"]
