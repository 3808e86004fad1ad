"""Command-line entry point: generate programs and progressions as JSON.

Usage:
    strength-engine generate prefs.json        # program from preferences
    strength-engine beginner answers.json      # beginner program with weights
    strength-engine progress session.json      # next prescription
    cat prefs.json | strength-engine generate -
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from strength_engine import config
from strength_engine.engine import ProgramEngine
from strength_engine.exceptions import ConfigurationError, ValidationError
from strength_engine.serialization.program_json import (
    equipment_settings_from_dict,
    exercise_data_from_dict,
    preferences_from_dict,
    program_to_dict,
    progression_to_dict,
    questionnaire_from_dict,
)

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2
EXIT_CONFIGURATION = 3


def _read_json(path: str) -> dict[str, Any]:
    if path == "-":
        return json.load(sys.stdin)
    with open(path) as f:
        return json.load(f)


def _cmd_generate(engine: ProgramEngine, payload: dict[str, Any]) -> dict:
    program = engine.generate_program(preferences_from_dict(payload))
    return program_to_dict(program)


def _cmd_beginner(engine: ProgramEngine, payload: dict[str, Any]) -> dict:
    answers = questionnaire_from_dict(payload)
    settings = equipment_settings_from_dict(
        payload.get("equipmentSettings", payload.get("equipment_settings"))
    )
    user_id = payload.get("userId", payload.get("user_id", "anonymous"))
    program = engine.generate_beginner_program(answers, user_id, settings)
    return program_to_dict(program)


def _cmd_progress(engine: ProgramEngine, payload: dict[str, Any]) -> dict:
    data = exercise_data_from_dict(payload.get("exercise", payload))
    settings = equipment_settings_from_dict(
        payload.get("equipmentSettings", payload.get("equipment_settings"))
    )
    if settings is None:
        raise ConfigurationError("equipmentSettings is required for progression")
    return progression_to_dict(engine.calculate_progression(data, settings))


_COMMANDS = {
    "generate": _cmd_generate,
    "beginner": _cmd_beginner,
    "progress": _cmd_progress,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strength-engine",
        description="Strength program generation and progression",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("generate", "Generate a program from training preferences"),
        ("beginner", "Generate a beginner program from questionnaire answers"),
        ("progress", "Compute the next prescription from a completed exercise"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("input", help="JSON input file, or - for stdin")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    engine = ProgramEngine(max_sets_per_muscle_group=config.MAX_SETS_PER_MUSCLE_GROUP)
    try:
        payload = _read_json(args.input)
        output = _COMMANDS[args.command](engine, payload)
    except ValidationError as exc:
        logger.error("Invalid input: %s", "; ".join(exc.errors))
        print(json.dumps({"errors": list(exc.errors)}, indent=args.indent), file=sys.stderr)
        return EXIT_INVALID_INPUT
    except json.JSONDecodeError as exc:
        logger.error("Input is not valid JSON: %s", exc)
        return EXIT_INVALID_INPUT
    except OSError as exc:
        logger.error("Cannot read input %s: %s", args.input, exc)
        return EXIT_INVALID_INPUT
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return EXIT_CONFIGURATION

    print(json.dumps(output, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
