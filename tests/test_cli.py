"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from strength_engine.cli import EXIT_CONFIGURATION, EXIT_INVALID_INPUT, build_parser, main

PREFERENCES = {
    "frequency": 3,
    "goal": "HYPERTROPHY",
    "experience": "BEGINNER",
    "sessionTime": 45,
    "exerciseCount": 4,
    "setsPerExercise": 3,
}


def _write(tmp_path: Path, payload: dict) -> str:
    path = tmp_path / "input.json"
    path.write_text(json.dumps(payload))
    return str(path)


class TestParser:
    def test_subcommands(self) -> None:
        args = build_parser().parse_args(["--indent", "0", "progress", "session.json"])
        assert args.command == "progress"
        assert args.input == "session.json"
        assert args.indent == 0

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestGenerateCommand:
    def test_prints_program(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["generate", _write(tmp_path, PREFERENCES)]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["programType"] == "FULL_BODY"
        assert output["totalWeeklyTime"] == 123

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(PREFERENCES)))
        assert main(["generate", "-"]) == 0
        assert json.loads(capsys.readouterr().out)["frequency"] == 3

    def test_invalid_preferences(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        payload = dict(PREFERENCES, frequency=9)
        assert main(["generate", _write(tmp_path, payload)]) == EXIT_INVALID_INPUT
        err = capsys.readouterr().err
        errors = json.loads(err[err.index("{"):])["errors"]
        assert errors == ["Frequency must be between 2 and 6 days per week"]

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        assert main(["generate", str(path)]) == EXIT_INVALID_INPUT


class TestBeginnerCommand:
    def test_includes_starting_weights(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        payload = {
            "userId": "u1",
            "age": 30,
            "gender": "male",
            "availableTime": "25-35",
            "frequency": 3,
            "equipmentSettings": {},
        }
        assert main(["beginner", _write(tmp_path, payload)]) == 0
        output = json.loads(capsys.readouterr().out)
        first = output["workouts"][0]["supersets"][0]["exercises"][0]
        assert first["startingWeight"] == 40.0

    def test_missing_equipment_settings(self, tmp_path: Path) -> None:
        payload = {"age": 30, "gender": "male", "availableTime": "25-35", "frequency": 3}
        assert main(["beginner", _write(tmp_path, payload)]) == EXIT_CONFIGURATION


class TestProgressCommand:
    def test_prints_progression(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        payload = {
            "exercise": {
                "exerciseName": "Barbell bench press",
                "equipmentType": "BARBELL",
                "sets": 3,
                "reps": 8,
                "weight": 60,
                "rating": 9,
            },
            "equipmentSettings": {"barbellIncrement": 2.5},
        }
        assert main(["progress", _write(tmp_path, payload)]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["action"] == "increase_weight"
        assert output["newWeight"] == 62.5

    def test_requires_equipment_settings(self, tmp_path: Path) -> None:
        payload = {
            "exercise": {
                "exerciseName": "Pushup",
                "equipmentType": "BODYWEIGHT",
                "sets": 3,
                "reps": 10,
                "weight": 0,
                "rating": 5,
            },
        }
        assert main(["progress", _write(tmp_path, payload)]) == EXIT_CONFIGURATION

    def test_bad_rating(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        payload = {
            "exercise": {
                "exerciseName": "Pushup",
                "equipmentType": "BODYWEIGHT",
                "sets": 3,
                "reps": 10,
                "weight": 0,
                "rating": 12,
            },
            "equipmentSettings": {},
        }
        assert main(["progress", _write(tmp_path, payload)]) == EXIT_INVALID_INPUT
        assert "Rating" in capsys.readouterr().err

    def test_mistyped_reps(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        payload = {
            "exercise": {
                "exerciseName": "Barbell bench press",
                "equipmentType": "BARBELL",
                "sets": 3,
                "reps": "10",
                "weight": "heavy",
                "rating": 7,
            },
            "equipmentSettings": {},
        }
        assert main(["progress", _write(tmp_path, payload)]) == EXIT_INVALID_INPUT
        err = capsys.readouterr().err
        errors = json.loads(err[err.index("{"):])["errors"]
        assert errors == [
            "Field reps must be an integer, got '10'",
            "Field weight must be a number, got 'heavy'",
        ]

    def test_isolation_flag_as_string_deloads_deeper(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        payload = {
            "exercise": {
                "exerciseName": "Dumbbell curl",
                "equipmentType": "DUMBBELL",
                "sets": 3,
                "reps": 5,
                "weight": 30,
                "rating": 3,
                "isCompound": "false",
                "consecutiveFailures": 1,
            },
            "equipmentSettings": {},
        }
        assert main(["progress", _write(tmp_path, payload)]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["action"] == "deload"
        assert output["newWeight"] == 26.0  # 15% off 30 kg; 10% would give 28


class TestInputErrors:
    def test_missing_input_file(self, tmp_path: Path) -> None:
        assert main(["generate", str(tmp_path / "absent.json")]) == EXIT_INVALID_INPUT

    def test_focus_must_be_a_list(self, tmp_path: Path) -> None:
        payload = dict(PREFERENCES, focusMuscleGroups=5)
        assert main(["generate", _write(tmp_path, payload)]) == EXIT_INVALID_INPUT
