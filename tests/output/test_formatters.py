"""Tests for the format_result dispatcher and OutputSettings."""

import json

from rfc3339kit.output.formatters import OutputSettings, format_result
from rfc3339kit.services.parse import parse_datetime


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(
            parse_datetime("2021-01-01T00:00:00Z"),
            settings=OutputSettings(json_output=True),
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "parse"
        assert data["value"]["date_time"]["date"] == {"year": 2021, "month": 1, "day": 1}

    def test_json_mode_error(self) -> None:
        output = format_result(
            parse_datetime("2021-13-01T00:00:00Z"),
            settings=OutputSettings(json_output=True),
        )
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"] == {"position": 5, "message": "bad month"}

    def test_json_beats_quiet(self) -> None:
        output = format_result(
            parse_datetime("2021-01-01T00:00:00Z"),
            settings=OutputSettings(json_output=True, quiet=True),
        )
        assert json.loads(output)["ok"] is True


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        output = format_result(parse_datetime("2021-01-01T00:00:00Z"))
        assert output.startswith("OK")

    def test_quiet_success(self) -> None:
        output = format_result(
            parse_datetime("2021-01-01T00:00:00Z"),
            settings=OutputSettings(quiet=True),
        )
        assert output == "OK"

    def test_quiet_error(self) -> None:
        output = format_result(
            parse_datetime("2021-01-01T00:00:00"),
            settings=OutputSettings(quiet=True),
        )
        assert output == "ERROR: expected 'Z' or 'z' or '+' or '-' (position 19)"
