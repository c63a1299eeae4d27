"""Tests for format_result and OutputSettings."""

import json

from hallctl.domain.groups import StudentGroup
from hallctl.domain.index import Index
from hallctl.domain.person import Phone
from hallctl.output.formatters import OutputSettings, format_result, result_payload
from hallctl.parsing.result import ParseResult


def _ok() -> ParseResult:
    return ParseResult.success("phone", Phone("87438807"))


def _err() -> ParseResult:
    return ParseResult.failure("phone", "Bad phone")


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.color is True
        assert s.width is None


class TestResultPayload:
    def test_success(self) -> None:
        payload = result_payload(_ok())
        assert payload == {
            "ok": True,
            "op": "parse_phone",
            "field": "phone",
            "data": {"value": "87438807"},
            "error": None,
        }

    def test_failure(self) -> None:
        payload = result_payload(_err())
        assert payload["ok"] is False
        assert payload["data"] == {}
        assert payload["error"] == {
            "code": "INVALID_FORMAT",
            "field": "phone",
            "message": "Bad phone",
        }


class TestFormatResult:
    def test_json_mode(self) -> None:
        data = json.loads(format_result(_ok(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["data"]["value"] == "87438807"

    def test_json_index(self) -> None:
        result = ParseResult.success("index", Index.from_one_based(2))
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["data"] == {"one_based": 2, "zero_based": 1}

    def test_json_groups(self) -> None:
        result = ParseResult.success("student_group", frozenset({StudentGroup("x")}))
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["data"] == {"values": ["x"], "count": 1}

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "parse_phone"

    def test_quiet(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "87438807"

    def test_quiet_error(self) -> None:
        output = format_result(_err(), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad phone" in output

    def test_default_is_rich(self) -> None:
        output = format_result(_ok())
        assert output.startswith("OK")
        assert "87438807" in output

    def test_width_passed_through(self) -> None:
        long_msg = "word " * 30
        result = ParseResult.failure("phone", long_msg.strip())
        narrow = format_result(result, settings=OutputSettings(width=40, color=False))
        assert len(narrow.splitlines()) > 1
