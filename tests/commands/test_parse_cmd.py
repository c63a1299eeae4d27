"""Tests for the parse command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from hallctl.cli import cli
from hallctl.domain.groups import StudentGroup
from hallctl.domain.index import MESSAGE_INVALID_INDEX
from hallctl.domain.person import Block, Phone


class TestParseFieldCommands:
    def test_phone(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "phone", " 87438807 "])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "87438807" in result.stdout

    def test_index_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "index", "007"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "parse_index"
        assert data["data"] == {"one_based": 7, "zero_based": 6}

    def test_index_zero_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "index", "0"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert MESSAGE_INVALID_INDEX in result.stderr

    def test_negative_index_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "index", "--", "-1"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["message"] == MESSAGE_INVALID_INDEX

    def test_matriculation_number_uses_dashed_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "matriculation-number", "A0123456X"])
        assert result.exit_code == 0
        assert result.stdout == "A0123456X\n"

    def test_quiet_trims(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "email", "  alex@example.com "])
        assert result.stdout == "alex@example.com\n"

    def test_invalid_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "block", "b"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_FORMAT"
        assert data["error"]["message"] == Block.MESSAGE_CONSTRAINTS

    def test_error_does_not_echo_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "phone", "zzqq"])
        assert result.exit_code == 1
        assert Phone.MESSAGE_CONSTRAINTS in result.stderr
        assert "zzqq" not in result.stderr

    @pytest.mark.parametrize(
        "command,raw",
        [
            ("name", "Alex Yeoh"),
            ("address", "Blk 30"),
            ("gender", "F"),
            ("room", "10-105"),
            ("student-group", "cs2103"),
        ],
    )
    def test_every_field_command(self, cli_runner: CliRunner, command: str, raw: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", command, raw])
        assert result.exit_code == 0
        assert result.stdout.strip() == raw

    def test_missing_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "phone"])
        assert result.exit_code == 2

    def test_verbose_logs_rejection(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "--log-json", "parse", "room", "lobby"])
        assert result.exit_code == 1
        assert "Rejected room token (length=5)" in result.stderr


class TestParseGroupsCommand:
    def test_dedup(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "groups", "cs2103", "cs2103"])
        assert result.exit_code == 0
        assert result.stdout == "cs2103\n"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "groups", "hockey", "choir"])
        data = json.loads(result.stdout)
        assert data["data"] == {"values": ["choir", "hockey"], "count": 2}

    def test_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "groups"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["count"] == 0

    def test_first_invalid_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "groups", "cs2103", "??"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["message"] == StudentGroup.MESSAGE_CONSTRAINTS

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "groups", "choir"])
        assert "count: 1" in result.stdout
        assert "choir" in result.stdout


class TestConfigApplies:
    def test_toml_width(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "hallctl.toml").write_text("[output]\nwidth = 40\ncolor = false\n")
        result = cli_runner.invoke(cli, ["parse", "room", "nowhere"])
        assert result.exit_code == 1
        assert all(len(line) <= 40 for line in result.stderr.splitlines())
