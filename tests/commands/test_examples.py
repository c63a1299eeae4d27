"""Tests for the --examples flag on commands and groups."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from hallctl.cli import cli


class TestExamples:
    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--examples"])
        assert result.exit_code == 0
        assert "Examples for '" in result.output
        assert "hallctl parse index 3" in result.output

    @pytest.mark.parametrize(
        "command,expected",
        [
            ("phone", "hallctl parse phone 87438807"),
            ("matriculation-number", "hallctl parse matriculation-number A0123456X"),
            ("groups", "hallctl parse groups cs2103 choir"),
        ],
    )
    def test_command_examples(self, cli_runner: CliRunner, command: str, expected: str) -> None:
        result = cli_runner.invoke(cli, ["parse", command, "--examples"])
        assert result.exit_code == 0
        assert expected in result.output

    def test_fields_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["fields", "--examples"])
        assert result.exit_code == 0
        assert "hallctl --json fields" in result.output

    def test_help_does_not_include_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "phone", "--help"])
        assert result.exit_code == 0
        assert "--examples" in result.output
        assert "87438807" not in result.output
