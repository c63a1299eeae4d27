"""Shared pytest fixtures for hallctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run each test from an empty directory with no HALLCTL_* overrides.

    Keeps config walk-up discovery from picking up a stray hallctl.toml.
    """
    for name in ("HALLCTL_CONFIG", "HALLCTL_JSON_OUTPUT", "HALLCTL_QUIET", "HALLCTL_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects (the CLI calls it on every run)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    hall = logging.getLogger("hallctl")
    hall_level = hall.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    hall.setLevel(hall_level)
