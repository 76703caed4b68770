"""Shared pytest fixtures for graphctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from graphctl.services.telemetry import _active_span, _enabled


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no graphctl env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GRAPHCTL_CONFIG", raising=False)
    for name in ("GRAPHCTL_JSON_OUTPUT", "GRAPHCTL_QUIET", "GRAPHCTL_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` enables telemetry process-wide; switch it off after each test."""
    yield
    _enabled.set(False)
    _active_span.set(None)
