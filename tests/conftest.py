"""Shared pytest fixtures and test helpers for meetcount tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from meetcount.config.settings import MeetSettings
from meetcount.services.telemetry import set_telemetry

MEETINGS_CSV = """\
# start, end, weekday
2024-01-01, 2024-01-31, Monday
2024-01-01, 2026-12-31, Wednesday
"""

HOLIDAYS_CSV = "01-01, 12-25, 2024-01-15\n"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep host MEETCOUNT_* variables, logging, and telemetry state out of tests."""
    monkeypatch.delenv("MEETCOUNT_CONFIG", raising=False)
    monkeypatch.delenv("MEETCOUNT_COUNTING__REMAINDER_RULE", raising=False)
    monkeypatch.delenv("MEETCOUNT_COUNTING__EXCLUDE_HOLIDAYS", raising=False)
    app_logger = logging.getLogger("meetcount")
    handlers = app_logger.handlers[:]
    level, propagate = app_logger.level, app_logger.propagate
    yield
    app_logger.handlers = handlers
    app_logger.setLevel(level)
    app_logger.propagate = propagate
    set_telemetry(False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary working directory holding default input.csv and holidays.csv."""
    (tmp_path / "input.csv").write_text(MEETINGS_CSV, encoding="utf-8")
    (tmp_path / "holidays.csv").write_text(HOLIDAYS_CSV, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workdir: Path) -> MeetSettings:
    return MeetSettings.from_cli(base_dir=workdir)

