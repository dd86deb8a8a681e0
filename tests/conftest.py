"""Shared pytest fixtures for persiancal tests."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from persiancal.config.settings import PersianCalSettings
from persiancal.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_process_state() -> Generator[None]:
    """Undo telemetry and logging changes made by ``-v`` CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pcal = logging.getLogger("persiancal")
    pcal_level = pcal.level
    yield
    disable_telemetry()
    root.handlers = original_handlers
    root.setLevel(original_level)
    pcal.setLevel(pcal_level)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run with CWD in a temp dir and no config file or PERSIANCAL_* overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PERSIANCAL_CONFIG", str(tmp_path / "absent.toml"))
    for var in (
        "PERSIANCAL_PERSIAN",
        "PERSIANCAL_QUIET",
        "PERSIANCAL_VERBOSE",
        "PERSIANCAL_JSON_OUTPUT",
        "PERSIANCAL_DISPLAY__PERSIAN_DIGITS",
        "PERSIANCAL_DISPLAY__LAYOUT",
        "PERSIANCAL_DIFF__BREAKDOWN",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings(_isolated_config: None) -> PersianCalSettings:
    """Default settings with no TOML file in play."""
    return PersianCalSettings.from_cli()


@pytest.fixture
def fixed_now(monkeypatch: pytest.MonkeyPatch) -> datetime.datetime:
    """Freeze the calendar service clock at Nowruz 1404, 14:05:09."""
    moment = datetime.datetime(2025, 3, 20, 14, 5, 9)
    monkeypatch.setattr("persiancal.services.calendar._now", lambda: moment)
    return moment
