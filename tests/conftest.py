"""Shared pytest fixtures for the month calendar tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest

from calendar_state import ApplicationState


@pytest.fixture
def fixed_clock():
    """Clock pinned to a leap-day so initial state is deterministic."""
    return lambda: date(2024, 2, 29)


@pytest.fixture
def grid_state() -> ApplicationState:
    return ApplicationState(month_anchor=date(2024, 2, 1))


@pytest.fixture
def settings_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Settings path inside tmp_path, also exported through the env var."""
    path = tmp_path / "settings.json"
    monkeypatch.setenv("MONTH_CALENDAR_SETTINGS", str(path))
    return path


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore root and app logger state after a test reconfigures logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("month_calendar")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)
