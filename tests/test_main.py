"""Tests for the entry point and the window's fatal-error handling."""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
import structlog

import main as main_module
from calendar_window import CalendarWindow
from errors import DateRangeError

_DEFAULTS = {
    "dark_mode": False,
    "window_width": None,
    "window_height": None,
    "verbose": True,
    "log_json": True,
}


class _StubWindow:
    """Stands in for CalendarWindow: no Tk root, mainloop returns at once."""

    fatal: BaseException | None = None
    created_with: list[dict] = []

    def __init__(self, settings: dict) -> None:
        _StubWindow.created_with.append(settings)
        self.root = SimpleNamespace(mainloop=lambda: None)
        self.fatal_error = _StubWindow.fatal


@pytest.fixture
def stub_window(monkeypatch: pytest.MonkeyPatch) -> type[_StubWindow]:
    _StubWindow.fatal = None
    _StubWindow.created_with = []
    monkeypatch.setattr(main_module, "CalendarWindow", _StubWindow)
    return _StubWindow


@pytest.mark.usefixtures("restore_logging")
class TestMain:
    def test_logging_configured_before_settings_are_read(
        self, stub_window: type[_StubWindow], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[tuple] = []
        monkeypatch.setattr(
            main_module, "configure_logging",
            lambda **kw: calls.append(("configure_logging", kw)),
        )

        def fake_load() -> dict:
            calls.append(("load_settings", {}))
            return dict(_DEFAULTS)

        monkeypatch.setattr(main_module, "load_settings", fake_load)
        main_module.main()

        assert [name for name, _ in calls] == [
            "configure_logging", "load_settings", "configure_logging",
        ]
        assert calls[0][1] == {}
        assert calls[2][1] == {"verbose": True, "log_json": True}
        assert stub_window.created_with == [_DEFAULTS]

    def test_settings_warning_goes_to_stderr(
        self,
        stub_window: type[_StubWindow],
        settings_file: Path,
        capfd: pytest.CaptureFixture[str],
    ) -> None:
        structlog.reset_defaults()
        settings_file.write_text("{bad")
        main_module.main()
        captured = capfd.readouterr()
        assert "settings_unreadable" in captured.err
        assert "settings_unreadable" not in captured.out

    def test_fatal_error_is_reraised(
        self, stub_window: type[_StubWindow], settings_file: Path
    ) -> None:
        stub_window.fatal = DateRangeError("9999-12-01 shifted by 32 days")
        with pytest.raises(DateRangeError, match="9999-12-01"):
            main_module.main()

    def test_clean_exit_returns_none(
        self, stub_window: type[_StubWindow], settings_file: Path
    ) -> None:
        assert main_module.main() is None


@pytest.mark.usefixtures("restore_logging")
class TestCallbackError:
    def test_records_error_and_destroys_root(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        destroyed: list[bool] = []
        window = SimpleNamespace(
            root=SimpleNamespace(destroy=lambda: destroyed.append(True)),
            fatal_error=None,
        )
        try:
            raise DateRangeError("0001-01-01 shifted by -1 days")
        except DateRangeError:
            exc_type, exc, tb = sys.exc_info()

        main_module.configure_logging(log_json=True)
        CalendarWindow._on_callback_error(window, exc_type, exc, tb)

        assert window.fatal_error is exc
        assert destroyed == [True]
        err = capfd.readouterr().err
        assert "fatal_callback_error" in err
        assert "DateRangeError" in err
