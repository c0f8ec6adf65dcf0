#!/usr/bin/env python3
"""Unit tests for tui_app module - SpecDashboardTUI wiring."""

from pathlib import Path
from types import SimpleNamespace

import pytest
from prompt_toolkit.input import DummyInput
from prompt_toolkit.output import DummyOutput

from tinyspec.interface import tui_app
from tinyspec.interface.tui_app import DashboardUnavailableError, SpecDashboardTUI, ensure_interactive_terminal
from tinyspec.interface.tui_models import DashboardMode


class FakeStream:
    def __init__(self, tty: bool):
        self._tty = tty

    def isatty(self):
        return self._tty


def _write_spec(root: Path, filename: str, body: str) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    path = root / filename
    path.write_text(body, encoding="utf-8")
    return path


def _tui(specs_dir: Path) -> SpecDashboardTUI:
    return SpecDashboardTUI(specs_dir, input=DummyInput(), output=DummyOutput())


def test_ensure_interactive_terminal_rejects_pipes():
    with pytest.raises(DashboardUnavailableError, match="Dashboard requires an interactive terminal"):
        ensure_interactive_terminal(FakeStream(False), FakeStream(True))
    with pytest.raises(DashboardUnavailableError):
        ensure_interactive_terminal(FakeStream(True), FakeStream(False))
    ensure_interactive_terminal(FakeStream(True), FakeStream(True))


def test_build_style_and_initial_state(tmp_path: Path):
    specs = tmp_path / ".specs"
    _write_spec(specs, "2025-01-01-00-00-alpha.md", "# Implementation Plan\n- [ ] A: x\n")
    tui = _tui(specs)
    assert SpecDashboardTUI.build_style("dark-olive") is not None
    assert [s.name for s in tui.state.specs] == ["alpha"]
    assert tui.state.mode == DashboardMode.LIST
    assert "alpha" in "".join(text for _, text in tui.get_body_text())


def test_handle_key_quit_exits_app(tmp_path: Path, monkeypatch):
    tui = _tui(tmp_path / ".specs")
    calls = {}
    monkeypatch.setattr(tui.app, "exit", lambda: calls.setdefault("exit", True))
    tui.handle_key("q")
    assert calls == {"exit": True}
    assert tui.state.should_quit


def test_handle_key_resets_detail_scroll_on_mode_change(tmp_path: Path):
    specs = tmp_path / ".specs"
    _write_spec(specs, "2025-01-01-00-00-alpha.md", "# Implementation Plan\n- [ ] A: x\n")
    tui = _tui(specs)
    tui.detail_offset = 7
    tui.handle_key("enter")
    assert tui.state.mode == DashboardMode.DETAIL
    assert tui.detail_offset == 0
    assert "alpha - Implementation Plan" in "".join(text for _, text in tui.get_status_text())


def test_refresh_reloads_after_notification(tmp_path: Path):
    specs = tmp_path / ".specs"
    tui = _tui(specs)
    assert tui.state.specs == []
    assert tui.refresh() is False
    _write_spec(specs, "2025-01-01-00-00-late.md", "# Implementation Plan\n- [x] A: x\n")
    tui.notifications.put(1)
    assert tui.refresh() is True
    assert [s.name for s in tui.state.specs] == ["late"]


def test_run_stops_watcher_even_on_error(tmp_path: Path, monkeypatch):
    tui = _tui(tmp_path / ".specs")
    calls = []
    monkeypatch.setattr(tui.watcher, "start", lambda: calls.append("start") or True)
    monkeypatch.setattr(tui.watcher, "stop", lambda: calls.append("stop"))

    def boom():
        raise KeyboardInterrupt

    monkeypatch.setattr(tui.app, "run", boom)
    with pytest.raises(KeyboardInterrupt):
        tui.run()
    assert calls == ["start", "stop"]


def test_cmd_dashboard_requires_tty(monkeypatch, capsys):
    monkeypatch.setattr(tui_app.sys, "stdin", FakeStream(False))
    rc = tui_app.cmd_dashboard(SimpleNamespace(specs_dir=None, theme=None))
    assert rc == 1
    assert "Dashboard requires an interactive terminal" in capsys.readouterr().err


def test_cmd_dashboard_runs_tui(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(tui_app, "ensure_interactive_terminal", lambda: None)
    created = {}

    class FakeTUI:
        def __init__(self, specs_dir, theme, poll_interval):
            created.update(specs_dir=specs_dir, theme=theme, poll_interval=poll_interval)

        def run(self):
            created["ran"] = True

    monkeypatch.setattr(tui_app, "SpecDashboardTUI", FakeTUI)
    monkeypatch.setenv("TINYSPEC_HOME", str(tmp_path / "home"))
    rc = tui_app.cmd_dashboard(SimpleNamespace(specs_dir=str(tmp_path / "specs"), theme="dark-contrast"))
    assert rc == 0
    assert created["ran"] is True
    assert created["theme"] == "dark-contrast"
    assert created["specs_dir"] == tmp_path / "specs"
    assert created["poll_interval"] == 0.25
