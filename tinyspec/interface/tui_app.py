#!/usr/bin/env python3
"""Live spec dashboard: prompt_toolkit application around DashboardState."""

import logging
import os
import queue
import sys
from pathlib import Path
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from tinyspec.config import get_poll_interval, get_specs_dir, get_theme
from tinyspec.infrastructure.spec_repository import SpecRepository
from tinyspec.infrastructure.spec_watcher import DEFAULT_POLL_INTERVAL, SpecWatcher

from .tui_display import DisplayMixin
from .tui_footer import build_footer_text
from .tui_models import DashboardMode
from .tui_render import render_detail_text, render_list_text
from .tui_state import DashboardState
from .tui_status import build_status_text
from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("tinyspec.dashboard")

CHROME_LINES = 2  # title bar + help line


class DashboardUnavailableError(RuntimeError):
    """The dashboard cannot take over this terminal."""


def ensure_interactive_terminal(stdin=None, stdout=None) -> None:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    if not (stdin is not None and stdin.isatty() and stdout is not None and stdout.isatty()):
        raise DashboardUnavailableError("Dashboard requires an interactive terminal")


class SpecDashboardTUI(DisplayMixin):
    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        specs_dir: Path,
        theme: str = DEFAULT_THEME,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        input=None,
        output=None,
    ):
        self.specs_dir = Path(specs_dir)
        self.repository = SpecRepository(self.specs_dir)
        self.notifications: "queue.Queue[int]" = queue.Queue()
        self.watcher = SpecWatcher(self.repository, self.notifications, poll_interval)
        self.state = DashboardState(self.repository)
        self.list_offset = 0
        self.detail_offset = 0
        self.style = self.build_style(theme)

        kb = KeyBindings()
        kb.timeout = 0

        @kb.add("q")
        @kb.add("c-c")
        def _(event):
            self.handle_key("q")

        @kb.add("up")
        @kb.add("k")
        def _(event):
            self.handle_key("up")

        @kb.add("down")
        @kb.add("j")
        def _(event):
            self.handle_key("down")

        @kb.add("enter")
        def _(event):
            self.handle_key("enter")

        @kb.add("space")
        def _(event):
            self.handle_key("space")

        @kb.add("escape", eager=True)
        def _(event):
            self.handle_key("escape")

        self.status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)
        self.body = Window(content=FormattedTextControl(self.get_body_text), always_hide_cursor=True, wrap_lines=False)
        self.footer = Window(content=FormattedTextControl(self.get_footer_text), height=1, always_hide_cursor=True)
        root = HSplit([self.status_bar, self.body, self.footer])

        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            refresh_interval=poll_interval,
            before_render=self._before_render,
            input=input,
            output=output,
        )
        # Esc must not wait for a possible ANSI sequence.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TINYSPEC_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 40

    def get_body_height(self) -> int:
        return max(1, self.get_terminal_height() - CHROME_LINES)

    def _before_render(self, app) -> None:
        self.refresh()

    def refresh(self) -> bool:
        """Apply pending change notifications; True when a reload happened."""
        reloaded = self.state.drain_notifications(self.notifications)
        if reloaded:
            logger.debug("reloaded %d specs", len(self.state.specs))
        return reloaded

    def handle_key(self, key: str) -> None:
        previous_mode = self.state.mode
        self.state.handle_key(key)
        if self.state.mode != previous_mode:
            self.detail_offset = 0
        if self.state.should_quit:
            self.app.exit()
            return
        self.force_render()

    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    def get_status_text(self) -> FormattedText:
        return build_status_text(self)

    def get_body_text(self) -> FormattedText:
        if self.state.mode == DashboardMode.DETAIL:
            return render_detail_text(self)
        return render_list_text(self)

    def get_footer_text(self) -> FormattedText:
        return build_footer_text(self)

    def run(self) -> None:
        if not self.watcher.start():
            logger.debug("reload-on-change disabled for %s", self.specs_dir)
        try:
            self.app.run()
        finally:
            self.watcher.stop()


def cmd_dashboard(args) -> int:
    try:
        ensure_interactive_terminal()
        tui = SpecDashboardTUI(
            specs_dir=get_specs_dir(getattr(args, "specs_dir", None)),
            theme=get_theme(getattr(args, "theme", None)),
            poll_interval=get_poll_interval(),
        )
    except DashboardUnavailableError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (OSError, RuntimeError) as exc:
        logger.debug("dashboard setup failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    tui.run()
    return 0


__all__ = ["DashboardUnavailableError", "ensure_interactive_terminal", "SpecDashboardTUI", "cmd_dashboard"]
