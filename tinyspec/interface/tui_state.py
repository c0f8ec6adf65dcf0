"""Dashboard state machine: List/Detail modes, key handling and reload reconciliation."""

import logging
import queue
from typing import List, Optional

from tinyspec.application.ports import SpecSource
from tinyspec.core import SpecSummary
from tinyspec.interface.tui_loader import build_detail_rows, build_display_items, select_index_after_load
from tinyspec.interface.tui_models import DashboardMode, DetailRow, DetailState, DisplayItem, SpecRow
from tinyspec.interface.tui_navigation import clamp_index, move_vertical_selection, toggle_detail_collapse

logger = logging.getLogger("tinyspec.dashboard")

UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")
QUIT_KEYS = ("q",)


class DashboardState:
    """All mutable dashboard state. Only the UI thread touches it."""

    def __init__(self, source: SpecSource, *, autoload: bool = True):
        self.source = source
        self.specs: List[SpecSummary] = []
        self.display_items: List[DisplayItem] = []
        self.selectable: List[int] = []
        self.selected = 0
        self.mode = DashboardMode.LIST
        self.detail = DetailState()
        self.should_quit = False
        if autoload:
            self.reload()

    # ------------------------------------------------------------------ loading

    def reload(self) -> None:
        try:
            specs = self.source.load_all()
        except OSError as exc:
            logger.debug("reload failed: %s", exc)
            specs = []
        self.specs = specs
        self.display_items, self.selectable = build_display_items(self.specs)
        self.selected = clamp_index(self.selected, len(self.selectable))
        if self.mode == DashboardMode.DETAIL:
            self._reconcile_detail()

    def _reconcile_detail(self) -> None:
        idx = select_index_after_load(
            self.specs,
            self.detail.spec_index,
            path=self.detail.spec_path,
            group=self.detail.spec_group,
            name=self.detail.spec_name,
        )
        if idx is None:
            self.mode = DashboardMode.LIST
            self.detail = DetailState()
            return
        spec = self.specs[idx]
        self.detail.spec_index = idx
        self.detail.spec_name = spec.name
        self.detail.spec_group = spec.group
        self.detail.spec_path = spec.path
        task_count = len(spec.tasks)
        self.detail.collapsed = {i for i in self.detail.collapsed if i < task_count}
        self.detail.selected = clamp_index(self.detail.selected, len(self.detail_rows()))

    def drain_notifications(self, notifications: "queue.Queue") -> bool:
        """Drain every pending change notification and reload at most once."""
        pending = False
        while True:
            try:
                notifications.get_nowait()
            except queue.Empty:
                break
            pending = True
        if pending:
            self.reload()
        return pending

    # ---------------------------------------------------------------- selection

    def selected_spec_index(self) -> Optional[int]:
        if not 0 <= self.selected < len(self.selectable):
            return None
        item = self.display_items[self.selectable[self.selected]]
        if isinstance(item, SpecRow):
            return item.summary_index
        return None

    def current_spec(self) -> Optional[SpecSummary]:
        if self.mode == DashboardMode.DETAIL:
            if 0 <= self.detail.spec_index < len(self.specs):
                return self.specs[self.detail.spec_index]
            return None
        idx = self.selected_spec_index()
        return self.specs[idx] if idx is not None else None

    def detail_rows(self) -> List[DetailRow]:
        if not 0 <= self.detail.spec_index < len(self.specs):
            return []
        return build_detail_rows(self.specs[self.detail.spec_index], self.detail.collapsed)

    # -------------------------------------------------------------- transitions

    def open_selected(self) -> bool:
        idx = self.selected_spec_index()
        if idx is None:
            return False
        spec = self.specs[idx]
        self.detail = DetailState(spec_index=idx, spec_name=spec.name, spec_group=spec.group, spec_path=spec.path)
        self.mode = DashboardMode.DETAIL
        return True

    def close_detail(self) -> None:
        self.mode = DashboardMode.LIST

    def handle_key(self, key: str) -> bool:
        """Apply one key press; returns True when something changed."""
        if key in QUIT_KEYS:
            self.should_quit = True
            return True
        if key in UP_KEYS or key in DOWN_KEYS:
            before = (self.selected, self.detail.selected)
            move_vertical_selection(self, -1 if key in UP_KEYS else 1)
            return before != (self.selected, self.detail.selected)
        if self.mode == DashboardMode.LIST:
            if key == "enter":
                return self.open_selected()
            return False
        if key == "escape":
            self.close_detail()
            return True
        if key in ("enter", "space"):
            return toggle_detail_collapse(self)
        return False


__all__ = ["DashboardState"]
