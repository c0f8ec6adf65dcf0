"""Navigation helpers for the dashboard state machine."""

from tinyspec.interface.tui_models import DashboardMode, TopLevelRow


def clamp_index(index: int, total: int) -> int:
    if total <= 0:
        return 0
    return max(0, min(index, total - 1))


def move_vertical_selection(state, delta: int) -> None:
    """
    Move the selection pointer by `delta`, clamping to available rows.

    List mode walks selectable spec rows (never group headers); detail mode
    walks the rows visible under the current collapse state.
    """
    if state.mode == DashboardMode.DETAIL:
        total = len(state.detail_rows())
        state.detail.selected = clamp_index(state.detail.selected + delta, total)
    else:
        total = len(state.selectable)
        if total <= 0:
            state.selected = 0
            return
        state.selected = clamp_index(state.selected + delta, total)


def toggle_detail_collapse(state) -> bool:
    """Collapse/expand the selected top-level task; sub-task rows are left alone."""
    if state.mode != DashboardMode.DETAIL:
        return False
    rows = state.detail_rows()
    if not 0 <= state.detail.selected < len(rows):
        return False
    row = rows[state.detail.selected]
    if not isinstance(row, TopLevelRow):
        return False
    collapsed = state.detail.collapsed
    if row.task_index in collapsed:
        collapsed.discard(row.task_index)
    else:
        collapsed.add(row.task_index)
    return True


__all__ = ["clamp_index", "move_vertical_selection", "toggle_detail_collapse"]
