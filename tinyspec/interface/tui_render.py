"""Rendering helpers for SpecDashboardTUI to keep the class slim."""
import math
from typing import List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from tinyspec.core import SpecStatus, SpecSummary

from .tui_models import GroupHeader, SpecRow, TopLevelRow
from .tui_scroll import slice_lines, visible_window

BAR_WIDTH = 10
NAME_WIDTH = 28
BAR_FILLED = "█"
BAR_EMPTY = "░"
EMPTY_HINT = "No specs found. Create one with: tinyspec new <name>"

Line = List[Tuple[str, str]]


def _merge_style(selected_style: Optional[str], fragment_style: str) -> str:
    if not selected_style:
        return fragment_style
    return f"{selected_style} {fragment_style}".strip()


def _highlight(line: Line, selected: bool) -> Line:
    if not selected:
        return line
    return [(_merge_style("class:selected", style), text) for style, text in line]


def status_style(status: SpecStatus) -> str:
    return f"class:status.{status.style}"


def progress_cells(checked: int, total: int, width: int = BAR_WIDTH) -> Tuple[int, int]:
    """(filled, empty) cell counts; halves round up."""
    if total <= 0:
        return 0, width
    filled = int(math.floor(checked / total * width + 0.5))
    filled = max(0, min(width, filled))
    return filled, width - filled


def group_header_line(header: GroupHeader) -> Line:
    return [
        ("class:text", "  "),
        ("class:group", f"{header.name}/"),
        ("class:text.dim", f"  {header.percent:.0f}%"),
    ]


def spec_row_line(tui, summary: SpecSummary) -> Line:
    status = summary.status
    filled, empty = progress_cells(summary.checked, summary.total)
    return [
        ("class:text", "  "),
        (status_style(status), status.glyph),
        ("class:text", " "),
        ("class:text", tui._pad_display(summary.name, NAME_WIDTH)),
        (status_style(status), BAR_FILLED * filled),
        ("class:bar.empty", BAR_EMPTY * empty),
        ("class:text", f"  {summary.checked}/{summary.total}"),
    ]


def build_list_lines(tui) -> Tuple[List[Line], Optional[int]]:
    """All list-mode lines plus the flat index of the highlighted line."""
    state = tui.state
    selected_flat = state.selectable[state.selected] if state.selectable else None
    lines: List[Line] = []
    for flat, item in enumerate(state.display_items):
        if isinstance(item, GroupHeader):
            line = group_header_line(item)
        elif isinstance(item, SpecRow):
            line = spec_row_line(tui, state.specs[item.summary_index])
        else:
            continue
        lines.append(_highlight(line, flat == selected_flat))
    return lines, selected_flat


def render_list_text(tui) -> FormattedText:
    state = tui.state
    if not state.specs:
        tui.list_offset = 0
        return FormattedText([("", "\n"), ("class:text.dim", f"  {EMPTY_HINT}")])
    lines, selected_flat = build_list_lines(tui)
    start, end = visible_window(selected_flat or 0, len(lines), tui.get_body_height(), tui.list_offset)
    tui.list_offset = start
    return FormattedText(slice_lines(lines, start, end))


def detail_row_line(summary: SpecSummary, row) -> Line:
    if isinstance(row, TopLevelRow):
        task = summary.tasks[row.task_index]
        if not task.children:
            arrow = " "
        else:
            arrow = "▼" if row.expanded else "▶"
        line: Line = [
            ("class:text", f"  {arrow} "),
            ("class:status.ok" if task.checked else "class:text", "✓" if task.checked else "☐"),
            ("class:text", f" {task.id}: {task.description}"),
        ]
        if task.children:
            line.append(("class:text.dim", f"  [{task.children_done()}/{len(task.children)}]"))
        return line
    child = summary.tasks[row.parent_index].children[row.child_index]
    return [
        ("class:text", "      "),
        ("class:status.ok" if child.checked else "class:text", "✓" if child.checked else "☐"),
        ("class:text", f" {child.id}: {child.description}"),
    ]


def render_detail_text(tui) -> FormattedText:
    state = tui.state
    summary = state.current_spec()
    if summary is None:
        return FormattedText([])
    rows = state.detail_rows()
    selected = state.detail.selected
    lines = [_highlight(detail_row_line(summary, row), i == selected) for i, row in enumerate(rows)]
    start, end = visible_window(selected, len(lines), tui.get_body_height(), tui.detail_offset)
    tui.detail_offset = start
    return FormattedText(slice_lines(lines, start, end))


__all__ = [
    "BAR_WIDTH",
    "EMPTY_HINT",
    "progress_cells",
    "status_style",
    "build_list_lines",
    "render_list_text",
    "detail_row_line",
    "render_detail_text",
]
