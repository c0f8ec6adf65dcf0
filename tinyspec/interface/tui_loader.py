"""Helpers to turn loaded summaries into dashboard rows."""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from tinyspec.core import SpecSummary

from .tui_models import DetailRow, DisplayItem, GroupHeader, SpecRow, SubTaskRow, TopLevelRow


def group_totals(summaries: Iterable[SpecSummary]) -> Dict[str, Tuple[int, int]]:
    """(checked, total) per named group over every summary, contiguous or not."""
    totals: Dict[str, Tuple[int, int]] = {}
    for summary in summaries:
        if summary.group is None:
            continue
        checked, total = totals.get(summary.group, (0, 0))
        totals[summary.group] = (checked + summary.checked, total + summary.total)
    return totals


def build_display_items(summaries: List[SpecSummary]) -> Tuple[List[DisplayItem], List[int]]:
    """Flat list-mode rows plus the selection-ordinal -> flat-index map."""
    totals = group_totals(summaries)
    items: List[DisplayItem] = []
    selectable: List[int] = []
    current_group: Optional[str] = None

    for idx, summary in enumerate(summaries):
        if summary.group != current_group and summary.group is not None:
            checked, total = totals[summary.group]
            items.append(GroupHeader(name=summary.group, checked=checked, total=total))
        current_group = summary.group
        selectable.append(len(items))
        items.append(SpecRow(summary_index=idx))
    return items, selectable


def build_detail_rows(summary: SpecSummary, collapsed: Iterable[int]) -> List[DetailRow]:
    collapsed_set = set(collapsed)
    rows: List[DetailRow] = []
    for i, task in enumerate(summary.tasks):
        expanded = i not in collapsed_set
        rows.append(TopLevelRow(task_index=i, expanded=expanded))
        if expanded:
            rows.extend(SubTaskRow(parent_index=i, child_index=j) for j in range(len(task.children)))
    return rows


def select_index_after_load(
    summaries: List[SpecSummary],
    fallback: int,
    *,
    path: Optional[Path] = None,
    group: Optional[str] = None,
    name: Optional[str] = None,
) -> Optional[int]:
    """Find the previously open spec again.

    Lookup order: same file path, then same (group, name) pair, then
    ``fallback`` when still in range. Names alone repeat across groups.
    """
    if path is not None:
        for idx, summary in enumerate(summaries):
            if summary.path == path:
                return idx
    if name is not None:
        for idx, summary in enumerate(summaries):
            if summary.group == group and summary.name == name:
                return idx
    if 0 <= fallback < len(summaries):
        return fallback
    return None


__all__ = [
    "group_totals",
    "build_display_items",
    "build_detail_rows",
    "select_index_after_load",
]
