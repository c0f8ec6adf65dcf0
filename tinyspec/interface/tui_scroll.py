"""Vertical scrolling helpers for the dashboard lists."""

from typing import List, Tuple


def visible_window(selected: int, total: int, height: int, offset: int = 0) -> Tuple[int, int]:
    """
    Return the (start, end) slice of rows to draw so that `selected` is visible.

    `offset` is the previous first visible row; it only moves when the selection
    leaves the window, which keeps scrolling steady while moving inside a page.
    """
    if total <= 0 or height <= 0:
        return 0, 0
    if total <= height:
        return 0, total
    start = max(0, min(offset, total - height))
    if selected < start:
        start = selected
    elif selected >= start + height:
        start = selected - height + 1
    return start, start + height


def slice_lines(lines: List[List[Tuple[str, str]]], start: int, end: int) -> List[Tuple[str, str]]:
    """Flatten the selected line fragments into one fragment list joined by newlines."""
    result: List[Tuple[str, str]] = []
    for i, line in enumerate(lines[start:end]):
        if i:
            result.append(("", "\n"))
        result.extend(line)
    return result


__all__ = ["visible_window", "slice_lines"]
