from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from .status import SpecStatus
from .task_node import TaskNode, count_tasks


@dataclass
class SpecSummary:
    name: str
    title: str
    group: Optional[str] = None
    timestamp: str = ""
    tasks: List[TaskNode] = field(default_factory=list)
    total: int = 0
    checked: int = 0
    path: Optional[Path] = None

    @property
    def status(self) -> SpecStatus:
        return SpecStatus.derive(self.checked, self.total)

    @property
    def completed(self) -> bool:
        return self.status == SpecStatus.COMPLETED

    @classmethod
    def from_tasks(
        cls,
        name: str,
        title: str,
        tasks: List[TaskNode],
        *,
        group: Optional[str] = None,
        timestamp: str = "",
        path: Optional[Path] = None,
    ) -> "SpecSummary":
        total, checked = count_tasks(tasks)
        return cls(
            name=name,
            title=title,
            group=group,
            timestamp=timestamp,
            tasks=tasks,
            total=total,
            checked=checked,
            path=path,
        )


def _group_key(group: Optional[str]):
    # None sorts ahead of every named group.
    return (0, "") if group is None else (1, group)


def sort_summaries(summaries: Iterable[SpecSummary]) -> List[SpecSummary]:
    """Incomplete specs first, then completed ones.

    Within each tier specs are ordered by group (ungrouped first). Incomplete
    specs go oldest-first so the next thing to work on surfaces at the top;
    completed specs go newest-first.
    """
    items = list(summaries)
    incomplete = [s for s in items if not s.completed]
    completed = [s for s in items if s.completed]
    incomplete.sort(key=lambda s: (_group_key(s.group), s.timestamp))
    completed.sort(key=lambda s: s.timestamp, reverse=True)
    completed.sort(key=lambda s: _group_key(s.group))
    return incomplete + completed


__all__ = ["SpecSummary", "sort_summaries"]
