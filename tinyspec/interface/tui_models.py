"""TUI data models: display rows for both dashboard modes."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Set, Union


class DashboardMode(Enum):
    LIST = "list"
    DETAIL = "detail"


@dataclass(frozen=True)
class GroupHeader:
    name: str
    checked: int
    total: int

    @property
    def percent(self) -> float:
        return self.checked / self.total * 100.0 if self.total > 0 else 0.0


@dataclass(frozen=True)
class SpecRow:
    summary_index: int


DisplayItem = Union[GroupHeader, SpecRow]


@dataclass(frozen=True)
class TopLevelRow:
    task_index: int
    expanded: bool


@dataclass(frozen=True)
class SubTaskRow:
    parent_index: int
    child_index: int


DetailRow = Union[TopLevelRow, SubTaskRow]


@dataclass
class DetailState:
    """Per-document view state; replaced wholesale when another spec is opened."""
    spec_index: int = 0
    collapsed: Set[int] = field(default_factory=set)
    selected: int = 0
    spec_name: Optional[str] = None
    spec_group: Optional[str] = None
    spec_path: Optional[Path] = None


__all__ = [
    "DashboardMode",
    "GroupHeader",
    "SpecRow",
    "DisplayItem",
    "TopLevelRow",
    "SubTaskRow",
    "DetailRow",
    "DetailState",
]
