from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class SubTask:
    id: str
    description: str
    checked: bool = False


@dataclass
class TaskNode:
    """Top-level checklist entry. Nesting stops at one level of SubTask children."""

    id: str
    description: str
    checked: bool = False
    children: List[SubTask] = field(default_factory=list)

    def children_done(self) -> int:
        return sum(1 for child in self.children if child.checked)

    def to_markdown(self) -> str:
        lines = [f"- [{'x' if self.checked else ' '}] {self.id}: {self.description}"]
        for child in self.children:
            lines.append(f"  - [{'x' if child.checked else ' '}] {child.id}: {child.description}")
        return "\n".join(lines)


def count_tasks(tasks: List[TaskNode]) -> Tuple[int, int]:
    """Return (total, checked); a parent counts once, separately from its children."""
    total = 0
    checked = 0
    for task in tasks:
        total += 1
        if task.checked:
            checked += 1
        for child in task.children:
            total += 1
            if child.checked:
                checked += 1
    return total, checked
