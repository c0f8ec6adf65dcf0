"""JSON shapes for spec summaries and their task trees.

`--json` CLI output goes through these helpers so every command emits the
same contract.
"""

from typing import Any, Dict

from tinyspec.core import SpecSummary, SubTask, TaskNode


def subtask_to_dict(sub: SubTask) -> Dict[str, Any]:
    return {"id": sub.id, "description": sub.description, "checked": sub.checked}


def task_to_dict(task: TaskNode) -> Dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "checked": task.checked,
        "children": [subtask_to_dict(child) for child in task.children],
    }


def summary_to_dict(summary: SpecSummary, *, include_tasks: bool = False) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "name": summary.name,
        "title": summary.title,
        "group": summary.group,
        "timestamp": summary.timestamp,
        "status": summary.status.label,
        "checked": summary.checked,
        "total": summary.total,
        "path": str(summary.path) if summary.path else None,
    }
    if include_tasks:
        d["tasks"] = [task_to_dict(task) for task in summary.tasks]
    return d


__all__ = ["subtask_to_dict", "task_to_dict", "summary_to_dict"]
