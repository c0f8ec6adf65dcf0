from .status import SpecStatus
from .task_node import SubTask, TaskNode, count_tasks
from .spec_summary import SpecSummary, sort_summaries

__all__ = [
    "SpecStatus",
    "SubTask",
    "TaskNode",
    "count_tasks",
    "SpecSummary",
    "sort_summaries",
]
