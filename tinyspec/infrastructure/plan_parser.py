from typing import List, Optional, Tuple

from tinyspec.core import SubTask, TaskNode


class PlanParser:
    """Reads the checklist under ``# Implementation Plan`` into a two-level task forest."""

    PLAN_HEADING = "# Implementation Plan"
    UNCHECKED = "- [ ] "
    CHECKED = "- [x] "

    @classmethod
    def split_marker(cls, stripped: str) -> Optional[Tuple[bool, str]]:
        """Return (checked, rest) for a stripped task line, or None."""
        if stripped.startswith(cls.CHECKED):
            return True, stripped[len(cls.CHECKED):]
        if stripped.startswith(cls.UNCHECKED):
            return False, stripped[len(cls.UNCHECKED):]
        return None

    @classmethod
    def parse(cls, content: str) -> List[TaskNode]:
        in_plan = False
        tasks: List[TaskNode] = []

        for line in content.split("\n"):
            stripped = line.strip()
            if stripped == cls.PLAN_HEADING:
                in_plan = True
                continue
            if not in_plan:
                continue
            if stripped.startswith("# "):
                break

            marker = cls.split_marker(stripped)
            if marker is None:
                continue
            checked, rest = marker
            if ":" not in rest:
                continue
            task_id, _, description = rest.partition(":")
            task_id = task_id.strip()
            description = description.strip()

            indent = len(line) - len(line.lstrip())
            if indent == 0:
                tasks.append(TaskNode(id=task_id, description=description, checked=checked))
            elif tasks:
                # Any depth of indentation flattens under the latest top-level task.
                tasks[-1].children.append(SubTask(id=task_id, description=description, checked=checked))
        return tasks

    @classmethod
    def set_checked(cls, content: str, task_id: str, check: bool) -> Optional[str]:
        """Flip the first matching checkbox; None when no line matched.

        Only lines currently in the opposite state are candidates, so checking
        an already checked task is reported as "not found".
        """
        current = cls.UNCHECKED if check else cls.CHECKED
        replacement = cls.CHECKED if check else cls.UNCHECKED
        target = f"{task_id}:"
        # split("\n") keeps the trailing newline and any "\r" intact on rejoin.
        lines = content.split("\n")
        for idx, line in enumerate(lines):
            stripped = line.strip()
            if stripped.startswith(current) and stripped[len(current):].startswith(target):
                lines[idx] = line.replace(current, replacement, 1)
                break
        else:
            return None
        return "\n".join(lines)


__all__ = ["PlanParser"]
