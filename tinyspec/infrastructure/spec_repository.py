import logging
from pathlib import Path
from typing import List, Optional

from tinyspec.core import SpecSummary, sort_summaries
from tinyspec.infrastructure.front_matter import front_matter_title
from tinyspec.infrastructure.plan_parser import PlanParser

logger = logging.getLogger("tinyspec.repository")

TIMESTAMP_PREFIX_LEN = 17  # "YYYY-MM-DD-HH-MM-"
TEMPLATES_DIR = "templates"


class SpecError(Exception):
    """Base error for spec lookups and edits."""


class SpecNotFoundError(SpecError):
    pass


class TaskNotFoundError(SpecError):
    pass


def extract_spec_name(filename: str) -> Optional[str]:
    """``2025-02-17-09-36-hello-world.md`` -> ``hello-world``."""
    if len(filename) > TIMESTAMP_PREFIX_LEN + 3 and filename.endswith(".md"):
        return filename[TIMESTAMP_PREFIX_LEN:-3]
    return None


def extract_timestamp(filename: str) -> str:
    """``2026-02-17-21-27-dashboard.md`` -> ``2026-02-17 21:27``."""
    if len(filename) < 16:
        return ""
    raw = filename[:16]
    return f"{raw[:10]} {raw[11:13]}:{raw[14:16]}"


class SpecRepository:
    def __init__(self, specs_dir: Path):
        self.specs_dir = Path(specs_dir)

    def collect_spec_files(self) -> List[Path]:
        """Markdown files in the root plus one level of group folders (templates excluded)."""
        root = self.specs_dir
        if not root.is_dir():
            return []
        files: List[Path] = []
        try:
            entries = sorted(root.iterdir())
        except OSError as exc:
            logger.debug("cannot list %s: %s", root, exc)
            return []
        for entry in entries:
            if entry.is_file() and entry.suffix == ".md":
                files.append(entry)
            elif entry.is_dir() and entry.name != TEMPLATES_DIR and not entry.name.startswith("."):
                try:
                    files.extend(sorted(p for p in entry.iterdir() if p.is_file() and p.suffix == ".md"))
                except OSError as exc:
                    logger.debug("cannot list group %s: %s", entry, exc)
        return files

    def _group_for(self, path: Path) -> Optional[str]:
        parent = path.parent
        if parent == self.specs_dir:
            return None
        return parent.name or None

    def load_summary(self, path: Path) -> Optional[SpecSummary]:
        path = Path(path)
        name = extract_spec_name(path.name)
        if name is None:
            return None
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("skipping %s: %s", path, exc)
            return None
        title = front_matter_title(content) or name
        return SpecSummary.from_tasks(
            name,
            title,
            PlanParser.parse(content),
            group=self._group_for(path),
            timestamp=extract_timestamp(path.name),
            path=path,
        )

    def read_title(self, path: Path) -> Optional[str]:
        """Front matter title only; no fallback to the file name."""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("cannot read %s: %s", path, exc)
            return None
        return front_matter_title(content)

    def load_all(self) -> List[SpecSummary]:
        summaries: List[SpecSummary] = []
        for path in self.collect_spec_files():
            summary = self.load_summary(path)
            if summary is None:
                logger.debug("ignored %s (not a spec file)", path)
                continue
            summaries.append(summary)
        return sort_summaries(summaries)

    def find_spec(self, name: str) -> Path:
        if not self.specs_dir.is_dir():
            raise SpecNotFoundError(f"No {self.specs_dir} directory found")
        matches = [p for p in self.collect_spec_files() if extract_spec_name(p.name) == name]
        if not matches:
            raise SpecNotFoundError(f"No spec found matching '{name}'")
        # Same name with different timestamps: the most recent wins.
        return max(matches, key=lambda p: p.name)

    def set_task_checked(self, name: str, task_id: str, check: bool) -> Path:
        path = self.find_spec(name)
        content = path.read_text(encoding="utf-8")
        updated = PlanParser.set_checked(content, task_id, check)
        if updated is None:
            state = "unchecked" if check else "checked"
            raise TaskNotFoundError(f"No {state} task '{task_id}' found in spec '{name}'")
        path.write_text(updated, encoding="utf-8")
        logger.debug("%s task %s in %s", "checked" if check else "unchecked", task_id, path)
        return path

    def compute_signature(self) -> int:
        """Fingerprint of the collection; changes on edits, additions and removals."""
        entries = []
        for path in self.collect_spec_files():
            try:
                stat = path.stat()
            except OSError:
                continue
            entries.append((str(path), stat.st_size, stat.st_mtime_ns))
        return hash(tuple(entries))


__all__ = [
    "SpecError",
    "SpecNotFoundError",
    "TaskNotFoundError",
    "SpecRepository",
    "extract_spec_name",
    "extract_timestamp",
    "TIMESTAMP_PREFIX_LEN",
    "TEMPLATES_DIR",
]
