import logging
from collections import OrderedDict
from pathlib import Path
from typing import Dict, List, Optional

from tinyspec.config import get_specs_dir
from tinyspec.infrastructure.spec_repository import SpecError, SpecRepository, extract_spec_name
from tinyspec.interface.cli_io import print_error, structured_error, structured_response
from tinyspec.interface.serializers import summary_to_dict

logger = logging.getLogger("tinyspec.cli")

NO_SPECS = "No specs found."
NO_TITLE = "(no title)"


def _repository(args) -> SpecRepository:
    return SpecRepository(get_specs_dir(getattr(args, "specs_dir", None)))


def _fail(args, command: str, message: str) -> int:
    logger.debug("%s failed: %s", command, message)
    if getattr(args, "json", False):
        return structured_error(command, message)
    return print_error(message)


def _by_filename(paths: List[Path]) -> List[Path]:
    # Timestamp prefixes make filename order chronological.
    return sorted(paths, key=lambda p: p.name)


def status_line(name: str, checked: int, total: int) -> str:
    return f"{name}: {checked}/{total} tasks complete"


def cmd_status(args) -> int:
    repo = _repository(args)
    name: Optional[str] = getattr(args, "name", None)
    if name:
        try:
            path = repo.find_spec(name)
        except SpecError as exc:
            return _fail(args, "status", str(exc))
        summary = repo.load_summary(path)
        if summary is None:
            return _fail(args, "status", f"Failed to load spec '{name}'")
        summaries = [summary]
    else:
        summaries = [s for s in (repo.load_summary(p) for p in _by_filename(repo.collect_spec_files())) if s is not None]

    lines = [status_line(s.name, s.checked, s.total) for s in summaries]
    if getattr(args, "json", False):
        return structured_response(
            "status",
            message=NO_SPECS if not summaries else "",
            payload={"specs": [summary_to_dict(s, include_tasks=bool(name)) for s in summaries]},
            summary="\n".join(lines) or NO_SPECS,
        )
    if not summaries:
        print(NO_SPECS)
        return 0
    for line in lines:
        print(line)
    return 0


def _split_groups(repo: SpecRepository, paths: List[Path]):
    ungrouped: List[Path] = []
    groups: Dict[str, List[Path]] = {}
    for path in paths:
        if path.parent == repo.specs_dir:
            ungrouped.append(path)
        else:
            groups.setdefault(path.parent.name, []).append(path)
    return ungrouped, OrderedDict(sorted(groups.items()))


def cmd_list(args) -> int:
    repo = _repository(args)
    paths = _by_filename(repo.collect_spec_files())
    ungrouped, groups = _split_groups(repo, paths)

    def entry(path: Path) -> Dict[str, Optional[str]]:
        name = extract_spec_name(path.name) or path.stem
        return {"name": name, "title": repo.read_title(path)}

    if getattr(args, "json", False):
        payload = {
            "ungrouped": [entry(p) for p in ungrouped],
            "groups": {group: [entry(p) for p in members] for group, members in groups.items()},
        }
        return structured_response("list", message=NO_SPECS if not paths else "", payload=payload, summary=f"{len(paths)} specs")

    if not paths:
        print(NO_SPECS)
        return 0

    def print_spec(path: Path) -> None:
        item = entry(path)
        print(f"{item['name']:30} {item['title'] or NO_TITLE}")

    for path in ungrouped:
        print_spec(path)
    for group, members in groups.items():
        if ungrouped or len(groups) > 1:
            print()
        print(f"{group}/")
        for path in members:
            print_spec(path)
    return 0


def _set_checked(args, check: bool) -> int:
    command = "check" if check else "uncheck"
    repo = _repository(args)
    try:
        path = repo.set_task_checked(args.name, args.task_id, check)
    except SpecError as exc:
        return _fail(args, command, str(exc))
    except OSError as exc:
        return _fail(args, command, f"Failed to update spec '{args.name}': {exc}")
    message = f"{'Checked' if check else 'Unchecked'} task {args.task_id}"
    if getattr(args, "json", False):
        return structured_response(command, message=message, payload={"name": args.name, "task_id": args.task_id, "path": str(path)})
    print(message)
    return 0


def cmd_check(args) -> int:
    return _set_checked(args, True)


def cmd_uncheck(args) -> int:
    return _set_checked(args, False)


__all__ = ["cmd_status", "cmd_list", "cmd_check", "cmd_uncheck", "status_line", "NO_SPECS", "NO_TITLE"]
