import json
from pathlib import Path

import pytest

from tinyspec.interface.specs_app import build_parser, main

PLAN = """---
title: Hello World
---
# Implementation Plan
- [x] A: Setup
  - [x] A.1: init
  - [ ] A.2: CI
- [ ] B: Ship
"""


@pytest.fixture
def specs(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.setenv("TINYSPEC_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("TINYSPEC_SPECS_DIR", raising=False)
    root = tmp_path / ".specs"
    root.mkdir()
    return root


def _write(path: Path, body: str = PLAN) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


def _run(specs: Path, *argv: str) -> int:
    return main(["--specs-dir", str(specs), *argv])


def test_status_single_spec(specs, capsys):
    _write(specs / "2025-02-17-09-36-hello-world.md")
    assert _run(specs, "status", "hello-world") == 0
    assert capsys.readouterr().out.strip() == "hello-world: 2/4 tasks complete"


def test_status_all_specs_in_filename_order(specs, capsys):
    _write(specs / "grp" / "2025-01-01-00-00-first.md", "# Implementation Plan\n- [ ] A: x\n")
    _write(specs / "2025-02-01-00-00-second.md", "# Implementation Plan\n- [x] A: x\n")
    assert _run(specs, "status") == 0
    assert capsys.readouterr().out.splitlines() == [
        "first: 0/1 tasks complete",
        "second: 1/1 tasks complete",
    ]


def test_status_empty_and_missing(specs, capsys):
    assert _run(specs, "status") == 0
    assert capsys.readouterr().out.strip() == "No specs found."
    assert _run(specs, "status", "nope") == 1
    assert "Error: No spec found matching 'nope'" in capsys.readouterr().err


def test_status_json(specs, capsys):
    _write(specs / "2025-02-17-09-36-hello-world.md")
    assert _run(specs, "status", "hello-world", "--json") == 0
    body = json.loads(capsys.readouterr().out)
    assert body["command"] == "status"
    assert body["status"] == "OK"
    spec = body["payload"]["specs"][0]
    assert spec["status"] == "IN_PROGRESS"
    assert (spec["checked"], spec["total"]) == (2, 4)
    assert spec["tasks"][0]["children"][1] == {"id": "A.2", "description": "CI", "checked": False}


def test_status_json_error(specs, capsys):
    assert _run(specs, "status", "nope", "--json") == 1
    body = json.loads(capsys.readouterr().out)
    assert body["status"] == "ERROR"
    assert "nope" in body["message"]


def test_list_groups_and_titles(specs, capsys):
    _write(specs / "2025-02-17-09-36-hello-world.md")
    _write(specs / "backend" / "2025-01-01-00-00-api.md", "# Implementation Plan\n")
    assert _run(specs, "list") == 0
    assert capsys.readouterr().out.splitlines() == [
        f"{'hello-world':30} Hello World",
        "",
        "backend/",
        f"{'api':30} (no title)",
    ]


def test_list_single_group_has_no_blank_line(specs, capsys):
    _write(specs / "backend" / "2025-01-01-00-00-api.md", "# Implementation Plan\n")
    assert _run(specs, "list") == 0
    assert capsys.readouterr().out.splitlines() == ["backend/", f"{'api':30} (no title)"]


def test_list_empty_and_json(specs, capsys):
    assert _run(specs, "list") == 0
    assert capsys.readouterr().out.strip() == "No specs found."
    _write(specs / "2025-02-17-09-36-hello-world.md")
    assert _run(specs, "list", "--json") == 0
    body = json.loads(capsys.readouterr().out)
    assert body["payload"]["ungrouped"] == [{"name": "hello-world", "title": "Hello World"}]
    assert body["payload"]["groups"] == {}


def test_check_and_uncheck(specs, capsys):
    path = _write(specs / "2025-02-17-09-36-hello-world.md")
    assert _run(specs, "check", "hello-world", "A.2") == 0
    assert capsys.readouterr().out.strip() == "Checked task A.2"
    assert "- [x] A.2: CI" in path.read_text(encoding="utf-8")
    assert _run(specs, "uncheck", "hello-world", "A") == 0
    assert capsys.readouterr().out.strip() == "Unchecked task A"
    assert "- [ ] A: Setup" in path.read_text(encoding="utf-8")


def test_check_errors(specs, capsys):
    _write(specs / "2025-02-17-09-36-hello-world.md")
    assert _run(specs, "check", "hello-world", "A") == 1
    assert capsys.readouterr().err.strip() == "Error: No unchecked task 'A' found in spec 'hello-world'"
    assert _run(specs, "uncheck", "hello-world", "B") == 1
    assert capsys.readouterr().err.strip() == "Error: No checked task 'B' found in spec 'hello-world'"
    assert _run(specs, "check", "missing", "A") == 1
    assert "No spec found matching 'missing'" in capsys.readouterr().err


def test_version_and_no_command(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip()
    assert main([]) == 1


def test_parser_knows_all_commands():
    parser = build_parser()
    for argv in (["dashboard"], ["status"], ["list"], ["check", "s", "A"], ["uncheck", "s", "A"]):
        args = parser.parse_args(argv)
        assert callable(args.func)
    with pytest.raises(SystemExit):
        parser.parse_args(["dashboard", "--theme", "no-such-theme"])
