"""CLI parser construction for the tinyspec CLI/TUI."""

import argparse
from typing import Any, Mapping


def build_parser(commands: Any, themes: Mapping[str, Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinyspec",
        description="tinyspec: track implementation plans kept in markdown specs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--specs-dir", dest="specs_dir", help="spec collection root (default: .specs or config)")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging on stderr")
    parser.add_argument("--log-file", dest="log_file", help="write log records to this file")

    sub = parser.add_subparsers(dest="command", help="Commands")

    # dashboard
    dp = sub.add_parser("dashboard", help="Live dashboard of all specs")
    dp.add_argument("--theme", choices=list(themes.keys()), default=None, help="interface palette")
    dp.set_defaults(func=commands.cmd_dashboard)

    # status
    sp = sub.add_parser("status", help="Task completion per spec")
    sp.add_argument("name", nargs="?", help="spec name (all specs when omitted)")
    sp.add_argument("--json", action="store_true", help="structured JSON output")
    sp.set_defaults(func=commands.cmd_status)

    # list
    lp = sub.add_parser("list", help="List specs with their titles")
    lp.add_argument("--json", action="store_true", help="structured JSON output")
    lp.set_defaults(func=commands.cmd_list)

    # check / uncheck
    for name, func, verb in (("check", commands.cmd_check, "Check"), ("uncheck", commands.cmd_uncheck, "Uncheck")):
        cp = sub.add_parser(name, help=f"{verb} a task in a spec's implementation plan")
        cp.add_argument("name", help="spec name")
        cp.add_argument("task_id", help="task id, e.g. A.1")
        cp.add_argument("--json", action="store_true", help="structured JSON output")
        cp.set_defaults(func=func)

    return parser


__all__ = ["build_parser"]
