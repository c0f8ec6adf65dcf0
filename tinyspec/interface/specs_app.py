#!/usr/bin/env python3
"""tinyspec command line entry point."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import List, Optional

from tinyspec import __version__
from tinyspec.interface.cli_commands import cmd_check, cmd_list, cmd_status, cmd_uncheck  # noqa: F401
from tinyspec.interface.cli_parser import build_parser as build_cli_parser
from tinyspec.interface.tui_app import cmd_dashboard  # noqa: F401
from tinyspec.interface.tui_themes import THEMES

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = build_cli_parser(commands=sys.modules[__name__], themes=THEMES)
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    if log_file:
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("tinyspec"))
        except PackageNotFoundError:
            print(__version__)
        return 0
    configure_logging(bool(getattr(args, "verbose", False)), getattr(args, "log_file", None))
    if not getattr(args, "command", None):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
