"""
valuation-splitter: split a valuation export into included / excluded files.

Usage:
  valuation-splitter [PATH] [--frontend {auto,text,browser}] [--indent N] [--log-level LEVEL]

When PATH is omitted the path is read from the terminal; a file dragged into
the terminal window works too.

Exit codes:
  0  files written, or nothing selected so nothing to write
  1  bad configuration, or the file could not be read, parsed or written
  3  the operator cancelled
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import re
import sys
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import FRONTEND_CHOICES, get_config
from .errors import ExportError, ParseError, ReadError, StructureError
from .frontends import make_selector, resolve_frontend
from .logging_config import configure_root_logger
from .pipeline import RunStatus, run_split

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 3

_SHELL_ESCAPE = re.compile(r'\\(.)')


def clean_dropped_path(text: str, posix: Optional[bool] = None) -> str:
    """Undo the quoting terminals add when a file is dragged in.

    Handles `'/a b/c.json'`, `"C:\\a b\\c.json"`, PowerShell's `& 'C:\\a.json'`
    and backslash-escaped spaces on POSIX shells.
    """
    if posix is None:
        posix = os.name != 'nt'

    path = text.strip()
    if path.startswith('& '):
        path = path[2:].strip()
    if len(path) >= 2 and path[0] == path[-1] and path[0] in ('"', "'"):
        return path[1:-1]
    if posix:
        path = _SHELL_ESCAPE.sub(r'\1', path)
    return path


def acquire_file_path(input_fn: Callable[[str], str]) -> Optional[str]:
    try:
        text = input_fn("Path to the valuation JSON file (drag it here), blank to cancel: ")
    except EOFError:
        return None
    path = clean_dropped_path(text or '')
    return path or None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="valuation-splitter",
        description="Split a JSON valuation export into included and excluded properties.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Exit codes: 0 done or nothing to export, 1 error, 3 cancelled.",
    )
    parser.add_argument("--version", action="version", version=f"valuation-splitter {__version__}")
    parser.add_argument("path", nargs="?", help="JSON export to split (prompted for when omitted)")
    parser.add_argument(
        "--frontend",
        choices=FRONTEND_CHOICES,
        default=None,
        help="How to pick records: browser checkboxes or a numbered text menu (default: auto)",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indentation of the output JSON")
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. INFO or DEBUG")
    return parser


def _fail(err_console: Console, message: str) -> int:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    return EXIT_ERROR


def main(
    argv: Optional[List[str]] = None,
    input_fn: Optional[Callable[[str], str]] = None,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> int:
    console = console or Console()
    err_console = err_console or Console(stderr=True)
    input_fn = input_fn or console.input

    args = build_parser().parse_args(argv)
    try:
        config = dataclasses.replace(get_config())
        if args.frontend is not None:
            config.frontend = args.frontend
        if args.indent is not None:
            config.json_indent = args.indent
        if args.log_level is not None:
            config.log_level = args.log_level.upper()
        configure_root_logger(config.log_level, err_console)
    except ValueError as e:
        return _fail(err_console, f"invalid configuration: {e}")

    path = args.path or acquire_file_path(input_fn)
    if not path:
        err_console.print("[yellow]No file selected. Cancelled.[/yellow]")
        return EXIT_CANCELLED

    frontend = resolve_frontend(config.frontend)
    logger.info("Using %s front-end", frontend.value)
    selector = make_selector(frontend, config, console=console, input_fn=input_fn)

    try:
        outcome = run_split(path, selector, config)
    except FileNotFoundError:
        return _fail(err_console, f"file not found: {path}")
    except ReadError as e:
        return _fail(err_console, f"could not read {path}: {e.cause}")
    except ParseError as e:
        return _fail(err_console, f"could not parse JSON in {path}: {e}")
    except StructureError as e:
        return _fail(err_console, f"unexpected structure in {path}: {e}")
    except ExportError as e:
        return _fail(err_console, f"export failed for {e.path}: {e.cause}")
    except OSError as e:
        # e.g. the browser selector could not bind its port
        return _fail(err_console, f"could not start the selector: {e}")
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted.[/yellow]")
        return EXIT_CANCELLED

    if outcome.status is RunStatus.CANCELLED:
        console.print("[yellow]Cancelled. No files written.[/yellow]")
        return EXIT_CANCELLED
    if outcome.status is RunStatus.NOTHING_TO_EXPORT:
        console.print("No records selected for exclusion. Nothing to export.")
        return EXIT_OK

    result = outcome.partition
    console.print(f"[green]Included[/green] {len(result.included)} record(s): {escape(outcome.included_path)}")
    console.print(f"[red]Excluded[/red] {len(result.excluded)} record(s): {escape(outcome.excluded_path)}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
