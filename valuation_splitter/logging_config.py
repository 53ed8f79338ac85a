from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

_console = Console(stderr=True)


def resolve_level(level: Union[int, str]) -> int:
    """Turn `"debug"` / `"INFO"` / `10` into a logging level, or raise ValueError."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r}")
    return value


def configure_root_logger(level: Union[int, str] = logging.WARNING, console: Optional[Console] = None) -> RichHandler:
    """Send log records to stderr through rich, replacing any handler installed by an earlier call."""
    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    for h in root.handlers[:]:
        if isinstance(h, RichHandler):
            root.removeHandler(h)

    handler = RichHandler(console=console or _console, show_path=False, rich_tracebacks=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return handler
