from __future__ import annotations

import enum
import os
import platform
from typing import Callable, Mapping, Optional

from rich.console import Console

from .config import SplitterConfig
from .selection import Selector
from .text_menu import TextMenuSelector


class Frontend(enum.Enum):
    TEXT = 'text'
    BROWSER = 'browser'


def detect_frontend(system: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Frontend:
    """Browser checkboxes when a graphical session is available, the text menu otherwise."""
    system = system or platform.system()
    environ = os.environ if environ is None else environ

    if system in ('Windows', 'Darwin'):
        return Frontend.BROWSER
    if environ.get('DISPLAY') or environ.get('WAYLAND_DISPLAY'):
        return Frontend.BROWSER
    return Frontend.TEXT


def resolve_frontend(requested: str, system: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Frontend:
    if requested == 'auto':
        return detect_frontend(system, environ)
    return Frontend(requested)


def make_selector(
    frontend: Frontend,
    config: SplitterConfig,
    console: Optional[Console] = None,
    input_fn: Optional[Callable[[str], str]] = None,
) -> Selector:
    if frontend is Frontend.BROWSER:
        # Gradio is slow to import; only pay for it when the browser is used.
        from .gui_selector import BrowserSelector

        return BrowserSelector(
            id_field=config.id_field,
            summary_fields=config.summary_fields,
            server_port=config.server_port,
        )
    return TextMenuSelector(
        id_field=config.id_field,
        summary_fields=config.summary_fields,
        console=console,
        input_fn=input_fn,
    )
