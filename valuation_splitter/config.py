"""Configuration for the splitter.

Values come from environment variables, optionally seeded from a `.env`
file in the working directory. Every variable is prefixed `SPLITTER_`.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_ID_FIELD = 'Valuation_ID'
DEFAULT_INCLUDED_SUFFIX = '_PropertiesIncluded'
DEFAULT_EXCLUDED_SUFFIX = '_PropertiesExcluded'
DEFAULT_SUMMARY_FIELDS = ['Address', 'Valuation_Date', 'Valuation_Amount']
FRONTEND_CHOICES = ('auto', 'text', 'browser')


@dataclass
class SplitterConfig:
    """Settings shared by the CLI, the selectors and the web app."""
    id_field: str = DEFAULT_ID_FIELD
    included_suffix: str = DEFAULT_INCLUDED_SUFFIX
    excluded_suffix: str = DEFAULT_EXCLUDED_SUFFIX
    json_indent: Optional[int] = 2
    frontend: str = 'auto'
    summary_fields: List[str] = field(default_factory=lambda: list(DEFAULT_SUMMARY_FIELDS))
    log_level: str = 'WARNING'
    server_port: Optional[int] = None


def _int_from_env(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _list_from_env(env: Mapping[str, str], name: str, default: List[str]) -> List[str]:
    raw = env.get(name)
    if raw is None:
        return list(default)
    return [part.strip() for part in raw.split(',') if part.strip()]


def load_config(env: Optional[Mapping[str, str]] = None) -> SplitterConfig:
    """Build a config from a mapping of environment variables."""
    if env is None:
        env = os.environ

    frontend = env.get('SPLITTER_FRONTEND', 'auto').strip().lower() or 'auto'
    if frontend not in FRONTEND_CHOICES:
        raise ValueError(f"SPLITTER_FRONTEND must be one of {', '.join(FRONTEND_CHOICES)}, got {frontend!r}")

    return SplitterConfig(
        id_field=env.get('SPLITTER_ID_FIELD') or DEFAULT_ID_FIELD,
        included_suffix=env.get('SPLITTER_INCLUDED_SUFFIX') or DEFAULT_INCLUDED_SUFFIX,
        excluded_suffix=env.get('SPLITTER_EXCLUDED_SUFFIX') or DEFAULT_EXCLUDED_SUFFIX,
        json_indent=_int_from_env(env, 'SPLITTER_JSON_INDENT', 2),
        frontend=frontend,
        summary_fields=_list_from_env(env, 'SPLITTER_SUMMARY_FIELDS', DEFAULT_SUMMARY_FIELDS),
        log_level=(env.get('SPLITTER_LOG_LEVEL') or 'WARNING').upper(),
        server_port=_int_from_env(env, 'SPLITTER_SERVER_PORT', None),
    )


# Singleton instance
_config_instance: Optional[SplitterConfig] = None


def get_config() -> SplitterConfig:
    """Load configuration once per process, reading `.env` if present."""
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    load_dotenv(find_dotenv(usecwd=True))
    _config_instance = load_config(os.environ)
    return _config_instance
