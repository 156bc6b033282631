"""Settings loading for CLI commands.

Invalid TEXT_CALC_* values end the command with a usage error instead of a
traceback.
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from core.config import AppSettings

_err_console = Console(stderr=True)


def load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "settings"
            _err_console.print(f"[red]Invalid setting {escape(field)}:[/red] {escape(error['msg'])}")
        raise typer.Exit(code=2) from exc


def validate_log_level(value: str | None) -> str | None:
    """Typer callback for `--log-level`."""

    if value is None:
        return None
    level = value.strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"unknown log level: {value!r}")
    return level
