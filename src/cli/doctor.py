"""Doctor command for configuration and self-check diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from cli.settings import load_settings
from cli.ui_components import display_text, print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import CalculatorError
from core.services.calculator import calculate

app = typer.Typer(no_args_is_help=True, help="Configuration checks and self-test.")

_console = Console()

# (expression, expected total or None when it must fail)
SELF_CHECKS: tuple[tuple[str | None, int | None], ...] = (
    (None, 0),
    ("", 0),
    ("   ", 0),
    ("42", 42),
    ("1,2,3", 6),
    ("1,2:3", 6),
    ("//;\n1;2;3", 6),
    ("1,a,3", None),
    ("abc", None),
)


def _run_check(text: str | None, expected: int | None) -> tuple[bool, str]:
    try:
        total = calculate(text)
    except CalculatorError as exc:
        return expected is None, str(exc)
    return total == expected, str(total)


@app.command()
def run() -> None:
    """Show effective settings and run the built-in examples."""

    settings = load_settings()
    if settings.show_banner:
        print_banner(_console)

    config = Table(title="Settings")
    config.add_column("Key", style="bright_green", no_wrap=True)
    config.add_column("Value", style="white")
    config.add_row("log_level", settings.log_level)
    config.add_row("reject_negatives", str(settings.reject_negatives))
    config.add_row("unescape_input", str(settings.unescape_input))
    config.add_row("user .env", str(get_user_env_file()))
    _console.print(config)

    table = Table(title="Self-check")
    table.add_column("Expression", style="white")
    table.add_column("Status", style="bright_green")
    table.add_column("Details", style="dim")

    failures = 0
    for text, expected in SELF_CHECKS:
        ok, detail = _run_check(text, expected)
        failures += 0 if ok else 1
        table.add_row(Text(display_text(text)), "OK" if ok else "FAIL", Text(detail))
    _console.print(table)

    if failures:
        raise typer.Exit(code=1)


@app.command(name="set")
def set_value(
    key: str = typer.Argument(..., help="Setting name, e.g. reject_negatives."),
    value: str = typer.Argument(..., help="New value."),
) -> None:
    """Store a setting in the user config .env."""

    field = key.strip().lower()
    if field not in AppSettings.model_fields:
        raise typer.BadParameter(f"unknown setting: {key}")

    env_path = write_user_env_vars({f"TEXT_CALC_{field.upper()}": value.strip()})
    _console.print(f"[green]Saved {field} to:[/green] {env_path}")
