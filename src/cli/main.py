"""text-calc command line interface (Typer + Rich).

The CLI only parses arguments, reads settings and renders output; all the
calculation lives in `core.services.calculator`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.batch_loader import load_batch
from adapters.json_exporter import export_results_json
from cli import doctor
from cli.settings import load_settings, validate_log_level
from cli.ui_components import build_result_panel, build_results_table
from core.config import AppSettings
from core.domain.errors import CalculatorError
from core.services.calculator import calculate, evaluate

app = typer.Typer(no_args_is_help=True, help="Sum the integers in a delimited text expression.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger("text_calc")


def configure_logging(level: str) -> None:
    """Install a RichHandler on the root logger (idempotent)."""

    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=_err_console, show_path=False, rich_tracebacks=True))


def _prepare(expression: str, *, raw: bool, settings: AppSettings) -> str:
    if raw or not settings.unescape_input:
        return expression
    return expression.replace("\\n", "\n")


def _reject(flag: bool | None, settings: AppSettings) -> bool:
    return settings.reject_negatives if flag is None else flag


RawOption = Annotated[bool, typer.Option("--raw", help="Do not turn a typed \\n into a newline.")]
RejectOption = Annotated[
    Optional[bool],
    typer.Option("--reject-negatives/--allow-negatives", help="Fail on negative numbers."),
]


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level, help="Override TEXT_CALC_LOG_LEVEL."),
    ] = None,
) -> None:
    settings = load_settings()
    configure_logging(log_level or settings.log_level)


@app.command()
def calc(
    expression: Annotated[str, typer.Argument(help='Expression, e.g. "1,2:3" or "//;\\n1;2".')],
    reject_negatives: RejectOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON.")] = False,
    raw: RawOption = False,
) -> None:
    """Print the sum of the numbers in EXPRESSION."""

    settings = load_settings()
    text = _prepare(expression, raw=raw, settings=settings)
    reject = _reject(reject_negatives, settings)

    if as_json:
        result = evaluate(text, reject_negatives=reject)
        typer.echo(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, sort_keys=True))
        if not result.ok:
            raise typer.Exit(code=1)
        return

    try:
        total = calculate(text, reject_negatives=reject)
    except CalculatorError as exc:
        logger.debug("calculation failed", exc_info=exc)
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    typer.echo(str(total))


@app.command()
def classify(
    expression: Annotated[str, typer.Argument(help="Expression to classify.")],
    raw: RawOption = False,
) -> None:
    """Show the shape of EXPRESSION and the tokens it splits into."""

    settings = load_settings()
    text = _prepare(expression, raw=raw, settings=settings)
    result = evaluate(text, reject_negatives=settings.reject_negatives)
    _console.print(build_result_panel(result))


@app.command()
def batch(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="JSON file with expressions.")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write results to this JSON file.")] = None,
    reject_negatives: RejectOption = None,
) -> None:
    """Evaluate every expression in a JSON batch file."""

    settings = load_settings()
    reject = _reject(reject_negatives, settings)
    try:
        expressions = load_batch(path).expressions
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.debug("batch file rejected", exc_info=exc)
        _err_console.print(f"[red]Invalid batch file {escape(str(path))}:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    results = [evaluate(text, reject_negatives=reject) for text in expressions]
    logger.info("evaluated %d expressions from %s", len(results), path)

    _console.print(build_results_table(results, title=path.name))

    if output is not None:
        out = export_results_json(results=results, output_path=output)
        _console.print(f"[green]Saved results to:[/green] {out}")

    if any(not r.ok for r in results):
        raise typer.Exit(code=1)


def run() -> None:
    app()
