"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables and panels are reused by several commands.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CalculationResult


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Lives here so non-interactive modes (JSON, pipelines) can skip it.
    """

    title = Text("text-calc", style="bold cyan")
    subtitle = Text("Classify • Tokenize • Sum", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def display_text(text: str | None) -> str:
    """Single-line rendering of an input (newlines shown as `\\n`)."""

    if text is None:
        return "<none>"
    return text.replace("\n", "\\n")


def build_results_table(results: Sequence[CalculationResult], *, title: str = "Results") -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Expression", style="white")
    table.add_column("Shape", style="cyan")
    table.add_column("Total", style="green")
    table.add_column("Error", style="red")

    for idx, result in enumerate(results, start=1):
        table.add_row(
            str(idx),
            Text(display_text(result.text)),
            result.shape.label(),
            "" if result.total is None else str(result.total),
            Text(result.error or ""),
        )
    return table


def build_result_panel(result: CalculationResult) -> Panel:
    """Panel for `classify`: shape plus the tokens its strategy would parse."""

    body = Text()
    body.append("Input: ", style="bold")
    body.append(display_text(result.text) + "\n")
    body.append("Shape: ", style="bold")
    body.append(result.shape.label() + "\n")
    body.append("Tokens: ", style="bold")
    body.append(", ".join(repr(t) for t in result.tokens) or "-")
    if result.error:
        body.append(f"\nError: {result.error}", style="red")
    else:
        body.append(f"\nTotal: {result.total}", style="green")

    return Panel(body, title=Text("Classification", style="bold yellow"), border_style="yellow")
