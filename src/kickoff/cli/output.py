"""Rich terminal output for provisioning results.

Renders the per-step outcome table shown after a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from kickoff.pipeline.result import ProvisionResult


# Status styling map: status value -> (symbol, Rich markup style)
_STATUS_STYLES: dict[str, tuple[str, str]] = {
    "ok": ("\u2713 OK", "bold green"),
    "warning": ("! WARNING", "bold yellow"),
    "skipped": ("- SKIPPED", "dim"),
    "failed": ("\u2717 FAILED", "bold red"),
}


def render_summary(result: ProvisionResult, console: Console) -> None:
    """Render a compact table with one row per step that ran.

    Args:
        result: The finished ProvisionResult.
        console: Rich Console for output.
    """
    if not result.steps:
        return

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Step", style="bold")
    table.add_column("Status")
    table.add_column("Detail", style="dim")

    for outcome in result.steps:
        symbol, style = _STATUS_STYLES.get(outcome.status.value, ("?", "bold red"))
        table.add_row(outcome.step, f"[{style}]{symbol}[/{style}]", escape(outcome.detail))

    if result.error is not None:
        step = result.error.step or "unknown"
        table.add_row(step, "[bold red]\u2717 FATAL[/bold red]", escape(str(result.error)))

    console.print(table)
