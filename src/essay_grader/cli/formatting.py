"""
CLI Output Formatting

Rich formatting helpers for grading results and validation reports.
"""

import json
from typing import Any, Dict, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..evaluation.engine import GradingOutcome
from ..evaluation.feedback import format_score

console = Console()


def format_outcome_table(outcome: GradingOutcome, title: str = "Grading Result") -> Table:
    """
    Format the per-group matches and totals of a grading outcome.

    Args:
        outcome: Outcome returned by EssayEngine.evaluate()
        title: Table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, show_header=True, header_style="bold blue")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Found", justify="center")
    table.add_column("Match", style="cyan")
    table.add_column("Alternative", style="white")
    table.add_column("Points", justify="right")

    for index, match in enumerate(outcome.group_matches, start=1):
        table.add_row(
            str(index),
            "[green]✓[/green]" if match.found else "[red]✗[/red]",
            match.match_type.value,
            match.alternative or "-",
            format_score(match.points_earned),
        )

    return table


def format_summary_panel(outcome: GradingOutcome) -> Panel:
    """Panel with score, status and feedback text."""
    status = []
    status.append("[green]passed[/green]" if outcome.passed else "[red]failed[/red]")
    if outcome.mastered:
        status.append("[bold green]mastered[/bold green]")

    body = (
        f"[bold]Score:[/bold] {format_score(outcome.display_score)} / {format_score(outcome.max_score)}"
        f"  [dim](raw {format_score(outcome.raw_score)}, pass at {format_score(outcome.passing_score)})[/dim]\n"
        f"[bold]Status:[/bold] {', '.join(status)}"
    )
    if outcome.feedback_text:
        body += f"\n\n{outcome.feedback_text}"

    return Panel(body, title="Feedback", border_style="green" if outcome.passed else "red")


def format_issues_table(issues: List[str], title: str = "Validation Issues") -> Table:
    """Format content validation issues."""
    table = Table(title=title, show_header=True, header_style="bold yellow")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Issue", style="yellow")

    for index, issue in enumerate(issues, start=1):
        table.add_row(str(index), issue)

    return table


def print_json(data: Dict[str, Any]) -> None:
    """Print data as JSON without rich markup processing."""
    console.print_json(json.dumps(data, default=str))
