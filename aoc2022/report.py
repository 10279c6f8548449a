"""aoc2022 report — renders Rich tables for day listings and run results."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from aoc2022.days import DayInfo
from aoc2022.models import DayResult, PartResult

_VERDICT_COLORS = {"pass": "green", "unchecked": "cyan", "fail": "red", "error": "red"}


def _fmt_ms(seconds: float) -> str:
    """Format a duration in milliseconds."""
    if seconds == 0.0:
        return "--"
    return f"{seconds * 1000:.2f}ms"


def _fmt_verdict(verdict: str) -> str:
    color = _VERDICT_COLORS.get(verdict, "white")
    return f"[{color}]{verdict}[/{color}]"


def render_day_list(days: list[DayInfo], console: Console) -> None:
    """Render the table of discovered days."""
    table = Table(title="Available Days", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=8)
    table.add_column("Title", min_width=20)
    table.add_column("Description", min_width=30)
    table.add_column("Parts", justify="right")
    table.add_column("Example", justify="center")

    for d in days:
        has_example = d.example_path.exists() and bool(d.example_answers)
        table.add_row(
            d.name,
            d.title,
            d.description,
            str(len(d.parts)),
            "[green]yes[/green]" if has_example else "[dim]no[/dim]",
        )

    console.print()
    console.print(table)
    console.print()


def render_results(results: list[DayResult], console: Console, title: str = "Results") -> None:
    """Render one row per solved part, plus a row for each failed day."""
    if not results:
        console.print("[yellow]No days found.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Day", style="dim", min_width=8)
    table.add_column("Part", justify="right")
    table.add_column("Answer", justify="right", min_width=10)
    table.add_column("Expected", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Verdict", justify="center")

    for r in results:
        for p in r.parts:
            table.add_row(*_part_row(r, p))
        if r.error:
            table.add_row(r.name, "--", "--", "--", "--", f"[red]{r.error}[/red]")

    console.print()
    console.print(table)
    console.print()


def _part_row(r: DayResult, p: PartResult) -> tuple[str, ...]:
    return (
        r.name,
        str(p.part),
        str(p.answer) if p.answer is not None else "--",
        str(p.expected) if p.expected is not None else "--",
        _fmt_ms(p.wall_clock_s),
        _fmt_verdict(p.verdict),
    )
