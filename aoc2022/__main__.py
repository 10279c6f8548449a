"""CLI for the aoc2022 puzzle solvers.

Usage:
    python -m aoc2022 list                      # Show available days
    python -m aoc2022 run 1                     # Solve day 1 with its input.txt
    python -m aoc2022 run day_02 --part 2       # Only part 2
    python -m aoc2022 run 2 -i ~/aoc/day2.txt   # Explicit input file
    python -m aoc2022 all                       # Solve every day
    python -m aoc2022 check                     # Verify every day's example answers
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from aoc2022.days import list_days, load_day
from aoc2022.report import render_day_list, render_results
from aoc2022.runner import UnknownDayError, run_all_days, run_day

app = typer.Typer(
    name="aoc2022",
    help="Advent of Code 2022 puzzle solvers",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.command("list")
def cmd_list() -> None:
    """Show available days."""
    days = list_days()
    if not days:
        console.print("[yellow]No days found.[/yellow]")
        raise typer.Exit(1)
    render_day_list(days, console)


@app.command("run")
def cmd_run(
    day: str = typer.Argument(help="Day name (e.g., '1', '01' or 'day_01')"),
    part: Optional[int] = typer.Option(None, "--part", "-p", help="Solve only this part"),
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help="Input file to read"),
    example: bool = typer.Option(False, "--example", "-e", help="Use the bundled example input"),
) -> None:
    """Solve one day and print its answers to stdout."""
    try:
        result = run_day(day, console, input_path=input_path, example=example, part=part)
    except UnknownDayError:
        console.print(f"[red]Unknown day: {day}[/red]. Run 'list' to see available days.")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if result.error:
        console.print(f"[red]Error:[/red] {result.error}")
        raise typer.Exit(1)

    for answer in result.answers:
        typer.echo(answer)


@app.command("all")
def cmd_all(
    example: bool = typer.Option(False, "--example", "-e", help="Use the bundled example inputs"),
) -> None:
    """Solve every day and show a summary table."""
    results = run_all_days(console, example=example)
    render_results(results, console, title="All Days")
    if any(r.error for r in results):
        raise typer.Exit(1)


@app.command("check")
def cmd_check(
    day: Optional[str] = typer.Argument(None, help="Day to check (default: all days)"),
) -> None:
    """Run example inputs and compare against the expected answers."""
    if day is None:
        results = run_all_days(console, example=True)
    else:
        if not load_day(day):
            console.print(f"[red]Unknown day: {day}[/red]. Run 'list' to see available days.")
            raise typer.Exit(1)
        results = [run_day(day, console, example=True)]

    render_results(results, console, title="Example Check")
    if not all(r.ok for r in results):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
