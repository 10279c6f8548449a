"""aoc2022 runner — orchestrates load → read input → solve → result.

Data flow per day:
1. Resolve the day package and its input file
2. Read the whole input before solving
3. Run each requested part, timing it
4. Assemble a DayResult (expected answers attached for example runs)

Solver errors (PuzzleError) and missing inputs are captured on the
DayResult so the CLI decides how to report them.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from rich.console import Console

from aoc2022.days import DayInfo, list_days, load_day, resolve_input
from aoc2022.models import DayResult, PartResult, PuzzleError


class UnknownDayError(LookupError):
    """No day package matches the requested name."""


def _read_input(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _solve_part(info: DayInfo, part: int, text: str, example: bool) -> PartResult:
    solver = info.parts[part - 1]
    start = time.perf_counter()
    answer = solver(text)
    elapsed = time.perf_counter() - start
    return PartResult(
        part=part,
        answer=answer,
        expected=info.expected(part) if example else None,
        wall_clock_s=elapsed,
    )


def run_day(
    name: str,
    console: Console,
    input_path: Optional[Path] = None,
    example: bool = False,
    part: Optional[int] = None,
) -> DayResult:
    """Solve one day.

    Args:
        name: Day name ('day_01', '01' or '1').
        console: Rich Console for status output.
        input_path: Explicit input file, overrides every other source.
        example: Use the bundled example.txt and check the expected answers.
        part: Solve only this part (1-based); all parts when None.

    Returns:
        DayResult with one PartResult per solved part, or an error message.

    Raises:
        UnknownDayError: no day package matches ``name``.
        ValueError: ``part`` is not a part this day defines.
    """
    info = load_day(name)
    if not info:
        raise UnknownDayError(name)

    if part is not None and not 1 <= part <= len(info.parts):
        raise ValueError(f"{info.name} has no part {part} (1-{len(info.parts)})")

    path = resolve_input(info, input_path=input_path, example=example)
    result = DayResult(day=info.day, name=info.name, title=info.title, input_path=path)

    console.print(f"\n[bold]Day {info.day}:[/bold] {info.title}")
    console.print(f"  [dim]Input: {path}[/dim]")

    try:
        text = _read_input(path)
    except FileNotFoundError:
        result.error = f"Input not found: {path}"
        return result
    except (OSError, UnicodeDecodeError) as e:
        result.error = f"Cannot read input {path}: {e}"
        return result

    parts = [part] if part is not None else range(1, len(info.parts) + 1)
    for n in parts:
        try:
            part_result = _solve_part(info, n, text, example)
        except PuzzleError as e:
            result.parts.append(PartResult(part=n, expected=info.expected(n) if example else None))
            result.error = f"Part {n}: {e}"
            return result
        result.parts.append(part_result)
        console.print(
            f"  [dim]Part {n}: {part_result.answer} "
            f"({part_result.wall_clock_s * 1000:.2f}ms)[/dim]"
        )

    return result


def run_all_days(
    console: Console,
    example: bool = False,
) -> list[DayResult]:
    """Solve every discovered day in order.

    A failing day records its error and the remaining days still run.
    """
    return [
        run_day(info.name, console, example=example)
        for info in list_days()
    ]
