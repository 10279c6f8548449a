"""Day discovery and loading for aoc2022.

Each day is a subdirectory of aoc2022/days/ containing:
    __init__.py  — DAY, NAME, TITLE, DESCRIPTION, EXAMPLE_ANSWERS constants
    solver.py    — part_1(text) -> int and (optionally) part_2(text) -> int
    example.txt  — the worked example from the puzzle statement
    tests/       — pytest suite for the solver
    input.txt    — (optional, not committed) the personal puzzle input
"""

from __future__ import annotations

import importlib
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

Solver = Callable[[str], int]

# Env var pointing at a directory of <day name>.txt inputs.
INPUT_DIR_ENV = "AOC_INPUT_DIR"

_DAY_DIR_RE = re.compile(r"^day_\d{2}$")


@dataclass
class DayInfo:
    """Metadata about a discovered day."""

    day: int
    name: str
    title: str
    description: str
    path: Path
    example_path: Path
    parts: list[Solver] = field(default_factory=list)
    example_answers: tuple[int, ...] = ()

    def expected(self, part: int) -> Optional[int]:
        """Expected example answer for a 1-based part number, if declared."""
        if 0 < part <= len(self.example_answers):
            return self.example_answers[part - 1]
        return None


def _days_root() -> Path:
    """Absolute path to the days/ directory."""
    return Path(__file__).parent


def normalize_name(name: str) -> str:
    """Turn '1', '01' or 'day_01' into the package name 'day_01'."""
    name = name.strip().lower()
    if name.isdigit():
        return f"day_{int(name):02d}"
    if name.startswith("day") and name[3:].lstrip("_-").isdigit():
        return f"day_{int(name[3:].lstrip('_-')):02d}"
    return name


def list_days() -> list[DayInfo]:
    """Discover all available days.

    Scans subdirectories of aoc2022/days/ for day packages (day_NN with an
    __init__.py and a solver.py).
    """
    days = []
    for child in sorted(_days_root().iterdir()):
        if not child.is_dir() or not _DAY_DIR_RE.match(child.name):
            continue
        if not (child / "__init__.py").exists() or not (child / "solver.py").exists():
            continue

        info = load_day(child.name)
        if info:
            days.append(info)

    return days


def load_day(name: str) -> Optional[DayInfo]:
    """Load a single day by name.

    Args:
        name: 'day_01', '01' or '1'.

    Returns:
        DayInfo if the day exists and defines at least one part, None otherwise.
    """
    pkg_name = normalize_name(name)
    day_dir = _days_root() / pkg_name
    if not day_dir.is_dir() or not (day_dir / "solver.py").exists():
        return None

    try:
        meta = importlib.import_module(f"aoc2022.days.{pkg_name}")
        solver = importlib.import_module(f"aoc2022.days.{pkg_name}.solver")
    except ImportError:
        return None

    parts: list[Solver] = []
    for n in (1, 2):
        fn = getattr(solver, f"part_{n}", None)
        if fn is None:
            break
        parts.append(fn)
    if not parts:
        return None

    return DayInfo(
        day=getattr(meta, "DAY", int(pkg_name[4:])),
        name=getattr(meta, "NAME", pkg_name),
        title=getattr(meta, "TITLE", pkg_name),
        description=getattr(meta, "DESCRIPTION", ""),
        path=day_dir,
        example_path=day_dir / "example.txt",
        parts=parts,
        example_answers=tuple(getattr(meta, "EXAMPLE_ANSWERS", ())),
    )


def resolve_input(
    info: DayInfo,
    input_path: Optional[Path] = None,
    example: bool = False,
) -> Path:
    """Pick the input file for a day.

    Order: explicit path, bundled example, $AOC_INPUT_DIR/<name>.txt, then
    input.txt inside the day package. Existence is not checked here.
    """
    if input_path is not None:
        return input_path
    if example:
        return info.example_path
    input_dir = os.environ.get(INPUT_DIR_ENV)
    if input_dir:
        return Path(input_dir) / f"{info.name}.txt"
    return info.path / "input.txt"
