"""Calorie Counting solver.

Lines that are not integers are treated as absent rather than fatal; a blank
line closes the current group once at least one group has started.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from aoc2022.models import NotEnoughGroupsError

TOP_K = 3

# ASCII digits only; int() would also take "1_000" and other scripts' digits.
_CALORIES_RE = re.compile(r"[+-]?[0-9]+")


def parse_calories(line: str) -> Optional[int]:
    """Parse one line as a calorie count, or None if it is not an integer."""
    line = line.strip()
    if not _CALORIES_RE.fullmatch(line):
        return None
    return int(line)


def group_totals(text: str) -> list[int]:
    """Sum every blank-line-delimited group, in input order.

    Leading or repeated blank lines never create empty groups, and a group
    with no numeric line never appears.
    """
    totals: list[int] = []
    current: Optional[int] = None

    for line in text.splitlines():
        if not line.strip():
            if current is not None:
                totals.append(current)
                current = None
            continue

        calories = parse_calories(line)
        if calories is None:
            continue
        current = calories if current is None else current + calories

    if current is not None:
        totals.append(current)
    return totals


def top_k_total(totals: Iterable[int], k: int) -> int:
    """Sum the k largest totals.

    Raises:
        NotEnoughGroupsError: k is below 1 or exceeds the number of groups.
    """
    ordered = sorted(totals)
    if k < 1 or k > len(ordered):
        raise NotEnoughGroupsError(
            f"Cannot take the top {k} of {len(ordered)} group(s)"
        )
    return sum(ordered[-k:])


def part_1(text: str) -> int:
    return top_k_total(group_totals(text), 1)


def part_2(text: str) -> int:
    return top_k_total(group_totals(text), TOP_K)
