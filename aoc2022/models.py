"""Data models for the aoc2022 solvers.

PuzzleError hierarchy for inputs that must abort a run, plus the PartResult /
DayResult structures that flow through runner → report → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


class PuzzleError(Exception):
    """Base class for input problems that abort a solver run."""


class ClassificationError(PuzzleError):
    """A token fell outside a closed puzzle alphabet."""

    def __init__(self, token: str, kind: str) -> None:
        super().__init__(f"Unexpected {kind} token: {token!r}")
        self.token = token
        self.kind = kind


class MalformedRecordError(PuzzleError):
    """A record is missing the tokens its format requires."""

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"Line {line_no}: {reason}: {line!r}")
        self.line_no = line_no
        self.line = line


class NotEnoughGroupsError(PuzzleError):
    """Top-K selection asked for more groups than the input holds."""


@dataclass
class PartResult:
    """Answer for one part of one day."""

    part: int
    answer: Optional[int] = None
    expected: Optional[int] = None
    wall_clock_s: float = 0.0

    @property
    def verdict(self) -> str:
        if self.answer is None:
            return "error"
        if self.expected is None:
            return "unchecked"
        if self.answer == self.expected:
            return "pass"
        return "fail"


@dataclass
class DayResult:
    """Complete result of solving a single day."""

    day: int
    name: str
    title: str
    input_path: Optional[Path] = None
    parts: list[PartResult] = field(default_factory=list)
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error and all(p.verdict in ("pass", "unchecked") for p in self.parts)

    @property
    def answers(self) -> list[int]:
        return [p.answer for p in self.parts if p.answer is not None]
