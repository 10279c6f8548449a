"""Rock Paper Scissors solver.

Every round is scored from the second player's point of view: the points of
the shape they play plus the points of the round's outcome. Tokens outside
the A/B/C and X/Y/Z alphabet abort the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from aoc2022.models import ClassificationError, MalformedRecordError


class Shape(str, Enum):
    """A hand shape."""

    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def points(self) -> int:
        return _SHAPE_POINTS[self]

    def beats(self) -> Shape:
        """The shape this one defeats."""
        return _BEATS[self]

    def beats_me(self) -> Shape:
        """The shape that defeats this one."""
        return _BEATEN_BY[self]


class Outcome(str, Enum):
    """Result of a round between a first and a second shape."""

    FIRST = "first"
    SECOND = "second"
    DRAW = "draw"

    @property
    def points(self) -> int:
        """Points earned by the second player."""
        return _OUTCOME_POINTS[self]


_SHAPE_POINTS = {Shape.ROCK: 1, Shape.PAPER: 2, Shape.SCISSORS: 3}
_OUTCOME_POINTS = {Outcome.FIRST: 0, Outcome.DRAW: 3, Outcome.SECOND: 6}

_BEATS = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.PAPER: Shape.ROCK,
    Shape.SCISSORS: Shape.PAPER,
}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}

# Both columns accept every letter when read as shapes.
_SHAPE_TOKENS = {
    "A": Shape.ROCK, "X": Shape.ROCK,
    "B": Shape.PAPER, "Y": Shape.PAPER,
    "C": Shape.SCISSORS, "Z": Shape.SCISSORS,
}
# X: I lose (the first player wins), Y: draw, Z: I win.
_OUTCOME_TOKENS = {"X": Outcome.FIRST, "Y": Outcome.DRAW, "Z": Outcome.SECOND}


@dataclass(frozen=True)
class Round:
    """One line of the strategy guide, still as raw tokens."""

    first: str
    second: str


def parse_rounds(text: str) -> list[Round]:
    """Split the guide into rounds, skipping empty lines.

    Raises:
        MalformedRecordError: a line does not hold exactly two tokens.
    """
    rounds = []
    for line_no, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        tokens = line.split()
        if len(tokens) != 2:
            raise MalformedRecordError(line_no, line, f"expected 2 moves, got {len(tokens)}")
        rounds.append(Round(tokens[0], tokens[1]))
    return rounds


def classify_shape(token: str) -> Shape:
    try:
        return _SHAPE_TOKENS[token]
    except KeyError:
        raise ClassificationError(token, "shape") from None


def classify_outcome(token: str) -> Outcome:
    try:
        return _OUTCOME_TOKENS[token]
    except KeyError:
        raise ClassificationError(token, "outcome") from None


def evaluate_round(first: Shape, second: Shape) -> Outcome:
    """Decide which shape wins; exactly one outcome holds for any pair."""
    if first.beats() == second:
        return Outcome.FIRST
    if second.beats() == first:
        return Outcome.SECOND
    return Outcome.DRAW


def shape_for_outcome(first: Shape, outcome: Outcome) -> Shape:
    """The second shape that produces ``outcome`` when played against ``first``."""
    if outcome is Outcome.FIRST:
        return first.beats()
    if outcome is Outcome.SECOND:
        return first.beats_me()
    return first


def score_round(first: Shape, second: Shape) -> int:
    return evaluate_round(first, second).points + second.points


def part_1(text: str) -> int:
    total = 0
    for rnd in parse_rounds(text):
        total += score_round(classify_shape(rnd.first), classify_shape(rnd.second))
    return total


def part_2(text: str) -> int:
    total = 0
    for rnd in parse_rounds(text):
        first = classify_shape(rnd.first)
        second = shape_for_outcome(first, classify_outcome(rnd.second))
        total += score_round(first, second)
    return total
