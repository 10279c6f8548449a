"""Tests for the day 1 Calorie Counting solver.

Covers grouping, the skip-on-garbage policy, top-K selection and the
bundled example answers.
"""

import itertools
from pathlib import Path

import pytest

from aoc2022.days.day_01.solver import (
    group_totals,
    parse_calories,
    part_1,
    part_2,
    top_k_total,
)
from aoc2022.models import NotEnoughGroupsError

EXAMPLE = (Path(__file__).parent.parent / "example.txt").read_text(encoding="utf-8")


# --- Parsing ---

def test_parse_calories_integer():
    assert parse_calories("1000") == 1000


def test_parse_calories_surrounding_whitespace():
    assert parse_calories("  42\r") == 42


@pytest.mark.parametrize("line", ["", "abc", "12x", "1.5", "1_000", "\uff11\uff12", "\u0661\u0662"])
def test_parse_calories_garbage_is_absent(line):
    assert parse_calories(line) is None


# --- Grouping ---

def test_group_totals_three_groups():
    text = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n"
    assert group_totals(text) == [6000, 4000, 11000]


def test_group_totals_example():
    assert group_totals(EXAMPLE) == [6000, 4000, 11000, 24000, 10000]


def test_group_totals_ignores_leading_and_repeated_blanks():
    text = "\n\n100\n\n\n\n200\n300\n\n"
    assert group_totals(text) == [100, 500]


def test_group_totals_skips_garbage_lines():
    text = "100\noops\n200\n\nnope\n\n300\n"
    assert group_totals(text) == [300, 300]


def test_group_totals_crlf():
    assert group_totals("1\r\n2\r\n\r\n3\r\n") == [3, 3]


def test_group_totals_empty_input():
    assert group_totals("") == []


def test_group_totals_match_per_group_sums():
    groups = [[5, 10, 15], [7], [1, 2, 3, 4]]
    text = "\n\n".join("\n".join(str(n) for n in g) for g in groups)
    assert group_totals(text) == [sum(g) for g in groups]


# --- Top-K ---

def test_top_2_of_three_groups():
    assert top_k_total([6000, 4000, 11000], 2) == 17000


def test_top_k_permutation_invariant():
    totals = [6000, 4000, 11000, 24000, 10000]
    results = {top_k_total(p, 3) for p in itertools.permutations(totals)}
    assert results == {45000}


def test_top_k_all_groups():
    assert top_k_total([1, 2, 3], 3) == 6


@pytest.mark.parametrize("k", [0, 4])
def test_top_k_out_of_range_aborts(k):
    with pytest.raises(NotEnoughGroupsError):
        top_k_total([1, 2, 3], k)


# --- Parts ---

def test_part_1_example():
    assert part_1(EXAMPLE) == 24000


def test_part_2_example():
    assert part_2(EXAMPLE) == 45000


def test_part_2_needs_three_groups():
    with pytest.raises(NotEnoughGroupsError):
        part_2("1\n\n2\n")
