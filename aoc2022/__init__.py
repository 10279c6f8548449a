"""aoc2022 — Advent of Code 2022 puzzle solvers.

One self-contained package per day under aoc2022/days/, each a small
parse → classify → reduce pipeline over a text input. A thin CLI discovers
the days, feeds them their inputs and prints the answers.

Usage:
    python -m aoc2022 list           # Show days
    python -m aoc2022 run 1          # Solve day 1
    python -m aoc2022 check          # Verify example answers
"""
