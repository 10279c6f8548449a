"""Day 1: Calorie Counting.

Blank-line-delimited groups of calorie counts, one group per elf.
Part 1: the largest group total. Part 2: the sum of the three largest.
"""

DAY = 1
NAME = "day_01"
TITLE = "Calorie Counting"
DESCRIPTION = "Sum blank-line-separated groups and pick the largest totals"
EXAMPLE_ANSWERS = (24000, 45000)
