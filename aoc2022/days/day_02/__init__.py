"""Day 2: Rock Paper Scissors.

One round per line: opponent's move, then a second column that is read as
my shape in part 1 and as the required outcome in part 2.
"""

DAY = 2
NAME = "day_02"
TITLE = "Rock Paper Scissors"
DESCRIPTION = "Score a strategy guide of rock-paper-scissors rounds"
EXAMPLE_ANSWERS = (15, 12)
