# hackpuzzles

Small solvers for well-known programming-puzzle exercises on strings,
character grids, integer sequences and whole numbers. Each puzzle is an
ordinary Python function. A command-line tool answers some of the puzzles
from input in the usual "first the count, then the cases" text format.

The package has no dependencies beyond Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The library

- `hackpuzzles.text`: `bigger_is_greater`, `caesar_cipher`, `encrypt`,
  `reduce_by_letter_counts`, `reduce_adjacent_pairs`, `time_conversion`,
  `happy_ladybugs`
- `hackpuzzles.grids`: `cavity_map`, `mark_nines`, `grid_search`
- `hackpuzzles.sequences`: `rotate_queries`, `counting_sort_counts`,
  `birthday_cake_candles`, `divisible_sum_pairs`, `breaking_records`,
  `minimum_distances`, `cut_the_sticks`, `birthday`, `service_lane`,
  `flatland_space_stations`, `first_job_probability`,
  `count_apples_and_oranges`
- `hackpuzzles.arithmetic`: `save_the_prisoner`, `absolute_permutation`,
  `chocolate_feast`, `find_digits`, `get_total_x`, `grading_students`,
  `kangaroo`, `library_fine`, `stones`, `separate_digits`, `squares`,
  `jumping_on_clouds`, `jumping_on_clouds_revisited`, `workbook`

For example:

```python
from hackpuzzles.arithmetic import grading_students, save_the_prisoner
from hackpuzzles.text import bigger_is_greater, caesar_cipher, time_conversion

grading_students(73)             # 75
save_the_prisoner(5, 2, 1)       # 2
bigger_is_greater("ab")          # "ba"
bigger_is_greater("bb")          # None: there is no greater permutation
caesar_cipher("middle-Outz", 2)  # "okffng-Qwvb"
time_conversion("07:05:45PM")    # "19:05:45"
```

Functions with no answer for an input return `None` (`bigger_is_greater`,
`absolute_permutation`) or `-1` (`minimum_distances`). Input that a puzzle
cannot accept, such as a malformed time, a negative Caesar shift or an
empty list where one value is needed, raises `ValueError`; an index outside
the data raises `IndexError`.

## The command line

The `hackpuzzles` command takes the name of a puzzle, reads that puzzle's
input from standard input and prints the answers, one per line:

```
hackpuzzles --help
hackpuzzles save-the-prisoner < input.txt
```

The puzzles it answers are:

- `absolute-permutation`: prints each permutation, or `-1`
- `bigger-is-greater`: prints each next permutation, or `no answer`
- `circular-array-rotation`
- `cut-the-sticks`
- `first-job`: prints the probability with one decimal when every value
  is above the threshold, otherwise with two
- `grid-search`: prints `YES` or `NO` per case
- `happy-ladybugs`: prints `YES` or `NO` per case
- `save-the-prisoner`
- `stones`
- `time-conversion`

Input is read as whitespace-separated tokens. If the input ends early or
cannot be answered, the command prints `hackpuzzles: <reason>` on standard
error and exits with status 1.

From Python, `hackpuzzles.cli.run(command, text)` takes a puzzle name and
the input text and returns the output text; an unknown name raises
`ValueError`.

## What it does not do

Only the puzzles listed above have a command. The other functions are
available from Python only.