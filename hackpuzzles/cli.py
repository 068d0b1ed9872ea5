"""Command-line front end that answers puzzle inputs in their plain-text format."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from hackpuzzles.arithmetic import absolute_permutation, save_the_prisoner, stones
from hackpuzzles.grids import grid_search
from hackpuzzles.sequences import cut_the_sticks, first_job_probability, rotate_queries
from hackpuzzles.text import bigger_is_greater, happy_ladybugs, time_conversion


class _Reader:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]


def _bigger_is_greater(reader: _Reader) -> list[str]:
    lines = []
    for _ in range(reader.integer()):
        answer = bigger_is_greater(reader.word())
        lines.append("no answer" if answer is None else answer)
    return lines


def _circular_array_rotation(reader: _Reader) -> list[str]:
    n, k, q = reader.integers(3)
    values = reader.integers(n)
    queries = reader.integers(q)
    return [str(item) for item in rotate_queries(values, k, queries)]


def _save_the_prisoner(reader: _Reader) -> list[str]:
    return [
        str(save_the_prisoner(*reader.integers(3)))
        for _ in range(reader.integer())
    ]


def _absolute_permutation(reader: _Reader) -> list[str]:
    lines = []
    for _ in range(reader.integer()):
        n, k = reader.integers(2)
        permutation = absolute_permutation(n, k)
        lines.append("-1" if permutation is None else " ".join(map(str, permutation)))
    return lines


def _grid_search(reader: _Reader) -> list[str]:
    lines = []
    for _ in range(reader.integer()):
        rows, _columns = reader.integers(2)
        grid = reader.words(rows)
        pattern_rows, _pattern_columns = reader.integers(2)
        pattern = reader.words(pattern_rows)
        lines.append("YES" if grid_search(grid, pattern) else "NO")
    return lines


def _stones(reader: _Reader) -> list[str]:
    return [
        " ".join(map(str, stones(*reader.integers(3))))
        for _ in range(reader.integer())
    ]


def _cut_the_sticks(reader: _Reader) -> list[str]:
    lengths = reader.integers(reader.integer())
    return [str(count) for count in cut_the_sticks(lengths)]


def _time_conversion(reader: _Reader) -> list[str]:
    return [time_conversion(reader.word())]


def _first_job(reader: _Reader) -> list[str]:
    values = reader.integers(reader.integer())
    threshold = reader.integer()
    probability = first_job_probability(values, threshold)
    if all(value > threshold for value in values):
        return [f"{probability:.1f}"]
    return [f"{probability:.2f}"]


def _happy_ladybugs(reader: _Reader) -> list[str]:
    lines = []
    for _ in range(reader.integer()):
        reader.integer()
        lines.append("YES" if happy_ladybugs(reader.word()) else "NO")
    return lines


COMMANDS: dict[str, Callable[[_Reader], list[str]]] = {
    "absolute-permutation": _absolute_permutation,
    "bigger-is-greater": _bigger_is_greater,
    "circular-array-rotation": _circular_array_rotation,
    "cut-the-sticks": _cut_the_sticks,
    "first-job": _first_job,
    "grid-search": _grid_search,
    "happy-ladybugs": _happy_ladybugs,
    "save-the-prisoner": _save_the_prisoner,
    "stones": _stones,
    "time-conversion": _time_conversion,
}


def run(command: str, text: str) -> str:
    """Answer the puzzle ``command`` for the input ``text`` and return the output."""
    try:
        handler = COMMANDS[command]
    except KeyError:
        raise ValueError(f"unknown command: {command!r}") from None
    return "".join(line + "\n" for line in handler(_Reader(text)))


def main(argv: list[str] | None = None) -> int:
    """Read a puzzle input from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="hackpuzzles", description="Solve a puzzle read from standard input."
    )
    parser.add_argument("command", choices=sorted(COMMANDS))
    args = parser.parse_args(argv)
    try:
        output = run(args.command, sys.stdin.read())
    except (ValueError, IndexError) as exc:
        print(f"hackpuzzles: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0