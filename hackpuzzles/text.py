"""String puzzles: permutations, ciphers, reductions and clock formats."""

from __future__ import annotations

import math
import re
from collections import Counter
from string import ascii_lowercase, ascii_uppercase

_TIME_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})([AP])M")


def bigger_is_greater(word: str) -> str | None:
    """Return the next lexicographic permutation of ``word``, or None if there is none."""
    chars = list(word)
    pivot = len(chars) - 1
    while pivot > 0 and chars[pivot - 1] >= chars[pivot]:
        pivot -= 1
    if pivot <= 0:
        return None
    head = chars[pivot - 1]
    swap = next(j for j in reversed(range(pivot, len(chars))) if chars[j] > head)
    chars[pivot - 1], chars[swap] = chars[swap], chars[pivot - 1]
    chars[pivot:] = reversed(chars[pivot:])
    return "".join(chars)


def _rotate(ch: str, shift: int) -> str:
    for alphabet in (ascii_uppercase, ascii_lowercase):
        position = alphabet.find(ch)
        if position >= 0:
            return alphabet[(position + shift) % len(alphabet)]
    return ch


def caesar_cipher(text: str, shift: int) -> str:
    """Rotate every ASCII letter of ``text`` forward by ``shift``, keeping its case."""
    if shift < 0:
        raise ValueError("shift must not be negative")
    return "".join(_rotate(ch, shift) for ch in text)


def encrypt(text: str) -> str:
    """Encrypt the lowercase letters of ``text`` by reading a square-ish grid by columns.

    Each column is followed by a single space, so the result ends in a space.
    """
    letters = "".join(ch for ch in text if "a" <= ch <= "z")
    if not letters:
        return ""
    length = len(letters)
    root = math.isqrt(length)
    rows = root
    columns = root if root * root == length else root + 1
    if rows * columns < length:
        rows += 1
    lines = [letters[r * columns:(r + 1) * columns] for r in range(rows)]
    return "".join(
        "".join(line[column] for line in lines if column < len(line)) + " "
        for column in range(columns)
    )


def reduce_by_letter_counts(text: str) -> str:
    """Keep one copy of each lowercase letter that occurs an odd number of times.

    Letters keep the order of their first occurrence; the result is empty when
    every letter occurs an even number of times.
    """
    counts = Counter(text)
    kept = (ch for ch in dict.fromkeys(text) if counts[ch] % 2 == 1)
    return "".join(ch for ch in kept if "a" <= ch <= "z")


def reduce_adjacent_pairs(text: str) -> str:
    """Remove equal adjacent pairs in a single left-to-right pass.

    A character that has just been paired off is not paired again, so ``"aaa"``
    leaves one ``"a"``. Only lowercase letters are kept in the result.
    """
    kept: list[str] = []
    skip_next = False
    for current, following in zip(text, text[1:] + "\0"):
        if skip_next:
            skip_next = False
            continue
        if current == following:
            skip_next = True
            continue
        kept.append(current)
    return "".join(ch for ch in kept if "a" <= ch <= "z")


def time_conversion(text: str) -> str:
    """Convert a 12-hour ``hh:mm:ssAM``/``hh:mm:ssPM`` time to 24-hour ``hh:mm:ss``."""
    match = _TIME_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"not a 12-hour time: {text!r}")
    hours_text, minutes, seconds, half = match.groups()
    hours = int(hours_text)
    if not 1 <= hours <= 12:
        raise ValueError(f"hour out of range: {text!r}")
    if half == "A":
        if hours == 12:
            hours = 0
    elif hours != 12:
        hours += 12
    return f"{hours:02d}:{minutes}:{seconds}"


def happy_ladybugs(board: str) -> bool:
    """Tell whether every ladybug on ``board`` can end up next to one of its colour.

    ``_`` marks an empty cell. With at least one empty cell the bugs can be
    rearranged, so only a colour that appears once spoils the board; without
    one, every bug must already sit next to a bug of its colour.
    """
    if "_" in board:
        counts = Counter(ch for ch in board if ch != "_")
        return all(count > 1 for count in counts.values())
    padded = "\0" + board + "\0"
    return all(
        current in (before, after)
        for before, current, after in zip(padded, board, padded[2:])
    )