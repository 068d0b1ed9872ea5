"""Puzzles on whole numbers: counting, divisibility, jumps and pages."""

from __future__ import annotations

import math
from collections.abc import Sequence

_INITIAL_ENERGY = 100
_KANGAROO_JUMPS = 10000
_KANGAROO_START_LIMIT = 10000
_DAY_FINE = 15
_MONTH_FINE = 500
_YEAR_FINE = 10000


def save_the_prisoner(n: int, m: int, s: int) -> int:
    """Return the chair of the prisoner who gets the last of ``m`` sweets.

    ``n`` prisoners sit in a circle of chairs numbered from 1 and the sweets
    are handed out one each, starting at chair ``s``.
    """
    if n < 1:
        raise ValueError("there must be at least one prisoner")
    last = (s + m - 1) % n
    return last or n


def absolute_permutation(n: int, k: int) -> list[int] | None:
    """Return the smallest permutation of 1..n with ``|p[i] - i| == k`` everywhere.

    Returns None when no such permutation exists.
    """
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    if k == 0:
        return list(range(1, n + 1))
    block = 2 * k
    if n % block:
        return None
    result: list[int] = []
    for start in range(0, n, block):
        result.extend(range(start + k + 1, start + block + 1))
        result.extend(range(start + 1, start + k + 1))
    return result


def chocolate_feast(n: int, c: int, m: int) -> int:
    """Return how many chocolates ``n`` money buys at price ``c`` with ``m`` wrappers per free bar."""
    if c < 1:
        raise ValueError("price must be positive")
    if m < 2:
        raise ValueError("wrappers per free bar must be at least 2")
    wrappers = eaten = n // c
    while wrappers >= m:
        free, left = divmod(wrappers, m)
        eaten += free
        wrappers = free + left
    return eaten


def find_digits(n: int) -> int:
    """Count the digits of ``n``, with repeats, that divide ``n`` evenly; zeros never count."""
    value = abs(n)
    if value == 0:
        return 0
    return sum(1 for ch in str(value) if ch != "0" and value % int(ch) == 0)


def get_total_x(a: Sequence[int], b: Sequence[int]) -> int:
    """Count the integers that are multiples of every item of ``a`` and divide every item of ``b``."""
    upper = max(b, default=0)
    return sum(
        1
        for candidate in range(1, upper + 1)
        if all(candidate % factor == 0 for factor in a)
        and all(value % candidate == 0 for value in b)
    )


def grading_students(grade: int) -> int:
    """Round ``grade`` up to the next multiple of 5 when that is less than 3 away.

    Grades below 38 are failing and are never rounded.
    """
    if grade < 38:
        return grade
    rounded = (grade // 5 + 1) * 5
    return rounded if rounded - grade < 3 else grade


def kangaroo(x1: int, v1: int, x2: int, v2: int) -> bool:
    """Tell whether the kangaroo behind catches up with the one ahead on the same jump.

    Only the first 10000 jumps are considered, and only when the trailing
    kangaroo starts before position 10000.
    """
    if not (x1 < x2 and v1 > v2):
        return False
    jumps, remainder = divmod(x2 - x1, v1 - v2)
    return remainder == 0 and 1 <= jumps <= _KANGAROO_JUMPS and x1 < _KANGAROO_START_LIMIT


def library_fine(d1: int, d2: int, m1: int, m2: int, y1: int, y2: int) -> int:
    """Return the fine for a book returned on d1/m1/y1 that was due on d2/m2/y2."""
    if d1 > d2 and m1 == m2 and y1 == y2:
        return (d1 - d2) * _DAY_FINE
    if m1 > m2 and y1 == y2:
        return (m1 - m2) * _MONTH_FINE
    if y1 > y2:
        return _YEAR_FINE
    return 0


def stones(n: int, a: int, b: int) -> list[int]:
    """Return every possible value of the last of ``n`` stones, in ascending order.

    Consecutive stones differ by either ``a`` or ``b`` and the first stone is 0.
    """
    if n < 1:
        raise ValueError("there must be at least one stone")
    if a == b:
        return [a * (n - 1)]
    low, high = min(a, b), max(a, b)
    return [high * i + low * (n - 1 - i) for i in range(n)]


def separate_digits(num: int) -> list[int]:
    """Return the decimal digits of ``num`` from the last one to the first.

    A number of at most 9, negative ones included, comes back whole.
    """
    digits: list[int] = []
    while num > 9:
        num, digit = divmod(num, 10)
        digits.append(digit)
    digits.append(num)
    return digits


def squares(a: int, b: int) -> int:
    """Count the perfect squares between ``a`` and ``b`` inclusive."""
    if a < 0 or b < 0:
        raise ValueError("bounds must not be negative")
    lowest_root = math.isqrt(a - 1) + 1 if a > 0 else 0
    return math.isqrt(b) - lowest_root + 1


def jumping_on_clouds(clouds: Sequence[int]) -> int:
    """Return the fewest jumps of one or two clouds from the first cloud to the last.

    A cloud marked 1 is a thundercloud and is never landed on by a double jump.
    """
    if not clouds:
        raise ValueError("there must be at least one cloud")
    last = len(clouds) - 1
    position = jumps = 0
    while position < last:
        if position + 2 > last or clouds[position + 2] == 0:
            position += 2
        else:
            position += 1
        jumps += 1
    return jumps


def jumping_on_clouds_revisited(clouds: Sequence[int], k: int) -> int:
    """Return the energy left after jumping ``k`` clouds at a time around the circle.

    Energy starts at 100; every jump costs 1, and landing on a thundercloud
    costs 2 more. The game ends on returning to the first cloud.
    """
    if not clouds:
        raise ValueError("there must be at least one cloud")
    size = len(clouds)
    energy = _INITIAL_ENERGY
    position = 0
    while True:
        position = (position + k) % size
        energy -= 1 + 2 * (clouds[position] == 1)
        if position == 0:
            return energy


def workbook(chapters: Sequence[int], k: int) -> int:
    """Count the problems whose number equals the page they are printed on.

    Each chapter starts on a new page, pages hold at most ``k`` problems and
    problems are numbered from 1 within each chapter.
    """
    if k < 1:
        raise ValueError("a page must hold at least one problem")
    if any(problems < 1 for problems in chapters):
        raise ValueError("every chapter must have at least one problem")
    page = 1
    special = 0
    for problems in chapters:
        for first in range(1, problems + 1, k):
            last = min(first + k - 1, problems)
            if first <= page <= last:
                special += 1
            page += 1
    return special