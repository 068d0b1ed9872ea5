"""Puzzles over lists of integers: rotations, counts, windows and ranges."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations

COUNTING_RANGE = 100


def rotate_queries(values: Sequence[int], k: int, queries: Sequence[int]) -> list[int]:
    """Rotate ``values`` right by ``k`` places and return the items at ``queries``."""
    if not values:
        if queries:
            raise IndexError("cannot query an empty sequence")
        return []
    shift = k % len(values)
    rotated = list(values[len(values) - shift:]) + list(values[:len(values) - shift])
    return [rotated[index] for index in queries]


def counting_sort_counts(values: Sequence[int]) -> list[int]:
    """Count the occurrences of each value from 0 to 99; other values are ignored."""
    counts = Counter(values)
    return [counts[value] for value in range(COUNTING_RANGE)]


def birthday_cake_candles(candles: Sequence[int]) -> int:
    """Return how many candles share the greatest height."""
    if not candles:
        return 0
    tallest = max(candles)
    return sum(1 for height in candles if height == tallest)


def divisible_sum_pairs(values: Sequence[int], k: int) -> int:
    """Count the index pairs ``i < j`` whose values sum to a multiple of ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    return sum(1 for first, second in combinations(values, 2) if (first + second) % k == 0)


def breaking_records(scores: Sequence[int]) -> tuple[int, int]:
    """Return how often the best and the worst score so far were broken."""
    if not scores:
        return 0, 0
    best = worst = scores[0]
    best_breaks = worst_breaks = 0
    for score in scores[1:]:
        if score > best:
            best = score
            best_breaks += 1
        elif score < worst:
            worst = score
            worst_breaks += 1
    return best_breaks, worst_breaks


def minimum_distances(values: Sequence[int]) -> int:
    """Return the smallest index distance between two equal values, or -1 if none repeat."""
    last_seen: dict[int, int] = {}
    best: int | None = None
    for index, value in enumerate(values):
        if value in last_seen:
            distance = index - last_seen[value]
            if best is None or distance < best:
                best = distance
        last_seen[value] = index
    return -1 if best is None else best


def cut_the_sticks(lengths: Sequence[int]) -> list[int]:
    """Return the number of sticks cut in each round until none remain.

    Each round every remaining stick is shortened by the length of the
    shortest one, and sticks that reach zero are discarded.
    """
    if any(length < 0 for length in lengths):
        raise ValueError("stick lengths must not be negative")
    remaining = [length for length in lengths if length]
    rounds: list[int] = []
    while remaining:
        rounds.append(len(remaining))
        shortest = min(remaining)
        remaining = [length - shortest for length in remaining if length > shortest]
    return rounds


def birthday(squares: Sequence[int], day: int, month: int) -> int:
    """Count contiguous runs of ``month`` squares whose values sum to ``day``."""
    if month < 1:
        raise ValueError("month must be positive")
    return sum(
        1
        for start in range(len(squares) - month + 1)
        if sum(squares[start:start + month]) == day
    )


def service_lane(widths: Sequence[int], start: int, end: int) -> int:
    """Return the narrowest width between indices ``start`` and ``end`` inclusive."""
    if not 0 <= start <= end < len(widths):
        raise IndexError(f"invalid segment {start}..{end} for {len(widths)} widths")
    return min(widths[start:end + 1])


def flatland_space_stations(n: int, stations: Sequence[int]) -> int:
    """Return the greatest distance any of ``n`` cities has to its nearest station."""
    if n < 0:
        raise ValueError("number of cities must not be negative")
    if n and not stations:
        raise ValueError("at least one space station is required")
    return max(
        (min(abs(city - station) for station in stations) for city in range(n)),
        default=0,
    )


def first_job_probability(values: Sequence[int], threshold: int) -> float:
    """Return the fraction of ``values`` that are strictly greater than ``threshold``."""
    if not values:
        raise ValueError("values must not be empty")
    above = sum(1 for value in values if value > threshold)
    return above / len(values)


def count_apples_and_oranges(
    s: int,
    t: int,
    a: int,
    b: int,
    apples: Sequence[int],
    oranges: Sequence[int],
) -> tuple[int, int]:
    """Count the apples and oranges that land on the house between ``s`` and ``t``.

    Apples fall from the tree at ``a`` and oranges from the tree at ``b``;
    each distance is relative to its tree.
    """
    apple_count = sum(1 for distance in apples if s <= a + distance <= t)
    orange_count = sum(1 for distance in oranges if s <= b + distance <= t)
    return apple_count, orange_count