"""Number puzzles: repunits, factorial zeros, windows, pairs and match clocks."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations

GAME_LENGTH = 48 * 60


def ones_multiple_length(n: int) -> int:
    """Return the digit count of the smallest number made of ones divisible by ``n``."""
    if n < 1 or n % 2 == 0 or n % 5 == 0:
        raise ValueError(f"no number made of ones is divisible by {n}")
    remainder = 1 % n
    length = 1
    while remainder:
        remainder = (remainder * 10 + 1) % n
        length += 1
    return length


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def outfit_combinations(items: Iterable[tuple[str, str]]) -> int:
    """Count non-empty outfits wearing at most one item of each category.

    ``items`` holds ``(name, category)`` pairs.
    """
    per_category = Counter(category for _, category in items)
    return math.prod(count + 1 for count in per_category.values()) - 1


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError(f"window of {k} does not fit {len(values)} values")
    window = sum(values[:k])
    best = window
    for leaving, entering in zip(values, values[k:]):
        window += entering - leaving
        best = max(best, window)
    return best


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` by repeated squaring."""
    if exponent < 1:
        raise ValueError("exponent must be positive")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def count_pairs_with_sum(values: Sequence[int], target: int) -> int:
    """Count unordered pairs of distinct positions whose values add up to ``target``."""
    return sum(1 for a, b in combinations(values, 2) if a + b == target)


def format_clock(seconds: int) -> str:
    """Format a number of seconds as ``MM:SS``."""
    minutes, rest = divmod(seconds, 60)
    return f"{minutes:02d}:{rest:02d}"


def _parse_clock(clock: str) -> int:
    minutes, sep, seconds = clock.partition(":")
    if not sep or not minutes.isdigit() or not seconds.isdigit():
        raise ValueError(f"bad clock {clock!r}")
    return int(minutes) * 60 + int(seconds)


def _leader(score: dict[int, int]) -> int | None:
    if score[1] > score[2]:
        return 1
    if score[2] > score[1]:
        return 2
    return None


def lead_times(goals: Iterable[tuple[int, str]]) -> tuple[int, int]:
    """Return how many seconds each team led a 48-minute game.

    ``goals`` holds ``(team, "MM:SS")`` pairs in time order, team being 1 or 2.
    """
    score = {1: 0, 2: 0}
    lead = {1: 0, 2: 0}
    previous = 0
    for team, clock in goals:
        now = _parse_clock(clock)
        leader = _leader(score)
        if leader:
            lead[leader] += now - previous
        if team in score:
            score[team] += 1
        previous = now
    if previous < GAME_LENGTH:
        leader = _leader(score)
        if leader:
            lead[leader] += GAME_LENGTH - previous
    return lead[1], lead[2]