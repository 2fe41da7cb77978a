"""Small sequence problems: spaced-out permutations and longest repetitions."""

from __future__ import annotations

from itertools import groupby


def beautiful_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no adjacent values differing by one.

    Even numbers come first, then odd numbers. Returns ``None`` when no such
    permutation exists.
    """
    if n == 1 or n >= 4:
        return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))
    return None


def longest_repetition(s: str) -> int:
    """Return the length of the longest run of one repeated character in ``s``."""
    if not s:
        raise ValueError("sequence must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(s))