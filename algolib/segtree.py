"""Segment trees for point updates with range queries, and range adds with point reads."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable
from typing import Any


class SegmentTree:
    """Range queries over an associative ``combine`` with point updates.

    Positions are numbered from 0 and query bounds are inclusive.
    """

    def __init__(self, values: Iterable[Any], combine: Callable[[Any, Any], Any], identity: Any) -> None:
        items = list(values)
        self._n = len(items)
        self._combine = combine
        self._identity = identity
        self._tree = [identity] * self._n + items
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = combine(self._tree[2 * i], self._tree[2 * i + 1])

    def __len__(self) -> int:
        return self._n

    def _check(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"position {index} is out of range")

    def update(self, index: int, value: Any) -> None:
        """Set the value at ``index``."""
        self._check(index)
        i = index + self._n
        self._tree[i] = value
        i >>= 1
        while i:
            self._tree[i] = self._combine(self._tree[2 * i], self._tree[2 * i + 1])
            i >>= 1

    def query(self, left: int, right: int) -> Any:
        """Combine the values from ``left`` to ``right`` inclusive.

        An empty range (``left > right``) gives the identity.
        """
        if left > right:
            return self._identity
        self._check(left)
        self._check(right)
        lo, hi = left + self._n, right + self._n + 1
        left_part, right_part = self._identity, self._identity
        while lo < hi:
            if lo & 1:
                left_part = self._combine(left_part, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right_part = self._combine(self._tree[hi], right_part)
            lo >>= 1
            hi >>= 1
        return self._combine(left_part, right_part)


def min_tree(values: Iterable[Any]) -> SegmentTree:
    """Return a segment tree answering range-minimum queries."""
    return SegmentTree(values, min, math.inf)


def sum_tree(values: Iterable[Any]) -> SegmentTree:
    """Return a segment tree answering range-sum queries."""
    return SegmentTree(values, operator.add, 0)


class RangeAddTree:
    """Adds to whole ranges and reads single values, over a Fenwick tree of differences.

    Positions are numbered from 0 and range bounds are inclusive.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        self._tree = [0] * (self._n + 1)
        previous = 0
        for position, value in enumerate(items, start=1):
            self._add(position, value - previous)
            previous = value

    def __len__(self) -> int:
        return self._n

    def _add(self, position: int, delta: int) -> None:
        while position <= self._n:
            self._tree[position] += delta
            position += position & -position

    def _check(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"position {index} is out of range")

    def add_range(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every value from ``left`` to ``right`` inclusive."""
        self._check(left)
        self._check(right)
        if left > right:
            raise ValueError("left bound is past right bound")
        self._add(left + 1, delta)
        self._add(right + 2, -delta)

    def value_at(self, index: int) -> int:
        """Return the current value at ``index``."""
        self._check(index)
        total = 0
        position = index + 1
        while position > 0:
            total += self._tree[position]
            position -= position & -position
        return total