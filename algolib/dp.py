"""Dynamic programming: frog jumps and the 0/1 knapsack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def frog_min_cost(heights: Sequence[int], max_jump: int) -> int:
    """Return the least total cost for a frog to go from the first stone to the last.

    The frog jumps forward at most ``max_jump`` stones at a time; a jump costs
    the absolute difference of the two stones' heights.
    """
    if not heights:
        raise ValueError("there must be at least one stone")
    if len(heights) > 1 and max_jump < 1:
        raise ValueError("max_jump must be at least 1")
    costs = [0]
    for current in range(1, len(heights)):
        costs.append(
            min(
                costs[prev] + abs(heights[current] - heights[prev])
                for prev in range(max(0, current - max_jump), current)
            )
        )
    return costs[-1]


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Return the best total value of ``(weight, value)`` items fitting in ``capacity``.

    Each item may be taken at most once.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError("item weights must not be negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]