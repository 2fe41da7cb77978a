"""Short contest problems: digit sums, card games, and grid walks."""

from __future__ import annotations

from collections.abc import Iterable


def digit_sum(n: int) -> int:
    """Return the sum of the two digits of a two-digit number."""
    return n // 10 + n % 10


def _compare(a: int, b: int) -> int:
    return (a > b) - (a < b)


def card_game_wins(a1: int, a2: int, b1: int, b2: int) -> int:
    """Count the ways the first player wins a two-round card game.

    Each player holds two cards and plays one per round; the first player wins
    a way of playing when they take strictly more rounds than the second.
    """
    outcomes = [
        _compare(a1, b1) + _compare(a2, b2),
        _compare(a1, b2) + _compare(a2, b1),
        _compare(a2, b1) + _compare(a1, b2),
        _compare(a2, b2) + _compare(a1, b1),
    ]
    return sum(outcome > 0 for outcome in outcomes)


def min_difference(a: int, b: int) -> int:
    """Return the least value of ``(c - a) + (b - c)`` over ``a <= c <= b``."""
    return b - a


def note_columns(rows: Iterable[str]) -> list[int]:
    """Return the 1-based columns of every ``#`` note, bottom row first.

    Each row is read in its first four characters.
    """
    columns = [
        column
        for row in rows
        for column, cell in enumerate(row[:4], start=1)
        if cell == "#"
    ]
    return columns[::-1]


def min_jumps(x: int, y: int, d: int) -> int:
    """Return the fewest alternating x/y moves of at most ``d`` to reach ``(x, y)``.

    Moves alternate between the x axis and the y axis, starting with x.
    """
    steps_x = (x + d - 1) // d
    steps_y = (y + d - 1) // d
    if steps_x > steps_y:
        extra = steps_x - steps_y - 1
    elif steps_y > steps_x:
        extra = steps_y - steps_x
    else:
        extra = 0
    return steps_x + steps_y + extra