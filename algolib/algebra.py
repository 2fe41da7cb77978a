"""Integer algebra helpers: fast exponentiation and greatest common divisor."""

from __future__ import annotations


def binpow(a: int, b: int, m: int | None = None) -> int:
    """Return ``a ** b`` by repeated squaring, reduced modulo ``m`` when given.

    A non-positive exponent yields 1. When ``m`` is given the base is reduced
    first and every intermediate product is kept below ``m``.
    """
    if m is not None:
        a %= m
    result = 1
    while b > 0:
        if b & 1:
            result = result * a if m is None else (result * a) % m
        a = a * a if m is None else (a * a) % m
        b >>= 1
    return result


def _truncated_remainder(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` (0 when both are 0)."""
    while b:
        a, b = b, _truncated_remainder(a, b)
    return a