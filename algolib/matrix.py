"""Matrix multiplication and exponentiation, with path counting and Fibonacci."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007

Matrix = list[list[int]]


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int | None = MOD) -> Matrix:
    """Return the product ``a @ b``, reduced modulo ``mod`` unless it is ``None``."""
    if not a or not b or len(a[0]) != len(b):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    product = []
    for row in a:
        out_row = []
        for column in columns:
            total = sum(x * y for x, y in zip(row, column))
            out_row.append(total if mod is None else total % mod)
        product.append(out_row)
    return product


def mat_pow(x: Sequence[Sequence[int]], y: int, mod: int | None = MOD) -> Matrix:
    """Return the square matrix ``x`` raised to the power ``y`` by repeated squaring."""
    size = len(x)
    if any(len(row) != size for row in x):
        raise ValueError("matrix must be square")
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    base = [list(row) for row in x]
    while y > 0:
        if y & 1:
            result = mat_mul(result, base, mod)
        y >>= 1
        if y:
            base = mat_mul(base, base, mod)
    return result


def count_paths(n: int, edges: Iterable[tuple[int, int]], k: int) -> int:
    """Count walks of exactly ``k`` edges from node 1 to node ``n``, modulo 10**9+7.

    Nodes are numbered from 1; repeated edges each count separately.
    """
    if n < 1:
        raise ValueError("graph must have at least one node")
    adj = [[0] * n for _ in range(n)]
    for x, y in edges:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"edge ({x}, {y}) is out of range")
        adj[x - 1][y - 1] += 1
    return mat_pow(adj, k)[0][n - 1]


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, exactly."""
    return mat_pow([[1, 1], [1, 0]], n, mod=None)[0][1]