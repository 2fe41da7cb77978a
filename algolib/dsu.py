"""Disjoint-set forest with path compression and two union strategies."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the nodes ``0 .. n-1``, each starting on its own."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of nodes must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._parent):
            raise IndexError(f"node {v} is out of range")

    def find(self, v: int) -> int:
        """Return the representative of the set holding ``v``, compressing the path."""
        self._check(v)
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union_by_rank(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``, hanging the lower-ranked root below.

        On equal ranks the root of ``u`` stays on top. Returns whether two
        different sets were joined.
        """
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] > self._rank[root_v]:
            self._parent[root_v] = root_u
        elif self._rank[root_v] > self._rank[root_u]:
            self._parent[root_u] = root_v
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True

    def union_by_size(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``, hanging the smaller set below.

        On equal sizes the root of ``u`` stays on top. Returns whether two
        different sets were joined.
        """
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_v] > self._size[root_u]:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        else:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]
        return True