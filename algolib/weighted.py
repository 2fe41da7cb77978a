"""Weighted graphs: single-source shortest paths and minimum spanning trees."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from algolib.dsu import DisjointSet

WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


def dijkstra(graph: WeightedAdjacency, source: int) -> list[int | None]:
    """Return the least total weight from ``source`` to every node.

    ``graph[u]`` lists ``(v, weight)`` pairs for the edges leaving ``u``;
    weights must not be negative. Unreachable nodes get ``None``.
    """
    n = len(graph)
    if not 0 <= source < n:
        raise IndexError(f"node {source} is out of range")
    dist: list[int | None] = [None] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        for v, weight in graph[u]:
            candidate = d + weight
            known = dist[v]
            if known is None or candidate < known:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def prim(graph: WeightedAdjacency) -> int:
    """Return the weight of a minimum spanning tree grown from node 0.

    ``graph[u]`` lists ``(v, weight)`` pairs and should hold each undirected
    edge in both directions. Only the component of node 0 is spanned; an
    empty graph weighs 0.
    """
    if not graph:
        return 0
    visited = [False] * len(graph)
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight in graph[node]:
            if not visited[neighbour]:
                heapq.heappush(heap, (edge_weight, neighbour))
    return total


def kruskal(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the weight of a minimum spanning forest over ``n`` nodes.

    Each edge is given as ``(weight, u, v)``.
    """
    forest = DisjointSet(n)
    total = 0
    for weight, u, v in sorted(edges):
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range")
        if forest.union_by_size(u, v):
            total += weight
    return total