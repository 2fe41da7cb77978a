"""Graph traversals: breadth- and depth-first search and what is built on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

Adjacency = Sequence[Sequence[int]]


class CycleError(ValueError):
    """Raised when an ordering is asked of a graph that contains a cycle."""


@dataclass(frozen=True)
class BfsResult:
    """Distances and parents found by a breadth-first search from ``source``.

    Unreached nodes have ``None`` as both distance and parent; the source has
    distance 0 and parent ``None``.
    """

    source: int
    distances: list[int | None]
    parents: list[int | None]

    def reached(self, node: int) -> bool:
        """Return whether ``node`` was reached from the source."""
        return self.distances[node] is not None

    def path_to(self, target: int) -> list[int] | None:
        """Return the nodes from the source to ``target``, or ``None`` if unreachable."""
        if not 0 <= target < len(self.distances):
            raise IndexError(f"node {target} is out of range")
        if not self.reached(target):
            return None
        path = []
        node: int | None = target
        while node is not None:
            path.append(node)
            node = self.parents[node]
        path.reverse()
        return path


def _check_node(node: int, n: int) -> None:
    if not 0 <= node < n:
        raise IndexError(f"node {node} is out of range")


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({a}, {b}) is out of range")
        adj[a].append(b)
        adj[b].append(a)
    return adj


def bfs(adj: Adjacency, source: int) -> BfsResult:
    """Run a breadth-first search over ``adj`` from ``source``."""
    n = len(adj)
    _check_node(source, n)
    distances: list[int | None] = [None] * n
    parents: list[int | None] = [None] * n
    distances[source] = 0
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for neighbour in adj[current]:
            if distances[neighbour] is None:
                distances[neighbour] = distances[current] + 1
                parents[neighbour] = current
                queue.append(neighbour)
    return BfsResult(source, distances, parents)


def shortest_distances(adj: Adjacency, source: int) -> list[int | None]:
    """Return the number of edges on a shortest path from ``source`` to each node.

    Unreachable nodes get ``None``.
    """
    n = len(adj)
    _check_node(source, n)
    distances: list[int | None] = [None] * n
    distances[source] = 0
    queue = deque([source])
    while queue:
        current = queue.popleft()
        step = distances[current] + 1
        for neighbour in adj[current]:
            known = distances[neighbour]
            if known is None or known > step:
                distances[neighbour] = step
                queue.append(neighbour)
    return distances


def has_cycle_bfs(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return whether the undirected graph on ``n`` nodes has a cycle, using BFS."""
    adj = _undirected(n, edges)
    visited = [False] * n
    parents: list[int | None] = [None] * n
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in adj[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    parents[neighbour] = current
                    queue.append(neighbour)
                elif parents[current] != neighbour:
                    return True
    return False


def has_cycle_dfs(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return whether the undirected graph on ``n`` nodes has a cycle, using DFS."""
    adj = _undirected(n, edges)
    visited = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack: list[tuple[int, int | None, Iterator[int]]] = [(start, None, iter(adj[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adj[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def kahn_toposort(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order ``n`` nodes so each comes after everything it depends on.

    Each edge ``(a, b)`` means ``a`` depends on ``b``. Raises ``CycleError``
    when the dependencies are circular.
    """
    dependents: list[list[int]] = [[] for _ in range(n)]
    pending = [0] * n
    for a, b in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({a}, {b}) is out of range")
        dependents[b].append(a)
        pending[a] += 1
    queue = deque(node for node in range(n) if pending[node] == 0)
    order = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for dependent in dependents[current]:
            pending[dependent] -= 1
            if pending[dependent] == 0:
                queue.append(dependent)
    if len(order) != n:
        raise CycleError("the dependency graph has a cycle")
    return order


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return whether the undirected graph on ``n`` nodes can be two-coloured."""
    adj = _undirected(n, edges)
    colour: list[int | None] = [None] * n
    for start in range(n):
        if colour[start] is not None:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in adj[current]:
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[current]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[current]:
                    return False
    return True


def _preorder(adj: Adjacency, start: int, visited: list[bool]) -> Iterator[int]:
    visited[start] = True
    yield start
    stack = [iter(adj[start])]
    while stack:
        for neighbour in stack[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                yield neighbour
                stack.append(iter(adj[neighbour]))
                break
        else:
            stack.pop()


def _postorder(adj: Adjacency, start: int, visited: list[bool]) -> Iterator[int]:
    visited[start] = True
    stack = [(start, iter(adj[start]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append((neighbour, iter(adj[neighbour])))
                break
        else:
            stack.pop()
            yield node


def dfs_reachable(adj: Adjacency, source: int) -> list[int]:
    """Return the nodes reachable from ``source`` in depth-first visiting order."""
    _check_node(source, len(adj))
    return list(_preorder(adj, source, [False] * len(adj)))


def connected_components(adj: Adjacency) -> list[list[int]]:
    """Split the nodes of an undirected graph into its connected components.

    Components come in order of their lowest node; each lists its nodes in
    depth-first visiting order.
    """
    visited = [False] * len(adj)
    return [
        list(_preorder(adj, start, visited))
        for start in range(len(adj))
        if not visited[start]
    ]


def dfs_toposort(adj: Adjacency) -> list[int]:
    """Return a topological order of an acyclic directed graph.

    Every edge ``u -> v`` puts ``u`` before ``v``. The graph is assumed to
    be acyclic; the result is meaningless otherwise.
    """
    visited = [False] * len(adj)
    finished: list[int] = []
    for start in range(len(adj)):
        if not visited[start]:
            finished.extend(_postorder(adj, start, visited))
    finished.reverse()
    return finished