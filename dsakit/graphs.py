"""Undirected graphs: adjacency matrices, depth-first and breadth-first order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def adjacency_matrix(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the symmetric 0/1 adjacency matrix of an undirected graph."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for source, destination in edges:
        _check_vertex(source, vertex_count)
        _check_vertex(destination, vertex_count)
        matrix[source][destination] = 1
        matrix[destination][source] = 1
    return matrix


def dfs_order(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the depth-first visiting order over every component.

    Components are started from the lowest unvisited vertex and neighbours
    are explored in increasing order. Self-loops are ignored.
    """
    matrix = adjacency_matrix(vertex_count, edges)
    visited = [False] * vertex_count
    order: list[int] = []
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        order.append(root)
        pending = [(root, iter(range(vertex_count)))]
        while pending:
            vertex, candidates = pending[-1]
            for candidate in candidates:
                if (
                    candidate != vertex
                    and not visited[candidate]
                    and matrix[vertex][candidate]
                    and matrix[candidate][vertex]
                ):
                    visited[candidate] = True
                    order.append(candidate)
                    pending.append((candidate, iter(range(vertex_count))))
                    break
            else:
                pending.pop()
    return order


class Graph:
    """An undirected graph stored as adjacency lists.

    Each new edge is placed at the front of both endpoints' lists, so
    neighbours are listed most recent first.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacent: list[deque[int]] = [deque() for _ in range(vertex_count)]

    def add_edge(self, source: int, destination: int) -> None:
        """Connect ``source`` and ``destination``."""
        _check_vertex(source, self.vertex_count)
        _check_vertex(destination, self.vertex_count)
        self._adjacent[source].appendleft(destination)
        self._adjacent[destination].appendleft(source)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in adjacency-list order."""
        _check_vertex(vertex, self.vertex_count)
        return list(self._adjacent[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the breadth-first visiting order from ``start``."""
        _check_vertex(start, self.vertex_count)
        visited = [False] * self.vertex_count
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for adjacent in self._adjacent[current]:
                if not visited[adjacent]:
                    visited[adjacent] = True
                    queue.append(adjacent)
        return order