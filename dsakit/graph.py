"""Graph representations and breadth-first traversal."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Sequence, Tuple


def bfs(adjacency: Sequence[Iterable[int]]) -> List[int]:
    """Vertices reachable from vertex 0 in breadth-first order.

    ``adjacency[u]`` lists the neighbours of ``u``; vertices are numbered
    from 0. An empty graph gives an empty list.
    """
    count = len(adjacency)
    if count == 0:
        return []
    visited = [False] * count
    visited[0] = True
    order = [0]
    pending = deque([0])
    while pending:
        vertex = pending.popleft()
        for neighbour in adjacency[vertex]:
            if not 0 <= neighbour < count:
                raise ValueError(f"vertex {neighbour} is outside the graph")
            if not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                pending.append(neighbour)
    return order


def _check_edges(vertex_count: int, edges: Iterable[Tuple[int, int]], lowest: int):
    for u, v in edges:
        for vertex in (u, v):
            if not lowest <= vertex <= vertex_count:
                raise ValueError(
                    f"vertex {vertex} is outside {lowest}..{vertex_count}"
                )
        yield u, v


def adjacency_matrix(vertex_count: int, edges: Iterable[Tuple[int, int]]) -> List[List[int]]:
    """Undirected adjacency matrix of vertices 1..vertex_count.

    Row and column ``i`` of the result stand for vertex ``i + 1``.
    """
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v in _check_edges(vertex_count, edges, 1):
        matrix[u - 1][v - 1] = 1
        matrix[v - 1][u - 1] = 1
    return matrix


def adjacency_list(vertex_count: int, edges: Iterable[Tuple[int, int]]) -> List[List[int]]:
    """Undirected adjacency lists indexed 0..vertex_count, neighbours in edge order."""
    lists: List[List[int]] = [[] for _ in range(vertex_count + 1)]
    for u, v in _check_edges(vertex_count, edges, 0):
        lists[u].append(v)
        lists[v].append(u)
    return lists


class Graph:
    """A graph kept as a map from vertex to its neighbour list."""

    def __init__(self):
        self.adjacency: Dict[int, List[int]] = {}

    def add_edge(self, u: int, v: int, directed: bool = False) -> None:
        """Add ``u -> v``; an undirected edge also adds ``v -> u``."""
        self.adjacency.setdefault(u, []).append(v)
        if not directed:
            self.adjacency.setdefault(v, []).append(u)

    def lines(self) -> List[str]:
        """One ``"u -> a b ..."`` line per vertex with neighbours, by ascending vertex."""
        return [
            f"{vertex} -> {' '.join(map(str, self.adjacency[vertex]))}"
            for vertex in sorted(self.adjacency)
        ]