"""Graph algorithms: breadth-first search, bipartite check, shortest paths."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from heapq import heappop, heappush

INFINITE = 10000000
"""Distance that a WeightedGraph treats as "no path"."""


def _check_vertex(vertex: int, low: int, high: int) -> None:
    if not low <= vertex <= high:
        raise ValueError(f"vertex {vertex} is outside the range {low}..{high}")


def bfs(edges: Iterable[tuple[int, int]], vertex_count: int, start: int) -> list[int]:
    """Breadth-first visiting order from *start* over directed *edges*.

    Vertices are numbered 1..vertex_count; vertex 0 may be used as a start or
    as the source of an edge but is never reached as a neighbour. Neighbours
    are visited in ascending order.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    successors: dict[int, set[int]] = {v: set() for v in range(vertex_count + 1)}
    for x, y in edges:
        _check_vertex(x, 0, vertex_count)
        _check_vertex(y, 0, vertex_count)
        successors[x].add(y)
    _check_vertex(start, 0, vertex_count)

    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in sorted(successors[vertex]):
            if neighbour >= 1 and neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def is_bipartite(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """True if the undirected graph on vertices 1..vertex_count can be two-coloured."""
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    neighbours: dict[int, list[int]] = {v: [] for v in range(1, vertex_count + 1)}
    for x, y in edges:
        _check_vertex(x, 1, vertex_count)
        _check_vertex(y, 1, vertex_count)
        neighbours[x].append(y)
        neighbours[y].append(x)

    colour: dict[int, bool] = {}
    for root in range(1, vertex_count + 1):
        if root in colour:
            continue
        colour[root] = False
        pending = [root]
        while pending:
            vertex = pending.pop()
            for other in neighbours[vertex]:
                if other not in colour:
                    colour[other] = not colour[vertex]
                    pending.append(other)
                elif colour[other] == colour[vertex]:
                    return False
    return True


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, int]]], source: int, destination: int
) -> tuple[list[float], list[int] | None]:
    """Shortest distances from *source* and the path to *destination*.

    *adjacency[v]* lists ``(neighbour, weight)`` pairs with zero-based vertices.
    Returns the distance to every vertex (``math.inf`` where unreachable) and
    the vertices on a shortest path from *source* to *destination*, or None if
    *destination* cannot be reached.
    """
    graph = [list(edges) for edges in adjacency]
    count = len(graph)
    _check_vertex(source, 0, count - 1)
    _check_vertex(destination, 0, count - 1)
    for edges in graph:
        for neighbour, _ in edges:
            _check_vertex(neighbour, 0, count - 1)

    distance: list[float] = [math.inf] * count
    previous: list[int | None] = [None] * count
    done = [False] * count
    distance[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        _, vertex = heappop(heap)
        if done[vertex]:
            continue
        done[vertex] = True
        for neighbour, weight in graph[vertex]:
            candidate = distance[vertex] + weight
            if distance[neighbour] > candidate:
                distance[neighbour] = candidate
                previous[neighbour] = vertex
                heappush(heap, (candidate, neighbour))

    if math.isinf(distance[destination]):
        return distance, None
    path = [destination]
    while path[-1] != source:
        step = previous[path[-1]]
        if step is None or len(path) > count:
            return distance, None
        path.append(step)
    path.reverse()
    return distance, path


def floyd_warshall(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[list[int | None]]:
    """All-pairs shortest distances over directed, zero-based ``(u, v, cost)`` edges.

    A later edge between the same pair replaces an earlier one. Unreachable
    pairs are None.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    dist: list[list[float]] = [
        [0 if i == j else math.inf for j in range(vertex_count)] for i in range(vertex_count)
    ]
    for u, v, cost in edges:
        _check_vertex(u, 0, vertex_count - 1)
        _check_vertex(v, 0, vertex_count - 1)
        dist[u][v] = cost
    for k in range(vertex_count):
        row_k = dist[k]
        for row in dist:
            via = row[k]
            for j in range(vertex_count):
                if via + row_k[j] < row[j]:
                    row[j] = via + row_k[j]
    return [[None if math.isinf(d) else int(d) for d in row] for row in dist]


class WeightedGraph:
    """A directed weighted graph over named vertices; weight 0 means no edge."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names: list[str] = []
        self._index: dict[str, int] = {}
        for name in names:
            if name in self._index:
                raise ValueError(f"vertex name {name!r} is already used")
            self._index[name] = len(self.names)
            self.names.append(name)
        size = len(self.names)
        self._weights = [[0] * size for _ in range(size)]

    def add_edge(self, start: str, end: str, weight: int) -> None:
        """Set the weight of the edge from *start* to *end*."""
        try:
            i = self._index[start]
            j = self._index[end]
        except KeyError as exc:
            raise KeyError(f"unknown vertex name {exc.args[0]!r}") from None
        self._weights[i][j] = weight

    def adjacency_matrix(self) -> list[list[int]]:
        """A copy of the edge weights, row by start vertex."""
        return [list(row) for row in self._weights]

    def shortest_paths(self) -> list[list[int]]:
        """Shortest path lengths between every pair; 0 where there is no path.

        The diagonal holds the length of the shortest cycle through a vertex.
        """
        size = len(self.names)
        dist = [[w if w != 0 else INFINITE for w in row] for row in self._weights]
        for k in range(size):
            for i in range(size):
                for j in range(size):
                    through = dist[i][k] + dist[k][j]
                    if dist[i][j] > through:
                        if dist[i][k] == INFINITE or dist[k][j] == INFINITE:
                            dist[i][j] = INFINITE
                        else:
                            dist[i][j] = through
        return [[0 if d == INFINITE else d for d in row] for row in dist]

    def render(self, matrix: Sequence[Sequence[int]]) -> str:
        """Tab-separated table of *matrix* labelled with the vertex names."""
        header = "".join(f"\t{name}" for name in self.names)
        rows = "".join(
            f"\n {name}" + "".join(f"\t{value}" for value in row) + "\n"
            for name, row in zip(self.names, matrix)
        )
        return header + rows

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.names!r})"