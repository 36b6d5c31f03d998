"""Graph algorithms: depth-first traversal, shortest paths and minimum spanning trees."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from itertools import count
from operator import itemgetter
from typing import Any, Hashable, Iterable, Mapping, Sequence


class Graph:
    """Directed graph stored as adjacency lists."""

    def __init__(self) -> None:
        self._adjacency: defaultdict[Hashable, list[Hashable]] = defaultdict(list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._adjacency)!r})"

    def add_edge(self, source: Hashable, target: Hashable) -> None:
        """Add a directed edge; neighbours are visited in the order they were added."""
        self._adjacency[source].append(target)

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        visited = {start}
        order = [start]
        stack = [iter(self._adjacency.get(start, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        return order


def dijkstra(
    adjacency: Mapping[Hashable, Iterable[tuple[Hashable, float]]],
    source: Hashable,
) -> dict[Hashable, float]:
    """Return the shortest distance from ``source`` to every reachable vertex.

    ``adjacency`` maps a vertex to ``(neighbour, weight)`` pairs.
    """
    distances: dict[Hashable, float] = {source: 0}
    settled: set[Hashable] = set()
    tie = count()
    heap: list[tuple[float, int, Hashable]] = [(0, next(tie), source)]
    while heap:
        distance, _, vertex = heapq.heappop(heap)
        if vertex in settled:
            continue
        settled.add(vertex)
        for neighbour, weight in adjacency.get(vertex, ()):
            candidate = distance + weight
            if candidate < distances.get(neighbour, math.inf):
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, next(tie), neighbour))
    return distances


def floyd_warshall(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> list[list[float]]:
    """Return all-pairs shortest distances for vertices numbered 1..vertex_count.

    Edges are directed ``(source, target, weight)`` triples; a later edge between
    the same pair replaces an earlier one. Row and column ``i - 1`` of the result
    belong to vertex ``i``; unreachable pairs hold ``math.inf``.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    dist = [
        [0 if row == col else math.inf for col in range(vertex_count)]
        for row in range(vertex_count)
    ]
    for source, target, weight in edges:
        for vertex in (source, target):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
        dist[source - 1][target - 1] = weight
    for k in range(vertex_count):
        via = dist[k]
        for row in dist:
            through = row[k]
            row[:] = [min(direct, through + step) for direct, step in zip(row, via)]
    return dist


def format_distance_matrix(matrix: Iterable[Iterable[float]]) -> str:
    """Render a distance matrix, one row per line, with ``I`` for unreachable pairs."""
    return "".join(
        "".join(f"{'I' if math.isinf(cell) else cell} " for cell in row) + "\n"
        for row in matrix
    )


def prim_mst(matrix: Sequence[Sequence[Any]]) -> list[tuple[int, int, Any]]:
    """Return the edges of a minimum spanning tree grown from vertex 0.

    ``matrix`` is a square adjacency matrix in which a zero means no edge.
    Edges come back as ``(from, to, weight)`` in the order they were chosen;
    among equal weights the first found in row-major order wins.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []
    in_tree = {0}
    chosen: list[tuple[int, int, Any]] = []
    while len(in_tree) < size:
        candidates = (
            (i, j, weight)
            for i, row in enumerate(matrix)
            if i in in_tree
            for j, weight in enumerate(row)
            if j not in in_tree and weight
        )
        edge = min(candidates, key=itemgetter(2), default=None)
        if edge is None:
            raise ValueError("graph is not connected")
        chosen.append(edge)
        in_tree.add(edge[1])
    return chosen