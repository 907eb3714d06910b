"""Single-source and all-pairs shortest path algorithms on weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable
from typing import Any

from dsakit.graph import Graph

INF = math.inf


class NegativeCycleError(Exception):
    """Raised when a negative-weight cycle makes shortest distances undefined."""


def _postorder_from(graph: Graph, source: Hashable) -> list[Hashable]:
    """Return the nodes reachable from ``source`` in depth-first finishing order."""
    visited = {source}
    finished: list[Hashable] = []
    stack = [(source, iter(graph.neighbors(source)))]
    while stack:
        node, pending = stack[-1]
        for nbr, _ in pending:
            if nbr not in visited:
                visited.add(nbr)
                stack.append((nbr, iter(graph.neighbors(nbr))))
                break
        else:
            stack.pop()
            finished.append(node)
    return finished


def dag_shortest_distances(graph: Graph, source: int, n: int) -> list[float]:
    """Shortest distances from ``source`` to nodes ``0 .. n-1`` of a DAG.

    Nodes are relaxed in topological order of the part reachable from
    ``source``; unreachable nodes keep ``math.inf``.
    """
    dist: list[float] = [INF] * n
    dist[source] = 0
    for node in reversed(_postorder_from(graph, source)):
        base = dist[node]
        if base == INF:
            continue
        for nbr, weight in graph.neighbors(node):
            if base + weight < dist[nbr]:
                dist[nbr] = base + weight
    return dist


def dijkstra(graph: Graph, n: int, source: int) -> list[float]:
    """Shortest distances from ``source`` for non-negative weights.

    Returns a list of ``n + 1`` entries indexed by node number, so both
    0-based and 1-based numbering fit; unreachable nodes hold ``math.inf``.
    """
    dist: list[float] = [INF] * (n + 1)
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        top_dist, node = heapq.heappop(heap)
        if top_dist > dist[node]:
            continue
        for nbr, weight in graph.neighbors(node):
            candidate = top_dist + weight
            if candidate < dist[nbr]:
                dist[nbr] = candidate
                heapq.heappush(heap, (candidate, nbr))
    return dist


def bellman_ford(
    graph: Graph, nodes: Iterable[Hashable], source: Hashable
) -> dict[Hashable, float]:
    """Shortest distances from ``source`` to every node of ``nodes``.

    Weights may be negative. Raises NegativeCycleError when a negative
    cycle is reachable from ``source``.
    """
    dist: dict[Hashable, float] = {node: INF for node in nodes}
    if source not in dist:
        raise ValueError(f"source {source!r} is not among the nodes")
    edges: list[tuple[Hashable, Hashable, Any]] = list(graph.edges())
    for u, v, _ in edges:
        if u not in dist or v not in dist:
            raise ValueError(f"edge {u!r} -> {v!r} names an unknown node")
    dist[source] = 0
    for _ in range(len(dist) - 1):
        changed = False
        for u, v, weight in edges:
            if dist[u] != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edges:
        if dist[u] != INF and dist[u] + weight < dist[v]:
            raise NegativeCycleError("negative cycle is present")
    return dist


def floyd_warshall(graph: Graph, n: int) -> list[list[float]]:
    """All-pairs shortest distances between nodes ``0 .. n-1``.

    Entry ``[i][j]`` is the distance from ``i`` to ``j``, or ``math.inf``.
    """
    dist: list[list[float]] = [[INF] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for u, v, weight in graph.edges():
        dist[u][v] = weight
    for helper in range(n):
        via = dist[helper]
        for row in dist:
            to_helper = row[helper]
            if to_helper == INF:
                continue
            for dest in range(n):
                candidate = to_helper + via[dest]
                if candidate < row[dest]:
                    row[dest] = candidate
    return dist