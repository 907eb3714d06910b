"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Any

from dsakit.disjoint_set import DisjointSet
from dsakit.graph import Graph


@dataclass
class SpanningTree:
    """Total weight of a spanning tree and its edges as ``(u, v, weight)``."""

    weight: Any = 0
    edges: list[tuple[int, int, Any]] = field(default_factory=list)


def _check_node(node: Any, n: int) -> None:
    if not isinstance(node, int) or not 0 <= node < n:
        raise ValueError(f"node {node!r} is outside 0 .. {n - 1}")


def kruskal(graph: Graph, n: int) -> SpanningTree:
    """Return a minimum spanning forest of nodes ``0 .. n-1`` (Kruskal)."""
    edges = []
    for u in range(n):
        for v, weight in graph.neighbors(u):
            _check_node(v, n)
            edges.append((u, v, weight))
    edges.sort(key=lambda edge: edge[2])
    sets = DisjointSet(n)
    tree = SpanningTree()
    for u, v, weight in edges:
        if not sets.connected(u, v):
            sets.union_by_rank(u, v)
            tree.weight += weight
            tree.edges.append((u, v, weight))
    return tree


def prim(graph: Graph, n: int) -> SpanningTree:
    """Return a minimum spanning tree grown from node 0 (Prim, with a min-heap).

    Edges are ``(parent, node, weight)`` in the order nodes join the tree.
    """
    tree = SpanningTree()
    if n <= 0:
        return tree
    visited = [False] * n
    heap: list[tuple[Any, int, int]] = [(0, 0, -1)]
    while heap:
        weight, node, parent = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        if parent != -1:
            tree.edges.append((parent, node, weight))
        tree.weight += weight
        for nbr, nbr_weight in graph.neighbors(node):
            _check_node(nbr, n)
            if not visited[nbr]:
                heapq.heappush(heap, (nbr_weight, nbr, node))
    return tree