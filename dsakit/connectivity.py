"""Connectivity algorithms: strongly connected components, bridges, safe nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable

from dsakit.graph import Graph


def reversed_graph(graph: Graph) -> Graph:
    """Return a new directed graph with every edge of ``graph`` turned around."""
    result = Graph()
    for u, v, weight in graph.edges():
        result.add_edge(v, u, weight, True)
    return result


def _visit(
    graph: Graph, source: Hashable, visited: set[Hashable]
) -> tuple[list[Hashable], list[Hashable]]:
    """Depth-first search from ``source``; return (preorder, postorder)."""
    visited.add(source)
    pre = [source]
    post: list[Hashable] = []
    stack = [(source, iter(graph.neighbors(source)))]
    while stack:
        node, pending = stack[-1]
        for nbr, _ in pending:
            if nbr not in visited:
                visited.add(nbr)
                pre.append(nbr)
                stack.append((nbr, iter(graph.neighbors(nbr))))
                break
        else:
            stack.pop()
            post.append(node)
    return pre, post


def strongly_connected_components(graph: Graph, n: int) -> list[list[Hashable]]:
    """Return the strongly connected components of nodes ``0 .. n-1`` (Kosaraju).

    Each component lists its nodes in the order they were reached.
    """
    visited: set[Hashable] = set()
    ordering: list[Hashable] = []
    for node in range(n):
        if node not in visited:
            ordering.extend(_visit(graph, node, visited)[1])
    transposed = reversed_graph(graph)
    seen: set[Hashable] = set()
    components: list[list[Hashable]] = []
    for node in reversed(ordering):
        if node not in seen:
            components.append(_visit(transposed, node, seen)[0])
    return components


def bridges(graph: Graph, source: Hashable) -> list[tuple[Hashable, Hashable]]:
    """Return the bridges of an undirected graph reachable from ``source``.

    Each bridge is ``(parent, child)`` as met by the depth-first search, in
    the order the search finishes with the child.
    """
    tin: dict[Hashable, int] = {source: 0}
    low: dict[Hashable, int] = {source: 0}
    timer = 1
    found: list[tuple[Hashable, Hashable]] = []
    stack = [(source, None, iter(graph.neighbors(source)))]
    while stack:
        node, parent, pending = stack[-1]
        for nbr, _ in pending:
            if nbr == parent:
                continue
            if nbr not in tin:
                tin[nbr] = low[nbr] = timer
                timer += 1
                stack.append((nbr, node, iter(graph.neighbors(nbr))))
                break
            low[node] = min(low[node], low[nbr])
        else:
            stack.pop()
            if parent is not None:
                low[parent] = min(low[parent], low[node])
                if low[node] > tin[parent]:
                    found.append((parent, node))
    return found


def eventual_safe_nodes(graph: Graph, start: int, end: int) -> list[Hashable]:
    """Return, sorted, the nodes from which every path ends at a terminal node.

    The search starts from the nodes ``start .. end`` that have no
    outgoing edges.
    """
    reverse = reversed_graph(graph)
    out_degree: dict[Hashable, int] = {}
    for v, u, _ in reverse.edges():
        out_degree.setdefault(v, 0)
        out_degree[u] = out_degree.get(u, 0) + 1
    queue = deque(
        node for node in range(start, end + 1) if out_degree.get(node, 0) == 0
    )
    safe: list[Hashable] = []
    while queue:
        node = queue.popleft()
        for nbr, _ in reverse.neighbors(node):
            out_degree[nbr] -= 1
            if out_degree[nbr] == 0:
                queue.append(nbr)
        safe.append(node)
    return sorted(safe)