"""An adjacency-list graph with traversals, cycle checks and topological sorting."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator
from typing import Any

Node = Hashable


class Graph:
    """A graph stored as an adjacency list of ``(neighbour, weight)`` pairs.

    Edges keep the order in which they were added. Every node named by an
    edge is known to the graph, even if it has no outgoing edges.
    """

    def __init__(self) -> None:
        self._adj: dict[Node, list[tuple[Node, Any]]] = {}

    def add_edge(
        self, u: Node, v: Node, weight: Any = 1, directed: bool = False
    ) -> None:
        """Add an edge ``u -> v``; an undirected edge also adds ``v -> u``."""
        self._adj.setdefault(u, []).append((v, weight))
        if directed:
            self._adj.setdefault(v, [])
        else:
            self._adj.setdefault(v, []).append((u, weight))

    def neighbors(self, node: Node) -> list[tuple[Node, Any]]:
        """Return the ``(neighbour, weight)`` pairs leaving ``node``."""
        return list(self._adj.get(node, ()))

    def edges(self) -> Iterator[tuple[Node, Node, Any]]:
        """Yield every stored edge as ``(u, v, weight)``."""
        for u, pairs in self._adj.items():
            for v, weight in pairs:
                yield u, v, weight

    def format_adjacency(self) -> str:
        """Render the adjacency list, one node per line."""
        lines = []
        for u, pairs in self._adj.items():
            body = "".join(f"({v}, {weight}), " for v, weight in pairs)
            lines.append(f"{u}-> {{ {body}}}\n")
        return "".join(lines)

    def _targets(self, node: Node) -> Iterator[Node]:
        return (v for v, _ in self._adj.get(node, ()))

    def _bfs_from(self, source: Node, visited: set[Node]) -> list[Node]:
        order: list[Node] = []
        queue = deque([source])
        visited.add(source)
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self._targets(node):
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return order

    def bfs(self, source: Node) -> list[Node]:
        """Return the nodes in breadth-first order from ``source``."""
        return self._bfs_from(source, set())

    def bfs_all(self, nodes: Iterable[Node]) -> list[list[Node]]:
        """Run a breadth-first search from each not yet visited node of ``nodes``.

        Returns one traversal order per search, so a disconnected graph
        yields one list per component reached.
        """
        visited: set[Node] = set()
        return [
            self._bfs_from(node, visited) for node in nodes if node not in visited
        ]

    def _dfs_postorder(
        self, source: Node, visited: set[Node], preorder: list[Node] | None = None
    ) -> list[Node]:
        post: list[Node] = []
        visited.add(source)
        if preorder is not None:
            preorder.append(source)
        stack = [(source, self._targets(source))]
        while stack:
            node, pending = stack[-1]
            for nbr in pending:
                if nbr not in visited:
                    visited.add(nbr)
                    if preorder is not None:
                        preorder.append(nbr)
                    stack.append((nbr, self._targets(nbr)))
                    break
            else:
                stack.pop()
                post.append(node)
        return post

    def dfs(self, source: Node) -> list[Node]:
        """Return the nodes in depth-first (pre-)order from ``source``."""
        order: list[Node] = []
        self._dfs_postorder(source, set(), order)
        return order

    def has_cycle_undirected_bfs(self, source: Node) -> bool:
        """Detect a cycle reachable from ``source`` in an undirected graph, by BFS."""
        visited = {source}
        parent: dict[Node, Node | None] = {source: None}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for nbr in self._targets(node):
                if parent[node] == nbr:
                    continue
                if nbr in visited:
                    return True
                visited.add(nbr)
                parent[nbr] = node
                queue.append(nbr)
        return False

    def has_cycle_undirected_dfs(self, source: Node) -> bool:
        """Detect a cycle reachable from ``source`` in an undirected graph, by DFS."""
        visited = {source}
        stack: list[tuple[Node, Node | None, Iterator[Node]]] = [
            (source, None, self._targets(source))
        ]
        while stack:
            node, parent, pending = stack[-1]
            for nbr in pending:
                if nbr == parent:
                    continue
                if nbr in visited:
                    return True
                visited.add(nbr)
                stack.append((nbr, node, self._targets(nbr)))
                break
            else:
                stack.pop()
        return False

    def has_cycle_directed(self, source: Node) -> bool:
        """Detect a cycle reachable from ``source`` in a directed graph."""
        visited = {source}
        on_path = {source}
        stack = [(source, self._targets(source))]
        while stack:
            node, pending = stack[-1]
            for nbr in pending:
                if nbr in on_path:
                    return True
                if nbr not in visited:
                    visited.add(nbr)
                    on_path.add(nbr)
                    stack.append((nbr, self._targets(nbr)))
                    break
            else:
                stack.pop()
                on_path.discard(node)
        return False

    def topological_sort_dfs(self, n: int) -> list[Node]:
        """Return a topological order of nodes ``0 .. n-1`` using DFS finish times."""
        visited: set[Node] = set()
        finished: list[Node] = []
        for node in range(n):
            if node not in visited:
                finished.extend(self._dfs_postorder(node, visited))
        finished.reverse()
        return finished

    def in_degrees(self) -> dict[Node, int]:
        """Return the number of incoming edges of every known node."""
        degrees = dict.fromkeys(self._adj, 0)
        for _, v, _ in self.edges():
            degrees[v] = degrees.get(v, 0) + 1
        return degrees

    def topological_sort_bfs(self, n: int) -> list[Node]:
        """Return Kahn's order of nodes ``0 .. n-1``.

        Nodes on a cycle never reach in-degree zero and are left out.
        """
        degrees = self.in_degrees()
        queue = deque(node for node in range(n) if degrees.get(node, 0) == 0)
        order: list[Node] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self._targets(node):
                degrees[nbr] -= 1
                if degrees[nbr] == 0:
                    queue.append(nbr)
        return order

    def shortest_path_bfs(self, source: Node, dest: Node) -> list[Node]:
        """Return a path with the fewest edges from ``source`` to ``dest``."""
        parent: dict[Node, Node | None] = {source: None}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for nbr in self._targets(node):
                if nbr not in parent:
                    parent[nbr] = node
                    queue.append(nbr)
        if dest not in parent:
            raise ValueError(f"{dest!r} is not reachable from {source!r}")
        path: list[Node] = []
        step: Node | None = dest
        while step is not None:
            path.append(step)
            step = parent[step]
        path.reverse()
        return path