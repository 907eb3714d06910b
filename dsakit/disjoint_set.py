"""Disjoint-set (union-find) with path compression and union by rank or size."""

from __future__ import annotations


class DisjointSet:
    """Union-find over the nodes ``0 .. n`` (inclusive), each starting alone."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"n must not be negative, got {n}")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(
                f"node must be between 0 and {len(self._parent) - 1}, got {node}"
            )

    def find(self, node: int) -> int:
        """Return the representative of ``node``'s set, compressing the path."""
        self._check(node)
        parent = self._parent
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    def union_by_rank(self, u: int, v: int) -> None:
        """Join the sets of ``u`` and ``v``, hanging the lower-rank root below."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if self._rank[root_u] < self._rank[root_v]:
            root_u, root_v = root_v, root_u
        elif self._rank[root_u] == self._rank[root_v]:
            self._rank[root_u] += 1
        self._parent[root_v] = root_u
        self._size[root_u] += self._size[root_v]

    def union_by_size(self, u: int, v: int) -> None:
        """Join the sets of ``u`` and ``v``, hanging the smaller set below."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if self._size[root_u] < self._size[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_v] = root_u
        self._size[root_u] += self._size[root_v]

    def connected(self, u: int, v: int) -> bool:
        """Return True if ``u`` and ``v`` are in the same set."""
        return self.find(u) == self.find(v)

    def size_of(self, node: int) -> int:
        """Return the number of nodes in ``node``'s set."""
        return self._size[self.find(node)]