"""Disjoint-set union over a fixed range of cell ids."""

from __future__ import annotations

from typing import List


class DisjointSetUnion:
    """Union by rank with path compression over the ids ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("DisjointSetUnion size cannot be negative")
        self._parent: List[int] = list(range(size))
        self._rank: List[int] = [0] * size

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        # Second walk repoints every node on the path straight at the root.
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> int:
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return root_a
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
            return root_b
        if self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
            return root_a
        # Equal ranks: b's root goes under a's root.
        self._parent[root_b] = root_a
        self._rank[root_a] += 1
        return root_a
