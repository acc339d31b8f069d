"""Disjoint set union with path compression and union by size."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the elements ``0..n`` inclusive."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def find(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        if not 0 <= a < len(self._parent):
            raise IndexError(f"element {a} out of range")
        root = a
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[a] != root:
            self._parent[a], a = root, self._parent[a]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return whether they were apart."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False
        if self._size[a] > self._size[b]:
            a, b = b, a
        self._size[b] += self._size[a]
        self._parent[a] = b
        return True

    def size_of(self, a: int) -> int:
        """Return the number of elements in the set holding ``a``."""
        return self._size[self.find(a)]