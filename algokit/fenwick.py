"""Fenwick tree for point updates and prefix sums."""

from __future__ import annotations


class Fenwick:
    """Binary indexed tree over positions ``0..n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._tree = [0] * (n + 1)

    def update(self, i: int, v) -> None:
        """Add ``v`` to position ``i``."""
        if not 0 <= i < self._n:
            raise IndexError(f"position {i} out of range")
        i += 1
        while i <= self._n:
            self._tree[i] += v
            i += i & -i

    def prefix(self, i: int):
        """Return the sum of positions ``0..i``; ``prefix(-1)`` is 0."""
        if not -1 <= i < self._n:
            raise IndexError(f"position {i} out of range")
        total = 0
        i += 1
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def range_sum(self, l: int, r: int):
        """Return the sum of positions ``l..r`` inclusive."""
        return self.prefix(r) - self.prefix(l - 1)