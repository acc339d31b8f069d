"""Bottom-up segment tree and an order-statistics counting tree."""

from __future__ import annotations

from typing import Callable, Iterable


class SegTree:
    """Segment tree folding ``merge`` over inclusive ranges.

    ``update`` combines the new value into a position with ``merge``
    rather than replacing it, so with ``max`` it keeps the larger value.
    """

    def __init__(
        self,
        values: Iterable = (),
        merge: Callable = max,
        neutral=-(10**9),
    ) -> None:
        items = list(values)
        size = 1
        while size < len(items):
            size *= 2
        self._merge = merge
        self._neutral = neutral
        self._n = len(items)
        self._size = size
        tree = [neutral] * (2 * size)
        tree[size : size + len(items)] = items
        for i in range(size - 1, 0, -1):
            tree[i] = merge(tree[2 * i], tree[2 * i + 1])
        self._tree = tree

    def update(self, p: int, value) -> None:
        """Combine ``value`` into position ``p``."""
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")
        tree = self._tree
        p += self._size
        tree[p] = self._merge(value, tree[p])
        p >>= 1
        while p:
            tree[p] = self._merge(tree[2 * p], tree[2 * p + 1])
            p >>= 1

    def query(self, l: int, r: int):
        """Return ``merge`` folded over positions ``l..r``; neutral when ``l > r``."""
        if l > r:
            return self._neutral
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] out of bounds")
        merge, tree = self._merge, self._tree
        left = right = self._neutral
        lo, hi = l + self._size, r + self._size + 1
        while lo < hi:
            if lo & 1:
                left = merge(left, tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right = merge(tree[hi], right)
            lo >>= 1
            hi >>= 1
        return merge(left, right)


class SelectTree:
    """Counts per position ``0..n-1`` with k-th element lookup."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("n must be positive")
        size = 1
        while size < n:
            size *= 2
        self._n = n
        self._size = size
        self._sum = [0] * (2 * size)

    def modify(self, x: int, val: int) -> None:
        """Add ``val`` to the count at position ``x``."""
        if not 0 <= x < self._n:
            raise IndexError(f"position {x} out of range")
        node = x + self._size
        while node:
            self._sum[node] += val
            node >>= 1

    def select(self, k: int) -> int:
        """Return the position of the ``k``-th counted element, 0-based."""
        if not 0 <= k < self._sum[1]:
            raise IndexError(f"rank {k} out of range")
        node = 1
        while node < self._size:
            left = 2 * node
            if k < self._sum[left]:
                node = left
            else:
                k -= self._sum[left]
                node = left + 1
        return node - self._size