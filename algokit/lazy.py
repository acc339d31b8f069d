"""Segment trees with lazy propagation for range updates and range queries."""

from __future__ import annotations

import math
from typing import Iterable

from .numbers import MOD


def _capacity(n: int) -> int:
    size = 1
    while size < n:
        size *= 2
    return size


def _check_range(l: int, r: int, n: int) -> None:
    if l > r:
        raise ValueError("l must not exceed r")
    if l < 0 or r >= n:
        raise IndexError(f"range [{l}, {r}] out of bounds")


class LazySegTree:
    """Range addition and range minimum over positions ``0..n-1``."""

    def __init__(self, values: Iterable) -> None:
        items = list(values)
        if not items:
            raise ValueError("segment tree needs at least one value")
        size = _capacity(len(items))
        self._n = len(items)
        self._size = size
        self._val = [math.inf] * (2 * size)
        self._lazy = [0] * (2 * size)
        self._val[size : size + len(items)] = items
        for i in range(size - 1, 0, -1):
            self._val[i] = min(self._val[2 * i], self._val[2 * i + 1])

    def _apply(self, node: int, v) -> None:
        self._val[node] += v
        self._lazy[node] += v

    def _push(self, node: int) -> None:
        pending = self._lazy[node]
        if pending:
            self._apply(2 * node, pending)
            self._apply(2 * node + 1, pending)
            self._lazy[node] = 0

    def _add(self, node: int, lo: int, hi: int, l: int, r: int, v) -> None:
        if r <= lo or hi <= l:
            return
        if l <= lo and hi <= r:
            self._apply(node, v)
            return
        self._push(node)
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, l, r, v)
        self._add(2 * node + 1, mid, hi, l, r, v)
        self._val[node] = min(self._val[2 * node], self._val[2 * node + 1])

    def _query(self, node: int, lo: int, hi: int, l: int, r: int):
        if r <= lo or hi <= l:
            return math.inf
        if l <= lo and hi <= r:
            return self._val[node]
        self._push(node)
        mid = (lo + hi) // 2
        return min(
            self._query(2 * node, lo, mid, l, r),
            self._query(2 * node + 1, mid, hi, l, r),
        )

    def add(self, l: int, r: int, v) -> None:
        """Add ``v`` to every position in ``l..r`` inclusive."""
        _check_range(l, r, self._n)
        self._add(1, 0, self._size, l, r + 1, v)

    def query(self, l: int, r: int):
        """Return the minimum over positions ``l..r`` inclusive."""
        _check_range(l, r, self._n)
        return self._query(1, 0, self._size, l, r + 1)


class AffineSegTree:
    """Range affine maps ``x -> k*x + b`` with range sums, modulo ``mod``."""

    def __init__(self, values: Iterable, mod: int = MOD) -> None:
        if mod < 1:
            raise ValueError("modulus must be positive")
        items = [value % mod for value in values]
        if not items:
            raise ValueError("segment tree needs at least one value")
        size = _capacity(len(items))
        self._mod = mod
        self._n = len(items)
        self._size = size
        self._val = [0] * (2 * size)
        self._cnt = [0] * (2 * size)
        self._k = [1] * (2 * size)
        self._b = [0] * (2 * size)
        self._val[size : size + len(items)] = items
        self._cnt[size : size + len(items)] = [1] * len(items)
        for i in range(size - 1, 0, -1):
            self._pull(i)

    def _pull(self, node: int) -> None:
        self._val[node] = (self._val[2 * node] + self._val[2 * node + 1]) % self._mod
        self._cnt[node] = self._cnt[2 * node] + self._cnt[2 * node + 1]

    def _apply(self, node: int, k: int, b: int) -> None:
        mod = self._mod
        self._val[node] = (self._val[node] * k + b * self._cnt[node]) % mod
        self._k[node] = self._k[node] * k % mod
        self._b[node] = (k * self._b[node] + b) % mod

    def _push(self, node: int) -> None:
        k, b = self._k[node], self._b[node]
        if k != 1 or b != 0:
            self._apply(2 * node, k, b)
            self._apply(2 * node + 1, k, b)
            self._k[node], self._b[node] = 1, 0

    def _update(self, node: int, lo: int, hi: int, l: int, r: int, k: int, b: int) -> None:
        if r <= lo or hi <= l:
            return
        if l <= lo and hi <= r:
            self._apply(node, k, b)
            return
        self._push(node)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, l, r, k, b)
        self._update(2 * node + 1, mid, hi, l, r, k, b)
        self._pull(node)

    def _query(self, node: int, lo: int, hi: int, l: int, r: int) -> int:
        if r <= lo or hi <= l:
            return 0
        if l <= lo and hi <= r:
            return self._val[node]
        self._push(node)
        mid = (lo + hi) // 2
        total = self._query(2 * node, lo, mid, l, r) + self._query(2 * node + 1, mid, hi, l, r)
        return total % self._mod

    def apply(self, l: int, r: int, k: int, b: int) -> None:
        """Replace every value ``x`` in ``l..r`` inclusive with ``k*x + b``."""
        _check_range(l, r, self._n)
        self._update(1, 0, self._size, l, r + 1, k % self._mod, b % self._mod)

    def query(self, l: int, r: int) -> int:
        """Return the sum over positions ``l..r`` inclusive, modulo ``mod``."""
        _check_range(l, r, self._n)
        return self._query(1, 0, self._size, l, r + 1)