"""Sparse table for idempotent range queries."""

from __future__ import annotations

from typing import Callable, Iterable


class SparseTable:
    """Answers ``func`` over inclusive ranges in O(1) after O(n log n) build.

    ``func`` must be associative and idempotent, such as ``min`` or ``max``.
    """

    def __init__(self, values: Iterable, func: Callable = min) -> None:
        row = list(values)
        if not row:
            raise ValueError("sparse table needs at least one value")
        self._func = func
        self._levels = [row]
        width = 1
        while 2 * width <= len(row):
            previous = self._levels[-1]
            self._levels.append([func(a, b) for a, b in zip(previous, previous[width:])])
            width *= 2

    def query(self, l: int, r: int):
        """Return ``func`` folded over positions ``l..r`` inclusive."""
        if l > r:
            raise ValueError("l must not exceed r")
        if l < 0 or r >= len(self._levels[0]):
            raise IndexError(f"range [{l}, {r}] out of bounds")
        level = (r - l + 1).bit_length() - 1
        row = self._levels[level]
        return self._func(row[l], row[r - (1 << level) + 1])