"""Dynamic upper envelope of lines for maximum queries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from operator import attrgetter

from sortedcontainers import SortedKeyList


@dataclass(slots=True)
class _Line:
    k: int
    m: int
    p: float = 0  # last x where this line is on the envelope


class LineContainer:
    """Holds lines ``y = k*x + m`` and answers the maximum at a given x."""

    def __init__(self) -> None:
        self._lines = SortedKeyList(key=attrgetter("k"))

    def __len__(self) -> int:
        return len(self._lines)

    def _intersect(self, i: int, j: int) -> bool:
        lines = self._lines
        x = lines[i]
        if j == len(lines):
            x.p = math.inf
            return False
        y = lines[j]
        if x.k == y.k:
            x.p = math.inf if x.m > y.m else -math.inf
        else:
            x.p = (y.m - x.m) // (x.k - y.k)
        return x.p >= y.p

    def add(self, k: int, m: int) -> None:
        """Insert the line ``y = k*x + m``."""
        lines = self._lines
        line = _Line(k, m)
        lines.add(line)
        y = lines.bisect_key_left(k)
        while lines[y] is not line:
            y += 1

        z = y + 1
        while self._intersect(y, z):
            del lines[z]

        x = y
        if x > 0:
            x -= 1
            if self._intersect(x, y):
                del lines[y]
                self._intersect(x, y)

        while x > 0:
            y = x
            x -= 1
            if lines[x].p < lines[y].p:
                break
            del lines[y]
            self._intersect(x, y)

    def query(self, x: int) -> int:
        """Return the maximum of ``k*x + m`` over all lines."""
        lines = self._lines
        if not lines:
            raise ValueError("query on an empty line container")
        lo, hi = 0, len(lines) - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if lines[mid].p >= x:
                hi = mid
            else:
                lo = mid + 1
        best = lines[lo]
        return best.k * x + best.m