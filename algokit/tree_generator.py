"""Random labelled trees for testing."""

from __future__ import annotations

import random

from .dsu import DisjointSet


def generate_tree(n: int, rng: random.Random | None = None) -> list[list[int]]:
    """Return the adjacency lists of a random tree on nodes ``1..n``.

    The result has ``n + 1`` lists; index 0 is unused and stays empty.
    Edges join random node pairs that are not yet connected.
    """
    if n < 1:
        raise ValueError("n must be positive")
    rng = rng if rng is not None else random.Random()
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    components = DisjointSet(n)
    remaining = n
    while remaining > 1:
        u = rng.randint(1, n)
        v = rng.randint(1, n)
        if not components.union(u, v):
            continue
        remaining -= 1
        adj[u].append(v)
        adj[v].append(u)
    return adj