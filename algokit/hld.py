"""Heavy-light decomposition for path maximum queries on a tree."""

from __future__ import annotations

from typing import Sequence

from .segtree import SegTree

_NEUTRAL = -(10**9)


class HeavyLight:
    """Path maximum over node values of a tree, with point updates.

    Node values are kept in a max segment tree laid out along heavy
    chains. ``update`` keeps the larger of the old and the new value,
    and ``query`` never reports less than 0.
    """

    def __init__(self, adj: Sequence[Sequence[int]], values: Sequence[int], root: int = 0) -> None:
        n = len(adj)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range")
        if len(values) != n:
            raise ValueError("need exactly one value per node")

        parent = [-1] * n
        depth = [0] * n
        seen = [False] * n
        children: list[list[int]] = [[] for _ in range(n)]
        order: list[int] = []
        seen[root] = True
        stack = [root]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in adj[u]:
                if v == parent[u]:
                    continue
                if seen[v]:
                    raise ValueError("adjacency does not describe a tree")
                seen[v] = True
                parent[v] = u
                depth[v] = depth[u] + 1
                children[u].append(v)
                stack.append(v)

        size = [1] * n
        for u in reversed(order):
            if parent[u] >= 0:
                size[parent[u]] += size[u]

        heavy = [-1] * n
        for u in order:
            best = 0
            for v in children[u]:
                if size[v] > best:
                    best = size[v]
                    heavy[u] = v

        head = [0] * n
        pos = [-1] * n
        next_pos = 0
        chain_stack = [(root, root)]
        while chain_stack:
            u, h = chain_stack.pop()
            head[u] = h
            pos[u] = next_pos
            next_pos += 1
            lights = [v for v in children[u] if v != heavy[u]]
            chain_stack.extend((v, v) for v in reversed(lights))
            if heavy[u] != -1:
                chain_stack.append((heavy[u], h))

        laid_out = [0] * next_pos
        for node, p in enumerate(pos):
            if p != -1:
                laid_out[p] = values[node]

        self._parent = parent
        self._depth = depth
        self._head = head
        self._pos = pos
        self._tree = SegTree(laid_out, max, _NEUTRAL)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._pos):
            raise IndexError(f"node {node} out of range")
        if self._pos[node] == -1:
            raise ValueError(f"node {node} is not reachable from the root")

    def query(self, a: int, b: int) -> int:
        """Return the maximum value on the path from ``a`` to ``b``, at least 0."""
        self._check(a)
        self._check(b)
        head, depth, pos, parent = self._head, self._depth, self._pos, self._parent
        result = 0
        while head[a] != head[b]:
            if depth[head[a]] > depth[head[b]]:
                a, b = b, a
            result = max(result, self._tree.query(pos[head[b]], pos[b]))
            b = parent[head[b]]
        if depth[a] > depth[b]:
            a, b = b, a
        return max(result, self._tree.query(pos[a], pos[b]))

    def update(self, a: int, val: int) -> None:
        """Raise the value of node ``a`` to ``val`` if that is larger."""
        self._check(a)
        self._tree.update(self._pos[a], val)