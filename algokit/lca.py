"""Lowest common ancestor with skew-binary jump pointers, O(n) memory."""

from __future__ import annotations

from typing import Sequence


class JumpLCA:
    """Ancestor queries on a rooted tree using one jump pointer per node."""

    def __init__(self, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adj)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range")
        depth = [-1] * n
        parent = [-1] * n
        jump = [-1] * n
        depth[root] = 0
        parent[root] = jump[root] = root
        stack = [root]
        while stack:
            u = stack.pop()
            for v in adj[u]:
                if depth[v] != -1:
                    if v == parent[u] and u != root:
                        continue
                    raise ValueError("adjacency does not describe a tree")
                parent[v] = u
                depth[v] = depth[u] + 1
                up = jump[u]
                if depth[u] - depth[up] == depth[up] - depth[jump[up]]:
                    jump[v] = jump[up]
                else:
                    jump[v] = u
                stack.append(v)
        self._depth = depth
        self._parent = parent
        self._jump = jump

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._depth):
            raise IndexError(f"node {node} out of range")
        if self._depth[node] == -1:
            raise ValueError(f"node {node} is not reachable from the root")

    def depth(self, node: int) -> int:
        """Return the number of edges between ``node`` and the root."""
        self._check(node)
        return self._depth[node]

    def kth_parent(self, node: int, k: int) -> int:
        """Return the ancestor ``k`` levels above ``node``; the root if ``k`` overshoots."""
        self._check(node)
        if k < 0:
            raise ValueError("k must be non-negative")
        depth, jump, parent = self._depth, self._jump, self._parent
        target = max(depth[node] - k, 0)
        while depth[node] > target:
            if depth[jump[node]] >= target:
                node = jump[node]
            else:
                node = parent[node]
        return node

    def lca(self, x: int, y: int) -> int:
        """Return the lowest common ancestor of ``x`` and ``y``."""
        self._check(x)
        self._check(y)
        depth, jump, parent = self._depth, self._jump, self._parent
        if depth[x] < depth[y]:
            x, y = y, x
        x = self.kth_parent(x, depth[x] - depth[y])
        while x != y:
            if jump[x] == jump[y]:
                x, y = parent[x], parent[y]
            else:
                x, y = jump[x], jump[y]
        return x

    def distance(self, x: int, y: int) -> int:
        """Return the number of edges on the path between ``x`` and ``y``."""
        return self._depth[x] + self._depth[y] - 2 * self._depth[self.lca(x, y)]