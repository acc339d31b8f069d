"""Implicit treap: a sequence with split and merge in expected O(log n)."""

from __future__ import annotations

import random
from typing import Iterable, Iterator


class _Node:
    __slots__ = ("value", "total", "priority", "count", "flipped", "left", "right")

    def __init__(self, value, priority: float) -> None:
        self.value = value
        self.total = value
        self.priority = priority
        self.count = 1
        self.flipped = False
        self.left: _Node | None = None
        self.right: _Node | None = None


def _count(node: _Node | None) -> int:
    return node.count if node is not None else 0


def _push(node: _Node | None) -> None:
    if node is None or not node.flipped:
        return
    node.left, node.right = node.right, node.left
    for child in (node.left, node.right):
        if child is not None:
            child.flipped = not child.flipped
    node.flipped = False


def _update(node: _Node) -> None:
    node.count = 1
    node.total = node.value
    for child in (node.left, node.right):
        if child is not None:
            node.total = node.total + child.total
            node.count += child.count


def _split(node: _Node | None, k: int) -> tuple[_Node | None, _Node | None]:
    """Split off the first ``k`` elements."""
    if node is None:
        return None, None
    _push(node)
    if _count(node.left) < k:
        left, right = _split(node.right, k - _count(node.left) - 1)
        node.right = left
        _update(node)
        return node, right
    left, right = _split(node.left, k)
    node.left = right
    _update(node)
    return left, node


def _merge(first: _Node | None, second: _Node | None) -> _Node | None:
    if first is None:
        return second
    if second is None:
        return first
    if first.priority <= second.priority:
        _push(first)
        first.right = _merge(first.right, second)
        _update(first)
        return first
    _push(second)
    second.left = _merge(first, second.left)
    _update(second)
    return second


def _walk(node: _Node | None) -> Iterator:
    stack: list[_Node] = []
    while stack or node is not None:
        while node is not None:
            _push(node)
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


class Treap:
    """Sequence supporting positional insert, erase, reversal and range sums."""

    def __init__(self, values: Iterable = ()) -> None:
        self._rng = random.Random()
        self._root: _Node | None = None
        for value in values:
            self._root = _merge(self._root, self._new(value))

    def _new(self, value) -> _Node:
        return _Node(value, self._rng.random())

    def _index(self, pos: int) -> int:
        if pos < 0:
            pos += len(self)
        if not 0 <= pos < len(self):
            raise IndexError(f"position {pos} out of range")
        return pos

    def _cut(self, l: int, r: int) -> tuple[_Node | None, _Node, _Node | None]:
        if l > r:
            raise ValueError("l must not exceed r")
        if l < 0 or r >= len(self):
            raise IndexError(f"range [{l}, {r}] out of bounds")
        left, rest = _split(self._root, l)
        middle, right = _split(rest, r - l + 1)
        return left, middle, right

    def _join(self, left, middle, right) -> None:
        self._root = _merge(_merge(left, middle), right)

    def insert(self, pos: int, x) -> None:
        """Insert ``x`` so that it ends up at position ``pos``."""
        if not 0 <= pos <= len(self):
            raise IndexError(f"position {pos} out of range")
        left, right = _split(self._root, pos)
        self._join(left, self._new(x), right)

    def erase(self, pos: int) -> None:
        """Remove the element at position ``pos``."""
        pos = self._index(pos)
        left, _, right = self._cut(pos, pos)
        self._root = _merge(left, right)

    def erase_range(self, l: int, r: int) -> list:
        """Remove positions ``l..r`` inclusive and return the removed values."""
        left, middle, right = self._cut(l, r)
        self._root = _merge(left, right)
        return list(_walk(middle))

    def reverse(self, l: int, r: int) -> None:
        """Reverse the order of positions ``l..r`` inclusive."""
        left, middle, right = self._cut(l, r)
        middle.flipped = not middle.flipped
        self._join(left, middle, right)

    def sum(self, l: int, r: int):
        """Return the sum of positions ``l..r`` inclusive."""
        left, middle, right = self._cut(l, r)
        total = middle.total
        self._join(left, middle, right)
        return total

    def count(self, x) -> int:
        """Return 1 if ``x`` is found, else 0; the sequence must be ascending."""
        node = self._root
        while node is not None:
            _push(node)
            if node.value == x:
                return 1
            node = node.right if node.value < x else node.left
        return 0

    def clear(self) -> None:
        """Remove every element."""
        self._root = None

    def __getitem__(self, pos: int):
        pos = self._index(pos)
        node = self._root
        while True:
            _push(node)
            left = _count(node.left)
            if pos < left:
                node = node.left
            elif pos == left:
                return node.value
            else:
                pos -= left + 1
                node = node.right

    def __setitem__(self, pos: int, value) -> None:
        pos = self._index(pos)
        left, middle, right = self._cut(pos, pos)
        middle.value = value
        _update(middle)
        self._join(left, middle, right)

    def __len__(self) -> int:
        return _count(self._root)

    def __iter__(self) -> Iterator:
        return _walk(self._root)