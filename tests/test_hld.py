import random

import pytest

from algokit.hld import HeavyLight


def _random_tree(n, rng):
    parents = [-1] + [rng.randrange(i) for i in range(1, n)]
    adj = [[] for _ in range(n)]
    for child in range(1, n):
        adj[child].append(parents[child])
        adj[parents[child]].append(child)
    return adj


def _path(adj, a, b):
    prev = {a: None}
    queue = [a]
    for u in queue:
        for v in adj[u]:
            if v not in prev:
                prev[v] = u
                queue.append(v)
    nodes = []
    node = b
    while node is not None:
        nodes.append(node)
        node = prev[node]
    return nodes


def test_chain_maximum():
    adj = [[1], [0, 2], [1]]
    hld = HeavyLight(adj, [5, 3, 7], 0)
    assert hld.query(0, 1) == 5
    assert hld.query(1, 2) == 7
    assert hld.query(2, 0) == 7


def test_result_never_below_zero():
    adj = [[1], [0]]
    hld = HeavyLight(adj, [-4, -9], 0)
    assert hld.query(0, 1) == 0


@pytest.mark.parametrize("seed", range(8))
def test_matches_brute_force(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 40)
    adj = _random_tree(n, rng)
    values = [rng.randint(-50, 50) for _ in range(n)]
    root = rng.randrange(n)
    hld = HeavyLight(adj, values, root)
    for _ in range(60):
        a, b = rng.randrange(n), rng.randrange(n)
        expected = max([0] + [values[v] for v in _path(adj, a, b)])
        assert hld.query(a, b) == expected


@pytest.mark.parametrize("seed", range(5))
def test_updates_keep_larger_value(seed):
    rng = random.Random(100 + seed)
    n = rng.randint(2, 30)
    adj = _random_tree(n, rng)
    values = [rng.randint(-20, 20) for _ in range(n)]
    hld = HeavyLight(adj, values, 0)
    for _ in range(40):
        node = rng.randrange(n)
        val = rng.randint(-30, 30)
        hld.update(node, val)
        values[node] = max(values[node], val)
        a, b = rng.randrange(n), rng.randrange(n)
        assert hld.query(a, b) == max([0] + [values[v] for v in _path(adj, a, b)])


def test_smaller_update_is_ignored():
    adj = [[1], [0]]
    hld = HeavyLight(adj, [10, 2], 0)
    hld.update(0, 3)
    assert hld.query(0, 0) == 10


def test_value_count_must_match():
    with pytest.raises(ValueError):
        HeavyLight([[1], [0]], [1], 0)


def test_bad_root():
    with pytest.raises(IndexError):
        HeavyLight([[1], [0]], [1, 2], 5)


def test_cycle_rejected():
    adj = [[1, 2], [0, 2], [0, 1]]
    with pytest.raises(ValueError):
        HeavyLight(adj, [1, 2, 3], 0)


def test_unreachable_node():
    adj = [[1], [0], []]
    hld = HeavyLight(adj, [1, 2, 3], 0)
    with pytest.raises(ValueError):
        hld.query(0, 2)
    with pytest.raises(IndexError):
        hld.query(0, 7)