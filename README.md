# algokit

A compact toolbox of classic algorithms and data structures for contest-style
problem solving, written in plain Python.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.numbers` | `binpow`, `cnr`, `prime_factors`, `sieve`, and the default modulus `MOD` (10^9 + 7) |
| `algokit.dsu` | `DisjointSet`: union–find over elements `0..n` with path compression and union by size |
| `algokit.fenwick` | `Fenwick`: point update, prefix and range sums |
| `algokit.sparse_table` | `SparseTable`: O(1) range queries for an associative, idempotent function (`min` by default) |
| `algokit.line_container` | `LineContainer`: upper envelope of lines `y = k*x + m`, answering the maximum at a point |
| `algokit.segtree` | `SegTree` (point-update tree over any merge function), `SelectTree` (k-th element by counts) |
| `algokit.lazy` | `LazySegTree` (range add, range min), `AffineSegTree` (range `x -> k*x + b`, range sum modulo a number) |
| `algokit.hashing` | `RollingHash`, `HashParams`, `random_params`, `PRIMES`: polynomial substring hashing |
| `algokit.treap` | `Treap`: implicit treap with insert, erase, range reverse, range sum and indexing |
| `algokit.hld` | `HeavyLight`: path maximum queries on trees with point updates |
| `algokit.lca` | `JumpLCA`: depth, k-th ancestor, lowest common ancestor, distance |
| `algokit.tree_generator` | `generate_tree`: random labelled trees on nodes `1..n` |
| `algokit.debug` | `to_debug_string`, `format_values`, `power_of_ten`, `fast_read`, `random_int` |

Ranges given to query methods are inclusive: `query(l, r)` covers positions
`l` through `r`. Out-of-range positions raise `IndexError`; a range with
`l > r` raises `ValueError` (except `SegTree.query`, which returns the neutral
element).

## Behaviour worth knowing

- `SegTree.update(p, value)` combines `value` into position `p` with the merge
  function rather than replacing it; with `max` it keeps the larger value.
- `HeavyLight.update` likewise only raises a node's value, and
  `HeavyLight.query` never returns less than 0.
- `RollingHash.get` returns a tuple with one hash per modulus. Hashes built
  without explicit `params` share one random choice per process, so they can
  be compared with each other.
- `Treap.count(x)` searches the tree as if it were sorted, so it is only
  meaningful when the sequence is in ascending order.
- `JumpLCA.kth_parent` returns the root when `k` is larger than the depth.
- `generate_tree(n)` returns `n + 1` adjacency lists; list 0 stays empty.
- `fast_read(stream)` reads one integer, skipping spaces and newlines, and
  raises `EOFError` when the stream is exhausted.

## Examples

```python
import random

from algokit.hashing import RollingHash, random_params
from algokit.lca import JumpLCA
from algokit.numbers import binpow, cnr, sieve
from algokit.segtree import SegTree
from algokit.treap import Treap

binpow(2, 10, 1_000_000_007)      # 1024
cnr(5, 2, 1_000_000_007)          # 10
sieve(20)                         # [2, 3, 5, 7, 11, 13, 17, 19]

tree = SegTree([5, 1, 4, 2], max, float("-inf"))
tree.query(1, 3)                  # 4

t = Treap([1, 2, 3, 4, 5])
t.reverse(1, 3)
list(t)                           # [1, 4, 3, 2, 5]
t.sum(0, 2)                       # 8

params = random_params(2, random.Random(0))
h = RollingHash("abcabc", params)
h.same(0, 2, 3, 5)                # True

adj = [[1, 2], [0, 3], [0], [1]]
lca = JumpLCA(adj, 0)
lca.lca(3, 2)                     # 0
lca.distance(3, 2)                # 3
```

## What it does not do

algokit is a library only. It installs no command and has no program that
reads test cases from standard input and solves them; `algokit.debug` offers
the pieces such a program would use (`fast_read`, `format_values`), but the
driver is left to the caller.