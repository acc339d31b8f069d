import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sparse_table import SparseTable


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=40))
def test_minimum_matches_slices(values):
    table = SparseTable(values)
    for l in range(len(values)):
        for r in range(l, len(values)):
            assert table.query(l, r) == min(values[l : r + 1])


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=40))
def test_maximum_matches_slices(values):
    table = SparseTable(values, max)
    for l in range(len(values)):
        for r in range(l, len(values)):
            assert table.query(l, r) == max(values[l : r + 1])


@given(st.lists(st.integers(1, 500), min_size=1, max_size=30))
def test_gcd_matches_slices(values):
    table = SparseTable(values, math.gcd)
    for l in range(len(values)):
        for r in range(l, len(values)):
            assert table.query(l, r) == math.gcd(*values[l : r + 1])


def test_reversed_range_rejected():
    table = SparseTable([3, 1, 2])
    with pytest.raises(ValueError):
        table.query(2, 1)


def test_out_of_bounds_range():
    table = SparseTable([3, 1, 2])
    with pytest.raises(IndexError):
        table.query(0, 3)


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        SparseTable([])