import io
import random
from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.debug import fast_read, format_values, power_of_ten, random_int, to_debug_string


def test_booleans():
    assert to_debug_string(True) == "true"
    assert to_debug_string(False) == "false"


def test_strings_are_quoted():
    assert to_debug_string("abc") == '"abc"'


def test_pair_and_list():
    assert to_debug_string(("a", 1)) == '{"a", 1}'
    assert to_debug_string([1, 2, 3]) == "[1, 2, 3]"
    assert to_debug_string([]) == "[]"


def test_collections_use_braces():
    assert to_debug_string({3, 1, 2}) == "{1, 2, 3}"
    assert to_debug_string(deque([4, 5])) == "{4, 5}"
    assert to_debug_string({1: True}) == "{{1, true}}"


def test_nested():
    assert to_debug_string([(1, "x"), (2, "y")]) == '[{1, "x"}, {2, "y"}]'


def test_format_values_separator():
    assert format_values(1, "x", False) == '1 | "x" | false'
    assert format_values() == ""


def test_power_of_ten_builds_modulus():
    assert power_of_ten(9) + 7 == 1000000007
    assert power_of_ten(0) == 1
    with pytest.raises(ValueError):
        power_of_ten(-1)


@given(st.integers(min_value=0, max_value=40))
def test_power_of_ten_digits(n):
    assert str(power_of_ten(n)) == "1" + "0" * n


def test_fast_read_sequence():
    stream = io.StringIO("  \n-123 45\n6")
    assert fast_read(stream) == -123
    assert fast_read(stream) == 45
    assert fast_read(stream) == 6
    with pytest.raises(EOFError):
        fast_read(stream)


@given(st.integers(min_value=-(10**18), max_value=10**18))
def test_fast_read_round_trip(x):
    assert fast_read(io.StringIO(f" \n {x}\n")) == x


def test_random_int_in_range():
    rng = random.Random(11)
    values = [random_int(-3, 3, rng) for _ in range(500)]
    assert set(values) == set(range(-3, 4))


def test_random_int_single_value():
    assert random_int(5, 5) == 5


def test_random_int_bad_range():
    with pytest.raises(ValueError):
        random_int(4, 2)