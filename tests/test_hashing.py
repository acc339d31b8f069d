import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.hashing import PRIMES, HashParams, RollingHash, random_params

FIXED = HashParams(moduli=(1_000_000_007, 998_244_353), bases=(131, 257))


def test_single_character_hash_is_its_code():
    rh = RollingHash("z", FIXED)
    assert rh.get(0, 0) == (ord("z"), ord("z"))


def test_repeated_halves_are_same():
    rh = RollingHash("abab", FIXED)
    assert rh.same(0, 1, 2, 3)
    assert not rh.same(0, 0, 1, 1)


def test_string_and_code_list_agree():
    text = "hello"
    assert RollingHash(text, FIXED).get(1, 4) == RollingHash([ord(c) for c in text], FIXED).get(1, 4)


def test_default_params_are_shared():
    assert RollingHash("abc").get(0, 2) == RollingHash("xabc").get(1, 3)


@given(st.text(alphabet="abc", min_size=1, max_size=30), st.data())
def test_substring_hash_matches_standalone_hash(text, data):
    l = data.draw(st.integers(0, len(text) - 1))
    r = data.draw(st.integers(l, len(text) - 1))
    whole = RollingHash(text, FIXED)
    part = RollingHash(text[l : r + 1], FIXED)
    assert whole.get(l, r) == part.get(0, r - l)


def test_random_params_properties():
    params = random_params(3, random.Random(11))
    assert len(params.moduli) == 3
    assert len(params.bases) == 3
    for mod, base in zip(params.moduli, params.bases):
        assert mod in PRIMES
        assert 2 <= base < mod


def test_random_params_deterministic_for_seed():
    first = random_params(2, random.Random(5))
    second = random_params(2, random.Random(5))
    assert len(first.moduli) == 2
    assert len(first.bases) == 2
    assert first.moduli == second.moduli
    assert first.bases == second.bases
    for mod, base in zip(first.moduli, first.bases):
        assert mod in PRIMES
        assert 2 <= base < mod


def test_errors():
    with pytest.raises(ValueError):
        random_params(0)
    with pytest.raises(ValueError):
        HashParams(moduli=(7,), bases=())
    with pytest.raises(ValueError):
        HashParams(moduli=(7,), bases=(9,))
    rh = RollingHash("abc", FIXED)
    with pytest.raises(ValueError):
        rh.get(2, 1)
    with pytest.raises(IndexError):
        rh.get(0, 3)