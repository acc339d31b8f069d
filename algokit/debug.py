"""Debug formatting, fast integer input and small helpers."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping, Set
from typing import TextIO


def to_debug_string(value) -> str:
    """Render ``value`` for debugging.

    Booleans print as ``true``/``false``, strings are double-quoted,
    pairs (2-tuples) as ``{a, b}``, lists as ``[a, b]`` and other
    collections as ``{a, b}``; mappings list their ``{key, value}`` pairs.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, tuple) and len(value) == 2:
        return "{" + to_debug_string(value[0]) + ", " + to_debug_string(value[1]) + "}"
    if isinstance(value, list):
        return "[" + ", ".join(map(to_debug_string, value)) + "]"
    if isinstance(value, Mapping):
        items: Iterable = value.items()
    elif isinstance(value, Set):
        try:
            items = sorted(value)
        except TypeError:
            items = value
    elif isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
        items = value
    else:
        return str(value)
    return "{" + ", ".join(map(to_debug_string, items)) + "}"


def format_values(*args) -> str:
    """Render each argument with ``to_debug_string``, separated by `` | ``."""
    return " | ".join(map(to_debug_string, args))


def power_of_ten(n: int) -> int:
    """Return ``10 ** n``."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    return 10**n


def fast_read(stream: TextIO) -> int:
    """Read one integer from ``stream``, skipping spaces and newlines.

    One character after the number is consumed. Returns 0 if the next
    token does not start with a digit.
    """
    c = stream.read(1)
    while c in (" ", "\n"):
        c = stream.read(1)
    if c == "":
        raise EOFError("no integer left in stream")
    sign = 1
    if c == "-":
        sign = -1
        c = stream.read(1)
    number = 0
    while c and "0" <= c <= "9":
        number = number * 10 + ord(c) - ord("0")
        c = stream.read(1)
    return sign * number


def random_int(l: int, r: int, rng: random.Random | None = None) -> int:
    """Return a uniformly random integer in ``l..r`` inclusive."""
    if l > r:
        raise ValueError("l must not exceed r")
    rng = rng if rng is not None else random.Random()
    return rng.randint(l, r)