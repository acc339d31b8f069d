"""Polynomial rolling hashes over strings and integer sequences."""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence

PRIMES = (
    993146723, 996752089, 993912011, 993276811, 990439561, 999134321, 1000034863,
    990310561, 1002852971, 990902071, 1002552547, 1004791829, 1006000901, 1000242487,
    998810363, 998510393, 1005429353, 1006591627, 1007173513, 1001089151, 1007873257,
    1002742243, 997222561, 995034571, 993148837, 1007335169, 1007688763, 1000458911,
    995690771, 1000963499, 1004540941, 996669341, 1009791163, 1005362731, 990259279,
    1004949923, 999257549, 994083157, 997000859, 991488709, 990129697, 991686341,
    1006200047, 995269721, 998938153, 1001274091, 1008215713, 1005259139, 990913177,
    1000705361, 992677943, 1001761259, 1008933127, 991650763, 1003413907, 1001591489,
    999972499, 1001013547, 996769511, 1001061553, 998571107, 1005498281, 1004864467,
    1008537151, 995490059, 994271963, 1000330937, 1007601659, 999935701, 1007473871,
    1005960979, 1009408901, 1003306259, 1001731277, 993759673, 1005202493, 994289501,
    992293103, 1007638627, 991446553, 991299677, 1007753729, 1003063247, 1008357107,
    995452751, 995169853, 993065287, 1009534639, 991566083, 995628827, 992550289,
    993078701, 1009667231, 996338407, 996761473, 1008855797, 1005879461, 1000745609,
    997377253, 1000759181,
)


@dataclass(frozen=True)
class HashParams:
    """Moduli and bases of the hash; one pair per hash component."""

    moduli: tuple[int, ...]
    bases: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.moduli or len(self.moduli) != len(self.bases):
            raise ValueError("need the same positive number of moduli and bases")
        for mod, base in zip(self.moduli, self.bases):
            if mod < 2:
                raise ValueError("moduli must be at least 2")
            if not 0 <= base < mod:
                raise ValueError("each base must lie in [0, modulus)")


def random_params(k: int = 1, rng: random.Random | None = None) -> HashParams:
    """Pick ``k`` random prime moduli from ``PRIMES`` and a base in ``[2, mod)`` for each."""
    if k < 1:
        raise ValueError("k must be positive")
    rng = rng if rng is not None else random.Random()
    moduli = []
    bases = []
    for _ in range(k):
        mod = rng.choice(PRIMES)
        moduli.append(mod)
        bases.append(rng.randrange(2, mod))
    return HashParams(tuple(moduli), tuple(bases))


@lru_cache(maxsize=None)
def _shared_params() -> HashParams:
    return random_params(1)


class RollingHash:
    """Prefix hashes of a sequence, giving substring hashes in O(k).

    Hashes built without explicit ``params`` share one process-wide
    random choice, so they can be compared with each other.
    """

    def __init__(self, seq: str | Sequence[int], params: HashParams | None = None) -> None:
        codes = [ord(c) for c in seq] if isinstance(seq, str) else list(seq)
        self._params = params if params is not None else _shared_params()
        self._n = len(codes)
        self._prefix: list[list[int]] = []
        self._powers: list[list[int]] = []
        for mod, base in zip(self._params.moduli, self._params.bases):
            prefix = []
            h = 0
            for code in codes:
                h = (h * base + code) % mod
                prefix.append(h)
            powers = [1]
            for _ in codes:
                powers.append(powers[-1] * base % mod)
            self._prefix.append(prefix)
            self._powers.append(powers)

    def get(self, l: int, r: int) -> tuple[int, ...]:
        """Return the hash of positions ``l..r`` inclusive, one value per modulus."""
        if l > r:
            raise ValueError("l must not exceed r")
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] out of bounds")
        result = []
        for mod, prefix, powers in zip(self._params.moduli, self._prefix, self._powers):
            h = prefix[r]
            if l > 0:
                h = (h - powers[r - l + 1] * prefix[l - 1]) % mod
            result.append(h)
        return tuple(result)

    def same(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        """Return whether ranges ``l1..r1`` and ``l2..r2`` hash equal."""
        return self.get(l1, r1) == self.get(l2, r2)