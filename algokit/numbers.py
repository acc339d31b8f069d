"""Modular arithmetic and prime number helpers."""

from __future__ import annotations

from math import isqrt

MOD = 10**9 + 7


def binpow(a: int, b: int, mod: int) -> int:
    """Return ``a ** b`` modulo ``mod`` by repeated squaring."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if mod <= 0:
        raise ValueError("modulus must be positive")
    a %= mod
    result = 1
    while b:
        if b & 1:
            result = result * a % mod
        a = a * a % mod
        b >>= 1
    return result


def cnr(n: int, r: int, mod: int = MOD) -> int:
    """Return the binomial coefficient C(n, r) modulo the prime ``mod``.

    Returns 0 when ``r > n``. Modular inverses of 2..r are built with the
    linear recurrence, so ``r`` must be smaller than ``mod``.
    """
    if r > n:
        return 0
    if r < 0:
        raise ValueError("r must be non-negative")
    if mod < 2:
        raise ValueError("modulus must be a prime")
    if r >= mod:
        raise ValueError("r must be smaller than the modulus")

    inverses = [1, 1]
    for i in range(2, r + 1):
        inverses.append(mod - (mod // i) * inverses[mod % i] % mod)

    result = 1
    for inverse in inverses[2 : r + 1]:
        result = result * inverse % mod
    for factor in range(n, n - r, -1):
        result = result * (factor % mod) % mod
    return result


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` with multiplicity, in ascending order."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors: list[int] = []
    for p in (2, 3):
        while n % p == 0:
            factors.append(p)
            n //= p
    i = 5
    while i * i <= n:
        for p in (i, i + 2):
            while n % p == 0:
                factors.append(p)
                n //= p
        i += 6
    if n > 1:
        factors.append(n)
    return sorted(factors)


def sieve(n: int) -> list[int]:
    """Return all primes not greater than ``n``, in ascending order."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    is_prime[0] = is_prime[1] = 0
    for p in range(2, isqrt(n) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return [p for p, flag in enumerate(is_prime) if flag]