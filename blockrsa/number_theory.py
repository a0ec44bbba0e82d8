"""Number theory behind key generation: inverses and probable primes."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from blockrsa.errors import GenerationFailed, InvalidModulus
from blockrsa.random_source import RandomSource, default_source

logger = logging.getLogger(__name__)

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
MILLER_RABIN_ROUNDS = 40


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """Extended Euclidean algorithm without recursion.

    Returns ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``. Iterating
    keeps thousand-bit operands well clear of the recursion limit.
    """

    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    return old_r, old_s, old_t


def mod_inverse(a: int, m: int) -> int:
    """Return ``x`` in ``[0, m)`` with ``(a * x) % m == 1``."""

    m0 = m
    if m0 < 2:
        raise InvalidModulus(a, m0)
    g, x, _ = egcd(a % m0, m0)
    if g != 1:
        raise InvalidModulus(a, m0)
    if x < 0:
        x += m0
    return x


def is_probable_prime(n: int, rounds: int = MILLER_RABIN_ROUNDS, rng: Optional[RandomSource] = None) -> bool:
    """Return ``True`` when ``n`` is probably prime using Miller–Rabin."""

    if n < 2:
        return False

    for p in SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    rng = rng or default_source()

    # n - 1 == 2**s * d with d odd
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = rng.randbelow(n - 3) + 2  # 2 <= a <= n-2
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def generate_prime(
    bits: int,
    rng: Optional[RandomSource] = None,
    *,
    rounds: int = MILLER_RABIN_ROUNDS,
    max_attempts: Optional[int] = None,
) -> int:
    """Generate a random probable prime of exactly ``bits`` bits.

    The two most significant bits are forced on, so the product of two
    ``bits``-bit primes always has ``2 * bits`` bits. ``max_attempts`` bounds
    the number of candidates tried; ``None`` keeps searching.
    """

    if bits < 2:
        raise GenerationFailed(bits, "prime size must be at least 2 bits")

    rng = rng or default_source()
    top = (1 << (bits - 1)) | (1 << (bits - 2))
    attempts = 0

    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        try:
            cand = rng.randbits(bits) | top | 1
            found = is_probable_prime(cand, rounds, rng)
        except Exception as exc:
            raise GenerationFailed(bits, f"random source error: {exc}") from exc
        if found:
            logger.debug("Found %d-bit prime after %d candidate(s)", bits, attempts)
            return cand

    raise GenerationFailed(bits, f"no prime among {max_attempts} candidates")


__all__ = [
    "egcd",
    "mod_inverse",
    "is_probable_prime",
    "generate_prime",
    "SMALL_PRIMES",
    "MILLER_RABIN_ROUNDS",
]
