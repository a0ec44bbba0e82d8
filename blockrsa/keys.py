"""RSA key pair generation."""
from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from blockrsa.block_codec import block_size_for
from blockrsa.number_theory import generate_prime, mod_inverse
from blockrsa.random_source import RandomSource, default_source

logger = logging.getLogger(__name__)

PUBLIC_EXPONENT = 65537


class Keypair(NamedTuple):
    """Modulus with public and private exponent; unpacks as ``(n, e, d)``."""

    n: int
    e: int
    d: int

    @property
    def bits(self) -> int:
        return self.n.bit_length()

    @property
    def block_size(self) -> int:
        return block_size_for(self.n)


def generate_keys(bits: int, rng: Optional[RandomSource] = None) -> Keypair:
    """Generate a textbook RSA key pair with a ``bits``-bit modulus.

    Both primes get ``bits // 2`` bits. The public exponent is fixed at
    65537 and there is no retry: should it share a factor with ``phi``,
    :class:`~blockrsa.errors.InvalidModulus` propagates to the caller.
    """

    rng = rng or default_source()
    p = generate_prime(bits // 2, rng)
    q = generate_prime(bits // 2, rng)
    n = p * q
    phi = (p - 1) * (q - 1)

    e = PUBLIC_EXPONENT
    d = mod_inverse(e, phi)

    logger.debug("Generated %d-bit modulus", n.bit_length())
    return Keypair(n=n, e=e, d=d)


__all__ = ["Keypair", "PUBLIC_EXPONENT", "generate_keys"]
