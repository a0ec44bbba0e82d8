"""Randomness sources used for prime generation.

Key generation never reaches for a module-level generator; callers pass a
:class:`RandomSource` (or get :func:`default_source`). Tests use
:class:`SeededRandomSource` to make key generation reproducible.
"""
from __future__ import annotations

import random
import secrets
from typing import Protocol


class RandomSource(Protocol):
    def randbits(self, k: int) -> int:
        ...

    def randbelow(self, n: int) -> int:
        ...


class SystemRandomSource:
    """Cryptographically secure source backed by :mod:`secrets`."""

    def randbits(self, k: int) -> int:
        return secrets.randbits(k)

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


class SeededRandomSource:
    """Deterministic source for tests and reproducible demos.

    Not suitable for real keys: the whole key pair follows from ``seed``.
    """

    def __init__(self, seed: int | str | bytes) -> None:
        self._rng = random.Random(seed)

    def randbits(self, k: int) -> int:
        return self._rng.getrandbits(k)

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)


_DEFAULT = SystemRandomSource()


def default_source() -> RandomSource:
    return _DEFAULT


__all__ = ["RandomSource", "SystemRandomSource", "SeededRandomSource", "default_source"]
