"""Exceptions raised by the block RSA pipeline."""
from __future__ import annotations


class BlockRsaError(Exception):
    """Base class for every error raised by :mod:`blockrsa`."""


class GenerationFailed(BlockRsaError, RuntimeError):
    """Raised when no probable prime could be produced."""

    def __init__(self, bits: int, reason: str) -> None:
        super().__init__(f"Prime generation failed for {bits} bits: {reason}")
        self.bits = bits


class InvalidModulus(BlockRsaError, ValueError):
    """Raised when ``a`` has no inverse modulo ``m``."""

    def __init__(self, a: int, m: int) -> None:
        super().__init__(f"No modular inverse of {a} modulo {m}")
        self.a = a
        self.m = m


class KeyTooSmall(BlockRsaError, ValueError):
    """Raised when the modulus leaves no room for a plaintext block."""

    def __init__(self, modulus_bits: int, block_size: int) -> None:
        super().__init__(
            f"A {modulus_bits}-bit modulus gives block size {block_size}; "
            "use a larger key"
        )
        self.modulus_bits = modulus_bits
        self.block_size = block_size


class BlockOutOfRange(BlockRsaError, ValueError):
    """Raised when a block's integer value is not below the modulus."""


class DecryptionFailed(BlockRsaError, RuntimeError):
    """Raised when decrypting one of the ciphertext blocks fails."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Decryption of block {index} failed")
        self.index = index


class Cancelled(BlockRsaError, RuntimeError):
    """Raised when decryption is cancelled or times out."""


__all__ = [
    "BlockRsaError",
    "GenerationFailed",
    "InvalidModulus",
    "KeyTooSmall",
    "BlockOutOfRange",
    "DecryptionFailed",
    "Cancelled",
]
