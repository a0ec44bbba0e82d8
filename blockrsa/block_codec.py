"""Single-block textbook RSA transforms."""
from __future__ import annotations

from blockrsa.errors import BlockOutOfRange

# Bytes held back from every block, mirroring PKCS#1 v1.5 overhead.
# No padding is actually applied.
PADDING_MARGIN = 11


def block_size_for(n: int) -> int:
    """Plaintext bytes per block for modulus ``n``; may be zero or negative."""

    return n.bit_length() // 8 - PADDING_MARGIN


def encrypt_block(block: bytes, e: int, n: int) -> int:
    m = int.from_bytes(block, "big", signed=False)
    if m >= n:
        raise BlockOutOfRange("Block value is not below the modulus")
    return pow(m, e, n)


def decrypt_block(ciphertext: int, d: int, n: int) -> bytes:
    """Decrypt one block to its minimal big-endian bytes.

    Leading zero bytes of the original block are not recovered.
    """

    m = pow(ciphertext, d, n)
    return m.to_bytes((m.bit_length() + 7) // 8, "big")


__all__ = ["PADDING_MARGIN", "block_size_for", "encrypt_block", "decrypt_block"]
