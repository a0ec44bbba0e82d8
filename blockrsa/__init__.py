"""Textbook RSA over fixed-size plaintext blocks.

Not a secure RSA implementation: no padding is applied and the blocks are
encrypted deterministically.
"""
from __future__ import annotations

from .block_codec import block_size_for, decrypt_block, encrypt_block
from .decryptor import decrypt, decrypt_bytes
from .encryptor import encrypt
from .errors import (
    BlockOutOfRange,
    BlockRsaError,
    Cancelled,
    DecryptionFailed,
    GenerationFailed,
    InvalidModulus,
    KeyTooSmall,
)
from .keys import PUBLIC_EXPONENT, Keypair, generate_keys
from .number_theory import generate_prime, mod_inverse
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource

__all__ = [
    "generate_keys",
    "generate_prime",
    "mod_inverse",
    "encrypt",
    "decrypt",
    "decrypt_bytes",
    "encrypt_block",
    "decrypt_block",
    "block_size_for",
    "Keypair",
    "PUBLIC_EXPONENT",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "BlockRsaError",
    "GenerationFailed",
    "InvalidModulus",
    "KeyTooSmall",
    "BlockOutOfRange",
    "DecryptionFailed",
    "Cancelled",
]
