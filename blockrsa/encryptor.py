"""Split a message into fixed-size blocks and encrypt each one."""
from __future__ import annotations

import logging
from typing import List, Tuple, Union

from blockrsa.block_codec import block_size_for, encrypt_block
from blockrsa.errors import KeyTooSmall

logger = logging.getLogger(__name__)

Message = Union[str, bytes, bytearray, memoryview]


def _ensure_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError("message must be str or bytes-like")
    return bytes(message)


def split_blocks(data: bytes, block_size: int) -> List[bytes]:
    """Cut ``data`` into consecutive ``block_size`` slices; the last may be shorter."""

    if block_size <= 0:
        raise ValueError("block_size must be positive")
    return [data[i:i + block_size] for i in range(0, len(data), block_size)]


def encrypt(message: Message, e: int, n: int) -> Tuple[List[int], int]:
    """Encrypt ``message`` block by block with the public key ``(e, n)``.

    Returns the ciphertexts in block order together with the block size.
    """

    block_size = block_size_for(n)
    if block_size <= 0:
        raise KeyTooSmall(n.bit_length(), block_size)
    logger.info("Maximum block size: %d bytes", block_size)

    data = _ensure_bytes(message)
    ciphertexts = [encrypt_block(block, e, n) for block in split_blocks(data, block_size)]

    logger.debug("Encrypted %d byte(s) into %d block(s)", len(data), len(ciphertexts))
    return ciphertexts, block_size


__all__ = ["Message", "split_blocks", "encrypt"]
