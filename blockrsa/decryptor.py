"""Concurrent block decryption with order-preserving reassembly.

Every ciphertext block is decrypted by its own task. Tasks finish in
whatever order the scheduler allows; each result lands in the slot of its
block index, and the plaintext is joined from slot 0 upwards once every
task has reported.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import List, Optional, Sequence, Tuple

from blockrsa.block_codec import decrypt_block
from blockrsa.errors import Cancelled, DecryptionFailed

logger = logging.getLogger(__name__)


def _decrypt_unit(
    index: int,
    ciphertext: int,
    d: int,
    n: int,
    cancel: Optional[threading.Event],
) -> Tuple[int, bytes]:
    if cancel is not None and cancel.is_set():
        raise Cancelled(f"Block {index} cancelled before decryption")
    return index, decrypt_block(ciphertext, d, n)


def decrypt_bytes(
    ciphertexts: Sequence[int],
    d: int,
    n: int,
    *,
    max_workers: Optional[int] = None,
    cancel: Optional[threading.Event] = None,
    timeout: Optional[float] = None,
) -> bytes:
    """Decrypt ``ciphertexts`` concurrently and join the blocks in order.

    ``max_workers`` defaults to one worker per block. Setting ``cancel`` or
    exceeding ``timeout`` seconds raises :class:`Cancelled`; a failing block
    raises :class:`DecryptionFailed` carrying its index. Either way no
    partial plaintext is returned.
    """

    ciphertexts = list(ciphertexts)
    count = len(ciphertexts)
    if count == 0:
        return b""
    if max_workers is not None and max_workers < 1:
        raise ValueError("max_workers must be at least 1")

    blocks: List[Optional[bytes]] = [None] * count
    pool = ThreadPoolExecutor(
        max_workers=max_workers or count,
        thread_name_prefix="blockrsa-decrypt",
    )
    try:
        futures = {
            pool.submit(_decrypt_unit, index, ciphertext, d, n, cancel): index
            for index, ciphertext in enumerate(ciphertexts)
        }
        try:
            for future in as_completed(futures, timeout=timeout):
                index = futures[future]
                try:
                    slot, block = future.result()
                except Cancelled:
                    raise
                except Exception as exc:
                    raise DecryptionFailed(index) from exc
                blocks[slot] = block
                if cancel is not None and cancel.is_set():
                    raise Cancelled("Decryption cancelled")
        except FuturesTimeoutError as exc:
            raise Cancelled(f"Decryption timed out after {timeout}s") from exc
    except BaseException:
        pool.shutdown(wait=False, cancel_futures=True)
        raise
    pool.shutdown(wait=True)

    logger.debug("Reassembled %d block(s)", count)
    return b"".join(blocks)  # type: ignore[arg-type]


def decrypt(
    ciphertexts: Sequence[int],
    d: int,
    n: int,
    *,
    max_workers: Optional[int] = None,
    cancel: Optional[threading.Event] = None,
    timeout: Optional[float] = None,
) -> str:
    """Decrypt ``ciphertexts`` with the private key ``(d, n)`` into text."""

    data = decrypt_bytes(
        ciphertexts,
        d,
        n,
        max_workers=max_workers,
        cancel=cancel,
        timeout=timeout,
    )
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Decrypted data is not valid UTF-8; undecodable bytes replaced")
        return data.decode("utf-8", errors="replace")


__all__ = ["decrypt_bytes", "decrypt"]
