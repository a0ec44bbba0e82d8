"""Timed generate, encrypt and decrypt session."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from blockrsa.decryptor import decrypt
from blockrsa.encryptor import encrypt
from blockrsa.keys import Keypair, generate_keys
from blockrsa.random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class PipelineReport:
    """Sizes and stage timings of one pipeline run."""

    bits: int
    block_size: int
    message_bytes: int
    message_chars: int
    block_count: int
    keygen_seconds: float
    encrypt_seconds: float
    decrypt_seconds: float
    identical: bool

    @property
    def message_mib(self) -> float:
        return self.message_bytes / 1024 / 1024


def run_pipeline(
    message: str,
    bits: int,
    *,
    rng: Optional[RandomSource] = None,
    max_workers: Optional[int] = None,
) -> Tuple[PipelineReport, Keypair, List[int]]:
    """Generate a key pair, encrypt ``message``, decrypt it back and time each stage."""

    start = time.perf_counter()
    keypair = generate_keys(bits, rng)
    keys_done = time.perf_counter()

    ciphertexts, block_size = encrypt(message, keypair.e, keypair.n)
    encrypt_done = time.perf_counter()

    recovered = decrypt(ciphertexts, keypair.d, keypair.n, max_workers=max_workers)
    decrypt_done = time.perf_counter()

    report = PipelineReport(
        bits=keypair.bits,
        block_size=block_size,
        message_bytes=len(message.encode("utf-8")),
        message_chars=len(message),
        block_count=len(ciphertexts),
        keygen_seconds=keys_done - start,
        encrypt_seconds=encrypt_done - keys_done,
        decrypt_seconds=decrypt_done - encrypt_done,
        identical=recovered == message,
    )
    if not report.identical:
        logger.warning("Decrypted text differs from the original message")
    return report, keypair, ciphertexts


__all__ = ["PipelineReport", "run_pipeline"]
