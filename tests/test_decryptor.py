import random
import threading
import time

import pytest


def _delayed(decrypt_block, delays):
    """Wrap decrypt_block so each ciphertext sleeps for its own delay first."""

    def wrapper(ciphertext, d, n):
        time.sleep(delays.get(ciphertext, 0.0))
        return decrypt_block(ciphertext, d, n)

    return wrapper


def test_empty_sequence_decrypts_to_empty_string(keys_512):
    from blockrsa.decryptor import decrypt, decrypt_bytes

    n, _, d = keys_512
    assert decrypt([], d, n) == ""
    assert decrypt_bytes([], d, n) == b""


def test_roundtrip_multilingual_text(keys_512):
    from blockrsa.decryptor import decrypt
    from blockrsa.encryptor import encrypt

    n, e, d = keys_512
    message = "War and Peace / Война и мир — " * 40
    ciphertexts, _ = encrypt(message, e, n)
    assert len(ciphertexts) > 10
    assert decrypt(ciphertexts, d, n) == message


def test_order_survives_reversed_completion(keys_1024, monkeypatch):
    from blockrsa import decryptor
    from blockrsa.encryptor import encrypt

    n, e, d = keys_1024
    message = "A" * 117 + "B" * 117
    ciphertexts, _ = encrypt(message, e, n)
    # block 0 finishes last
    delays = {ciphertexts[0]: 0.2, ciphertexts[1]: 0.0}
    monkeypatch.setattr(decryptor, "decrypt_block", _delayed(decryptor.decrypt_block, delays))

    assert decryptor.decrypt(ciphertexts, d, n) == message


def test_order_is_stable_under_random_delays(keys_512, monkeypatch):
    from blockrsa import decryptor
    from blockrsa.encryptor import encrypt

    n, e, d = keys_512
    message = "".join(f"<{i:03d}>" for i in range(120))
    ciphertexts, _ = encrypt(message, e, n)
    original = decryptor.decrypt_block
    rng = random.Random(5)

    results = set()
    for _ in range(5):
        delays = {c: rng.uniform(0, 0.02) for c in ciphertexts}
        monkeypatch.setattr(decryptor, "decrypt_block", _delayed(original, delays))
        results.add(decryptor.decrypt(ciphertexts, d, n))
    assert results == {message}


def test_worker_cap(keys_512):
    from blockrsa.decryptor import decrypt
    from blockrsa.encryptor import encrypt

    n, e, d = keys_512
    message = "capped pool " * 30
    ciphertexts, _ = encrypt(message, e, n)
    assert decrypt(ciphertexts, d, n, max_workers=1) == message
    assert decrypt(ciphertexts, d, n, max_workers=3) == message
    with pytest.raises(ValueError):
        decrypt(ciphertexts, d, n, max_workers=0)


def test_uses_one_thread_per_block_by_default(keys_512, monkeypatch):
    from blockrsa import decryptor
    from blockrsa.encryptor import encrypt

    n, e, d = keys_512
    ciphertexts, _ = encrypt("t" * 53 * 4, e, n)
    barrier = threading.Barrier(len(ciphertexts), timeout=5)
    original = decryptor.decrypt_block

    def wait_for_all(ciphertext, d, n):
        # only passes if every block runs at the same time
        barrier.wait()
        return original(ciphertext, d, n)

    monkeypatch.setattr(decryptor, "decrypt_block", wait_for_all)
    assert decryptor.decrypt(ciphertexts, d, n) == "t" * 53 * 4


def test_failing_block_reports_its_index(keys_512, monkeypatch):
    from blockrsa import decryptor
    from blockrsa.encryptor import encrypt
    from blockrsa.errors import DecryptionFailed

    n, e, d = keys_512
    ciphertexts, _ = encrypt("q" * 53 * 3, e, n)
    bad = ciphertexts[2]
    original = decryptor.decrypt_block

    def flaky(ciphertext, d, n):
        if ciphertext == bad:
            raise ArithmeticError("boom")
        return original(ciphertext, d, n)

    monkeypatch.setattr(decryptor, "decrypt_block", flaky)
    with pytest.raises(DecryptionFailed) as info:
        decryptor.decrypt(ciphertexts, d, n)
    assert info.value.index == 2
    assert isinstance(info.value.__cause__, ArithmeticError)


def test_preset_cancel_token(keys_512):
    from blockrsa.decryptor import decrypt
    from blockrsa.encryptor import encrypt
    from blockrsa.errors import Cancelled

    n, e, d = keys_512
    ciphertexts, _ = encrypt("cancel me", e, n)
    token = threading.Event()
    token.set()
    with pytest.raises(Cancelled):
        decrypt(ciphertexts, d, n, cancel=token)


def test_cancel_while_running(keys_512, monkeypatch):
    from blockrsa import decryptor
    from blockrsa.encryptor import encrypt
    from blockrsa.errors import Cancelled

    n, e, d = keys_512
    ciphertexts, _ = encrypt("c" * 53 * 4, e, n)
    token = threading.Event()
    original = decryptor.decrypt_block

    def cancel_on_first(ciphertext, d, n):
        token.set()
        return original(ciphertext, d, n)

    monkeypatch.setattr(decryptor, "decrypt_block", cancel_on_first)
    with pytest.raises(Cancelled):
        decryptor.decrypt(ciphertexts, d, n, cancel=token, max_workers=1)


def test_timeout_raises_cancelled(keys_512, monkeypatch):
    from blockrsa import decryptor
    from blockrsa.encryptor import encrypt
    from blockrsa.errors import Cancelled

    n, e, d = keys_512
    ciphertexts, _ = encrypt("slow", e, n)
    monkeypatch.setattr(
        decryptor,
        "decrypt_block",
        _delayed(decryptor.decrypt_block, {ciphertexts[0]: 0.5}),
    )
    with pytest.raises(Cancelled):
        decryptor.decrypt(ciphertexts, d, n, timeout=0.05)


def test_invalid_utf8_is_replaced(keys_512, caplog):
    import logging

    from blockrsa.block_codec import encrypt_block
    from blockrsa.decryptor import decrypt

    n, e, d = keys_512
    ciphertexts = [encrypt_block(b"ok \xff", e, n)]
    with caplog.at_level(logging.WARNING, logger="blockrsa.decryptor"):
        text = decrypt(ciphertexts, d, n)
    assert text == "ok �"
    assert "not valid UTF-8" in caplog.text
