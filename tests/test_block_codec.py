import pytest


def test_block_size_uses_fixed_margin():
    from blockrsa.block_codec import PADDING_MARGIN, block_size_for

    assert PADDING_MARGIN == 11
    assert block_size_for((1 << 1023) + 1) == 117
    assert block_size_for((1 << 2047) + 1) == 245
    assert block_size_for((1 << 63) + 1) == -3


def test_encrypt_block_is_plain_modular_exponentiation(keys_512):
    from blockrsa.block_codec import encrypt_block

    n, e, _ = keys_512
    block = b"textbook"
    assert encrypt_block(block, e, n) == pow(int.from_bytes(block, "big"), e, n)
    # deterministic: no padding, no randomness
    assert encrypt_block(block, e, n) == encrypt_block(block, e, n)


def test_block_roundtrip(keys_512):
    from blockrsa.block_codec import decrypt_block, encrypt_block

    n, e, d = keys_512
    block = "Привет, RSA".encode("utf-8")
    assert decrypt_block(encrypt_block(block, e, n), d, n) == block


def test_decrypt_block_drops_leading_zero_bytes(keys_512):
    from blockrsa.block_codec import decrypt_block, encrypt_block

    n, e, d = keys_512
    assert decrypt_block(encrypt_block(b"\x00\x00AB", e, n), d, n) == b"AB"
    assert decrypt_block(encrypt_block(b"\x00", e, n), d, n) == b""


def test_encrypt_block_rejects_value_not_below_modulus(keys_512):
    from blockrsa.block_codec import encrypt_block
    from blockrsa.errors import BlockOutOfRange

    n, e, _ = keys_512
    too_big = n.to_bytes((n.bit_length() + 7) // 8, "big")
    with pytest.raises(BlockOutOfRange):
        encrypt_block(too_big, e, n)
