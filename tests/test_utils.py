"""Tests for utility functions."""

import pytest
from solders.pubkey import Pubkey

from bonfida_bot import (
    IntegerRangeError,
    MissingAccountError,
    concat_pool_seed,
    decode_u16,
    decode_u32,
    decode_u64,
    encode_u16,
    encode_u32,
    encode_u64,
    encode_u8,
)
from bonfida_bot.utils import decode_pubkey, require_account


class TestIntegerEncoding:
    def test_encode_u8(self):
        assert encode_u8(255) == b"\xff"

    def test_encode_u16_boundary(self):
        assert encode_u16(65535) == b"\xff\xff"
        with pytest.raises(IntegerRangeError):
            encode_u16(65536)

    def test_encode_u32(self):
        assert encode_u32(1) == b"\x01\x00\x00\x00"

    def test_encode_u64_zero(self):
        assert encode_u64(0) == bytes(8)

    def test_decode_at_offset(self):
        data = b"\x00" + encode_u16(513) + encode_u32(70000) + encode_u64(2**50)

        assert decode_u16(data, 1) == 513
        assert decode_u32(data, 3) == 70000
        assert decode_u64(data, 7) == 2**50

    def test_decoded_values_are_plain_ints(self):
        assert type(decode_u64(encode_u64(9))) is int


class TestConcatPoolSeed:
    def test_single_bytes(self):
        assert concat_pool_seed(b"abc") == b"abc"

    def test_parts_in_order(self):
        assert concat_pool_seed([b"ab", bytearray(b"c"), b""]) == b"abc"

    def test_empty_list(self):
        assert concat_pool_seed([]) == b""

    def test_memoryview_seed(self):
        assert concat_pool_seed(memoryview(b"\x05\x01")) == b"\x05\x01"

    def test_memoryview_part(self):
        assert concat_pool_seed([b"\x05", memoryview(b"\x01")]) == b"\x05\x01"

    def test_rejects_int_parts(self):
        with pytest.raises(TypeError, match=r"pool_seed\[0\]"):
            concat_pool_seed([3, 1])


class TestDecodeHelpers:
    def test_decode_pubkey(self):
        key = Pubkey.new_unique()

        assert decode_pubkey(b"\x00" + bytes(key), 1) == key

    def test_decode_pubkey_too_short(self):
        with pytest.raises(ValueError):
            decode_pubkey(bytes(31))


class TestRequireAccount:
    def test_returns_key(self):
        key = Pubkey.new_unique()

        assert require_account("pool", key) == key

    def test_raises_on_none(self):
        with pytest.raises(MissingAccountError, match="pool"):
            require_account("pool", None)

    def test_rejects_raw_bytes(self):
        with pytest.raises(TypeError, match="pool must be a Pubkey"):
            require_account("pool", bytes(32))
