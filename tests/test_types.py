"""Tests for types module."""

import pytest

from bonfida_bot import (
    U8,
    U16,
    U32,
    U64,
    U16_MAX,
    U64_MAX,
    IntegerRangeError,
    InstructionTag,
    InvalidEnumValueError,
    OrderSide,
    OrderType,
    SelfTradeBehavior,
)
from bonfida_bot.types import to_enum


class TestInstructionTag:
    def test_opcode_values(self):
        assert InstructionTag.INIT == 0
        assert InstructionTag.INIT_ORDER_TRACKER == 1
        assert InstructionTag.CREATE == 2
        assert InstructionTag.DEPOSIT == 3
        assert InstructionTag.CREATE_ORDER == 4


class TestOrderEnums:
    def test_side_values(self):
        assert OrderSide.BID == 0
        assert OrderSide.ASK == 1

    def test_order_type_values(self):
        assert OrderType.LIMIT == 0
        assert OrderType.IMMEDIATE_OR_CANCEL == 1
        assert OrderType.POST_ONLY == 2

    def test_self_trade_behavior_values(self):
        assert SelfTradeBehavior.DECREMENT_TAKE == 0
        assert SelfTradeBehavior.CANCEL_PROVIDE == 1
        assert SelfTradeBehavior.ABORT_TRANSACTION == 2


class TestToEnum:
    def test_accepts_member(self):
        assert to_enum(OrderSide, OrderSide.ASK) is OrderSide.ASK

    def test_accepts_int(self):
        assert to_enum(OrderType, 2) is OrderType.POST_ONLY

    def test_rejects_unknown_value(self):
        with pytest.raises(InvalidEnumValueError):
            to_enum(SelfTradeBehavior, 3)

    def test_rejects_bool(self):
        with pytest.raises(InvalidEnumValueError):
            to_enum(OrderSide, True)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            to_enum(OrderSide, 7)


class TestFixedWidthUInt:
    def test_u16_max_encodes(self):
        assert U16(65535).encode() == b"\xff\xff"

    def test_u16_overflow_raises(self):
        with pytest.raises(IntegerRangeError) as exc_info:
            U16(65536)
        assert exc_info.value.bits == 16
        assert exc_info.value.value == 65536

    def test_u64_zero_encodes(self):
        assert U64(0).encode() == bytes(8)

    def test_u64_max_encodes(self):
        assert U64(U64_MAX).encode() == b"\xff" * 8

    def test_u64_overflow_raises(self):
        with pytest.raises(IntegerRangeError):
            U64(U64_MAX + 1)

    def test_negative_raises(self):
        with pytest.raises(IntegerRangeError):
            U32(-1)

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            U8(256)

    def test_little_endian(self):
        assert U32(0x01020304).encode() == b"\x04\x03\x02\x01"

    def test_sizes(self):
        assert len(U8(1).encode()) == U8.size() == 1
        assert len(U16(1).encode()) == U16.size() == 2
        assert len(U32(1).encode()) == U32.size() == 4
        assert len(U64(1).encode()) == U64.size() == 8

    def test_behaves_as_int(self):
        value = U16(U16_MAX)
        assert value == 65535
        assert value + 1 == 65536

    def test_rejects_float(self):
        with pytest.raises(TypeError):
            U64(1.0)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            U8(True)

    def test_decode(self):
        assert U16.decode(b"\x00\x34\x12", 1) == 0x1234

    def test_repr(self):
        assert repr(U32(7)) == "U32(7)"
