"""Type definitions for the Bonfida Bot SDK."""

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Type, TypeVar

from solders.pubkey import Pubkey

from .constants import (
    INSTRUCTION_CREATE,
    INSTRUCTION_CREATE_ORDER,
    INSTRUCTION_DEPOSIT,
    INSTRUCTION_INIT,
    INSTRUCTION_INIT_ORDER_TRACKER,
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
)
from .errors import IntegerRangeError, InvalidEnumValueError


class InstructionTag(IntEnum):
    """Opcode byte selecting the on-chain handler."""

    INIT = INSTRUCTION_INIT
    INIT_ORDER_TRACKER = INSTRUCTION_INIT_ORDER_TRACKER
    CREATE = INSTRUCTION_CREATE
    DEPOSIT = INSTRUCTION_DEPOSIT
    CREATE_ORDER = INSTRUCTION_CREATE_ORDER


class OrderSide(IntEnum):
    """Side of a Serum order."""

    BID = 0  # Buy
    ASK = 1  # Sell


class OrderType(IntEnum):
    """Serum order type."""

    LIMIT = 0
    IMMEDIATE_OR_CANCEL = 1
    POST_ONLY = 2


class SelfTradeBehavior(IntEnum):
    """How Serum handles an order matching the same owner's resting order."""

    DECREMENT_TAKE = 0
    CANCEL_PROVIDE = 1
    ABORT_TRANSACTION = 2


E = TypeVar("E", bound=IntEnum)


def to_enum(enum_cls: Type[E], value: int) -> E:
    """Coerce an int or enum member into ``enum_cls``.

    Raises:
        InvalidEnumValueError: If value is not one of the defined variants
    """
    if isinstance(value, bool):
        raise InvalidEnumValueError(enum_cls.__name__, value)
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidEnumValueError(enum_cls.__name__, value) from None


# ============================================================================
# FIXED-WIDTH INTEGERS
# ============================================================================


class FixedWidthUInt(int):
    """Unsigned integer that is range-checked on construction.

    Subclasses set ``BITS``, ``MAX`` and the little-endian ``FORMAT`` used by
    ``struct``. Values that do not fit raise ``IntegerRangeError`` instead
    of being truncated.
    """

    BITS = 0
    MAX = 0
    FORMAT = ""

    def __new__(cls, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"{cls.__name__} requires an int, got {type(value).__name__}"
            )
        if not 0 <= value <= cls.MAX:
            raise IntegerRangeError(value, cls.BITS)
        return super().__new__(cls, value)

    @classmethod
    def size(cls) -> int:
        return cls.BITS // 8

    def encode(self) -> bytes:
        """Encode as little-endian bytes of exactly ``size()`` bytes."""
        return struct.pack(self.FORMAT, self)

    @classmethod
    def decode(cls, data: bytes, offset: int = 0):
        return cls(struct.unpack_from(cls.FORMAT, data, offset)[0])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class U8(FixedWidthUInt):
    BITS = 8
    MAX = U8_MAX
    FORMAT = "<B"


class U16(FixedWidthUInt):
    BITS = 16
    MAX = U16_MAX
    FORMAT = "<H"


class U32(FixedWidthUInt):
    BITS = 32
    MAX = U32_MAX
    FORMAT = "<I"


class U64(FixedWidthUInt):
    BITS = 64
    MAX = U64_MAX
    FORMAT = "<Q"


# ============================================================================
# POOL STATE ACCOUNTS
# ============================================================================


@dataclass
class PoolHeader:
    """Header stored at the start of a pool account."""

    signal_provider: Pubkey
    is_initialized: bool


@dataclass
class PoolAsset:
    """One asset slot of a pool account."""

    mint_address: Pubkey
    amount: int


# ============================================================================
# DECODED INSTRUCTION DATA
# ============================================================================


@dataclass
class InitData:
    """Payload of the init instruction."""

    pool_seed: bytes
    max_number_of_assets: int


@dataclass
class InitOrderTrackerData:
    """Payload of the init_order_tracker instruction."""

    pool_seed: bytes


@dataclass
class CreateData:
    """Payload of the create instruction."""

    pool_seed: bytes
    signal_provider: Pubkey
    deposit_amounts: List[int] = field(default_factory=list)


@dataclass
class DepositData:
    """Payload of the deposit instruction."""

    pool_seed: bytes
    pool_token_amount: int


@dataclass
class CreateOrderData:
    """Payload of the create_order instruction."""

    pool_seed: bytes
    side: OrderSide
    limit_price: int
    max_quantity: int
    order_type: OrderType
    client_id: int
    self_trade_behavior: SelfTradeBehavior
    payer_pool_asset_index: int
    target_pool_asset_index: int
