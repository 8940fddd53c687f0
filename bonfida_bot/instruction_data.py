"""Decoders for bonfida-bot instruction payloads.

These invert the builders in ``instructions``. The pool seed width is not
part of the wire format, so every decoder takes ``seed_len``.
"""

from typing import Tuple, Union

from .constants import CREATE_ORDER_FIELDS_SIZE, POOL_SEED_LEN, PUBKEY_SIZE
from .errors import InvalidInstructionDataError
from .types import (
    CreateData,
    CreateOrderData,
    DepositData,
    InitData,
    InitOrderTrackerData,
    InstructionTag,
    OrderSide,
    OrderType,
    SelfTradeBehavior,
    U64,
    to_enum,
)
from .utils import decode_pubkey, decode_u16, decode_u32, decode_u64, decode_u8

InstructionData = Union[
    InitData,
    InitOrderTrackerData,
    CreateData,
    DepositData,
    CreateOrderData,
]


def _split_seed(data: bytes, tag: InstructionTag, seed_len: int) -> Tuple[bytes, bytes]:
    """Check the opcode and return (pool_seed, remaining fields)."""
    if len(data) == 0:
        raise InvalidInstructionDataError("empty payload")
    if data[0] != tag:
        raise InvalidInstructionDataError(
            f"expected opcode {int(tag)} ({tag.name}), got {data[0]}"
        )
    if len(data) < 1 + seed_len:
        raise InvalidInstructionDataError(
            f"{tag.name} payload too short for a {seed_len}-byte pool seed: "
            f"{len(data)} bytes"
        )
    return bytes(data[1 : 1 + seed_len]), bytes(data[1 + seed_len :])


def _expect_size(tag: InstructionTag, body: bytes, size: int) -> None:
    if len(body) != size:
        raise InvalidInstructionDataError(
            f"{tag.name} expects {size} bytes after the pool seed, got {len(body)}"
        )


def decode_init_data(data: bytes, seed_len: int = POOL_SEED_LEN) -> InitData:
    """Decode an init payload.

    Layout: [0] | pool_seed | max_number_of_assets (u32)
    """
    pool_seed, body = _split_seed(data, InstructionTag.INIT, seed_len)
    _expect_size(InstructionTag.INIT, body, 4)
    return InitData(pool_seed=pool_seed, max_number_of_assets=decode_u32(body, 0))


def decode_init_order_tracker_data(
    data: bytes, seed_len: int = POOL_SEED_LEN
) -> InitOrderTrackerData:
    """Decode an init_order_tracker payload.

    Layout: [1] | pool_seed
    """
    pool_seed, body = _split_seed(data, InstructionTag.INIT_ORDER_TRACKER, seed_len)
    _expect_size(InstructionTag.INIT_ORDER_TRACKER, body, 0)
    return InitOrderTrackerData(pool_seed=pool_seed)


def decode_create_data(data: bytes, seed_len: int = POOL_SEED_LEN) -> CreateData:
    """Decode a create payload.

    Layout: [2] | pool_seed | signal_provider (32) | deposit_amount (u64) * N

    The number of deposit amounts is implied by the payload length.
    """
    pool_seed, body = _split_seed(data, InstructionTag.CREATE, seed_len)
    if len(body) < PUBKEY_SIZE:
        raise InvalidInstructionDataError(
            f"CREATE payload too short for signal provider: {len(body)} bytes"
        )
    amounts = body[PUBKEY_SIZE:]
    if len(amounts) % U64.size() != 0:
        raise InvalidInstructionDataError(
            f"CREATE deposit amounts section is {len(amounts)} bytes, "
            f"not a multiple of {U64.size()}"
        )
    return CreateData(
        pool_seed=pool_seed,
        signal_provider=decode_pubkey(body, 0),
        deposit_amounts=[
            decode_u64(amounts, offset)
            for offset in range(0, len(amounts), U64.size())
        ],
    )


def decode_deposit_data(data: bytes, seed_len: int = POOL_SEED_LEN) -> DepositData:
    """Decode a deposit payload.

    Layout: [3] | pool_seed | pool_token_amount (u64)
    """
    pool_seed, body = _split_seed(data, InstructionTag.DEPOSIT, seed_len)
    _expect_size(InstructionTag.DEPOSIT, body, 8)
    return DepositData(pool_seed=pool_seed, pool_token_amount=decode_u64(body, 0))


def decode_create_order_data(
    data: bytes, seed_len: int = POOL_SEED_LEN
) -> CreateOrderData:
    """Decode a create_order payload.

    Layout (37 bytes after the seed):
    - [0]: side (u8)
    - [1..9]: limit_price (u64 LE)
    - [9..11]: max_quantity (u16 LE)
    - [11]: order_type (u8)
    - [12..20]: client_id (u64 LE)
    - [20]: self_trade_behavior (u8)
    - [21..29]: payer_pool_asset_index (u64 LE)
    - [29..37]: target_pool_asset_index (u64 LE)

    Raises:
        InvalidInstructionDataError: If the payload has the wrong shape
        InvalidEnumValueError: If an enum byte is not a known variant
    """
    pool_seed, body = _split_seed(data, InstructionTag.CREATE_ORDER, seed_len)
    _expect_size(InstructionTag.CREATE_ORDER, body, CREATE_ORDER_FIELDS_SIZE)
    return CreateOrderData(
        pool_seed=pool_seed,
        side=to_enum(OrderSide, decode_u8(body, 0)),
        limit_price=decode_u64(body, 1),
        max_quantity=decode_u16(body, 9),
        order_type=to_enum(OrderType, decode_u8(body, 11)),
        client_id=decode_u64(body, 12),
        self_trade_behavior=to_enum(SelfTradeBehavior, decode_u8(body, 20)),
        payer_pool_asset_index=decode_u64(body, 21),
        target_pool_asset_index=decode_u64(body, 29),
    )


_DECODERS = {
    InstructionTag.INIT: decode_init_data,
    InstructionTag.INIT_ORDER_TRACKER: decode_init_order_tracker_data,
    InstructionTag.CREATE: decode_create_data,
    InstructionTag.DEPOSIT: decode_deposit_data,
    InstructionTag.CREATE_ORDER: decode_create_order_data,
}


def decode_instruction_data(
    data: bytes, seed_len: int = POOL_SEED_LEN
) -> InstructionData:
    """Decode any bonfida-bot payload, dispatching on its opcode byte."""
    if len(data) == 0:
        raise InvalidInstructionDataError("empty payload")
    try:
        tag = InstructionTag(data[0])
    except ValueError:
        raise InvalidInstructionDataError(f"unknown opcode {data[0]}") from None
    return _DECODERS[tag](data, seed_len)
