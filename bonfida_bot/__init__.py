"""Bonfida Bot SDK - Python instruction encoding for the bonfida-bot program on Solana.

This SDK builds the binary instructions understood by the on-chain
bonfida-bot program. Submitting and signing transactions is left to the
caller.

Example:
    from bonfida_bot import build_deposit_instruction

    ix = build_deposit_instruction(program_id, mint, pool, ...)
"""

__version__ = "0.1.0"

from .accounts import (
    deserialize_pool_asset,
    deserialize_pool_assets,
    deserialize_pool_header,
    serialize_pool_asset,
    serialize_pool_header,
)
from .constants import (
    CREATE_ORDER_FIELDS_SIZE,
    INSTRUCTION_CREATE,
    INSTRUCTION_CREATE_ORDER,
    INSTRUCTION_DEPOSIT,
    INSTRUCTION_INIT,
    INSTRUCTION_INIT_ORDER_TRACKER,
    POOL_ASSET_SIZE,
    POOL_HEADER_SIZE,
    POOL_SEED_LEN,
    POOL_SEED_PREFIX_LEN,
    RENT_SYSVAR_ID,
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
)
from .errors import (
    ArityMismatchError,
    BonfidaBotError,
    IntegerRangeError,
    InvalidAccountDataError,
    InvalidEnumValueError,
    InvalidInstructionDataError,
    MissingAccountError,
)
from .instruction_data import (
    decode_create_data,
    decode_create_order_data,
    decode_deposit_data,
    decode_init_data,
    decode_init_order_tracker_data,
    decode_instruction_data,
)
from .instructions import (
    build_create_instruction,
    build_create_order_instruction,
    build_deposit_instruction,
    build_init_instruction,
    build_init_order_tracker_instruction,
)
from .pda import find_pool_address, get_pool_address
from .types import (
    U8,
    U16,
    U32,
    U64,
    CreateData,
    CreateOrderData,
    DepositData,
    FixedWidthUInt,
    InitData,
    InitOrderTrackerData,
    InstructionTag,
    OrderSide,
    OrderType,
    PoolAsset,
    PoolHeader,
    SelfTradeBehavior,
)
from .utils import (
    concat_pool_seed,
    decode_u8,
    decode_u16,
    decode_u32,
    decode_u64,
    encode_u8,
    encode_u16,
    encode_u32,
    encode_u64,
)

__all__ = [
    # Version
    "__version__",
    # Instruction Builders
    "build_init_instruction",
    "build_init_order_tracker_instruction",
    "build_create_instruction",
    "build_deposit_instruction",
    "build_create_order_instruction",
    # Instruction Decoders
    "decode_instruction_data",
    "decode_init_data",
    "decode_init_order_tracker_data",
    "decode_create_data",
    "decode_deposit_data",
    "decode_create_order_data",
    # Pool Accounts
    "serialize_pool_header",
    "deserialize_pool_header",
    "serialize_pool_asset",
    "deserialize_pool_asset",
    "deserialize_pool_assets",
    # PDA Functions
    "get_pool_address",
    "find_pool_address",
    # Types - Enums
    "InstructionTag",
    "OrderSide",
    "OrderType",
    "SelfTradeBehavior",
    # Types - Integers
    "FixedWidthUInt",
    "U8",
    "U16",
    "U32",
    "U64",
    # Types - Account Data
    "PoolHeader",
    "PoolAsset",
    # Types - Instruction Data
    "InitData",
    "InitOrderTrackerData",
    "CreateData",
    "DepositData",
    "CreateOrderData",
    # Errors
    "BonfidaBotError",
    "IntegerRangeError",
    "InvalidEnumValueError",
    "ArityMismatchError",
    "MissingAccountError",
    "InvalidInstructionDataError",
    "InvalidAccountDataError",
    # Constants
    "TOKEN_PROGRAM_ID",
    "SYSTEM_PROGRAM_ID",
    "RENT_SYSVAR_ID",
    "INSTRUCTION_INIT",
    "INSTRUCTION_INIT_ORDER_TRACKER",
    "INSTRUCTION_CREATE",
    "INSTRUCTION_DEPOSIT",
    "INSTRUCTION_CREATE_ORDER",
    "POOL_SEED_LEN",
    "POOL_SEED_PREFIX_LEN",
    "POOL_HEADER_SIZE",
    "POOL_ASSET_SIZE",
    "CREATE_ORDER_FIELDS_SIZE",
    "U8_MAX",
    "U16_MAX",
    "U32_MAX",
    "U64_MAX",
    # Utils
    "concat_pool_seed",
    "encode_u8",
    "encode_u16",
    "encode_u32",
    "encode_u64",
    "decode_u8",
    "decode_u16",
    "decode_u32",
    "decode_u64",
]
