"""Instruction builders for the Bonfida Bot SDK.

This module provides functions to build the five bonfida-bot program
instructions. Each builder is pure: it serializes its arguments into an
opcode-prefixed payload, lays out the accounts in the order the program
parses them, and returns a ``solders`` Instruction.
"""

import logging
from typing import List, Optional, Sequence

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from .constants import (
    INSTRUCTION_CREATE,
    INSTRUCTION_CREATE_ORDER,
    INSTRUCTION_DEPOSIT,
    INSTRUCTION_INIT,
    INSTRUCTION_INIT_ORDER_TRACKER,
    RENT_SYSVAR_ID,
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from .errors import ArityMismatchError
from .types import OrderSide, OrderType, SelfTradeBehavior, to_enum
from .utils import (
    PoolSeed,
    concat_pool_seed,
    encode_u16,
    encode_u32,
    encode_u64,
    encode_u8,
    require_account,
)

logger = logging.getLogger(__name__)


def _readonly(pubkey: Pubkey) -> AccountMeta:
    return AccountMeta(pubkey=pubkey, is_signer=False, is_writable=False)


def _writable(pubkey: Pubkey) -> AccountMeta:
    return AccountMeta(pubkey=pubkey, is_signer=False, is_writable=True)


def _finish(name: str, program_id: Pubkey, accounts: List[AccountMeta], data: bytes) -> Instruction:
    logger.debug(
        f"Built {name} instruction: opcode={data[0]}, "
        f"{len(data)} data bytes, {len(accounts)} accounts"
    )
    return Instruction(program_id=program_id, accounts=accounts, data=data)


def build_init_instruction(
    program_id: Pubkey,
    mint: Pubkey,
    payer: Pubkey,
    pool: Pubkey,
    pool_seed: PoolSeed,
    max_number_of_assets: int,
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
    system_program_id: Pubkey = SYSTEM_PROGRAM_ID,
    rent_sysvar_id: Pubkey = RENT_SYSVAR_ID,
) -> Instruction:
    """Build the init instruction, which allocates a pool and its mint.

    Accounts:
    0. system_program
    1. rent_sysvar
    2. token_program
    3. pool (writable)
    4. mint (writable)
    5. payer (signer, writable)

    Data: [0, pool_seed, max_number_of_assets (u32)]
    """
    program_id = require_account("program_id", program_id)

    data = bytearray()
    data.append(INSTRUCTION_INIT)
    data.extend(concat_pool_seed(pool_seed))
    data.extend(encode_u32(max_number_of_assets))

    accounts = [
        _readonly(require_account("system_program_id", system_program_id)),
        _readonly(require_account("rent_sysvar_id", rent_sysvar_id)),
        _readonly(require_account("token_program_id", token_program_id)),
        _writable(require_account("pool", pool)),
        _writable(require_account("mint", mint)),
        AccountMeta(pubkey=require_account("payer", payer), is_signer=True, is_writable=True),
    ]

    return _finish("init", program_id, accounts, bytes(data))


def build_init_order_tracker_instruction(
    program_id: Pubkey,
    order_tracker: Pubkey,
    open_orders: Pubkey,
    payer: Pubkey,
    pool: Pubkey,
    pool_seed: PoolSeed,
    system_program_id: Pubkey = SYSTEM_PROGRAM_ID,
    rent_sysvar_id: Pubkey = RENT_SYSVAR_ID,
) -> Instruction:
    """Build the init_order_tracker instruction.

    Accounts:
    0. system_program
    1. rent_sysvar
    2. pool
    3. order_tracker (writable)
    4. open_orders
    5. payer (signer, writable)

    Data: [1, pool_seed]
    """
    program_id = require_account("program_id", program_id)

    data = bytearray()
    data.append(INSTRUCTION_INIT_ORDER_TRACKER)
    data.extend(concat_pool_seed(pool_seed))

    accounts = [
        _readonly(require_account("system_program_id", system_program_id)),
        _readonly(require_account("rent_sysvar_id", rent_sysvar_id)),
        _readonly(require_account("pool", pool)),
        _writable(require_account("order_tracker", order_tracker)),
        _readonly(require_account("open_orders", open_orders)),
        AccountMeta(pubkey=require_account("payer", payer), is_signer=True, is_writable=True),
    ]

    return _finish("init_order_tracker", program_id, accounts, bytes(data))


def _pool_transfer_accounts(
    token_program_id: Pubkey,
    mint: Pubkey,
    target_pool_token: Pubkey,
    pool: Pubkey,
    pool_writable: bool,
    pool_assets: Sequence[Pubkey],
    source_owner: Pubkey,
    source_assets: Sequence[Pubkey],
) -> List[AccountMeta]:
    # Shared by create and deposit; only the pool's writability differs
    accounts = [
        _readonly(require_account("token_program_id", token_program_id)),
        _writable(require_account("mint", mint)),
        _writable(require_account("target_pool_token", target_pool_token)),
        AccountMeta(
            pubkey=require_account("pool", pool),
            is_signer=False,
            is_writable=pool_writable,
        ),
    ]
    for i, pool_asset in enumerate(pool_assets):
        accounts.append(_writable(require_account(f"pool_assets[{i}]", pool_asset)))
    accounts.append(
        AccountMeta(
            pubkey=require_account("source_owner", source_owner),
            is_signer=True,
            is_writable=False,
        )
    )
    for i, source_asset in enumerate(source_assets):
        accounts.append(_writable(require_account(f"source_assets[{i}]", source_asset)))
    return accounts


def build_create_instruction(
    program_id: Pubkey,
    mint: Pubkey,
    pool: Pubkey,
    pool_seed: PoolSeed,
    pool_assets: Sequence[Pubkey],
    target_pool_token: Pubkey,
    source_owner: Pubkey,
    source_assets: Sequence[Pubkey],
    signal_provider: Pubkey,
    deposit_amounts: Sequence[int],
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """Build the create instruction, which makes the first deposit into a pool.

    Accounts (5 fixed + 2 per asset):
    0. token_program
    1. mint (writable)
    2. target_pool_token (writable)
    3. pool (writable)
    4..4+N. pool_assets (writable)
    4+N. source_owner (signer)
    5+N..5+2N. source_assets (writable)

    Data: [2, pool_seed, signal_provider (32), deposit_amount (u64) * N]

    Raises:
        ArityMismatchError: If pool_assets, source_assets and deposit_amounts
            differ in length
    """
    program_id = require_account("program_id", program_id)
    if not len(pool_assets) == len(source_assets) == len(deposit_amounts):
        raise ArityMismatchError(
            {
                "pool_assets": len(pool_assets),
                "source_assets": len(source_assets),
                "deposit_amounts": len(deposit_amounts),
            }
        )

    data = bytearray()
    data.append(INSTRUCTION_CREATE)
    data.extend(concat_pool_seed(pool_seed))
    data.extend(bytes(require_account("signal_provider", signal_provider)))
    for amount in deposit_amounts:
        data.extend(encode_u64(amount))

    accounts = _pool_transfer_accounts(
        token_program_id,
        mint,
        target_pool_token,
        pool,
        True,
        pool_assets,
        source_owner,
        source_assets,
    )

    return _finish("create", program_id, accounts, bytes(data))


def build_deposit_instruction(
    program_id: Pubkey,
    mint: Pubkey,
    pool: Pubkey,
    pool_assets: Sequence[Pubkey],
    target_pool_token: Pubkey,
    source_owner: Pubkey,
    source_assets: Sequence[Pubkey],
    pool_seed: PoolSeed,
    pool_token_amount: int,
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """Build the deposit instruction, which buys pool tokens with pool assets.

    Accounts (5 fixed + 2 per asset):
    0. token_program
    1. mint (writable)
    2. target_pool_token (writable)
    3. pool
    4..4+N. pool_assets (writable)
    4+N. source_owner (signer)
    5+N..5+2N. source_assets (writable)

    Data: [3, pool_seed, pool_token_amount (u64)]

    Raises:
        ArityMismatchError: If pool_assets and source_assets differ in length
    """
    program_id = require_account("program_id", program_id)
    if len(pool_assets) != len(source_assets):
        raise ArityMismatchError(
            {"pool_assets": len(pool_assets), "source_assets": len(source_assets)}
        )

    data = bytearray()
    data.append(INSTRUCTION_DEPOSIT)
    data.extend(concat_pool_seed(pool_seed))
    data.extend(encode_u64(pool_token_amount))

    accounts = _pool_transfer_accounts(
        token_program_id,
        mint,
        target_pool_token,
        pool,
        False,
        pool_assets,
        source_owner,
        source_assets,
    )

    return _finish("deposit", program_id, accounts, bytes(data))


def build_create_order_instruction(
    program_id: Pubkey,
    signal_provider: Pubkey,
    market: Pubkey,
    payer_pool_asset: Pubkey,
    payer_pool_asset_index: int,
    target_pool_asset_index: int,
    open_orders: Pubkey,
    order_tracker: Pubkey,
    serum_request_queue: Pubkey,
    pool: Pubkey,
    coin_vault: Pubkey,
    pc_vault: Pubkey,
    dex_program: Pubkey,
    pool_seed: PoolSeed,
    side: OrderSide,
    limit_price: int,
    max_quantity: int,
    order_type: OrderType,
    client_id: int,
    self_trade_behavior: SelfTradeBehavior,
    srm_referrer: Optional[Pubkey] = None,
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
    rent_sysvar_id: Pubkey = RENT_SYSVAR_ID,
) -> Instruction:
    """Build the create_order instruction, which places a Serum order for a pool.

    Accounts (12, plus 1 when a referrer is given):
    0. signal_provider (signer)
    1. market (writable)
    2. payer_pool_asset (writable)
    3. open_orders (writable)
    4. order_tracker (writable)
    5. serum_request_queue (writable)
    6. pool (writable)
    7. coin_vault (writable)
    8. pc_vault (writable)
    9. token_program
    10. rent_sysvar
    11. dex_program
    12. srm_referrer (optional)

    Data: [4, pool_seed, side (u8), limit_price (u64), max_quantity (u16),
           order_type (u8), client_id (u64), self_trade_behavior (u8),
           payer_pool_asset_index (u64), target_pool_asset_index (u64)]

    The referrer changes only the account list; the program detects it
    from the account count.
    """
    program_id = require_account("program_id", program_id)

    data = bytearray()
    data.append(INSTRUCTION_CREATE_ORDER)
    data.extend(concat_pool_seed(pool_seed))
    data.extend(encode_u8(to_enum(OrderSide, side)))
    data.extend(encode_u64(limit_price))
    data.extend(encode_u16(max_quantity))
    data.extend(encode_u8(to_enum(OrderType, order_type)))
    data.extend(encode_u64(client_id))
    data.extend(encode_u8(to_enum(SelfTradeBehavior, self_trade_behavior)))
    data.extend(encode_u64(payer_pool_asset_index))
    data.extend(encode_u64(target_pool_asset_index))

    accounts = [
        AccountMeta(
            pubkey=require_account("signal_provider", signal_provider),
            is_signer=True,
            is_writable=False,
        ),
        _writable(require_account("market", market)),
        _writable(require_account("payer_pool_asset", payer_pool_asset)),
        _writable(require_account("open_orders", open_orders)),
        _writable(require_account("order_tracker", order_tracker)),
        _writable(require_account("serum_request_queue", serum_request_queue)),
        _writable(require_account("pool", pool)),
        _writable(require_account("coin_vault", coin_vault)),
        _writable(require_account("pc_vault", pc_vault)),
        _readonly(require_account("token_program_id", token_program_id)),
        _readonly(require_account("rent_sysvar_id", rent_sysvar_id)),
        _readonly(require_account("dex_program", dex_program)),
    ]

    if srm_referrer is not None:
        accounts.append(_readonly(require_account("srm_referrer", srm_referrer)))

    return _finish("create_order", program_id, accounts, bytes(data))
