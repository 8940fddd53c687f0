"""Pool account (de)serialization for the Bonfida Bot SDK."""

from typing import List

from .constants import POOL_ASSET_SIZE, POOL_HEADER_SIZE, PUBKEY_SIZE
from .errors import InvalidAccountDataError
from .types import PoolAsset, PoolHeader
from .utils import decode_pubkey, decode_u64, encode_u64


def serialize_pool_header(header: PoolHeader) -> bytes:
    """Serialize a PoolHeader.

    Layout (33 bytes):
    - [0..32]: signal_provider (Pubkey)
    - [32]: is_initialized (bool)
    """
    return bytes(header.signal_provider) + bytes([1 if header.is_initialized else 0])


def deserialize_pool_header(data: bytes) -> PoolHeader:
    """Deserialize the PoolHeader at the start of a pool account."""
    if len(data) < POOL_HEADER_SIZE:
        raise InvalidAccountDataError(
            f"PoolHeader data too short: {len(data)} bytes (expected {POOL_HEADER_SIZE})"
        )

    return PoolHeader(
        signal_provider=decode_pubkey(data, 0),
        # Only an exact 1 counts as initialized
        is_initialized=data[PUBKEY_SIZE] == 1,
    )


def serialize_pool_asset(asset: PoolAsset) -> bytes:
    """Serialize a PoolAsset.

    Layout (40 bytes):
    - [0..32]: mint_address (Pubkey)
    - [32..40]: amount (u64 LE)
    """
    return bytes(asset.mint_address) + encode_u64(asset.amount)


def deserialize_pool_asset(data: bytes, offset: int = 0) -> PoolAsset:
    """Deserialize a PoolAsset starting at offset."""
    if len(data) - offset < POOL_ASSET_SIZE:
        raise InvalidAccountDataError(
            f"PoolAsset data too short at offset {offset}: "
            f"{len(data) - offset} bytes (expected {POOL_ASSET_SIZE})"
        )

    return PoolAsset(
        mint_address=decode_pubkey(data, offset),
        amount=decode_u64(data, offset + PUBKEY_SIZE),
    )


def deserialize_pool_assets(data: bytes) -> List[PoolAsset]:
    """Deserialize every asset slot of a pool account.

    A pool account is a PoolHeader followed by one 40-byte slot per asset,
    sized at init time by max_number_of_assets.
    """
    if len(data) < POOL_HEADER_SIZE:
        raise InvalidAccountDataError(
            f"Pool data too short: {len(data)} bytes (expected at least {POOL_HEADER_SIZE})"
        )
    slots = len(data) - POOL_HEADER_SIZE
    if slots % POOL_ASSET_SIZE != 0:
        raise InvalidAccountDataError(
            f"Pool asset section is {slots} bytes, not a multiple of {POOL_ASSET_SIZE}"
        )

    return [
        deserialize_pool_asset(data, offset)
        for offset in range(POOL_HEADER_SIZE, len(data), POOL_ASSET_SIZE)
    ]
