"""Utility functions for the Bonfida Bot SDK."""

from typing import Optional, Sequence, Union

from solders.pubkey import Pubkey

from .constants import PUBKEY_SIZE
from .errors import MissingAccountError
from .types import U8, U16, U32, U64

BytesLike = Union[bytes, bytearray, memoryview]
PoolSeed = Union[BytesLike, Sequence[BytesLike]]


def encode_u8(value: int) -> bytes:
    """Encode an unsigned 8-bit integer.

    Raises:
        IntegerRangeError: If value is out of range [0, 255]
    """
    return U8(value).encode()


def encode_u16(value: int) -> bytes:
    """Encode an unsigned 16-bit integer (little-endian).

    Raises:
        IntegerRangeError: If value is out of range [0, 65535]
    """
    return U16(value).encode()


def encode_u32(value: int) -> bytes:
    """Encode an unsigned 32-bit integer (little-endian).

    Raises:
        IntegerRangeError: If value is out of range [0, 4294967295]
    """
    return U32(value).encode()


def encode_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer (little-endian).

    Raises:
        IntegerRangeError: If value is out of range [0, 2^64-1]
    """
    return U64(value).encode()


def decode_u8(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 8-bit integer."""
    return int(U8.decode(data, offset))


def decode_u16(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 16-bit integer (little-endian)."""
    return int(U16.decode(data, offset))


def decode_u32(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 32-bit integer (little-endian)."""
    return int(U32.decode(data, offset))


def decode_u64(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 64-bit integer (little-endian)."""
    return int(U64.decode(data, offset))


def decode_pubkey(data: bytes, offset: int = 0) -> Pubkey:
    """Decode a Pubkey from 32 bytes.

    Raises:
        ValueError: If not enough bytes available for Pubkey
    """
    if offset + PUBKEY_SIZE > len(data):
        raise ValueError(
            f"Not enough bytes for Pubkey at offset {offset}: "
            f"need {PUBKEY_SIZE} bytes, have {len(data) - offset}"
        )
    return Pubkey.from_bytes(bytes(data[offset : offset + PUBKEY_SIZE]))


def concat_pool_seed(pool_seed: PoolSeed) -> bytes:
    """Join the parts of a pool seed verbatim.

    Accepts either a single bytes-like value or a sequence of them.

    Raises:
        TypeError: If a part of the sequence is not bytes-like
    """
    if isinstance(pool_seed, (bytes, bytearray, memoryview)):
        return bytes(pool_seed)
    parts = []
    for i, part in enumerate(pool_seed):
        # bytes(int) would yield zero padding instead of the value
        if not isinstance(part, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"pool_seed[{i}] must be bytes-like, got {type(part).__name__}"
            )
        parts.append(bytes(part))
    return b"".join(parts)


def require_account(name: str, pubkey: Optional[Pubkey]) -> Pubkey:
    """Return pubkey if it is a Pubkey.

    Raises:
        MissingAccountError: If pubkey is None
        TypeError: If pubkey is not a Pubkey
    """
    if pubkey is None:
        raise MissingAccountError(name)
    if not isinstance(pubkey, Pubkey):
        raise TypeError(f"{name} must be a Pubkey, got {type(pubkey).__name__}")
    return pubkey
