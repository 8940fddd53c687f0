"""Tests for pool account (de)serialization."""

import struct

import pytest
from solders.pubkey import Pubkey

from bonfida_bot import (
    POOL_ASSET_SIZE,
    POOL_HEADER_SIZE,
    InvalidAccountDataError,
    PoolAsset,
    PoolHeader,
    deserialize_pool_asset,
    deserialize_pool_assets,
    deserialize_pool_header,
    serialize_pool_asset,
    serialize_pool_header,
)


def build_pool_data(signal_provider: Pubkey, assets) -> bytes:
    """Build pool account data for testing."""
    data = bytearray()
    data.extend(bytes(signal_provider))
    data.append(1)
    for mint, amount in assets:
        data.extend(bytes(mint))
        data.extend(struct.pack("<Q", amount))
    return bytes(data)


class TestPoolHeader:
    def test_serialize_layout(self):
        signal_provider = Pubkey.new_unique()
        header = PoolHeader(signal_provider=signal_provider, is_initialized=True)

        packed = serialize_pool_header(header)

        assert packed == bytes(signal_provider) + b"\x01"
        assert len(packed) == POOL_HEADER_SIZE

    def test_round_trip(self):
        header = PoolHeader(signal_provider=Pubkey.new_unique(), is_initialized=False)

        assert deserialize_pool_header(serialize_pool_header(header)) == header

    def test_only_one_means_initialized(self):
        data = bytes(Pubkey.new_unique()) + b"\x02"

        assert deserialize_pool_header(data).is_initialized is False

    def test_reads_header_of_full_pool(self):
        signal_provider = Pubkey.new_unique()
        data = build_pool_data(signal_provider, [(Pubkey.new_unique(), 5)])

        header = deserialize_pool_header(data)

        assert header.signal_provider == signal_provider
        assert header.is_initialized is True

    def test_too_short(self):
        with pytest.raises(InvalidAccountDataError):
            deserialize_pool_header(bytes(32))


class TestPoolAsset:
    def test_serialize_layout(self):
        mint = Pubkey.new_unique()

        packed = serialize_pool_asset(PoolAsset(mint_address=mint, amount=500))

        assert packed == bytes(mint) + struct.pack("<Q", 500)
        assert len(packed) == POOL_ASSET_SIZE

    def test_round_trip(self):
        asset = PoolAsset(mint_address=Pubkey.new_unique(), amount=2**64 - 1)

        assert deserialize_pool_asset(serialize_pool_asset(asset)) == asset

    def test_too_short(self):
        with pytest.raises(InvalidAccountDataError):
            deserialize_pool_asset(bytes(39))


class TestDeserializePoolAssets:
    def test_reads_all_slots(self):
        mints = [Pubkey.new_unique() for _ in range(3)]
        data = build_pool_data(Pubkey.new_unique(), zip(mints, [1, 2, 3]))

        assets = deserialize_pool_assets(data)

        assert [a.mint_address for a in assets] == mints
        assert [a.amount for a in assets] == [1, 2, 3]

    def test_header_only(self):
        data = build_pool_data(Pubkey.new_unique(), [])

        assert deserialize_pool_assets(data) == []

    def test_partial_slot(self):
        data = build_pool_data(Pubkey.new_unique(), []) + bytes(20)

        with pytest.raises(InvalidAccountDataError):
            deserialize_pool_assets(data)
