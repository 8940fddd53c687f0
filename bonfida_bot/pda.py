"""Pool address derivation for the Bonfida Bot SDK."""

from typing import Tuple

from solders.pubkey import Pubkey

from .constants import POOL_SEED_PREFIX_LEN
from .utils import PoolSeed, concat_pool_seed, encode_u8


def get_pool_address(pool_seed: PoolSeed, program_id: Pubkey) -> Pubkey:
    """Derive the pool address from a full pool seed (bump included).

    Seeds: [pool_seed]

    This is the derivation the program repeats from the seed embedded in
    each instruction payload, so both must see the same bytes.
    """
    return Pubkey.create_program_address([concat_pool_seed(pool_seed)], program_id)


def find_pool_address(seed_prefix: bytes, program_id: Pubkey) -> Tuple[Pubkey, bytes]:
    """Find the pool address for a 31-byte seed prefix.

    Seeds: [seed_prefix]

    Returns:
        (pool_address, pool_seed) where pool_seed is the prefix followed by
        the bump byte; pass it as ``pool_seed`` to the instruction builders.
    """
    if len(seed_prefix) != POOL_SEED_PREFIX_LEN:
        raise ValueError(
            f"Invalid pool seed prefix length: {len(seed_prefix)} "
            f"(expected {POOL_SEED_PREFIX_LEN})"
        )
    pool_address, bump = Pubkey.find_program_address([bytes(seed_prefix)], program_id)
    return pool_address, bytes(seed_prefix) + encode_u8(bump)
