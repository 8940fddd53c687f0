"""Constants for the Bonfida Bot SDK."""

from solders.system_program import ID as SYSTEM_PROGRAM_ID
from solders.sysvar import RENT as RENT_SYSVAR_ID
from spl.token.constants import TOKEN_PROGRAM_ID

# ============================================================================
# INSTRUCTION OPCODES
# ============================================================================

INSTRUCTION_INIT = 0
INSTRUCTION_INIT_ORDER_TRACKER = 1
INSTRUCTION_CREATE = 2
INSTRUCTION_DEPOSIT = 3
INSTRUCTION_CREATE_ORDER = 4

# ============================================================================
# SIZES
# ============================================================================

PUBKEY_SIZE = 32
POOL_SEED_LEN = 32
# A findable seed is a prefix plus one bump byte
POOL_SEED_PREFIX_LEN = POOL_SEED_LEN - 1

POOL_HEADER_SIZE = 33
POOL_ASSET_SIZE = 40

# Fixed part of the create_order payload after the seed:
# side (1) | limit_price (8) | max_quantity (2) | order_type (1) |
# client_id (8) | self_trade_behavior (1) | payer_index (8) | target_index (8)
CREATE_ORDER_FIELDS_SIZE = 37

# ============================================================================
# INTEGER BOUNDS
# ============================================================================

U8_MAX = 2**8 - 1
U16_MAX = 2**16 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
