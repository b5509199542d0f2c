"""Protocol constants for the constant-product AMM.

Centralizes the fixed-point scales and bounds shared by the on-chain pool
contract and the off-chain math.
"""

# Largest value representable by the on-chain u64 type
U64_MAX = 2**64 - 1

# Fee rates are integers over this scale (30 = 0.3%)
FEE_SCALE = 10_000

# Hard cap on the pool fee rate (2000 / 10000 = 20%)
MAX_FEE_RATE = 2_000

# The protocol team receives 1/PROTOCOL_FEE_DIVISOR of every collected fee
PROTOCOL_FEE_DIVISOR = 5

# LP shares permanently locked by the first deposit
MINIMUM_LIQUIDITY_LOCK = 1_000

# Smallest removable LP amount is min_add_liquidity_lp_amount / this value
MIN_REMOVE_LIQUIDITY_DIVISOR = 10

# Default slippage tolerance for quotes (5%)
DEFAULT_SLIPPAGE = "0.05"

# Move entry functions of the router module, keyed by swap kind and direction
SWAP_EXACT_X_TO_Y = "swap_exact_x_to_y"
SWAP_EXACT_Y_TO_X = "swap_exact_y_to_x"
SWAP_X_TO_EXACT_Y = "swap_x_to_exact_y"
SWAP_Y_TO_EXACT_X = "swap_y_to_exact_x"
