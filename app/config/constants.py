"""
Application constants.

Centralized constants for the estimator application.
"""

# ========================================================================
# REMOTE API CONSTANTS
# ========================================================================

STAKING_API_URL = "https://prod.api.enkixyz.com/"
PRICE_API_URL = "https://api.coingecko.com/api/v3/simple/price"
PRICE_ASSET_ID = "enki-protocol"
PRICE_VS_CURRENCY = "usd"

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0

GLOBAL_STAKING_POINTS_QUERY = """
    query {
      globalStakingPoints {
        points
      }
    }
"""

USER_STAKING_POINTS_QUERY = """
    query ($user: String!) {
      stakingPoints(user: $user) {
        points
      }
    }
"""

# ========================================================================
# STORAGE CONSTANTS
# ========================================================================

GLOBAL_POINTS_STORAGE_KEY = "totalStakingPoints"

# ========================================================================
# USER-FACING MESSAGES
# ========================================================================

NO_STAKING_POINTS_MESSAGE = (
    "This wallet has no staking points. Make sure you've staked ENKI tokens."
)
POINTS_NOT_FOUND_MESSAGE = (
    "No staking points found for this address. "
    "Make sure it's correct and you've staked ENKI tokens."
)
LOOKUP_FAILED_MESSAGE = "An unexpected error occurred. Please try again later."

BOOST_INFO_URL = "https://www.enkixyz.com/defi"
