"""
ENKI Staking Rewards Calculator.

Standalone package for proportional airdrop reward estimates.

Example:
    >>> from calculator import RewardCalculator, DEFAULT_TOTAL_STAKING_POINTS, format_token
    >>> from decimal import Decimal
    >>>
    >>> calc = RewardCalculator()
    >>> result = calc.estimate(
    ...     Decimal("1000000000000000000000000"),
    ...     DEFAULT_TOTAL_STAKING_POINTS,
    ...     boost=2,
    ... )
    >>> print(format_token(result.boosted_reward))
    298.51 ENKI
"""

from calculator.constants import (
    ATH_PRICE,
    BOOST_MULTIPLIERS,
    DEFAULT_TOTAL_STAKING_POINTS,
    POINTS_SCALE,
    TOTAL_ENKI_AIRDROP,
    BoostMultiplier,
    get_boost_multiplier,
)
from calculator.core.calculator import RewardCalculator
from calculator.core.models import RewardEstimate
from calculator.utils import (
    format_breakdown,
    format_currency,
    format_estimate_report,
    format_number,
    format_points,
    format_pool,
    format_price,
    format_token,
)


__version__ = "1.0.0"
__all__ = [
    # Core
    "RewardCalculator",
    # Models
    "RewardEstimate",
    "BoostMultiplier",
    # Constants
    "ATH_PRICE",
    "BOOST_MULTIPLIERS",
    "DEFAULT_TOTAL_STAKING_POINTS",
    "POINTS_SCALE",
    "TOTAL_ENKI_AIRDROP",
    "get_boost_multiplier",
    # Formatters
    "format_breakdown",
    "format_currency",
    "format_estimate_report",
    "format_number",
    "format_points",
    "format_pool",
    "format_price",
    "format_token",
]
