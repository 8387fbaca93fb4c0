"""
Default constants for the reward calculator.

Airdrop pool, reference prices and fixed-point scale of staking points.
"""

from decimal import Decimal
from enum import IntEnum


# 400,000 ENKI distributed proportionally to staking points
TOTAL_ENKI_AIRDROP = Decimal("400000")

# All-time high price in USD
ATH_PRICE = Decimal("18.38")

# Staking points are 18-decimal fixed-point integers
POINTS_DECIMALS = 18
POINTS_SCALE = Decimal(10) ** POINTS_DECIMALS

# Fallback global total until the staking API answers (2.68 billion points)
DEFAULT_TOTAL_STAKING_POINTS = Decimal("2.68e9") * POINTS_SCALE


class BoostMultiplier(IntEnum):
    """Selectable reward boost factors."""

    NONE = 1
    DOUBLE = 2
    FIVE = 5
    TEN = 10


BOOST_MULTIPLIERS: tuple[BoostMultiplier, ...] = tuple(BoostMultiplier)

# Accepted magnitude (adjusted exponent) of points, totals and prices
MAX_INPUT_EXPONENT = 60
MIN_INPUT_EXPONENT = -60

# Display precision
POINTS_DISPLAY_DECIMALS = 4
REWARD_DISPLAY_DECIMALS = 2
USD_DISPLAY_DECIMALS = 2
PRICE_DISPLAY_DECIMALS = 4
ATH_PRICE_DISPLAY_DECIMALS = 2


def get_boost_multiplier(value: int) -> BoostMultiplier | None:
    """
    Get boost multiplier by its numeric value.

    Args:
        value: Multiplier value (1, 2, 5 or 10)

    Returns:
        BoostMultiplier or None if the value is not selectable

    Example:
        >>> get_boost_multiplier(5)
        <BoostMultiplier.FIVE: 5>
        >>> get_boost_multiplier(3) is None
        True
    """
    try:
        return BoostMultiplier(value)
    except ValueError:
        return None


def is_supported_magnitude(value: Decimal) -> bool:
    """
    Check that a finite Decimal is within the range the calculator handles.

    Example:
        >>> is_supported_magnitude(Decimal("2.68e27"))
        True
        >>> is_supported_magnitude(Decimal("1e1000100"))
        False
    """
    if value.is_zero():
        return True
    return MIN_INPUT_EXPONENT <= value.adjusted() <= MAX_INPUT_EXPONENT
