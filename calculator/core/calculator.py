"""
Pure business logic calculator for airdrop reward estimates.

This module contains standalone calculation logic without any
dependencies on network clients, storage, or app-specific code.
"""

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from calculator.constants import (
    ATH_PRICE,
    TOTAL_ENKI_AIRDROP,
    BoostMultiplier,
    get_boost_multiplier,
    is_supported_magnitude,
)


if TYPE_CHECKING:
    from calculator.core.models import RewardEstimate


class RewardCalculator:
    """
    Pure business logic calculator for proportional airdrop rewards.

    Works with raw fixed-point staking points (Decimal). The reward is
    the user's share of the global total applied to the airdrop pool.
    """

    def __init__(self, pool_size: Decimal = TOTAL_ENKI_AIRDROP) -> None:
        self.pool_size = pool_size

    def parse_points(self, raw: str | int | float | Decimal | None) -> Decimal | None:
        """
        Parse user-entered staking points.

        Args:
            raw: Raw points as typed by the user

        Returns:
            Positive Decimal, or None for non-numeric, non-positive or
            out-of-range input

        Example:
            >>> calc = RewardCalculator()
            >>> calc.parse_points("1000000000000000000")
            Decimal('1000000000000000000')
            >>> calc.parse_points("abc") is None
            True
        """
        if raw is None or isinstance(raw, bool):
            return None

        try:
            points = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError):
            return None

        if not points.is_finite() or points <= 0:
            return None

        if not is_supported_magnitude(points):
            return None

        return points

    def calculate_reward(
        self,
        user_points: Decimal,
        global_points: Decimal,
    ) -> Decimal | None:
        """
        Calculate base reward share of the airdrop pool.

        Formula: (user_points / global_points) * pool_size

        Args:
            user_points: Raw user staking points
            global_points: Raw global staking points

        Returns:
            Reward in ENKI, or None when either input is not positive
            or out of range

        Example:
            >>> calc = RewardCalculator()
            >>> calc.calculate_reward(Decimal("1"), Decimal("4"))
            Decimal('100000.00')
        """
        if user_points <= 0:
            return None

        if global_points <= 0:
            return None

        if not (is_supported_magnitude(user_points) and is_supported_magnitude(global_points)):
            return None

        return (user_points / global_points) * self.pool_size

    def apply_boost(self, reward: Decimal, multiplier: int) -> Decimal:
        """
        Scale reward by a boost multiplier.

        Raises:
            ValueError: If multiplier is not one of 1, 2, 5, 10
        """
        boost = get_boost_multiplier(multiplier)
        if boost is None:
            raise ValueError(f"Unsupported boost multiplier: {multiplier}")
        return reward * int(boost)

    def calculate_usd_value(
        self,
        reward: Decimal,
        price: Decimal | None,
    ) -> Decimal | None:
        """Value reward at price, None while no price is known."""
        if price is None:
            return None
        return reward * price

    def calculate_ath_value(self, reward: Decimal) -> Decimal:
        """Value reward at the all-time high price."""
        return reward * ATH_PRICE

    def estimate(
        self,
        user_points: Decimal,
        global_points: Decimal,
        boost: int = BoostMultiplier.NONE,
        price: Decimal | None = None,
    ) -> "RewardEstimate | None":
        """
        Build full reward estimate for a staking points balance.

        Args:
            user_points: Raw user staking points
            global_points: Raw global staking points
            boost: Boost multiplier (1, 2, 5 or 10)
            price: Current USD price if known

        Returns:
            RewardEstimate, or None when no reward can be computed

        Raises:
            ValueError: If boost is not a selectable multiplier

        Example:
            >>> calc = RewardCalculator()
            >>> result = calc.estimate(Decimal("1"), Decimal("4"), boost=2)
            >>> result.boosted_reward
            Decimal('200000.00')
        """
        from calculator.core.models import RewardEstimate

        base = self.calculate_reward(user_points, global_points)
        if base is None:
            return None

        boosted = self.apply_boost(base, boost)

        return RewardEstimate(
            user_points=user_points,
            global_points=global_points,
            pool_size=self.pool_size,
            boost=BoostMultiplier(boost),
            base_reward=base,
            boosted_reward=boosted,
            price=price,
            usd_value=self.calculate_usd_value(base, price),
            usd_value_boosted=self.calculate_usd_value(boosted, price),
            ath_value=self.calculate_ath_value(base),
            ath_value_boosted=self.calculate_ath_value(boosted),
        )
