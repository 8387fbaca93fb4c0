"""Pydantic models for calculator."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from calculator.constants import BoostMultiplier


class RewardEstimate(BaseModel):
    """Estimated airdrop reward for one staking points balance.

    Base values are unboosted; the ``*_boosted`` fields are scaled by
    ``boost``. USD fields are None until a price quote is known.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    user_points: Decimal = Field(..., gt=0, description="Raw user staking points")
    global_points: Decimal = Field(..., gt=0, description="Raw global staking points")
    pool_size: Decimal = Field(..., gt=0, description="Airdrop pool in ENKI")
    boost: BoostMultiplier = Field(default=BoostMultiplier.NONE, description="Boost multiplier")
    base_reward: Decimal = Field(..., ge=0, description="Reward before boost (ENKI)")
    boosted_reward: Decimal = Field(..., ge=0, description="Reward after boost (ENKI)")
    price: Decimal | None = Field(default=None, ge=0, description="Current USD price")
    usd_value: Decimal | None = Field(default=None, ge=0, description="Base reward in USD")
    usd_value_boosted: Decimal | None = Field(
        default=None, ge=0, description="Boosted reward in USD"
    )
    ath_value: Decimal = Field(..., ge=0, description="Base reward at ATH price")
    ath_value_boosted: Decimal = Field(..., ge=0, description="Boosted reward at ATH price")

    @property
    def is_boosted(self) -> bool:
        """True when a multiplier above 1 is applied."""
        return self.boost > BoostMultiplier.NONE
