"""
Type definitions for calculator module.

TypedDict shapes of the serialised estimator view returned by the
web API and consumed by the CLI.
"""

from typing import TypedDict


class EstimateDict(TypedDict):
    """
    Displayed reward estimate.

    Attributes:
        boost: Selected multiplier
        reward: Boosted reward, formatted ENKI amount
        reward_raw: Boosted reward as decimal string
        usd_value: Boosted USD value, None without a price
        ath_value: Boosted value at ATH price, None without a price
    """
    boost: int
    reward: str
    reward_raw: str
    usd_value: str | None
    ath_value: str | None


class EstimatorStateDict(TypedDict):
    """
    Full view of the estimator session.

    Attributes:
        input_method: "address" or "manual"
        lookup_state: State of the fetch-by-address flow
        error: Inline lookup error message
        staking_points: Formatted user points, None when unset
        total_staking_points: Formatted global total
        total_airdrop: Formatted airdrop pool
        price: Formatted current price, None until fetched
        estimate: Displayed estimate, None until computed
        boost_options: Selectable multipliers
        show_breakdown: Breakdown panel visibility
        breakdown: Breakdown lines when visible and an estimate exists
        boost_info_url: Link explaining how to boost
    """
    input_method: str
    lookup_state: str
    error: str | None
    staking_points: str | None
    total_staking_points: str
    total_airdrop: str
    price: str | None
    estimate: EstimateDict | None
    boost_options: list[int]
    show_breakdown: bool
    breakdown: list[str]
    boost_info_url: str
