"""
Formatting utilities for staking points, token amounts and currency.

Functions for rendering fixed-point staking points, ENKI amounts
and USD values in the form shown to the user.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING, Union

from calculator.constants import (
    ATH_PRICE,
    ATH_PRICE_DISPLAY_DECIMALS,
    POINTS_DISPLAY_DECIMALS,
    POINTS_SCALE,
    PRICE_DISPLAY_DECIMALS,
    REWARD_DISPLAY_DECIMALS,
    USD_DISPLAY_DECIMALS,
)


if TYPE_CHECKING:
    from calculator.core.models import RewardEstimate


def format_number(
    value: Union[float, Decimal, int],
    decimals: int | None = None,
    thousands_separator: str = ",",
    decimal_separator: str = "."
) -> str:
    """
    Format number to readable form.

    Args:
        value: Number to format
        decimals: Fractional digits, rounded half up (None keeps the
            value's own precision)
        thousands_separator: Thousands separator
        decimal_separator: Decimal separator

    Returns:
        Formatted string

    Example:
        >>> format_number(1234567.89)
        '1,234,567.89'
        >>> format_number(400000, decimals=0)
        '400,000'
        >>> format_number(Decimal("0.125"), decimals=2)
        '0.13'
    """
    number = value if isinstance(value, Decimal) else Decimal(str(value))
    if decimals is None:
        formatted = f"{number:,}"
    else:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
            number = number.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        formatted = f"{number:,.{decimals}f}"

    if thousands_separator != "," or decimal_separator != ".":
        formatted = formatted.replace(",", "TEMP").replace(".", decimal_separator).replace("TEMP", thousands_separator)

    return formatted


def format_points(points: Union[str, int, float, Decimal]) -> str:
    """
    Format raw fixed-point staking points for display.

    Divides by 10^18 and always renders exactly 4 fractional digits.

    Example:
        >>> format_points("2680000000000000000000000000")
        '2,680,000,000.0000'
        >>> format_points(10**18)
        '1.0000'
    """
    raw = points if isinstance(points, Decimal) else Decimal(str(points))
    return format_number(raw / POINTS_SCALE, decimals=POINTS_DISPLAY_DECIMALS)


def format_token(
    amount: Union[float, Decimal],
    symbol: str = "ENKI",
    decimals: int = REWARD_DISPLAY_DECIMALS,
) -> str:
    """
    Format token amount with its symbol.

    Example:
        >>> format_token(Decimal("1234.5"))
        '1,234.50 ENKI'
    """
    return f"{format_number(amount, decimals=decimals)} {symbol}"


def format_currency(
    amount: Union[float, Decimal],
    currency: str = "USD",
    decimals: int = USD_DISPLAY_DECIMALS,
    symbol: str = "$",
) -> str:
    """
    Format amount in currency form.

    Args:
        amount: Amount to format
        currency: Currency code appended after the amount
        decimals: Fractional digits
        symbol: Symbol prepended to the amount

    Returns:
        Formatted string with currency

    Example:
        >>> format_currency(Decimal("1234.567"))
        '$1,234.57 USD'
        >>> format_currency(Decimal("0.0123"), decimals=4)
        '$0.0123 USD'
    """
    return f"{symbol}{format_number(amount, decimals=decimals)} {currency}"


def format_price(price: Decimal) -> str:
    """Format current ENKI price (4 fractional digits)."""
    return format_currency(price, decimals=PRICE_DISPLAY_DECIMALS)


def format_pool(pool_size: Union[int, Decimal]) -> str:
    """Format airdrop pool size, e.g. '400,000 ENKI'."""
    return format_token(pool_size, decimals=0)


def format_breakdown(estimate: "RewardEstimate") -> list[str]:
    """
    Format calculation breakdown for an estimate.

    USD lines use the unboosted reward; the boosted line appears only
    when a multiplier above 1 is selected.

    Args:
        estimate: RewardEstimate object

    Returns:
        List of breakdown lines
    """
    reward = format_token(estimate.base_reward)
    user = format_points(estimate.user_points)
    total = format_points(estimate.global_points)
    pool = format_number(estimate.pool_size, decimals=0)

    lines = [
        f"Your Staking Points: {user}",
        f"Total Staking Points: {total}",
        f"Total ENKI Airdrop: {pool} ENKI",
        "Formula: (Your Staking Points / Total Staking Points) × Total ENKI Airdrop",
        f"Calculation: ({user} / {total}) × {pool} = {reward}",
    ]

    if estimate.price is not None and estimate.usd_value is not None:
        price = format_number(estimate.price, decimals=PRICE_DISPLAY_DECIMALS)
        ath = format_number(ATH_PRICE, decimals=ATH_PRICE_DISPLAY_DECIMALS)
        lines.append(
            f"USD Value: {reward} × ${price} = {format_currency(estimate.usd_value)}"
        )
        lines.append(
            f"USD Value at ATH: {reward} × ${ath} = {format_currency(estimate.ath_value)}"
        )

    if estimate.is_boosted:
        lines.append(
            f"Boosted Reward: {reward} × {int(estimate.boost)}x = "
            f"{format_token(estimate.boosted_reward)}"
        )

    return lines


def format_estimate_report(
    estimate: "RewardEstimate",
    show_breakdown: bool = False,
) -> str:
    """
    Format estimate to multi-line text report.

    Args:
        estimate: RewardEstimate object
        show_breakdown: Append the calculation breakdown

    Returns:
        Multi-line formatted report
    """
    lines = [
        f"Your Staking Points: {format_points(estimate.user_points)}",
        f"Total Staking Points: {format_points(estimate.global_points)}",
        f"Total ENKI Airdrop: {format_pool(estimate.pool_size)}",
    ]
    if estimate.price is not None:
        lines.append(f"Current ENKI Price: {format_price(estimate.price)}")

    lines.append("")
    lines.append(f"Estimated Reward: {format_token(estimate.boosted_reward)}")
    if estimate.usd_value_boosted is not None:
        lines.append(f"Estimated Value: {format_currency(estimate.usd_value_boosted)}")
        lines.append(f"Estimated Value at ATH: {format_currency(estimate.ath_value_boosted)}")

    if show_breakdown:
        lines.append("")
        lines.append("Calculation Breakdown:")
        lines.extend(f"  {line}" for line in format_breakdown(estimate))

    return "\n".join(lines)
