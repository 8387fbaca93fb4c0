"""Tests for points, token and currency formatting."""

from decimal import Decimal

import pytest

from calculator import (
    RewardCalculator,
    format_breakdown,
    format_currency,
    format_estimate_report,
    format_number,
    format_points,
    format_pool,
    format_price,
    format_token,
)


class TestFormatPoints:
    """Fixed-point staking points display."""

    def test_default_total(self) -> None:
        """Global total in raw units renders in human units with 4 digits."""
        assert format_points("2680000000000000000000000000") == "2,680,000,000.0000"

    def test_one_point(self) -> None:
        """10^18 raw is one point."""
        assert format_points(10**18) == "1.0000"

    def test_fractional_points(self) -> None:
        """Always exactly 4 fractional digits."""
        assert format_points(Decimal("1234567890000000000")) == "1.2346"

    def test_small_points(self) -> None:
        """Dust rounds to zero."""
        assert format_points(1) == "0.0000"

    @pytest.mark.parametrize("raw", ["5e21", 5 * 10**21, Decimal("5E+21")])
    def test_input_types(self, raw) -> None:
        """Strings, ints and Decimals format the same."""
        assert format_points(raw) == "5,000.0000"


class TestFormatAmounts:
    """Token and currency display."""

    def test_format_number(self) -> None:
        assert format_number(Decimal("1234567.891"), decimals=2) == "1,234,567.89"

    @pytest.mark.parametrize("value,expected", [
        (Decimal("0.125"), "0.13"),
        (Decimal("2.675"), "2.68"),
        (Decimal("0.005"), "0.01"),
        (Decimal("1.004"), "1.00"),
    ])
    def test_format_number_rounds_half_up(self, value, expected) -> None:
        assert format_number(value, decimals=2) == expected

    def test_format_number_beyond_context_precision(self) -> None:
        """Values wider than 28 digits still format with exact fractional digits."""
        result = format_number(Decimal("1.5e40"), decimals=2)

        assert result.startswith("15,000,000,000")
        assert result.endswith(".00")

    def test_format_number_custom_separators(self) -> None:
        result = format_number(
            Decimal("1234.5"), decimals=1, thousands_separator=" ", decimal_separator=","
        )
        assert result == "1 234,5"

    def test_format_token(self) -> None:
        assert format_token(Decimal("0.000149")) == "0.00 ENKI"
        assert format_token(Decimal("1500.456")) == "1,500.46 ENKI"

    def test_format_currency(self) -> None:
        assert format_currency(Decimal("2.5")) == "$2.50 USD"

    def test_format_price(self) -> None:
        assert format_price(Decimal("0.12346")) == "$0.1235 USD"

    def test_format_pool(self) -> None:
        assert format_pool(Decimal("400000")) == "400,000 ENKI"


class TestBreakdown:
    """Calculation breakdown lines."""

    @pytest.fixture
    def calc(self) -> RewardCalculator:
        return RewardCalculator()

    def test_breakdown_without_price_or_boost(self, calc: RewardCalculator) -> None:
        estimate = calc.estimate(Decimal("1e24"), Decimal("4e24"))

        lines = format_breakdown(estimate)

        assert lines[0] == "Your Staking Points: 1,000,000.0000"
        assert lines[1] == "Total Staking Points: 4,000,000.0000"
        assert lines[2] == "Total ENKI Airdrop: 400,000 ENKI"
        assert lines[3].startswith("Formula:")
        assert lines[4] == (
            "Calculation: (1,000,000.0000 / 4,000,000.0000) × 400,000 = 100,000.00 ENKI"
        )
        assert len(lines) == 5

    def test_breakdown_with_price_uses_base_reward(self, calc: RewardCalculator) -> None:
        estimate = calc.estimate(
            Decimal("1e24"), Decimal("4e24"), boost=2, price=Decimal("0.5")
        )

        lines = format_breakdown(estimate)

        assert "USD Value: 100,000.00 ENKI × $0.5000 = $50,000.00 USD" in lines
        assert "USD Value at ATH: 100,000.00 ENKI × $18.38 = $1,838,000.00 USD" in lines
        assert lines[-1] == "Boosted Reward: 100,000.00 ENKI × 2x = 200,000.00 ENKI"

    def test_report_shows_boosted_values(self, calc: RewardCalculator) -> None:
        estimate = calc.estimate(
            Decimal("1e24"), Decimal("4e24"), boost=10, price=Decimal("0.5")
        )

        report = format_estimate_report(estimate, show_breakdown=True)

        assert "Estimated Reward: 1,000,000.00 ENKI" in report
        assert "Estimated Value: $500,000.00 USD" in report
        assert "Estimated Value at ATH: $18,380,000.00 USD" in report
        assert "Calculation Breakdown:" in report

    def test_report_without_price(self, calc: RewardCalculator) -> None:
        estimate = calc.estimate(Decimal("1e24"), Decimal("4e24"))

        report = format_estimate_report(estimate)

        assert "Estimated Value" not in report
        assert "Current ENKI Price" not in report
