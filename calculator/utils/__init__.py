"""
Utility functions for calculator.

Formatting helpers for points, token amounts and currency.
"""

from calculator.utils.formatters import (
    format_breakdown,
    format_currency,
    format_estimate_report,
    format_number,
    format_points,
    format_pool,
    format_price,
    format_token,
)

__all__ = [
    "format_breakdown",
    "format_currency",
    "format_estimate_report",
    "format_number",
    "format_points",
    "format_pool",
    "format_price",
    "format_token",
]
