"""
Core calculator functionality.

Reward formula and the estimate model.
"""

from calculator.core.calculator import RewardCalculator
from calculator.core.models import RewardEstimate

__all__ = [
    "RewardCalculator",
    "RewardEstimate",
]
