"""
Services.

Remote lookups, persisted global total and the estimator session.
"""

from app.services.base_service import BaseApiService
from app.services.global_points_store import GlobalPointsStore
from app.services.price_service import PriceService
from app.services.reward_estimator import RewardEstimator
from app.services.staking_points_service import StakingPointsService

__all__ = [
    "BaseApiService",
    "GlobalPointsStore",
    "PriceService",
    "RewardEstimator",
    "StakingPointsService",
]
