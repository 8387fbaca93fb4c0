"""Typed application keys."""

import redis.asyncio as redis
from aiohttp import web

from app.services.reward_estimator import RewardEstimator


ESTIMATOR_KEY = web.AppKey("estimator", RewardEstimator)
REDIS_KEY = web.AppKey("redis", redis.Redis)
