"""
Estimator main entry point.

Wires services, Redis-backed storage and the web server together.
"""

import asyncio

import redis.asyncio as redis
from loguru import logger

from app.config.settings import settings
from app.services.global_points_store import GlobalPointsStore
from app.services.price_service import PriceService
from app.services.reward_estimator import RewardEstimator
from app.services.staking_points_service import StakingPointsService
from app.utils.logging import setup_logging
from app.utils.redis_utils import get_redis_client, get_redis_url_masked
from app.web.app import create_app, start_web_server, stop_web_server


def build_estimator(redis_client: redis.Redis | None) -> RewardEstimator:
    """
    Build estimator session with services from settings.

    Args:
        redis_client: Client persisting the global total, None for memory only

    Returns:
        RewardEstimator ready for startup()
    """
    return RewardEstimator(
        price_service=PriceService(),
        staking_service=StakingPointsService(),
        store=GlobalPointsStore(redis_client),
    )


async def run() -> None:
    """Run the estimator web server until cancelled."""
    setup_logging()

    redis_client = get_redis_client()
    logger.info(f"Persisting global staking points to {get_redis_url_masked()}")

    estimator = build_estimator(redis_client)
    app = create_app(estimator, redis_client)
    runner, _ = await start_web_server(app, settings.web_host, settings.web_port)
    try:
        await asyncio.Event().wait()
    finally:
        await stop_web_server(runner)


def main() -> None:
    """Console entry point."""
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("Estimator stopped by user")


if __name__ == "__main__":
    main()
