"""
Estimator web application.

Builds the aiohttp application and manages the server lifecycle.
"""

import asyncio

import redis.asyncio as redis
from aiohttp import web
from loguru import logger

from app.services.reward_estimator import RewardEstimator
from app.web.health import health_handler, liveness_handler
from app.web.keys import ESTIMATOR_KEY, REDIS_KEY
from app.web.routes import setup_routes


async def _on_startup(app: web.Application) -> None:
    await app[ESTIMATOR_KEY].startup()
    logger.info("Estimator initialized")


async def _on_cleanup(app: web.Application) -> None:
    await app[ESTIMATOR_KEY].close()
    redis_client = app.get(REDIS_KEY)
    if redis_client is not None:
        await redis_client.aclose()
    logger.info("Estimator resources released")


def create_app(
    estimator: RewardEstimator,
    redis_client: redis.Redis | None = None,
) -> web.Application:
    """
    Create estimator web application.

    Args:
        estimator: Estimator session served by the app
        redis_client: Redis client closed on cleanup

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[ESTIMATOR_KEY] = estimator
    if redis_client is not None:
        app[REDIS_KEY] = redis_client

    setup_routes(app)
    app.router.add_get("/health", health_handler)
    app.router.add_get("/liveness", liveness_handler)

    app.on_startup.append(_on_startup)
    app.on_cleanup.append(_on_cleanup)
    return app


async def start_web_server(
    app: web.Application,
    host: str = "0.0.0.0",
    port: int = 8080,
) -> tuple[web.AppRunner, web.TCPSite]:
    """
    Start web server.

    Args:
        app: Application to serve
        host: Host to bind to
        port: Port to bind to

    Returns:
        Tuple of (AppRunner, TCPSite) for cleanup
    """
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()

    logger.info(f"Estimator server started on {host}:{port}")
    logger.info(f"  - Page: http://{host}:{port}/")
    logger.info(f"  - State: http://{host}:{port}/api/state")
    logger.info(f"  - Health: http://{host}:{port}/health")

    return runner, site


async def stop_web_server(
    runner: web.AppRunner,
    timeout: int = 5,
) -> None:
    """
    Stop web server gracefully.

    Args:
        runner: AppRunner to cleanup
        timeout: Maximum time to wait for cleanup in seconds
    """
    logger.info("Stopping estimator server...")
    try:
        await asyncio.wait_for(runner.cleanup(), timeout=timeout)
        logger.info("Estimator server stopped successfully")
    except TimeoutError:
        logger.warning(f"Estimator server cleanup timed out after {timeout}s")
