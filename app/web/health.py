"""
Health check endpoints.

Report whether the estimator has started and which optional values
are currently known.
"""

from aiohttp import web

from app.web.keys import ESTIMATOR_KEY


async def health_handler(request: web.Request) -> web.Response:
    """
    Health check endpoint.

    Returns:
        JSON response with estimator status
    """
    estimator = request.app.get(ESTIMATOR_KEY)
    if estimator is None:
        return web.json_response(
            {
                "status": "unhealthy",
                "error": "Estimator not initialized",
            },
            status=503,
        )

    return web.json_response(
        {
            "status": "healthy",
            "price_known": estimator.price is not None,
            "global_points": str(estimator.global_points),
            "lookup_state": str(estimator.lookup_state),
        }
    )


async def liveness_handler(request: web.Request) -> web.Response:
    """
    Liveness check endpoint.

    Returns:
        JSON response indicating if the process is alive
    """
    return web.json_response(
        {
            "status": "alive",
            "alive": True,
        }
    )
