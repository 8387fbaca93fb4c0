"""
Web layer.

aiohttp application serving the estimator page and JSON API.
"""

from app.web.app import create_app, start_web_server, stop_web_server

__all__ = [
    "create_app",
    "start_web_server",
    "stop_web_server",
]
