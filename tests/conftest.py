"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Keep tests off the rotating log file
os.environ.setdefault("LOG_FILE", "")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest


def make_http_session(
    json_body=None,
    status: int = 200,
    request_error: Exception | None = None,
    json_error: Exception | None = None,
) -> MagicMock:
    """
    Build mock aiohttp session whose request() yields one response.

    Args:
        json_body: Decoded JSON returned by response.json()
        status: HTTP status of the response
        request_error: Raised when request() is called
        json_error: Raised by response.json()
    """
    response = MagicMock()
    response.status = status
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=json_body)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock(spec=aiohttp.ClientSession)
    session.closed = False
    session.close = AsyncMock()
    if request_error is not None:
        session.request = MagicMock(side_effect=request_error)
    else:
        session.request = MagicMock(return_value=context)
    return session


@pytest.fixture
def http_session_factory():
    """Factory for mock aiohttp sessions."""
    return make_http_session


@pytest.fixture
def redis_storage() -> dict:
    """Backing dict of the mock Redis client."""
    return {}


@pytest.fixture
def mock_redis(redis_storage):
    """Mock async Redis client backed by a dict."""
    client = AsyncMock()
    client.get = AsyncMock(side_effect=lambda key: redis_storage.get(key))
    client.set = AsyncMock(
        side_effect=lambda key, value: redis_storage.__setitem__(key, value)
    )
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def mock_price_service():
    """Mock PriceService returning a fixed price."""
    service = MagicMock()
    service.fetch_price = AsyncMock(return_value=Decimal("0.5"))
    service.close = AsyncMock()
    return service


@pytest.fixture
def mock_staking_service():
    """Mock StakingPointsService with a fixed global total."""
    service = MagicMock()
    service.fetch_global_points = AsyncMock(return_value=Decimal("4e24"))
    service.fetch_user_points = AsyncMock()
    service.close = AsyncMock()
    return service


@pytest.fixture
def sample_wallet_address() -> str:
    """Sample MetisL2 wallet address."""
    return "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb0"
