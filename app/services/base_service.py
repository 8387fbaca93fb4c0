"""
Base service class.

Provides common functionality for remote API services including
aiohttp session management, logging and JSON request helpers.
"""

import asyncio
from decimal import Decimal, InvalidOperation
from typing import Any

import aiohttp
from loguru import logger

from app.config.settings import settings
from app.utils.exceptions import ExternalApiError
from calculator.constants import is_supported_magnitude


class BaseApiService:
    """
    Base class for remote API services.

    Provides common functionality:
    - Lazily created, shared aiohttp session
    - Logging with bound service context
    - JSON request helper raising ExternalApiError
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize base service.

        Args:
            session: Optional externally managed aiohttp session
            timeout: Total request timeout in seconds
        """
        self._session = session
        self._owns_session = session is None
        self.timeout = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else settings.http_timeout_seconds
        )
        self.logger = logger.bind(service=self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this service created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _request_json(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> Any:
        """
        Perform HTTP request and decode JSON body.

        Args:
            method: HTTP method
            url: Request URL
            **kwargs: Passed to aiohttp request (params, json, headers)

        Returns:
            Decoded JSON body

        Raises:
            ExternalApiError: On transport error, non-200 status or invalid JSON
        """
        try:
            session = await self._get_session()
            async with session.request(
                method,
                url,
                timeout=self.timeout,
                **kwargs,
            ) as response:
                if response.status != 200:
                    raise ExternalApiError(f"HTTP {response.status}", url=url)
                return await response.json(content_type=None)
        except ExternalApiError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise ExternalApiError(f"Request failed: {e}", url=url) from e


def to_decimal(value: Any) -> Decimal | None:
    """
    Convert JSON number or numeric string to Decimal.

    Returns:
        Decimal, or None for booleans, non-numeric, non-finite or
        out-of-range values
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str, Decimal)):
        return None
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not result.is_finite() or not is_supported_magnitude(result):
        return None
    return result
