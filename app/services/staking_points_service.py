"""
Staking points service.

Queries the staking API (GraphQL over POST) for the global staking
points total and for the points of a single wallet address.
"""

from decimal import Decimal
from typing import Any

import aiohttp

from app.config.constants import (
    GLOBAL_STAKING_POINTS_QUERY,
    LOOKUP_FAILED_MESSAGE,
    NO_STAKING_POINTS_MESSAGE,
    POINTS_NOT_FOUND_MESSAGE,
    USER_STAKING_POINTS_QUERY,
)
from app.config.settings import settings
from app.models.types import LookupState, UserPointsLookup
from app.services.base_service import BaseApiService, to_decimal
from app.utils.exceptions import ExternalApiError
from app.utils.security import mask_address


class StakingPointsService(BaseApiService):
    """
    Service for staking points lookups.

    Global total lookups are best-effort and return None on failure;
    address lookups classify the outcome for display.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(session=session, timeout=timeout)
        self.url = url or settings.staking_api_url

    async def _query(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Run GraphQL query and return its top-level body.

        Raises:
            ExternalApiError: On transport failure or non-object body
        """
        payload: dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables

        body = await self._request_json(
            "POST",
            self.url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        if not isinstance(body, dict):
            raise ExternalApiError("Unexpected response body", url=self.url)
        return body

    @staticmethod
    def _extract_points(body: dict[str, Any], field: str) -> Any:
        """Return data.<field>.points, or None if the path is missing."""
        data = body.get("data")
        if not isinstance(data, dict):
            return None
        node = data.get(field)
        if not isinstance(node, dict):
            return None
        return node.get("points")

    async def fetch_global_points(self) -> Decimal | None:
        """
        Fetch total staking points across all participants.

        Returns:
            Positive raw points, or None on any failure
        """
        try:
            body = await self._query(GLOBAL_STAKING_POINTS_QUERY)
        except ExternalApiError as e:
            self.logger.error(f"Error fetching global staking points: {e}")
            return None

        points = to_decimal(self._extract_points(body, "globalStakingPoints"))
        if points is None or points <= 0:
            self.logger.warning(f"No usable global staking points in response: {body!r}")
            return None

        self.logger.info(f"Global staking points: {points}")
        return points

    async def fetch_user_points(self, address: str) -> UserPointsLookup:
        """
        Fetch staking points of a wallet address.

        Args:
            address: Wallet address as entered by the user

        Returns:
            UserPointsLookup with SUCCESS, NO_POINTS or ERROR state
        """
        masked = mask_address(address)
        try:
            body = await self._query(USER_STAKING_POINTS_QUERY, {"user": address})
        except ExternalApiError as e:
            self.logger.error(f"Error fetching staking points for {masked}: {e}")
            return UserPointsLookup(LookupState.ERROR, message=LOOKUP_FAILED_MESSAGE)

        raw_points = self._extract_points(body, "stakingPoints")
        points = to_decimal(raw_points)
        if points is None or points < 0:
            self.logger.warning(f"No staking points in response for {masked}")
            return UserPointsLookup(LookupState.ERROR, message=POINTS_NOT_FOUND_MESSAGE)

        if points == 0:
            self.logger.info(f"Wallet {masked} has no staking points")
            return UserPointsLookup(LookupState.NO_POINTS, message=NO_STAKING_POINTS_MESSAGE)

        self.logger.info(f"Wallet {masked} has {points} staking points")
        return UserPointsLookup(LookupState.SUCCESS, points=points)
