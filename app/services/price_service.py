"""
Price service.

Fetches the current ENKI USD price from the public price-quote API.
Best-effort: any failure leaves the price unknown.
"""

from decimal import Decimal

import aiohttp

from app.config.settings import settings
from app.services.base_service import BaseApiService, to_decimal
from app.utils.exceptions import ExternalApiError


class PriceService(BaseApiService):
    """Service for the current USD price of the staked asset."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        url: str | None = None,
        asset_id: str | None = None,
        vs_currency: str | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(session=session, timeout=timeout)
        self.url = url or settings.price_api_url
        self.asset_id = asset_id or settings.price_asset_id
        self.vs_currency = vs_currency or settings.price_vs_currency

    async def fetch_price(self) -> Decimal | None:
        """
        Fetch current price.

        Response shape: {"enki-protocol": {"usd": 0.1234}}

        Returns:
            Price as Decimal, or None on any failure
        """
        try:
            data = await self._request_json(
                "GET",
                self.url,
                params={"ids": self.asset_id, "vs_currencies": self.vs_currency},
            )
        except ExternalApiError as e:
            self.logger.error(f"Error fetching {self.asset_id} price: {e}")
            return None

        try:
            raw_price = data[self.asset_id][self.vs_currency]
        except (KeyError, TypeError):
            self.logger.error(f"Malformed price response for {self.asset_id}: {data!r}")
            return None

        price = to_decimal(raw_price)
        if price is None or price < 0:
            self.logger.error(f"Invalid {self.asset_id} price value: {raw_price!r}")
            return None

        self.logger.debug(f"{self.asset_id} price: {price} {self.vs_currency}")
        return price
