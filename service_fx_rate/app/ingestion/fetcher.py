"""
Exchange rate fetcher for FX Rate Service.
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional

import httpx
from pydantic import ValidationError

from shared.logging import get_logger
from shared.errors import ExporterException, ExternalServiceError, ResponseDecodeError
from ..cache.rate_cache import ExchangeRateCache
from .models import LatestRatesResponse


CURRENCY_API_URL = "https://api.currencyapi.com/v3/latest"
CURRENCY = "EUR"
REQUEST_TIMEOUT = 10.0


class RateFetcher:
    """Keeps an ExchangeRateCache fresh by polling the currency API."""

    def __init__(
        self,
        cache: ExchangeRateCache,
        api_key: str,
        refresh_interval_secs: int,
        api_url: str = CURRENCY_API_URL,
        currency: str = CURRENCY,
        client: Optional[httpx.AsyncClient] = None,
        request_timeout: float = REQUEST_TIMEOUT
    ):
        self.cache = cache
        self.api_key = api_key
        self.refresh_interval_secs = refresh_interval_secs
        self.api_url = api_url
        self.currency = currency
        self.client = client
        self.request_timeout = request_timeout
        self.logger = get_logger("fx_rate.fetcher")

    async def fetch_rate(self, client: httpx.AsyncClient) -> float:
        """Request the latest rate for the configured currency."""
        try:
            response = await client.get(
                self.api_url,
                params={"currencies[]": self.currency},
                headers={"apikey": self.api_key}
            )
        except httpx.HTTPError as e:
            raise ExternalServiceError(
                "currencyapi",
                "Failed to fetch exchange rate from API",
                details={"error": str(e)}
            ) from e

        try:
            payload = LatestRatesResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseDecodeError(
                "currencyapi",
                "Failed to parse API response JSON",
                details={"status_code": response.status_code, "error": str(e)}
            ) from e

        rate = payload.data.get(self.currency)
        if rate is None:
            raise ResponseDecodeError(
                "currencyapi",
                f"Response has no rate for {self.currency}",
                details={"status_code": response.status_code}
            )
        return rate.value

    async def refresh_once(self, client: httpx.AsyncClient) -> bool:
        """Run one fetch cycle. Returns True when the cache was updated."""
        try:
            rate = await self.fetch_rate(client)
        except ExporterException as e:
            self.logger.error(e.message, code=e.code, **e.details)
            return False

        self.cache.set(rate)
        self.logger.info(
            "Refreshed exchange rate",
            euro_usd_rate=rate,
            refreshed_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        )
        return True

    async def run(self):
        """Fetch, store and sleep forever."""
        if self.client is not None:
            await self._loop(self.client)
            return

        async with httpx.AsyncClient(timeout=self.request_timeout) as client:
            await self._loop(client)

    async def _loop(self, client: httpx.AsyncClient):
        while True:
            await self.refresh_once(client)
            await asyncio.sleep(self.refresh_interval_secs)
