"""
FX Rate service: exposes the cached EUR/USD rate for Prometheus scraping.
"""

import asyncio
import sys
from typing import Optional

import httpx
from fastapi.responses import PlainTextResponse

from shared.base_service import BaseService
from shared.config import ServiceConfig, get_config
from shared.errors import ConfigurationError, ServiceError
from shared.logging import configure_logging, get_logger

from .cache.rate_cache import ExchangeRateCache
from .exporters.prometheus import PrometheusExporter, CONTENT_TYPE
from .ingestion.fetcher import RateFetcher


SERVICE_NAME = "fx_rate"
SERVICE_PORT = 8080
METRIC_NAME = "euro_usd_rate"


class FxRateService(BaseService):
    """FX Rate service implementation."""

    def __init__(self, config: ServiceConfig, http_client: Optional[httpx.AsyncClient] = None):
        super().__init__(config)

        self.cache = ExchangeRateCache()
        self.exporter = PrometheusExporter()
        self.fetcher = RateFetcher(
            self.cache,
            api_key=config.api_key,
            refresh_interval_secs=config.refresh_interval_secs,
            client=http_client
        )
        self.fetch_task: Optional[asyncio.Task] = None

        self._setup_metrics_routes()

    def _setup_metrics_routes(self):
        """Set up the scrape route."""
        cache = self.cache
        exporter = self.exporter

        @self.app.get("/metrics", response_class=PlainTextResponse)
        async def export_metrics():
            """Current exchange rate in Prometheus format."""
            return PlainTextResponse(
                exporter.export_gauge(METRIC_NAME, cache.get()),
                media_type=CONTENT_TYPE
            )

    async def start(self):
        """Launch the fetch loop. It runs until the event loop closes."""
        self.fetch_task = asyncio.create_task(self.fetcher.run())
        self.logger.info(
            "Rate fetcher started",
            refresh_interval_secs=self.fetcher.refresh_interval_secs
        )


def main():
    """Console entry point."""
    configure_logging(SERVICE_NAME)
    logger = get_logger(f"{SERVICE_NAME}.main")

    try:
        config = get_config(SERVICE_NAME, SERVICE_PORT)
    except ConfigurationError as e:
        logger.error(e.message, code=e.code, **e.details)
        sys.exit(1)

    configure_logging(SERVICE_NAME, config.log_level, config.log_format)

    service = FxRateService(config)
    try:
        service.run()
    except ServiceError as e:
        logger.error(e.message, code=e.code, **e.details)
        sys.exit(1)


if __name__ == "__main__":
    main()
