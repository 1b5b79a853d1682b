"""
Base service class for FX Rate Exporter services.
"""

from fastapi import FastAPI, Request
from contextlib import contextmanager
from typing import Optional
import asyncio
import signal
import time

import uvicorn

from shared.config import ServiceConfig
from shared.logging import get_logger
from shared.errors import ServiceError


class _Server(uvicorn.Server):
    """uvicorn server that leaves signal handling to the owning service."""

    @contextmanager
    def capture_signals(self):
        yield

    def install_signal_handlers(self) -> None:
        pass


class BaseService:
    """Base service class with common functionality."""

    def __init__(self, config: ServiceConfig):
        self.config = config
        self.service_name = config.service_name
        self.host = config.host
        self.port = config.port
        self.logger = get_logger(f"{self.service_name}.service")

        self.server: Optional[uvicorn.Server] = None
        self._interrupted: Optional[asyncio.Event] = None

        # Create FastAPI app
        self.app = self._create_app()

        # Set up middleware
        self._setup_middleware()

    def _create_app(self) -> FastAPI:
        """Create FastAPI application without the generated docs routes."""
        return FastAPI(
            title=f"{self.service_name} service",
            version="1.0.0",
            docs_url=None,
            redoc_url=None,
            openapi_url=None,
        )

    def _setup_middleware(self):
        """Set up middleware."""

        # Request timing middleware
        @self.app.middleware("http")
        async def add_request_timing(request: Request, call_next):
            start_time = time.time()

            response = await call_next(request)

            duration = time.time() - start_time
            self.logger.debug(
                "HTTP request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2)
            )

            return response

    async def start(self):
        """Start background components. Override in subclasses."""

    def request_shutdown(self):
        """Begin graceful shutdown, as if the interrupt signal arrived."""
        if self._interrupted is not None:
            self._interrupted.set()

    def _install_interrupt_handler(self) -> asyncio.Event:
        """Route SIGINT to request_shutdown."""
        self._interrupted = asyncio.Event()
        loop = asyncio.get_running_loop()
        try:
            loop.add_signal_handler(signal.SIGINT, self.request_shutdown)
        except (NotImplementedError, RuntimeError, ValueError) as e:
            raise ServiceError(
                "Failed to listen for interrupt signal",
                details={"error": str(e)}
            ) from e
        return self._interrupted

    def _remove_interrupt_handler(self):
        loop = asyncio.get_running_loop()
        loop.remove_signal_handler(signal.SIGINT)

    def _create_server(self) -> uvicorn.Server:
        config = uvicorn.Config(
            self.app,
            host=self.host,
            port=self.port,
            log_level=self.config.log_level.lower(),
            log_config=None,
            access_log=False,
        )
        return _Server(config)

    async def serve(self):
        """Serve until the interrupt signal, then drain in-flight requests."""
        interrupted = self._install_interrupt_handler()
        try:
            await self.start()

            self.server = self._create_server()
            self.logger.info(f"Starting server on port {self.port}...")

            server_task = asyncio.create_task(self.server.serve())
            interrupt_task = asyncio.create_task(interrupted.wait())

            done, _ = await asyncio.wait(
                {server_task, interrupt_task},
                return_when=asyncio.FIRST_COMPLETED
            )

            if interrupt_task in done:
                self.logger.info("Received termination signal, shutting down gracefully. Bye!")
                self.server.should_exit = True
            else:
                interrupt_task.cancel()

            await server_task
        finally:
            self._remove_interrupt_handler()

    def run(self):
        """Run the service."""
        asyncio.run(self.serve())
