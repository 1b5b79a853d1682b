"""
Shared utilities for the FX Rate Exporter.

This package aggregates common building blocks consumed by the service:

- config: Service configuration via pydantic-settings
- logging: Structured logging through structlog
- errors: Canonical error types
- base_service: FastAPI/uvicorn service shell with graceful shutdown

Do not import from service_* packages into shared/.
"""
