"""
Shared error handling for the FX Rate Exporter.
"""

from typing import Dict, Any, Optional


class ExporterException(Exception):
    """Base exception for exporter services."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(ExporterException):
    """Invalid or missing configuration."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class ServiceError(ExporterException):
    """Service-related errors."""

    def __init__(self, message: str = "Service error", details: Optional[Dict[str, Any]] = None):
        super().__init__("SERVICE_ERROR", message, details)


class ExternalServiceError(ExporterException):
    """External service errors."""

    def __init__(self, service: str, message: str = "External service error", details: Optional[Dict[str, Any]] = None):
        super().__init__("EXTERNAL_SERVICE_ERROR", f"{service}: {message}", details)


class ResponseDecodeError(ExporterException):
    """An upstream response body did not have the expected shape."""

    def __init__(self, service: str, message: str = "Unexpected response body", details: Optional[Dict[str, Any]] = None):
        super().__init__("RESPONSE_DECODE_ERROR", f"{service}: {message}", details)
