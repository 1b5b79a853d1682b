"""
Shared configuration management for the FX Rate Exporter.
"""

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.errors import ConfigurationError
from shared.logging import get_logger


DEFAULT_REFRESH_INTERVAL_SECS = 21600
DEFAULT_HOST = "0.0.0.0"


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"
    log_format: Literal["console", "json"] = "console"

    # Exchange rate feed
    api_key: str = Field(min_length=1)
    refresh_interval_secs: int = Field(default=DEFAULT_REFRESH_INTERVAL_SECS)

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @field_validator("refresh_interval_secs", mode="before")
    @classmethod
    def _fallback_refresh_interval(cls, value: Any) -> int:
        """Substitute the default for unparsable or non-positive intervals."""
        try:
            interval = int(str(value).strip())
        except ValueError:
            interval = 0
        if interval <= 0:
            get_logger("fx_rate.config").warning(
                "Invalid REFRESH_INTERVAL_SECS value; using default",
                value=value,
                default=DEFAULT_REFRESH_INTERVAL_SECS
            )
            return DEFAULT_REFRESH_INTERVAL_SECS
        return interval


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = DEFAULT_HOST

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int, host: str = DEFAULT_HOST, **overrides) -> ServiceConfig:
    """Get configuration for a specific service. Bind address and port are never read from the environment."""
    try:
        return ServiceConfig(service_name=service_name, port=port, host=host, **overrides)
    except ValidationError as e:
        fields = sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]})
        if "api_key" in fields:
            raise ConfigurationError(
                "Environment variable API_KEY is not set",
                details={"fields": fields}
            ) from e
        raise ConfigurationError(
            f"Invalid configuration: {', '.join(field.upper() for field in fields) or 'unknown'}",
            details={"fields": fields}
        ) from e
