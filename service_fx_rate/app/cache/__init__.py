"""In-memory exchange rate cache."""

from .rate_cache import ExchangeRateCache

__all__ = ["ExchangeRateCache"]
