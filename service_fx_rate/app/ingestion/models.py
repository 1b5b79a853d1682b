"""
Upstream response models for FX Rate Service.
"""

from typing import Dict, Optional
from pydantic import BaseModel, StrictFloat


class CurrencyRate(BaseModel):
    """Rate of one currency against the API base currency."""

    code: Optional[str] = None
    # JSON numbers only; numeric strings are rejected
    value: StrictFloat


class LatestRatesResponse(BaseModel):
    """Body of the `latest` endpoint."""

    data: Dict[str, CurrencyRate]
