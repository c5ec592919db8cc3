"""Response schemas for the third-party APIs."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ExchangeRateResponse(BaseModel):
    """Payload of exchangerate-api.com ``/v6/{key}/latest/{base}``."""
    result: Optional[str] = Field(None, description="'success' or 'error'")
    base_code: Optional[str] = Field(None, description="Base currency code")
    conversion_rates: Dict[str, float] = Field(default_factory=dict, description="Rates keyed by currency code")


class LatestRatesResponse(BaseModel):
    """Payload of exchangeratesapi.io ``/latest``."""
    base: Optional[str] = Field(None, description="Base currency code")
    date: Optional[str] = Field(None, description="Date the rates apply to")
    rates: Dict[str, float] = Field(default_factory=dict, description="Rates keyed by currency code")


class GeocodeResult(BaseModel):
    """Single OpenCage match."""
    formatted: str = Field("", description="Human readable address")


class GeocodeResponse(BaseModel):
    """Payload of the OpenCage geocoding endpoint."""
    results: List[GeocodeResult] = Field(default_factory=list)
