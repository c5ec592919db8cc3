"""Clients for third-party currency and geocoding APIs."""

from .exchange_rates import get_exchange_rates, get_exchange_rate_for
from .geocoding import get_road, NOT_FOUND

__all__ = ["get_exchange_rates", "get_exchange_rate_for", "get_road", "NOT_FOUND"]
