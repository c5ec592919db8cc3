"""Currency exchange rate lookups against public rate APIs.

Both lookups degrade gracefully: any network, decoding or schema problem is
logged and the caller gets a fallback rate rather than an exception.
"""

import logging
from typing import Optional

import requests

from ..config import get_settings, get_config
from ..utils.http import HTTPClient
from .models import ExchangeRateResponse, LatestRatesResponse

logger = logging.getLogger(__name__)

DEFAULT_EXCHANGE_RATE_URL = "https://v6.exchangerate-api.com/v6"
DEFAULT_EXCHANGERATES_URL = "https://api.exchangeratesapi.io"


def get_exchange_rates(currency: str, fallback: float, api_key: Optional[str] = None,
                       target: Optional[str] = None) -> float:
    """Get the rate from ``currency`` to ``target`` via exchangerate-api.com.

    Args:
        currency: Base currency code, e.g. "EUR"
        fallback: Rate returned if the lookup fails
        api_key: API key (uses EXCHANGE_RATE_API_KEY if None)
        target: Target currency code (uses the configured default, GBP, if None)

    Returns:
        Conversion rate, or fallback on any failure
    """
    api_key = api_key or get_settings().exchange_rate_api_key
    target = target or get_config("apis.exchange_rate.default_target", "GBP")

    if not api_key:
        logger.warning(f"No exchange rate API key configured, falling back on {fallback}")
        return fallback

    base_url = get_config("apis.exchange_rate.base_url", DEFAULT_EXCHANGE_RATE_URL)

    try:
        with HTTPClient() as client:
            data = client.get_json(f"{base_url}/{api_key}/latest/{currency}")
        rates = ExchangeRateResponse.model_validate(data)
    except requests.RequestException as e:
        logger.warning(f"Something went wrong getting {currency} rates, falling back on {fallback}. Error: {e}")
        return fallback
    except ValueError as e:
        logger.warning(f"Could not decode {currency} rates, falling back on {fallback}. Error: {e}")
        return fallback

    rate = rates.conversion_rates.get(target)
    if rate is None:
        logger.warning(f"No {currency}->{target} rate in response, falling back on {fallback}")
        return fallback

    return rate


def get_exchange_rate_for(currency: str, to_currency: str, access_key: Optional[str] = None) -> float:
    """Get the rate from ``currency`` to ``to_currency`` via exchangeratesapi.io.

    Returns:
        Conversion rate, or 0.0 if it could not be determined
    """
    access_key = access_key or get_settings().exchangerates_access_key
    base_url = get_config("apis.exchangerates.base_url", DEFAULT_EXCHANGERATES_URL)

    params = {"base": currency}
    if access_key:
        params["access_key"] = access_key

    try:
        with HTTPClient() as client:
            data = client.get_json(f"{base_url}/latest", params=params)
        rates = LatestRatesResponse.model_validate(data)
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Could not get {currency}->{to_currency} rate: {e}")
        return 0.0

    rate = rates.rates.get(to_currency)
    if rate is None:
        logger.warning(f"No {currency}->{to_currency} rate in response")
        return 0.0

    return rate
