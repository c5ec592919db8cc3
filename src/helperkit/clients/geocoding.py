"""Reverse geocoding through the OpenCage API."""

import logging
from typing import Optional

import requests

from ..config import get_settings, get_config
from ..utils.http import HTTPClient
from .models import GeocodeResponse

logger = logging.getLogger(__name__)

DEFAULT_OPENCAGE_URL = "https://api.opencagedata.com/geocode/v1/json"
NOT_FOUND = "Not found"


def get_road(lat: str, long: str, api_key: Optional[str] = None) -> str:
    """Look up the formatted address nearest to a coordinate pair.

    Args:
        lat: Latitude as text
        long: Longitude as text
        api_key: OpenCage key (uses OPENCAGE_API_KEY if None)

    Returns:
        Formatted address of the first match, or "Not found"
    """
    api_key = api_key or get_settings().opencage_api_key
    base_url = get_config("apis.opencage.base_url", DEFAULT_OPENCAGE_URL)

    # requests encodes the space as '+', giving q=lat+long on the wire
    params = {"q": f"{lat} {long}", "key": api_key or ""}

    try:
        with HTTPClient() as client:
            data = client.get_json(base_url, params=params)
        geo = GeocodeResponse.model_validate(data)
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Geocoding {lat},{long} failed: {e}")
        return NOT_FOUND

    for result in geo.results:
        return result.formatted

    return NOT_FOUND
