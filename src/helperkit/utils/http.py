"""HTTP client utilities for third-party API calls and downloads."""

import logging
import time
from pathlib import Path
from typing import Dict, Optional, Any, Union
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import get_settings, get_config


class HTTPClient:
    """HTTP client with rate limiting and retry logic."""

    def __init__(self, base_url: str = "", delay: Optional[float] = None):
        """Initialize HTTP client.

        Args:
            base_url: Base URL for relative requests
            delay: Minimum seconds between requests (uses config default if None)
        """
        self.logger = logging.getLogger(__name__)
        self.base_url = base_url
        self.delay = delay if delay is not None else get_config("http.default_delay", 0.0)
        self.last_request_time = 0.0

        settings = get_settings()

        self.session = requests.Session()

        retry_strategy = Retry(
            total=get_config("http.retries", 3),
            backoff_factor=get_config("http.backoff_factor", 2),
            status_forcelist=[429, 500, 502, 503, 504],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({
            "User-Agent": settings.user_agent,
            "Accept": "application/json, */*",
        })

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _rate_limit(self):
        """Sleep until at least ``delay`` seconds have passed since the last request."""
        now = time.time()
        time_since_last = now - self.last_request_time

        if time_since_last < self.delay:
            time.sleep(self.delay - time_since_last)

        self.last_request_time = time.time()

    def _absolute_url(self, url: str) -> str:
        if self.base_url and not url.startswith(('http://', 'https://')):
            return urljoin(self.base_url, url)
        return url

    def get(self, url: str, **kwargs) -> requests.Response:
        """Make a GET request with rate limiting.

        Args:
            url: URL to request (absolute or relative to base_url)
            **kwargs: Additional arguments for requests.get

        Returns:
            Response object

        Raises:
            requests.RequestException: On connection failure or an error status
        """
        self._rate_limit()

        url = self._absolute_url(url)
        kwargs.setdefault('timeout', get_settings().http_timeout)

        self.logger.debug(f"GET {url}")
        response = self.session.get(url, **kwargs)
        response.raise_for_status()

        return response

    def get_json(self, url: str, **kwargs) -> Dict[str, Any]:
        """Make a GET request and return the decoded JSON body."""
        response = self.get(url, **kwargs)
        return response.json()

    def download(self, url: str, dest: Union[str, Path], chunk_size: int = 8192) -> Path:
        """Stream a URL's body into a file.

        Args:
            url: URL to download
            dest: File to create or overwrite
            chunk_size: Bytes per write

        Returns:
            Path of the written file
        """
        dest = Path(dest)
        with self.get(url, stream=True) as response:
            with open(dest, 'wb') as f:
                for chunk in response.iter_content(chunk_size=chunk_size):
                    if chunk:
                        f.write(chunk)

        self.logger.info(f"Saved {url} to {dest}")
        return dest

    def close(self):
        """Close the session."""
        self.session.close()
