"""File opening and downloading helpers."""

import logging
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Union

from .http import HTTPClient

logger = logging.getLogger(__name__)


def open_file(path: Union[str, Path]) -> BinaryIO:
    """Open a file for binary reading. The caller is responsible for closing it.

    Raises:
        OSError: If the file cannot be opened
    """
    return open(path, 'rb')


def open_csv_file(path: Union[str, Path]) -> Optional[TextIO]:
    """Open a CSV file for reading with ``csv`` module newline handling.

    Returns:
        Open text handle, or None if the file could not be opened
    """
    try:
        return open(path, 'r', newline='', encoding='utf-8')
    except OSError as e:
        logger.error(f"Error opening file {path}: {e}")
        return None


def download_and_save_file(path: Union[str, Path], url: str) -> Path:
    """Download ``url`` and write its body to ``path``.

    Raises:
        requests.RequestException: If the download fails
        OSError: If the file cannot be written
    """
    with HTTPClient() as client:
        return client.download(url, path)
