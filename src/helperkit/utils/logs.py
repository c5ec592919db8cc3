"""Logging setup and error reporting helpers."""

import logging
from typing import Optional

from ..config import get_settings

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: Optional[str] = None):
    """Setup logging configuration.

    Args:
        verbose: Log at DEBUG regardless of other settings
        level: Level name to use instead of the LOG_LEVEL setting
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, (level or get_settings().log_level).upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def check_db_error(err: Optional[BaseException], db: str) -> bool:
    """Log a database connection error if there is one.

    Returns:
        True if an error was reported
    """
    if err is None:
        return False

    logger.error(f"Error connecting to database: {db}. Error: {err}")
    return True
