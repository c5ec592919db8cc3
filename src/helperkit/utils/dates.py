"""Date parsing and formatting utilities."""

import calendar
import logging
from datetime import datetime
from typing import Dict, Optional, Union

from dateutil.parser import parse as dateutil_parse

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# English names only; calendar.month_name follows the process locale
_MONTH_NUMBERS = {name.lower(): number for number, name in enumerate(MONTH_NAMES, start=1)}

DATE_ERROR_MESSAGE = "There was an error loading the date!"


def parse_date(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse a date string into a datetime object.

    Args:
        value: Date string, datetime object, or None

    Returns:
        Parsed datetime or None if parsing fails
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value

    if not isinstance(value, str):
        return None

    try:
        return dateutil_parse(value)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse date {value!r}: {e}")
        return None


def properly_format_date(date_str: str, errors: Optional[Dict[str, str]] = None) -> str:
    """Reformat an ISO ``YYYY-MM-DD`` date as e.g. "January 2 2006".

    Args:
        date_str: Date in YYYY-MM-DD form
        errors: Optional mapping that receives an "Err" message on failure

    Returns:
        Human readable date

    Raises:
        ValueError: If date_str is not a valid YYYY-MM-DD date
    """
    try:
        parsed = datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError:
        if errors is not None:
            errors["Err"] = DATE_ERROR_MESSAGE
        logger.warning(f"Invalid date {date_str!r}, expected YYYY-MM-DD")
        raise

    return f"{MONTH_NAMES[parsed.month - 1]} {parsed.day} {parsed.year}"


def day_suffix(day: int) -> str:
    """Ordinal suffix for a day of the month."""
    if day in (1, 21, 31):
        return "st"
    if day in (2, 22):
        return "nd"
    if day in (3, 23):
        return "rd"
    return "th"


def format_date_with_suffix(dt: Union[datetime, str]) -> str:
    """Format a date like "January 2nd, 2006".

    Strings are parsed leniently first.

    Raises:
        ValueError: If a string cannot be parsed as a date
    """
    if isinstance(dt, str):
        parsed = parse_date(dt)
        if parsed is None:
            raise ValueError(f"Could not parse date: {dt!r}")
        dt = parsed

    return f"{MONTH_NAMES[dt.month - 1]} {dt.day}{day_suffix(dt.day)}, {dt.year}"


def days_in(month: int, year: int) -> int:
    """Number of days in a month, where month is 1-12.

    Months outside 1-12 roll over into neighbouring years, so month 13 of
    2023 is January 2024.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return calendar.monthrange(year, month)[1]


def get_month_from_name(month_name: str) -> int:
    """Month number for an English month name, defaulting to January."""
    return _MONTH_NUMBERS.get(month_name.strip().lower(), 1)


def get_days_in_month(month_name: str, year: int) -> int:
    """Days in a month given by English name; unknown names count as 31 days."""
    month = _MONTH_NUMBERS.get(month_name.strip().lower())
    if month is None:
        logger.debug(f"Unknown month name {month_name!r}, assuming 31 days")
        return 31

    return days_in(month, year)


def beginning_of_day(dt: datetime) -> datetime:
    """Midnight at the start of dt's date, keeping its timezone."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(dt: datetime) -> datetime:
    """23:59:59 on dt's date, keeping its timezone."""
    return dt.replace(hour=23, minute=59, second=59, microsecond=0)
