"""String, number and collection formatting helpers."""

import json
import logging
import math
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Union

from .algorithms import int_to_decimal_string

logger = logging.getLogger(__name__)


def convert_to_float(s: str) -> float:
    """Convert a string to a float, returning 0.0 when it cannot be parsed."""
    try:
        return float(s)
    except (ValueError, TypeError):
        logger.warning(f"Could not convert {s!r} to a float!")
        return 0.0


def print_emoji(emoji: str, emoji_map: Dict[str, str]) -> str:
    """Look up an emoji by its short name, e.g. "smile" -> emoji_map[":smile:"]."""
    return emoji_map.get(f":{emoji}:", "")


def commaf(v: Union[float, int]) -> str:
    """Format a float with thousands separators using its shortest representation.

    Examples:
        >>> commaf(1234.5)
        '1,234.5'
        >>> commaf(2.0)
        '2'
    """
    v = float(v)
    if not math.isfinite(v):
        return str(v)
    if v.is_integer():
        return f"{int(v):,}"
    # repr gives the shortest round-tripping digits; Decimal avoids exponent notation
    return f"{Decimal(repr(v)):,f}"


def comma(v: int) -> str:
    """Format an integer with thousands separators."""
    return f"{v:,}"


def format_float(num: float) -> str:
    """Format a float with exactly two decimal places."""
    return f"{num:.2f}"


def remove_duplicates(items: Iterable[Any]) -> List[Any]:
    """Remove duplicates while keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


def trim_completely_after(s: str, remover: str) -> str:
    """Drop everything from the first occurrence of ``remover`` onwards."""
    idx = s.find(remover)
    if idx != -1:
        return s[:idx]
    return s


def ensure_str(value: Any) -> str:
    """Return ``value`` unchanged if it is a string.

    Raises:
        TypeError: If value is not a str
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")
    return value


def int_list_to_string(values: Iterable[int], delim: str) -> str:
    """Join integers into a single delimited string."""
    return delim.join(int_to_decimal_string(v) for v in values)


def reverse_list(items: List[Any]) -> List[Any]:
    """Reverse a list in place and return it."""
    items.reverse()
    return items


def json_pretty_print(text: str) -> str:
    """Re-indent a JSON document with tabs.

    Key order and non-ASCII characters are preserved. Input that is not valid
    JSON is returned unchanged.
    """
    try:
        parsed = json.loads(text)
    except (ValueError, TypeError) as e:
        logger.debug(f"Not pretty-printing invalid JSON: {e}")
        return text

    return json.dumps(parsed, indent="\t", ensure_ascii=False)


def currency_symbol(country: str, amount: str) -> str:
    """Decorate an amount with the currency symbol used in ``country``.

    Args:
        country: Country name, e.g. "United Kingdom"
        amount: Already formatted amount

    Returns:
        Amount with symbol, euro for any country not listed
    """
    if country == "United Kingdom":
        return f"£{amount}"
    if country in ("Sweden", "Norway"):
        return f"{amount}kr"
    if country in ("Canada", "New Zealand"):
        return f"${amount}"
    return f"€{amount}"
