"""Utility functions and helpers."""

from .algorithms import EMPTY_MODE, sort_descending, int_to_decimal_string, mode
from .http import HTTPClient
from .dates import (
    parse_date,
    properly_format_date,
    format_date_with_suffix,
    days_in,
    get_days_in_month,
    get_month_from_name,
    beginning_of_day,
    end_of_day,
)
from .strings import (
    convert_to_float,
    print_emoji,
    commaf,
    comma,
    format_float,
    remove_duplicates,
    trim_completely_after,
    ensure_str,
    int_list_to_string,
    reverse_list,
    json_pretty_print,
    currency_symbol,
)
from .files import open_file, open_csv_file, download_and_save_file
from .logs import setup_logging, check_db_error

__all__ = [
    "EMPTY_MODE", "sort_descending", "int_to_decimal_string", "mode",
    "HTTPClient",
    "parse_date", "properly_format_date", "format_date_with_suffix", "days_in",
    "get_days_in_month", "get_month_from_name", "beginning_of_day", "end_of_day",
    "convert_to_float", "print_emoji", "commaf", "comma", "format_float",
    "remove_duplicates", "trim_completely_after", "ensure_str", "int_list_to_string",
    "reverse_list", "json_pretty_print", "currency_symbol",
    "open_file", "open_csv_file", "download_and_save_file",
    "setup_logging", "check_db_error",
]
