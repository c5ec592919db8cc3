"""helperkit - assorted formatting, date, algorithm and API helpers."""

__version__ = "0.1.0"
