"""Small self-contained sorting, integer formatting and statistics helpers."""

from typing import Dict, List, Sequence

# Returned by mode() when there is nothing to count
EMPTY_MODE = ""


def sort_descending(sequence: List[str]) -> List[str]:
    """Sort a list of strings into descending lexicographic order, in place.

    The list passed in is mutated and returned. Equal elements may end up in
    either relative order.

    Args:
        sequence: List of strings to reorder

    Returns:
        The same list object, now sorted descending
    """
    sequence.sort(reverse=True)
    return sequence


def int_to_decimal_string(n: int) -> str:
    """Render an integer as base-10 text by extracting digits manually.

    Python ints never overflow, so the most negative 64-bit value (or
    anything wider) is handled without special casing.

    Examples:
        >>> int_to_decimal_string(0)
        '0'
        >>> int_to_decimal_string(-42)
        '-42'
    """
    value = abs(n)
    digits = []
    while True:
        value, digit = divmod(value, 10)
        digits.append(chr(ord('0') + digit))
        if value == 0:
            break

    if n < 0:
        digits.append('-')

    return ''.join(reversed(digits))


def mode(sequence: Sequence[str]) -> str:
    """Return the most frequent string in a sequence.

    Ties are resolved in favour of the value that first pushes its count
    above the running maximum while scanning left to right, so
    ``mode(["a", "b", "b", "a"])`` is ``"b"``.

    Args:
        sequence: Strings to inspect

    Returns:
        Most frequent value, or EMPTY_MODE for an empty sequence
    """
    if not sequence:
        return EMPTY_MODE

    counts: Dict[str, int] = {}
    max_value = sequence[0]
    max_count = 1

    for value in sequence:
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > max_count:
            max_value = value
            max_count = counts[value]

    return max_value
