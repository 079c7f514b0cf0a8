"""
Numeric input parsing utilities.

Normalize numeric values arriving from query strings or JSON bodies.
A value that cannot be parsed is treated as missing (None), never as 0.
"""

import math
from typing import Any, Optional

from loguru import logger

parser_log = logger.bind(module="Parser")


def first_value(value: Any) -> Any:
    """
    Unwrap repeated query parameters.

    Args:
        value: Raw value, possibly a list like ["10", "20"]

    Returns:
        First element for lists/tuples, the value itself otherwise
    """
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def parse_text(value: Any) -> Optional[str]:
    """
    Parse a free-text field.

    Examples:
        >>> parse_text("  Kathmandu ")
        'Kathmandu'
        >>> parse_text("   ") is None
        True
    """
    value = first_value(value)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a numeric value, stripping thousands separators.

    Args:
        value: int/float, or string like "1,200.50"

    Returns:
        Parsed float, or None if missing or malformed

    Examples:
        >>> parse_number("1,200.50")
        1200.5
        >>> parse_number(15)
        15.0
        >>> parse_number("abc") is None
        True
        >>> parse_number("") is None
        True
    """
    value = first_value(value)
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        raw = value
    elif isinstance(value, str):
        raw = value.replace(",", "").strip()
        if not raw:
            return None
    else:
        parser_log.debug(f"Ignoring non-numeric value of type {type(value).__name__}")
        return None

    try:
        number = float(raw)
    except (ValueError, OverflowError):
        parser_log.debug(f"Malformed numeric input ignored: {value!r}")
        return None

    if math.isnan(number) or math.isinf(number):
        parser_log.debug(f"Non-finite numeric input ignored: {value!r}")
        return None
    return number


def parse_int(value: Any) -> Optional[int]:
    """
    Parse a numeric value and truncate it toward zero.

    Examples:
        >>> parse_int("2.9")
        2
        >>> parse_int("x") is None
        True
    """
    number = parse_number(value)
    if number is None or math.isinf(number):
        return None
    return math.trunc(number)
