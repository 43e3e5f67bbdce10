"""
Input validation functions for the unicon command line.

This module provides validation for the raw strings the user types:
- The value to convert
- The number of decimal places to round to
"""

import re
from typing import Optional, Tuple

from .constants import ERROR_INVALID_ROUND, ERROR_INVALID_VALUE

# Optional sign, digits, at most one decimal point. No exponents, no nan/inf.
_NUMERIC_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

_ROUND_PATTERN = re.compile(r"[0-9]+")


def validate_numeric_value(value: Optional[str]) -> Tuple[bool, str]:
    """
    Validate that a string is a plain decimal number.

    Accepts "12", "-3.5", "+7.", ".5". Rejects exponent notation, "nan",
    "inf", embedded whitespace and a lone sign or decimal point.

    Args:
        value: The string value to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or not _NUMERIC_PATTERN.fullmatch(value):
        return False, ERROR_INVALID_VALUE
    return True, ""


def validate_round_places(value: Optional[str]) -> Tuple[bool, str]:
    """
    Validate a --round argument.

    Args:
        value: The string value to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or not _ROUND_PATTERN.fullmatch(value):
        return False, ERROR_INVALID_ROUND
    return True, ""
