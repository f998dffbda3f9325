"""
Decimal number parsing for configuration values.
"""

import re
from typing import Tuple

# Optional whitespace and sign, digits with optional fraction, optional exponent.
# Anything after the longest numeric prefix is ignored.
FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_float(s: str) -> Tuple[float, bool]:
    """
    Parse the leading decimal number of s.

    Args:
        s: Value text

    Returns:
        Tuple of (value, consumed). consumed is False when no characters of s
        formed a number, in which case value is 0.0.

    Examples:
        "0" -> (0.0, True)
        "12.5ohm" -> (12.5, True)
        "abc" -> (0.0, False)
    """
    match = FLOAT_PREFIX.match(s)
    if match is None:
        return 0.0, False
    return float(match.group()), True
