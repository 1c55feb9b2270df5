"""
Utility functions for the schema to C# generator.
"""

import math
import re

# User-defined schema types are capitalized, primitive names are not
_USER_DEFINED_PATTERN = re.compile(r"^[A-Z]")

# Decimal numbers with optional fraction and exponent
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

# Hexadecimal, octal and binary integer literals
_RADIX_PATTERN = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def capitalize(text: str) -> str:
    """Upper-case the first character and keep the rest as is.

    Examples:
        "array" -> "Array"
        "map" -> "Map"
        "" -> ""
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def is_user_defined_name(name: str | None) -> bool:
    """Whether a type name follows the convention for user-defined structures."""
    return bool(name) and _USER_DEFINED_PATTERN.match(name) is not None


def parse_number(text: str) -> int | float | None:
    """Parse numeric text the way schema enum values are written.

    Integral values come back as ``int``, fractional ones as ``float``.
    Returns None when the text is not a finite number.

    Examples:
        "5" -> 5
        "5.5" -> 5.5
        "1e3" -> 1000
        "0x10" -> 16
        "red" -> None
    """
    text = text.strip()
    if _RADIX_PATTERN.fullmatch(text):
        return int(text, 0)
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number
