"""Parsing and formatting of human-formatted throughput numbers such as ``12.3k`` or ``1,234``."""
import math
import re
from typing import Optional

_SUFFIX_MULTIPLIERS = {
    "k": 1_000.0,
    "M": 1_000_000.0,
}

# ASCII digits only, no underscores or surrounding whitespace
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse(value: str) -> Optional[float]:
    clean_value = value.replace(",", "")
    multiplier = 1.0
    if clean_value and clean_value[-1] in _SUFFIX_MULTIPLIERS:
        multiplier = _SUFFIX_MULTIPLIERS[clean_value[-1]]
        clean_value = clean_value[:-1]

    if not _DECIMAL_PATTERN.fullmatch(clean_value):
        return None
    number = float(clean_value)
    if not math.isfinite(number):
        return None
    return number * multiplier


def parse_magnitude(value: str) -> float:
    """
    Parse a magnitude string into a float.

    Args:
        value: Number with optional thousands commas and an optional ``k`` or ``M`` suffix.

    Returns:
        The parsed value, or 0.0 when the string is not a number.
    """
    number = _parse(value)
    return 0.0 if number is None else number


def format_magnitude(value: str) -> str:
    """
    Re-render a magnitude string with two decimals and a ``k``/``M`` unit.

    Args:
        value: Number in any format accepted by :func:`parse_magnitude`.

    Returns:
        The normalized string, or ``value`` unchanged when it is not a number.
    """
    number = _parse(value)
    if number is None:
        return value

    if number >= 1_000_000:
        return f"{number / 1_000_000:.2f}M"
    if number >= 1_000:
        return f"{number / 1_000:.2f}k"
    return f"{number:.2f}"
