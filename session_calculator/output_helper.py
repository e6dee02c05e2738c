"""Output helper for Session Calculator.

Formats values and history entries for the console, and parses the tokens
the user types:
- Numbers printed like C++ stream output (%g, 6 significant digits)
- Seed and step entries for calculation records
- Number, operation and selection tokens
"""

import math
import re
from typing import Optional


DEFAULT_PRECISION = 6

# Optional sign, digits with optional fraction, optional exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")

# Selections are read as a C int.
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a value with the given number of significant digits.

    Args:
        value: Value to format.
        precision: Significant digits.

    Returns:
        Shortest %g rendering, e.g. "15", "0.333333", "1e+06".
    """
    return f"{value:.{precision}g}"


def format_seed(seed: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format the first entry of a calculation record."""
    return f"Start: {format_number(seed, precision)}"


def format_step(
    previous: float,
    symbol: str,
    operand: float,
    result: float,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Format one applied operation as "previous op operand = result"."""
    return (
        f"{format_number(previous, precision)} {symbol} "
        f"{format_number(operand, precision)} = {format_number(result, precision)}"
    )


def format_summary(index: int, last_result: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format one line of the stored calculations list."""
    return f"  {index}) Last result: {format_number(last_result, precision)}"


def parse_number(text: str) -> Optional[float]:
    """Parse a decimal literal.

    Returns:
        The value, or None if text is not a plain decimal literal.
        Words like "inf" or "nan", underscores and literals that overflow
        a float are rejected.
    """
    text = text.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_selection(text: str) -> Optional[int]:
    """Parse a history selection.

    Returns:
        The integer, or None if text is not an integer literal or does not
        fit a C int. The list range is checked by the caller.
    """
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    # int() refuses very long literals; anything over 10 digits is out of range anyway
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > 10:
        return None
    value = -int(digits) if text.startswith("-") else int(digits)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value
