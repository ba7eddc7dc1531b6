"""Conversion of number-like values into floats."""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

from .config import MAX_PRECISION, MIN_PRECISION
from .rounding import RoundingMode, RoundingModeLike, round
from .scales import scale

ParseableNumber = Union[int, float, str]

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_percentage(value: Any) -> bool:
    """True for strings like ``"20%"`` or ``" 1.5 % "``."""
    return isinstance(value, str) and value.strip().endswith("%")


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_number(
    value: Any,
    precision: Optional[float] = None,
    mode: RoundingModeLike = RoundingMode.ROUND,
) -> float:
    """Parse a number-like value into a float.

    Accepts floats, integers of any size and decimal strings, optionally
    suffixed with ``%`` (divided by 100). Values are not coerced: booleans,
    None and anything else that is not number-shaped parse to NaN.

        parse_number("0.1") == 0.1
        parse_number("1.5%", 2) == 0.02
        parse_number("1.5%", 2, "floor") == 0.01
        parse_number(False)  # nan

    Args:
        value: The number-like value.
        precision: Decimal places to round to. Strings default to their own
            scale (plus 2 for percentages); numbers are left as they are.
        mode: Rounding mode used when rounding.

    Returns:
        The parsed float, or NaN.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        num = _int_to_float(value) if isinstance(value, int) else float(value)
        return num if precision is None else round(num, precision, mode)
    if not isinstance(value, str):
        return math.nan

    s = value.strip()
    percent = s.endswith("%")
    literal = s[:-1].strip() if percent else s
    if not _DECIMAL_LITERAL.fullmatch(literal):
        return math.nan
    num = float(literal)
    result = num / 100 if percent else num
    if not math.isfinite(num):
        return result
    if precision is None:
        precision = scale(num) + (2 if percent else 0)
        if not MIN_PRECISION <= precision <= MAX_PRECISION:
            return result
    return round(result, precision, mode)
