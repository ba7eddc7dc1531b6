"""Decimal-safe rounding of binary floats.

Rounding to ``precision`` digits never multiplies by ``10 ** precision``.
Instead the shortest round-trip decimal form of the float is taken and its
base-10 exponent is shifted, so the value handed to the rounding function is
exactly the decimal the user sees, just moved to the integer boundary.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Callable, Union

from .config import MAX_PRECISION, MIN_PRECISION
from .errors import PrecisionRangeError


class RoundingMode(str, Enum):
    ROUND = "round"
    FLOOR = "floor"
    CEIL = "ceil"


RoundingModeLike = Union[RoundingMode, str]


def _round_half_up(num: float) -> float:
    # ties go toward +inf: -12.5 -> -12, 12.5 -> 13
    whole = math.floor(num)
    return float(whole + 1 if num - whole >= 0.5 else whole)


def _floor(num: float) -> float:
    return float(math.floor(num))


def _ceil(num: float) -> float:
    return float(math.ceil(num))


# floats this large are already integers
_INTEGRAL_MAGNITUDE = 2.0**53

_ROUNDING_FUNCTIONS: dict[RoundingMode, Callable[[float], float]] = {
    RoundingMode.ROUND: _round_half_up,
    RoundingMode.FLOOR: _floor,
    RoundingMode.CEIL: _ceil,
}


def rounding_function(mode: RoundingModeLike) -> Callable[[float], float]:
    """Look up the integer rounding function for a mode (enum or its string value)."""
    try:
        return _ROUNDING_FUNCTIONS[RoundingMode(mode)]
    except ValueError:
        raise ValueError(
            f"Invalid rounding mode {mode!r}. Must be one of 'round', 'floor', 'ceil'."
        ) from None


def _assert_precision(precision: float) -> None:
    # written so that NaN fails too
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise PrecisionRangeError(precision)


def _unsign_zero(num: float) -> float:
    return num if num != 0 else 0.0


def _shift_exp(num: float, shift: int) -> float:
    return float(Decimal(repr(num)).scaleb(shift))


def round(num: float, precision: float = 0, mode: RoundingModeLike = RoundingMode.ROUND) -> float:
    """Round ``num`` to ``precision`` decimal places.

    Negative precision rounds to the left of the decimal point, so
    ``round(1234, -2) == 1200``. The result is never negative zero.

    Args:
        num: Value to round. NaN and infinities are returned as they are.
        precision: Number of decimal places to keep, in -100..100.
        mode: "round" (half toward +inf), "floor" or "ceil".

    Returns:
        The rounded float.

    Raises:
        PrecisionRangeError: If precision is outside -100..100.
    """
    _assert_precision(precision)
    fn = rounding_function(mode)
    num = float(num)
    if not math.isfinite(num):
        return num
    if not precision:
        return _unsign_zero(fn(num))
    p = math.floor(precision)
    shifted = _shift_exp(num, p)
    if not math.isfinite(shifted) or abs(shifted) >= _INTEGRAL_MAGNITUDE:
        return _unsign_zero(num)
    return _unsign_zero(_shift_exp(fn(shifted), -p))


def floor(num: float, precision: float = 0) -> float:
    """Round ``num`` toward -inf at ``precision`` decimal places."""
    return round(num, precision, RoundingMode.FLOOR)


def ceil(num: float, precision: float = 0) -> float:
    """Round ``num`` toward +inf at ``precision`` decimal places."""
    return round(num, precision, RoundingMode.CEIL)
