from __future__ import annotations

import math
from decimal import Decimal

from .config import MAX_PRECISION, MIN_PRECISION
from .rounding import round


def scale(num: float) -> float:
    """Calculate the scale of a number.

    The scale is the position at which the number's decimal digits end:
    positive for digits after the decimal point, negative for the trailing
    zeros of a large integer.

        scale(0.001) == 3
        scale(1000) == -3
        scale(2024) == 0
        scale(0) == 0

    NaN and infinities have no scale and yield NaN.
    """
    num = float(num)
    if not math.isfinite(num):
        return math.nan
    # repr is the shortest decimal that round-trips, normalize drops trailing zeros
    return -Decimal(repr(num)).normalize().as_tuple().exponent


def unit(num: float) -> float:
    """Smallest decimal increment at the number's own scale.

        unit(12.347) == 0.001
        unit(2000) == 1000
        unit(2024) == 1

    Past the rounder's precision range the nearest double to the power of
    ten is returned, never less than the smallest subnormal.
    """
    s = scale(num)
    if math.isnan(s):
        return math.nan
    if MIN_PRECISION <= s <= MAX_PRECISION:
        return round(10.0 ** -s, s)
    return max(float(Decimal(1).scaleb(-s)), math.ulp(0.0))
