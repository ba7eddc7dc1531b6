from __future__ import annotations

from .config import clamp_precision
from .rounding import round
from .scales import scale


def approx_equal(a: float, b: float, delta: float = 0) -> bool:
    """Check whether two numbers differ by at most ``delta``.

    The difference is rounded at the finest scale among the operands and
    the delta, so float noise alone never makes numbers unequal.

        0.1 + 0.2 == 0.3  # False
        approx_equal(0.1 + 0.2, 0.3, 0.1)  # True
        approx_equal(35.5, 35.55)  # False
    """
    p = clamp_precision(scale(a), scale(b), scale(delta))
    return round(abs(a - b), p) <= delta


def round_equal(a: float, b: float, precision: float = 100) -> bool:
    """Compare two numbers after rounding both to ``precision`` places."""
    return round(a, precision) == round(b, precision)
