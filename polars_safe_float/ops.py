"""Arithmetic over parseable numbers without binary float noise.

Each operator derives the scale its result can meaningfully have from the
scales of its operands and rounds the raw float result to it exactly once.
"""

from __future__ import annotations

import logging
import math
from functools import reduce
from typing import Iterable, Optional

from .config import clamp_precision, resolve_precision
from .errors import SafeArithmeticError
from .parse import ParseableNumber, is_percentage, parse_number
from .rounding import round
from .scales import scale

logger = logging.getLogger(__name__)


def multiply(a: ParseableNumber, b: ParseableNumber) -> float:
    """Multiply two parseable numbers.

        0.2 * 0.2 == 0.04000000000000001
        multiply(0.2, 0.2) == 0.04
    """
    o1 = parse_number(a)
    if not math.isfinite(o1):
        return o1
    o2 = parse_number(b)
    if not math.isfinite(o2):
        return o2
    p = clamp_precision(scale(o1) + scale(o2))
    return round(o1 * o2, p)


def _parse_relative_operands(a: ParseableNumber, b: ParseableNumber) -> tuple[float, float]:
    # a trailing % on the second operand makes it a share of the first
    o1 = parse_number(a)
    o2 = parse_number(b)
    if is_percentage(b):
        logger.debug("Resolving %r relative to %r", b, o1)
        o2 = multiply(o1, o2)
    return o1, o2


def _add(o1: float, o2: float) -> float:
    if math.isnan(o1):
        return o1
    if math.isnan(o2):
        return o2
    p = clamp_precision(scale(o1), scale(o2))
    return round(o1 + o2, p)


def add(a: ParseableNumber, b: ParseableNumber) -> float:
    """Add two parseable numbers.

    A percentage second operand is applied to the first one:

        0.1 + 0.2 == 0.30000000000000004
        add(0.1, 0.2) == 0.3
        add(10, "20%") == 12
        add("20%", 10) == 10.2
    """
    return _add(*_parse_relative_operands(a, b))


def subtract(a: ParseableNumber, b: ParseableNumber) -> float:
    """Subtract ``b`` from ``a``; a percentage ``b`` is taken of ``a``.

        subtract(0.3, 0.2) == 0.1
        subtract(10, "20%") == 8
    """
    o1, o2 = _parse_relative_operands(a, b)
    return _add(o1, -o2)


def sum(nums: Iterable[ParseableNumber]) -> float:
    """Sum an iterable of parseable numbers, 0 when empty."""
    return reduce(add, nums, 0.0)


def _ieee_divide(o1: float, o2: float) -> float:
    # o2 is a (signed) zero here
    if math.isnan(o1) or o1 == 0:
        return math.nan
    return math.copysign(math.inf, o1) * math.copysign(1.0, o2)


def divide(
    a: ParseableNumber,
    b: ParseableNumber,
    precision: Optional[int] = None,
    strict: bool = True,
) -> float:
    """Divide ``a`` by ``b`` and round to ``precision`` decimal places.

    Dividing by an infinity gives an unsigned 0.

        divide(10, 3, 4) == 3.3333
        divide(10, 0, 16, False) == inf

    Args:
        a: Dividend.
        b: Divisor.
        precision: Decimal places of the result, defaults to
            ``default_precision()`` (16).
        strict: Raise on a zero divisor instead of returning the IEEE result.

    Raises:
        SafeArithmeticError: If ``b`` is zero and ``strict`` is set.
    """
    o1 = parse_number(a)
    if math.isnan(o1):
        return o1
    o2 = parse_number(b)
    if math.isnan(o2):
        return o2
    if o2 == 0:
        if strict:
            raise SafeArithmeticError("Division by zero")
        logger.debug("Non-strict division of %r by zero", o1)
        return _ieee_divide(o1, o2)
    return round(o1 / o2, resolve_precision(precision))


def average(nums: Iterable[ParseableNumber], precision: Optional[int] = None) -> float:
    """Mean of an iterable of parseable numbers, 0 when empty."""
    values = list(nums)
    if not values:
        return 0.0
    return divide(sum(values), len(values), precision)


avg = average


def modulo(a: ParseableNumber, b: ParseableNumber) -> float:
    """Modulo whose result takes the sign of the divisor, unlike math.fmod.

        math.fmod(-5, 3) == -2
        modulo(-5, 3) == 1
        modulo(5, -3) == -1

    Non-finite operands and a zero divisor give NaN.
    """
    o1 = parse_number(a)
    if not math.isfinite(o1):
        return math.nan
    o2 = parse_number(b)
    if not math.isfinite(o2) or o2 == 0:
        return math.nan
    return math.fmod(_add(math.fmod(o1, o2), o2), o2)
