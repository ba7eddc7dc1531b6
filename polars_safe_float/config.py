from __future__ import annotations

import logging
import math
import os

logger = logging.getLogger(__name__)

PRECISION_ENV = "SAFE_FLOAT_PRECISION"
DEFAULT_PRECISION = 16

MIN_PRECISION = -100
MAX_PRECISION = 100


def default_precision() -> int:
    """Resolve the precision used by divide/average/random when none is passed.

    Order: env SAFE_FLOAT_PRECISION -> 16
    """
    env = os.getenv(PRECISION_ENV)
    if not env:
        return DEFAULT_PRECISION
    try:
        value = int(env.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", PRECISION_ENV, env)
        return DEFAULT_PRECISION
    if not MIN_PRECISION <= value <= MAX_PRECISION:
        logger.warning(
            "Ignoring %s=%r: outside %d..%d", PRECISION_ENV, env, MIN_PRECISION, MAX_PRECISION
        )
        return DEFAULT_PRECISION
    return value


def resolve_precision(precision: int | None) -> int:
    return default_precision() if precision is None else precision


def clamp_precision(*scales: float) -> int:
    """Largest of the given scales, clamped into the valid precision range.

    NaN scales (from non-finite operands) yield 0 so that the sentinel value
    passes through the rounder untouched.
    """
    if any(math.isnan(s) for s in scales):
        return 0
    return int(min(max(MIN_PRECISION, *scales), MAX_PRECISION))
