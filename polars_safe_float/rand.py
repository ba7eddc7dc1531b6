from __future__ import annotations

import random as _random
from typing import Optional

from .config import resolve_precision
from .rounding import round


def random(min: float = 0, max: float = 1, precision: Optional[int] = None) -> float:
    """Uniform random number in ``[min, max)`` rounded to ``precision`` places.

        random(1, 10, 2)  # e.g. 7.12
    """
    return round(min + _random.random() * (max - min), resolve_precision(precision))
