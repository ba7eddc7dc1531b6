from __future__ import annotations

import logging

from .approx import approx_equal, round_equal
from .config import default_precision
from .errors import PrecisionRangeError, SafeArithmeticError
from .ops import add, average, avg, divide, modulo, multiply, subtract, sum
from .parse import ParseableNumber, is_percentage, parse_number
from .rand import random
from .rounding import RoundingMode, ceil, floor, round
from .scales import scale, unit

# Importing these registers the ``.safe`` expression namespace and patches DataFrame
from . import namespace as expr
from .namespace import SafeFloatNamespace, lit
from .display import format_safe_float_dataframe, print_safe_float_dataframe, to_plain_string

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export for convenience
__all__ = [
    "scale",
    "unit",
    "round",
    "floor",
    "ceil",
    "RoundingMode",
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "sum",
    "average",
    "avg",
    "approx_equal",
    "round_equal",
    "parse_number",
    "is_percentage",
    "ParseableNumber",
    "random",
    "default_precision",
    "PrecisionRangeError",
    "SafeArithmeticError",
    "expr",
    "lit",
    "SafeFloatNamespace",
    "format_safe_float_dataframe",
    "print_safe_float_dataframe",
    "to_plain_string",
]
