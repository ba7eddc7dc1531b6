"""Exception types raised by polars_safe_float."""

from __future__ import annotations


class PrecisionRangeError(ValueError):
    """Precision argument outside the supported -100..100 range."""

    def __init__(self, precision: object):
        self.precision = precision
        super().__init__("Precision value should be in -100..100 range.")


class SafeArithmeticError(ArithmeticError):
    """Data-dependent arithmetic failure, e.g. strict division by zero."""
