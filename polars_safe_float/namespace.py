"""Column-wise decimal-safe arithmetic for polars expressions.

Every function here maps the scalar implementation over the rows of an
expression. Binary operations pack both operands into a struct so that
percentage strings reach the scalar operators untouched.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

import polars as pl

from . import approx, ops
from .parse import is_percentage, parse_number
from .rounding import RoundingMode, RoundingModeLike, round
from .scales import scale, unit

logger = logging.getLogger(__name__)

NAMESPACE = "safe"


def lit(value: Any) -> pl.Expr:
    """Construct a Float64 literal expression from a parseable value."""
    return pl.lit(parse_number(value), dtype=pl.Float64)


def _coerce_arg(arg: Any) -> Any:
    """Coerce Python scalars into expressions.

    - int/float -> Float64 literal
    - percentage str ("20%") -> String literal, resolved by the operator
    - numeric str -> Float64 literal
    - any other str -> column of that name
    Otherwise returns the argument unchanged (assumed to be a Polars expr).

    A column whose name parses as a number ("2024") must be passed as
    ``pl.col(name)``; the bare string is read as a literal.
    """
    if isinstance(arg, (int, float)) and not isinstance(arg, bool):
        return lit(arg)
    if isinstance(arg, str):
        if is_percentage(arg):
            return pl.lit(arg)
        if not math.isnan(parse_number(arg)):
            return lit(arg)
        return pl.col(arg)
    return arg


def _map_unary(expr: Any, fn: Callable[[Any], Any], return_dtype: Any = pl.Float64) -> pl.Expr:
    return _coerce_arg(expr).map_elements(fn, return_dtype=return_dtype)


def _map_binary(
    fn: Callable[[Any, Any], Any], a: Any, b: Any, return_dtype: Any = pl.Float64
) -> pl.Expr:
    packed = pl.struct(_coerce_arg(a).alias("a"), _coerce_arg(b).alias("b"))
    return packed.map_elements(lambda row: fn(row["a"], row["b"]), return_dtype=return_dtype)


def _map_agg(expr: Any, fn: Callable[[list], float]) -> pl.Expr:
    return _coerce_arg(expr).map_batches(
        lambda s: fn(s.drop_nulls().to_list()),
        return_dtype=pl.Float64,
        returns_scalar=True,
    )


def _approx(delta: float) -> Callable[[Any, Any], bool]:
    def call(a: Any, b: Any) -> bool:
        return approx.approx_equal(parse_number(a), parse_number(b), delta)

    return call


def _round_eq(precision: float) -> Callable[[Any, Any], bool]:
    def call(a: Any, b: Any) -> bool:
        return approx.round_equal(parse_number(a), parse_number(b), precision)

    return call


def _divider(precision: int | None, strict: bool) -> Callable[[Any, Any], float]:
    def call(a: Any, b: Any) -> float:
        return ops.divide(a, b, precision, strict)

    return call


def round_expr(expr: Any, precision: float = 0, mode: RoundingModeLike = RoundingMode.ROUND) -> pl.Expr:
    # validate eagerly rather than on the first row
    round(0.0, precision, mode)
    return _map_unary(expr, lambda x: round(x, precision, mode))


def scale_expr(expr: Any) -> pl.Expr:
    return _map_unary(expr, lambda x: float(scale(x)))


def unit_expr(expr: Any) -> pl.Expr:
    return _map_unary(expr, unit)


def add(a: Any, b: Any) -> pl.Expr:
    return _map_binary(ops.add, a, b)


def sub(a: Any, b: Any) -> pl.Expr:
    return _map_binary(ops.subtract, a, b)


def mul(a: Any, b: Any) -> pl.Expr:
    return _map_binary(ops.multiply, a, b)


def div(a: Any, b: Any, precision: int | None = None, strict: bool = True) -> pl.Expr:
    return _map_binary(_divider(precision, strict), a, b)


def mod(a: Any, b: Any) -> pl.Expr:
    return _map_binary(ops.modulo, a, b)


def approx_equal(a: Any, b: Any, delta: float = 0) -> pl.Expr:
    return _map_binary(_approx(delta), a, b, return_dtype=pl.Boolean)


def round_equal(a: Any, b: Any, precision: float = 100) -> pl.Expr:
    return _map_binary(_round_eq(precision), a, b, return_dtype=pl.Boolean)


def sum(expr: Any) -> pl.Expr:
    """Scalar aggregation: decimal-safe sum of the non-null values."""
    return _map_agg(expr, ops.sum)


def mean(expr: Any, precision: int | None = None) -> pl.Expr:
    """Scalar aggregation: decimal-safe average of the non-null values."""
    return _map_agg(expr, lambda values: ops.average(values, precision))


class SafeFloatNamespace:
    """``pl.col(...).safe`` expression namespace."""

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def scale(self) -> pl.Expr:
        return scale_expr(self._expr)

    def unit(self) -> pl.Expr:
        return unit_expr(self._expr)

    def round(self, precision: float = 0, mode: RoundingModeLike = RoundingMode.ROUND) -> pl.Expr:
        return round_expr(self._expr, precision, mode)

    def floor(self, precision: float = 0) -> pl.Expr:
        return round_expr(self._expr, precision, RoundingMode.FLOOR)

    def ceil(self, precision: float = 0) -> pl.Expr:
        return round_expr(self._expr, precision, RoundingMode.CEIL)

    def add(self, other: Any) -> pl.Expr:
        return add(self._expr, other)

    def sub(self, other: Any) -> pl.Expr:
        return sub(self._expr, other)

    def mul(self, other: Any) -> pl.Expr:
        return mul(self._expr, other)

    def div(self, other: Any, precision: int | None = None, strict: bool = True) -> pl.Expr:
        return div(self._expr, other, precision, strict)

    def mod(self, other: Any) -> pl.Expr:
        return mod(self._expr, other)

    def approx_equal(self, other: Any, delta: float = 0) -> pl.Expr:
        return approx_equal(self._expr, other, delta)

    def round_equal(self, other: Any, precision: float = 100) -> pl.Expr:
        return round_equal(self._expr, other, precision)

    def sum(self) -> pl.Expr:
        return sum(self._expr)

    def mean(self, precision: int | None = None) -> pl.Expr:
        return mean(self._expr, precision)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __mod__ = mod

    def __radd__(self, other: Any) -> pl.Expr:
        return add(other, self._expr)

    def __rsub__(self, other: Any) -> pl.Expr:
        return sub(other, self._expr)

    def __rmul__(self, other: Any) -> pl.Expr:
        return mul(other, self._expr)

    def __rtruediv__(self, other: Any) -> pl.Expr:
        return div(other, self._expr)


def _register_namespace() -> None:
    logger.debug("Registering polars expression namespace %r", NAMESPACE)
    pl.api.register_expr_namespace(NAMESPACE)(SafeFloatNamespace)


_register_namespace()
