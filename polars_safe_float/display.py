"""Display formatting utilities for float columns."""

from __future__ import annotations

import math
from decimal import Decimal

import polars as pl


def to_plain_string(num: float) -> str:
    """Render a float in plain decimal notation, without exponent or float noise.

        to_plain_string(1e-7) == "0.0000001"
        to_plain_string(1.5e21) == "1500000000000000000000"
        to_plain_string(1e23) == "100000000000000000000000"
    """
    num = float(num)
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "Infinity" if num > 0 else "-Infinity"
    text = f"{Decimal(repr(num)).normalize():f}"
    return "0" if text == "-0" else text


def _plain_string_expr(col_name: str) -> pl.Expr:
    return pl.col(col_name).map_elements(to_plain_string, return_dtype=pl.String)


class PlainDisplayMixin:
    """Mixin class to add plain decimal display formatting to DataFrames."""

    def with_plain_display(self, *float_columns: str) -> pl.DataFrame:
        """Add plain decimal display columns for float columns.

        Args:
            *float_columns: Names of float columns to add display formatting for (all float columns if none given)

        Returns:
            DataFrame with additional "{column}_str" columns for readable display
        """
        return format_safe_float_dataframe(self, list(float_columns) or None, mode="add")

    def show_plain(self, *float_columns: str) -> pl.DataFrame:
        """Replace float columns with plain decimal display columns.

        Args:
            *float_columns: Names of float columns to replace with string display (all float columns if none given)

        Returns:
            DataFrame with float columns replaced by readable string columns
        """
        return format_safe_float_dataframe(self, list(float_columns) or None, mode="replace")


def format_safe_float_dataframe(
    df: pl.DataFrame, float_columns: list[str] | None = None, mode: str = "replace"
) -> pl.DataFrame:
    """Format a DataFrame to display float columns as plain decimal strings.

    Args:
        df: Input DataFrame
        float_columns: List of float column names. If None, every Float32/Float64 column.
        mode: Either "replace" (replace float columns with strings) or "add" (add _str columns)

    Returns:
        DataFrame with formatted float display
    """
    if float_columns is None:
        float_columns = [
            name for name, dtype in df.schema.items() if dtype in (pl.Float32, pl.Float64)
        ]

    if mode == "replace":
        column_updates = {name: _plain_string_expr(name) for name in float_columns}
    elif mode == "add":
        column_updates = {f"{name}_str": _plain_string_expr(name) for name in float_columns}
    else:
        raise ValueError(f"Invalid mode '{mode}'. Must be 'replace' or 'add'.")
    return df.with_columns(**column_updates)


def print_safe_float_dataframe(df: pl.DataFrame, float_columns: list[str] | None = None) -> None:
    """Print a DataFrame with float columns formatted as plain decimal strings.

    Args:
        df: DataFrame to print
        float_columns: List of float column names. If None, attempts to auto-detect.
    """
    print(format_safe_float_dataframe(df, float_columns, mode="replace"))


# Monkey patch DataFrame to add our display methods
def _patch_dataframe():
    """Add plain display methods to DataFrame class."""
    pl.DataFrame.with_plain_display = PlainDisplayMixin.with_plain_display
    pl.DataFrame.show_plain = PlainDisplayMixin.show_plain


# Auto-patch when module is imported
_patch_dataframe()
