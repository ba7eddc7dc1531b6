import math

import pytest

import polars_safe_float as sf
from polars_safe_float import SafeArithmeticError


def test_add():
    assert sf.add(0.1, 0.2) == 0.3
    assert sf.add(2, 2) == 4
    assert sf.add(256, 256) == 512
    assert sf.add(256, -256) == 0


def test_add_strings_and_mixed_types():
    assert sf.add("0.1", "0.2") == 0.3
    assert sf.add(".1", ".20") == 0.3
    assert sf.add("3.45e-34", "45.542e32") == 4.5542e33
    assert sf.add("  2  ", "  22  ") == 24
    assert sf.add("0.1", 0.2) == 0.3
    assert sf.add("3.45e-34", 45.542e32) == 4.5542e33
    assert sf.add(2, 22) == 24


def test_add_percentage_is_relative_to_first_operand():
    assert sf.add(10, "20%") == 12
    assert sf.add("20%", 10) == 10.2
    assert sf.add("100%", 1) == 2
    assert sf.add(4, "50%") == 6


def test_add_propagates_sentinels():
    assert math.isnan(sf.add(math.nan, 1))
    assert math.isnan(sf.add(1, "abc"))
    assert sf.add(math.inf, 1) == math.inf
    assert sf.add(1, -math.inf) == -math.inf


def test_subtract():
    assert sf.subtract(0.3, 0.2) == 0.1
    assert sf.subtract(4, 2) == 2
    assert sf.subtract(256, 128) == 128
    assert sf.subtract(256, -256) == 512
    assert sf.subtract("0.3", "0.2") == 0.1
    assert sf.subtract(".3", ".20") == 0.1
    assert sf.subtract("3.45e34", "45.542e32") == 2.99458e34
    assert sf.subtract("  2  ", "  22  ") == -20
    assert sf.subtract("3.45e34", 45.542e32) == 2.99458e34


def test_subtract_percentage():
    assert sf.subtract(10, "20%") == 8
    assert sf.subtract("200%", 1) == 1
    assert sf.subtract(4, "50%") == 2


def test_multiply():
    assert 0.2 * 0.2 != 0.04
    assert sf.multiply(0.2, 0.2) == 0.04
    assert sf.multiply(2, 2) == 4
    assert sf.multiply(256, 256) == 65536
    assert sf.multiply(256, -256) == -65536
    assert sf.multiply("0.2", "0.2") == 0.04
    assert sf.multiply(".2", ".20") == 0.04
    assert sf.multiply("3.45e-34", "45.542e32") == 1.571199
    assert sf.multiply("  2  ", "  22  ") == 44
    assert sf.multiply(0.2, ".20") == 0.04


def test_multiply_percentage():
    assert sf.multiply("4%", "44%") == 0.0176
    assert sf.multiply(4, "44%") == 1.76


def test_multiply_short_circuits_sentinels():
    assert sf.multiply(math.inf, 2) == math.inf
    assert sf.multiply(2, -math.inf) == -math.inf
    assert math.isnan(sf.multiply(math.nan, 0))
    assert math.isnan(sf.multiply(2, None))


def test_divide():
    assert sf.divide(4, 2) == 2
    assert sf.divide(4, 0.2) == 20
    assert sf.divide(256, -2) == -128
    assert sf.divide(5.2, ".20") == 26
    assert sf.divide("3.45e34", "45.542e32", 4) == 7.5754
    assert sf.divide("  2  ", "  22  ", 2) == 0.09
    assert sf.divide(2, 22, 1) == 0.1


def test_divide_precision():
    assert sf.divide(1, 3) == 0.3333333333333333
    assert sf.divide(1, 3, 4) == 0.3333
    assert sf.divide(10, 3, 4) == 3.3333
    assert sf.divide(1, 3, 1) == 0.3
    assert sf.divide(1000, 3, -1) == 330


def test_divide_percentage():
    assert sf.divide("44%", "4%") == 11
    assert sf.divide(44, "44%") == 100
    assert sf.divide("44%", 4) == 0.11


def test_divide_by_zero_strict():
    with pytest.raises(SafeArithmeticError, match="Division by zero"):
        sf.divide(1, 0)
    with pytest.raises(ArithmeticError):
        sf.divide("5", "0")


def test_divide_by_zero_non_strict():
    assert sf.divide(1, 0, 0, False) == math.inf
    assert sf.divide(-1, 0, strict=False) == -math.inf
    assert sf.divide(1, -0.0, strict=False) == -math.inf
    assert math.isnan(sf.divide(0, 0, strict=False))


def test_divide_by_infinity_is_unsigned_zero():
    result = sf.divide(10, -math.inf)
    assert result == 0
    assert math.copysign(1.0, result) == 1.0


def test_divide_propagates_nan():
    assert math.isnan(sf.divide(math.nan, 0))
    assert math.isnan(sf.divide(1, "x"))


def test_modulo():
    assert sf.modulo(-5, 3) == 1
    assert sf.modulo(5, -3) == -1
    assert sf.modulo(11, 3) == 2
    assert sf.modulo(-1, 3) == 2
    assert sf.modulo(1, -45) == -44
    assert sf.modulo(5.5, 2) == 1.5


def test_modulo_invalid_arguments():
    assert math.isnan(sf.modulo(1, 0))
    assert math.isnan(sf.modulo(1, math.inf))
    assert math.isnan(sf.modulo(1, math.nan))
    assert math.isnan(sf.modulo(math.inf, 3))


def test_sum():
    assert sf.sum([11, 13, -2, 0]) == 22
    assert sf.sum([-1]) == -1
    assert sf.sum([]) == 0
    assert sf.sum(x for x in (0.1, 0.2, 0.3)) == 0.6
    assert sf.sum(["12", 3, 15]) == 30
    assert math.isnan(sf.sum(["12", math.nan, 15]))
    assert sf.sum(["12", math.inf, 15]) == math.inf


def test_average():
    assert sf.average([11, 13, -2, 0]) == 5.5
    assert sf.average([-1]) == -1
    assert sf.average([]) == 0
    assert sf.avg({0.1, 0.3}) == 0.2
    assert sf.average(["12", 3, 15]) == 10
    assert math.isnan(sf.average(["12", math.nan, 15]))
    assert sf.average(["12", math.inf, 15]) == math.inf
    assert sf.average([1, 2, 2], 2) == 1.67


def test_large_magnitudes_do_not_overflow():
    assert sf.divide(1e300, 3) == 1e300 / 3
    assert sf.average([1e300, 3e300]) == 2e300
    assert sf.add(1e308, 1e308) == math.inf
