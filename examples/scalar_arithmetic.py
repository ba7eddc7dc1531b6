#!/usr/bin/env python3
"""Example: decimal-safe scalar arithmetic on plain Python floats."""

import polars_safe_float as sf

print("0.1 + 0.2          =", 0.1 + 0.2, "->", sf.add(0.1, 0.2))
print("0.2 * 0.2          =", 0.2 * 0.2, "->", sf.multiply(0.2, 0.2))
print("0.3 - 0.2          =", 0.3 - 0.2, "->", sf.subtract(0.3, 0.2))
print("10 + 20%           =", sf.add(10, "20%"))
print("10 / 3 (4 places)  =", sf.divide(10, 3, 4))
print("-5 mod 3           =", sf.modulo(-5, 3))
print("round(1250, -2)    =", sf.round(1250, -2))
print("floor(12.95)       =", sf.floor(12.95))
print("scale(0.001)       =", sf.scale(0.001))
print("unit(12.347)       =", sf.unit(12.347))
print("sum([0.1,0.2,0.3]) =", sf.sum([0.1, 0.2, 0.3]))
print("approx_equal(0.1 + 0.2, 0.3, 0.1) =", sf.approx_equal(0.1 + 0.2, 0.3, 0.1))

try:
    sf.divide(1, 0)
except sf.SafeArithmeticError as exc:
    print("divide(1, 0) raised:", exc)
print("divide(1, 0, strict=False) =", sf.divide(1, 0, strict=False))
