# decimal96

A decimal number type made of four 32-bit words: a 96-bit unsigned mantissa
in the first three, and a flags word holding the scale (a power-of-ten
divisor, 0 to 28) and the sign. Magnitudes range up to
79228162514264337593543950335; the smallest non-zero magnitude is 1e-28.

The package has no dependencies beyond the standard library.

## Installation

```
pip install decimal96
```

## Building values

```python
from decimal96.core import Decimal96

a = Decimal96.from_parts(21234, 4, False)        # 2.1234
b = Decimal96.from_bits([20, 0, 0, 0x00010000])  # 2.0, given as raw words

a.bits()         # (21234, 0, 0, 0x00040000): low, mid, high, flags
a.mantissa       # 21234
a.scale          # 4
a.negative       # False
a.sign           # Sign.POSITIVE
a.negate()       # -2.1234; also written -a
a.is_zero()      # False
a.to_fraction()  # Fraction(10617, 5000), the exact value
a.to_float()     # nearest single-precision value, returned as a Python float
str(a)           # "2.1234"
```

`Decimal96` is an immutable dataclass. Every word must be within 0 to
2**32 - 1, and `from_parts` checks that the mantissa fits in 96 bits and the
scale is within 0 to 28; otherwise `InvalidDecimalError` is raised.

In the flags word the scale sits in bits 16 to 23 and the sign in bit 31.
`is_valid()` reports whether every other bit is clear and the scale is at
most 28. `to_float()` raises `InvalidDecimalError` for an invalid value.

`negate()` only flips the sign bit, so the negation of zero is a zero with
the opposite sign and the same scale.

`==` between two `Decimal96` values compares their stored words, so `2.0` and
`2.00` are not `==`. Use the functions below to compare numeric values.

## Comparisons

```python
from decimal96.comparison import (
    compare, is_equal, is_not_equal,
    is_greater, is_greater_or_equal, is_less, is_less_or_equal,
)

two = Decimal96.from_parts(2, 0, False)
is_equal(Decimal96.from_parts(2000, 3, False), two)  # True
compare(a, two)                                      # 1
```

Values compare by numeric value whatever their scales. A zero compares equal
to any other zero, of either sign. `compare` returns 1, 0 or -1.

## Arithmetic

```python
from decimal96.arithmetic import add, sub, mul, div, mod, truncate

add(a, b)
sub(a, b)
mul(a, b)
div(a, b)       # at most 28 decimal places
mod(a, b)       # a - truncate(a / b) * b
truncate(a)     # 2: the fractional digits dropped, sign kept
```

When a result has more digits than fit, digits are dropped from its fraction
and the result is rounded at a smaller scale. A product too small to show at
scale 28 becomes a zero at scale 28. Multiplying by zero gives a plain zero.

Errors are raised as exceptions from `decimal96.core`, all derived from
`DecimalError` (itself an `ArithmeticError`):

- `DecimalOverflowError`: the result is too large. `mul` raises this for a
  product too large in either sign.
- `DecimalUnderflowError`: `add`, `sub` and `div` raise this for a negative
  result too large in magnitude.
- `DecimalDivisionByZeroError`: the divisor of `div` or `mod` is zero (also a
  `ZeroDivisionError`).
- `InvalidDecimalError`: an operand is malformed (also a `ValueError`).

## What the package does not do

There is no conversion from Python `int`, `float` or `str` into a
`Decimal96`; values are built with `from_parts` or `from_bits`. The only
conversions out are `to_float`, `to_fraction`, `bits` and `str`. Apart from
`truncate`, there are no rounding functions such as floor or round.