"""Arithmetic on decimal values: add, subtract, multiply, divide, remainder."""

from __future__ import annotations

from decimal96.comparison import is_equal
from decimal96.core import (
    MAX_MANTISSA,
    MAX_SCALE,
    Decimal96,
    DecimalDivisionByZeroError,
    DecimalOverflowError,
    DecimalUnderflowError,
    InvalidDecimalError,
)

# Extra decimal places given to both operands before long division.
_GUARD_DIGITS = 29

_ZERO = Decimal96.from_parts(0, 0, False)


def _require_valid(*values: Decimal96) -> None:
    for value in values:
        if not value.is_valid():
            raise InvalidDecimalError(f"invalid decimal: {value.words!r}")


def _range_error(negative: bool) -> ArithmeticError:
    if negative:
        return DecimalUnderflowError("result is too small to represent")
    return DecimalOverflowError("result is too large to represent")


def _round_off(value: int, scale: int, floor_scale: int | None) -> tuple[int, int]:
    """Drop digits until the value fits, rounding on the last digit dropped.

    Digits are dropped while the scale exceeds the maximum, or while the value
    is too wide and the scale is still above ``floor_scale`` (no floor when None).
    """
    last = 0
    while scale > MAX_SCALE or (
        value > MAX_MANTISSA and (floor_scale is None or scale > floor_scale)
    ):
        value, last = divmod(value, 10)
        scale -= 1
    if last >= 5:
        value += 1
    return value, scale


def _pack(mantissa: int, scale: int, negative: bool) -> Decimal96:
    """Build a result, expanding a negative scale into the mantissa."""
    if scale < 0:
        mantissa *= 10**-scale
        scale = 0
    if mantissa > MAX_MANTISSA:
        raise _range_error(negative)
    return Decimal96.from_parts(mantissa, scale, negative)


def _signed_at_scale(value: Decimal96, scale: int) -> int:
    magnitude = value.mantissa * 10 ** (scale - value.scale)
    return -magnitude if value.negative else magnitude


def _round_half_up(magnitude: int, drop: int) -> int:
    if not drop:
        return magnitude
    unit = 10**drop
    quotient, remainder = divmod(magnitude, unit)
    return quotient + 1 if 2 * remainder >= unit else quotient


def add(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return value_1 + value_2, rounding away fractional digits that do not fit."""
    _require_valid(value_1, value_2)
    scale = max(value_1.scale, value_2.scale)
    total = _signed_at_scale(value_1, scale) + _signed_at_scale(value_2, scale)
    negative = total < 0 or (total == 0 and value_1.negative and value_2.negative)
    magnitude = abs(total)
    for drop in range(scale + 1):
        rounded = _round_half_up(magnitude, drop)
        if rounded <= MAX_MANTISSA:
            return Decimal96.from_parts(rounded, scale - drop, negative)
    raise _range_error(negative)


def sub(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return value_1 - value_2."""
    _require_valid(value_1, value_2)
    return add(value_1, value_2.negate())


def mul(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return value_1 * value_2; a zero operand gives a plain zero."""
    _require_valid(value_1, value_2)
    if value_1.is_zero() or value_2.is_zero():
        return _ZERO
    negative = value_1.negative != value_2.negative
    product, scale = _round_off(
        value_1.mantissa * value_2.mantissa,
        value_1.scale + value_2.scale,
        floor_scale=0,
    )
    if product > MAX_MANTISSA:
        raise DecimalOverflowError("result is too large to represent")
    return Decimal96.from_parts(product, scale, negative)


def div(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return value_1 / value_2 to at most 28 decimal places."""
    _require_valid(value_1, value_2)
    if value_2.is_zero():
        raise DecimalDivisionByZeroError("division by zero")
    negative = value_1.negative != value_2.negative
    common = max(value_1.scale, value_2.scale) + _GUARD_DIGITS
    dividend = value_1.mantissa * 10 ** (common - value_1.scale)
    divisor = value_2.mantissa * 10 ** (common - value_2.scale)

    scale = -1
    while dividend > divisor:
        divisor *= 10
        scale -= 1

    quotient = 0
    while dividend and divisor:
        digit, dividend = divmod(dividend, divisor)
        quotient = quotient * 10 + digit
        divisor //= 10
        scale += 1

    quotient, scale = _round_off(quotient, scale, floor_scale=None)
    return _pack(quotient, scale, negative)


def truncate(value: Decimal96) -> Decimal96:
    """Drop the fractional digits, keeping the sign."""
    _require_valid(value)
    return Decimal96.from_parts(value.mantissa // 10**value.scale, 0, value.negative)


def mod(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return value_1 - truncate(value_1 / value_2) * value_2."""
    if value_2.is_zero():
        raise DecimalDivisionByZeroError("division by zero")
    _require_valid(value_1, value_2)
    if is_equal(value_1, value_2):
        return _ZERO
    whole = truncate(div(value_1, value_2))
    return sub(value_1, mul(whole, value_2))