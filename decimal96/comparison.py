"""Numeric comparison of decimal values, with sign and scale taken into account."""

from __future__ import annotations

from decimal96.core import Decimal96, Sign


def _magnitude_order(num1: Decimal96, num2: Decimal96) -> int:
    """Compare absolute values after bringing both to the same scale."""
    scale = max(num1.scale, num2.scale)
    left = num1.mantissa * 10 ** (scale - num1.scale)
    right = num2.mantissa * 10 ** (scale - num2.scale)
    return (left > right) - (left < right)


def is_equal(num1: Decimal96, num2: Decimal96) -> bool:
    """True when both values are numerically equal; zeros of any sign are equal."""
    if num1.is_zero() and num2.is_zero():
        return True
    if num1.sign != num2.sign:
        return False
    return _magnitude_order(num1, num2) == 0


def is_not_equal(num1: Decimal96, num2: Decimal96) -> bool:
    return not is_equal(num1, num2)


def is_greater(num1: Decimal96, num2: Decimal96) -> bool:
    """True when num1 is strictly greater than num2."""
    if num1.sign == num2.sign:
        order = _magnitude_order(num1, num2)
        if order == 0:
            return False
        if num1.sign is Sign.NEGATIVE:
            return order < 0
        return order > 0
    if num1.is_zero() and num2.is_zero():
        return False
    if is_equal(num1, num2):
        return False
    return num1.sign is Sign.POSITIVE


def is_greater_or_equal(num1: Decimal96, num2: Decimal96) -> bool:
    return is_greater(num1, num2) or is_equal(num1, num2)


def is_less(num1: Decimal96, num2: Decimal96) -> bool:
    return not is_greater_or_equal(num1, num2)


def is_less_or_equal(num1: Decimal96, num2: Decimal96) -> bool:
    return is_less(num1, num2) or is_equal(num1, num2)


def compare(num1: Decimal96, num2: Decimal96) -> int:
    """Return 1 if num1 is greater, 0 if equal, -1 if less."""
    if is_greater(num1, num2):
        return 1
    if is_equal(num1, num2):
        return 0
    return -1