"""A 96-bit scaled decimal value and the errors raised by decimal operations."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from fractions import Fraction
from typing import Iterable

WORD_MASK = 0xFFFFFFFF
WORD_COUNT = 4
MANTISSA_WORDS = 3
MAX_MANTISSA = (1 << 96) - 1
MIN_SCALE = 0
MAX_SCALE = 28
SIGN_MASK = 0x80000000
SCALE_SHIFT = 16
SCALE_MASK = 0xFF << SCALE_SHIFT
RESERVED_MASK = WORD_MASK & ~(SIGN_MASK | SCALE_MASK)


class DecimalError(ArithmeticError):
    """Base class for every error raised by decimal operations."""


class DecimalOverflowError(DecimalError):
    """The result is too large to represent, or is positive infinity."""


class DecimalUnderflowError(DecimalError):
    """The result is too small to represent, or is negative infinity."""


class DecimalDivisionByZeroError(DecimalError, ZeroDivisionError):
    """The divisor is zero."""


class InvalidDecimalError(DecimalError, ValueError):
    """The value does not follow the decimal layout."""


class Sign(IntEnum):
    POSITIVE = 0
    NEGATIVE = 1


@dataclass(frozen=True)
class Decimal96:
    """Four 32-bit words: a 96-bit mantissa, then scale and sign flags.

    Equality with ``==`` compares the stored words; numeric comparison
    lives in :mod:`decimal96.comparison`.
    """

    words: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        words = tuple(self.words)
        if len(words) != WORD_COUNT:
            raise InvalidDecimalError(f"expected {WORD_COUNT} words, got {len(words)}")
        for word in words:
            if not isinstance(word, int) or not 0 <= word <= WORD_MASK:
                raise InvalidDecimalError(f"word out of 32-bit range: {word!r}")
        object.__setattr__(self, "words", words)

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> Decimal96:
        """Build a value from its four raw words, low mantissa word first."""
        return cls(tuple(bits))

    @classmethod
    def from_parts(cls, mantissa: int, scale: int, negative: bool) -> Decimal96:
        """Build a value equal to (-1)**negative * mantissa / 10**scale."""
        if not 0 <= mantissa <= MAX_MANTISSA:
            raise InvalidDecimalError(f"mantissa out of range: {mantissa}")
        if not MIN_SCALE <= scale <= MAX_SCALE:
            raise InvalidDecimalError(f"scale out of range: {scale}")
        flags = (scale << SCALE_SHIFT) | (SIGN_MASK if negative else 0)
        return cls(
            (
                mantissa & WORD_MASK,
                (mantissa >> 32) & WORD_MASK,
                (mantissa >> 64) & WORD_MASK,
                flags,
            )
        )

    def bits(self) -> tuple[int, int, int, int]:
        """Return the four raw words."""
        return self.words

    @property
    def mantissa(self) -> int:
        low, mid, high, _ = self.words
        return low | (mid << 32) | (high << 64)

    @property
    def scale(self) -> int:
        return (self.words[3] & SCALE_MASK) >> SCALE_SHIFT

    @property
    def negative(self) -> bool:
        return bool(self.words[3] & SIGN_MASK)

    @property
    def sign(self) -> Sign:
        return Sign.NEGATIVE if self.negative else Sign.POSITIVE

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return not any(self.words[:MANTISSA_WORDS])

    def is_valid(self) -> bool:
        """True when the reserved bits are clear and the scale is at most 28."""
        flags = self.words[3]
        return not flags & RESERVED_MASK and self.scale <= MAX_SCALE

    def negate(self) -> Decimal96:
        """Return the value with its sign flipped; zero keeps its scale."""
        low, mid, high, flags = self.words
        return Decimal96((low, mid, high, flags ^ SIGN_MASK))

    __neg__ = negate

    def to_fraction(self) -> Fraction:
        """Return the exact value as a fraction."""
        value = Fraction(self.mantissa, 10**self.scale)
        return -value if self.negative else value

    def to_float(self) -> float:
        """Return the nearest single-precision value, as a Python float."""
        if not self.is_valid():
            raise InvalidDecimalError("cannot convert an invalid decimal")
        single = struct.pack("<f", float(self.to_fraction()))
        return struct.unpack("<f", single)[0]

    def __str__(self) -> str:
        digits = str(self.mantissa).rjust(self.scale + 1, "0")
        if self.scale:
            digits = f"{digits[:-self.scale]}.{digits[-self.scale:]}"
        return f"-{digits}" if self.negative else digits