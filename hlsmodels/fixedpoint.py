"""Arbitrary-precision fixed-point formats with quantization and overflow modes.

A :class:`FixedFormat` describes a binary fixed-point type by its total width,
its integer width and its signedness, together with the rule used to quantize
values that fall between representable steps and the rule used when a value
falls outside the representable range.  Values are exchanged as exact
:class:`fractions.Fraction` objects; the stored representation ("raw") is a
plain Python integer.
"""

from __future__ import annotations

import enum
import math
import operator
from dataclasses import dataclass
from fractions import Fraction

_HALF = Fraction(1, 2)


class Quantization(enum.Enum):
    """How a value between two representable steps is brought onto the grid."""

    TRN = "trn"
    TRN_ZERO = "trn_zero"
    RND = "rnd"
    RND_ZERO = "rnd_zero"
    RND_MIN_INF = "rnd_min_inf"
    RND_INF = "rnd_inf"
    RND_CONV = "rnd_conv"


class Overflow(enum.Enum):
    """How a value outside the representable range is handled."""

    WRAP = "wrap"
    SAT = "sat"
    SAT_ZERO = "sat_zero"
    SAT_SYM = "sat_sym"


def wrap_int(value, width, signed):
    """Reduce an integer to ``width`` bits, two's complement if ``signed``."""
    value = operator.index(value)
    width = operator.index(width)
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    value &= (1 << width) - 1
    if signed and value >> (width - 1):
        value -= 1 << width
    return value


def _to_fraction(value) -> Fraction:
    try:
        return Fraction(value)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"cannot represent {value!r} in fixed point") from exc


def _quantize(scaled: Fraction, mode: Quantization) -> int:
    if mode is Quantization.TRN:
        return math.floor(scaled)
    if mode is Quantization.TRN_ZERO:
        return math.trunc(scaled)
    if mode is Quantization.RND:
        return math.floor(scaled + _HALF)
    if mode is Quantization.RND_MIN_INF:
        return math.ceil(scaled - _HALF)
    if mode is Quantization.RND_ZERO:
        if scaled >= 0:
            return math.ceil(scaled - _HALF)
        return math.floor(scaled + _HALF)
    if mode is Quantization.RND_INF:
        if scaled >= 0:
            return math.floor(scaled + _HALF)
        return math.ceil(scaled - _HALF)
    # Round half to even.
    return round(scaled)


@dataclass(frozen=True)
class FixedFormat:
    """A fixed-point format: ``width`` bits of which ``int_width`` are integer bits."""

    width: int
    int_width: int
    signed: bool = True
    quantization: Quantization = Quantization.TRN
    overflow: Overflow = Overflow.WRAP

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or isinstance(self.width, bool):
            raise TypeError("width must be an int")
        if not isinstance(self.int_width, int) or isinstance(self.int_width, bool):
            raise TypeError("int_width must be an int")
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")

    @property
    def frac_width(self) -> int:
        """Number of fractional bits (may be negative)."""
        return self.width - self.int_width

    @property
    def lsb(self) -> Fraction:
        """Value of one step of the format."""
        return Fraction(2) ** -self.frac_width

    @property
    def min_raw(self) -> int:
        return -(1 << (self.width - 1)) if self.signed else 0

    @property
    def max_raw(self) -> int:
        return (1 << (self.width - 1)) - 1 if self.signed else (1 << self.width) - 1

    @property
    def min_value(self) -> Fraction:
        return self.min_raw * self.lsb

    @property
    def max_value(self) -> Fraction:
        return self.max_raw * self.lsb

    def _fit(self, raw: int) -> int:
        if self.min_raw <= raw <= self.max_raw:
            return raw
        if self.overflow is Overflow.WRAP:
            return wrap_int(raw, self.width, self.signed)
        if self.overflow is Overflow.SAT_ZERO:
            return 0
        low = self.min_raw
        if self.overflow is Overflow.SAT_SYM and self.signed:
            low = -self.max_raw
        return min(max(raw, low), self.max_raw)

    def raw_from(self, value) -> int:
        """Return the stored integer for ``value`` after quantization and overflow."""
        scaled = _to_fraction(value) * Fraction(2) ** self.frac_width
        return self._fit(_quantize(scaled, self.quantization))

    def value_of(self, raw) -> Fraction:
        """Return the value held by the bit pattern ``raw``."""
        return wrap_int(raw, self.width, self.signed) * self.lsb

    def cast(self, value) -> Fraction:
        """Return ``value`` as it is held by this format."""
        return self.value_of(self.raw_from(value))


# Formats of the fixed-point accumulate-and-multiply model.
FIXED_DIN1 = FixedFormat(10, 8, False, Quantization.RND, Overflow.SAT)
FIXED_DIN2 = FixedFormat(6, 3, True, Quantization.RND, Overflow.WRAP)
FIXED_DINT = FixedFormat(22, 17, True, Quantization.TRN, Overflow.SAT)
FIXED_DOUT = FixedFormat(36, 30, True)

# Formats of the top-level square-root model.
SQRT_IN = FixedFormat(24, 8, False)
SQRT_OUT = FixedFormat(28, 4, False)

# Integer formats of the arbitrary-precision arithmetic model.
ARITH_IN_A = FixedFormat(6, 6, True)
ARITH_IN_B = FixedFormat(12, 12, True)
ARITH_IN_C = FixedFormat(22, 22, True)
ARITH_IN_D = FixedFormat(33, 33, True)
ARITH_OUT1 = FixedFormat(18, 18, True)
ARITH_OUT2 = FixedFormat(13, 13, False)
ARITH_OUT3 = FixedFormat(22, 22, True)
ARITH_OUT4 = FixedFormat(6, 6, True)