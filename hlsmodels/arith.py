"""Small integer and fixed-point datapath models.

Each function takes its operands through the bit widths of its hardware
types. Inputs are reduced to the input formats first, and results are
reduced to the output formats. Integer overflow wraps in two's complement.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from fractions import Fraction

from hlsmodels.fixedpoint import (
    ARITH_IN_A,
    ARITH_IN_B,
    ARITH_IN_C,
    ARITH_IN_D,
    ARITH_OUT1,
    ARITH_OUT2,
    ARITH_OUT3,
    ARITH_OUT4,
    FIXED_DIN1,
    FIXED_DIN2,
    FIXED_DINT,
    FIXED_DOUT,
    FixedFormat,
    wrap_int,
)

FIB_N = 5
LOOP_DEPTH = 32

CAST_IN = FixedFormat(18, 18, True)
CAST_OUT = FixedFormat(36, 36, True)

LOOP_IN = FixedFormat(8, 8, True)
LOOP_OUT = FixedFormat(13, 13, True)
LOOP_SEL = FixedFormat(5, 5, False)


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _c_mod(a: int, b: int) -> int:
    return a - b * _c_div(a, b)


@dataclass(frozen=True)
class ArithResult:
    """Outputs of the arbitrary-precision arithmetic model."""

    product: int
    total: int
    quotient: int
    remainder: int


def ap_int_arith(a, b, c, d):
    """Return ``a*b``, ``b+a``, ``c/a`` and ``d%a`` in their narrow formats.

    ``a``, ``b``, ``c`` and ``d`` are held as 6, 12, 22 and 33-bit signed
    integers. Division truncates toward zero, and the remainder takes the
    sign of the dividend.
    """
    a = ARITH_IN_A.raw_from(a)
    b = ARITH_IN_B.raw_from(b)
    c = ARITH_IN_C.raw_from(c)
    d = ARITH_IN_D.raw_from(d)
    if a == 0:
        raise ZeroDivisionError("divisor a is zero after reduction to 6 bits")
    return ArithResult(
        product=ARITH_OUT1.raw_from(a * b),
        total=ARITH_OUT2.raw_from(b + a),
        quotient=ARITH_OUT3.raw_from(_c_div(c, a)),
        remainder=ARITH_OUT4.raw_from(_c_mod(d, a)),
    )


def casting_multiply(a, b):
    """Multiply two 18-bit signed integers into a 36-bit signed result."""
    a = CAST_IN.raw_from(a)
    b = CAST_IN.raw_from(b)
    return CAST_OUT.raw_from(a * b)


def fibonacci(a, b, n=FIB_N):
    """Step the pair ``(a, b)`` to ``(b, a+b)`` ``n-1`` times and return the second item.

    Arithmetic is on 32-bit signed integers.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    a = wrap_int(a, 32, True)
    b = wrap_int(b, 32, True)
    for _ in range(n - 1):
        a, b = b, wrap_int(a + b, 32, True)
    return b


def loop_var(values, width):
    """Sum the first ``width`` values as 8-bit integers into a 13-bit accumulator.

    ``width`` is held in 5 bits, so only 0 to 31 items can be summed.
    """
    count = LOOP_SEL.raw_from(width)
    items = list(itertools.islice(values, count))
    if len(items) < count:
        raise IndexError(f"need {count} values, got {len(items)}")
    acc = 0
    for item in items:
        acc = LOOP_OUT.raw_from(acc + LOOP_IN.raw_from(item))
    return acc


def fixed_product(in1, in2) -> Fraction:
    """Hold ``in1`` in the intermediate format and multiply it by ``in2``.

    ``in1`` is unsigned 10.8 with rounding and saturation. ``in2`` is signed
    6.3 with rounding and wrap-around. The intermediate format is 22.17 with
    saturation, and the result is 36.30.
    """
    held = FIXED_DINT.cast(FIXED_DIN1.cast(in1))
    return FIXED_DOUT.cast(held * FIXED_DIN2.cast(in2))