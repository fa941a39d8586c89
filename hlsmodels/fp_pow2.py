"""Multiply IEEE-754 numbers by a power of two by adjusting the exponent.

The biased exponent field is shifted by ``n``. Results past the top of the
range become infinity of the same sign. Results at or below the bottom of
the range become zero of the same sign, because no subnormals are produced.
Inputs whose biased exponent is zero, or whose field equals 0xFF, are
returned unchanged.
"""

from __future__ import annotations

import math
import struct

from hlsmodels.fixedpoint import wrap_int

# Both precisions test the exponent against 0xFF, which is the all-ones value
# only for single precision.
_PASS_EXPONENT = 0xFF


def _mul_pow2_bits(bits: int, n: int, exp_bits: int, mant_bits: int) -> int:
    exp_max = (1 << exp_bits) - 1
    sign_shift = exp_bits + mant_bits
    sign = bits >> sign_shift
    bexp = (bits >> mant_bits) & exp_max
    mant = bits & ((1 << mant_bits) - 1)

    if bexp in (_PASS_EXPONENT, 0):
        return bits
    if n >= 0 and bexp >= exp_max - n:
        bexp, mant = exp_max, 0
    elif n < 0 and bexp <= -n:
        bexp, mant = 0, 0
    else:
        bexp = (bexp + n) & exp_max
    return (sign << sign_shift) | (bexp << mant_bits) | mant


def _single_bits(x: float) -> int:
    try:
        packed = struct.pack("<f", x)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, x))
    return struct.unpack("<I", packed)[0]


def float_mul_pow2(x, n):
    """Return single-precision ``x * 2**n``, with ``n`` held as an 8-bit signed integer."""
    bits = _single_bits(float(x))
    result = _mul_pow2_bits(bits, wrap_int(n, 8, True), 8, 23)
    return struct.unpack("<f", struct.pack("<I", result))[0]


def double_mul_pow2(x, n):
    """Return double-precision ``x * 2**n``, with ``n`` held as a 16-bit signed integer."""
    bits = struct.unpack("<Q", struct.pack("<d", float(x)))[0]
    result = _mul_pow2_bits(bits, wrap_int(n, 16, True), 11, 52)
    return struct.unpack("<d", struct.pack("<Q", result))[0]