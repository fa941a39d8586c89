"""Non-restoring square root of unsigned fixed-point values.

The root is computed bit by bit on the stored integers of the input and
output formats and is rounded to the nearest step of the output format as
long as the output has enough fractional bits.  The output must have at least
half (rounded up) as many integer bits as the input.
"""

from __future__ import annotations

from fractions import Fraction

from hlsmodels.fixedpoint import SQRT_IN, SQRT_OUT, wrap_int


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _c_mod(a: int, b: int) -> int:
    return a - b * _c_div(a, b)


def fxp_sqrt(raw, in_width, in_int_width, out_width, out_int_width):
    """Return the stored integer of the square root of an unsigned fixed-point value.

    ``raw`` is the stored integer of the radicand in an unsigned format of
    ``in_width`` bits with ``in_int_width`` integer bits; the result is the
    stored integer in an unsigned format of ``out_width`` bits with
    ``out_int_width`` integer bits.
    """
    if in_width <= 0 or out_width <= 0:
        raise ValueError("format widths must be positive")
    half_int = _c_div(in_int_width + 1, 2)
    if half_int > out_int_width:
        raise ValueError(
            f"output needs at least {half_int} integer bits, has {out_int_width}"
        )

    root_width = half_int + (out_width - out_int_width) + 1
    scale = (out_width - in_width) - (out_int_width - half_int)
    root_prec = root_width - _c_mod(in_int_width, 2)
    rem_width = root_width + 2

    bits = wrap_int(raw, in_width, False)
    if scale >= 0:
        rem = bits << scale
    else:
        rem = ((bits >> -(scale + 1)) + 1) >> 1
    rem = wrap_int(rem, rem_width, True)

    root = 0
    root_less = 0
    for step in range(root_prec + 1):
        shift = root_prec - step
        if rem >= 0:
            rem = 2 * rem - ((4 * root + 1) << shift)
            root_less = root << 1
            root = (root << 1) | 1
        else:
            rem = 2 * rem + ((4 * root_less + 3) << shift)
            root = (root_less << 1) | 1
            root_less <<= 1
        rem = wrap_int(rem, rem_width, True)
        root = wrap_int(root, root_width, False)
        root_less = wrap_int(root_less, root_width, False)

    # The sign of the final remainder tells which side of the half step the root lies.
    if rem > 0:
        root = wrap_int(root + 1, root_width, False)
    return wrap_int(root >> 1, out_width, False)


def fxp_sqrt_top(value) -> Fraction:
    """Square root of ``value`` taken through the 24.8 input and 28.4 output formats."""
    raw = SQRT_IN.raw_from(value)
    root = fxp_sqrt(raw, SQRT_IN.width, SQRT_IN.int_width, SQRT_OUT.width, SQRT_OUT.int_width)
    return SQRT_OUT.value_of(root)