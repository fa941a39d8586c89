"""Models of small function hierarchies: shared adders and a sum/difference/shift chain.

``foo`` and ``top`` work on 8-bit signed characters that wrap in two's
complement. ``sumsub``, ``shift`` and ``hier_func4`` work on 32-bit signed
integers. Right shifts are arithmetic, so they round toward minus infinity.
"""

from __future__ import annotations

import os
from pathlib import Path

from hlsmodels.fixedpoint import wrap_int


def _char(value) -> int:
    return wrap_int(value, 8, True)


def _i32(value) -> int:
    return wrap_int(value, 32, True)


def foo(inval, incr):
    """Add ``incr`` to ``inval`` as 8-bit signed characters."""
    return _char(_char(inval) + _char(incr))


def top(inval1, inval2, inval3):
    """Add 0, 1 and 100 to the three inputs, each as an 8-bit signed character."""
    return foo(inval1, 0), foo(inval2, 1), foo(inval3, 100)


def sumsub(a, b):
    """Return the 32-bit sum and difference of ``a`` and ``b``."""
    a = _i32(a)
    b = _i32(b)
    return _i32(a + b), _i32(a - b)


def shift(a, b):
    """Return ``a`` shifted right by one bit and ``b`` shifted right by two."""
    return _i32(a) >> 1, _i32(b) >> 2


def hier_func4(a, b, log_dir=None):
    """Return ``(a+b) >> 1`` and ``(a-b) >> 2`` on 32-bit signed integers.

    If ``log_dir`` is given, the intermediate sum is written to the file
    ``Out_apb_<sum>.dat`` in that directory, with the sum padded to three
    digits in the name. The path of that file is not returned.
    """
    apb, amb = sumsub(a, b)
    if log_dir is not None:
        path = Path(os.fspath(log_dir)) / f"Out_apb_{apb:03d}.dat"
        with path.open("w", encoding="ascii") as handle:
            handle.write(f"{apb} \n")
    return shift(apb, amb)