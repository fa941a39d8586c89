"""Models of nested and pipelined loops over small integer arrays.

The loop-nest models take 20 inputs held as 5-bit signed integers and
accumulate them in 12-bit or 20-bit signed registers that wrap in two's
complement. The free-running pipeline model works on double-precision
values in blocks of eight.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable

from hlsmodels.fixedpoint import FixedFormat

LOOP_DEPTH = 20
PIPE_DEPTH = 8

LOOP_IN = FixedFormat(5, 5, True)
LOOP_ACC = FixedFormat(12, 12, True)
LOOP_OUT = FixedFormat(6, 6, True)
PIPE_ACC = FixedFormat(20, 20, True)


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _take(values: Iterable, count: int, what: str) -> list:
    items = list(itertools.islice(iter(values), count))
    if len(items) < count:
        raise ValueError(f"need {count} {what}, got {len(items)}")
    return items


def _inputs(values) -> list[int]:
    return [LOOP_IN.raw_from(item) for item in _take(values, LOOP_DEPTH, "values")]


def _weighted_sum(words: list[int]) -> int:
    acc = 0
    for j, word in enumerate(words):
        acc = LOOP_ACC.raw_from(acc + word * j)
    return acc


def loop_imperfect(values):
    """Return 20 outputs: the weighted sum divided by 20 at even places, zero at odd ones.

    The weighted sum adds each input times its index in a 12-bit register;
    the quotient truncates toward zero and is held in 6 bits.
    """
    words = _inputs(values)
    result = []
    for i in range(LOOP_DEPTH):
        acc = _weighted_sum(words)
        result.append(LOOP_OUT.raw_from(_c_div(acc, 20)) if i % 2 == 0 else 0)
    return result


def loop_perfect(values):
    """Same outputs as :func:`loop_imperfect`, with all work inside the inner loop."""
    words = _inputs(values)
    result = []
    for i in range(LOOP_DEPTH):
        acc = 0
        for j, word in enumerate(words):
            if j == 0:
                acc = 0
            acc = LOOP_ACC.raw_from(acc + word * j)
            if j == LOOP_DEPTH - 1:
                result.append(LOOP_OUT.raw_from(_c_div(acc, 20)) if i % 2 == 0 else 0)
    return result


class PipelineAccumulator:
    """20-bit accumulator of a doubly nested loop, kept across calls."""

    def __init__(self) -> None:
        self.acc = 0

    def run(self, values):
        """Add every input times every outer index 0..19 to the running sum and return it."""
        words = _inputs(values)
        for i in range(LOOP_DEPTH):
            for word in words:
                self.acc = PIPE_ACC.raw_from(self.acc + word * i)
        return self.acc


def free_pipe_mult(values, stream):
    """Sum ``values[i] + i + s[i]`` over eight items, with ``s`` read from ``stream``.

    The sum is truncated toward zero to an integer and returned as a float.
    """
    inputs = [float(item) for item in _take(values, PIPE_DEPTH, "values")]
    shifted = [item + i for i, item in enumerate(inputs)]
    passed = [float(item) for item in _take(stream, PIPE_DEPTH, "stream items")]
    acc = 0.0
    for base, extra in zip(shifted, passed):
        acc += base + extra
    return float(int(acc))