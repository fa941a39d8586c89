"""Models of pointer-based datapaths: accumulators, table lookups and streams.

All arithmetic is on 32-bit signed integers and wraps in two's complement.
Accumulators whose state lives across calls are classes that keep that
state between calls to ``run``.
"""

from __future__ import annotations

import itertools
import struct
from collections.abc import Iterable, Sequence

from hlsmodels.fixedpoint import wrap_int

CAST_DEPTH = 1024
CAST_READS = 4 * (CAST_DEPTH // 10)

_TABLE_A = (1, 2, 3, 4, 5, 6, 7, 8)
_TABLE_B = (8, 7, 6, 5, 4, 3, 2, 1)
_DOUBLE_INIT = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)


def _i32(value) -> int:
    return wrap_int(value, 32, True)


class ArithAccumulator:
    """Running sum over a sliding window of five words, kept across calls."""

    def __init__(self) -> None:
        self.acc = 0

    def run(self, data):
        """Add ``data[1:5]`` to the running sum, writing each partial sum one place back.

        Returns a new list: the first four items are the partial sums and any
        items after them are copied from ``data``.
        """
        words = [_i32(item) for item in data]
        if len(words) < 5:
            raise IndexError(f"need at least 5 values, got {len(words)}")
        for i in range(4):
            self.acc = _i32(self.acc + words[i + 1])
            words[i] = self.acc
        return words


class BasicAccumulator:
    """Running sum of single values, kept across calls."""

    def __init__(self) -> None:
        self.acc = 0

    def run(self, value):
        """Add ``value`` to the running sum and return the new sum."""
        self.acc = _i32(self.acc + _i32(value))
        return self.acc


def pointer_multi(sel, pos):
    """Look up ``pos`` in the ascending table if ``sel`` is true, else in the descending one."""
    index = wrap_int(pos, 8, False)
    table = _TABLE_A if sel else _TABLE_B
    if index >= len(table):
        raise IndexError(f"position {index} is outside the table of {len(table)}")
    return table[index]


def pointer_cast_native(index, values):
    """Sum the bytes of ``values`` from element ``index`` on, read as signed chars.

    The words are laid out as 32-bit little-endian integers and 408 bytes are
    summed into a 32-bit signed result.
    """
    index = _i32(index)
    if index < 0:
        raise IndexError(f"index must not be negative, got {index}")
    words: Sequence[int] = [_i32(item) for item in values]
    memory = struct.pack(f"<{len(words)}i", *words)
    start = 4 * index
    chunk = memory[start:start + CAST_READS]
    if len(chunk) < CAST_READS:
        raise IndexError(
            f"need {CAST_READS} bytes from element {index}, only {len(chunk)} available"
        )
    result = 0
    for byte in struct.unpack(f"{CAST_READS}b", chunk):
        result = _i32(result + byte)
    return result


def pointer_stream_better(reads: Iterable[int]):
    """Accumulate four successive reads of one port, writing after the second and fourth.

    Returns the two values written, in order.
    """
    it = iter(reads)
    taken = list(itertools.islice(it, 4))
    if len(taken) < 4:
        raise ValueError(f"need 4 reads, got {len(taken)}")
    acc = 0
    writes = []
    for count, value in enumerate(taken, start=1):
        acc = _i32(acc + _i32(value))
        if count % 2 == 0:
            writes.append(acc)
    return tuple(writes)


def pointer_stream_good(values):
    """Return the sum of the first two values and the sum of the first four."""
    words = [_i32(item) for item in itertools.islice(iter(values), 4)]
    if len(words) < 4:
        raise IndexError(f"need 4 values, got {len(words)}")
    first = _i32(words[0] + words[1])
    second = _i32(first + words[2] + words[3])
    return [first, second]


def _masked_sum(array, size, flag):
    total = 0
    for i, item in enumerate(array[:size]):
        if flag & i:
            total = _i32(total + item)
    return total


def pointer_double(pos, x, flag):
    """Write ``x`` at ``pos`` of the table 1..10, then sum items whose index shares a bit with ``flag``."""
    array = list(_DOUBLE_INIT)
    pos = _i32(pos)
    if 0 <= pos < len(array):
        array[pos] = _i32(x)
    return _masked_sum(array, len(array), _i32(flag))