"""Dataflow models: split-and-remerge streams, vector addition and element-wise kernels.

Streams are modelled as FIFOs (``collections.deque``) or generators. Each
stage reads and writes them in the same order as the hardware processes. An
attempt to read from an empty stream raises :class:`ValueError`.
"""

from __future__ import annotations

import itertools
import struct
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

from hlsmodels.fixedpoint import wrap_int

REMERGE_COUNT = 50
REMERGE_BRANCH_COUNT = 25
VECTOR_LANES = 16
VECTOR_COUNT = 32
KERNEL_SIZE = 4096


def _read(fifo: deque, name: str):
    if not fifo:
        raise ValueError(f"read from empty stream {name}")
    return fifo.popleft()


def _demux(source: deque, count: int) -> tuple[deque, deque]:
    branches = (deque(), deque())
    sel = 0
    for _ in range(count):
        branches[sel].append(_read(source, "in"))
        sel = 1 - sel
    return branches


def _proc(inp: deque, count: int) -> deque:
    out = deque()
    for _ in range(count):
        out.append(_read(inp, "inter"))
    return out


def _mux(branches: Sequence[deque], count: int) -> list:
    out = []
    sel = 0
    for _ in range(count):
        out.append(_read(branches[sel], "mux_in"))
        sel = 1 - sel
    return out


def remerge_example(values):
    """Split 50 values alternately over two pass-through branches and merge them back.

    The merged output has the same order as the input. Values after the
    first 50 are not read.
    """
    source = deque(itertools.islice(iter(values), REMERGE_COUNT))
    if len(source) < REMERGE_COUNT:
        raise ValueError(f"need {REMERGE_COUNT} values, got {len(source)}")
    left, right = _demux(source, REMERGE_COUNT)
    merged = (_proc(left, REMERGE_BRANCH_COUNT), _proc(right, REMERGE_BRANCH_COUNT))
    return _mux(merged, REMERGE_COUNT)


def _f32(value) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", float(value)))[0]
    except OverflowError:
        return float("inf") if float(value) > 0 else float("-inf")


def _load_vectors(vectors, name: str) -> list[tuple[float, ...]]:
    loaded = []
    for vector in itertools.islice(iter(vectors), VECTOR_COUNT):
        lanes = tuple(_f32(x) for x in vector)
        if len(lanes) != VECTOR_LANES:
            raise ValueError(
                f"{name} vectors need {VECTOR_LANES} lanes, got {len(lanes)}"
            )
        loaded.append(lanes)
    if len(loaded) < VECTOR_COUNT:
        raise ValueError(f"{name} needs {VECTOR_COUNT} vectors, got {len(loaded)}")
    return loaded


def vector_example(lhs, rhs, n):
    """Add 32 vectors of 16 single-precision lanes, lane by lane.

    The whole block is processed ``n`` times from the same inputs, so the
    result does not depend on ``n`` as long as ``n`` is positive. If ``n``
    is not positive, nothing is written and the result is empty.
    """
    result: list[tuple[float, ...]] = []
    for _ in range(max(int(n), 0)):
        lhs_buf = _load_vectors(lhs, "lhs")
        rhs_buf = _load_vectors(rhs, "rhs")
        result = [
            tuple(_f32(a + b) for a, b in zip(left, right))
            for left, right in zip(lhs_buf, rhs_buf)
        ]
    return result


def _u32(value) -> int:
    return wrap_int(value, 32, False)


def _read_input(values, size: int, name: str) -> Iterator[int]:
    items = [_u32(x) for x in itertools.islice(iter(values), size)]
    if len(items) < size:
        raise ValueError(f"{name} needs {size} values, got {len(items)}")
    yield from items


def _run_kernel(in1: Iterable, in2: Iterable, size, op) -> list[int]:
    size = int(size)
    if size <= 0:
        return []
    stream1 = _read_input(in1, size, "in1")
    stream2 = _read_input(in2, size, "in2")
    return [_u32(op(a, b)) for a, b in zip(stream1, stream2)]


def krnl_vadd(in1, in2, size=KERNEL_SIZE):
    """Return the element-wise sum of the first ``size`` items, as 32-bit unsigned values."""
    return _run_kernel(in1, in2, size, lambda a, b: a + b)


def krnl_vmult(in1, in2, size=KERNEL_SIZE):
    """Return the element-wise product of the first ``size`` items, as 32-bit unsigned values."""
    return _run_kernel(in1, in2, size, lambda a, b: a * b)