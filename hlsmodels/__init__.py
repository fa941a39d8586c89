"""Bit-accurate reference models of high-level-synthesis coding examples: fixed-point
formats and square root, narrow-integer arithmetic, pointer, loop and dataflow models."""

__version__ = "0.1.0"