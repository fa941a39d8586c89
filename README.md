# hlsmodels

Bit-accurate Python reference models of common high-level-synthesis coding
patterns: arbitrary-precision integers, fixed-point arithmetic, pointer idioms,
loop nests and dataflow kernels. Each model reduces its operands and results
to the bit widths of the hardware types it describes, so it can serve as a
golden model when checking hardware results, or to see how fixed widths,
wrapping and saturation change a computation.

The package has no dependencies outside the standard library.

## Installation

```
pip install hlsmodels
```

For the test suite:

```
pip install "hlsmodels[test]"
pytest
```

## Modules

- `hlsmodels.fixedpoint`: `FixedFormat(width, int_width, signed=True,
  quantization=Quantization.TRN, overflow=Overflow.WRAP)` describes a
  fixed-point type. `raw_from(value)` gives the stored integer after
  quantization and overflow handling, `value_of(raw)` gives the value of a
  bit pattern as a `Fraction`, and `cast(value)` does both. `Quantization`
  has the modes `TRN`, `TRN_ZERO`, `RND`, `RND_ZERO`, `RND_MIN_INF`,
  `RND_INF` and `RND_CONV`; `Overflow` has `WRAP`, `SAT`, `SAT_ZERO` and
  `SAT_SYM`. `wrap_int(value, width, signed)` reduces an integer to `width`
  bits in two's complement.
- `hlsmodels.fxp_sqrt`: `fxp_sqrt(raw, in_width, in_int_width, out_width,
  out_int_width)` is a non-restoring square root on the stored integers of
  two unsigned formats; it raises `ValueError` if the output has fewer than
  half (rounded up) the input's integer bits. `fxp_sqrt_top(value)` takes a
  value through a 24-bit input with 8 integer bits and returns the root in a
  28-bit format with 4 integer bits, as a `Fraction`.
- `hlsmodels.arith`:
  - `ap_int_arith(a, b, c, d)` returns an `ArithResult` with `product`,
    `total`, `quotient` and `remainder`, each in its own narrow width.
    Division truncates toward zero; a divisor that is zero after reduction
    to 6 bits raises `ZeroDivisionError`.
  - `casting_multiply(a, b)` multiplies two 18-bit values into 36 bits.
  - `fibonacci(a, b, n=5)` steps a 32-bit Fibonacci pair.
  - `loop_var(values, width)` sums up to 31 items into a 13-bit accumulator.
  - `fixed_product(in1, in2)` multiplies two fixed-point inputs through an
    intermediate format.
- `hlsmodels.fp_pow2`: `float_mul_pow2(x, n)` and `double_mul_pow2(x, n)`
  multiply by `2**n` by editing the biased exponent field. Results past the
  top of the range become infinity, and results at or below the bottom
  become zero, both with the sign kept; no subnormals are produced. Inputs
  whose biased exponent is zero or equals `0xFF` are returned unchanged.
  For single precision that covers zero, subnormals, infinity and NaN. For
  double precision the same `0xFF` test is applied, so infinity and NaN are
  not passed through; instead the exponent is adjusted like any other value.
- `hlsmodels.pointers`: `ArithAccumulator` and `BasicAccumulator` (running
  sums kept across calls to `run`), `pointer_multi`, `pointer_cast_native`,
  `pointer_stream_better`, `pointer_stream_good` and `pointer_double`. All
  arithmetic is 32-bit signed and wraps.
- `hlsmodels.functions`: `foo` and `top` on 8-bit signed characters;
  `sumsub`, `shift` and `hier_func4(a, b, log_dir=None)` on 32-bit integers.
  When `log_dir` is given, `hier_func4` writes the intermediate sum to
  `Out_apb_<sum>.dat` in that directory.
- `hlsmodels.loops`: `loop_imperfect`, `loop_perfect`, `PipelineAccumulator`
  (a 20-bit accumulator kept across calls to `run`) and `free_pipe_mult`.
- `hlsmodels.dataflow`: `remerge_example` (split 50 values over two branches
  and merge them back in order), `vector_example` (lane-wise addition of 32
  single-precision vectors of 16 lanes), and `krnl_vadd` / `krnl_vmult`
  (element-wise 32-bit unsigned sum and product).

## Example

```python
from hlsmodels.fixedpoint import FixedFormat
from hlsmodels.fxp_sqrt import fxp_sqrt_top
from hlsmodels.dataflow import krnl_vadd

print(float(fxp_sqrt_top(2.0)))               # about 1.41421356
print(krnl_vadd([1, 2, 3], [4, 5, 6], 3))     # [5, 7, 9]

fmt = FixedFormat(6, 3)
print(fmt.cast(2.125))                        # 17/8
```

Models whose state carries over between calls are classes; each instance
keeps its own state:

```python
from hlsmodels.pointers import BasicAccumulator

acc = BasicAccumulator()
print([acc.run(v) for v in range(4)])         # [0, 1, 3, 6]
```

## What the package does not do

The models are plain Python functions and classes. There is no command-line
tool, and nothing here compiles, synthesizes or runs code on accelerator
hardware: the kernel models compute their results in Python only.