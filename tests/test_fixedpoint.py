from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hlsmodels.fixedpoint import (
    FIXED_DIN1,
    FIXED_DIN2,
    SQRT_IN,
    SQRT_OUT,
    FixedFormat,
    Overflow,
    Quantization,
    wrap_int,
)

SIGNED_FMT = FixedFormat(8, 4, True)


def test_wrap_int_twos_complement():
    assert wrap_int(255, 8, True) == -1
    assert wrap_int(-1, 8, False) == 255


@given(st.integers(-(10**12), 10**12), st.integers(1, 40), st.booleans())
def test_wrap_int_range_and_congruence(value, width, signed):
    wrapped = wrap_int(value, width, signed)
    low = -(1 << (width - 1)) if signed else 0
    high = (1 << (width - 1)) - 1 if signed else (1 << width) - 1
    assert low <= wrapped <= high
    assert (wrapped - value) % (1 << width) == 0


def test_wrap_int_rejects_zero_width():
    with pytest.raises(ValueError):
        wrap_int(1, 0, True)


def test_source_inputs_are_exact():
    assert FIXED_DIN1.cast(0.25) == 0.25
    assert FIXED_DIN2.cast(2.125) == 2.125


def test_sqrt_output_fraction_bits():
    assert SQRT_OUT.raw_from(1) == 1 << 24
    assert SQRT_OUT.value_of(1) == Fraction(1, 1 << 24)
    assert SQRT_IN.raw_from(1) == 1 << 16
    assert SQRT_IN.value_of(1) == Fraction(1, 1 << 16)


@given(st.integers(-128, 127))
def test_raw_round_trip(raw):
    assert SIGNED_FMT.raw_from(SIGNED_FMT.value_of(raw)) == raw


@given(st.fractions(min_value=-100, max_value=100, max_denominator=1000))
def test_cast_is_idempotent(value):
    once = SIGNED_FMT.cast(value)
    assert SIGNED_FMT.cast(once) == once


@given(st.fractions(min_value=-1000, max_value=1000, max_denominator=1000))
def test_raw_always_in_range(value):
    for fmt in (SIGNED_FMT, FIXED_DIN1, FIXED_DIN2):
        raw = fmt.raw_from(value)
        assert fmt.min_raw <= raw <= fmt.max_raw


@given(st.fractions(min_value=-8, max_value=Fraction(127, 16), max_denominator=1000))
def test_truncation_floors(value):
    result = SIGNED_FMT.cast(value)
    assert result <= value < result + SIGNED_FMT.lsb


@given(st.fractions(min_value=-8, max_value=Fraction(127, 16), max_denominator=1000))
def test_truncation_to_zero(value):
    fmt = FixedFormat(8, 4, True, Quantization.TRN_ZERO)
    result = fmt.cast(value)
    assert abs(result) <= abs(value)
    assert abs(value - result) < fmt.lsb


@given(st.fractions(min_value=-8, max_value=Fraction(126, 16), max_denominator=1000))
def test_rounding_error_bounded(value):
    fmt = FixedFormat(8, 4, True, Quantization.RND, Overflow.SAT)
    assert abs(fmt.cast(value) - value) <= fmt.lsb / 2


@given(st.integers(-100, 100))
def test_rounding_ties(k):
    tie = (k + Fraction(1, 2)) * SIGNED_FMT.lsb
    half = SIGNED_FMT.lsb / 2

    def fmt(mode):
        return FixedFormat(8, 4, True, mode, Overflow.SAT)

    assert fmt(Quantization.RND).cast(tie) - tie == half
    assert fmt(Quantization.RND_MIN_INF).cast(tie) - tie == -half
    assert abs(fmt(Quantization.RND_ZERO).cast(tie)) < abs(tie)
    assert abs(fmt(Quantization.RND_INF).cast(tie)) > abs(tie)
    assert fmt(Quantization.RND_CONV).raw_from(tie) % 2 == 0


def test_saturation_clamps():
    fmt = FixedFormat(8, 4, True, Quantization.TRN, Overflow.SAT)
    assert fmt.cast(10**6) == fmt.max_value
    assert fmt.cast(-(10**6)) == fmt.min_value
    assert FIXED_DIN1.cast(-3) == FIXED_DIN1.min_value


def test_saturation_to_zero():
    fmt = FixedFormat(8, 4, True, Quantization.TRN, Overflow.SAT_ZERO)
    assert fmt.cast(10**6) == fmt.cast(0)
    assert fmt.cast(-(10**6)) == fmt.cast(0)


def test_symmetric_saturation():
    fmt = FixedFormat(8, 4, True, Quantization.TRN, Overflow.SAT_SYM)
    assert fmt.cast(-(10**6)) == -fmt.max_value
    assert fmt.cast(10**6) == fmt.max_value


@given(st.fractions(min_value=-8, max_value=8, max_denominator=1000))
def test_wrap_is_periodic(value):
    span = Fraction(2) ** SIGNED_FMT.int_width
    assert SIGNED_FMT.raw_from(value + span) == SIGNED_FMT.raw_from(value)


def test_wrap_below_minimum_comes_back_at_top():
    below = FIXED_DIN2.min_value - FIXED_DIN2.lsb
    assert FIXED_DIN2.cast(below) == FIXED_DIN2.max_value


def test_invalid_width_rejected():
    with pytest.raises(ValueError):
        FixedFormat(0, 0)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_rejected(bad):
    with pytest.raises(ValueError):
        SIGNED_FMT.raw_from(bad)


def test_non_numeric_rejected():
    with pytest.raises(TypeError):
        SIGNED_FMT.raw_from(object())