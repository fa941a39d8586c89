from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hlsmodels.arith import (
    ArithResult,
    ap_int_arith,
    casting_multiply,
    fibonacci,
    fixed_product,
    loop_var,
)


@pytest.mark.parametrize(
    "i, expected",
    [
        (0, ArithResult(46, 25, 117, 1)),
        (4, ArithResult(162, 33, 39, 3)),
        (8, ArithResult(310, 41, 24, 3)),
    ],
)
def test_ap_int_arith_source_cases(i, expected):
    assert ap_int_arith(i + 2, i + 23, i + 234, i + 2345) == expected


def test_ap_int_arith_truncating_division_negative_divisor():
    result = ap_int_arith(-3, 0, 7, 7)
    assert result.quotient == -2
    assert result.remainder == 1


def test_ap_int_arith_truncating_division_negative_dividend():
    result = ap_int_arith(3, 0, -7, -7)
    assert result.quotient == -2
    assert result.remainder == -1


def test_ap_int_arith_input_a_wraps():
    assert ap_int_arith(32, 1, 0, 0).product == -32


def test_ap_int_arith_unsigned_sum_wraps():
    assert ap_int_arith(2, -5, 0, 0).total == 8189


def test_ap_int_arith_quotient_wraps():
    assert ap_int_arith(-1, 0, -(2**21), 0).quotient == -(2**21)


def test_ap_int_arith_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        ap_int_arith(64, 1, 1, 1)


def test_casting_multiply_source_first_values():
    assert casting_multiply(65536, 65536) == 4294967296
    assert casting_multiply(66560, 63489) == 4225827840


def test_casting_multiply_input_wraps():
    assert casting_multiply(131072, 1) == -131072


@given(st.integers(-(2**17), 2**17 - 1), st.integers(-(2**17), 2**17 - 1))
def test_casting_multiply_exact_in_range(a, b):
    assert casting_multiply(a, b) == a * b


@pytest.mark.parametrize("i, expected", [(0, 5), (1, 13), (250, 2005)])
def test_fibonacci_source_cases(i, expected):
    assert fibonacci(i, i + 1) == expected


def test_fibonacci_single_step_returns_b():
    assert fibonacci(7, 11, 1) == 11


def test_fibonacci_wraps_32_bits():
    assert fibonacci(2**31 - 1, 1, 2) == -(2**31)


def test_fibonacci_rejects_zero_steps():
    with pytest.raises(ValueError):
        fibonacci(1, 1, 0)


@pytest.mark.parametrize("width, expected", [(0, 0), (1, 0), (10, 45), (31, 465)])
def test_loop_var_source_cases(width, expected):
    assert loop_var(list(range(32)), width) == expected


def test_loop_var_width_wraps_to_five_bits():
    assert loop_var(list(range(32)), 32) == 0


def test_loop_var_values_wrap_to_eight_bits():
    assert loop_var([200], 1) == -56


def test_loop_var_too_few_values():
    with pytest.raises(IndexError):
        loop_var([1, 2], 3)


def test_fixed_product_source_first_value():
    assert fixed_product(Fraction(1, 4), Fraction(17, 8)) == Fraction(17, 32)


def test_fixed_product_source_twentieth_step():
    assert fixed_product(Fraction(21, 4), Fraction(-3, 8)) == Fraction(-63, 32)


def test_fixed_product_rounds_in1():
    assert fixed_product(0.3, 1) == Fraction(1, 4)
    assert fixed_product(0.375, 1) == Fraction(1, 2)


def test_fixed_product_rounds_in2():
    assert fixed_product(1, Fraction(33, 16)) == Fraction(17, 8)


def test_fixed_product_in2_wraps():
    assert fixed_product(1, 4) == -4


def test_fixed_product_in1_saturates():
    assert fixed_product(300, 1) == Fraction(1023, 4)
    assert fixed_product(-1, 1) == 0