import math

import pytest
from hypothesis import given, strategies as st

from perfkit.bigint import BigInt
from perfkit.bigmath import big_random, factorial, gcd, lcm, main, power, sqrt


@pytest.mark.parametrize("digits", [1, 2, 17, 250])
def test_big_random_has_requested_digits(digits):
    value = big_random(digits)
    text = str(value)
    assert len(text) == digits
    assert text[0] != "0"


def test_big_random_default_length_in_bounds():
    text = str(big_random())
    assert 1 <= len(text) <= 1000
    assert text.isdigit()


def test_big_random_negative_digits():
    with pytest.raises(ValueError):
        big_random(-1)


@given(st.integers(-10**30, 10**30), st.integers(0, 12))
def test_power_matches_builtin(base, exp):
    if base == 0 and exp == 0:
        return_value = None
    else:
        return_value = power(base, exp)
    if return_value is None:
        with pytest.raises(ValueError):
            power(base, exp)
    else:
        assert int(return_value) == base ** exp


def test_power_accepts_strings_and_bigints():
    assert power("3", 4) == power(BigInt(3), 4) == 3 ** 4


def test_power_negative_exponent():
    assert power(2, -3) == 0
    assert power(-1, -3) == -1
    assert power(1, -5) == 1


def test_power_errors():
    with pytest.raises(ZeroDivisionError):
        power(0, -1)
    with pytest.raises(ValueError):
        power(0, 0)


@given(st.integers(0, 10**40))
def test_sqrt_matches_isqrt(n):
    assert int(sqrt(n)) == math.isqrt(n)


def test_sqrt_negative():
    with pytest.raises(ValueError):
        sqrt(-4)


@given(st.integers(-10**25, 10**25), st.integers(-10**25, 10**25))
def test_gcd_matches_math(a, b):
    assert int(gcd(a, b)) == math.gcd(a, b)


@given(st.integers(-10**15, 10**15), st.integers(-10**15, 10**15))
def test_lcm_matches_math(a, b):
    assert int(lcm(a, b)) == math.lcm(a, b)


def test_gcd_mixed_operand_types():
    assert gcd("48", BigInt(-18)) == gcd(48, 18)


@pytest.mark.parametrize("n", [0, 1, 2, 5, 20, 30, 60])
def test_factorial_matches_math(n):
    assert int(factorial(n)) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_main_prints_examples(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1234567890"
    assert lines[1] == "1234567890"
    assert lines[2] == "11111111 + 22222222 = 33333333"
    assert lines[3] == "99999999999999 + 1 = 100000000000000"
    assert len(lines) == 4


def test_main_with_factorials(capsys):
    assert main(["--factorials"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == f"Faculty of 20: {math.factorial(20)}"
    assert len(lines) == 4 + 19