import pytest
from hypothesis import given
from hypothesis import strategies as st

from perfkit.bigint import BigInt, big_pow10

small = st.integers(min_value=-(10**12), max_value=10**12)
large = st.integers(min_value=-(10**60), max_value=10**60)
anyint = st.one_of(small, large)
nonzero = anyint.filter(lambda n: n != 0)


@given(anyint)
def test_string_round_trip(n):
    assert str(BigInt(str(n))) == str(n)
    assert int(BigInt(n)) == n


def test_leading_zeroes_are_stripped():
    assert str(BigInt("000123")) == "123"
    assert BigInt("-007") == -7
    assert BigInt("+42") == 42


def test_negative_zero_is_zero():
    assert str(BigInt("-0")) == "0"
    assert BigInt("-0") == BigInt(0)


@pytest.mark.parametrize("text", ["12a", "--1", "1.5", " 3", "+-2"])
def test_invalid_strings_raise(text):
    with pytest.raises(ValueError):
        BigInt(text)


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        BigInt(1.5)


def test_example_addition_carries():
    n1 = BigInt("99999999999999")
    n2 = BigInt("1")
    assert str(n1 + n2) == "100000000000000"


@given(anyint, anyint)
def test_addition_and_subtraction(a, b):
    assert int(BigInt(a) + BigInt(b)) == a + b
    assert int(BigInt(a) - BigInt(b)) == a - b


@given(anyint, anyint)
def test_multiplication(a, b):
    assert int(BigInt(a) * BigInt(b)) == a * b


@given(anyint, nonzero)
def test_division_truncates_and_remainder_follows_dividend(a, b):
    q = BigInt(a) // BigInt(b)
    r = BigInt(a) % BigInt(b)
    assert q * b + r == a
    assert abs(r) < abs(BigInt(b))
    assert r == 0 or (r < 0) == (a < 0)


@given(st.integers(min_value=1, max_value=10**40), st.integers(min_value=0, max_value=30))
def test_power_of_ten_paths(n, exp):
    ten = big_pow10(exp)
    assert int(ten * n) == n * 10**exp
    assert int(BigInt(n) * ten) == n * 10**exp
    q = BigInt(n) // ten
    assert q * ten + BigInt(n) % ten == n


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        BigInt(5) // 0
    with pytest.raises(ZeroDivisionError):
        BigInt(5) % BigInt(0)


@given(anyint, anyint)
def test_comparisons_agree_with_int(a, b):
    x, y = BigInt(a), BigInt(b)
    assert (x < y) == (a < b)
    assert (x <= y) == (a <= b)
    assert (x > y) == (a > b)
    assert (x >= y) == (a >= b)
    assert (x == y) == (a == b)


@given(small, small)
def test_mixed_operands(a, b):
    assert int(a + BigInt(b)) == a + b
    assert int(BigInt(a) - str(b)) == a - b
    assert int(str(a) * BigInt(b)) == a * b
    assert BigInt(a) == str(a)


@given(anyint)
def test_unary_operators(n):
    x = BigInt(n)
    assert int(-x) == -n
    assert +x == x
    assert int(abs(x)) == abs(n)


@given(anyint)
def test_hash_matches_int(n):
    assert hash(BigInt(n)) == hash(n)
    assert {BigInt(n): "v"}[n] == "v"


def test_bounded_conversions():
    assert BigInt(2**31 - 1).to_int() == 2**31 - 1
    with pytest.raises(OverflowError):
        BigInt(2**31).to_int()
    assert BigInt(-(2**63)).to_long_long() == -(2**63)
    with pytest.raises(OverflowError):
        BigInt(2**63).to_long()


def test_format_and_repr():
    assert f"{BigInt(-42):>5}" == "  -42"
    assert repr(BigInt("1234567890")) == "BigInt('1234567890')"


def test_big_pow10():
    assert str(big_pow10(3)) == "1000"
    assert big_pow10(0) == 1
    with pytest.raises(ValueError):
        big_pow10(-1)


def test_augmented_assignment_does_not_mutate_original():
    a = BigInt(10)
    b = a
    a += 1
    assert b == 10
    assert a == 11