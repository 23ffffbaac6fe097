"""Arithmetic on non-negative integers held as strings of decimal digits.

Every magnitude is a string of the characters ``0`` to ``9``. Results are
returned without leading zeroes; zero itself is ``"0"``.
"""

from __future__ import annotations

_DECIMAL_DIGITS = "0123456789"

# The largest values for which the native fast paths are taken.
_FLOOR_SQRT_LLONG_MAX = "3037000499"
_LLONG_MAX = "9223372036854775807"


def is_valid_number(num: str) -> bool:
    """Return True if every character of ``num`` is a decimal digit."""
    return all(digit in _DECIMAL_DIGITS for digit in num)


def strip_leading_zeroes(num: str) -> str:
    """Return ``num`` without leading zeroes, or ``"0"`` if nothing is left."""
    return num.lstrip("0") or "0"


def add_leading_zeroes(num: str, num_zeroes: int) -> str:
    """Return ``num`` with ``num_zeroes`` zeroes put in front of it."""
    return "0" * num_zeroes + num


def add_trailing_zeroes(num: str, num_zeroes: int) -> str:
    """Return ``num`` with ``num_zeroes`` zeroes appended to it."""
    return num + "0" * num_zeroes


def get_larger_and_smaller(num1: str, num2: str) -> tuple[str, str]:
    """Return ``(larger, smaller)``, the smaller padded to the larger's length."""
    if len(num1) > len(num2) or (len(num1) == len(num2) and num1 > num2):
        larger, smaller = num1, num2
    else:
        larger, smaller = num2, num1
    return larger, add_leading_zeroes(smaller, len(larger) - len(smaller))


def is_power_of_10(num: str) -> bool:
    """Return True if ``num`` is a one followed only by zeroes."""
    return num[:1] == "1" and all(digit == "0" for digit in num[1:])


def compare_magnitudes(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    a, b = strip_leading_zeroes(a), strip_leading_zeroes(b)
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return (a > b) - (a < b)


def add_magnitudes(a: str, b: str) -> str:
    """Return the sum of two magnitudes."""
    larger, smaller = get_larger_and_smaller(a, b)
    carry = 0
    digits: list[str] = []
    for x, y in zip(reversed(larger), reversed(smaller)):
        carry, digit = divmod(int(x) + int(y) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return strip_leading_zeroes("".join(reversed(digits)))


def subtract_magnitudes(larger: str, smaller: str) -> str:
    """Return ``larger - smaller``; raise ValueError if the result would be negative."""
    if compare_magnitudes(larger, smaller) < 0:
        raise ValueError(f"cannot subtract {smaller!r} from smaller {larger!r}")
    smaller = add_leading_zeroes(smaller, len(larger) - len(smaller))
    borrow = 0
    digits: list[str] = []
    for x, y in zip(reversed(larger), reversed(smaller)):
        difference = int(x) - int(y) - borrow
        borrow = 1 if difference < 0 else 0
        digits.append(str(difference + 10 * borrow))
    return strip_leading_zeroes("".join(reversed(digits)))


def multiply_magnitudes(a: str, b: str) -> str:
    """Return the product of two magnitudes, using Karatsuba's algorithm."""
    a, b = strip_leading_zeroes(a), strip_leading_zeroes(b)
    if a == "0" or b == "0":
        return "0"
    if a == "1":
        return b
    if b == "1":
        return a
    if (
        compare_magnitudes(a, _FLOOR_SQRT_LLONG_MAX) <= 0
        and compare_magnitudes(b, _FLOOR_SQRT_LLONG_MAX) <= 0
    ):
        return str(int(a) * int(b))
    if is_power_of_10(a):
        return b + a[1:]
    if is_power_of_10(b):
        return a + b[1:]

    larger, smaller = get_larger_and_smaller(a, b)
    half = len(larger) // 2
    half_ceil = len(larger) - half

    high1 = strip_leading_zeroes(larger[:half])
    low1 = strip_leading_zeroes(larger[half:])
    high2 = strip_leading_zeroes(smaller[:half])
    low2 = strip_leading_zeroes(smaller[half:])

    prod_high = multiply_magnitudes(high1, high2)
    prod_low = multiply_magnitudes(low1, low2)
    prod_mid = multiply_magnitudes(add_magnitudes(high1, low1), add_magnitudes(high2, low2))
    prod_mid = subtract_magnitudes(subtract_magnitudes(prod_mid, prod_high), prod_low)

    shifted_high = strip_leading_zeroes(add_trailing_zeroes(prod_high, 2 * half_ceil))
    shifted_mid = strip_leading_zeroes(add_trailing_zeroes(prod_mid, half_ceil))
    return add_magnitudes(add_magnitudes(shifted_high, shifted_mid), prod_low)


def divmod_magnitudes(dividend: str, divisor: str) -> tuple[str, str]:
    """Return ``(quotient, remainder)`` by long division.

    Raises ZeroDivisionError if the divisor is zero.
    """
    dividend, divisor = strip_leading_zeroes(dividend), strip_leading_zeroes(divisor)
    if divisor == "0":
        raise ZeroDivisionError("Attempted division by zero")
    if divisor == "1":
        return dividend, "0"
    if compare_magnitudes(dividend, divisor) < 0:
        return "0", dividend
    if (
        compare_magnitudes(dividend, _LLONG_MAX) <= 0
        and compare_magnitudes(divisor, _LLONG_MAX) <= 0
    ):
        quotient, remainder = divmod(int(dividend), int(divisor))
        return str(quotient), str(remainder)
    if is_power_of_10(divisor):
        zeroes = len(divisor) - 1
        return (
            strip_leading_zeroes(dividend[:-zeroes]),
            strip_leading_zeroes(dividend[-zeroes:]),
        )

    quotient: list[str] = []
    remainder = "0"
    for digit in dividend:
        remainder = strip_leading_zeroes(remainder + digit)
        count = 0
        while compare_magnitudes(remainder, divisor) >= 0:
            remainder = subtract_magnitudes(remainder, divisor)
            count += 1
        quotient.append(str(count))
    return strip_leading_zeroes("".join(quotient)), remainder