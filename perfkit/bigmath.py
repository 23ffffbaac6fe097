"""Number-theoretic helpers and examples built on BigInt."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence, Union

from perfkit.bigint import BigInt, big_pow10

IntLike = Union[BigInt, int, str]

# Upper bound for the digit count chosen when none is given.
MAX_RANDOM_LENGTH = 1000

_system_random = random.SystemRandom()


def big_random(num_digits: int = 0) -> BigInt:
    """Return a random positive BigInt with exactly ``num_digits`` digits.

    With ``num_digits`` of zero a length from 1 to MAX_RANDOM_LENGTH is chosen.
    """
    if num_digits < 0:
        raise ValueError("number of digits must not be negative")
    if num_digits == 0:
        num_digits = 1 + _system_random.randrange(MAX_RANDOM_LENGTH)
    first = str(_system_random.randint(1, 9))
    rest = "".join(str(_system_random.randrange(10)) for _ in range(num_digits - 1))
    return BigInt(first + rest)


def power(base: IntLike, exp: int) -> BigInt:
    """Return ``base`` raised to the integer power ``exp``.

    A negative exponent gives ``base`` itself when its magnitude is one and
    zero otherwise.
    """
    base = BigInt(base)
    if exp < 0:
        if base == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return base if abs(base) == 1 else BigInt(0)
    if exp == 0:
        if base == 0:
            raise ValueError("Zero cannot be raised to zero")
        return BigInt(1)

    result, result_odd = base, BigInt(1)
    while exp > 1:
        if exp % 2:
            result_odd *= result
        result *= result
        exp //= 2
    return result * result_odd


def sqrt(num: IntLike) -> BigInt:
    """Return the integer square root of a non-negative number (Newton's method)."""
    num = BigInt(num)
    if num < 0:
        raise ValueError("Cannot compute square root of a negative integer")
    if num == 0:
        return BigInt(0)
    if num < 4:
        return BigInt(1)
    if num < 9:
        return BigInt(2)
    if num < 16:
        return BigInt(3)

    previous = BigInt(-1)
    current = big_pow10(len(str(num)) // 2 - 1)
    while abs(current - previous) > 1:
        previous = current
        current = (num // previous + previous) // 2
    # Newton's iteration may stop one step above the floor of the root.
    while current * current > num:
        current -= 1
    return current


def gcd(num1: IntLike, num2: IntLike) -> BigInt:
    """Return the greatest common divisor of two numbers (Euclid's algorithm)."""
    a, b = abs(BigInt(num1)), abs(BigInt(num2))
    while b != 0:
        a, b = b, a % b
    return a


def lcm(num1: IntLike, num2: IntLike) -> BigInt:
    """Return the least common multiple of two numbers."""
    a, b = BigInt(num1), BigInt(num2)
    if a == 0 or b == 0:
        return BigInt(0)
    return abs(a * b) // gcd(a, b)


def factorial(n: int) -> BigInt:
    """Return ``n!`` as a BigInt."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = BigInt(1)
    for i in range(2, n + 1):
        result *= i
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print a few BigInt examples."""
    parser = argparse.ArgumentParser(description="BigInt examples.")
    parser.add_argument(
        "--factorials", action="store_true", help="also print factorials of 2 to 20"
    )
    args = parser.parse_args(argv)

    n = BigInt(1234567890)
    print(n)
    print(f"{n}")

    n1, n2 = BigInt("11111111"), BigInt("22222222")
    print(f"{n1} + {n2} = {n1 + n2}")
    n1, n2 = BigInt("99999999999999"), BigInt("1")
    print(f"{n1} + {n2} = {n1 + n2}")

    if args.factorials:
        for k in range(2, 21):
            print(f"Faculty of {k}: {factorial(k)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())