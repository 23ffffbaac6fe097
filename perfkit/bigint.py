"""An arbitrary-sized signed integer held as a sign and a string of digits."""

from __future__ import annotations

from typing import Union

from perfkit.digits import (
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    is_valid_number,
    multiply_magnitudes,
    strip_leading_zeroes,
    subtract_magnitudes,
)

IntLike = Union["BigInt", int, str]


def _parse(text: str) -> tuple[bool, str]:
    """Split a textual integer into its sign and magnitude."""
    if text[:1] in ("+", "-") and text:
        sign, magnitude = text[0], text[1:]
    else:
        sign, magnitude = "+", text
    if not is_valid_number(magnitude):
        raise ValueError(f"Expected an integer, got '{text}'")
    return sign == "-", strip_leading_zeroes(magnitude)


class BigInt:
    """An immutable integer of any size.

    Division truncates toward zero and the remainder takes the sign of the
    dividend, so ``(a // b) * b + a % b == a`` always holds.
    """

    __slots__ = ("_negative", "_magnitude")

    def __init__(self, value: IntLike = 0) -> None:
        if isinstance(value, BigInt):
            negative, magnitude = value._negative, value._magnitude
        elif isinstance(value, int):
            negative, magnitude = value < 0, str(abs(value))
        elif isinstance(value, str):
            negative, magnitude = _parse(value)
        else:
            raise TypeError(f"cannot build a BigInt from {type(value).__name__}")
        self._negative = negative and magnitude != "0"
        self._magnitude = magnitude

    @classmethod
    def _from_parts(cls, negative: bool, magnitude: str) -> BigInt:
        result = object.__new__(cls)
        result._magnitude = strip_leading_zeroes(magnitude)
        result._negative = negative and result._magnitude != "0"
        return result

    @staticmethod
    def _coerce(other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, (int, str)):
            return BigInt(other)
        return None

    # conversions

    def __str__(self) -> str:
        return "-" + self._magnitude if self._negative else self._magnitude

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def __int__(self) -> int:
        return int(str(self))

    def __hash__(self) -> int:
        return hash(int(self))

    def _to_bounded(self, bits: int, kind: str) -> int:
        number = int(self)
        limit = 1 << (bits - 1)
        if not -limit <= number < limit:
            raise OverflowError(f"{self} is out of range for {kind}")
        return number

    def to_int(self) -> int:
        """Return the value, raising OverflowError outside a 32-bit int."""
        return self._to_bounded(32, "int")

    def to_long(self) -> int:
        """Return the value, raising OverflowError outside a 64-bit long."""
        return self._to_bounded(64, "long")

    def to_long_long(self) -> int:
        """Return the value, raising OverflowError outside a 64-bit long long."""
        return self._to_bounded(64, "long long")

    # unary operators

    def __pos__(self) -> BigInt:
        return self

    def __neg__(self) -> BigInt:
        return BigInt._from_parts(not self._negative, self._magnitude)

    def __abs__(self) -> BigInt:
        return BigInt._from_parts(False, self._magnitude)

    # comparison

    def _compare(self, other: BigInt) -> int:
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = compare_magnitudes(self._magnitude, other._magnitude)
        return -order if self._negative else order

    def __eq__(self, other: object) -> bool:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) == 0

    def __lt__(self, other: IntLike) -> bool:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) < 0

    def __le__(self, other: IntLike) -> bool:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) <= 0

    def __gt__(self, other: IntLike) -> bool:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) > 0

    def __ge__(self, other: IntLike) -> bool:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) >= 0

    # arithmetic

    @staticmethod
    def _add(a: BigInt, b: BigInt) -> BigInt:
        if a._negative == b._negative:
            return BigInt._from_parts(a._negative, add_magnitudes(a._magnitude, b._magnitude))
        order = compare_magnitudes(a._magnitude, b._magnitude)
        if order == 0:
            return BigInt()
        if order > 0:
            return BigInt._from_parts(
                a._negative, subtract_magnitudes(a._magnitude, b._magnitude)
            )
        return BigInt._from_parts(b._negative, subtract_magnitudes(b._magnitude, a._magnitude))

    @staticmethod
    def _mul(a: BigInt, b: BigInt) -> BigInt:
        return BigInt._from_parts(
            a._negative != b._negative, multiply_magnitudes(a._magnitude, b._magnitude)
        )

    @staticmethod
    def _divmod(a: BigInt, b: BigInt) -> tuple[BigInt, BigInt]:
        quotient, remainder = divmod_magnitudes(a._magnitude, b._magnitude)
        return (
            BigInt._from_parts(a._negative != b._negative, quotient),
            BigInt._from_parts(a._negative, remainder),
        )

    def __add__(self, other: IntLike) -> BigInt:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt._add(self, rhs)

    def __radd__(self, other: IntLike) -> BigInt:
        lhs = BigInt._coerce(other)
        if lhs is None:
            return NotImplemented
        return BigInt._add(lhs, self)

    def __sub__(self, other: IntLike) -> BigInt:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt._add(self, -rhs)

    def __rsub__(self, other: IntLike) -> BigInt:
        lhs = BigInt._coerce(other)
        if lhs is None:
            return NotImplemented
        return BigInt._add(lhs, -self)

    def __mul__(self, other: IntLike) -> BigInt:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt._mul(self, rhs)

    def __rmul__(self, other: IntLike) -> BigInt:
        lhs = BigInt._coerce(other)
        if lhs is None:
            return NotImplemented
        return BigInt._mul(lhs, self)

    def __floordiv__(self, other: IntLike) -> BigInt:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt._divmod(self, rhs)[0]

    def __rfloordiv__(self, other: IntLike) -> BigInt:
        lhs = BigInt._coerce(other)
        if lhs is None:
            return NotImplemented
        return BigInt._divmod(lhs, self)[0]

    def __mod__(self, other: IntLike) -> BigInt:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt._divmod(self, rhs)[1]

    def __rmod__(self, other: IntLike) -> BigInt:
        lhs = BigInt._coerce(other)
        if lhs is None:
            return NotImplemented
        return BigInt._divmod(lhs, self)[1]


def big_pow10(exp: int) -> BigInt:
    """Return ten raised to the non-negative power ``exp``."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    return BigInt("1" + "0" * exp)