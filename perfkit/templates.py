"""Generic numeric helpers and a rectangle that works with any number type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


def power_n(v: T, n: int) -> T:
    """Return ``v`` multiplied by itself ``n`` times, in the type of ``v``."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    product = type(v)(1)
    for _ in range(n):
        product *= v
    return product


def more_power_n(v: T, n: int) -> T:
    """Like power_n, with a direct square for ``n == 2``."""
    if n == 2:
        return v * v
    return power_n(v, n)


def _format_number(value: object) -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Rectangle(Generic[T]):
    """An axis-aligned rectangle given by its corner and its size."""

    x: T
    y: T
    width: T
    height: T

    def area(self) -> T:
        """Return width times height."""
        return self.width * self.height

    def circumference(self) -> T:
        """Return twice the product of width and height."""
        return 2 * (self.width * self.height)

    def __str__(self) -> str:
        x, y, width, height = map(_format_number, (self.x, self.y, self.width, self.height))
        return f"Rectangle at {x}:{y} [width: {width} / height: {height}]"


def is_square(rect: Rectangle) -> bool:
    """Return True if the rectangle's width equals its height."""
    return rect.width == rect.height


def sum_of(x: int, y: int, z: int) -> int:
    """Return ``x + y + z``."""
    return x + y + z


def sub_of(x: int, y: int, z: int) -> int:
    """Return ``x - y - z``."""
    return x - y - z