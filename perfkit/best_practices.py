"""Small examples of idiomatic, allocation-conscious code."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

S = TypeVar("S", bound=Sequence)

# Inclusive bounds a value must lie within.
RANGE_LOW = 50
RANGE_HIGH = 100


def prefix(text: S) -> S:
    """Return the four items after the first one, or an empty slice if too short."""
    if len(text) >= 5:
        return text[1:5]
    return text[:0]


def all_in_range(data: Iterable[int]) -> bool:
    """Return True if every value lies between 50 and 100 inclusive."""
    return all(RANGE_LOW <= value <= RANGE_HIGH for value in data)


def process_data(data: Sequence[int], handler: Callable[[Sequence[int]], object]) -> bool:
    """Pass ``data`` to ``handler`` if all values are in range; report whether it was."""
    if all_in_range(data):
        handler(data)
        return True
    return False


def square(x: int) -> int:
    """Return ``x`` squared."""
    return x * x