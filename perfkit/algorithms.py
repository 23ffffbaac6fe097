"""Searching, counting and rearranging helpers, and a grid exposing its rows."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import pairwise
from typing import Any, Iterable, MutableSequence, Sequence, TypeVar

T = TypeVar("T")


def contains(values: Iterable[Any], elem: Any) -> bool:
    """Return True if any item of ``values`` equals ``elem``."""
    return any(item == elem for item in values)


def to_string(values: Iterable[Any]) -> str:
    """Concatenate the textual form of every item."""
    return "".join(str(item) for item in values)


def find_slow(values: Iterable[Any], value: Any) -> int | None:
    """Return the index of the first item equal to ``value``, or None."""
    return next((index for index, item in enumerate(values) if item == value), None)


def find_fast(values: Sequence[Any], value: Any) -> int | None:
    """Like find_slow, checking four items per step of the main loop."""
    end = len(values) - len(values) % 4
    for base in range(0, end, 4):
        first, second, third, fourth = values[base : base + 4]
        if first == value:
            return base
        if second == value:
            return base + 1
        if third == value:
            return base + 2
        if fourth == value:
            return base + 3
    for index in range(end, len(values)):
        if values[index] == value:
            return index
    return None


def move_n_elements_to_back(values: MutableSequence[Any], n: int) -> None:
    """Move the first ``n`` items to the end, keeping their order, in place."""
    if not 0 <= n <= len(values):
        raise ValueError(f"cannot move {n} items of a sequence of {len(values)}")
    values[:] = [*values[n:], *values[:n]]


def minmax_index(values: Sequence[Any]) -> tuple[int, int]:
    """Return the index of the first smallest and of the last largest item."""
    if not values:
        raise ValueError("minmax_index() of an empty sequence")
    min_index = max_index = 0
    for index, item in enumerate(values):
        if item < values[min_index]:
            min_index = index
        if not item < values[max_index]:
            max_index = index
    return min_index, max_index


def clamp(value: T, low: T, high: T) -> T:
    """Return ``value`` limited to the inclusive range from ``low`` to ``high``."""
    if high < low:  # type: ignore[operator]
        raise ValueError("upper bound is below lower bound")
    if value < low:  # type: ignore[operator]
        return low
    if high < value:  # type: ignore[operator]
        return high
    return value


def count_equal_range(values: Sequence[Any], elem: Any) -> int:
    """Count items equal to ``elem`` in a sorted sequence by binary search."""
    if any(later < earlier for earlier, later in pairwise(values)):
        raise ValueError("Container is not sorted!")
    return bisect_right(values, elem) - bisect_left(values, elem)


class Grid:
    """A rectangular grid of integers stored row by row."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        self.width = width
        self.height = height
        self._cells: list[int] = [0] * (width * height)

    def _row_bounds(self, i: int) -> tuple[int, int]:
        if not 0 <= i < self.height:
            raise IndexError(f"row {i} out of range")
        start = self.width * i
        return start, start + self.width

    def data(self) -> list[int]:
        """Return all cells, row by row."""
        return list(self._cells)

    def row(self, i: int) -> list[int]:
        """Return the cells of row ``i``."""
        start, stop = self._row_bounds(i)
        return self._cells[start:stop]

    def fill(self, value: int) -> None:
        """Set every cell to ``value``."""
        self._cells = [value] * len(self._cells)

    def fill_row(self, i: int, value: int) -> None:
        """Set every cell of row ``i`` to ``value``."""
        start, stop = self._row_bounds(i)
        self._cells[start:stop] = [value] * self.width

    def iota(self, start: int) -> None:
        """Number the cells consecutively from ``start``, row by row."""
        self._cells = list(range(start, start + len(self._cells)))

    def count(self, value: int) -> int:
        """Return how many cells hold ``value``."""
        return self._cells.count(value)

    def format(self) -> str:
        """Return the grid as text, one line per row, each cell tagged with its position."""
        return "".join(
            "".join(f"[{i}:{j}] {cell:2}  " for j, cell in enumerate(self.row(i))) + "\n"
            for i in range(self.height)
        )