"""Plutonian pebbles: stones that change every time you blink.

Each blink applies the first matching rule to every pebble:

* a pebble engraved with 0 becomes 1;
* a pebble with an even number of digits splits into its left and right
  halves of digits;
* any other pebble is multiplied by 2024.
"""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path
from typing import Sequence

DEFAULT_DATA_FILE = "./Data/Puzzle11_RealData.txt"
TEST_DATA_FILE = "./Data/Puzzle11_TestData.txt"

_DEFAULT_BLINKS = {1: 25, 2: 75}
_MAX_SPLIT_DIGITS = 20


def split_pebble(pebble: int) -> tuple[int, int]:
    """Split the decimal digits of ``pebble`` into a left and a right half."""
    text = str(pebble)
    half = len(text) // 2
    return int(text[:half] or "0"), int(text[half:])


def _count_digits(pebble: int) -> int:
    digits = 0
    while pebble != 0:
        pebble //= 10
        digits += 1
    return digits


def has_even_digits(pebble: int) -> bool:
    """Return True if ``pebble`` has an even number of digits (zero counts as none)."""
    return _count_digits(pebble) % 2 == 0


def has_even_digits_ex(pebble: int) -> tuple[bool, int]:
    """Return whether the digit count is even, together with the digit count."""
    digits = _count_digits(pebble)
    return digits % 2 == 0, digits


def split_pebble_ex(pebble: int, num_digits: int) -> tuple[int, int]:
    """Split a pebble of ``num_digits`` digits arithmetically.

    Only even digit counts from 2 to 18 are split; anything else gives ``(0, 0)``.
    """
    if num_digits % 2 != 0 or not 2 <= num_digits <= 18:
        return 0, 0
    return divmod(pebble, 10 ** (num_digits // 2))


def split_pebble_ex_ex(pebble: int, num_digits: int) -> tuple[int, int]:
    """Divide ``pebble`` by ``10 ** (num_digits // 2 - 1)``, giving quotient and remainder.

    ``num_digits`` must be even and between 2 and 20.
    """
    if num_digits % 2 != 0 or not 2 <= num_digits <= _MAX_SPLIT_DIGITS:
        raise ValueError(f"unsupported digit count: {num_digits}")
    return divmod(pebble, 10 ** (num_digits // 2 - 1))


def _next_pebbles(pebble: int) -> tuple[int, ...]:
    if pebble == 0:
        return (1,)
    if has_even_digits(pebble):
        return split_pebble(pebble)
    return (pebble * 2024,)


def _parse_line(line: str) -> list[int]:
    pebbles = []
    for token in line.split():
        if not token.isdigit():
            raise ValueError(f"not a pebble number: {token!r}")
        pebbles.append(int(token))
    return pebbles


class PlutonianPebbles(ABC):
    """A row of pebbles that evolves each time you blink."""

    def read_puzzle_from_file(self, filename: str | Path) -> None:
        """Add the pebbles listed on the first line of ``filename``."""
        with open(filename, encoding="utf-8") as file:
            self.load(file.readline())

    @abstractmethod
    def load(self, line: str) -> None:
        """Add the whitespace-separated pebbles in ``line``."""

    @abstractmethod
    def blink(self) -> None:
        """Apply the rules once to every pebble."""

    def blinking(self, count: int) -> None:
        """Blink ``count`` times, reporting each blink."""
        for i in range(1, count + 1):
            print(f"{i} blinking ...")
            self.blink()

    @abstractmethod
    def size(self) -> int:
        """Return the number of pebbles."""

    @abstractmethod
    def format_pebbles(self) -> str:
        """Return the pebbles as text."""


class PebbleList(PlutonianPebbles):
    """Keeps every pebble in order; simple but memory-hungry."""

    def __init__(self) -> None:
        self._pebbles: list[int] = []

    def load(self, line: str) -> None:
        self._pebbles.extend(_parse_line(line))

    def blink(self) -> None:
        self._pebbles = [new for pebble in self._pebbles for new in _next_pebbles(pebble)]

    def size(self) -> int:
        return len(self._pebbles)

    def format_pebbles(self) -> str:
        return " ".join(str(pebble) for pebble in self._pebbles)


class PebbleCounter(PlutonianPebbles):
    """Counts how many pebbles carry each number; order is not kept."""

    def __init__(self) -> None:
        self._counts: Counter[int] = Counter()

    def load(self, line: str) -> None:
        self._counts.update(_parse_line(line))

    def blink(self) -> None:
        counts: Counter[int] = Counter()
        for pebble, count in self._counts.items():
            for new in _next_pebbles(pebble):
                counts[new] += count
        self._counts = counts

    def size(self) -> int:
        return sum(self._counts.values())

    def format_pebbles(self) -> str:
        return " ".join(
            f"{pebble} [{count}]" for pebble, count in sorted(self._counts.items()) if count
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Load pebbles from a file, blink, and print the pebble count."""
    parser = argparse.ArgumentParser(description="Count Plutonian pebbles after blinking.")
    parser.add_argument("filename", nargs="?", default=DEFAULT_DATA_FILE)
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=1,
        help="1: keep every pebble, 2: count pebbles by number",
    )
    parser.add_argument("--blinks", type=int, default=None, help="number of blinks")
    args = parser.parse_args(argv)

    pebbles: PlutonianPebbles = PebbleList() if args.part == 1 else PebbleCounter()
    blinks = args.blinks if args.blinks is not None else _DEFAULT_BLINKS[args.part]

    try:
        pebbles.read_puzzle_from_file(args.filename)
    except OSError:
        print(f"Unable to open file {args.filename} !", file=sys.stderr)
        return 1

    print(pebbles.format_pebbles())
    print(f"Size: {pebbles.size()}")
    pebbles.blinking(blinks)
    print(f"Size: {pebbles.size()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())