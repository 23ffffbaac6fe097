"""Strings carrying a precomputed hash, and a bitmap cache keyed by them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union


def hash_function(text: str) -> int:
    """Return the sum of the UTF-8 byte values of ``text``."""
    return sum(text.encode("utf-8"))


class PrehashedString:
    """An immutable string whose hash is computed once, when it is built."""

    __slots__ = ("_text", "_hash")

    def __init__(self, text: str) -> None:
        self._text = text
        self._hash = hash_function(text)

    def size(self) -> int:
        """Return the number of characters."""
        return len(self._text)

    def get_hash(self) -> int:
        """Return the precomputed hash."""
        return self._hash

    @property
    def text(self) -> str:
        """The string itself."""
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrehashedString):
            return NotImplemented
        return self.size() == other.size() and self._text == other._text

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"PrehashedString({self._text!r})"


@dataclass(frozen=True)
class Bitmap:
    """A bitmap loaded from ``path``."""

    path: str = ""


def load_bitmap_from_filesystem(path: str) -> Bitmap:
    """Load the bitmap stored at ``path``."""
    return Bitmap(path)


class BitmapCache:
    """Loads each bitmap once and hands out the same object afterwards."""

    def __init__(self, loader: Callable[[str], Bitmap] = load_bitmap_from_filesystem) -> None:
        self._loader = loader
        self._loaded: dict[PrehashedString, Bitmap] = {}

    def get(self, path: Union[PrehashedString, str]) -> Bitmap:
        """Return the bitmap for ``path``, loading it on first request."""
        key = path if isinstance(path, PrehashedString) else PrehashedString(path)
        bitmap = self._loaded.get(key)
        if bitmap is None:
            bitmap = self._loader(key.text)
            self._loaded[key] = bitmap
        return bitmap

    def __len__(self) -> int:
        return len(self._loaded)