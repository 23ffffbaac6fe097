"""Loose coupling: a switch that drives anything that can be turned on and off."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class Switchable(ABC):
    """Something a switch can turn on and off."""

    @abstractmethod
    def on(self) -> None:
        """Turn the device on."""

    @abstractmethod
    def off(self) -> None:
        """Turn the device off."""


class Lamp(Switchable):
    """A lamp that reports its state changes to a text stream."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def _write(self, message: str) -> None:
        print(message, file=self._out if self._out is not None else sys.stdout)

    def on(self) -> None:
        self._write("On")

    def off(self) -> None:
        self._write("Off")


class Switch:
    """A toggle switch that starts in the off position."""

    def __init__(self, switchable: Switchable) -> None:
        self._switchable = switchable
        self._state = False

    def toggle(self) -> None:
        """Flip the state and tell the attached device."""
        if self._state:
            self._state = False
            self._switchable.off()
        else:
            self._state = True
            self._switchable.on()

    @property
    def is_on(self) -> bool:
        """Whether the switch is currently on."""
        return self._state