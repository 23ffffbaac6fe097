"""A value type usable as a dictionary key, with a combined field hash."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """A person identified by first name, last name and age."""

    first_name: str
    last_name: str
    age: int

    def __hash__(self) -> int:
        return hash(self.first_name) ^ (hash(self.age) << 1) ^ (hash(self.last_name) << 2)

    def __str__(self) -> str:
        return f"Person {self.first_name} {self.last_name} [Age: {self.age}]"