"""Counting statistics over many users, kept as whole records or as parallel lists."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Sequence

# Levels are drawn from 0 up to but not including this bound.
LEVEL_COUNT = 100


@dataclass
class AuthInfo:
    """Login details that are rarely needed, kept apart from the hot user data."""

    username: str = ""
    password: str = ""
    security_question: str = ""
    security_answer: str = ""


@dataclass
class User:
    """A player with a level and a flag telling whether they are playing."""

    name: str
    level: int = 0
    is_playing: bool = False
    auth_info: AuthInfo = field(default_factory=AuthInfo)


@dataclass
class ScoredObject:
    """An object carrying ``size`` bytes of payload and a score."""

    size: int = 4
    score: int = 0
    data: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must not be negative")
        self.data = bytes(self.size)


def sum_scores(objects: Iterable[ScoredObject]) -> int:
    """Return the sum of the scores of all objects."""
    return sum(obj.score for obj in objects)


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")


def _gen_level(rng: random.Random) -> int:
    return rng.randrange(LEVEL_COUNT)


def _gen_is_playing(rng: random.Random) -> bool:
    return bool(rng.randrange(2))


def create_users(count: int, rng: random.Random | None = None) -> list[User]:
    """Create ``count`` users with random levels and playing flags."""
    _check_count(count)
    rng = rng if rng is not None else random.Random()
    users = []
    for _ in range(count):
        level = _gen_level(rng)
        users.append(User("AnyName", level, _gen_is_playing(rng)))
    return users


def num_users_at_level(level: int, users: Iterable[User]) -> int:
    """Return how many users are at ``level``."""
    return sum(1 for user in users if user.level == level)


def num_playing_users(users: Iterable[User]) -> int:
    """Return how many users are playing."""
    return sum(1 for user in users if user.is_playing)


def create_levels(count: int, rng: random.Random | None = None) -> list[int]:
    """Create ``count`` random levels."""
    _check_count(count)
    rng = rng if rng is not None else random.Random()
    return [_gen_level(rng) for _ in range(count)]


def create_playing_users(count: int, rng: random.Random | None = None) -> list[bool]:
    """Create ``count`` random playing flags."""
    _check_count(count)
    rng = rng if rng is not None else random.Random()
    return [_gen_is_playing(rng) for _ in range(count)]


def count_level(levels: Sequence[int], level: int) -> int:
    """Return how many entries of ``levels`` equal ``level``."""
    return levels.count(level)


def count_playing(playing: Sequence[bool]) -> int:
    """Return how many entries of ``playing`` are true."""
    return sum(1 for flag in playing if flag)