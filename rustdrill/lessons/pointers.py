"""Shared and boxed values: thread sums, cons lists, copy-on-write and planets."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence

PLANET_NAMES = (
    "Mercury",
    "Venus",
    "Earth",
    "Mars",
    "Jupiter",
    "Saturn",
    "Uranus",
    "Neptune",
)


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum, in one thread per offset, the numbers whose value modulo ``workers`` is that offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_for(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_for, range(workers)))


@dataclass(frozen=True)
class Cons:
    """A cons cell; the empty list is ``None``."""

    value: int
    next: Cons | None = None


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons | None:
    return Cons(1, None)


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values; the input itself is returned when nothing changes."""
    if all(v >= 0 for v in values):
        return values
    return [abs(v) for v in values]


@dataclass(frozen=True)
class Sun:
    def __str__(self) -> str:
        return "Sun"


@dataclass(frozen=True)
class Planet:
    """A planet that shares the one sun with the others."""

    name: str
    sun: Sun

    def __post_init__(self) -> None:
        if self.name not in PLANET_NAMES:
            raise ValueError(f"unknown planet {self.name!r}")

    def details(self) -> str:
        """Print and return a greeting from the planet."""
        text = f"Hi from {self.name}({self.sun})!"
        print(text)
        return text