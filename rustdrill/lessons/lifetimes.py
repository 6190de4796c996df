"""Choosing between borrowed strings and a book that refers to its parts."""

from __future__ import annotations

from dataclasses import dataclass


def longest(x: str, y: str) -> str:
    """The longer string by UTF-8 byte length; ``y`` on a tie."""
    if len(x.encode("utf-8")) > len(y.encode("utf-8")):
        return x
    return y


@dataclass(frozen=True)
class Book:
    author: str
    title: str

    def describe(self) -> str:
        return f"{self.title} by {self.author}"