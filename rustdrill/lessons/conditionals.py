"""Simple conditionals."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar", anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    return num % 2 == 0