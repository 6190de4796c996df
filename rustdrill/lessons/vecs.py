"""Arrays and growable lists."""

from __future__ import annotations


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    for index, value in enumerate(values):
        values[index] = value * 2
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]