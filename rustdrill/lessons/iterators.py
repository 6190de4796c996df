"""Iterators: capitalising words, exact division, factorials and counting."""

from __future__ import annotations

from enum import Enum, auto
from math import prod
from typing import Iterable, Mapping, Sequence

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


class Progress(Enum):
    """How far an exercise has got."""

    NONE = auto()
    SOME = auto()
    COMPLETE = auto()


def capitalize_first(text: str) -> str:
    """Upper-case the first character of ``text``."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them without separators."""
    return "".join(capitalize_first(word) for word in words)


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when the division is exact."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def result_with_list() -> list[int]:
    """Divide the sample numbers by 27, raising at the first failure."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide the sample numbers by 27, keeping each failure in place."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, _DIVISOR))
        except DivisionError as exc:
            results.append(exc)
    return results


def factorial(num: int) -> int:
    """Factorial of an unsigned 64-bit number, refusing to overflow."""
    if not 0 <= num <= _U64_MAX:
        raise ValueError(f"{num} is not an unsigned 64-bit integer")
    result = prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! overflows 64 bits")
    return result


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps, with explicit loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)