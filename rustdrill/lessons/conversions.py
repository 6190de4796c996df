"""Conversions: parsing people from text and building colours from numbers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

_USIZE_MAX = 2**64 - 1


def _parse_usize(text: str) -> int:
    """Parse an unsigned 64-bit integer with strict digit rules."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or any(c not in "0123456789" for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class PersonErrorKind(Enum):
    """Why a text could not be parsed into a Person."""

    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """A text that is not of the form ``name,age``."""

    def __init__(self, kind: PersonErrorKind, cause: ValueError | None = None) -> None:
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.cause = cause


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse ``name,age``, raising ParsePersonError when it is malformed."""
        if not text:
            raise ParsePersonError(PersonErrorKind.EMPTY)
        chunks = text.split(",")
        if len(chunks) != 2:
            raise ParsePersonError(PersonErrorKind.BAD_LEN)
        name, age_text = chunks
        if not name:
            raise ParsePersonError(PersonErrorKind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as exc:
            raise ParsePersonError(PersonErrorKind.PARSE_INT, exc) from exc
        return cls(name=name, age=age)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Parse ``name,age``, falling back to the default person on any error."""
        try:
            return cls.parse(text)
        except ParsePersonError:
            return cls.default()


class IntoColorError(ValueError):
    """A sequence that cannot become a Color."""

    BAD_LEN = "bad_len"
    INT_CONVERSION = "int_conversion"
    _DESCRIPTIONS = {
        BAD_LEN: "incorrect number of components",
        INT_CONVERSION: "component outside 0..=255",
    }

    def __init__(self, kind: str) -> None:
        if kind not in self._DESCRIPTIONS:
            raise ValueError(f"unknown colour error kind {kind!r}")
        super().__init__(self._DESCRIPTIONS[kind])
        self.kind = kind


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, value: Sequence[int]) -> Color:
        """Build a colour from three integers in 0..=255."""
        components = tuple(value)
        if len(components) != 3:
            raise IntoColorError(IntoColorError.BAD_LEN)
        for component in components:
            if isinstance(component, bool) or not isinstance(component, int):
                raise TypeError(f"colour component {component!r} is not an integer")
            if not 0 <= component <= 255:
                raise IntoColorError(IntoColorError.INT_CONVERSION)
        red, green, blue = components
        return cls(red=red, green=green, blue=blue)