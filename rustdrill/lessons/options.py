"""Optional values."""

from __future__ import annotations

from dataclasses import dataclass

_U16_MAX = 2**16 - 1


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of a 24-hour day; None past 24."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"{time_of_day} is not an unsigned 16-bit integer")
    if time_of_day > 24:
        return None
    if time_of_day < 22:
        return 5
    return 0


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def describe_point(point: Point | None) -> str:
    """Describe the co-ordinates of a point that may be missing."""
    match point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"