"""Small functions: ringing, sale prices, parity and squares."""

from __future__ import annotations

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MAX = 2**32 - 1


def _check_i32(value: int, what: str) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise OverflowError(f"{what} does not fit in a signed 32-bit integer")
    return value


def call_me(num: int) -> list[str]:
    """Print and return one ring message per call."""
    if not 0 <= num <= _U32_MAX:
        raise ValueError(f"{num} is not an unsigned 32-bit integer")
    lines = [f"Ring! Call number {i}" for i in range(1, num + 1)]
    for line in lines:
        print(line)
    return lines


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    discount = 10 if is_even(price) else 3
    return _check_i32(price - discount, "sale price")


def square(num: int) -> int:
    return _check_i32(num * num, "square")