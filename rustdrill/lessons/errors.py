"""Error handling: validated names, parsed quantities and positive integers."""

from __future__ import annotations

from dataclasses import dataclass

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` width with strict digit rules."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or any(c not in "0123456789" for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Nametag text for a non-empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed-in quantity, including the processing fee."""
    qty = _parse_int(item_quantity, 32)
    cost = qty * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in 32 bits")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value that cannot become a positive non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"
    _DESCRIPTIONS = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, kind: str) -> None:
        if kind not in self._DESCRIPTIONS:
            raise ValueError(f"unknown creation error kind {kind!r}")
        super().__init__(self._DESCRIPTIONS[kind])
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        if value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if value == 0:
            raise CreationError(CreationError.ZERO)
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Parsing failed, either as an integer or as a positive value."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse ``text`` as a 64-bit integer and require it to be positive."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc