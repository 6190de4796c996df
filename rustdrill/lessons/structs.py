"""Plain records and a package with shipping logic."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ColorClassicStruct:
    red: int
    green: int
    blue: int


@dataclass
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """An order template for Bob's e-mailed order of item 123."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package with a positive weight sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram