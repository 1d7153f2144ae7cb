"""Struct exercises: colours, orders built from a template and packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..=255, got {value}")


@dataclass(frozen=True)
class ColorClassicStruct:
    """An RGB colour with named fields."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            _check_byte(name, getattr(self, name))


class _Rgb(NamedTuple):
    red: int
    green: int
    blue: int


class ColorTupleStruct(_Rgb):
    """An RGB colour addressed by position."""

    __slots__ = ()

    def __new__(cls, red: int, green: int, blue: int) -> ColorTupleStruct:
        for name, value in (("red", red), ("green", green), ("blue", blue)):
            _check_byte(name, value)
        return super().__new__(cls, red, green, blue)


@dataclass(frozen=True, repr=False)
class UnitLikeStruct:
    """A value that carries no data."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order that new orders are based on."""
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
    """A package to ship; it must weigh at least 10 grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < 10:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """Return True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Return the shipping fee in cents."""
        return self.weight_in_grams * cents_per_gram