"""Basic exercises: functions, conditionals and a validated rectangle."""

from __future__ import annotations

from dataclasses import dataclass

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def is_even(num: int) -> bool:
    """Return True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return num squared."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Return where the animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive sides."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")