"""Error-handling exercises: name tags, costs and positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


class _IntParseError(ValueError):
    """Text is not a valid integer of the required width."""


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly: optional sign, ASCII digits, no spaces."""
    if not text:
        raise _IntParseError("cannot parse integer from empty string")
    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise _IntParseError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if value > high:
        raise _IntParseError("number too large to fit in target type")
    if value < low:
        raise _IntParseError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name-tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the token cost of the typed quantity of items.

    Raises ValueError when the quantity is not a 32-bit integer.
    """
    qty = _parse_int(item_quantity, 32)
    cost = qty * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in 32 bits")
    return cost


class CreationError(ValueError):
    """A value cannot become a positive nonzero integer."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: CreationError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"CreationError({self.kind.name})"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing text into a positive nonzero integer failed.

    ``error`` holds the underlying failure: a CreationError, or a
    ValueError from parsing the integer.
    """

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        return type(self.error) is type(other.error) and (
            self.error == other.error or str(self.error) == str(other.error)
        )

    def __hash__(self) -> int:
        return hash((type(self.error), str(self.error)))


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and check that it is positive and nonzero."""
    try:
        value = _parse_int(s, 64)
    except _IntParseError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc