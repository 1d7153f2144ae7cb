"""Quiz exercises: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(apples: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return apples if apples > 40 else apples * 2


@dataclass(frozen=True)
class Uppercase:
    """Turn the string to upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends."""


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


Command = Uppercase | Trim | Append


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
        case _:
            raise TypeError(f"unknown command: {command!r}")


def transformer(items: list[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard(Generic[T]):
    """A report card whose grade may be numeric or alphabetic."""

    grade: T
    student_name: str
    student_age: int

    def __str__(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )