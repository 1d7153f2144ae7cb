"""Iterator exercises: capitalising, dividing, factorials and counting progress."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping, Sequence

_U64_MAX = (1 << 64) - 1
_NUMBERS = (27, 297, 38502, 81)


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division could not produce a whole result."""


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

    def __repr__(self) -> str:
        return f"NotDivisibleError(dividend={self.dividend}, divisor={self.divisor})"


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

    def __repr__(self) -> str:
        return "DivideByZeroError()"


def divide(a: int, b: int) -> int:
    """Return a / b when a is a whole multiple of b; raise DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide each number by 27; the first failure is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each quotient or error in place."""
    return [_try_divide(n, 27) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Return num! for a non-negative num whose factorial fits in 64 bits."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    """How far an exercise has been worked through."""

    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using a plain loop."""
    count = 0
    for val in progress_map.values():
        if val is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for val in progress_map.values() if val is value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using plain loops."""
    count = 0
    for progress_map in collection:
        for val in progress_map.values():
            if val is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across all maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)