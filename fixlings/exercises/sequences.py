"""Sequence exercises: lists, copies versus moves and a cons list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(v: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    v[:] = [element * 2 for element in v]
    return v


def vec_map(v: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in v]


def fill_vec(vec: list[int]) -> list[int]:
    """Return a copy of vec with 88 appended, leaving vec untouched."""
    return [*vec, 88]


def make_filled_vec() -> list[int]:
    """Create the filled list from scratch."""
    return [22, 44, 66, 88]


@dataclass(frozen=True)
class Cons:
    """A cell of a cons list; the list ends with None."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    """Return the empty cons list."""
    return None


def create_non_empty_list() -> Cons | None:
    """Return a cons list holding a few values."""
    return Cons(1, Cons(2, Cons(3)))