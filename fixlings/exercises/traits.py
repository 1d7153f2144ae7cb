"""Generics and trait exercises: a wrapper, appending "Bar" and licensing info."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@singledispatch
def append_bar(value: object) -> object:
    """Return the value with "Bar" appended."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_str(value: str) -> str:
    return value + "Bar"


@append_bar.register(list)
def _append_bar_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Mixin giving every licensed product the same licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int | None = None


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True when both products carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()