"""Enum exercise: a state machine driven by messages."""

from __future__ import annotations

from dataclasses import dataclass


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..=255, got {value}")


@dataclass(frozen=True)
class Point:
    """A position with byte-sized coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_byte("x", self.x)
        _check_byte("y", self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour to an RGB triple."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            _check_byte(name, getattr(self, name))


@dataclass(frozen=True)
class Echo:
    """Replace the stored message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Mark the state as quit."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """State updated by processing messages."""

    color: tuple[int, int, int]
    position: Point
    quit: bool
    message: str

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def echo(self, s: str) -> None:
        self.message = s

    def move_position(self, p: Point) -> None:
        self.position = p

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=r, green=g, blue=b):
                self.change_color((r, g, b))
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")