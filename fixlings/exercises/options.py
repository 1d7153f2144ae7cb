"""Option exercise: how much ice cream is left at a given hour."""

from __future__ import annotations

_U16_MAX = 0xFFFF


def maybe_icecream(time_of_day: int) -> int | None:
    """Return the pieces left at the hour (0-23), or None for an invalid hour.

    There are 5 pieces before 22:00 and none from 22:00 on.
    """
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"time_of_day must be in 0..={_U16_MAX}, got {time_of_day}")
    if time_of_day < 22:
        return 5
    if time_of_day > 23:
        return None
    return 0