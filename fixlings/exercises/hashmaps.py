"""Dictionary exercises: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U8_MAX = 255
_U8_PATTERN = re.compile(r"\+?[0-9]+")


class Fruit(enum.Enum):
    """Kinds of fruit for the cake basket."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and five fruits in total."""
    return {"banana": 2, "apple": 2, "pitch": 2}


def complete_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _U8_PATTERN.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _add(team: Team, scored: int, conceded: int) -> None:
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError("goal total exceeds 255")


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from lines "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        _add(scores.setdefault(team_1_name, Team()), team_1_score, team_2_score)
        _add(scores.setdefault(team_2_name, Team()), team_2_score, team_1_score)
    return scores