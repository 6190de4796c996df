"""Dictionaries: fruit baskets and a football scores table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_U8_MAX = 255


class Fruit(Enum):
    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


@dataclass
class Team:
    """A team's name and the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 1, "watermelon": 3}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one piece of every kind of fruit not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def _parse_goals(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or any(c not in "0123456789" for c in digits):
        raise ValueError(f"invalid goal count {text!r}")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError(f"goal count {text!r} does not fit in 8 bits")
    return value


def _add_goals(team: Team, scored: int, conceded: int) -> None:
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError(f"goal totals of {team.name} do not fit in 8 bits")


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of ``team_1,team_2,goals_1,goals_2``."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        _add_goals(team_1, team_1_score, team_2_score)

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        _add_goals(team_2, team_2_score, team_1_score)
    return scores