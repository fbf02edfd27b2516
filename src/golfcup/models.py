"""Typed records consumed and produced by the scoring engine."""

from __future__ import annotations

import dataclasses
import enum
from typing import Literal, Mapping, Sequence

HOLES = tuple(range(1, 19))
FRONT_NINE = tuple(range(1, 10))
BACK_NINE = tuple(range(10, 19))

HoleWinner = Literal["side1", "side2", "tie", "none"]
MatchStatus = Literal["upcoming", "in_progress", "completed"]


class Team(str, enum.Enum):
    """The two tournament teams."""

    SHAFT = "Shaft"
    BALLS = "Balls"


class MatchFormat(str, enum.Enum):
    """Match formats, one per tournament day."""

    BEST_BALL = "Best Ball"
    STABLEFORD = "Stableford"
    INDIVIDUAL = "Individual"

    @classmethod
    def parse(cls, value: "str | MatchFormat") -> "MatchFormat":
        if isinstance(value, MatchFormat):
            return value
        key = str(value).strip().lower().replace("_", " ").replace("-", " ")
        for member in cls:
            if member.value.lower() == key:
                return member
        raise ValueError(f"Unknown match format: {value!r}")


@dataclasses.dataclass(frozen=True)
class Player:
    """Tournament participant with a precomputed playing handicap."""

    id: str
    name: str
    team: Team
    raw_handicap: float = 0.0
    playing_handicap: float = 0.0
    first_name: str | None = None
    last_name: str | None = None

    @property
    def display_name(self) -> str:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.name


@dataclasses.dataclass(frozen=True)
class HoleInfo:
    par: int
    stroke_index: int


PLACEHOLDER_HOLE = HoleInfo(par=4, stroke_index=1)


@dataclasses.dataclass(frozen=True)
class Course:
    """Per-day course layout keyed by hole number (1-18)."""

    id: str
    name: str
    day: int
    holes: Mapping[int, HoleInfo] = dataclasses.field(default_factory=dict)
    tees: str | None = None
    placeholder: HoleInfo = PLACEHOLDER_HOLE

    def hole(self, number: int) -> HoleInfo:
        """Return hole data, falling back to ``placeholder`` (par 4, stroke index 1)."""

        return self.holes.get(number, self.placeholder)

    @property
    def total_par(self) -> int:
        return sum(self.hole(number).par for number in HOLES)

    def holes_by_difficulty(self) -> list[int]:
        """Hole numbers ordered hardest first (stroke index, then hole number)."""

        return sorted(HOLES, key=lambda number: (self.hole(number).stroke_index, number))


@dataclasses.dataclass(frozen=True)
class Match:
    id: str
    day: int
    format: MatchFormat
    team1_players: Sequence[str]
    team2_players: Sequence[str]
    course_id: str | None = None
    group_number: int | None = None
    scores_locked: bool = False


@dataclasses.dataclass(frozen=True)
class Score:
    match_id: str
    player_id: str
    hole_number: int
    gross_score: int | None = None

    @property
    def played(self) -> bool:
        return self.gross_score is not None and self.gross_score > 0


@dataclasses.dataclass(frozen=True)
class PairResult:
    """Individual-format head-to-head between ``team1_players[i]`` and ``team2_players[i]``."""

    player1_id: str
    player2_id: str
    player1_front: float
    player1_back: float
    player1_total: float
    player2_front: float
    player2_back: float
    player2_total: float


@dataclasses.dataclass(frozen=True)
class MatchResult:
    """Derived three-point result for a match (front, back and overall)."""

    match_id: str
    team1_front: float
    team1_back: float
    team1_total: float
    team2_front: float
    team2_back: float
    team2_total: float
    status: MatchStatus
    holes: tuple[HoleWinner, ...] = ()
    pairs: tuple[PairResult, ...] = ()


@dataclasses.dataclass(frozen=True)
class SkinResult:
    hole: int
    par: int
    gross_winner: Player | None = None
    gross_score: int | None = None
    gross_tie: bool = False
    net_winner: Player | None = None
    net_score: int | None = None
    net_tie: bool = False


def resolve_roster(roster: Sequence[str], players: Sequence[Player]) -> list[Player]:
    """Resolve roster entries (ids or names) to players, keeping roster order.

    Entries that match no player are dropped.
    """

    by_id = {player.id: player for player in players}
    by_name = {player.name: player for player in players}
    resolved: list[Player] = []
    for entry in roster:
        player = by_id.get(entry) or by_name.get(entry)
        if player is not None:
            resolved.append(player)
    return resolved


def gross_lookup(scores: Sequence[Score], match_id: str | None = None) -> dict[tuple[str, int], int]:
    """Index played gross scores by ``(player_id, hole_number)``.

    When ``match_id`` is given only that match's scores are indexed.
    """

    lookup: dict[tuple[str, int], int] = {}
    for score in scores:
        if match_id is not None and score.match_id != match_id:
            continue
        if score.played:
            lookup[(score.player_id, score.hole_number)] = int(score.gross_score or 0)
    return lookup


__all__ = [
    "BACK_NINE",
    "Course",
    "FRONT_NINE",
    "HOLES",
    "HoleInfo",
    "HoleWinner",
    "Match",
    "MatchFormat",
    "MatchResult",
    "MatchStatus",
    "PLACEHOLDER_HOLE",
    "PairResult",
    "Player",
    "Score",
    "SkinResult",
    "Team",
    "gross_lookup",
    "resolve_roster",
]
