"""Validation of raw store rows into typed records.

Rows arrive as loosely shaped mappings (the hosted database returns JSON).
They are checked here, once, before anything reaches the scoring core; a
malformed row raises :class:`DataIntegrityError` instead of being silently
scored with defaults.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import Course, HoleInfo, Match, MatchFormat, Player, Score, Team

logger = logging.getLogger(__name__)

_HOLE_KEY = re.compile(r"^hole_(\d{1,2})$")


class DataIntegrityError(ValueError):
    """Raised when stored data does not have the shape the scoring core needs."""


class _Row(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class PlayerRow(_Row):
    id: str
    name: str
    team: Team
    raw_handicap: float = 0.0
    playing_handicap: float = 0.0
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("raw_handicap", "playing_handicap", mode="before")
    @classmethod
    def _null_handicap(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    def to_player(self) -> Player:
        return Player(**self.model_dump())


class HoleRow(_Row):
    par: int = Field(ge=3, le=6)
    handicap: int = Field(ge=1, le=18)


class CourseRow(_Row):
    id: str
    name: str = ""
    day: int = Field(ge=1, le=3)
    tees: str | None = None
    par_data: Dict[str, Any]

    def to_course(self) -> Course:
        holes: Dict[int, HoleInfo] = {}
        for key, value in self.par_data.items():
            matched = _HOLE_KEY.match(key)
            if not matched:
                continue
            number = int(matched.group(1))
            if not 1 <= number <= 18:
                raise DataIntegrityError(f"course {self.id}: hole key {key!r} out of range")
            try:
                hole = HoleRow.model_validate(value)
            except ValidationError as exc:
                raise DataIntegrityError(f"course {self.id}: invalid {key}: {exc}") from exc
            holes[number] = HoleInfo(par=hole.par, stroke_index=hole.handicap)
        indexes = [hole.stroke_index for hole in holes.values()]
        if len(indexes) != len(set(indexes)):
            raise DataIntegrityError(f"course {self.id}: stroke indexes are not distinct")
        if len(holes) < 18:
            logger.debug("Course %s defines %d of 18 holes", self.id, len(holes))
        return Course(id=self.id, name=self.name, day=self.day, holes=holes, tees=self.tees)


class MatchRow(_Row):
    id: str
    day: int = Field(ge=1, le=3)
    format: str
    team1_players: List[str] = Field(default_factory=list)
    team2_players: List[str] = Field(default_factory=list)
    course_id: str | None = None
    group_number: int | None = None
    scores_locked: bool = False

    @field_validator("team1_players", "team2_players", mode="before")
    @classmethod
    def _null_roster(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_match(self) -> Match:
        try:
            match_format = MatchFormat.parse(self.format)
        except ValueError as exc:
            raise DataIntegrityError(f"match {self.id}: {exc}") from exc
        return Match(
            id=self.id,
            day=self.day,
            format=match_format,
            team1_players=tuple(self.team1_players),
            team2_players=tuple(self.team2_players),
            course_id=self.course_id,
            group_number=self.group_number,
            scores_locked=self.scores_locked,
        )


class ScoreRow(_Row):
    match_id: str
    player_id: str
    hole_number: int = Field(ge=1, le=18)
    gross_score: int | None = None

    def to_score(self) -> Score:
        return Score(**self.model_dump())


def _parse(model: type[BaseModel], row: Mapping[str, Any], kind: str) -> Any:
    try:
        return model.model_validate(row)
    except ValidationError as exc:
        raise DataIntegrityError(f"invalid {kind} row: {exc}") from exc


def parse_player(row: Mapping[str, Any]) -> Player:
    return _parse(PlayerRow, row, "player").to_player()


def parse_course(row: Mapping[str, Any]) -> Course:
    return _parse(CourseRow, row, "course").to_course()


def parse_match(row: Mapping[str, Any]) -> Match:
    return _parse(MatchRow, row, "match").to_match()


def parse_score(row: Mapping[str, Any]) -> Score:
    return _parse(ScoreRow, row, "score").to_score()


@dataclasses.dataclass(frozen=True)
class Snapshot:
    """A consistent read of the tournament tables."""

    players: tuple[Player, ...] = ()
    courses: tuple[Course, ...] = ()
    matches: tuple[Match, ...] = ()
    scores: tuple[Score, ...] = ()

    def course_for_day(self, day: int) -> Course | None:
        return next((course for course in self.courses if course.day == day), None)

    def course_for(self, match: Match) -> Course | None:
        if match.course_id is not None:
            for course in self.courses:
                if course.id == match.course_id:
                    return course
        return self.course_for_day(match.day)

    def matches_for_day(self, day: int) -> tuple[Match, ...]:
        return tuple(match for match in self.matches if match.day == day)

    def scores_for_day(self, day: int) -> tuple[Score, ...]:
        match_ids = {match.id for match in self.matches_for_day(day)}
        return tuple(score for score in self.scores if score.match_id in match_ids)

    def match(self, match_id: str) -> Match | None:
        return next((match for match in self.matches if match.id == match_id), None)


def parse_snapshot(payload: Mapping[str, Sequence[Mapping[str, Any]]]) -> Snapshot:
    """Validate every table of a snapshot payload."""

    return Snapshot(
        players=tuple(parse_player(row) for row in payload.get("players", ())),
        courses=tuple(parse_course(row) for row in payload.get("courses", ())),
        matches=tuple(parse_match(row) for row in payload.get("matches", ())),
        scores=tuple(parse_score(row) for row in payload.get("scores", ())),
    )


def load_snapshot(path: str | os.PathLike[str]) -> Snapshot:
    """Read and validate a JSON snapshot file."""

    source = Path(path)
    with source.open("r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise DataIntegrityError(f"{source} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise DataIntegrityError(f"{source} must contain a JSON object")
    snapshot = parse_snapshot(payload)
    logger.debug(
        "Loaded snapshot %s: %d players, %d matches, %d scores",
        source,
        len(snapshot.players),
        len(snapshot.matches),
        len(snapshot.scores),
    )
    return snapshot


__all__ = [
    "CourseRow",
    "DataIntegrityError",
    "MatchRow",
    "PlayerRow",
    "ScoreRow",
    "Snapshot",
    "load_snapshot",
    "parse_course",
    "parse_match",
    "parse_player",
    "parse_score",
    "parse_snapshot",
]
