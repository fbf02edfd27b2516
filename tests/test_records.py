from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from golfcup.models import HoleInfo, MatchFormat, Team
from golfcup.records import (
    DataIntegrityError,
    load_snapshot,
    parse_course,
    parse_match,
    parse_player,
    parse_score,
)


def _par_data() -> Dict[str, Any]:
    return {f"hole_{hole}": {"par": 4, "handicap": hole} for hole in range(1, 19)}


def test_parse_player_defaults_null_handicaps() -> None:
    player = parse_player(
        {"id": 7, "name": "Alice Ace", "team": "Shaft", "playing_handicap": None, "avatar": "x.png"}
    )
    assert player.id == "7"
    assert player.team is Team.SHAFT
    assert player.playing_handicap == 0.0
    assert player.display_name == "Alice Ace"


def test_parse_player_rejects_unknown_team() -> None:
    with pytest.raises(DataIntegrityError):
        parse_player({"id": "p1", "name": "Alice", "team": "Putters"})


def test_parse_course_reads_par_data() -> None:
    data = _par_data()
    data["hole_3"] = {"par": 3, "handicap": 3}
    course = parse_course({"id": "c1", "name": "Links", "day": 2, "par_data": data})
    assert course.hole(3) == HoleInfo(par=3, stroke_index=3)
    assert course.total_par == 71


def test_parse_course_requires_par_data() -> None:
    with pytest.raises(DataIntegrityError, match="par_data"):
        parse_course({"id": "c1", "name": "Links", "day": 1})


def test_parse_course_rejects_duplicate_stroke_indexes() -> None:
    data = _par_data()
    data["hole_2"] = {"par": 4, "handicap": 1}
    with pytest.raises(DataIntegrityError, match="distinct"):
        parse_course({"id": "c1", "day": 1, "par_data": data})


def test_parse_course_allows_partial_layouts() -> None:
    course = parse_course({"id": "c1", "day": 1, "par_data": {"hole_1": {"par": 5, "handicap": 2}}})
    assert course.hole(1).par == 5
    assert course.hole(2) == HoleInfo(par=4, stroke_index=1)


def test_parse_match_and_score() -> None:
    match = parse_match(
        {
            "id": "m1",
            "day": 1,
            "format": "Best Ball",
            "team1_players": ["p1", "p2"],
            "team2_players": None,
            "scores_locked": True,
        }
    )
    assert match.format is MatchFormat.BEST_BALL
    assert match.team2_players == ()
    assert match.scores_locked is True

    score = parse_score({"match_id": "m1", "player_id": "p1", "hole_number": 18, "gross_score": None})
    assert score.played is False
    with pytest.raises(DataIntegrityError):
        parse_score({"match_id": "m1", "player_id": "p1", "hole_number": 19, "gross_score": 4})


def test_parse_match_rejects_unknown_format() -> None:
    with pytest.raises(DataIntegrityError, match="Scramble"):
        parse_match({"id": "m1", "day": 1, "format": "Scramble"})


def test_load_snapshot(tmp_path: Path) -> None:
    payload = {
        "players": [{"id": "p1", "name": "Alice", "team": "Balls", "playing_handicap": 4}],
        "courses": [{"id": "c1", "name": "Links", "day": 1, "par_data": _par_data()}],
        "matches": [
            {"id": "m1", "day": 1, "format": "Individual", "team1_players": ["p1"], "team2_players": []}
        ],
        "scores": [{"match_id": "m1", "player_id": "p1", "hole_number": 1, "gross_score": 5}],
    }
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    snapshot = load_snapshot(path)
    assert snapshot.players[0].playing_handicap == 4.0
    assert snapshot.course_for_day(1) is snapshot.courses[0]
    assert snapshot.course_for(snapshot.matches[0]) is snapshot.courses[0]
    assert snapshot.scores_for_day(1) == snapshot.scores
    assert snapshot.scores_for_day(2) == ()
    assert snapshot.match("missing") is None


def test_load_snapshot_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "snapshot.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(DataIntegrityError):
        load_snapshot(path)
