"""Handicap side game: beat ``36 - handicap`` points on gross scores.

Players earn 16/8/4/2/1/0 points per hole for double eagle, eagle, birdie,
par, bogey and worse. Anyone reaching their target is eligible to win and
eligible players rank by surplus ahead of everyone else.
"""

from __future__ import annotations

import dataclasses
import functools
from typing import Sequence

from .models import HOLES, Course, Match, Player, Score, gross_lookup, resolve_roster
from .points import side_game_points

BASE_POINTS = 36


@dataclasses.dataclass(frozen=True)
class SideGamePlayer:
    player_id: str
    name: str
    display_name: str
    playing_handicap: float
    target_points: float
    hole_points: tuple[int, ...]
    hole_gross: tuple[int | None, ...]
    total_points: int
    surplus: float
    eligible: bool
    birdies: int
    pars: int
    holes_played: int
    rank: int = 0


@dataclasses.dataclass(frozen=True)
class HandicapGameResult:
    players: tuple[SideGamePlayer, ...]
    day_complete: bool
    scores_entered: bool


def _score_player(
    player: Player,
    grosses: dict[tuple[str, int], int],
    course: Course,
    base_points: int,
) -> SideGamePlayer:
    target = base_points - player.playing_handicap
    points: list[int] = []
    gross_by_hole: list[int | None] = []
    birdies = pars = 0
    for hole in HOLES:
        gross = grosses.get((player.id, hole))
        gross_by_hole.append(gross)
        if gross is None:
            points.append(0)
            continue
        score_vs_par = gross - course.hole(hole).par
        points.append(side_game_points(score_vs_par))
        if score_vs_par == -1:
            birdies += 1
        elif score_vs_par == 0:
            pars += 1
    total = sum(points)
    return SideGamePlayer(
        player_id=player.id,
        name=player.name,
        display_name=player.display_name,
        playing_handicap=player.playing_handicap,
        target_points=target,
        hole_points=tuple(points),
        hole_gross=tuple(gross_by_hole),
        total_points=total,
        surplus=total - target,
        eligible=total >= target,
        birdies=birdies,
        pars=pars,
        holes_played=sum(1 for gross in gross_by_hole if gross is not None),
    )


def _compare(a: SideGamePlayer, b: SideGamePlayer, difficulty: Sequence[int]) -> int:
    if a.eligible != b.eligible:
        return -1 if a.eligible else 1
    if not a.eligible:
        return b.total_points - a.total_points
    if a.surplus != b.surplus:
        return -1 if a.surplus > b.surplus else 1
    for hole in difficulty:
        gross_a = a.hole_gross[hole - 1]
        gross_b = b.hole_gross[hole - 1]
        if gross_a == gross_b:
            continue
        # an unplayed hole loses to any played score
        if gross_a is None:
            return 1
        if gross_b is None:
            return -1
        return gross_a - gross_b
    if a.birdies != b.birdies:
        return b.birdies - a.birdies
    return b.pars - a.pars


def rank_side_game(players: Sequence[SideGamePlayer], course: Course) -> list[SideGamePlayer]:
    """Order players for the leaderboard and stamp 1-based ranks."""

    difficulty = course.holes_by_difficulty()
    ordered = sorted(players, key=functools.cmp_to_key(lambda a, b: _compare(a, b, difficulty)))
    return [dataclasses.replace(player, rank=index) for index, player in enumerate(ordered, start=1)]


def score_handicap_game(
    players: Sequence[Player],
    scores: Sequence[Score],
    course: Course,
    matches: Sequence[Match] = (),
    *,
    base_points: int = BASE_POINTS,
) -> HandicapGameResult:
    """Score the side game for a day.

    When ``matches`` are given only their rostered players take part and the
    day counts as complete once every match is locked; otherwise every
    player in ``players`` is scored.
    """

    if matches:
        match_ids = {match.id for match in matches}
        scores = [score for score in scores if score.match_id in match_ids]
        participants: list[Player] = []
        for match in matches:
            for player in resolve_roster([*match.team1_players, *match.team2_players], players):
                if player not in participants:
                    participants.append(player)
    else:
        participants = list(players)
    grosses = gross_lookup(scores)
    scored = [_score_player(player, grosses, course, base_points) for player in participants]
    return HandicapGameResult(
        players=tuple(rank_side_game(scored, course)),
        day_complete=bool(matches) and all(match.scores_locked for match in matches),
        scores_entered=bool(grosses),
    )


__all__ = [
    "BASE_POINTS",
    "HandicapGameResult",
    "SideGamePlayer",
    "rank_side_game",
    "score_handicap_game",
]
