"""Round aggregates, season statistics, MVP standings and the dream round."""

from __future__ import annotations

import collections
import dataclasses
import logging
from typing import Dict, Iterable, List, Mapping, Sequence

import polars as pl

from .handicap import hole_net_score
from .models import (
    HOLES,
    Course,
    Match,
    MatchFormat,
    Player,
    Score,
    gross_lookup,
    resolve_roster,
)
from .points import stableford_points

logger = logging.getLogger(__name__)

DISTRIBUTION_FIELDS = (
    "eagles",
    "birdies",
    "pars",
    "bogeys",
    "double_bogeys",
    "triple_bogeys_plus",
)


@dataclasses.dataclass(frozen=True)
class RoundAggregate:
    """Per-round record handed to the storage layer for season statistics."""

    player_id: str
    match_id: str
    day: int
    course_id: str
    playing_handicap: float
    gross_score: int
    net_score: int
    stableford_points: int
    strokes_to_handicap: float
    eagles: int
    birdies: int
    pars: int
    bogeys: int
    double_bogeys: int
    triple_bogeys_plus: int
    best_holes: tuple[int, ...]
    worst_holes: tuple[int, ...]

    def to_record(self) -> Dict[str, object]:
        record = dataclasses.asdict(self)
        record["best_holes"] = list(self.best_holes) or None
        record["worst_holes"] = list(self.worst_holes) or None
        return record


def _bucket(strokes_to_par: int) -> str:
    if strokes_to_par <= -2:
        return "eagles"
    if strokes_to_par == -1:
        return "birdies"
    if strokes_to_par == 0:
        return "pars"
    if strokes_to_par == 1:
        return "bogeys"
    if strokes_to_par == 2:
        return "double_bogeys"
    return "triple_bogeys_plus"


def round_aggregate(
    player: Player,
    scores: Sequence[Score],
    course: Course,
    *,
    match_id: str,
    day: int,
) -> RoundAggregate | None:
    """Summarise a completed round, or ``None`` while any hole is unplayed."""

    grosses = gross_lookup(scores, match_id)
    holes = [(hole, grosses[(player.id, hole)]) for hole in HOLES if (player.id, hole) in grosses]
    if len(holes) != len(HOLES):
        logger.debug(
            "Round for %s in match %s not complete: %d/18 holes", player.id, match_id, len(holes)
        )
        return None

    distribution = dict.fromkeys(DISTRIBUTION_FIELDS, 0)
    best: List[int] = []
    worst: List[int] = []
    gross_total = net_total = points = 0
    for hole, gross in holes:
        info = course.hole(hole)
        net = hole_net_score(gross, player.playing_handicap, info.stroke_index)
        gross_total += gross
        net_total += net
        points += stableford_points(net, info.par)
        strokes_to_par = gross - info.par
        distribution[_bucket(strokes_to_par)] += 1
        if strokes_to_par <= -1:
            best.append(hole)
        elif strokes_to_par >= 2:
            worst.append(hole)

    return RoundAggregate(
        player_id=player.id,
        match_id=match_id,
        day=day,
        course_id=course.id,
        playing_handicap=player.playing_handicap,
        gross_score=gross_total,
        net_score=net_total,
        stableford_points=points,
        strokes_to_handicap=gross_total - (course.total_par + player.playing_handicap),
        best_holes=tuple(best),
        worst_holes=tuple(worst),
        **distribution,
    )


def season_stats(aggregates: Iterable[RoundAggregate]) -> pl.DataFrame:
    """Per-player season summary built from round aggregates."""

    rows = [aggregate.to_record() for aggregate in aggregates]
    if not rows:
        return pl.DataFrame(
            schema={
                "player_id": pl.Utf8,
                "rounds_played": pl.UInt32,
                "scoring_average": pl.Float64,
                "net_scoring_average": pl.Float64,
                "best_round": pl.Int64,
                "worst_round": pl.Int64,
                "rounds_under_handicap": pl.Int64,
                **{name: pl.Int64 for name in DISTRIBUTION_FIELDS},
            }
        )
    frame = pl.DataFrame(rows).drop("best_holes", "worst_holes")
    return (
        frame.group_by("player_id")
        .agg(
            pl.len().alias("rounds_played"),
            pl.col("gross_score").mean().alias("scoring_average"),
            pl.col("net_score").mean().alias("net_scoring_average"),
            pl.col("gross_score").min().alias("best_round"),
            pl.col("gross_score").max().alias("worst_round"),
            (pl.col("strokes_to_handicap") < 0).sum().cast(pl.Int64).alias("rounds_under_handicap"),
            *[pl.col(name).sum().alias(name) for name in DISTRIBUTION_FIELDS],
        )
        .sort("player_id")
    )


@dataclasses.dataclass
class MvpEntry:
    player_id: str
    display_name: str
    team: str
    match_points: int = 0
    net_aggregate: int | None = None
    birdies: int = 0
    days_played: int = 0
    match_results: List[Dict[str, object]] = dataclasses.field(default_factory=list)


def _side_total(
    side: Sequence[Player],
    hole: int,
    course: Course,
    grosses: Mapping[tuple[str, int], int],
    stableford: bool,
) -> int:
    info = course.hole(hole)
    nets = [
        hole_net_score(grosses[(player.id, hole)], player.playing_handicap, info.stroke_index)
        for player in side
        if (player.id, hole) in grosses
    ]
    if stableford:
        return max((stableford_points(net, info.par) for net in nets), default=0)
    return min(nets)


def mvp_standings(
    matches: Sequence[Match],
    players: Sequence[Player],
    scores: Sequence[Score],
    courses: Mapping[int, Course],
) -> List[MvpEntry]:
    """Tournament MVP table.

    Each fully scored match awards 2/1/0 points for a win, draw or loss on
    the side's aggregate (best net per hole, or best Stableford points per
    hole on the Stableford day). Ties on points are broken by lower net
    aggregate, then by more birdies.
    """

    entries = {
        player.id: MvpEntry(player.id, player.display_name, player.team.value) for player in players
    }
    for match in matches:
        course = courses.get(match.day)
        if course is None:
            logger.debug("No course for day %s; skipping match %s", match.day, match.id)
            continue
        team1 = resolve_roster(match.team1_players, players)
        team2 = resolve_roster(match.team2_players, players)
        grosses = gross_lookup(scores, match.id)
        if not team1 or not team2 or not all(
            (player.id, hole) in grosses for player in (*team1, *team2) for hole in HOLES
        ):
            continue

        stableford = MatchFormat.parse(match.format) is MatchFormat.STABLEFORD
        total1 = sum(_side_total(team1, hole, course, grosses, stableford) for hole in HOLES)
        total2 = sum(_side_total(team2, hole, course, grosses, stableford) for hole in HOLES)
        if total1 == total2:
            points1 = points2 = 1
        elif (total1 > total2 if stableford else total1 < total2):
            points1, points2 = 2, 0
        else:
            points1, points2 = 0, 2

        for side, points, opponents in ((team1, points1, team2), (team2, points2, team1)):
            label = " & ".join(player.first_name or player.name.split(" ")[0] for player in opponents)
            for player in side:
                entry = entries[player.id]
                entry.match_points += points
                entry.days_played += 1
                entry.match_results.append({"day": match.day, "points": points, "opponent": label})
                net = 0
                for hole in HOLES:
                    info = course.hole(hole)
                    gross = grosses[(player.id, hole)]
                    net += hole_net_score(gross, player.playing_handicap, info.stroke_index)
                    if gross - info.par <= -1:
                        entry.birdies += 1
                entry.net_aggregate = (entry.net_aggregate or 0) + net

    def _key(entry: MvpEntry) -> tuple:
        missing = entry.net_aggregate is None
        return (-entry.match_points, missing, entry.net_aggregate or 0, -entry.birdies)

    return sorted(entries.values(), key=_key)


@dataclasses.dataclass(frozen=True)
class DreamHole:
    hole: int
    gross: int
    gross_player_id: str
    net: int
    net_player_id: str


@dataclasses.dataclass(frozen=True)
class PlayerDreamRound:
    player_id: str
    display_name: str
    gross: int
    net: int


@dataclasses.dataclass(frozen=True)
class DreamRound:
    """Best gross and net on every hole across all players and days."""

    gross: int
    net: int
    top_gross_contributor: str
    top_net_contributor: str
    holes: tuple[DreamHole, ...]
    players: tuple[PlayerDreamRound, ...]


def _course_for(match: Match, courses: Sequence[Course]) -> Course | None:
    if match.course_id is not None:
        for course in courses:
            if course.id == match.course_id:
                return course
    return next((course for course in courses if course.day == match.day), None)


def dream_round(
    players: Sequence[Player],
    matches: Sequence[Match],
    scores: Sequence[Score],
    courses: Sequence[Course],
) -> DreamRound | None:
    """Composite best round across the field plus each player's personal best.

    Every played score counts, whichever match or day it came from; the first
    score seen keeps a hole on a tie. Returns ``None`` until every hole has at
    least one score. Personal rounds are listed only for players with all 18
    holes, lowest gross first.
    """

    by_id = {player.id: player for player in players}
    best_gross: Dict[int, tuple[int, str]] = {}
    best_net: Dict[int, tuple[int, str]] = {}
    personal_gross: Dict[str, Dict[int, int]] = {}
    personal_net: Dict[str, Dict[int, int]] = {}

    for match in matches:
        course = _course_for(match, courses)
        if course is None:
            logger.debug("No course for match %s; left out of the dream round", match.id)
            continue
        for (player_id, hole), gross in gross_lookup(scores, match.id).items():
            player = by_id.get(player_id)
            if player is None:
                logger.debug("Unknown player %s in match %s", player_id, match.id)
                continue
            net = hole_net_score(gross, player.playing_handicap, course.hole(hole).stroke_index)
            if hole not in best_gross or gross < best_gross[hole][0]:
                best_gross[hole] = (gross, player_id)
            if hole not in best_net or net < best_net[hole][0]:
                best_net[hole] = (net, player_id)
            own_gross = personal_gross.setdefault(player_id, {})
            own_net = personal_net.setdefault(player_id, {})
            own_gross[hole] = min(gross, own_gross.get(hole, gross))
            own_net[hole] = min(net, own_net.get(hole, net))

    if any(hole not in best_gross for hole in HOLES):
        return None

    gross_counts = collections.Counter(best_gross[hole][1] for hole in HOLES)
    net_counts = collections.Counter(best_net[hole][1] for hole in HOLES)
    personal = sorted(
        (
            PlayerDreamRound(
                player_id=player_id,
                display_name=by_id[player_id].display_name,
                gross=sum(holes.values()),
                net=sum(personal_net[player_id].values()),
            )
            for player_id, holes in personal_gross.items()
            if len(holes) == len(HOLES)
        ),
        key=lambda entry: entry.gross,
    )
    return DreamRound(
        gross=sum(best_gross[hole][0] for hole in HOLES),
        net=sum(best_net[hole][0] for hole in HOLES),
        top_gross_contributor=gross_counts.most_common(1)[0][0],
        top_net_contributor=net_counts.most_common(1)[0][0],
        holes=tuple(
            DreamHole(
                hole=hole,
                gross=best_gross[hole][0],
                gross_player_id=best_gross[hole][1],
                net=best_net[hole][0],
                net_player_id=best_net[hole][1],
            )
            for hole in HOLES
        ),
        players=tuple(personal),
    )

__all__ = [
    "DISTRIBUTION_FIELDS",
    "DreamHole",
    "DreamRound",
    "MvpEntry",
    "PlayerDreamRound",
    "RoundAggregate",
    "dream_round",
    "mvp_standings",
    "round_aggregate",
    "season_stats",
]
