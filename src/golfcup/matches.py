"""Match format evaluators for Best Ball, Stableford and Individual days.

Every format awards three points per match: one each for the front nine,
the back nine and the overall match, split 0.5/0.5 when a segment is
level. Evaluation is a pure function of whatever scores exist, so a match
in progress yields a partial result rather than an error.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Mapping, Sequence, Tuple

from .handicap import hole_net_score, match_play_strokes
from .models import (
    FRONT_NINE,
    HOLES,
    Course,
    HoleWinner,
    Match,
    MatchFormat,
    MatchResult,
    MatchStatus,
    PairResult,
    Player,
    Score,
    Team,
    gross_lookup,
    resolve_roster,
)
from .points import stableford_points

logger = logging.getLogger(__name__)

Evaluator = Callable[[Match, Sequence[Score], Sequence[Player], Course], MatchResult]


def _segment_points(side1: float, side2: float) -> Tuple[float, float]:
    """Award one point to the side with more, half each when level."""

    if side1 == side2:
        return 0.5, 0.5
    return (1.0, 0.0) if side1 > side2 else (0.0, 1.0)


def _hole_winner(side1: float | None, side2: float | None, *, higher_wins: bool) -> HoleWinner:
    if side1 is None or side2 is None:
        return "none"
    if side1 == side2:
        return "tie"
    side1_better = side1 > side2 if higher_wins else side1 < side2
    return "side1" if side1_better else "side2"


def _tally(winners: Iterable[Tuple[int, HoleWinner]]) -> Dict[str, float]:
    """Hole-win tallies per side for the front and back nines."""

    tally = {"side1_front": 0.0, "side1_back": 0.0, "side2_front": 0.0, "side2_back": 0.0}
    for hole, winner in winners:
        segment = "front" if hole in FRONT_NINE else "back"
        if winner == "side1":
            tally[f"side1_{segment}"] += 1
        elif winner == "side2":
            tally[f"side2_{segment}"] += 1
        elif winner == "tie":
            tally[f"side1_{segment}"] += 0.5
            tally[f"side2_{segment}"] += 0.5
    return tally


def _status(match: Match, scores: Sequence[Score]) -> MatchStatus:
    has_scores = any(score.match_id == match.id and score.played for score in scores)
    return "in_progress" if has_scores else "upcoming"


def _rosters(match: Match, players: Sequence[Player]) -> Tuple[list[Player], list[Player]]:
    team1 = resolve_roster(match.team1_players, players)
    team2 = resolve_roster(match.team2_players, players)
    missing = len(match.team1_players) + len(match.team2_players) - len(team1) - len(team2)
    if missing:
        logger.debug("Match %s has %d unresolved roster entries", match.id, missing)
    return team1, team2


def _best_net(
    side: Sequence[Player], hole: int, course: Course, grosses: Mapping[tuple[str, int], int]
) -> int | None:
    nets = [
        hole_net_score(grosses[(player.id, hole)], player.playing_handicap, course.hole(hole).stroke_index)
        for player in side
        if (player.id, hole) in grosses
    ]
    return min(nets) if nets else None


def _side_points(
    side: Sequence[Player], hole: int, course: Course, grosses: Mapping[tuple[str, int], int]
) -> int | None:
    info = course.hole(hole)
    points = [
        stableford_points(
            hole_net_score(grosses[(player.id, hole)], player.playing_handicap, info.stroke_index),
            info.par,
        )
        for player in side
        if (player.id, hole) in grosses
    ]
    return sum(points) if points else None


def calculate_best_ball_results(
    match: Match, scores: Sequence[Score], players: Sequence[Player], course: Course
) -> MatchResult:
    """Day 1: the lower best net score among each side's players wins the hole."""

    team1, team2 = _rosters(match, players)
    grosses = gross_lookup(scores, match.id)
    winners = [
        _hole_winner(
            _best_net(team1, hole, course, grosses),
            _best_net(team2, hole, course, grosses),
            higher_wins=False,
        )
        for hole in HOLES
    ]
    tally = _tally(zip(HOLES, winners))
    front = _segment_points(tally["side1_front"], tally["side2_front"])
    back = _segment_points(tally["side1_back"], tally["side2_back"])
    overall = _segment_points(
        tally["side1_front"] + tally["side1_back"],
        tally["side2_front"] + tally["side2_back"],
    )
    return MatchResult(
        match_id=match.id,
        team1_front=front[0],
        team1_back=back[0],
        team1_total=front[0] + back[0] + overall[0],
        team2_front=front[1],
        team2_back=back[1],
        team2_total=front[1] + back[1] + overall[1],
        status=_status(match, scores),
        holes=tuple(winners),
    )


def calculate_stableford_results(
    match: Match, scores: Sequence[Score], players: Sequence[Player], course: Course
) -> MatchResult:
    """Day 2: sides add their players' Stableford points.

    Segments compare raw point sums over every hole a side has scored, so a
    side with holes still to enter is compared on what it has. Per-hole
    winners stay ``"none"`` until both sides have data.
    """

    team1, team2 = _rosters(match, players)
    grosses = gross_lookup(scores, match.id)
    winners: list[HoleWinner] = []
    sums = {"side1_front": 0, "side1_back": 0, "side2_front": 0, "side2_back": 0}
    for hole in HOLES:
        side1 = _side_points(team1, hole, course, grosses)
        side2 = _side_points(team2, hole, course, grosses)
        winners.append(_hole_winner(side1, side2, higher_wins=True))
        segment = "front" if hole in FRONT_NINE else "back"
        sums[f"side1_{segment}"] += side1 or 0
        sums[f"side2_{segment}"] += side2 or 0
    front = _segment_points(sums["side1_front"], sums["side2_front"])
    back = _segment_points(sums["side1_back"], sums["side2_back"])
    overall = _segment_points(
        sums["side1_front"] + sums["side1_back"],
        sums["side2_front"] + sums["side2_back"],
    )
    return MatchResult(
        match_id=match.id,
        team1_front=front[0],
        team1_back=back[0],
        team1_total=front[0] + back[0] + overall[0],
        team2_front=front[1],
        team2_back=back[1],
        team2_total=front[1] + back[1] + overall[1],
        status=_status(match, scores),
        holes=tuple(winners),
    )


def _pair_result(
    player1: Player, player2: Player, course: Course, grosses: Mapping[tuple[str, int], int]
) -> PairResult:
    strokes1 = match_play_strokes(player1.playing_handicap, player2.playing_handicap, course)
    strokes2 = match_play_strokes(player2.playing_handicap, player1.playing_handicap, course)
    winners: list[Tuple[int, HoleWinner]] = []
    for hole in HOLES:
        gross1 = grosses.get((player1.id, hole))
        gross2 = grosses.get((player2.id, hole))
        net1 = None if gross1 is None else gross1 - strokes1[hole]
        net2 = None if gross2 is None else gross2 - strokes2[hole]
        winners.append((hole, _hole_winner(net1, net2, higher_wins=False)))
    tally = _tally(winners)
    front = _segment_points(tally["side1_front"], tally["side2_front"])
    back = _segment_points(tally["side1_back"], tally["side2_back"])
    overall = _segment_points(
        tally["side1_front"] + tally["side1_back"],
        tally["side2_front"] + tally["side2_back"],
    )
    return PairResult(
        player1_id=player1.id,
        player2_id=player2.id,
        player1_front=front[0],
        player1_back=back[0],
        player1_total=front[0] + back[0] + overall[0],
        player2_front=front[1],
        player2_back=back[1],
        player2_total=front[1] + back[1] + overall[1],
    )


def calculate_individual_results(
    match: Match, scores: Sequence[Score], players: Sequence[Player], course: Course
) -> MatchResult:
    """Day 3: parallel head-to-head matches played off the low man.

    Only the team totals are reported at the match level; the front and
    back fields stay 0 and each pair's own breakdown is in ``pairs``.
    """

    team1, team2 = _rosters(match, players)
    grosses = gross_lookup(scores, match.id)
    pairs = tuple(
        _pair_result(player1, player2, course, grosses) for player1, player2 in zip(team1, team2)
    )
    return MatchResult(
        match_id=match.id,
        team1_front=0.0,
        team1_back=0.0,
        team1_total=sum(pair.player1_total for pair in pairs),
        team2_front=0.0,
        team2_back=0.0,
        team2_total=sum(pair.player2_total for pair in pairs),
        status=_status(match, scores),
        pairs=pairs,
    )


EVALUATORS: Mapping[MatchFormat, Evaluator] = {
    MatchFormat.BEST_BALL: calculate_best_ball_results,
    MatchFormat.STABLEFORD: calculate_stableford_results,
    MatchFormat.INDIVIDUAL: calculate_individual_results,
}


def evaluate_match(
    match: Match, scores: Sequence[Score], players: Sequence[Player], course: Course
) -> MatchResult:
    """Evaluate ``match`` with the evaluator for its format."""

    return EVALUATORS[MatchFormat.parse(match.format)](match, scores, players, course)


def side_team(roster: Sequence[str], players: Sequence[Player]) -> Team | None:
    """Team of the first resolvable player on a roster."""

    resolved = resolve_roster(roster, players)
    return resolved[0].team if resolved else None


def team_standings(
    matches: Sequence[Match],
    results: Mapping[str, MatchResult],
    players: Sequence[Player],
) -> Dict[Team, float]:
    """Tournament points per team, summed over the evaluated matches."""

    standings = {Team.SHAFT: 0.0, Team.BALLS: 0.0}
    for match in matches:
        result = results.get(match.id)
        if result is None:
            continue
        team1 = side_team(match.team1_players, players)
        if team1 is None:
            logger.debug("Skipping match %s with no resolvable players", match.id)
            continue
        team2 = Team.BALLS if team1 is Team.SHAFT else Team.SHAFT
        standings[team1] += result.team1_total
        standings[team2] += result.team2_total
    return standings


__all__ = [
    "EVALUATORS",
    "calculate_best_ball_results",
    "calculate_individual_results",
    "calculate_stableford_results",
    "evaluate_match",
    "side_team",
    "team_standings",
]
