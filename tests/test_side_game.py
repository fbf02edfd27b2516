from __future__ import annotations

from typing import List

from golfcup.models import Course, Match, MatchFormat, Player, Team
from golfcup.side_game import score_handicap_game

from .conftest import PARS, ScoreFactory


def _pars_with(changes: dict[int, int]) -> List[int]:
    grosses = list(PARS)
    for hole, delta in changes.items():
        grosses[hole - 1] += delta
    return grosses


def test_surplus_over_target_ranks_first(course: Course, make_scores: ScoreFactory) -> None:
    ten = Player("ten", "Ten Cap", Team.SHAFT, playing_handicap=10)
    five = Player("five", "Five Cap", Team.BALLS, playing_handicap=5)
    # 15 pars and three double bogeys: 30 points against a target of 31
    five_grosses = _pars_with({16: 2, 17: 2, 18: 2})
    scores = [*make_scores("m1", "ten", PARS), *make_scores("m1", "five", five_grosses)]

    result = score_handicap_game([five, ten], scores, course)
    leader, trailer = result.players

    assert leader.player_id == "ten"
    assert leader.target_points == 26
    assert leader.total_points == 36
    assert leader.surplus == 10
    assert leader.eligible is True
    assert leader.pars == 18
    assert leader.rank == 1

    assert trailer.player_id == "five"
    assert trailer.total_points == 30
    assert trailer.surplus == -1
    assert trailer.eligible is False
    assert trailer.rank == 2
    assert result.scores_entered is True
    assert result.day_complete is False


def test_equal_surplus_goes_to_lower_score_on_hardest_hole(
    course: Course, make_scores: ScoreFactory
) -> None:
    steady = Player("steady", "Steady", Team.SHAFT)
    streaky = Player("streaky", "Streaky", Team.BALLS)
    # hole 2 is stroke index 1; birdie on 1 and double on 2 nets the same 36
    scores = [
        *make_scores("m1", "steady", PARS),
        *make_scores("m1", "streaky", _pars_with({1: -1, 2: 2})),
    ]
    result = score_handicap_game([streaky, steady], scores, course)

    assert [player.surplus for player in result.players] == [0, 0]
    assert [player.player_id for player in result.players] == ["steady", "streaky"]
    assert result.players[1].birdies == 1


def test_ineligible_players_rank_by_total(course: Course, make_scores: ScoreFactory) -> None:
    low = Player("low", "Low", Team.SHAFT, playing_handicap=2)
    high = Player("high", "High", Team.BALLS, playing_handicap=2)
    scores = [
        *make_scores("m1", "low", {hole: PARS[hole - 1] for hole in range(1, 10)}),
        *make_scores("m1", "high", {hole: PARS[hole - 1] for hole in range(1, 13)}),
    ]
    result = score_handicap_game([low, high], scores, course)

    assert [player.player_id for player in result.players] == ["high", "low"]
    assert result.players[0].holes_played == 12
    assert result.players[1].hole_gross[12] is None
    assert not any(player.eligible for player in result.players)


def test_matches_limit_participants_and_completion(
    course: Course, make_scores: ScoreFactory
) -> None:
    one = Player("one", "One", Team.SHAFT)
    two = Player("two", "Two", Team.BALLS)
    bench = Player("bench", "Bench", Team.BALLS)
    match = Match(
        id="m1",
        day=1,
        format=MatchFormat.BEST_BALL,
        team1_players=["one"],
        team2_players=["Two"],
        scores_locked=True,
    )
    scores = [*make_scores("m1", "one", PARS), *make_scores("other", "two", PARS)]
    result = score_handicap_game([one, two, bench], scores, course, [match], base_points=30)

    assert [player.player_id for player in result.players] == ["one", "two"]
    assert result.players[0].target_points == 30
    assert result.players[1].total_points == 0
    assert result.day_complete is True


def test_no_scores_entered(course: Course) -> None:
    result = score_handicap_game([Player("a", "A", Team.SHAFT)], [], course)
    assert result.scores_entered is False
    assert result.players[0].rank == 1
