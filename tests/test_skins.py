from __future__ import annotations

from typing import List

import pytest

from golfcup.models import Course, Player, SkinResult, Team
from golfcup.skins import DEFAULT_POT, calculate_skins, summarize_skins

from .conftest import ScoreFactory


@pytest.fixture
def alice_and_dana(players: List[Player]) -> List[Player]:
    return [players[0], players[3]]


def test_gross_tie_with_sole_net_winner(
    course: Course, alice_and_dana: List[Player], make_scores: ScoreFactory
) -> None:
    scores = [*make_scores("m1", "p1", {5: 4}), *make_scores("m2", "p4", {5: 4})]
    hole5 = calculate_skins(alice_and_dana, scores, course)[4]

    assert hole5.hole == 5
    assert hole5.gross_tie is True
    assert hole5.gross_winner is None
    assert hole5.net_winner is not None and hole5.net_winner.id == "p4"
    assert hole5.net_score == 3
    assert hole5.net_tie is False


def test_gross_birdie_takes_both_skins(
    course: Course, alice_and_dana: List[Player], make_scores: ScoreFactory
) -> None:
    scores = [*make_scores("m1", "p1", {3: 2}), *make_scores("m1", "p4", {3: 3})]
    hole3 = calculate_skins(alice_and_dana, scores, course)[2]

    assert hole3.gross_winner is not None and hole3.gross_winner.id == "p1"
    assert hole3.net_winner is not None and hole3.net_winner.id == "p1"
    assert hole3.net_score == 2
    assert hole3.net_tie is False


def test_gross_birdie_keeps_net_skin_against_lower_net(
    course: Course, players: List[Player], make_scores: ScoreFactory
) -> None:
    # hole 1 is stroke index 7: Alice gets nothing, a 26 handicap gets two strokes
    high = Player("p9", "Hugo High", Team.BALLS, raw_handicap=26, playing_handicap=26)
    scores = [*make_scores("m1", "p1", {1: 3}), *make_scores("m2", "p9", {1: 4})]
    hole1 = calculate_skins([players[0], high], scores, course)[0]

    assert hole1.gross_winner is not None and hole1.gross_winner.id == "p1"
    assert hole1.gross_score == 3
    assert hole1.net_winner is not None and hole1.net_winner.id == "p1"
    assert hole1.net_score == 3
    assert hole1.net_tie is False


def test_gross_winner_at_par_is_left_out_of_net_pool(
    course: Course, alice_and_dana: List[Player], make_scores: ScoreFactory
) -> None:
    scores = [*make_scores("m1", "p1", {1: 4}), *make_scores("m1", "p4", {1: 5})]
    hole1 = calculate_skins(alice_and_dana, scores, course)[0]

    assert hole1.gross_winner is not None and hole1.gross_winner.id == "p1"
    assert hole1.gross_score == 4
    assert hole1.net_winner is not None and hole1.net_winner.id == "p4"
    assert hole1.net_score == 4


def test_hole_without_scores_is_empty(course: Course, alice_and_dana: List[Player]) -> None:
    results = calculate_skins(alice_and_dana, [], course)
    assert len(results) == 18
    assert all(
        result.gross_winner is None
        and result.net_winner is None
        and not result.gross_tie
        and not result.net_tie
        for result in results
    )


def test_net_tie_in_pool(
    course: Course, players: List[Player], make_scores: ScoreFactory
) -> None:
    scores = [
        *make_scores("m1", "p1", {1: 4}),
        *make_scores("m1", "p3", {1: 5}),
        *make_scores("m1", "p4", {1: 5}),
    ]
    hole1 = calculate_skins(players, scores, course)[0]
    assert hole1.gross_winner is not None and hole1.gross_winner.id == "p1"
    assert hole1.net_winner is None
    assert hole1.net_tie is True


def test_summary_carries_unresolved_holes(players: List[Player]) -> None:
    alice, bob = players[0], players[1]
    results = [
        SkinResult(hole=1, par=4, gross_tie=True, net_winner=bob),
        SkinResult(hole=2, par=4),
        SkinResult(hole=3, par=3, gross_winner=alice, net_winner=alice),
        SkinResult(hole=4, par=5, gross_tie=True, net_tie=True),
    ]
    summary = summarize_skins(results)

    assert summary.gross_skins == {"p1": 3}
    assert summary.net_skins == {"p2": 1, "p1": 2}
    assert summary.gross_carryover == 1
    assert summary.net_carryover == 1
    assert summary.total_skins_won == 6
    assert summary.pot == DEFAULT_POT
    assert summary.payout_per_skin == pytest.approx(200.0 / 6)
    payouts = summary.payouts()
    assert payouts["p1"] == pytest.approx(200.0 * 5 / 6)
    assert payouts["p2"] == pytest.approx(200.0 / 6)


def test_summary_without_carryover(players: List[Player]) -> None:
    alice = players[0]
    results = [
        SkinResult(hole=2, par=4, gross_winner=alice),
        SkinResult(hole=1, par=4, gross_tie=True),
    ]
    summary = summarize_skins(results, pot=100.0, carryover=False)
    assert summary.gross_skins == {"p1": 1}
    assert summary.gross_carryover == 0
    assert summary.payout_per_skin == pytest.approx(100.0)


def test_summary_with_no_skins_pays_nothing() -> None:
    summary = summarize_skins([SkinResult(hole=1, par=4)])
    assert summary.total_skins_won == 0
    assert summary.payout_per_skin == 0.0
    assert summary.payouts() == {}
