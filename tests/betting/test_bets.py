from __future__ import annotations

import pytest

from golfcup.betting.bets import (
    Bet,
    bet_status_label,
    bet_terms,
    bet_type_label,
    potential_payout,
    price_bet,
)
from golfcup.betting.odds import tease_odds


def _bet(**overrides) -> Bet:
    fields = dict(
        id="b1",
        match_id="m1",
        bet_type="overall",
        side1_player_id="p1",
        side1_amount=20.0,
        side2_player_id="p3",
        side2_amount=20.0,
        side1_ml=-120,
        side2_ml=100,
    )
    fields.update(overrides)
    return Bet(**fields)


def test_bet_validation() -> None:
    assert _bet(tease_adjustment=-5).tease_adjustment == -5
    with pytest.raises(ValueError, match="bet type"):
        _bet(bet_type="match")
    with pytest.raises(ValueError, match="tease_adjustment"):
        _bet(tease_adjustment=6)


def test_price_bet_uses_teased_line() -> None:
    assert price_bet(10, 12, "back", 3) == tease_odds(10, 12, 3, "back")
    assert price_bet(10, 12, "overall", 7, limit=8).stroke_shift == 7
    with pytest.raises(ValueError):
        price_bet(10, 12, "overall", -6)


def test_potential_payout() -> None:
    assert potential_payout(20, -105) == pytest.approx(19.05)
    assert potential_payout(10, 150) == pytest.approx(15.0)
    assert potential_payout(25, 100) == pytest.approx(25.0)


def test_straight_up_overall_bet_pays_pickem_price() -> None:
    line = price_bet(10, 10, "overall")
    assert line.a_moneyline == -105
    assert potential_payout(100, line.a_moneyline) == pytest.approx(95.24)


def test_straight_up_terms_on_stableford_day() -> None:
    terms = bet_terms("front", 0, "Alice", "Carl", day=2)
    assert terms.segment == "Front 9 (holes 1–9)"
    assert terms.format == "Stableford net points"
    assert terms.winner == "Most points wins"
    assert terms.stroke == "No stroke adjustment · straight up"
    assert terms.compact == "Front 9 (holes 1–9) · Stableford net points · Most points wins"


def test_teased_terms_name_the_receiver() -> None:
    terms = bet_terms("overall", -2, "Alice", "Carl", day=1)
    assert terms.stroke == "Carl gets +2 strokes · net reduced by 2"
    assert terms.compact == "Overall (18 holes) · +2 strokes to Carl · Lowest net score wins"

    single = bet_terms("back", 1, "Alice", "Carl")
    assert single.format == "Net score"
    assert single.stroke.startswith("Alice gets +1 stroke ")


def test_labels() -> None:
    assert bet_type_label("front") == "Front 9"
    assert bet_type_label("overall") == "Overall"
    assert bet_status_label("side2_won", "Alice", "Carl") == "Carl Wins"
    assert bet_status_label("push", "Alice", "Carl") == "Push"
