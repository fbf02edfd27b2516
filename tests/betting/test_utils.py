from __future__ import annotations

import pytest

from golfcup.betting.utils import (
    american_to_decimal,
    american_to_profit_multiplier,
    format_moneyline,
    implied_probability_from_american,
    normalise_american_odds,
    round_half_up,
    win_pct_to_moneyline,
)


@pytest.mark.parametrize(("value", "expected"), [(2.5, 3), (-2.5, -2), (0.49, 0), (-0.51, -1)])
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    ("win_pct", "expected"),
    [(50.0, -100), (60.0, -150), (40.0, 150), (75.0, -300), (33.3, 200), (80.0, -400)],
)
def test_win_pct_to_moneyline(win_pct: float, expected: int) -> None:
    assert win_pct_to_moneyline(win_pct) == expected


@pytest.mark.parametrize("win_pct", [0.0, 100.0, -5.0, 120.0])
def test_win_pct_to_moneyline_rejects_certainties(win_pct: float) -> None:
    with pytest.raises(ValueError):
        win_pct_to_moneyline(win_pct)


@pytest.mark.parametrize(
    ("moneyline", "expected"),
    [(-105, "EVEN"), (-100, "EVEN"), (100, "EVEN"), (105, "EVEN"), (150, "+150"), (-150, "-150")],
)
def test_format_moneyline(moneyline: int, expected: str) -> None:
    assert format_moneyline(moneyline) == expected


def test_normalise_american_odds() -> None:
    assert normalise_american_odds("+120") == 120
    assert normalise_american_odds("120") == 120
    assert normalise_american_odds(" -135 ") == -135
    assert normalise_american_odds("even") == 100
    assert normalise_american_odds(-110.4) == -110
    with pytest.raises(ValueError):
        normalise_american_odds("  ")


def test_price_conversions() -> None:
    assert american_to_decimal(150) == pytest.approx(2.5)
    assert american_to_decimal(-200) == pytest.approx(1.5)
    assert american_to_decimal("EVEN") == pytest.approx(2.0)
    assert american_to_profit_multiplier(-105) == pytest.approx(100 / 105)
    assert implied_probability_from_american(-150) == pytest.approx(0.6)
    with pytest.raises(ValueError):
        american_to_decimal(0)
