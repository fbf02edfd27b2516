from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from golfcup.points import side_game_label, side_game_points, stableford_points


@pytest.mark.parametrize(
    ("net", "par", "expected"),
    [(1, 4, 5), (2, 5, 5), (2, 4, 4), (3, 4, 3), (4, 4, 2), (5, 4, 1), (6, 4, 0), (9, 3, 0)],
)
def test_stableford_points(net: int, par: int, expected: int) -> None:
    assert stableford_points(net, par) == expected


@pytest.mark.parametrize(
    ("score_vs_par", "points", "label"),
    [
        (-4, 16, "Double Eagle"),
        (-3, 16, "Double Eagle"),
        (-2, 8, "Eagle"),
        (-1, 4, "Birdie"),
        (0, 2, "Par"),
        (1, 1, "Bogey"),
        (2, 0, "Double Bogey+"),
        (5, 0, "Double Bogey+"),
    ],
)
def test_side_game_scale(score_vs_par: int, points: int, label: str) -> None:
    assert side_game_points(score_vs_par) == points
    assert side_game_label(score_vs_par) == label


def test_scales_differ_below_par() -> None:
    assert stableford_points(1, 4) != side_game_points(-3)


@given(
    st.integers(min_value=1, max_value=12),
    st.integers(min_value=1, max_value=12),
    st.integers(min_value=3, max_value=6),
)
def test_stableford_points_never_rise_with_a_worse_net(net_a: int, net_b: int, par: int) -> None:
    better, worse = sorted((net_a, net_b))
    assert stableford_points(better, par) >= stableford_points(worse, par)
    assert 0 <= stableford_points(worse, par) <= 5
