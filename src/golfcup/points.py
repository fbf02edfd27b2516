"""Point tables for Stableford matches and the handicap side game.

The two tables are deliberately separate: match Stableford pays 5/4/3/2/1/0
on net score while the side game pays 16/8/4/2/1/0 on gross score.
"""

from __future__ import annotations


def stableford_points(net: int, par: int) -> int:
    """Match-play Stableford points for a net score on a hole."""

    diff = net - par
    if diff >= 2:
        return 0
    if diff == 1:
        return 1
    if diff == 0:
        return 2
    if diff == -1:
        return 3
    if diff == -2:
        return 4
    return 5


_SIDE_GAME_TABLE = (
    (-3, 16, "Double Eagle"),
    (-2, 8, "Eagle"),
    (-1, 4, "Birdie"),
    (0, 2, "Par"),
    (1, 1, "Bogey"),
)


def _side_game_row(score_vs_par: int) -> tuple[int, str]:
    for threshold, points, label in _SIDE_GAME_TABLE:
        if score_vs_par <= threshold:
            return points, label
    return 0, "Double Bogey+"


def side_game_points(score_vs_par: int) -> int:
    """Side-game points for a gross score relative to par."""

    return _side_game_row(score_vs_par)[0]


def side_game_label(score_vs_par: int) -> str:
    return _side_game_row(score_vs_par)[1]


__all__ = ["side_game_label", "side_game_points", "stableford_points"]
