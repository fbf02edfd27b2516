"""Stroke allocation from playing handicaps and hole stroke indexes."""

from __future__ import annotations

import math

from .models import HOLES, Course


def strokes_for_hole(playing_handicap: float, stroke_index: int) -> int:
    """Return the strokes a player receives on a hole.

    Every hole gets ``floor(h / 18)`` strokes and the holes whose stroke
    index is within the remainder get one more. Handicaps below zero are
    played as scratch.
    """

    handicap = max(playing_handicap, 0)
    base = int(math.floor(handicap / 18))
    extra = 1 if stroke_index <= handicap % 18 else 0
    return base + extra


def net_score(gross: int, strokes_received: int) -> int:
    return gross - strokes_received


def hole_net_score(gross: int, playing_handicap: float, stroke_index: int) -> int:
    """Net score for a hole using the player's full playing handicap."""

    return net_score(gross, strokes_for_hole(playing_handicap, stroke_index))


def match_play_strokes(
    player_handicap: float, opponent_handicap: float, course: Course
) -> dict[int, int]:
    """Strokes per hole for ``player`` in a head-to-head played off the low man.

    Only the higher handicap receives strokes: the difference is dealt one
    at a time around the holes ranked hardest first, wrapping for deltas
    above 18. The low man (or an equal handicap) gets zero everywhere.
    """

    strokes = {hole: 0 for hole in HOLES}
    delta = int(math.ceil(player_handicap - opponent_handicap))
    if delta <= 0:
        return strokes
    ranked = course.holes_by_difficulty()
    full_passes, remainder = divmod(delta, len(ranked))
    for position, hole in enumerate(ranked):
        strokes[hole] = full_passes + (1 if position < remainder else 0)
    return strokes


__all__ = [
    "hole_net_score",
    "match_play_strokes",
    "net_score",
    "strokes_for_hole",
]
