"""Handicap-driven win probabilities and moneylines.

Pre-match odds come from the simulated head-to-head table. Handicaps off
the table are snapped (``get_odds``) or interpolated and extrapolated
(``get_odds_smooth``) so that every whole-stroke tease yields its own line.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Literal, Sequence

from .table import HANDICAP_SET, lookup
from .utils import round_half_up, win_pct_to_moneyline

logger = logging.getLogger(__name__)

BetType = Literal["front", "back", "overall"]

PICKEM_MONEYLINE = -105
NINE_HOLE_REGRESSION = 0.55
WIN_PCT_FLOOR = 2.0
WIN_PCT_CEILING = 98.0
LIVE_SIGMA_PER_HOLE = 1.3
LIVE_FULL_WEIGHT_FRACTION = 0.4


@dataclasses.dataclass(frozen=True)
class MatchupOdds:
    """Normalised (draws excluded) win percentages and lines for sides A and B."""

    player_a_hcp: float
    player_b_hcp: float
    a_win_pct: float
    b_win_pct: float
    a_moneyline: int
    b_moneyline: int


@dataclasses.dataclass(frozen=True)
class TeasedLine:
    """Lines after a stroke tease, for the segment the bet covers."""

    bet_type: BetType
    stroke_shift: int
    a_win_pct: float
    b_win_pct: float
    a_moneyline: int
    b_moneyline: int


def _pickem(hcp_a: float, hcp_b: float) -> MatchupOdds:
    return MatchupOdds(hcp_a, hcp_b, 50.0, 50.0, PICKEM_MONEYLINE, PICKEM_MONEYLINE)


def _from_win_pct(hcp_a: float, hcp_b: float, a_win_pct: float) -> MatchupOdds:
    b_win_pct = 100.0 - a_win_pct
    return MatchupOdds(
        hcp_a,
        hcp_b,
        a_win_pct,
        b_win_pct,
        win_pct_to_moneyline(a_win_pct),
        win_pct_to_moneyline(b_win_pct),
    )


def _clamp(win_pct: float, floor: float = WIN_PCT_FLOOR, ceiling: float = WIN_PCT_CEILING) -> float:
    return max(floor, min(ceiling, win_pct))


def nearest_handicap(hcp: float) -> int:
    """Snap a handicap to the closest simulated value; ties go to the lower value."""

    return min(HANDICAP_SET, key=lambda value: abs(value - hcp))


def get_odds(hcp_a: float, hcp_b: float) -> MatchupOdds:
    """18-hole pre-match odds from the nearest simulated pairing."""

    if hcp_a == hcp_b:
        return _pickem(hcp_a, hcp_b)
    snapped_a = nearest_handicap(hcp_a)
    snapped_b = nearest_handicap(hcp_b)
    if snapped_a == snapped_b:
        return _pickem(hcp_a, hcp_b)
    lower, higher = sorted((snapped_a, snapped_b))
    row = lookup(lower, higher)
    if row is None:  # pragma: no cover - every pair of the set is simulated
        logger.warning("No simulated matchup for %s vs %s", lower, higher)
        return _pickem(hcp_a, hcp_b)
    total = row.lower_win_pct + row.higher_win_pct
    lower_norm = row.lower_win_pct / total * 100.0
    higher_norm = row.higher_win_pct / total * 100.0
    if snapped_a == lower:
        a_win_pct, b_win_pct = lower_norm, higher_norm
    else:
        a_win_pct, b_win_pct = higher_norm, lower_norm
    return MatchupOdds(
        hcp_a,
        hcp_b,
        a_win_pct,
        b_win_pct,
        win_pct_to_moneyline(a_win_pct),
        win_pct_to_moneyline(b_win_pct),
    )


def get_odds_smooth(hcp_a: float, hcp_b: float) -> MatchupOdds:
    """18-hole odds with linear interpolation on side A's handicap.

    Inside the simulated range side A's win% is interpolated between the
    bracketing handicaps. Outside it the boundary slope (lowest two or
    highest two handicaps) is extended, and the result is clamped to
    [2, 98] before the lines are rebuilt.
    """

    lowest, second = HANDICAP_SET[0], HANDICAP_SET[1]
    penultimate, highest = HANDICAP_SET[-2], HANDICAP_SET[-1]

    if hcp_a < lowest:
        base = get_odds(lowest, hcp_b)
        step = get_odds(second, hcp_b)
        slope = (step.a_win_pct - base.a_win_pct) / (second - lowest)
        return _from_win_pct(hcp_a, hcp_b, _clamp(base.a_win_pct + slope * (hcp_a - lowest)))

    if hcp_a > highest:
        base = get_odds(highest, hcp_b)
        step = get_odds(penultimate, hcp_b)
        slope = (base.a_win_pct - step.a_win_pct) / (highest - penultimate)
        return _from_win_pct(hcp_a, hcp_b, _clamp(base.a_win_pct + slope * (hcp_a - highest)))

    below = max(value for value in HANDICAP_SET if value <= hcp_a)
    above = min(value for value in HANDICAP_SET if value >= hcp_a)
    if below == above:
        return dataclasses.replace(get_odds(below, hcp_b), player_a_hcp=hcp_a)
    fraction = (hcp_a - below) / (above - below)
    low = get_odds(below, hcp_b)
    high = get_odds(above, hcp_b)
    a_win_pct = low.a_win_pct + fraction * (high.a_win_pct - low.a_win_pct)
    return _from_win_pct(hcp_a, hcp_b, _clamp(a_win_pct))


def _regress_to_nine(a_win_pct: float, regression: float) -> float:
    return 50.0 + (a_win_pct - 50.0) * regression


def nine_hole_odds(
    hcp_a: float, hcp_b: float, *, regression: float = NINE_HOLE_REGRESSION
) -> MatchupOdds:
    """Front or back nine odds: the 18-hole edge shrunk towards 50/50."""

    full = get_odds(hcp_a, hcp_b)
    return _from_win_pct(hcp_a, hcp_b, _regress_to_nine(full.a_win_pct, regression))


def tease_odds(
    hcp_a: float,
    hcp_b: float,
    stroke_shift: int,
    bet_type: BetType,
    *,
    regression: float = NINE_HOLE_REGRESSION,
) -> TeasedLine:
    """Reprice a matchup after giving side A ``stroke_shift`` extra strokes.

    A positive shift raises side A's effective handicap (more strokes, better
    odds for A); a negative shift works in B's favour. Nine-hole bets are
    regressed towards 50/50 and repriced; overall bets keep the 18-hole line,
    including the pick'em price.
    """

    base = get_odds_smooth(hcp_a + stroke_shift, hcp_b)
    if bet_type == "overall":
        return TeasedLine(
            bet_type=bet_type,
            stroke_shift=stroke_shift,
            a_win_pct=base.a_win_pct,
            b_win_pct=base.b_win_pct,
            a_moneyline=base.a_moneyline,
            b_moneyline=base.b_moneyline,
        )
    a_win_pct = _regress_to_nine(base.a_win_pct, regression)
    return TeasedLine(
        bet_type=bet_type,
        stroke_shift=stroke_shift,
        a_win_pct=a_win_pct,
        b_win_pct=100.0 - a_win_pct,
        a_moneyline=win_pct_to_moneyline(a_win_pct),
        b_moneyline=win_pct_to_moneyline(100.0 - a_win_pct),
    )


def team_effective_hcp(handicaps: Sequence[float]) -> int:
    """Effective handicap of a best-ball pair, weighting the stronger player 60/40."""

    lower, higher = sorted(handicaps)[:2]
    return round_half_up(lower * 0.6 + higher * 0.4)


def live_win_prob(
    base_a_win_pct: float,
    a_lead: float,
    holes_played: int,
    total_holes: int = 18,
    *,
    sigma_per_hole: float = LIVE_SIGMA_PER_HOLE,
) -> float:
    """Blend the pre-match win% with the live net lead.

    ``a_lead`` is net strokes side A is ahead. The lead is turned into a win%
    through a logistic approximation of the normal CDF with
    ``sigma = sigma_per_hole * sqrt(holes remaining)``; its weight rises linearly until
    40% of the holes are played, after which it is used alone.
    """

    if holes_played <= 0:
        return base_a_win_pct
    if holes_played >= total_holes:
        if a_lead > 0:
            return 99.0
        return 1.0 if a_lead < 0 else 50.0
    remaining = total_holes - holes_played
    sigma = math.sqrt(remaining) * sigma_per_hole
    live_pct = 100.0 / (1.0 + math.exp(-1.7 * (a_lead / sigma)))
    live_weight = min(holes_played / (total_holes * LIVE_FULL_WEIGHT_FRACTION), 1.0)
    blended = (1.0 - live_weight) * base_a_win_pct + live_weight * live_pct
    return _clamp(blended)


__all__ = [
    "BetType",
    "MatchupOdds",
    "NINE_HOLE_REGRESSION",
    "PICKEM_MONEYLINE",
    "TeasedLine",
    "get_odds",
    "get_odds_smooth",
    "live_win_prob",
    "nearest_handicap",
    "nine_hole_odds",
    "tease_odds",
    "team_effective_hcp",
]
