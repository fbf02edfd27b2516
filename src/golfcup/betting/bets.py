"""Head-to-head side bets between players in the same match."""

from __future__ import annotations

import dataclasses
from typing import Literal

from .odds import NINE_HOLE_REGRESSION, BetType, TeasedLine, tease_odds
from .utils import american_to_profit_multiplier

BetStatus = Literal["pending", "active", "side1_won", "side2_won", "push", "cancelled"]

TEASE_LIMIT = 5

_SEGMENTS = {
    "front": "Front 9 (holes 1–9)",
    "back": "Back 9 (holes 10–18)",
    "overall": "Overall (18 holes)",
}
_FORMATS = {1: "Best Ball net strokes", 2: "Stableford net points", 3: "Net stroke play"}
_SEPARATOR = " · "


@dataclasses.dataclass(frozen=True)
class Bet:
    """A proposed or accepted wager; lines are quoted from side 1's perspective."""

    id: str
    match_id: str
    bet_type: BetType
    side1_player_id: str
    side1_amount: float
    side2_player_id: str
    side2_amount: float
    side1_ml: int
    side2_ml: int
    tease_adjustment: int = 0
    proposer_side: Literal["side1", "side2"] = "side1"
    status: BetStatus = "pending"

    def __post_init__(self) -> None:
        if self.bet_type not in _SEGMENTS:
            raise ValueError(f"Unknown bet type: {self.bet_type!r}")
        if abs(self.tease_adjustment) > TEASE_LIMIT:
            raise ValueError(
                f"tease_adjustment must be within [-{TEASE_LIMIT}, {TEASE_LIMIT}]"
            )


@dataclasses.dataclass(frozen=True)
class BetTerms:
    segment: str
    format: str
    winner: str
    stroke: str
    compact: str


def price_bet(
    side1_hcp: float,
    side2_hcp: float,
    bet_type: BetType,
    tease: int = 0,
    *,
    limit: int = TEASE_LIMIT,
    regression: float = NINE_HOLE_REGRESSION,
) -> TeasedLine:
    """Quote both sides of a bet after the stroke tease."""

    if abs(tease) > limit:
        raise ValueError(f"tease must be within [-{limit}, {limit}]")
    return tease_odds(side1_hcp, side2_hcp, tease, bet_type, regression=regression)


def potential_payout(amount: float, moneyline: int) -> float:
    """Profit returned on a winning ``amount`` staked at ``moneyline``."""

    return round(amount * american_to_profit_multiplier(moneyline), 2)


def _strokes(count: int) -> str:
    return f"+{count} stroke{'s' if count > 1 else ''}"


def bet_terms(
    bet_type: BetType,
    tease: int,
    side1_name: str,
    side2_name: str,
    day: int | None = None,
) -> BetTerms:
    """Human readable terms for a bet, keyed to the format played that day."""

    segment = _SEGMENTS[bet_type]
    format_label = _FORMATS.get(day or 0, "Net score")
    winner = "Most points wins" if day == 2 else "Lowest net score wins"
    if tease == 0:
        stroke = _SEPARATOR.join(("No stroke adjustment", "straight up"))
        compact = _SEPARATOR.join((segment, format_label, winner))
    else:
        receiver = side1_name if tease > 0 else side2_name
        count = abs(tease)
        stroke = _SEPARATOR.join((f"{receiver} gets {_strokes(count)}", f"net reduced by {count}"))
        compact = _SEPARATOR.join((segment, f"{_strokes(count)} to {receiver}", winner))
    return BetTerms(segment=segment, format=format_label, winner=winner, stroke=stroke, compact=compact)


def bet_type_label(bet_type: BetType) -> str:
    return {"front": "Front 9", "back": "Back 9"}.get(bet_type, "Overall")


def bet_status_label(status: BetStatus, side1_name: str, side2_name: str) -> str:
    labels = {
        "pending": "Pending",
        "active": "Active",
        "side1_won": f"{side1_name} Wins",
        "side2_won": f"{side2_name} Wins",
        "push": "Push",
        "cancelled": "Cancelled",
    }
    return labels[status]


__all__ = [
    "Bet",
    "BetStatus",
    "BetTerms",
    "TEASE_LIMIT",
    "bet_status_label",
    "bet_terms",
    "bet_type_label",
    "potential_payout",
    "price_bet",
]
