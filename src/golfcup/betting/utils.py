"""Moneyline math and display helpers."""

from __future__ import annotations

import math

OddsValue = int | float | str

MONEYLINE_INCREMENT = 5

__all__ = [
    "MONEYLINE_INCREMENT",
    "OddsValue",
    "american_to_decimal",
    "american_to_profit_multiplier",
    "format_moneyline",
    "implied_probability_from_american",
    "normalise_american_odds",
    "round_half_up",
    "win_pct_to_moneyline",
]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards positive infinity."""

    return int(math.floor(value + 0.5))


def normalise_american_odds(value: OddsValue) -> int:
    """Coerce a quoted price (``-150``, ``"+130"``, ``"EVEN"``) into a signed integer."""

    if isinstance(value, (int, float)):
        return int(round(value))
    token = value.strip().upper()
    if token in {"EVEN", "EV", "PK"}:
        return 100
    if not token:
        raise ValueError("Empty odds value")
    return int(token.lstrip("+"))


def win_pct_to_moneyline(win_pct: float, *, increment: int = MONEYLINE_INCREMENT) -> int:
    """Convert a win percentage (0-100) to an American moneyline.

    Favourites (50% or better) get negative lay odds, underdogs positive
    odds; both are rounded to the nearest ``increment``.
    """

    if win_pct <= 0.0 or win_pct >= 100.0:
        raise ValueError("Win percentage must be between 0 and 100 (exclusive)")
    if win_pct >= 50.0:
        raw = -(win_pct / (100.0 - win_pct)) * 100.0
    else:
        raw = ((100.0 - win_pct) / win_pct) * 100.0
    return round_half_up(raw / increment) * increment


def format_moneyline(moneyline: int) -> str:
    """Render a moneyline as ``+130``/``-150``; 100 and 105 either way read ``EVEN``."""

    if abs(moneyline) in (100, 105):
        return "EVEN"
    return f"+{moneyline}" if moneyline > 0 else f"{moneyline}"


def american_to_profit_multiplier(value: OddsValue) -> float:
    """Profit per unit staked when a bet at ``value`` wins."""

    price = normalise_american_odds(value)
    if price == 0:
        raise ValueError("American odds cannot be zero")
    return price / 100.0 if price > 0 else 100.0 / abs(price)


def american_to_decimal(value: OddsValue) -> float:
    """Decimal (total return per unit) odds for an American price."""

    return 1.0 + american_to_profit_multiplier(value)


def implied_probability_from_american(value: OddsValue) -> float:
    """Break-even win probability (0-1) of an American price."""

    return 1.0 / american_to_decimal(value)

