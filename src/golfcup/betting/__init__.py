"""Odds, moneylines and head-to-head side bets.

Pre-match prices come from a fixed table of simulated handicap matchups
(:mod:`golfcup.betting.table`); :mod:`golfcup.betting.odds` turns it into
win percentages for any pair of handicaps, nine-hole segments, stroke
teases and live in-round updates.
"""

from .bets import (
    TEASE_LIMIT,
    Bet,
    BetStatus,
    BetTerms,
    bet_status_label,
    bet_terms,
    bet_type_label,
    potential_payout,
    price_bet,
)
from .odds import (
    NINE_HOLE_REGRESSION,
    PICKEM_MONEYLINE,
    BetType,
    MatchupOdds,
    TeasedLine,
    get_odds,
    get_odds_smooth,
    live_win_prob,
    nearest_handicap,
    nine_hole_odds,
    tease_odds,
    team_effective_hcp,
)
from .table import HANDICAP_SET, MATCHUPS, SimulatedMatchup
from .utils import (
    american_to_decimal,
    american_to_profit_multiplier,
    format_moneyline,
    implied_probability_from_american,
    round_half_up,
    win_pct_to_moneyline,
)

__all__ = [
    "Bet",
    "BetStatus",
    "BetTerms",
    "BetType",
    "HANDICAP_SET",
    "MATCHUPS",
    "MatchupOdds",
    "NINE_HOLE_REGRESSION",
    "PICKEM_MONEYLINE",
    "SimulatedMatchup",
    "TEASE_LIMIT",
    "TeasedLine",
    "american_to_decimal",
    "american_to_profit_multiplier",
    "bet_status_label",
    "bet_terms",
    "bet_type_label",
    "format_moneyline",
    "get_odds",
    "get_odds_smooth",
    "implied_probability_from_american",
    "live_win_prob",
    "nearest_handicap",
    "nine_hole_odds",
    "potential_payout",
    "price_bet",
    "round_half_up",
    "tease_odds",
    "team_effective_hcp",
    "win_pct_to_moneyline",
]
