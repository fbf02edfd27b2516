"""Day-wide gross and net skins.

Skins span every match played on a day. A unique gross birdie or better
takes both skins on the hole, and the outright gross winner is left out of
the net pool so a net score can never cut or push a gross skin.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Sequence

from .handicap import hole_net_score
from .models import HOLES, Course, Player, Score, SkinResult, gross_lookup

logger = logging.getLogger(__name__)

DEFAULT_POT = 200.0


@dataclasses.dataclass(frozen=True)
class _Entry:
    player: Player
    gross: int
    net: int


def _hole_result(hole: int, course: Course, entries: Sequence[_Entry]) -> SkinResult:
    info = course.hole(hole)
    if not entries:
        return SkinResult(hole=hole, par=info.par)

    min_gross = min(entry.gross for entry in entries)
    gross_leaders = [entry for entry in entries if entry.gross == min_gross]
    gross_winner = gross_leaders[0] if len(gross_leaders) == 1 else None

    net_winner: _Entry | None = None
    net_tie = False
    if gross_winner is not None and min_gross < info.par:
        net_winner = gross_winner
    else:
        pool = [entry for entry in entries if entry is not gross_winner]
        if pool:
            min_net = min(entry.net for entry in pool)
            net_leaders = [entry for entry in pool if entry.net == min_net]
            net_winner = net_leaders[0] if len(net_leaders) == 1 else None
            net_tie = len(net_leaders) > 1

    return SkinResult(
        hole=hole,
        par=info.par,
        gross_winner=gross_winner.player if gross_winner else None,
        gross_score=min_gross if gross_winner else None,
        gross_tie=len(gross_leaders) > 1,
        net_winner=net_winner.player if net_winner else None,
        net_score=net_winner.net if net_winner else None,
        net_tie=net_tie,
    )


def calculate_skins(
    players: Sequence[Player], scores: Sequence[Score], course: Course
) -> list[SkinResult]:
    """Per-hole skins for every player with a score on the day.

    Net scores always use the full playing handicap, even on days where the
    matches themselves are played off the low man.
    """

    grosses = gross_lookup(scores)
    results = []
    for hole in HOLES:
        stroke_index = course.hole(hole).stroke_index
        entries = [
            _Entry(
                player=player,
                gross=grosses[(player.id, hole)],
                net=hole_net_score(grosses[(player.id, hole)], player.playing_handicap, stroke_index),
            )
            for player in players
            if (player.id, hole) in grosses
        ]
        results.append(_hole_result(hole, course, entries))
    return results


@dataclasses.dataclass(frozen=True)
class SkinsSummary:
    """Skins won per player id for both tracks, with any unawarded carryover."""

    gross_skins: Dict[str, int]
    net_skins: Dict[str, int]
    gross_carryover: int
    net_carryover: int
    pot: float

    @property
    def total_gross_won(self) -> int:
        return sum(self.gross_skins.values())

    @property
    def total_net_won(self) -> int:
        return sum(self.net_skins.values())

    @property
    def total_skins_won(self) -> int:
        return self.total_gross_won + self.total_net_won

    @property
    def payout_per_skin(self) -> float:
        """The pot split evenly across every skin won on either track."""

        total = self.total_skins_won
        return self.pot / total if total else 0.0

    def payouts(self) -> Dict[str, float]:
        per_skin = self.payout_per_skin
        totals: Dict[str, float] = {}
        for track in (self.gross_skins, self.net_skins):
            for player_id, skins in track.items():
                totals[player_id] = totals.get(player_id, 0.0) + skins * per_skin
        return totals


def _award(winners: Sequence[Player | None], carryover: bool) -> tuple[Dict[str, int], int]:
    skins: Dict[str, int] = {}
    carry = 0
    for winner in winners:
        if winner is None:
            if carryover:
                carry += 1
            continue
        skins[winner.id] = skins.get(winner.id, 0) + 1 + carry
        carry = 0
    return skins, carry


def summarize_skins(
    results: Sequence[SkinResult], *, pot: float = DEFAULT_POT, carryover: bool = True
) -> SkinsSummary:
    """Count skins per player, walking holes in order.

    An unresolved hole (tie or no scores) carries its skin to the next
    resolved hole on the same track. Carry left after the last resolved hole
    is reported as outstanding.
    """

    ordered = sorted(results, key=lambda result: result.hole)
    gross_skins, gross_carry = _award([result.gross_winner for result in ordered], carryover)
    net_skins, net_carry = _award([result.net_winner for result in ordered], carryover)
    if gross_carry or net_carry:
        logger.debug("Skins carryover outstanding: gross=%d net=%d", gross_carry, net_carry)
    return SkinsSummary(
        gross_skins=gross_skins,
        net_skins=net_skins,
        gross_carryover=gross_carry,
        net_carryover=net_carry,
        pot=pot,
    )


__all__ = ["DEFAULT_POT", "SkinsSummary", "calculate_skins", "summarize_skins"]
