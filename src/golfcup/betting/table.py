"""Monte Carlo head-to-head results for the tournament handicap set.

5,000 simulated 18-hole net matches per pairing. Each row is
``(lower_hcp, higher_hcp, lower_win_pct, higher_win_pct, draw_pct)``; the
higher handicap wins more often because it receives more net strokes.
"""

from __future__ import annotations

import dataclasses
from typing import Mapping

HANDICAP_SET: tuple[int, ...] = (4, 5, 8, 9, 10, 11, 12, 13, 16, 20, 21, 23)


@dataclasses.dataclass(frozen=True)
class SimulatedMatchup:
    lower_hcp: int
    higher_hcp: int
    lower_win_pct: float
    higher_win_pct: float
    draw_pct: float


_RAW_ROWS: tuple[tuple[int, int, float, float, float], ...] = (
    (4, 5, 41.64, 52.36, 6.0),
    (4, 8, 25.96, 68.7, 5.34),
    (4, 9, 21.94, 73.56, 4.5),
    (4, 10, 17.44, 78.4, 4.16),
    (4, 11, 15.18, 80.38, 4.44),
    (4, 12, 11.56, 84.88, 3.56),
    (4, 13, 8.84, 88.22, 2.94),
    (4, 16, 3.72, 94.6, 1.68),
    (4, 20, 1.02, 98.44, 0.54),
    (4, 21, 0.8, 98.86, 0.34),
    (4, 23, 0.24, 99.58, 0.18),
    (5, 8, 30.88, 63.66, 5.46),
    (5, 9, 26.76, 67.32, 5.92),
    (5, 10, 22.0, 73.16, 4.84),
    (5, 11, 18.54, 77.38, 4.08),
    (5, 12, 14.96, 81.02, 4.02),
    (5, 13, 11.56, 85.58, 2.86),
    (5, 16, 5.48, 92.36, 2.16),
    (5, 20, 1.34, 98.12, 0.54),
    (5, 21, 1.08, 98.36, 0.56),
    (5, 23, 0.3, 99.44, 0.26),
    (8, 9, 42.18, 51.8, 6.02),
    (8, 10, 35.82, 58.38, 5.8),
    (8, 11, 32.18, 61.82, 6.0),
    (8, 12, 26.12, 68.48, 5.4),
    (8, 13, 22.12, 73.04, 4.84),
    (8, 16, 11.98, 84.56, 3.46),
    (8, 20, 4.14, 94.32, 1.54),
    (8, 21, 3.26, 95.62, 1.12),
    (8, 23, 1.6, 97.56, 0.84),
    (9, 10, 41.16, 52.9, 5.94),
    (9, 11, 36.22, 57.96, 5.82),
    (9, 12, 30.46, 63.72, 5.82),
    (9, 13, 25.98, 69.44, 4.58),
    (9, 16, 14.58, 81.82, 3.6),
    (9, 20, 5.38, 93.0, 1.62),
    (9, 21, 4.16, 94.36, 1.48),
    (9, 23, 1.9, 97.02, 1.08),
    (10, 11, 42.28, 51.16, 6.56),
    (10, 12, 37.1, 57.38, 5.52),
    (10, 13, 31.58, 62.98, 5.44),
    (10, 16, 19.12, 75.98, 4.9),
    (10, 20, 7.22, 90.12, 2.66),
    (10, 21, 5.94, 92.06, 2.0),
    (10, 23, 3.16, 95.62, 1.22),
    (11, 12, 41.92, 52.26, 5.82),
    (11, 13, 35.68, 58.76, 5.56),
    (11, 16, 22.7, 72.88, 4.42),
    (11, 20, 9.42, 87.92, 2.66),
    (11, 21, 7.5, 90.02, 2.48),
    (11, 23, 4.24, 94.18, 1.58),
    (12, 13, 41.14, 53.1, 5.76),
    (12, 16, 27.0, 67.62, 5.38),
    (12, 20, 11.82, 85.2, 2.98),
    (12, 21, 9.64, 87.5, 2.86),
    (12, 23, 5.7, 92.12, 2.18),
    (13, 16, 32.0, 62.8, 5.2),
    (13, 20, 15.26, 80.66, 4.08),
    (13, 21, 13.12, 83.56, 3.32),
    (13, 23, 7.7, 89.66, 2.64),
    (16, 20, 26.1, 68.86, 5.04),
    (16, 21, 22.66, 72.56, 4.78),
    (16, 23, 14.34, 81.96, 3.7),
    (20, 21, 42.6, 51.44, 5.96),
    (20, 23, 33.0, 61.52, 5.48),
    (21, 23, 35.1, 59.1, 5.8),
)

MATCHUPS: Mapping[tuple[int, int], SimulatedMatchup] = {
    (row[0], row[1]): SimulatedMatchup(*row) for row in _RAW_ROWS
}


def lookup(lower: int, higher: int) -> SimulatedMatchup | None:
    """Return the simulated matchup for an ordered handicap pair."""

    return MATCHUPS.get((lower, higher))


__all__ = ["HANDICAP_SET", "MATCHUPS", "SimulatedMatchup", "lookup"]
