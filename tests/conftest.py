from __future__ import annotations

from typing import Callable, Iterable, List, Mapping

import pytest

from golfcup.models import HOLES, Course, HoleInfo, Player, Score, Team

PARS = (4, 4, 3, 5, 4, 4, 3, 4, 5, 4, 4, 3, 5, 4, 4, 3, 4, 5)
STROKE_INDEXES = (7, 1, 15, 3, 11, 5, 17, 9, 13, 8, 2, 16, 4, 12, 6, 18, 10, 14)

ScoreFactory = Callable[..., List[Score]]


@pytest.fixture
def course() -> Course:
    holes = {
        number: HoleInfo(par=par, stroke_index=index)
        for number, par, index in zip(HOLES, PARS, STROKE_INDEXES)
    }
    return Course(id="course-1", name="Pinehurst No. 2", day=1, holes=holes, tees="Blue")


@pytest.fixture
def players() -> List[Player]:
    return [
        Player("p1", "Alice Ace", Team.SHAFT, 6.0, 6.0, "Alice", "Ace"),
        Player("p2", "Bob Bunker", Team.SHAFT, 14.0, 14.0, "Bob", "Bunker"),
        Player("p3", "Carl Chip", Team.BALLS, 8.0, 8.0, "Carl", "Chip"),
        Player("p4", "Dana Drive", Team.BALLS, 18.0, 18.0, "Dana", "Drive"),
    ]


@pytest.fixture
def make_scores() -> ScoreFactory:
    """Build score rows for one player from gross scores by hole.

    ``grosses`` is either a hole -> gross mapping or a sequence applied to
    holes 1, 2, ... in order.
    """

    def _factory(
        match_id: str, player_id: str, grosses: Mapping[int, int | None] | Iterable[int | None]
    ) -> List[Score]:
        if isinstance(grosses, Mapping):
            items = sorted(grosses.items())
        else:
            items = list(zip(HOLES, grosses))
        return [Score(match_id, player_id, hole, gross) for hole, gross in items]

    return _factory
