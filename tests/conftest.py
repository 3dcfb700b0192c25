from __future__ import annotations

from typing import Iterator, List, Sequence

import pytest

from rookie_draft.types import Prospect, TeamStanding


class ScriptedRng:
    """Deterministic stand-in for random.Random that replays fixed draws."""

    def __init__(self, numbers: Sequence[int] = (), floats: Sequence[float] = ()) -> None:
        self._numbers: Iterator[int] = iter(numbers)
        self._floats: Iterator[float] = iter(floats)

    def randrange(self, stop: int) -> int:
        v = next(self._numbers)
        assert 0 <= v < stop
        return v

    def random(self) -> float:
        return next(self._floats)


def _standings_best_to_worst(n: int) -> List[TeamStanding]:
    # T01 is best (n-1 wins), T{n} is worst (0 wins).
    return [
        TeamStanding(team_id=f"T{i:02d}", team_name=f"Team {i}", wins=n - i, losses=i - 1)
        for i in range(1, n + 1)
    ]


def _prospects(n: int) -> List[Prospect]:
    return [Prospect(prospect_id=f"P{r:02d}", name=f"Prospect {r}", rank=r) for r in range(1, n + 1)]


@pytest.fixture
def make_standings():
    return _standings_best_to_worst


@pytest.fixture
def make_prospects():
    return _prospects


@pytest.fixture
def scripted_rng():
    return ScriptedRng
