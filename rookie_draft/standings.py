from __future__ import annotations

"""Rookie draft standings utilities (pure).

This module turns final regular-season records into the ordered standings the
lottery consumes, and splits them at the prize line.

Design:
 - No I/O here. Records are supplied by the host league.
 - Inputs are never sorted or mutated in place; every helper returns new collections.
 - classify_standings() trusts that its input is already ranked best -> worst.
"""

import logging
from typing import Any, Iterable, List, Mapping, Sequence

from . import config
from .types import LotteryPartition, TeamStanding, norm_team_id

logger = logging.getLogger(__name__)


def _field(row: Any, key: str, default: Any = None) -> Any:
    if isinstance(row, Mapping):
        return row.get(key, default)
    return getattr(row, key, default)


def build_team_standings(records: Iterable[Any]) -> List[TeamStanding]:
    """Build TeamStanding snapshots from raw team records.

    Each record may be a mapping or an object exposing team_id, team_name,
    wins, losses and ties. Missing counts default to 0. TeamStanding entries
    pass through as-is.
    """
    out: List[TeamStanding] = []
    for row in records:
        if row is None:
            continue
        if isinstance(row, TeamStanding):
            out.append(row)
            continue
        out.append(
            TeamStanding(
                team_id=norm_team_id(_field(row, "team_id")),
                team_name=str(_field(row, "team_name") or _field(row, "name") or ""),
                wins=_field(row, "wins", 0),
                losses=_field(row, "losses", 0),
                ties=_field(row, "ties", 0),
            )
        )
    return out


def rank_teams_best_to_worst(standings: Iterable[TeamStanding]) -> List[TeamStanding]:
    """Return standings sorted best -> worst.

    Order: pct desc, then wins desc. Teams still tied keep their input order.
    """
    return sorted(standings, key=lambda t: (-(t.pct or 0.0), -int(t.wins)))


def rank_teams_worst_to_best(standings: Iterable[TeamStanding]) -> List[TeamStanding]:
    return list(reversed(rank_teams_best_to_worst(standings)))


def get_prize_spots(total_prize_pool: float, total_collected: float) -> int:
    """Number of teams "in the money" for the season.

    - Pool declined below what was collected: 1 spot under the small threshold, else 2.
    - Pool at or above the large threshold: 3.
    - Otherwise: 3.
    """
    pool = float(total_prize_pool)
    collected = float(total_collected)
    if pool < 0 or collected < 0:
        raise ValueError(
            f"prize figures must be non-negative, got pool={pool} collected={collected}"
        )

    if pool < collected:
        if pool < config.PRIZE_POOL_DECLINED_SMALL_THRESHOLD:
            return config.PRIZE_SPOTS_DECLINED_SMALL
        return config.PRIZE_SPOTS_DECLINED
    if pool >= config.PRIZE_POOL_LARGE_THRESHOLD:
        return config.PRIZE_SPOTS_LARGE
    return config.PRIZE_SPOTS_DEFAULT


def classify_standings(ranked_teams: Sequence[TeamStanding], prize_spots: int) -> LotteryPartition:
    """Split standings (best -> worst) into money teams and lottery teams.

    Returns
    -------
    LotteryPartition
        money_teams:   the first prize_spots entries, best -> worst.
        lottery_teams: everyone else, reversed so index 0 is the worst record.
    """
    spots = int(prize_spots)
    if spots < 0:
        raise ValueError(f"prize_spots must be >= 0, got {spots}")

    ranked = list(ranked_teams)
    money = tuple(ranked[:spots])
    lottery = tuple(reversed(ranked[spots:]))

    logger.debug(
        "classify_standings: teams=%s prize_spots=%s lottery=%s money=%s",
        len(ranked),
        spots,
        len(lottery),
        len(money),
    )
    return LotteryPartition(lottery_teams=lottery, money_teams=money)
