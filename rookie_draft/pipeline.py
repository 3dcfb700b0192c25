from __future__ import annotations

"""rookie_draft.pipeline

End-to-end orchestration for one rookie draft run:
  1) records -> standings (best -> worst)
  2) prize pool -> prize spots -> lottery/money partition
  3) odds table (display) + lottery draw (order)
  4) traded picks -> current owners
  5) mock draft over the prospect pool (optional)

Notes:
- Persistence is the host application's job. This returns a RookieDraftPlan.
- The lottery and the mock draft use separate generators derived from one
  rng_seed, so re-running the mock with the same seed keeps the same order.
"""

import logging
import random
from typing import Any, Iterable, Mapping, Optional, Sequence

from .lottery import compute_lottery_odds, run_lottery_with_audit
from .mock import run_mock_draft
from .rng import resolve_rng, stable_seed
from .standings import build_team_standings, classify_standings, get_prize_spots, rank_teams_best_to_worst
from .trades import apply_pick_trades
from .types import PickTrade, Prospect, RookieDraftPlan, TeamId

logger = logging.getLogger(__name__)

_LOTTERY_STREAM = "lottery"
_MOCK_STREAM = "mock"


def lottery_seed(rng_seed: int) -> int:
    return stable_seed(int(rng_seed), _LOTTERY_STREAM)


def mock_seed(rng_seed: int) -> int:
    return stable_seed(int(rng_seed), _MOCK_STREAM)


def run_rookie_draft(
    records: Iterable[Any],
    *,
    total_prize_pool: Optional[float] = None,
    total_collected: Optional[float] = None,
    prize_spots: Optional[int] = None,
    prospects: Sequence[Prospect] = (),
    trades: Iterable[PickTrade] = (),
    rng: Optional[random.Random] = None,
    rng_seed: Optional[int] = None,
    include_audit: bool = False,
) -> RookieDraftPlan:
    """Compute the full rookie draft plan.

    Args:
        records: team records (mappings, objects or TeamStanding), any order.
        total_prize_pool / total_collected: used for prize spots unless prize_spots is given.
        prize_spots: explicit override of the prize-zone rule.
        prospects: prospect pool; empty skips the mock draft.
        trades: current ownership of traded picks.
        rng: injected generator; the run seed is drawn from it. Exclusive with rng_seed.
        rng_seed: reproducibility seed; a fresh one is drawn (and reported) when omitted.
        include_audit: attach lottery draw telemetry to the plan.

    Returns:
        RookieDraftPlan
    """
    gen = resolve_rng(rng, rng_seed)
    seed = int(rng_seed) if rng_seed is not None else gen.getrandbits(63)

    standings = rank_teams_best_to_worst(build_team_standings(records))
    names: Mapping[TeamId, str] = {t.team_id: t.team_name for t in standings}

    if prize_spots is None:
        if total_prize_pool is None or total_collected is None:
            raise ValueError("either prize_spots or both total_prize_pool and total_collected are required")
        spots = get_prize_spots(total_prize_pool, total_collected)
    else:
        spots = int(prize_spots)

    partition = classify_standings(standings, spots)
    odds = compute_lottery_odds(partition.lottery_teams)

    results, audit = run_lottery_with_audit(
        partition.lottery_teams,
        partition.money_teams,
        rng_seed=lottery_seed(seed),
    )
    results = apply_pick_trades(results, trades, team_names=names)

    mock_picks = run_mock_draft(results, prospects, rng_seed=mock_seed(seed)) if prospects else []

    logger.info(
        "run_rookie_draft: teams=%s prize_spots=%s lottery=%s picks=%s mock_picks=%s seed=%s",
        len(standings),
        spots,
        len(partition.lottery_teams),
        len(results),
        len(mock_picks),
        seed,
    )

    return RookieDraftPlan(
        standings=tuple(standings),
        prize_spots=spots,
        lottery_team_ids=tuple(t.team_id for t in partition.lottery_teams),
        money_team_ids=tuple(t.team_id for t in partition.money_teams),
        odds=tuple(odds),
        lottery_results=tuple(results),
        mock_picks=tuple(mock_picks),
        rng_seed=seed,
        audit=(audit if include_audit else {}),
    )
