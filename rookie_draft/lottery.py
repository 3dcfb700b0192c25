from __future__ import annotations

"""Rookie Draft Lottery (pure).

NBA-style ping-pong ball lottery applied to a league of any size.
  seeds 1..3: 14.0%
  seed 4:     12.5%
  seed 5:     10.5%
  seed 6:      9.0%
  seed 7:      7.5%
  seed 8:      6.0%
  seed 9:      4.5%
  seed 10:     3.0%
  seed 11:     2.0%
  seed 12:     1.5%
  seed 13:     1.0%
  seed 14:     0.5%

With fewer than 14 lottery teams only the first N table entries are used and
the odds renormalize over their sum. A drawn combination that maps to a team
already drawn is thrown out and redrawn.

Input contract:
  - lottery_teams: worst -> best (index 0 = worst record).
  - money_teams:   best -> worst (index 0 = league winner).
Output:
  - LotteryResult list sorted by pick, covering every team exactly once.
"""

import logging
import random
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from . import config
from .rng import resolve_rng
from .types import LotteryOdds, LotteryResult, TeamStanding

logger = logging.getLogger(__name__)


def _combinations_for(n_teams: int, combinations_by_seed: Sequence[int]) -> List[int]:
    base = [int(x) for x in list(combinations_by_seed)]
    if any(c < 0 for c in base):
        raise ValueError(f"combinations_by_seed must be non-negative, got {base}")
    n = min(int(n_teams), len(base))
    return base[:n]


def compute_lottery_odds(
    lottery_teams: Sequence[TeamStanding],
    *,
    combinations_by_seed: Sequence[int] = config.LOTTERY_COMBINATIONS,
) -> List[LotteryOdds]:
    """Assign combinations and first-pick percentage to each lottery team.

    Only the first len(combinations_by_seed) teams (worst -> best) get odds;
    teams past the table are left out of the returned list.
    """
    teams = list(lottery_teams)
    combos = _combinations_for(len(teams), combinations_by_seed)
    total = sum(combos)
    if total <= 0:
        return []

    return [
        LotteryOdds(
            team=team,
            combinations=int(combos[i]),
            pct_first_pick=(float(combos[i]) / float(total)) * 100.0,
        )
        for i, team in enumerate(teams[: len(combos)])
    ]


def _seed_index_for_number(number: int, combos: Sequence[int]) -> int:
    """Map a combination number in [0, sum(combos)) to a 0-based seed index."""
    cumulative = 0
    for i, c in enumerate(combos):
        cumulative += c
        if number < cumulative:
            return i
    raise RuntimeError(f"combination number {number} outside table total {cumulative}")


def _draw_one(
    rng: random.Random,
    combos: Sequence[int],
    total_combos: int,
    drawn: Set[int],
) -> Tuple[int, List[int]]:
    """Draw until a not-yet-drawn seed comes up. Returns (seed_index, rejected_numbers)."""
    rejected: List[int] = []
    while True:
        number = rng.randrange(total_combos)
        idx = _seed_index_for_number(number, combos)
        if idx not in drawn:
            return idx, rejected
        rejected.append(number)


def run_lottery_with_audit(
    lottery_teams: Sequence[TeamStanding],
    money_teams: Sequence[TeamStanding] = (),
    *,
    rng: Optional[random.Random] = None,
    rng_seed: Optional[int] = None,
    combinations_by_seed: Sequence[int] = config.LOTTERY_COMBINATIONS,
    lottery_draws: int = config.LOTTERY_DRAWS,
) -> Tuple[List[LotteryResult], Dict[str, Any]]:
    """Run the lottery and return (results, audit).

    Order built:
      1) picks 1..min(lottery_draws, N) by weighted draw without replacement
      2) remaining table teams by inverse record (worst first)
      3) lottery teams past the table (no odds), worst first
      4) money teams, worst first (league winner picks last)

    Parameters
    ----------
    rng / rng_seed:
        Injected generator or a seed for a private one. Never the global RNG.
    """
    gen = resolve_rng(rng, rng_seed)

    teams = list(lottery_teams)
    money = list(money_teams)
    combos = _combinations_for(len(teams), combinations_by_seed)
    n = len(combos)
    total_combos = sum(combos)
    # Seeds with zero combinations can never come up; don't wait for them.
    drawable = sum(1 for c in combos if c > 0)
    draws = min(int(lottery_draws), drawable)

    results: List[LotteryResult] = []
    drawn: Set[int] = set()
    audit: Dict[str, Any] = {
        "method": "combinations_redraw",
        "combinations_by_seed": list(combos),
        "total_combinations": int(total_combos),
        "draws": [],
    }

    for pick in range(1, draws + 1):
        idx, rejected = _draw_one(gen, combos, total_combos, drawn)
        drawn.add(idx)
        team = teams[idx]
        results.append(
            LotteryResult(
                pick=pick,
                team_id=team.team_id,
                team_name=team.team_name,
                is_lottery_winner=True,
                original_position=idx + 1,
                movement=(idx + 1) - pick,
            )
        )
        audit["draws"].append(
            {
                "pick": pick,
                "seed": idx + 1,
                "team_id": team.team_id,
                "rejected_numbers": rejected,
            }
        )
        logger.debug("run_lottery: pick=%s seed=%s team=%s redraws=%s", pick, idx + 1, team.team_id, len(rejected))

    pick_no = draws + 1
    for idx in range(n):
        if idx in drawn:
            continue
        team = teams[idx]
        results.append(
            LotteryResult(
                pick=pick_no,
                team_id=team.team_id,
                team_name=team.team_name,
                is_lottery_winner=False,
                original_position=idx + 1,
                movement=(idx + 1) - pick_no,
            )
        )
        pick_no += 1

    overflow = teams[n:]
    if overflow:
        logger.warning(
            "run_lottery: %s lottery teams exceed the %s-seed table; they pick after the table without odds",
            len(overflow),
            n,
        )
        audit["unweighted_team_ids"] = [t.team_id for t in overflow]
    for offset, team in enumerate(overflow):
        position = n + offset + 1
        results.append(
            LotteryResult(
                pick=pick_no,
                team_id=team.team_id,
                team_name=team.team_name,
                is_lottery_winner=False,
                original_position=position,
                movement=position - pick_no,
            )
        )
        pick_no += 1

    # Money teams: worst -> best, no movement by definition.
    for team in reversed(money):
        results.append(
            LotteryResult(
                pick=pick_no,
                team_id=team.team_id,
                team_name=team.team_name,
                is_lottery_winner=False,
                original_position=pick_no,
                movement=0,
            )
        )
        pick_no += 1

    results.sort(key=lambda r: r.pick)

    expected = list(range(1, len(teams) + len(money) + 1))
    if [r.pick for r in results] != expected:
        raise RuntimeError("lottery picks must be contiguous 1..N")

    return results, audit


def run_lottery(
    lottery_teams: Sequence[TeamStanding],
    money_teams: Sequence[TeamStanding] = (),
    *,
    rng: Optional[random.Random] = None,
    rng_seed: Optional[int] = None,
    combinations_by_seed: Sequence[int] = config.LOTTERY_COMBINATIONS,
) -> List[LotteryResult]:
    """Run the lottery and return the full draft order sorted by pick."""
    results, _ = run_lottery_with_audit(
        lottery_teams,
        money_teams,
        rng=rng,
        rng_seed=rng_seed,
        combinations_by_seed=combinations_by_seed,
    )
    return results
