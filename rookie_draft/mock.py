from __future__ import annotations

"""Mock draft simulation (pure).

Each slot picks from the remaining prospects with a half-Gaussian weight over
distance from best available:

    weight(idx) = exp(-(idx^2) / (2 * sigma^2)),   idx 0 = best remaining

sigma grows linearly with the slot, so the top of the draft sticks close to the
board and later picks see reaches and slides. The best remaining prospect
always carries the largest weight.

  pick 1  (sigma ~0.6): best available ~80%, within one spot ~95%
  pick 6  (sigma ~1.3): best available ~45%, top two ~77%
  last    (sigma  2.5): much flatter
"""

import logging
import math
import random
from typing import List, Optional, Sequence

from . import config
from .rng import resolve_rng
from .types import LotteryResult, MockPick, Prospect

logger = logging.getLogger(__name__)


def pick_sigma(slot: int, total_picks: int) -> float:
    """Spread of the selection curve at a 1-based slot."""
    if total_picks <= 1:
        return config.MOCK_SIGMA_SINGLE_PICK
    t = (float(slot) - 1.0) / (float(total_picks) - 1.0)
    return config.MOCK_SIGMA_MIN + t * (config.MOCK_SIGMA_MAX - config.MOCK_SIGMA_MIN)


def selection_weights(n_remaining: int, sigma: float) -> List[float]:
    """Normalized selection probabilities for positions 0..n_remaining-1."""
    two_sigma_sq = 2.0 * sigma * sigma
    weights = [math.exp(-(idx * idx) / two_sigma_sq) for idx in range(n_remaining)]
    total = sum(weights)
    return [w / total for w in weights]


def _weighted_index(rng: random.Random, probs: Sequence[float]) -> int:
    r = rng.random()
    cumulative = 0.0
    for i, p in enumerate(probs):
        cumulative += p
        if r < cumulative:
            return i
    # float rounding left r just above the last cumulative sum; take best available
    return 0


def run_mock_draft(
    pick_order: Sequence[LotteryResult],
    prospects: Sequence[Prospect],
    *,
    rng: Optional[random.Random] = None,
    rng_seed: Optional[int] = None,
) -> List[MockPick]:
    """Simulate who each pick takes.

    Parameters
    ----------
    pick_order:
        Final order, ascending by pick.
    prospects:
        Prospect pool in any order. Not modified.

    Returns
    -------
    List[MockPick]
        One entry per pick until the order or the pool runs out.
    """
    gen = resolve_rng(rng, rng_seed)

    order = list(pick_order)
    num_picks = len(order)
    # Working copy sorted by consensus rank; removing from the front keeps it sorted.
    remaining: List[Prospect] = sorted(prospects, key=lambda p: p.rank)

    picks: List[MockPick] = []
    for i, slot_entry in enumerate(order):
        if not remaining:
            logger.info("run_mock_draft: prospect pool exhausted after %s of %s picks", len(picks), num_picks)
            break

        slot = i + 1
        sigma = pick_sigma(slot, num_picks)
        probs = selection_weights(len(remaining), sigma)
        idx = _weighted_index(gen, probs)
        selected = remaining.pop(idx)

        picks.append(
            MockPick(
                pick=slot_entry.pick,
                team_id=slot_entry.team_id,
                team_name=slot_entry.team_name,
                prospect=selected,
                was_expected=(selected.rank == slot),
                via_team_name=slot_entry.via_team_name,
            )
        )
        logger.debug(
            "run_mock_draft: pick=%s team=%s prospect=%s rank=%s sigma=%.3f",
            slot_entry.pick,
            slot_entry.team_id,
            selected.prospect_id,
            selected.rank,
            sigma,
        )

    return picks
