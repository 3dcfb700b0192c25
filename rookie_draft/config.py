from __future__ import annotations

"""Tuning constants for the rookie draft lottery and mock draft.

This module is the single place these numbers live. They are business rules,
not runtime settings: nothing here is read from the environment.

Lottery
-------
- 14 ping-pong balls give 1001 four-number combinations.
- One combination (11-12-13-14) is unused, leaving 1000 to distribute.
- Leagues with fewer than 14 lottery teams use the first N entries.

Mock draft
----------
- Per-slot sigma grows linearly from SIGMA_MIN (pick 1) to SIGMA_MAX (last pick).
"""

from typing import Tuple

# ---------------------------------------------------------------------------
# Lottery
# ---------------------------------------------------------------------------

# Combination counts by pre-lottery seed (worst -> best record).
LOTTERY_COMBINATIONS: Tuple[int, ...] = (
    140, 140, 140,  # 14.0% each
    125,            # 12.5%
    105,            # 10.5%
    90,             #  9.0%
    75,             #  7.5%
    60,             #  6.0%
    45,             #  4.5%
    30,             #  3.0%
    20,             #  2.0%
    15,             #  1.5%
    10,             #  1.0%
    5,              #  0.5%
)

# C(14, 4); the table above assigns all but one of these.
LOTTERY_POSSIBLE_COMBINATIONS: int = 1001

# Picks decided by the draw. The rest of the lottery goes by inverse record.
LOTTERY_DRAWS: int = 4

# ---------------------------------------------------------------------------
# Prize zones
# ---------------------------------------------------------------------------

# Pool declined (pool < collected): 1 spot below this amount, otherwise 2.
PRIZE_POOL_DECLINED_SMALL_THRESHOLD: float = 300.0
PRIZE_SPOTS_DECLINED_SMALL: int = 1
PRIZE_SPOTS_DECLINED: int = 2

# Pool at or above this amount. Still top 3; 4th+ splits are too thin to count.
PRIZE_POOL_LARGE_THRESHOLD: float = 10000.0
PRIZE_SPOTS_LARGE: int = 3

PRIZE_SPOTS_DEFAULT: int = 3

# ---------------------------------------------------------------------------
# Mock draft
# ---------------------------------------------------------------------------

# Pick 1: best available ~80%. Last pick: much flatter.
MOCK_SIGMA_MIN: float = 0.6
MOCK_SIGMA_MAX: float = 2.5

# Used when the draft has a single pick (no slope to interpolate).
MOCK_SIGMA_SINGLE_PICK: float = 0.5
