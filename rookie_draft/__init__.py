"""Rookie draft package.

Modules:
  - types     : value dataclasses (TeamStanding, LotteryOdds, LotteryResult, Prospect, MockPick, ...)
  - config    : lottery combination table, prize thresholds, mock draft sigma bounds
  - standings : standings ranking, prize spots, lottery/money partition (pure)
  - lottery   : odds table + weighted top-4 draw with redraws (pure)
  - mock      : Gaussian-weighted mock draft (pure)
  - trades    : traded pick ownership ("via" picks)
  - rng       : injectable/seeded random sources
  - pipeline  : end-to-end orchestration helpers
"""

from __future__ import annotations

from .lottery import compute_lottery_odds, run_lottery, run_lottery_with_audit
from .mock import run_mock_draft
from .pipeline import run_rookie_draft
from .standings import build_team_standings, classify_standings, get_prize_spots, rank_teams_best_to_worst
from .types import (
    LotteryOdds,
    LotteryPartition,
    LotteryResult,
    MockPick,
    PickTrade,
    Prospect,
    RookieDraftPlan,
    TeamStanding,
)

__all__ = [
    "LotteryOdds",
    "LotteryPartition",
    "LotteryResult",
    "MockPick",
    "PickTrade",
    "Prospect",
    "RookieDraftPlan",
    "TeamStanding",
    "build_team_standings",
    "classify_standings",
    "compute_lottery_odds",
    "get_prize_spots",
    "rank_teams_best_to_worst",
    "run_lottery",
    "run_lottery_with_audit",
    "run_mock_draft",
    "run_rookie_draft",
]
