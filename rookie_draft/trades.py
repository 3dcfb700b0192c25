from __future__ import annotations

"""Traded rookie picks.

The lottery orders picks by the team that earned them. When a pick has changed
hands, the current owner makes the selection "via" the original team.
"""

from dataclasses import replace
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .types import LotteryResult, PickTrade, TeamId, norm_team_id

UNKNOWN_OWNER_NAME = "Unknown"


def index_pick_trades(trades: Iterable[PickTrade]) -> Dict[TeamId, PickTrade]:
    """Key trades by original team. A later entry for the same team wins."""
    return {t.original_team_id: t for t in trades}


def apply_pick_trades(
    results: Sequence[LotteryResult],
    trades: Iterable[PickTrade],
    *,
    team_names: Optional[Mapping[TeamId, str]] = None,
) -> List[LotteryResult]:
    """Return results with traded picks reassigned to their current owners.

    Pick number, seed and movement stay with the pick. The original team is kept
    on original_team_id / via_team_name.
    """
    by_team = index_pick_trades(trades)
    names = {norm_team_id(k): str(v) for k, v in dict(team_names or {}).items()}

    out: List[LotteryResult] = []
    for r in results:
        trade = by_team.get(r.team_id)
        if trade is None or not trade.is_traded:
            out.append(r)
            continue
        owner_name = trade.current_owner_name or names.get(trade.current_owner_id) or UNKNOWN_OWNER_NAME
        out.append(
            replace(
                r,
                team_id=trade.current_owner_id,
                team_name=owner_name,
                original_team_id=r.team_id,
                via_team_name=r.team_name,
            )
        )
    return out
