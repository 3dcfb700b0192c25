from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class TeamRecordIn(BaseModel):
    team_id: str
    team_name: str = ""
    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    ties: int = Field(0, ge=0)


class ProspectIn(BaseModel):
    prospect_id: str
    name: str
    rank: float = Field(..., ge=1, allow_inf_nan=False)  # consensus rank, 1 = best
    position: Optional[str] = None
    school: Optional[str] = None
    draft_projection: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)


class PickTradeIn(BaseModel):
    original_team_id: str
    current_owner_id: str
    current_owner_name: Optional[str] = None


class LotteryResultIn(BaseModel):
    pick: int = Field(..., ge=1)
    team_id: str
    team_name: str = ""
    is_lottery_winner: bool = False
    original_position: Optional[int] = None  # default: pick
    movement: int = 0
    original_team_id: Optional[str] = None
    via_team_name: Optional[str] = None


class PrizeSpotsRequest(BaseModel):
    total_prize_pool: float = Field(..., ge=0)
    total_collected: float = Field(..., ge=0)


class RookieDraftOddsRequest(BaseModel):
    # Any order; the server ranks best -> worst.
    teams: List[TeamRecordIn] = Field(default_factory=list)
    # Either an explicit prize_spots, or both prize figures.
    prize_spots: Optional[int] = Field(None, ge=0)
    total_prize_pool: Optional[float] = Field(None, ge=0)
    total_collected: Optional[float] = Field(None, ge=0)


class RookieDraftLotteryRequest(RookieDraftOddsRequest):
    trades: List[PickTradeIn] = Field(default_factory=list)
    rng_seed: Optional[int] = None
    include_audit: bool = False


class RookieDraftMockRequest(BaseModel):
    pick_order: List[LotteryResultIn] = Field(default_factory=list)
    prospects: List[ProspectIn] = Field(default_factory=list)
    rng_seed: Optional[int] = None


class RookieDraftRunRequest(RookieDraftLotteryRequest):
    prospects: List[ProspectIn] = Field(default_factory=list)
