from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException

from app.schemas.rookie_draft import (
    LotteryResultIn,
    PrizeSpotsRequest,
    ProspectIn,
    RookieDraftLotteryRequest,
    RookieDraftMockRequest,
    RookieDraftOddsRequest,
    RookieDraftRunRequest,
)
from rookie_draft.lottery import compute_lottery_odds
from rookie_draft.mock import run_mock_draft
from rookie_draft.pipeline import run_rookie_draft
from rookie_draft.standings import build_team_standings, classify_standings, get_prize_spots, rank_teams_best_to_worst
from rookie_draft.types import LotteryResult, PickTrade, Prospect

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_prize_spots(req: RookieDraftOddsRequest) -> int:
    if req.prize_spots is not None:
        return int(req.prize_spots)
    if req.total_prize_pool is None or req.total_collected is None:
        raise ValueError("prize_spots or both total_prize_pool and total_collected are required.")
    return get_prize_spots(req.total_prize_pool, req.total_collected)


def _to_prospects(items: List[ProspectIn]) -> List[Prospect]:
    return [Prospect(**p.model_dump()) for p in items]


def _to_trades(req: RookieDraftLotteryRequest) -> List[PickTrade]:
    return [PickTrade(**t.model_dump()) for t in req.trades]


def _to_pick_order(items: List[LotteryResultIn]) -> List[LotteryResult]:
    out: List[LotteryResult] = []
    for r in items:
        d = r.model_dump()
        if d.get("original_position") is None:
            d["original_position"] = d["pick"]
        out.append(LotteryResult(**d))
    return sorted(out, key=lambda x: x.pick)


def _check_unique_picks(order: List[LotteryResult]) -> None:
    picks = [r.pick for r in order]
    if len(set(picks)) != len(picks):
        raise ValueError("pick_order contains duplicate pick numbers.")


@router.get("/api/rookie-draft/health")
async def api_rookie_draft_health():
    return {"ok": True}


@router.post("/api/rookie-draft/prize-spots")
async def api_rookie_draft_prize_spots(req: PrizeSpotsRequest):
    """Teams "in the money" for the given prize pool."""
    try:
        spots = get_prize_spots(req.total_prize_pool, req.total_collected)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"ok": True, "prize_spots": int(spots)}


@router.post("/api/rookie-draft/odds")
async def api_rookie_draft_odds(req: RookieDraftOddsRequest):
    """Lottery/money partition and first-pick odds (no draw)."""
    try:
        spots = _resolve_prize_spots(req)
        standings = rank_teams_best_to_worst(build_team_standings(t.model_dump() for t in req.teams))
        partition = classify_standings(standings, spots)
        odds = compute_lottery_odds(partition.lottery_teams)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "ok": True,
        "prize_spots": int(spots),
        **partition.to_dict(),
        "odds": [o.to_dict() for o in odds],
    }


@router.post("/api/rookie-draft/lottery")
async def api_rookie_draft_lottery(req: RookieDraftLotteryRequest):
    """Run the lottery and return the full draft order."""
    try:
        plan = run_rookie_draft(
            [t.model_dump() for t in req.teams],
            prize_spots=_resolve_prize_spots(req),
            trades=_to_trades(req),
            rng_seed=req.rng_seed,
            include_audit=req.include_audit,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    out: Dict[str, Any] = {
        "ok": True,
        "rng_seed": plan.rng_seed,
        "prize_spots": int(plan.prize_spots),
        "odds": [o.to_dict() for o in plan.odds],
        "results": [r.to_dict() for r in plan.lottery_results],
    }
    if req.include_audit:
        out["audit"] = dict(plan.audit)
    return out


@router.post("/api/rookie-draft/mock")
async def api_rookie_draft_mock(req: RookieDraftMockRequest):
    """Mock draft over a finalized pick order."""
    try:
        order = _to_pick_order(req.pick_order)
        _check_unique_picks(order)
        picks = run_mock_draft(order, _to_prospects(req.prospects), rng_seed=req.rng_seed)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"ok": True, "picks": [p.to_dict() for p in picks]}


@router.post("/api/rookie-draft/run")
async def api_rookie_draft_run(req: RookieDraftRunRequest):
    """Standings -> lottery -> mock draft in one call."""
    try:
        plan = run_rookie_draft(
            [t.model_dump() for t in req.teams],
            prize_spots=_resolve_prize_spots(req),
            prospects=_to_prospects(req.prospects),
            trades=_to_trades(req),
            rng_seed=req.rng_seed,
            include_audit=req.include_audit,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("api_rookie_draft_run: teams=%s seed=%s", len(req.teams), plan.rng_seed)
    return {"ok": True, "plan": plan.to_dict()}
