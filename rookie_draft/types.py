from __future__ import annotations

"""Rookie draft domain types.

This module is deliberately dependency-light so it can be imported by:
- rookie_draft.standings (standings construction + prize-zone partition)
- rookie_draft.lottery   (odds table + weighted draw)
- rookie_draft.mock      (mock draft simulation)
- rookie_draft.pipeline  (end-to-end orchestration)
- app.*                  (FastAPI transport)

Conventions:
- team_id is an opaque string supplied by the host league (not normalized beyond str/strip)
- pick is overall 1..N (single round), contiguous across lottery and money teams
- original_position is the pre-lottery seed, 1 = worst record among lottery teams
- all records are frozen; engine functions return new collections
"""

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union


TeamId = str
ProspectId = str


def norm_team_id(v: Any) -> str:
    """Normalize team id into the canonical string form used by the engine."""
    return str(v if v is not None else "").strip()


def _to_int(x: Any, default: int = 0) -> int:
    try:
        if x is None or isinstance(x, bool):
            return default
        return int(x)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True, slots=True)
class TeamStanding:
    """Final regular-season record snapshot.

    pct counts a tie as half a win. When pct is omitted it is derived from the record.
    """

    team_id: TeamId
    team_name: str
    wins: int
    losses: int
    ties: int = 0
    pct: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "team_id", norm_team_id(self.team_id))
        object.__setattr__(self, "team_name", str(self.team_name or ""))
        object.__setattr__(self, "wins", max(0, _to_int(self.wins)))
        object.__setattr__(self, "losses", max(0, _to_int(self.losses)))
        object.__setattr__(self, "ties", max(0, _to_int(self.ties)))
        if self.pct is None:
            object.__setattr__(self, "pct", self._record_pct())
        else:
            object.__setattr__(self, "pct", float(self.pct))

    @property
    def games_played(self) -> int:
        return int(self.wins + self.losses + self.ties)

    def _record_pct(self) -> float:
        gp = self.games_played
        if gp <= 0:
            return 0.0
        return (float(self.wins) + 0.5 * float(self.ties)) / float(gp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "team_name": self.team_name,
            "wins": int(self.wins),
            "losses": int(self.losses),
            "ties": int(self.ties),
            "games_played": int(self.games_played),
            "pct": float(self.pct or 0.0),
        }


@dataclass(frozen=True, slots=True)
class LotteryPartition:
    """Standings split at the prize line.

    lottery_teams: worst -> best (index 0 is the single worst record)
    money_teams:   best -> worst (index 0 won the league)
    """

    lottery_teams: Tuple[TeamStanding, ...]
    money_teams: Tuple[TeamStanding, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lottery_teams": [t.to_dict() for t in self.lottery_teams],
            "money_teams": [t.to_dict() for t in self.money_teams],
        }


@dataclass(frozen=True, slots=True)
class LotteryOdds:
    team: TeamStanding
    combinations: int
    pct_first_pick: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team": self.team.to_dict(),
            "combinations": int(self.combinations),
            "pct_first_pick": float(self.pct_first_pick),
        }


@dataclass(frozen=True, slots=True)
class LotteryResult:
    """One slot of the final draft order.

    Notes:
      - is_lottery_winner is True only for slots decided by the draw (picks 1..4).
      - movement = original_position - pick (positive = moved up).
      - original_team_id / via_team_name are set only when the pick was traded;
        team_id/team_name then name the current owner.
    """

    pick: int
    team_id: TeamId
    team_name: str
    is_lottery_winner: bool
    original_position: int
    movement: int
    original_team_id: Optional[TeamId] = None
    via_team_name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pick", int(self.pick))
        object.__setattr__(self, "team_id", norm_team_id(self.team_id))
        object.__setattr__(self, "is_lottery_winner", bool(self.is_lottery_winner))
        object.__setattr__(self, "original_position", int(self.original_position))
        object.__setattr__(self, "movement", int(self.movement))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pick": int(self.pick),
            "team_id": self.team_id,
            "team_name": self.team_name,
            "is_lottery_winner": bool(self.is_lottery_winner),
            "original_position": int(self.original_position),
            "movement": int(self.movement),
            "original_team_id": self.original_team_id,
            "via_team_name": self.via_team_name,
        }


@dataclass(frozen=True, slots=True)
class Prospect:
    """Incoming prospect with a consensus rank (1 = best).

    rank is any finite real number >= 1; anything else raises instead of being coerced.
    """

    prospect_id: ProspectId
    name: str
    rank: Union[int, float]
    position: Optional[str] = None
    school: Optional[str] = None
    draft_projection: Optional[str] = None
    meta: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "prospect_id", str(self.prospect_id))
        if isinstance(self.rank, bool) or not isinstance(self.rank, numbers.Real):
            raise ValueError(f"prospect rank must be a number, got {self.rank!r}")
        if not math.isfinite(self.rank):
            raise ValueError(f"prospect rank must be finite, got {self.rank!r}")
        if self.rank < 1:
            raise ValueError(f"prospect rank must be >= 1, got {self.rank} ({self.prospect_id})")
        if not isinstance(self.meta, dict):
            object.__setattr__(self, "meta", {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prospect_id": self.prospect_id,
            "name": self.name,
            "rank": self.rank,
            "position": self.position,
            "school": self.school,
            "draft_projection": self.draft_projection,
            "meta": dict(self.meta),
        }


@dataclass(frozen=True, slots=True)
class MockPick:
    pick: int
    team_id: TeamId
    team_name: str
    prospect: Prospect
    was_expected: bool
    via_team_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pick": int(self.pick),
            "team_id": self.team_id,
            "team_name": self.team_name,
            "prospect": self.prospect.to_dict(),
            "was_expected": bool(self.was_expected),
            "via_team_name": self.via_team_name,
        }


@dataclass(frozen=True, slots=True)
class PickTrade:
    """Current ownership of a team's rookie pick for the upcoming draft."""

    original_team_id: TeamId
    current_owner_id: TeamId
    current_owner_name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "original_team_id", norm_team_id(self.original_team_id))
        object.__setattr__(self, "current_owner_id", norm_team_id(self.current_owner_id))

    @property
    def is_traded(self) -> bool:
        return self.current_owner_id != self.original_team_id


@dataclass(frozen=True, slots=True)
class RookieDraftPlan:
    """Full output of one pipeline run (standings -> lottery -> mock)."""

    standings: Tuple[TeamStanding, ...]
    prize_spots: int
    lottery_team_ids: Tuple[TeamId, ...]
    money_team_ids: Tuple[TeamId, ...]
    odds: Tuple[LotteryOdds, ...]
    lottery_results: Tuple[LotteryResult, ...]
    mock_picks: Tuple[MockPick, ...] = ()
    rng_seed: Optional[int] = None
    audit: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "standings": [t.to_dict() for t in self.standings],
            "prize_spots": int(self.prize_spots),
            "lottery_team_ids": list(self.lottery_team_ids),
            "money_team_ids": list(self.money_team_ids),
            "odds": [o.to_dict() for o in self.odds],
            "lottery_results": [r.to_dict() for r in self.lottery_results],
            "mock_picks": [p.to_dict() for p in self.mock_picks],
            "rng_seed": self.rng_seed,
            "audit": dict(self.audit) if isinstance(self.audit, dict) else {},
        }
