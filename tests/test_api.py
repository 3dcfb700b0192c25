from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def _teams(n: int):
    return [
        {"team_id": f"T{i:02d}", "team_name": f"Team {i}", "wins": n - i, "losses": i - 1}
        for i in range(1, n + 1)
    ]


def _prospects(n: int):
    return [{"prospect_id": f"P{r}", "name": f"Prospect {r}", "rank": r} for r in range(1, n + 1)]


def test_health(client) -> None:
    res = client.get("/api/rookie-draft/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_prize_spots(client) -> None:
    res = client.post("/api/rookie-draft/prize-spots", json={"total_prize_pool": 250, "total_collected": 500})
    assert res.status_code == 200
    assert res.json()["prize_spots"] == 1


def test_prize_spots_rejects_negative(client) -> None:
    res = client.post("/api/rookie-draft/prize-spots", json={"total_prize_pool": -1, "total_collected": 500})
    assert res.status_code == 422


def test_odds(client) -> None:
    res = client.post(
        "/api/rookie-draft/odds",
        json={"teams": _teams(12), "total_prize_pool": 12000, "total_collected": 8000},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["prize_spots"] == 3
    assert len(body["odds"]) == 9
    assert body["odds"][0]["team"]["team_id"] == "T12"
    assert sum(o["pct_first_pick"] for o in body["odds"]) == pytest.approx(100.0)


def test_odds_requires_prize_inputs(client) -> None:
    res = client.post("/api/rookie-draft/odds", json={"teams": _teams(4)})
    assert res.status_code == 400


def test_lottery(client) -> None:
    res = client.post(
        "/api/rookie-draft/lottery",
        json={"teams": _teams(12), "prize_spots": 3, "rng_seed": 10, "include_audit": True},
    )
    assert res.status_code == 200
    body = res.json()
    assert [r["pick"] for r in body["results"]] == list(range(1, 13))
    assert body["rng_seed"] == 10
    assert len(body["audit"]["draws"]) == 4

    again = client.post(
        "/api/rookie-draft/lottery",
        json={"teams": _teams(12), "prize_spots": 3, "rng_seed": 10},
    ).json()
    assert again["results"] == body["results"]
    assert "audit" not in again


def test_mock(client) -> None:
    order = [{"pick": i, "team_id": f"T{i}", "team_name": f"Team {i}"} for i in range(1, 6)]
    res = client.post(
        "/api/rookie-draft/mock",
        json={"pick_order": order, "prospects": _prospects(8), "rng_seed": 3},
    )
    assert res.status_code == 200
    picks = res.json()["picks"]
    assert [p["pick"] for p in picks] == [1, 2, 3, 4, 5]
    assert len({p["prospect"]["prospect_id"] for p in picks}) == 5


def test_mock_rejects_duplicate_picks(client) -> None:
    order = [{"pick": 1, "team_id": "A"}, {"pick": 1, "team_id": "B"}]
    res = client.post("/api/rookie-draft/mock", json={"pick_order": order, "prospects": _prospects(3)})
    assert res.status_code == 400


def test_mock_rejects_bad_rank(client) -> None:
    order = [{"pick": 1, "team_id": "A"}]
    bad = [{"prospect_id": "X", "name": "X", "rank": 0}]
    res = client.post("/api/rookie-draft/mock", json={"pick_order": order, "prospects": bad})
    assert res.status_code == 422


def test_mock_accepts_fractional_rank(client) -> None:
    order = [{"pick": 1, "team_id": "A"}, {"pick": 2, "team_id": "B"}]
    pool = [
        {"prospect_id": "Y", "name": "Y", "rank": 2.5},
        {"prospect_id": "X", "name": "X", "rank": 1},
    ]
    res = client.post("/api/rookie-draft/mock", json={"pick_order": order, "prospects": pool, "rng_seed": 3})
    assert res.status_code == 200
    ranks = sorted(p["prospect"]["rank"] for p in res.json()["picks"])
    assert ranks == [1, 2.5]


def test_run(client) -> None:
    res = client.post(
        "/api/rookie-draft/run",
        json={
            "teams": _teams(10),
            "total_prize_pool": 250,
            "total_collected": 500,
            "prospects": _prospects(12),
            "trades": [{"original_team_id": "T10", "current_owner_id": "T01"}],
            "rng_seed": 99,
        },
    )
    assert res.status_code == 200
    plan = res.json()["plan"]
    assert plan["prize_spots"] == 1
    assert len(plan["lottery_results"]) == 10
    assert len(plan["mock_picks"]) == 10
    traded = [r for r in plan["lottery_results"] if r["original_team_id"] == "T10"]
    assert len(traded) == 1
    assert traded[0]["team_id"] == "T01"
    assert traded[0]["via_team_name"] == "Team 10"
