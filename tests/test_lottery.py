from __future__ import annotations

import random
from collections import Counter

import pytest

from rookie_draft import config
from rookie_draft.lottery import compute_lottery_odds, run_lottery, run_lottery_with_audit
from rookie_draft.standings import classify_standings


def _partition(make_standings, n_teams: int, prize_spots: int):
    return classify_standings(make_standings(n_teams), prize_spots)


def test_combination_table_matches_nba_allocation() -> None:
    assert len(config.LOTTERY_COMBINATIONS) == 14
    assert sum(config.LOTTERY_COMBINATIONS) == config.LOTTERY_POSSIBLE_COMBINATIONS - 1


@pytest.mark.parametrize("n", range(1, 15))
def test_odds_sum_to_100(make_standings, n) -> None:
    lottery = list(reversed(make_standings(n)))
    odds = compute_lottery_odds(lottery)
    assert len(odds) == n
    assert sum(o.pct_first_pick for o in odds) == pytest.approx(100.0, abs=1e-9)


def test_full_table_odds(make_standings) -> None:
    lottery = list(reversed(make_standings(14)))
    odds = compute_lottery_odds(lottery)
    assert [o.combinations for o in odds] == list(config.LOTTERY_COMBINATIONS)
    assert odds[0].pct_first_pick == pytest.approx(14.0)
    assert odds[-1].pct_first_pick == pytest.approx(0.5)
    assert odds[0].team.team_id == "T14"


def test_odds_truncate_past_table(make_standings) -> None:
    lottery = list(reversed(make_standings(18)))
    odds = compute_lottery_odds(lottery)
    assert len(odds) == 14
    assert [o.team.team_id for o in odds] == [t.team_id for t in lottery[:14]]


def test_odds_empty() -> None:
    assert compute_lottery_odds([]) == []


def test_twelve_team_league_order(make_standings) -> None:
    partition = _partition(make_standings, 12, 3)
    results = run_lottery(partition.lottery_teams, partition.money_teams, rng_seed=2024)

    assert [r.pick for r in results] == list(range(1, 13))
    assert len({r.team_id for r in results}) == 12

    lottery_ids = {t.team_id for t in partition.lottery_teams}
    winners = results[:4]
    assert all(r.is_lottery_winner for r in winners)
    assert all(r.team_id in lottery_ids for r in winners)

    # Picks 5-9: the rest of the lottery, worst -> best.
    rest = results[4:9]
    assert not any(r.is_lottery_winner for r in rest)
    positions = [r.original_position for r in rest]
    assert positions == sorted(positions)
    drawn_ids = {r.team_id for r in winners}
    assert [r.team_id for r in rest] == [
        t.team_id for t in partition.lottery_teams if t.team_id not in drawn_ids
    ]

    # Picks 10-12: 3rd place, 2nd place, champion.
    assert [r.team_id for r in results[9:]] == ["T03", "T02", "T01"]
    for r in results[9:]:
        assert r.movement == 0
        assert r.original_position == r.pick
        assert not r.is_lottery_winner

    for r in results:
        assert r.movement == r.original_position - r.pick


def test_scripted_draw_with_redraw(make_standings, scripted_rng) -> None:
    lottery = list(reversed(make_standings(14)))
    # 0 -> seed 1, 0 again is thrown out, 140 -> seed 2, 280 -> seed 3, 999 -> seed 14
    rng = scripted_rng(numbers=[0, 0, 140, 280, 999])
    results, audit = run_lottery_with_audit(lottery, rng=rng)

    assert [r.original_position for r in results[:4]] == [1, 2, 3, 14]
    assert results[3].movement == 10
    assert [r.original_position for r in results[4:]] == list(range(4, 14))
    assert results[4].movement == -1
    assert audit["draws"][1]["rejected_numbers"] == [0]
    assert audit["total_combinations"] == 1000


def test_small_league_draws_every_team(make_standings) -> None:
    partition = _partition(make_standings, 5, 3)
    results = run_lottery(partition.lottery_teams, partition.money_teams, rng_seed=7)
    assert [r.pick for r in results] == [1, 2, 3, 4, 5]
    assert [r.is_lottery_winner for r in results] == [True, True, False, False, False]
    assert {r.team_id for r in results[:2]} == {"T04", "T05"}


def test_no_lottery_teams(make_standings) -> None:
    partition = _partition(make_standings, 3, 3)
    results, audit = run_lottery_with_audit(partition.lottery_teams, partition.money_teams, rng_seed=1)
    assert [r.team_id for r in results] == ["T03", "T02", "T01"]
    assert not any(r.is_lottery_winner for r in results)
    assert audit["draws"] == []


def test_empty_league() -> None:
    assert run_lottery([], [], rng_seed=1) == []


def test_teams_past_table_pick_after_table(make_standings) -> None:
    partition = _partition(make_standings, 20, 2)  # 18 lottery teams
    results, audit = run_lottery_with_audit(partition.lottery_teams, partition.money_teams, rng_seed=99)

    assert [r.pick for r in results] == list(range(1, 21))
    overflow = [t.team_id for t in partition.lottery_teams[14:]]
    assert [r.team_id for r in results[14:18]] == overflow
    assert [r.original_position for r in results[14:18]] == [15, 16, 17, 18]
    assert all(r.team_id not in overflow for r in results[:4])
    assert audit["unweighted_team_ids"] == overflow
    assert [r.team_id for r in results[18:]] == ["T02", "T01"]


@pytest.mark.parametrize("n_teams, spots", [(1, 0), (4, 1), (10, 2), (14, 0), (17, 3), (30, 3)])
def test_pick_order_is_permutation(make_standings, n_teams, spots) -> None:
    partition = _partition(make_standings, n_teams, spots)
    for seed in range(25):
        results = run_lottery(partition.lottery_teams, partition.money_teams, rng_seed=seed)
        assert sorted(r.pick for r in results) == list(range(1, n_teams + 1))
        assert len({r.team_id for r in results}) == n_teams
        money_ids = {t.team_id for t in partition.money_teams}
        assert not any(r.is_lottery_winner and r.team_id in money_ids for r in results)


def test_same_seed_same_order(make_standings) -> None:
    partition = _partition(make_standings, 12, 3)
    a = run_lottery(partition.lottery_teams, partition.money_teams, rng_seed=42)
    b = run_lottery(partition.lottery_teams, partition.money_teams, rng=random.Random(42))
    assert a == b


def test_rng_and_seed_are_exclusive(make_standings) -> None:
    partition = _partition(make_standings, 6, 1)
    with pytest.raises(ValueError):
        run_lottery(partition.lottery_teams, rng=random.Random(1), rng_seed=1)


def test_inputs_not_mutated(make_standings) -> None:
    partition = _partition(make_standings, 10, 3)
    lottery = list(partition.lottery_teams)
    money = list(partition.money_teams)
    run_lottery(lottery, money, rng_seed=3)
    assert lottery == list(partition.lottery_teams)
    assert money == list(partition.money_teams)


def test_worst_team_first_pick_rate_converges(make_standings) -> None:
    lottery = list(reversed(make_standings(14)))
    rng = random.Random(12345)
    trials = 10_000
    firsts = Counter()
    for _ in range(trials):
        results = run_lottery(lottery, rng=rng)
        firsts[results[0].original_position] += 1

    assert firsts[1] / trials == pytest.approx(0.14, abs=0.015)
    assert firsts[14] / trials == pytest.approx(0.005, abs=0.005)
