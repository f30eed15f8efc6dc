import math

import pytest

from charforge.pointbuy import (
    POINT_BUY_BUDGET,
    PointBuy,
    PointBuyError,
    assert_within_budget,
    calculate_point_buy_cost,
    check_point_buy,
    incremental_point_cost,
)


def scores(*vals):
    return dict(zip(["str", "dex", "con", "int", "wis", "cha"], vals))


def test_costs_sum_table_lookups():
    assert calculate_point_buy_cost(scores(8, 8, 8, 8, 8, 8)) == 0
    assert calculate_point_buy_cost(scores(15, 15, 15, 15, 15, 15)) == 54
    assert calculate_point_buy_cost(scores(15, 15, 15, 15, 15, 8)) == 45
    assert calculate_point_buy_cost(scores(15, 14, 13, 12, 10, 8)) == 27


@pytest.mark.parametrize("bad", [7, 16, 3, 18])
def test_out_of_range_always_exceeds_budget(bad):
    total = calculate_point_buy_cost(scores(bad, 8, 8, 8, 8, 8))
    assert total > POINT_BUY_BUDGET


def test_missing_score_exceeds_budget():
    assert calculate_point_buy_cost({"str": 8}) > POINT_BUY_BUDGET


def test_incremental_cost():
    assert incremental_point_cost(8) == 1
    assert incremental_point_cost(13) == 2
    assert incremental_point_cost(14) == 2
    assert incremental_point_cost(15) == math.inf
    assert incremental_point_cost(7) == math.inf


def test_check_point_buy_agrees_with_sentinel():
    for vals in [(15, 14, 13, 12, 10, 8), (15, 15, 15, 15, 15, 8), (16, 8, 8, 8, 8, 8)]:
        s = scores(*vals)
        result = check_point_buy(s)
        assert result.ok == (calculate_point_buy_cost(s) <= POINT_BUY_BUDGET)


def test_check_point_buy_lists_out_of_range():
    result = check_point_buy(scores(16, 8, 8, 8, 8, 3))
    assert result.out_of_range == ("str", "cha")
    assert result.total == 0
    assert not result.ok


def test_assert_within_budget_messages():
    assert assert_within_budget(scores(15, 14, 13, 12, 10, 8)) == 27
    with pytest.raises(PointBuyError, match="exceeds"):
        assert_within_budget(scores(15, 15, 15, 15, 15, 8))
    with pytest.raises(PointBuyError, match="out of range"):
        assert_within_budget(scores(18, 8, 8, 8, 8, 8))


def test_pointbuy_dataclass():
    pb = PointBuy.from_dict(scores(15, 14, 13, 12, 10, 8))
    assert pb.cost == 27
    assert pb.remaining == 0
    assert pb.as_dict()["dex"] == 14
