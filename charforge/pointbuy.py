from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from .abilities import ABILITY_KEYS, MAX_ABILITY_SCORE

STANDARD_ARRAY = (15, 14, 13, 12, 10, 8)
COSTS = {8: 0, 9: 1, 10: 2, 11: 3, 12: 4, 13: 5, 14: 7, 15: 9}  # 27-point buy
POINT_BUY_BUDGET = 27


class PointBuyError(ValueError):
    pass


def _cost_of(score: object) -> int | None:
    if isinstance(score, bool):
        return None
    try:
        return COSTS.get(score)  # type: ignore[arg-type]
    except TypeError:  # unhashable junk
        return None


def calculate_point_buy_cost(scores: Mapping[str, int]) -> int:
    """Total points spent on ``scores``.

    A score without a table entry (outside 8..15, or missing) replaces the
    running total with ``POINT_BUY_BUDGET + total + 1`` so the result can
    never pass a ``total <= POINT_BUY_BUDGET`` check.
    """
    total = 0
    for key in ABILITY_KEYS:
        cost = _cost_of(scores.get(key))
        if cost is None:
            total = POINT_BUY_BUDGET + total + 1
        else:
            total += cost
    return total


def incremental_point_cost(current_score: int) -> int | float:
    """Points needed to raise one ability from ``current_score`` by one.

    ``math.inf`` means the step is not allowed under point-buy.
    """
    next_score = current_score + 1
    if next_score > MAX_ABILITY_SCORE:
        return math.inf
    current_cost = _cost_of(current_score)
    next_cost = _cost_of(next_score)
    if current_cost is None or next_cost is None:
        return math.inf
    return next_cost - current_cost


@dataclass(frozen=True)
class PointBuyResult:
    total: int
    out_of_range: Tuple[str, ...] = ()
    budget: int = POINT_BUY_BUDGET

    @property
    def ok(self) -> bool:
        return not self.out_of_range and self.total <= self.budget

    @property
    def within_budget(self) -> bool:
        return self.total <= self.budget

    @property
    def remaining(self) -> int:
        return self.budget - self.total


def check_point_buy(scores: Mapping[str, int]) -> PointBuyResult:
    """Tagged variant of :func:`calculate_point_buy_cost`.

    ``total`` only counts in-range scores; out-of-range keys are listed
    separately instead of being folded into a sentinel.
    """
    total = 0
    bad: list[str] = []
    for key in ABILITY_KEYS:
        cost = _cost_of(scores.get(key))
        if cost is None:
            bad.append(key)
        else:
            total += cost
    return PointBuyResult(total=total, out_of_range=tuple(bad))


def assert_within_budget(scores: Mapping[str, int]) -> int:
    total = calculate_point_buy_cost(scores)
    if total > POINT_BUY_BUDGET:
        result = check_point_buy(scores)
        if result.out_of_range:
            keys = ", ".join(k.upper() for k in result.out_of_range)
            raise PointBuyError(f"Point buy scores out of range 8..15: {keys}")
        raise PointBuyError(f"Point buy total {total} exceeds the allowed budget of {POINT_BUY_BUDGET}.")
    return total


@dataclass
class PointBuy:
    str: int
    dex: int
    con: int
    int: int
    wis: int
    cha: int

    @classmethod
    def from_dict(cls, scores: Mapping[str, int]) -> "PointBuy":
        return cls(**{k: scores[k] for k in ABILITY_KEYS})

    @property
    def cost(self) -> int:
        return calculate_point_buy_cost(self.as_dict())

    @property
    def remaining(self) -> int:
        return POINT_BUY_BUDGET - self.cost

    def as_dict(self) -> Dict[str, int]:
        return {
            "str": self.str,
            "dex": self.dex,
            "con": self.con,
            "int": self.int,
            "wis": self.wis,
            "cha": self.cha,
        }


__all__ = [
    "COSTS",
    "POINT_BUY_BUDGET",
    "STANDARD_ARRAY",
    "PointBuy",
    "PointBuyError",
    "PointBuyResult",
    "assert_within_budget",
    "calculate_point_buy_cost",
    "check_point_buy",
    "incremental_point_cost",
]
