"""Unbounded knapsack problems: coins, change-making, knapsack and rod cutting."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _require_positive(values: Sequence[int], name: str) -> None:
    if not values:
        raise ValueError(f"{name} must not be empty")
    if any(value <= 0 for value in values):
        raise ValueError(f"{name} must hold positive integers")


def minimum_elements(coins: Sequence[int], target: int) -> int:
    """Fewest coins, each usable any number of times, summing to ``target``; -1 if impossible."""
    _require_positive(coins, "coins")
    if target < 0:
        raise ValueError("target must be non-negative")

    first, *rest = coins
    fewest: list[float] = [
        total // first if total % first == 0 else math.inf
        for total in range(target + 1)
    ]
    for coin in rest:
        for total in range(coin, target + 1):
            fewest[total] = min(fewest[total], fewest[total - coin] + 1)

    result = fewest[target]
    return -1 if math.isinf(result) else int(result)


def count_ways_to_make_change(denominations: Sequence[int], value: int) -> int:
    """Number of coin combinations, with unlimited coins of each denomination, summing to ``value``."""
    _require_positive(denominations, "denominations")
    if value < 0:
        raise ValueError("value must be non-negative")

    first, *rest = denominations
    ways = [1 if total % first == 0 else 0 for total in range(value + 1)]
    for coin in rest:
        for total in range(coin, value + 1):
            ways[total] += ways[total - coin]
    return ways[value]


def unbounded_knapsack(
    capacity: int, profits: Sequence[int], weights: Sequence[int]
) -> int:
    """Largest profit from items that may each be taken any number of times within ``capacity``."""
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    _require_positive(weights, "weights")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")

    first_weight, *rest_weights = weights
    first_profit, *rest_profits = profits
    best = [(load // first_weight) * first_profit for load in range(capacity + 1)]
    for profit, weight in zip(rest_profits, rest_weights):
        for load in range(capacity + 1):
            take = profit + best[load - weight] if load >= weight else 0
            best[load] = max(take, best[load])
    return best[capacity]


def cut_rod(prices: Sequence[int]) -> int:
    """Largest value from cutting a rod of length ``len(prices)``; a piece of length i sells for ``prices[i-1]``."""
    if not prices:
        return 0
    length = len(prices)
    first, *rest = prices
    best = [piece * first for piece in range(length + 1)]
    for piece_length, price in enumerate(rest, start=2):
        for total in range(piece_length, length + 1):
            best[total] = max(best[total], price + best[total - piece_length])
    return best[length]