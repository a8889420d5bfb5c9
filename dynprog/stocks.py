"""Stock trading profit problems."""

from __future__ import annotations

from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Largest profit from a single buy followed by a later sell (0 if no profit is possible)."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_with_fee(prices: Sequence[int], fee: int) -> int:
    """Largest profit from any number of trades, each purchase costing an extra ``fee``."""
    free, holding = 0, 0
    for price in reversed(prices):
        free, holding = (
            max(holding - price - fee, free),
            max(price + free, holding),
        )
    return free