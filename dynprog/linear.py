"""One-dimensional dynamic programming over sequences."""

from __future__ import annotations

import math
from collections.abc import Sequence

MOD = 1_000_000_007


def count_distinct_ways(n_stairs: int) -> int:
    """Count the ways to climb ``n_stairs`` taking one or two steps at a time, modulo 1e9+7."""
    before, current = 0, 1
    for _ in range(n_stairs):
        before, current = current, (before + current) % MOD
    return current


def frog_jump(heights: Sequence[int]) -> int:
    """Minimum energy to go from the first stone to the last, jumping one or two stones.

    A jump costs the absolute height difference between the two stones.
    """
    stones = iter(heights)
    first = next(stones, None)
    if first is None:
        return 0

    cost_here, cost_before = 0, 0
    height_here, height_before = first, None
    for height in stones:
        one_step = cost_here + abs(height - height_here)
        two_steps = (
            cost_before + abs(height - height_before)
            if height_before is not None
            else math.inf
        )
        cost_before, cost_here = cost_here, min(one_step, two_steps)
        height_before, height_here = height_here, height
    return cost_here


def _best_non_adjacent(nums: Sequence[int]) -> int:
    best_here, best_before = nums[0], 0
    for value in nums[1:]:
        take = value + best_before
        best_before, best_here = best_here, max(take, best_here)
    return best_here


def max_non_adjacent_sum(nums: Sequence[int]) -> int:
    """Largest sum of elements no two of which are adjacent; the first element seeds the sum."""
    if not nums:
        raise ValueError("nums must not be empty")
    return _best_non_adjacent(nums)


def house_robber(values: Sequence[int]) -> int:
    """Largest loot from houses in a circle where adjacent houses cannot both be robbed."""
    if not values:
        raise ValueError("values must not be empty")
    if len(values) == 1:
        return values[0]
    return max(_best_non_adjacent(values[1:]), _best_non_adjacent(values[:-1]))