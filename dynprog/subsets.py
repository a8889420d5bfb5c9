"""Subset-sum style problems: reachability, partitions and counting."""

from __future__ import annotations

from collections.abc import Sequence

from dynprog.linear import MOD


def _require_values(values: Sequence[int], name: str) -> None:
    if not values:
        raise ValueError(f"{name} must not be empty")
    if any(value < 0 for value in values):
        raise ValueError(f"{name} must hold non-negative integers")


def _reachable_sums(values: Sequence[int], limit: int) -> int:
    """Bit mask whose bit ``s`` is set when some subset of ``values`` sums to ``s <= limit``."""
    window = (1 << (limit + 1)) - 1
    reachable = 1
    for value in values:
        reachable = (reachable | (reachable << value)) & window
    return reachable


def _count_subsets(values: Sequence[int], target: int, modulus: int | None = None) -> int:
    """Number of index subsets of ``values`` summing to ``target``; zeros double the count."""
    counts = [1] + [0] * target
    for value in values:
        counts = [
            count + (counts[total - value] if value <= total else 0)
            for total, count in enumerate(counts)
        ]
        if modulus is not None:
            counts = [count % modulus for count in counts]
    return counts[target]


def subset_sum_to_k(arr: Sequence[int], k: int) -> bool:
    """True if some subset of ``arr`` sums to exactly ``k``."""
    _require_values(arr, "arr")
    if k < 0:
        raise ValueError("k must be non-negative")
    return bool(_reachable_sums(arr, k) >> k & 1)


def can_partition(arr: Sequence[int]) -> bool:
    """True if ``arr`` splits into two subsets with equal sums."""
    _require_values(arr, "arr")
    total = sum(arr)
    if total % 2:
        return False
    return subset_sum_to_k(arr, total // 2)


def min_subset_sum_difference(arr: Sequence[int]) -> int:
    """Smallest absolute difference between the sums of two subsets that split ``arr``."""
    _require_values(arr, "arr")
    total = sum(arr)
    reachable = _reachable_sums(arr, total)
    return min(
        total - 2 * part
        for part in range(total // 2 + 1)
        if reachable >> part & 1
    )


def count_subsets_with_sum(nums: Sequence[int], target: int) -> int:
    """Number of subsets of ``nums`` whose elements sum to ``target``."""
    _require_values(nums, "nums")
    if target < 0:
        raise ValueError("target must be non-negative")
    return _count_subsets(nums, target)


def _count_by_difference(arr: Sequence[int], difference: int, modulus: int | None) -> int:
    _require_values(arr, "arr")
    remainder = sum(arr) - difference
    if remainder < 0 or remainder % 2:
        return 0
    return _count_subsets(arr, remainder // 2, modulus)


def count_partitions(arr: Sequence[int], difference: int) -> int:
    """Ways to split ``arr`` into two subsets whose sums differ by ``difference``, modulo 1e9+7."""
    return _count_by_difference(arr, difference, MOD)


def target_sum(arr: Sequence[int], target: int) -> int:
    """Ways to sign every element of ``arr`` with + or - so that the total equals ``target``."""
    return _count_by_difference(arr, target, None)