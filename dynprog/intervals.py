"""Interval dynamic programming: chains, cuts, bursts, expressions and partitions."""

from __future__ import annotations

import math
from collections.abc import Sequence

from dynprog.linear import MOD


def matrix_chain_multiplication(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` (1-based) has shape ``dims[i-1] x dims[i]``.
    """
    if len(dims) < 2:
        raise ValueError("dims must describe at least one matrix")
    count = len(dims) - 1
    # cost[i][j]: cheapest product of matrices i..j, 1-based.
    cost = [[0] * (count + 1) for _ in range(count + 1)]
    for i in range(count, 0, -1):
        for j in range(i + 1, count + 1):
            cost[i][j] = min(
                dims[i - 1] * dims[k] * dims[j] + cost[i][k] + cost[k + 1][j]
                for k in range(i, j)
            )
    return cost[1][count]


def min_cut_cost(length: int, cuts: Sequence[int]) -> int:
    """Smallest total cost of making every cut in a stick; a cut costs the current piece's length."""
    points = [0, *sorted(cuts), length]
    count = len(cuts)
    best = [[0] * (count + 2) for _ in range(count + 2)]
    for i in range(count, 0, -1):
        for j in range(i, count + 1):
            span = points[j + 1] - points[i - 1]
            best[i][j] = span + min(
                best[i][ind - 1] + best[ind + 1][j] for ind in range(i, j + 1)
            )
    return best[1][count]


def max_coins(values: Sequence[int]) -> int:
    """Most coins from bursting every balloon; bursting one pays the product with its current neighbours."""
    padded = [1, *values, 1]
    count = len(values)
    best = [[0] * (count + 2) for _ in range(count + 2)]
    for i in range(count, 0, -1):
        for j in range(i, count + 1):
            best[i][j] = max(
                padded[i - 1] * padded[ind] * padded[j + 1]
                + best[i][ind - 1]
                + best[ind + 1][j]
                for ind in range(i, j + 1)
            )
    return best[1][count]


def count_boolean_ways(expression: str) -> int:
    """Ways to parenthesise an expression of T, F, '&', '|' and '^' so it evaluates to true, modulo 1e9+7."""
    size = len(expression)
    if size == 0:
        return 0
    # ways[i][j] = (true count, false count) for expression[i..j].
    ways: list[list[tuple[int, int]]] = [[(0, 0)] * size for _ in range(size)]
    for i in range(size - 1, -1, -1):
        char = expression[i]
        ways[i][i] = (int(char == "T"), int(char == "F"))
        for j in range(i + 1, size):
            true_ways = false_ways = 0
            for ind in range(i + 1, j, 2):
                left_true, left_false = ways[i][ind - 1]
                right_true, right_false = ways[ind + 1][j]
                both_true = left_true * right_true
                both_false = left_false * right_false
                mixed = left_true * right_false + left_false * right_true
                operator = expression[ind]
                if operator == "&":
                    true_ways += both_true
                    false_ways += mixed + both_false
                elif operator == "|":
                    true_ways += both_true + mixed
                    false_ways += both_false
                elif operator == "^":
                    true_ways += mixed
                    false_ways += both_true + both_false
            ways[i][j] = (true_ways % MOD, false_ways % MOD)
    return ways[0][size - 1][0]


def min_palindrome_partitions(s: str) -> int:
    """Fewest cuts that split ``s`` into palindromes (-1 for an empty string, which needs no pieces)."""
    size = len(s)
    is_palindrome = [[False] * size for _ in range(size)]
    for i in range(size - 1, -1, -1):
        for j in range(i, size):
            is_palindrome[i][j] = s[i] == s[j] and (j - i < 2 or is_palindrome[i + 1][j - 1])

    pieces = [0] * (size + 1)
    for i in range(size - 1, -1, -1):
        pieces[i] = min(
            1 + pieces[end + 1] for end in range(i, size) if is_palindrome[i][end]
        )
    return pieces[0] - 1


def max_partition_sum(nums: Sequence[int], k: int) -> int:
    """Largest sum after splitting ``nums`` into runs of at most ``k`` and raising each run to its maximum."""
    if k < 1:
        raise ValueError("k must be at least 1")
    size = len(nums)
    best = [0] * (size + 1)
    for i in range(size - 1, -1, -1):
        result = -math.inf
        peak = -math.inf
        for end in range(i, min(i + k, size)):
            peak = max(peak, nums[end])
            result = max(result, (end - i + 1) * peak + best[end + 1])
        best[i] = int(result)
    return best[0]