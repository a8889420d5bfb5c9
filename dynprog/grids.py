"""Dynamic programming over grids, triangles and histograms."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import accumulate

from dynprog.linear import MOD

Grid = Sequence[Sequence[int]]


def _require_grid(grid: Grid, name: str) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError(f"{name} must have at least one row and one column")
    return len(grid), len(grid[0])


def unique_paths(m: int, n: int) -> int:
    """Number of paths from the top-left to the bottom-right of an m x n grid moving right or down."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def maze_obstacles(mat: Grid) -> int:
    """Paths through a maze whose blocked cells hold -1, modulo 1e9+7."""
    _require_grid(mat, "mat")
    above: list[int] | None = None
    for row in mat:
        current: list[int] = []
        left = 0
        for j, cell in enumerate(row):
            if cell == -1:
                left = 0
            elif above is None and j == 0:
                left = 1
            else:
                up = above[j] if above is not None else 0
                left = (up + left) % MOD
            current.append(left)
        above = current
    return above[-1]


def min_path_sum(grid: Grid) -> int:
    """Smallest sum along a path from the top-left to the bottom-right moving right or down."""
    _require_grid(grid, "grid")
    above: list[int] | None = None
    for row in grid:
        current: list[int] = []
        for j, value in enumerate(row):
            if above is None and j == 0:
                current.append(value)
                continue
            up = above[j] if above is not None else math.inf
            left = current[-1] if current else math.inf
            current.append(value + min(up, left))
        above = current
    return above[-1]


def triangle_min_path_sum(triangle: Grid) -> int:
    """Smallest sum from the apex to the base, stepping down or down-right each row."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    below = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        below = [
            value + min(straight, diagonal)
            for value, straight, diagonal in zip(row, below, below[1:])
        ]
    return below[0]


def max_falling_path_sum(matrix: Grid) -> int:
    """Largest sum of a path from any top cell to any bottom cell, moving down, down-left or down-right."""
    _require_grid(matrix, "matrix")
    above = list(matrix[0])
    for row in matrix[1:]:
        above = [
            value + max(above[max(j - 1, 0) : j + 2])
            for j, value in enumerate(row)
        ]
    return max(above)


def _neighbours(column: int, width: int) -> range:
    return range(max(column - 1, 0), min(column + 2, width))


def maximum_chocolates(grid: Grid) -> int:
    """Most chocolates two walkers collect starting at the top corners and descending row by row.

    Each walker moves to one of the three cells below it; a cell visited by both counts once.
    """
    _, width = _require_grid(grid, "grid")

    def gain(row: Sequence[int], first: int, second: int) -> int:
        return row[first] if first == second else row[first] + row[second]

    last = grid[-1]
    below = [[gain(last, a, b) for b in range(width)] for a in range(width)]
    for row in reversed(grid[:-1]):
        below = [
            [
                gain(row, a, b)
                + max(
                    below[next_a][next_b]
                    for next_a in _neighbours(a, width)
                    for next_b in _neighbours(b, width)
                )
                for b in range(width)
            ]
            for a in range(width)
        ]
    return below[0][width - 1]


def ninja_training(points: Grid) -> int:
    """Most points from one of three activities per day, never the same activity two days running."""
    if not points:
        raise ValueError("points must not be empty")
    tasks = range(3)
    first = points[0]
    best = [
        max(first[task] for task in tasks if task != last) for last in range(4)
    ]
    for day in points[1:]:
        best = [
            max([0, *(day[task] + best[task] for task in tasks if task != last)])
            for last in range(4)
        ]
    return best[3]


def count_squares(matrix: Grid) -> int:
    """Number of square sub-matrices made entirely of ones."""
    _require_grid(matrix, "matrix")
    total = 0
    above: list[int] = []
    for i, row in enumerate(matrix):
        current: list[int] = []
        for j, cell in enumerate(row):
            if i == 0 or j == 0:
                size = cell
            elif cell == 0:
                size = 0
            else:
                size = 1 + min(above[j], above[j - 1], current[j - 1])
            current.append(size)
        total += sum(current)
        above = current
    return total


def _nearest_smaller(heights: Sequence[int], order: Sequence[int], missing: int) -> dict[int, int]:
    nearest: dict[int, int] = {}
    stack: list[int] = []
    for index in order:
        while stack and heights[stack[-1]] >= heights[index]:
            stack.pop()
        nearest[index] = stack[-1] if stack else missing
        stack.append(index)
    return nearest


def largest_rectangle_in_histogram(heights: Sequence[int]) -> int:
    """Largest rectangle area under a histogram (0 for an empty histogram)."""
    if not heights:
        return 0
    size = len(heights)
    indices = range(size)
    right = _nearest_smaller(heights, indices[::-1], size)
    left = _nearest_smaller(heights, indices, -1)
    return max(
        height * (right[index] - left[index] - 1)
        for index, height in enumerate(heights)
    )


def maximal_rectangle(matrix: Grid) -> int:
    """Largest area of a rectangular sub-matrix made entirely of ones."""
    if not matrix:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [height + 1 if cell == 1 else 0 for height, cell in zip(heights, row)]
        best = max(best, largest_rectangle_in_histogram(heights))
    return best