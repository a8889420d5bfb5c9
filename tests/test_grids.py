import math

import pytest

from dynprog.grids import (
    count_squares,
    largest_rectangle_in_histogram,
    max_falling_path_sum,
    maximal_rectangle,
    maximum_chocolates,
    maze_obstacles,
    min_path_sum,
    ninja_training,
    triangle_min_path_sum,
    unique_paths,
)
from dynprog.linear import MOD


@pytest.mark.parametrize("m, n", [(1, 1), (2, 3), (3, 7), (5, 5), (10, 4)])
def test_unique_paths_matches_binomial(m, n):
    assert unique_paths(m, n) == math.comb(m + n - 2, m - 1)


@pytest.mark.parametrize("m, n", [(2, 5), (4, 6), (7, 3)])
def test_unique_paths_symmetric(m, n):
    assert unique_paths(m, n) == unique_paths(n, m)


@pytest.mark.parametrize("m, n", [(0, 3), (3, 0)])
def test_unique_paths_rejects_empty(m, n):
    with pytest.raises(ValueError):
        unique_paths(m, n)


@pytest.mark.parametrize("m, n", [(1, 4), (3, 3), (4, 6)])
def test_maze_without_obstacles_equals_unique_paths(m, n):
    assert maze_obstacles([[0] * n for _ in range(m)]) == unique_paths(m, n)


def test_maze_result_is_reduced_modulo():
    m, n = 40, 40
    assert maze_obstacles([[0] * n for _ in range(m)]) == math.comb(m + n - 2, m - 1) % MOD


def test_maze_blocked_start_or_end():
    assert maze_obstacles([[-1, 0], [0, 0]]) == 0
    assert maze_obstacles([[0, 0], [0, -1]]) == 0


def test_maze_wall_cuts_all_paths():
    assert maze_obstacles([[0, -1], [-1, 0]]) == 0


def test_maze_obstacle_never_adds_paths():
    open_maze = [[0] * 4 for _ in range(4)]
    blocked = [row[:] for row in open_maze]
    blocked[1][2] = -1
    assert maze_obstacles(blocked) < maze_obstacles(open_maze)


def test_min_path_sum_single_row_and_column():
    assert min_path_sum([[4, 7, 1]]) == 4 + 7 + 1
    assert min_path_sum([[4], [7], [1]]) == 4 + 7 + 1


@pytest.mark.parametrize("m, n", [(1, 1), (3, 4), (5, 2)])
def test_min_path_sum_all_ones(m, n):
    assert min_path_sum([[1] * n for _ in range(m)]) == m + n - 1


def test_min_path_sum_rejects_empty():
    with pytest.raises(ValueError):
        min_path_sum([])


def test_triangle_single_row():
    assert triangle_min_path_sum([[9]]) == 9


@pytest.mark.parametrize("rows", [1, 3, 6])
def test_triangle_all_ones(rows):
    triangle = [[1] * (i + 1) for i in range(rows)]
    assert triangle_min_path_sum(triangle) == rows


def test_triangle_takes_cheaper_branch():
    assert triangle_min_path_sum([[1], [5, 2]]) == 1 + 2


def test_triangle_rejects_empty():
    with pytest.raises(ValueError):
        triangle_min_path_sum([])


def test_max_falling_single_column_is_column_sum():
    assert max_falling_path_sum([[3], [-2], [8]]) == 3 - 2 + 8


def test_max_falling_single_row_is_row_max():
    assert max_falling_path_sum([[3, 9, 1]]) == 9


@pytest.mark.parametrize("m, n", [(2, 2), (4, 3)])
def test_max_falling_constant_matrix(m, n):
    assert max_falling_path_sum([[5] * n for _ in range(m)]) == 5 * m


def test_max_falling_rejects_empty():
    with pytest.raises(ValueError):
        max_falling_path_sum([[]])


def test_maximum_chocolates_example():
    grid = [[2, 3, 1, 2], [3, 4, 2, 2], [5, 6, 3, 5]]
    assert maximum_chocolates(grid) == 21


def test_maximum_chocolates_single_row_takes_both_corners():
    assert maximum_chocolates([[4, 1, 1, 6]]) == 4 + 6


def test_maximum_chocolates_single_column_counts_once():
    assert maximum_chocolates([[4], [5], [6]]) == 4 + 5 + 6


def test_ninja_training_example():
    assert ninja_training([[1, 2, 5], [3, 1, 1], [3, 3, 3]]) == 11


def test_ninja_training_single_day_takes_best_task():
    assert ninja_training([[7, 3, 9]]) == 9


def test_ninja_training_cannot_repeat():
    points = [[0, 0, 10], [0, 0, 10]]
    assert ninja_training(points) == 10


def test_ninja_training_rejects_empty():
    with pytest.raises(ValueError):
        ninja_training([])


@pytest.mark.parametrize("n", [1, 2, 4])
def test_count_squares_all_ones(n):
    matrix = [[1] * n for _ in range(n)]
    assert count_squares(matrix) == sum(k * k for k in range(1, n + 1))


def test_count_squares_all_zeros():
    assert count_squares([[0] * 3 for _ in range(3)]) == 0


def test_count_squares_identity_has_only_unit_squares():
    identity = [[int(i == j) for j in range(4)] for i in range(4)]
    assert count_squares(identity) == 4


def test_histogram_example():
    assert largest_rectangle_in_histogram([2, 1, 5, 6, 2, 3]) == 10


def test_histogram_constant_heights():
    assert largest_rectangle_in_histogram([3, 3, 3, 3]) == 3 * 4


def test_histogram_empty():
    assert largest_rectangle_in_histogram([]) == 0


def test_histogram_single_bar():
    assert largest_rectangle_in_histogram([7]) == 7


def test_maximal_rectangle_all_ones():
    assert maximal_rectangle([[1] * 5 for _ in range(3)]) == 15


def test_maximal_rectangle_all_zeros():
    assert maximal_rectangle([[0, 0], [0, 0]]) == 0


def test_maximal_rectangle_single_row_is_longest_run():
    assert maximal_rectangle([[1, 1, 0, 1, 1, 1]]) == 3


def test_maximal_rectangle_at_least_count_of_any_full_row():
    matrix = [[1, 0, 1], [1, 1, 1], [0, 1, 1]]
    assert maximal_rectangle(matrix) >= sum(matrix[1])