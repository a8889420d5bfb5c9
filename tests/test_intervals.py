import math
import random

import pytest

from dynprog.intervals import (
    count_boolean_ways,
    matrix_chain_multiplication,
    max_coins,
    max_partition_sum,
    min_cut_cost,
    min_palindrome_partitions,
)


class TestMatrixChain:
    def test_single_matrix_costs_nothing(self):
        assert matrix_chain_multiplication([7, 9]) == 0

    def test_two_matrices_cost_product_of_dims(self):
        dims = [10, 20, 30]
        assert matrix_chain_multiplication(dims) == math.prod(dims)

    def test_known_chain(self):
        assert matrix_chain_multiplication([4, 5, 3, 2]) == 70

    def test_not_more_than_left_to_right(self):
        dims = [3, 8, 2, 9, 4]
        left_to_right = 3 * 8 * 2 + 3 * 2 * 9 + 3 * 9 * 4
        assert matrix_chain_multiplication(dims) <= left_to_right

    def test_too_few_dims(self):
        with pytest.raises(ValueError):
            matrix_chain_multiplication([5])


class TestMinCutCost:
    def test_no_cuts(self):
        assert min_cut_cost(10, []) == 0

    def test_one_cut_costs_whole_length(self):
        assert min_cut_cost(10, [4]) == 10

    def test_known_example(self):
        assert min_cut_cost(7, [1, 3, 4, 5]) == 16

    def test_cut_order_in_input_does_not_matter(self):
        cuts = [2, 9, 5, 11, 1]
        shuffled = cuts[:]
        random.Random(3).shuffle(shuffled)
        assert min_cut_cost(14, cuts) == min_cut_cost(14, shuffled)


class TestMaxCoins:
    def test_empty(self):
        assert max_coins([]) == 0

    def test_single_balloon(self):
        assert max_coins([6]) == 6

    def test_known_example(self):
        assert max_coins([3, 1, 5, 8]) == 167

    def test_reversal_symmetric(self):
        values = [2, 7, 1, 4, 3]
        assert max_coins(values) == max_coins(values[::-1])


class TestBooleanWays:
    def test_single_operands(self):
        assert count_boolean_ways("T") == 1
        assert count_boolean_ways("F") == 0

    def test_empty(self):
        assert count_boolean_ways("") == 0

    def test_simple_and(self):
        assert count_boolean_ways("T&T") == 1
        assert count_boolean_ways("T&F") == 0

    def test_all_true_or_chain_counts_every_grouping(self):
        assert count_boolean_ways("T|T|T") == 2

    def test_known_example(self):
        assert count_boolean_ways("T|T&F^T") == 4


class TestPalindromePartitions:
    def test_palindrome_needs_no_cut(self):
        assert min_palindrome_partitions("racecar") == 0

    def test_distinct_characters_need_every_cut(self):
        s = "abcde"
        assert min_palindrome_partitions(s) == len(s) - 1

    def test_known_example(self):
        assert min_palindrome_partitions("aab") == 1

    def test_empty_string(self):
        assert min_palindrome_partitions("") == -1


class TestMaxPartitionSum:
    def test_k_one_is_plain_sum(self):
        nums = [1, 15, 7, 9, 2]
        assert max_partition_sum(nums, 1) == sum(nums)

    def test_k_covering_all(self):
        nums = [4, 1, 9, 2]
        assert max_partition_sum(nums, len(nums)) == max(nums) * len(nums)

    def test_known_example(self):
        assert max_partition_sum([1, 15, 7, 9, 2, 5, 10], 3) == 84

    def test_empty(self):
        assert max_partition_sum([], 3) == 0

    def test_invalid_k(self):
        with pytest.raises(ValueError):
            max_partition_sum([1, 2], 0)