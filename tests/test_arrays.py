import random
from collections import Counter
from math import comb

import pytest

from algoset.arrays import (
    MOD,
    candy,
    colored_cells,
    count_good_numbers,
    find_132_pattern,
    find_duplicate,
    hours_needed,
    len_longest_fib_subseq,
    longest_consecutive,
    majority_elements,
    max_profit,
    maximum_digit_sum_pair,
    min_eating_speed,
    pascal_row,
    pascal_triangle,
    rearrange_by_sign,
    rob,
    subarray_sum,
    trap,
)


def test_trap_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trap_invariants():
    heights = [4, 2, 0, 3, 2, 5]
    assert trap(heights) == trap(heights[::-1])
    assert trap([7, 0, 7]) == 7
    assert trap(sorted(heights)) == 0
    assert trap([]) == 0


@pytest.mark.parametrize("row", range(1, 12))
def test_pascal_row_matches_binomials(row):
    values = pascal_row(row)
    assert values == [comb(row - 1, i) for i in range(row)]
    assert sum(values) == 2 ** (row - 1)
    assert values == values[::-1]


def test_pascal_triangle_rows():
    triangle = pascal_triangle(6)
    assert len(triangle) == 6
    assert [len(r) for r in triangle] == list(range(1, 7))
    assert triangle[-1] == pascal_row(6)
    assert pascal_triangle(0) == []


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_invariants():
    rising = [2, 4, 9, 11]
    assert max_profit(rising) == rising[-1] - rising[0]
    assert max_profit(sorted(rising, reverse=True)) == 0
    assert max_profit([]) == 0


def test_longest_consecutive_example():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4


def test_longest_consecutive_invariants():
    values = list(range(10, 20)) * 2
    random.Random(1).shuffle(values)
    assert longest_consecutive(values) == len(range(10, 20))
    assert longest_consecutive([]) == 0


def test_candy_example():
    assert candy([1, 0, 2]) == 5


def test_candy_invariants():
    ratings = [1, 3, 4, 5, 2, 2, 1]
    assert candy(ratings) == candy(ratings[::-1])
    assert candy(ratings) > len(ratings)
    assert candy([3, 3, 3, 3]) == len([3, 3, 3, 3])
    assert candy([]) == 0


def test_rob_example():
    assert rob([2, 7, 9, 3, 1]) == 12


def test_rob_small_inputs():
    assert rob([9]) == 9
    assert rob([4, 6]) == max(4, 6)
    assert rob([]) == 0
    nums = [5, 1, 1, 5, 3]
    assert rob(nums) >= max(nums)
    assert rob(nums) <= sum(nums)


@pytest.mark.parametrize(
    "nums",
    [[3, 2, 3], [1], [1, 2], [2, 2, 1, 1, 1, 2, 2], [1, 2, 3, 4], [4, 4, 4, 1, 2, 3, 4, 1, 1, 1], []],
)
def test_majority_elements_exceed_a_third(nums):
    result = majority_elements(nums)
    counts = Counter(nums)
    assert set(result) == {x for x, c in counts.items() if c > len(nums) // 3}
    assert len(set(result)) == len(result)


@pytest.mark.parametrize("nums", [[1, 3, 4, 2, 2], [3, 1, 3, 4, 2], [2, 2, 2, 2, 2], [1, 1]])
def test_find_duplicate_finds_repeat(nums):
    result = find_duplicate(nums)
    assert nums.count(result) >= 2


def test_find_132_pattern():
    assert find_132_pattern([1, 2, 3, 4]) is False
    assert find_132_pattern([4, 3, 2, 1]) is False
    assert find_132_pattern([3, 1, 4, 2]) is True
    assert find_132_pattern([-1, 3, 2, 0]) is True


def test_subarray_sum():
    assert subarray_sum([1, 1, 1], 2) == 2
    assert subarray_sum([7], 7) == 1
    nums = [3, -1, 4, 1, -5]
    assert subarray_sum(nums, sum(nums)) >= 1


def test_len_longest_fib_subseq():
    fib = [1, 2, 3, 5, 8, 13, 21]
    assert len_longest_fib_subseq(fib) == len(fib)
    assert len_longest_fib_subseq([1, 3, 7, 11, 12, 14, 18]) == 3
    assert len_longest_fib_subseq([1, 2, 4, 8, 16]) == 0
    assert len_longest_fib_subseq([1, 2]) == 0


def test_hours_needed():
    piles = [3, 6, 7, 11]
    assert hours_needed(piles, 1) == sum(piles)
    assert hours_needed(piles, max(piles)) == len(piles)
    with pytest.raises(ValueError):
        hours_needed(piles, 0)


@pytest.mark.parametrize(
    "piles, h", [([3, 6, 7, 11], 8), ([30, 11, 23, 4, 20], 5), ([30, 11, 23, 4, 20], 6), ([1000], 3)]
)
def test_min_eating_speed_is_slowest_that_fits(piles, h):
    speed = min_eating_speed(piles, h)
    assert hours_needed(piles, speed) <= h
    assert speed == 1 or hours_needed(piles, speed - 1) > h


def test_min_eating_speed_one_hour_per_pile():
    piles = [30, 11, 23, 4, 20]
    assert min_eating_speed(piles, len(piles)) == max(piles)


def test_count_good_numbers():
    assert count_good_numbers(1) == 5
    assert count_good_numbers(2) == 5 * 4
    assert count_good_numbers(50) == 564908303
    for n in range(1, 10):
        assert count_good_numbers(n + 2) == count_good_numbers(n) * 20 % MOD


def test_rearrange_by_sign():
    nums = [3, 1, -2, -5, 2, -4]
    result = rearrange_by_sign(nums)
    assert result == [3, -2, 1, -5, 2, -4]
    assert sorted(result) == sorted(nums)
    assert all((x >= 0) == (i % 2 == 0) for i, x in enumerate(result))


def test_rearrange_by_sign_zero_counts_as_positive():
    assert rearrange_by_sign([-1, 0]) == [0, -1]
    with pytest.raises(ValueError):
        rearrange_by_sign([1, 2, -3])


def test_maximum_digit_sum_pair():
    assert maximum_digit_sum_pair([18, 43, 36, 13, 7]) == 54
    assert maximum_digit_sum_pair([10, 12, 19, 14]) == -1
    assert maximum_digit_sum_pair([25, 25]) == 25 + 25
    assert maximum_digit_sum_pair([]) == -1


def test_colored_cells():
    assert colored_cells(1) == 1
    for n in range(1, 20):
        assert colored_cells(n + 1) - colored_cells(n) == 4 * n