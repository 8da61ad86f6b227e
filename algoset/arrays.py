"""Algorithms over integer sequences: scans, counting and searches."""

from collections import Counter
from itertools import accumulate, chain

MOD = 10**9 + 7


def trap(height):
    """Units of rain water held between bars of the given heights."""
    left = list(accumulate(height, max))
    right = list(accumulate(reversed(height), max))[::-1]
    return sum(min(lo, hi) - h for lo, hi, h in zip(left, right, height))


def pascal_row(row):
    """Return the row-th (1-based) row of Pascal's triangle."""
    values = [1]
    element = 1
    for col in range(1, row):
        element = element * (row - col) // col
        values.append(element)
    return values


def pascal_triangle(num_rows):
    """Return the first num_rows rows of Pascal's triangle."""
    return [pascal_row(row) for row in range(1, num_rows + 1)]


def max_profit(prices):
    """Best gain from one purchase followed by one later sale (0 if none)."""
    best = 0
    highest = None
    for price in reversed(prices):
        if highest is None or price > highest:
            highest = price
        else:
            best = max(best, highest - price)
    return best


def longest_consecutive(nums):
    """Length of the longest run of consecutive integers among nums."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def candy(ratings):
    """Fewest candies for children in a row, higher-rated beating neighbours."""
    n = len(ratings)
    total = n
    i = 1
    while i < n:
        if ratings[i] == ratings[i - 1]:
            i += 1
            continue
        peak = 0
        while i < n and ratings[i] > ratings[i - 1]:
            peak += 1
            total += peak
            i += 1
        down = 0
        while i < n and ratings[i] < ratings[i - 1]:
            down += 1
            total += down
            i += 1
        total -= min(peak, down)
    return total


def rob(nums):
    """Largest sum of values with no two adjacent ones taken."""
    if not nums:
        return 0
    prev, prev2 = nums[0], 0
    for value in nums[1:]:
        prev, prev2 = max(value + prev2, prev), prev
    return prev


def majority_elements(nums):
    """Values occurring more than len(nums) // 3 times."""
    first = second = None
    count1 = count2 = 0
    for value in nums:
        if count1 == 0 and value != second:
            first, count1 = value, 1
        elif count2 == 0 and value != first:
            second, count2 = value, 1
        elif value == first:
            count1 += 1
        elif value == second:
            count2 += 1
        else:
            count1 -= 1
            count2 -= 1

    counts = Counter(nums)
    needed = len(nums) // 3 + 1
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and counts[candidate] >= needed
    ]


def find_duplicate(nums):
    """Repeated value of a list of n + 1 values drawn from 1..n."""
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def find_132_pattern(nums):
    """Tell whether some i < j < k has nums[i] < nums[k] < nums[j]."""
    third = float("-inf")
    stack = []
    for value in reversed(nums):
        if value < third:
            return True
        while stack and value > stack[-1]:
            third = stack.pop()
        stack.append(value)
    return False


def subarray_sum(nums, k):
    """Number of contiguous runs of nums summing to k."""
    seen = Counter({0: 1})
    count = 0
    for total in accumulate(nums):
        count += seen[total - k]
        seen[total] += 1
    return count


def len_longest_fib_subseq(arr):
    """Length of the longest Fibonacci-like subsequence of a strictly rising list.

    Returns 0 when there is none of length at least three.
    """
    chain_length = {}
    best = 0
    for curr in range(2, len(arr)):
        start, end = 0, curr - 1
        while start < end:
            pair = arr[start] + arr[end]
            if pair > arr[curr]:
                end -= 1
            elif pair < arr[curr]:
                start += 1
            else:
                length = chain_length.get((start, end), 0) + 1
                chain_length[end, curr] = length
                best = max(best, length)
                end -= 1
                start += 1
    return best + 2 if best else 0


def hours_needed(piles, speed):
    """Hours to eat every pile at speed bananas an hour, one pile per hour."""
    if speed <= 0:
        raise ValueError("speed must be positive")
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles, h):
    """Slowest speed that finishes every pile within h hours."""
    low, high = 1, max(piles, default=0)
    while low <= high:
        mid = (low + high) // 2
        if hours_needed(piles, mid) <= h:
            high = mid - 1
        else:
            low = mid + 1
    return low


def count_good_numbers(n):
    """Digit strings of length n, even digits at even places and primes at odd.

    The count is taken modulo 10**9 + 7.
    """
    return pow(5, (n + 1) // 2, MOD) * pow(4, n // 2, MOD) % MOD


def rearrange_by_sign(nums):
    """Interleave positives and negatives, keeping each group's order.

    Zero counts as positive; the result starts with a positive value.
    """
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != len(negatives):
        raise ValueError("need as many positive values as negative ones")
    return list(chain.from_iterable(zip(positives, negatives)))


def _digit_sum(value):
    return sum(int(digit) for digit in str(abs(value)))


def maximum_digit_sum_pair(nums):
    """Largest sum of two values with equal digit sums, or -1 if none."""
    largest = {}
    best = -1
    for value in nums:
        key = _digit_sum(value)
        partner = largest.get(key, 0)
        if partner:
            best = max(best, value + partner)
        largest[key] = max(partner, value)
    return best


def colored_cells(n):
    """Cells coloured after n minutes of growing a diamond from one cell."""
    return 2 * n * (n - 1) + 1