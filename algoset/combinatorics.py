"""Permutations, subsets, backtracking searches and puzzle solvers."""

from math import factorial

EMPTY = "."
_DIGITS = "123456789"


def next_permutation(nums):
    """Rearrange the list nums in place into its next lexicographic order.

    The greatest arrangement wraps round to the smallest (ascending) one.
    """
    pivot = next(
        (i for i in reversed(range(len(nums) - 1)) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(
        i for i in reversed(range(pivot + 1, len(nums))) if nums[i] > nums[pivot]
    )
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = nums[:pivot:-1]


def is_valid_placement(board, row, col, digit):
    """Tell whether digit may go at (row, col) of a 9x9 sudoku board."""
    if digit in board[row]:
        return False
    if any(line[col] == digit for line in board):
        return False
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    return all(
        digit not in board[r][box_col:box_col + 3]
        for r in range(box_row, box_row + 3)
    )


def solve_sudoku(board):
    """Fill the '.' cells of board in place; return whether it was solved.

    An unsolvable board is left as it was.
    """
    cell = next(
        (
            (r, c)
            for r, line in enumerate(board)
            for c, value in enumerate(line)
            if value == EMPTY
        ),
        None,
    )
    if cell is None:
        return True
    row, col = cell
    for digit in _DIGITS:
        if is_valid_placement(board, row, col, digit):
            board[row][col] = digit
            if solve_sudoku(board):
                return True
            board[row][col] = EMPTY
    return False


def combination_sum(candidates, target):
    """List every multiset of candidates (reused freely) summing to target."""
    if any(candidate <= 0 for candidate in candidates):
        raise ValueError("candidates must be positive")
    result = []
    chosen = []

    def search(index, remaining):
        if index >= len(candidates) or remaining < 0:
            return
        if remaining == 0:
            result.append(list(chosen))
            return
        chosen.append(candidates[index])
        search(index, remaining - candidates[index])
        chosen.pop()
        search(index + 1, remaining)

    search(0, target)
    return result


def permute(nums):
    """List every arrangement of nums, generated by successive swaps."""
    items = list(nums)
    result = []

    def arrange(index):
        if index == len(items):
            result.append(list(items))
            return
        for i in range(index, len(items)):
            items[index], items[i] = items[i], items[index]
            arrange(index + 1)
            items[index], items[i] = items[i], items[index]

    arrange(0)
    return result


def solve_n_queens(n):
    """List every placement of n non-attacking queens as rows of 'Q' and '.'."""
    solutions = []
    board = [[EMPTY] * n for _ in range(n)]
    used_rows = set()
    rising = set()
    falling = set()

    def place(col):
        if col == n:
            solutions.append(["".join(line) for line in board])
            return
        for row in range(n):
            if row in used_rows or col - row in rising or row + col in falling:
                continue
            board[row][col] = "Q"
            used_rows.add(row)
            rising.add(col - row)
            falling.add(row + col)
            place(col + 1)
            board[row][col] = EMPTY
            used_rows.discard(row)
            rising.discard(col - row)
            falling.discard(row + col)

    place(0)
    return solutions


def get_permutation(n, k):
    """Return the k-th (1-based) permutation of the digits 1..n as a string."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= factorial(n):
        raise ValueError(f"k must lie between 1 and {factorial(n)}")
    numbers = list(range(1, n + 1))
    k -= 1
    digits = []
    while numbers:
        index, k = divmod(k, factorial(len(numbers) - 1))
        digits.append(str(numbers.pop(index)))
    return "".join(digits)


def subsets(nums):
    """List every subset of nums, in the order of their bit masks."""
    return [
        [value for bit, value in enumerate(nums) if mask >> bit & 1]
        for mask in range(1 << len(nums))
    ]


def subsets_with_dup(nums):
    """List every distinct subset of nums, each sorted."""
    items = sorted(nums)
    result = []
    chosen = []

    def extend(start):
        result.append(list(chosen))
        for i in range(start, len(items)):
            if i != start and items[i] == items[i - 1]:
                continue
            chosen.append(items[i])
            extend(i + 1)
            chosen.pop()

    extend(0)
    return result


def add_operators(num, target):
    """List the ways to put '+', '-' and '*' between the digits to hit target."""
    result = []

    def search(index, expr, last, value):
        if index == len(num):
            if value == target:
                result.append(expr)
            return
        for end in range(index + 1, len(num) + 1):
            if end - index > 1 and num[index] == "0":
                break
            text = num[index:end]
            operand = int(text)
            if index == 0:
                search(end, text, operand, operand)
            else:
                search(end, f"{expr}+{text}", operand, value + operand)
                search(end, f"{expr}-{text}", -operand, value - operand)
                search(
                    end,
                    f"{expr}*{text}",
                    last * operand,
                    value - last + last * operand,
                )

    search(0, "", 0, 0)
    return result