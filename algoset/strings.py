"""String algorithms: palindromes, numerals, prefixes, keypads and more."""

from collections import Counter
from functools import lru_cache
from itertools import product

_ROMAN_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
_ROMAN_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_ROMAN_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_ROMAN_THOUSANDS = ("", "M", "MM", "MMM")

KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def _expand(s, left, right):
    """Length of the palindrome grown outwards from the given centre."""
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome(s):
    """Return the longest palindromic substring; among equals the later one."""
    if not s:
        return ""
    start = end = 0
    for centre in range(len(s)):
        length = max(_expand(s, centre, centre), _expand(s, centre, centre + 1))
        if length > end - start:
            start = centre - (length - 1) // 2
            end = centre + length // 2
    return s[start:end + 1]


def int_to_roman(num):
    """Write a number from 0 to 3999 in Roman numerals (0 gives "")."""
    if not 0 <= num <= 3999:
        raise ValueError(f"cannot write {num} in Roman numerals")
    return (
        _ROMAN_THOUSANDS[num // 1000]
        + _ROMAN_HUNDREDS[num % 1000 // 100]
        + _ROMAN_TENS[num % 100 // 10]
        + _ROMAN_ONES[num % 10]
    )


def longest_common_prefix(strs):
    """Return the longest prefix shared by every string."""
    if not strs:
        return ""
    prefix = strs[0]
    for text in strs[1:]:
        while not text.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def letter_combinations(digits):
    """List every letter string the digits can spell on a phone keypad."""
    if not digits:
        return []
    groups = [KEYPAD.get(digit, "") for digit in digits]
    return ["".join(letters) for letters in product(*groups)]


def word_break(s, word_dict):
    """Tell whether s splits into a sequence of dictionary words."""
    words = [word for word in word_dict if word]

    @lru_cache(maxsize=None)
    def fits(start):
        if start == len(s):
            return True
        return any(s.startswith(word, start) and fits(start + len(word)) for word in words)

    return fits(0)


def num_tile_possibilities(tiles):
    """Count the distinct non-empty sequences that can be laid from the tiles."""
    counts = Counter(tiles)

    def count():
        total = 0
        for letter, left in counts.items():
            if left:
                counts[letter] -= 1
                total += 1 + count()
                counts[letter] += 1
        return total

    return count()


def divide_string(s, k, fill):
    """Cut s into pieces of length k, padding the last one with fill."""
    if k <= 0:
        raise ValueError("group size must be positive")
    return [s[i:i + k].ljust(k, fill) for i in range(0, len(s), k)]


def smallest_number(pattern):
    """Smallest number of distinct digits that follows an I/D pattern."""
    result = []
    pending = []
    for number, step in enumerate([*pattern, None], start=1):
        pending.append(number)
        if step is None or step == "I":
            while pending:
                result.append(str(pending.pop()))
    return "".join(result)


def minimum_recolors(blocks, k):
    """Fewest white blocks to repaint to get k black blocks in a row."""
    if not blocks:
        raise ValueError("blocks must not be empty")
    black = 0
    best = None
    for i, block in enumerate(blocks):
        if i >= k and blocks[i - k] == "B":
            black -= 1
        if block == "B":
            black += 1
        needed = k - black
        best = needed if best is None else min(best, needed)
    return best