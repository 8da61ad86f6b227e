"""Checking, generating and repairing bracket strings."""

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset("([{")


def is_valid_brackets(s):
    """Tell whether every bracket of the three kinds is properly closed."""
    stack = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        opener = stack.pop()
        if ch in _PAIRS and _PAIRS[ch] != opener:
            return False
    return not stack


def generate_parentheses(n):
    """List every well-formed string of n pairs, in lexicographic order."""
    result = []

    def build(current, opened, closed):
        if len(current) == 2 * n:
            result.append(current)
            return
        if opened < n:
            build(current + "(", opened + 1, closed)
        if closed < opened:
            build(current + ")", opened, closed + 1)

    build("", 0, 0)
    return result


def is_balanced(s):
    """Tell whether round brackets balance, ignoring any other characters."""
    depth = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def remove_invalid_parentheses(s):
    """All balanced strings reached by removing the fewest brackets."""
    level = [s]
    seen = {s}
    while level:
        valid = [candidate for candidate in level if is_balanced(candidate)]
        if valid:
            return valid
        following = []
        for current in level:
            for j, ch in enumerate(current):
                if ch not in "()":
                    continue
                candidate = current[:j] + current[j + 1:]
                if candidate not in seen:
                    seen.add(candidate)
                    following.append(candidate)
        level = following
    return []


def check_valid_string(s):
    """Tell whether s can balance when each '*' may be '(', ')' or nothing."""
    low = high = 0
    for ch in s:
        if ch == "(":
            low += 1
            high += 1
        elif ch == ")":
            low -= 1
            high -= 1
        else:
            low -= 1
            high += 1
        low = max(low, 0)
        if high < 0:
            return False
    return low == 0