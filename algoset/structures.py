"""Small container types: a prefix tree and a stack kept in a queue."""

from collections import deque
from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """Prefix tree of words."""

    def __init__(self):
        self._root = _TrieNode()

    def _walk(self, text):
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word):
        """Add a word."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def search(self, word):
        """Tell whether the word was inserted."""
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix):
        """Tell whether any inserted word begins with prefix."""
        return self._walk(prefix) is not None


class QueueStack:
    """Last-in first-out stack kept in a single queue."""

    def __init__(self):
        self._queue = deque()

    def push(self, x):
        """Put x on top."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self):
        """Remove and return the top item."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self):
        """Return the top item without removing it."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def is_empty(self):
        """Tell whether the stack holds nothing."""
        return not self._queue

    def __len__(self):
        return len(self._queue)