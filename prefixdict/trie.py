"""Prefix trie for exact word, prefix and prefix-enumeration lookups."""

from __future__ import annotations

from typing import Iterable


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def __repr__(self) -> str:
        return f"TrieNode(children={list(self.children)}, is_terminal={self.is_terminal})"


class Trie:
    """Prefix trie keyed by arbitrary symbols (letters, digits, hyphens, ...).

    Symbols are compared exactly, so ``"JavaScript"`` and ``"javascript"``
    are different words.
    """

    __slots__ = ("root", "_size", "_node_count")

    def __init__(self, words: Iterable[str] | None = None):
        self.root = TrieNode()
        self._size = 0
        self._node_count = 1
        if words is not None:
            self.insert_many(words)

    # public API

    def insert(self, word: str) -> None:
        """Add *word*; inserting the same word again changes nothing."""
        node = self.root
        for ch in self._checked(word):
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
                self._node_count += 1
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def insert_many(self, words: Iterable[str]) -> int:
        """Insert every word in *words*; returns how many were new."""
        before = self._size
        for word in words:
            self.insert(word)
        return self._size - before

    def search(self, word: str) -> bool:
        node = self._walk(self._checked(word))
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str) -> bool:
        return self._walk(self._checked(prefix)) is not None

    def find_words_with_prefix(self, prefix: str) -> list[str]:
        """All stored words beginning with *prefix* (``[]`` if none).

        Only the subtree under the prefix node is visited. Order follows
        child insertion order.
        """
        node = self._walk(self._checked(prefix))
        if node is None:
            return []
        return self._collect(node, prefix)

    def clear(self) -> None:
        """Drop every node and start over with an empty root."""
        self.root = TrieNode()
        self._size = 0
        self._node_count = 1

    @property
    def node_count(self) -> int:
        """Nodes currently allocated, root included."""
        return self._node_count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Trie(words={self._size}, nodes={self._node_count})"

    # traversal

    @staticmethod
    def _checked(s: str) -> str:
        if not isinstance(s, str):
            raise TypeError("word must be a string")
        return s

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(start: TrieNode, prefix: str) -> list[str]:
        """Pre-order walk of the subtree under *start*, without recursion.

        Stack entries are (node, depth, symbol): ``path`` is cut back to
        *depth* before *symbol* is appended, so it always spells the
        current node.
        """
        words: list[str] = []
        path = list(prefix)
        stack: list[tuple[TrieNode, int, str | None]] = [(start, len(path), None)]
        while stack:
            node, depth, ch = stack.pop()
            del path[depth:]
            if ch is not None:
                path.append(ch)
            if node.is_terminal:
                words.append("".join(path))
            # reversed so the first child is popped first
            for child_ch, child in reversed(node.children.items()):
                stack.append((child, len(path), child_ch))
        return words
