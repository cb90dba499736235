"""Prefix trie with constant-time child lookup."""

from __future__ import annotations

from typing import Iterable

from scrabbler.constants import ALPHABET

MIN_WORD_LENGTH = 3


class TrieNode:
    """Single node in the prefix trie.

    ``children`` keeps insertion order; ``letter_indexes`` maps each letter
    (``ord(letter) - ord('A')``) to its position in ``children`` or -1.
    """

    __slots__ = ("letter", "is_terminal", "children", "letter_indexes")

    def __init__(self, letter: str = "*"):
        self.letter = letter
        self.is_terminal: bool = False
        self.children: list[TrieNode] = []
        self.letter_indexes: list[int] = [-1] * len(ALPHABET)

    def child(self, letter: str) -> TrieNode | None:
        """Child node for an uppercase *letter*, or None."""
        index = self.letter_indexes[ord(letter) - 65]
        if index == -1:
            return None
        return self.children[index]

    def add_child(self, letter: str) -> TrieNode:
        node = TrieNode(letter)
        self.children.append(node)
        self.letter_indexes[ord(letter) - 65] = len(self.children) - 1
        return node

    def __repr__(self) -> str:
        mark = "$" if self.is_terminal else ""
        kids = "".join(c.letter for c in self.children)
        return f"TrieNode({self.letter}{mark} -> {kids})"


class Trie:
    """Prefix trie for fast word and prefix checks."""

    def __init__(self):
        self.root = TrieNode()
        self.size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        """Build a trie from every all-uppercase word of three or more letters.

        Words are inserted in sorted order so that child order, and with it
        the order in which the search meets equal-scoring moves, does not
        depend on set iteration order.
        """
        trie = cls()
        for word in sorted(words):
            if len(word) >= MIN_WORD_LENGTH and all(ch in ALPHABET for ch in word):
                trie.insert(word)
        return trie

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            child = node.child(ch)
            if child is None:
                child = node.add_child(ch)
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self.size += 1

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def __len__(self) -> int:
        return self.size

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            if ch not in ALPHABET:
                return None
            node = node.child(ch)
            if node is None:
                return None
        return node
