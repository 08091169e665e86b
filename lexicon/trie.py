"""Prefix trie for fast word and prefix lookups."""

from __future__ import annotations

import random
from collections.abc import KeysView


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie plus the collection of complete words stored in it.

    The word collection is the source for enumeration and sampling; the
    node tree answers exact and prefix lookups.  Both are updated together
    in :meth:`insert`.
    """

    def __init__(self):
        self.root = TrieNode()
        # dict keeps uniqueness and gives a read-only keys() view
        self._words: dict[str, None] = {}
        self._sequence: list[str] = []
        self._frozen = False

    def insert(self, word: str) -> None:
        if self._frozen:
            raise RuntimeError(f"cannot insert {word!r}: trie is frozen")
        if word in self._words:
            return
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_terminal = True
        self._words[word] = None
        self._sequence.append(word)

    def search(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def all_words(self) -> KeysView[str]:
        """Read-only, set-like view of every stored word."""
        return self._words.keys()

    def random_word(self, rng: random.Random | None = None) -> str | None:
        """Uniformly chosen stored word, or None when the trie is empty."""
        if not self._sequence:
            return None
        return (rng or random).choice(self._sequence)

    def freeze(self) -> None:
        """Reject any further insertions."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._sequence)

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
