"""Prefix tree over lowercase ASCII words."""

from __future__ import annotations

from dataclasses import dataclass, field
from string import ascii_lowercase
from typing import Iterable

_ALPHABET = frozenset(ascii_lowercase)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


def _checked(word: str) -> str:
    if not _ALPHABET.issuperset(word):
        raise ValueError(f"word must contain only letters a-z: {word!r}")
    return word


class Trie:
    """Stores whole words made of the letters a-z."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not _ALPHABET.issuperset(word):
            return False
        return self.search(word)

    def insert(self, word: str) -> None:
        node = self._root
        for letter in _checked(word):
            node = node.children.setdefault(letter, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """Return True only if ``word`` itself was inserted, not merely a longer word."""
        node = self._root
        for letter in _checked(word):
            child = node.children.get(letter)
            if child is None:
                return False
            node = child
        return node.terminal