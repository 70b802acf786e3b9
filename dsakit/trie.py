"""Prefix tree over lowercase words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class _TrieNode:
    children: dict = field(default_factory=dict)
    terminal: bool = False


def _check(word: str) -> None:
    for char in word:
        if not "a" <= char <= "z":
            raise ValueError(f"character {char!r} is not a lowercase letter a-z")


class Trie:
    """A trie storing words made of the letters a-z."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _check(word)
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted and not deleted."""
        _check(word)
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return False
        return node.terminal

    def delete(self, word: str) -> bool:
        """Remove ``word``, pruning nodes no other word needs.

        Returns True if the word was present.
        """
        _check(word)
        path = []
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            path.append((node, char))
            node = child
        if not node.terminal:
            return False
        node.terminal = False
        for parent, char in reversed(path):
            child = parent.children[char]
            if child.terminal or child.children:
                break
            del parent.children[char]
        return True

    def __contains__(self, word: str) -> bool:
        return self.search(word)