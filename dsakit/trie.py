"""A prefix tree over lower-case Latin words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Optional

ALPHABET = string.ascii_lowercase


@dataclass(eq=False)
class _TrieNode:
    is_end: bool = False
    children: dict[str, "_TrieNode"] = field(default_factory=dict)


class Trie:
    """Stores words made of the letters ``a`` to ``z``."""

    def __init__(self, words=()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    @staticmethod
    def _check(char: str) -> str:
        if char not in ALPHABET:
            raise ValueError(f"character {char!r} is not a lower-case letter a-z")
        return char

    def _walk(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for char in text:
            node = node.children.get(self._check(char))
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(self._check(char), _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Return whether ``word`` itself was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Return whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)