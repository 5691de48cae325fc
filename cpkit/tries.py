"""Prefix tries over strings and a binary trie for maximum-XOR queries."""

from __future__ import annotations

from dataclasses import dataclass, field

_BITS = 32
_MASK = (1 << _BITS) - 1


@dataclass
class _Node:
    terminal: bool = False
    children: dict[str, _Node] = field(default_factory=dict)


class Trie:
    """Set of words supporting exact and prefix lookup."""

    def __init__(self) -> None:
        self._root = _Node()

    def _walk(self, prefix: str) -> _Node | None:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add word; the empty word is ignored."""
        if not word:
            return
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.terminal = True

    def search(self, word: str) -> bool:
        """True if word was inserted."""
        if not word:
            return False
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """True if some inserted word begins with prefix."""
        return self._walk(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)


@dataclass
class TrieNode:
    """A node that remembers the prefix leading to it."""

    word: str = ""
    ends: bool = False
    children: dict[str, TrieNode] = field(default_factory=dict)


class WordTrie:
    """Trie whose nodes carry the prefix spelled out along their path."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def insert(self, word: str) -> None:
        """Add a non-empty word."""
        if not word:
            raise ValueError("cannot insert an empty word")
        node = self.root
        for ch in word:
            child = node.children.setdefault(ch, TrieNode())
            child.word = node.word + ch
            node = child
        node.ends = True

    def node(self, prefix: str) -> TrieNode | None:
        """The node reached by prefix, or None if no word starts with it."""
        current = self.root
        for ch in prefix:
            current = current.children.get(ch)
            if current is None:
                return None
        return current


class XorTrie:
    """Binary trie of 32-bit two's-complement integers for maximum-XOR queries."""

    def __init__(self) -> None:
        self._root: list = [None, None]

    def insert(self, num: int) -> None:
        """Add num, taken as a 32-bit value."""
        value = num & _MASK
        node = self._root
        for shift in range(_BITS - 1, -1, -1):
            bit = value >> shift & 1
            if node[bit] is None:
                node[bit] = [None, None]
            node = node[bit]

    def find_max(self, num: int) -> int:
        """Largest num ^ x over inserted x, as a signed 32-bit value; -1 if empty."""
        if self._root[0] is None and self._root[1] is None:
            return -1
        value = num & _MASK
        node = self._root
        best = 0
        for shift in range(_BITS - 1, -1, -1):
            bit = value >> shift & 1
            if node[bit ^ 1] is not None:
                node = node[bit ^ 1]
                best |= 1 << shift
            else:
                node = node[bit]
        return best - (1 << _BITS) if best >> (_BITS - 1) else best