"""Prefix tree over lowercase words with wildcard lookups."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence

Mask = Sequence[Optional[str]]


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    """Word set supporting exact and fuzzy membership.

    Fuzzy queries take a mask where ``None`` stands for any single letter.
    At a wildcard only the edges that exist below the current node are
    explored, so the cost of a query follows the shape of the stored words
    rather than the size of the alphabet.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        self._size = 0
        for word in words:
            self.insert(word)

    def insert(self, word: Iterable[str]) -> None:
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def contains(self, word: Iterable[str]) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def fuzzy_contains(self, mask: Mask) -> bool:
        """Return True if some stored word of ``len(mask)`` agrees with every letter in ``mask``."""

        return self._fuzzy(self.root, mask, 0)

    def _fuzzy(self, node: TrieNode, mask: Mask, position: int) -> bool:
        if position == len(mask):
            return node.is_word
        letter = mask[position]
        if letter is None:
            return any(self._fuzzy(child, mask, position + 1) for child in node.children.values())
        child = node.children.get(letter)
        if child is None:
            return False
        return self._fuzzy(child, mask, position + 1)

    def _walk(self, word: Iterable[str]) -> Optional[TrieNode]:
        node = self.root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def words(self) -> List[str]:
        """Return every stored word in alphabetical order."""

        found: List[str] = []
        self._collect(self.root, [], found)
        return found

    def _collect(self, node: TrieNode, prefix: List[str], found: List[str]) -> None:
        if node.is_word:
            found.append("".join(prefix))
        for ch in sorted(node.children):
            prefix.append(ch)
            self._collect(node.children[ch], prefix, found)
            prefix.pop()

    def node_count(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, (str, tuple, list)):
            return False
        return self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Trie(words={self._size})"
