"""Word index: a character-keyed prefix trie over the corpus vocabulary."""

from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Tuple

from .distance import first_row, next_row


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """
    Prefix trie built once from the corpus and only read afterwards.

    Every enumeration returns a sorted list without duplicates. Walks and
    traversals are iterative, so query length and word length never turn
    into recursion depth.
    """

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self.root = TrieNode()
        self._size = 0
        if words is not None:
            self.insert_all(words)

    # ---- Build ----
    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def insert_all(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert(word)

    # ---- Membership ----
    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def has_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.has_word(word)

    def __len__(self) -> int:
        return self._size

    def words(self) -> List[str]:
        """The whole vocabulary, sorted."""
        return self.find_all_with_prefix("")

    # ---- Generators ----
    def find_all_with_prefix(self, prefix: str) -> List[str]:
        """Every vocabulary word that starts with prefix (prefix itself included)."""
        node = self._walk(prefix)
        if node is None:
            return []
        return sorted(self._iter_terminals(node, prefix))

    def whitespace_split(self, word: str) -> List[str]:
        """
        All "a b" such that a + b == word and both halves are vocabulary
        words of length >= 1.
        """
        out = []
        for i in range(1, len(word)):
            head, tail = word[:i], word[i:]
            if self.has_word(head) and self.has_word(tail):
                out.append(f"{head} {tail}")
        # split points ascend, but "ab c" vs "a bc" does not sort by split point
        return sorted(out)

    def find_within_edit_distance(self, phrase: str, max_distance: int) -> List[str]:
        """
        Every vocabulary word within max_distance edits of phrase.

        Depth-first over the trie, carrying the DP row of (path vs phrase).
        A subtree is skipped when its path is already more than max_distance
        characters longer than phrase, or when no cell of the row is within
        bound (every extension then costs at least min(row)).
        """
        if max_distance < 0:
            return []

        found: List[str] = []
        limit = len(phrase) + max_distance
        stack: List[Tuple[TrieNode, str, List[int]]] = [(self.root, "", first_row(phrase))]
        while stack:
            node, path, row = stack.pop()
            if node.is_terminal and row[-1] <= max_distance:
                found.append(path)
            if len(path) > limit or min(row) > max_distance:
                continue
            for ch, child in node.children.items():
                stack.append((child, path + ch, next_row(row, ch, phrase)))
        return sorted(found)

    # ---- Internals ----
    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _iter_terminals(start: TrieNode, prefix: str) -> Iterator[str]:
        stack = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_terminal:
                yield path
            for ch, child in node.children.items():
                stack.append((child, path + ch))
