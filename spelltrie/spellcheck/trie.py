from __future__ import annotations

from spelltrie.common.rwlock import ReadWriteLock
from spelltrie.spellcheck.variations import generate_variations

DEFAULT_DEPTH = 1


class LetterNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, LetterNode] = {}
        self.is_word = False


class Trie:
    """Prefix tree of known words with edit-based suggestions on a miss.

    Safe to share between threads: ``insert`` holds the write lock, lookups
    share the read lock. Nodes never leave the trie.
    """

    def __init__(self, depth: int = DEFAULT_DEPTH) -> None:
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise TypeError(f"depth must be an int, got {type(depth).__name__}")
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        self._depth = depth
        self._root: LetterNode | None = None
        self._lock = ReadWriteLock()

    @property
    def depth(self) -> int:
        return self._depth

    def insert(self, word: str) -> None:
        with self._lock.write():
            if self._root is None:
                self._root = LetterNode()

            node = self._root
            for char in word:
                child = node.children.get(char)
                if child is None:
                    child = LetterNode()
                    node.children[char] = child
                node = child

            if not node.is_word:
                node.is_word = True

    def search_direct(self, word: str) -> bool:
        with self._lock.read():
            return self._contains(word)

    def search(self, word: str) -> tuple[bool, list[str]]:
        """Exact lookup, falling back to suggestions on a miss.

        Returns ``(True, [])`` for a known word and ``(False, [])`` when
        ``word`` is only a prefix of known words. When the walk leaves the
        tree, returns ``False`` with the variations of ``word`` (see
        ``generate_variations``) that are known words, in generation order.
        """
        with self._lock.read():
            node = self._walk(word)
            if node is not None:
                return node.is_word, []

            # All confirmations reuse the read guard already held.
            suggestions = [
                variation
                for variation in generate_variations(word, self._depth)
                if self._contains(variation)
            ]
            return False, suggestions

    def _walk(self, word: str) -> LetterNode | None:
        node = self._root
        if node is None:
            return None
        for char in word:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def _contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word
