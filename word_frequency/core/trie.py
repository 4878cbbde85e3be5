# trie.py
# Prefix tree keyed by word spelling with a cumulative count per word.
# insert and lookup cost O(len(word)) whatever the number of stored words.

from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, Tuple

from .errors import InvalidArgumentError

Word = str
Count = int
Entry = Tuple[Word, Count]


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    count: cumulative frequency inserted for the word ending here (0 for pure prefixes)
    """

    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.count = 0


class FrequencyTrie:
    """
    Trie answering exact-word frequency queries.
    Built once from the ranked sequence, queried, then discarded; there is no
    deletion or enumeration.
    """

    def __init__(self) -> None:
        self._root = TrieNode()

    @classmethod
    def from_ranked(cls, entries: Iterable[Entry]) -> "FrequencyTrie":
        trie = cls()
        for word, count in entries:
            trie.insert(word, count)
        return trie

    # insertion -----------------------------------------------------
    def insert(self, word: str, count: int = 1) -> None:
        """
        Add `count` to the stored frequency of `word`.
        Repeated inserts accumulate. The empty word is ignored: the root is never a word.
        """
        if count < 0:
            raise InvalidArgumentError(f"count must be >= 0, got {count!r}")
        if not word:
            return

        node = self._root
        for ch in word:
            node = node.children[ch]
        node.count += count

    # lookup ---------------------------------------------------------
    def lookup(self, word: str) -> int:
        """
        Frequency stored for exactly `word`; 0 when the path is missing or when the
        node only exists as a prefix of longer words.
        """
        if not word:
            return 0

        node = self._root
        for ch in word:
            # .get: a miss must not grow the defaultdict
            nxt = node.children.get(ch)
            if nxt is None:
                return 0
            node = nxt
        return node.count

    def __contains__(self, word: str) -> bool:
        return self.lookup(word) > 0
