# trie.py
# Prefix tree holding the dictionary.
# Built once during loading, then frozen and shared read-only by every query.
# Nodes are created lazily on insert and never removed.

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set

from word_builder.core import search
from word_builder.errors import FrozenTrieError

logger = logging.getLogger(__name__)


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: marks that the path from the root to this node spells a dictionary word
    """

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False

    def append_word(self, word: str) -> bool:
        """
        Walk/create one child per character of `word` and mark the last node.
        Returns True if the word was not already stored.
        """
        node = self
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        added = not node.is_word
        node.is_word = True
        return added

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return self.is_word == other.is_word and self.children == other.children

    def __repr__(self) -> str:
        return f"<TrieNode is_word={self.is_word} children={sorted(self.children)}>"


class WordTrie:
    """
    Dictionary of words stored as a prefix tree, used for:
     - constrained multiset search (find_words)
     - pattern filtered search (find_matching)
     - membership checks
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0
        self._frozen = False

    @classmethod
    def from_words(cls, words: Iterable[str], freeze: bool = False) -> "WordTrie":
        trie = cls()
        for word in words:
            trie.insert(word)
        if freeze:
            trie.freeze()
        return trie

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word into the trie.
        Lowercases everything, no other validation (ingestion already did it).
        Inserting the same word twice is a no-op.
        """
        if self._frozen:
            raise FrozenTrieError(f"cannot insert {word!r}: trie is frozen")
        if not word:
            return
        if self._root.append_word(word.lower()):
            self._size += 1

    def freeze(self) -> "WordTrie":
        """Make the trie read-only. Safe to share across threads afterwards."""
        if not self._frozen:
            self._frozen = True
            logger.debug("trie frozen with %d words", self._size)
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # search ---------------------------------------------------------
    def find_words(self, letters: str) -> Set[str]:
        return search.find_words(self, letters)

    def find_words_sorted(self, letters: str) -> List[str]:
        return search.find_words_sorted(self, letters)

    # convenience -----------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        """Simple membership check."""
        node = self._root
        for ch in word.lower():
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_word
