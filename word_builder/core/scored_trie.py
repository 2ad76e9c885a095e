# word_builder/core/scored_trie.py
"""
ScoredWordTrie - ranks buildable words by letter points

Wraps one frozen WordTrie and one ScoreTable (built together, never mutated
afterwards) and returns (word, score) pairs:
 - score = sum of the per-letter values, letters missing from the table count 0
 - ordering is score descending, then word ascending, so equal scores always come
   out in the same order regardless of traversal order
 - batch scoring goes through numpy: one lookup table indexed by byte value
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np

from word_builder.core.pattern_filter import find_optional
from word_builder.core.trie import WordTrie

logger = logging.getLogger(__name__)

Word = str
Score = int
Candidate = Tuple[Word, Score]
PathLike = Union[str, Path]


class ScoreTable:
    """Immutable letter -> points mapping."""

    __slots__ = ("_scores", "_lookup")

    def __init__(self, scores: Optional[Mapping[str, int]] = None) -> None:
        table: Dict[str, int] = {}
        for ch, value in (scores or {}).items():
            key = ch.lower()
            if len(key) != 1 or not (key.isascii() and key.isalpha()):
                raise ValueError(f"score keys must be single ascii letters, got {ch!r}")
            value = int(value)
            if value < 0:
                raise ValueError(f"score for {ch!r} must be non-negative, got {value}")
            table[key] = value
        self._scores = table

        # byte value -> points; only ascii letters are ever set
        lookup = np.zeros(256, dtype=np.int64)
        for ch, value in table.items():
            lookup[ord(ch)] = value
        lookup.setflags(write=False)
        self._lookup = lookup

    def __getitem__(self, ch: str) -> int:
        return self._scores.get(ch, 0)

    def __contains__(self, ch: str) -> bool:
        return ch in self._scores

    def __len__(self) -> int:
        return len(self._scores)

    def as_dict(self) -> Dict[str, int]:
        return dict(self._scores)

    def score(self, word: str) -> Score:
        return sum(self._scores.get(ch, 0) for ch in word)

    def score_many(self, words: Iterable[str]) -> List[Score]:
        """Vectorised scoring for a batch of words."""
        words = list(words)
        if not words:
            return []
        # one byte per char, anything outside latin-1 becomes "?" which scores 0
        joined = np.frombuffer("".join(words).encode("latin-1", "replace"), dtype=np.uint8)
        if not len(joined):
            return [0] * len(words)
        lengths = np.fromiter((len(w) for w in words), dtype=np.int64, count=len(words))
        values = self._lookup[joined]
        # prefix sums give each word's total without a python loop
        ends = np.cumsum(lengths)
        totals = np.concatenate(([0], np.cumsum(values)))
        return (totals[ends] - totals[ends - lengths]).tolist()


class ScoredWordTrie:
    """
    A WordTrie plus a ScoreTable.
    Public API:
      - ranked_words(letters, pattern=None, limit=None) -> List[(word, score)]
      - score(word) -> int
    """

    def __init__(self, word_trie: WordTrie, scores: Union[ScoreTable, Mapping[str, int], None] = None) -> None:
        self.word_trie = word_trie.freeze()
        self.score_table = scores if isinstance(scores, ScoreTable) else ScoreTable(scores)

    @classmethod
    def from_files(cls, words_path: PathLike, scores_path: PathLike) -> "ScoredWordTrie":
        from word_builder.ingest.file_reader import load_scored_trie

        return load_scored_trie(words_path, scores_path)

    def score(self, word: str) -> Score:
        return self.score_table.score(word)

    def ranked_words(
        self,
        letters: str,
        pattern: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Candidate]:
        """
        Return (word, score) for every word buildable from `letters` (and matching
        `pattern` if given) sorted by score desc, then lexicographically.
        Raises PatternError for an invalid pattern.
        """
        words = sorted(find_optional(self.word_trie, letters, pattern))
        scored = list(zip(words, self.score_table.score_many(words)))
        scored.sort(key=lambda kv: (-kv[1], kv[0]))  # deterministic: score desc, then word asc
        if limit is not None:
            scored = scored[:limit]
        logger.debug("ranked %d words for letters=%r pattern=%r", len(scored), letters, pattern)
        return scored
