# word_builder/core/protocols.py
"""
Protocol interfaces for the engine as seen by its callers.

The search worker, CLI and TUI only rely on these shapes, so tests can hand them
a stub engine instead of a real dictionary.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Set, Tuple, runtime_checkable

from typing_extensions import TypedDict


class RankedWord(TypedDict):
    """Serialisable form of one ranked result."""

    word: str
    score: int


@runtime_checkable
class WordSearchProtocol(Protocol):
    """Plain (unscored) search over a dictionary."""

    def find_words(self, letters: str) -> Set[str]:
        ...

    def find_words_sorted(self, letters: str) -> List[str]:
        ...


@runtime_checkable
class RankedSearchProtocol(Protocol):
    """
    Scored search used by the worker and front ends.
    ranked_words raises PatternError for an invalid pattern.
    """

    def ranked_words(
        self,
        letters: str,
        pattern: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Tuple[str, int]]:
        ...


def as_records(ranked: List[Tuple[str, int]]) -> List[RankedWord]:
    return [RankedWord(word=w, score=s) for w, s in ranked]
