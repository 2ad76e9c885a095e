# pattern_filter.py
"""
Pattern filtered search.

The pattern is a Python regular expression matched against the *whole* word
(re.fullmatch), so "car.*" keeps "cart" but not "scar". The pattern is compiled
before the trie is touched: an invalid pattern raises PatternError and never
yields partial results.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, List, Optional, Set

from word_builder.core.search import find_words
from word_builder.errors import PatternError

if TYPE_CHECKING:
    from word_builder.core.trie import WordTrie

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(pattern, e.msg, e.pos) from e


def is_valid_pattern(pattern: str) -> bool:
    """Cheap check for front ends validating input before querying."""
    try:
        compile_pattern(pattern)
    except PatternError:
        return False
    return True


def find_matching(trie: "WordTrie", letters: str, pattern: str) -> Set[str]:
    """
    Words buildable from `letters` whose whole text matches `pattern`.
    Raises PatternError if the pattern does not compile.
    """
    compiled = compile_pattern(pattern)
    words = find_words(trie, letters)
    matched = {w for w in words if compiled.fullmatch(w)}
    logger.debug(
        "find_matching pattern=%r candidates=%d matched=%d",
        pattern,
        len(words),
        len(matched),
    )
    return matched


def find_matching_sorted(trie: "WordTrie", letters: str, pattern: str) -> List[str]:
    return sorted(find_matching(trie, letters, pattern))


def find_optional(
    trie: "WordTrie", letters: str, pattern: Optional[str] = None
) -> Set[str]:
    """Empty or missing pattern means no filtering."""
    if not pattern:
        return find_words(trie, letters)
    return find_matching(trie, letters, pattern)
