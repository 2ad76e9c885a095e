"""
word_builder

Find every dictionary word that can be spelled from a bag of letters.
Contains:
 - the prefix tree dictionary (WordTrie)
 - multiset budgeted search with `*` wildcards (find_words)
 - whole-word regex filtering (find_matching)
 - letter score ranking (ScoredWordTrie)
"""

from .core import (
    ScoredWordTrie,
    ScoreTable,
    WordTrie,
    find_matching,
    find_optional,
    find_words,
    find_words_sorted,
)
from .errors import PatternError, WordBuilderError

__all__ = [
    "ScoredWordTrie",
    "ScoreTable",
    "WordTrie",
    "find_matching",
    "find_optional",
    "find_words",
    "find_words_sorted",
    "PatternError",
    "WordBuilderError",
]

__version__ = "0.1.0"
