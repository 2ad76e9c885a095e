"""
word_builder.core

The search engine:
 - WordTrie: prefix tree dictionary, frozen after loading
 - find_words / find_words_sorted: letter budget traversal
 - find_matching / find_optional: whole-word regex filter on top
 - ScoredWordTrie / ScoreTable: ranking by letter points
"""

from .trie import TrieNode, WordTrie
from .search import SearchFrontier, find_words, find_words_sorted, letter_budget
from .pattern_filter import find_matching, find_matching_sorted, find_optional
from .scored_trie import ScoredWordTrie, ScoreTable

__all__ = [
    "TrieNode",
    "WordTrie",
    "SearchFrontier",
    "find_words",
    "find_words_sorted",
    "letter_budget",
    "find_matching",
    "find_matching_sorted",
    "find_optional",
    "ScoredWordTrie",
    "ScoreTable",
]
