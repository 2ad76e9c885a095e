# search.py
# Multiset-budgeted traversal of a WordTrie.
# Given a bag of letters (and `*` wildcards) find every dictionary word that can be
# spelled without using any letter more times than it is available.
# - Query uses an explicit stack (no recursion), one SearchFrontier per open branch.
# - Every step to a child spends exactly one token, so depth <= total tokens.
# - A wildcard may match any child letter, including letters that are also in the
#   literal budget; the same word can be reached twice and collapses in the result set.

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Set

if TYPE_CHECKING:
    from word_builder.core.trie import TrieNode, WordTrie

logger = logging.getLogger(__name__)

WILDCARD = "*"

Budget = Dict[str, int]


def letter_budget(letters: str) -> Budget:
    """
    Fold a free-form query string into a frequency map.
    Characters are case-folded; anything that is not an ASCII letter or the
    wildcard is dropped silently (spaces, punctuation, digits...).
    """
    counts: Counter = Counter()
    for ch in letters:
        ch = ch.lower()
        if (ch.isascii() and ch.isalpha()) or ch == WILDCARD:
            counts[ch] += 1
    return dict(counts)


def spend(budget: Budget, token: str) -> Optional[Budget]:
    """
    Return a copy of `budget` with one `token` consumed, removing the key at zero.
    None if the token is not available.
    """
    count = budget.get(token, 0)
    if count <= 0:
        return None
    remaining = dict(budget)
    if count == 1:
        del remaining[token]
    else:
        remaining[token] = count - 1
    return remaining


@dataclass
class SearchFrontier:
    """
    One open branch of the search.
    node: borrowed from the trie being searched (the trie is frozen while queries run)
    remaining: tokens still available on this branch
    word: letters spelled from the root down to `node`
    """

    node: "TrieNode"
    remaining: Budget = field(default_factory=dict)
    word: str = ""

    def budget_total(self) -> int:
        return sum(self.remaining.values())


def step_frontier(frontier: SearchFrontier, stack: List[SearchFrontier]) -> None:
    """Push every frontier reachable from `frontier` by spending one token."""
    children = frontier.node.children
    remaining = frontier.remaining

    for token in remaining:
        if token == WILDCARD:
            after = spend(remaining, WILDCARD)
            if after is None:
                continue
            for ch, child in children.items():
                stack.append(SearchFrontier(child, after, frontier.word + ch))
            continue

        child = children.get(token)
        if child is None:
            continue
        after = spend(remaining, token)
        if after is not None:
            stack.append(SearchFrontier(child, after, frontier.word + token))


def find_words(trie: "WordTrie", letters: str) -> Set[str]:
    """
    Return all words of `trie` that can be built from `letters`.
    Order is meaningless; use find_words_sorted for a stable listing.
    """
    budget = letter_budget(letters)
    found: Set[str] = set()
    stack = [SearchFrontier(trie.root, budget, "")]
    visited = 0

    while stack:
        frontier = stack.pop()
        visited += 1
        if frontier.node.is_word:
            found.add(frontier.word)
        step_frontier(frontier, stack)

    logger.debug(
        "find_words budget=%s visited=%d found=%d", budget, visited, len(found)
    )
    return found


def find_words_sorted(trie: "WordTrie", letters: str) -> List[str]:
    return sorted(find_words(trie, letters))
