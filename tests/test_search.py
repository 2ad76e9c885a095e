# tests/test_search.py - letter budget traversal
from collections import Counter
from itertools import product

import pytest

from word_builder.core.search import (
    SearchFrontier,
    find_words,
    find_words_sorted,
    letter_budget,
    spend,
    step_frontier,
)
from word_builder.core.trie import TrieNode, WordTrie


def test_letter_budget_folds_and_filters():
    assert letter_budget("RaD a*r!* 9") == {"r": 2, "a": 2, "d": 1, "*": 2}
    assert letter_budget("") == {}
    assert letter_budget("éß-") == {}


def test_spend_removes_key_at_zero():
    assert spend({"a": 2, "b": 1}, "a") == {"a": 1, "b": 1}
    assert spend({"a": 1, "b": 1}, "a") == {"b": 1}
    assert spend({"b": 1}, "a") is None


def test_step_frontier_pushes_literal_and_wildcard_children():
    root = TrieNode()
    root.append_word("car")
    root.append_word("cab")

    start = SearchFrontier(root, {"c": 1, "a": 1, "*": 1}, "")
    stack = []
    step_frontier(start, stack)

    c = root.children["c"]
    assert SearchFrontier(c, {"a": 1, "*": 1}, "c") in stack
    assert SearchFrontier(c, {"c": 1, "a": 1}, "c") in stack
    assert len(stack) == 2
    for frontier in stack:
        assert frontier.budget_total() == start.budget_total() - 1


def test_exact_letters(rad_trie):
    assert find_words_sorted(rad_trie, "radar") == ["rad", "radar"]


def test_extra_letters(rad_trie):
    assert find_words_sorted(rad_trie, "radart") == ["dart", "rad", "radar"]


def test_query_is_case_insensitive_and_ignores_noise(rad_trie):
    assert rad_trie.find_words_sorted("R-A-D, A.R!") == ["rad", "radar"]


@pytest.mark.parametrize("letters", ["ca*", "*ca", "c*a"])
def test_single_wildcard(cab_trie, letters):
    assert find_words_sorted(cab_trie, letters) == ["cab", "cam"]


def test_two_wildcards(cab_trie):
    assert find_words_sorted(cab_trie, "ca**") == ["cab", "cabs", "cam", "cams"]


def test_wildcard_may_stand_for_an_available_letter():
    trie = WordTrie.from_words(["aa"])
    assert find_words(trie, "a*") == {"aa"}


def test_impossible_query_is_empty(rad_trie):
    assert find_words(rad_trie, "") == set()
    assert find_words(rad_trie, "xyz") == set()
    assert find_words(WordTrie(), "radar") == set()


def test_result_is_a_set_without_duplicates(cab_trie):
    out = find_words(cab_trie, "****")
    assert isinstance(out, set)
    assert out == {"cab", "cabs", "cam", "cams"}


DICTIONARY = [
    "a", "ab", "aba", "abba", "bad", "bead", "dab", "dead", "deed", "ebb",
    "add", "baa", "cab", "dace", "faced", "cafe", "bed", "be", "de", "ace",
]


def _buildable(word, letters):
    budget = letter_budget(letters)
    wild = budget.pop("*", 0)
    need = Counter(word)
    missing = sum(max(0, n - budget.get(ch, 0)) for ch, n in need.items())
    return missing <= wild


@pytest.mark.parametrize(
    "letters",
    ["".join(p) for p in product("abd*", repeat=3)] + ["abcdef", "dead*", "**", "ebbae", "cafed*"],
)
def test_budget_soundness_and_completeness(letters):
    trie = WordTrie.from_words(DICTIONARY)
    found = find_words(trie, letters)
    budget = letter_budget(letters)
    total = sum(budget.values())
    wild = budget.get("*", 0)

    for word in found:
        assert len(word) <= total
        for ch, n in Counter(word).items():
            assert n <= budget.get(ch, 0) + wild

    expected = {w for w in DICTIONARY if _buildable(w, letters)}
    assert found == expected
