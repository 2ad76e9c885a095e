# tests/test_pattern_filter.py
import pytest

from word_builder.core.pattern_filter import (
    compile_pattern,
    find_matching,
    find_matching_sorted,
    find_optional,
    is_valid_pattern,
)
from word_builder.core.search import find_words
from word_builder.errors import PatternError, WordBuilderError


def test_pattern_scenario(car_trie):
    assert find_matching_sorted(car_trie, "carbont", "car.*") == ["car", "carbon", "cart"]


def test_pattern_matches_whole_word(car_trie):
    # "ar" is found inside "car" but does not match the whole word
    assert find_matching(car_trie, "carbont", "ar") == set()
    assert find_matching(car_trie, "carbont", ".*ar.*") == {"car", "carbon", "cart"}
    assert find_matching(car_trie, "carbont", "c..") == {"car"}


@pytest.mark.parametrize("pattern", ["car.*", "^c.*$", ".*t", "[abc]+", "c(a|o)r.?"])
def test_matching_is_subset_of_plain_search(car_trie, pattern):
    import re

    plain = find_words(car_trie, "carbontdm*")
    expected = {w for w in plain if re.fullmatch(pattern, w)}
    assert find_matching(car_trie, "carbontdm*", pattern) == expected


def test_invalid_pattern_raises(car_trie):
    with pytest.raises(PatternError) as info:
        find_matching(car_trie, "carbont", "car(")
    err = info.value
    assert err.pattern == "car("
    assert isinstance(err, WordBuilderError)
    assert isinstance(err, ValueError)


def test_invalid_pattern_detected_before_search(monkeypatch, car_trie):
    import word_builder.core.pattern_filter as pf

    def boom(*a, **kw):
        raise AssertionError("search should not run")

    monkeypatch.setattr(pf, "find_words", boom)
    with pytest.raises(PatternError):
        pf.find_matching(car_trie, "carbont", "[")


def test_optional_pattern_passthrough(car_trie):
    plain = find_words(car_trie, "carbont")
    assert find_optional(car_trie, "carbont") == plain
    assert find_optional(car_trie, "carbont", "") == plain
    assert find_optional(car_trie, "carbont", "cart") == {"cart"}


def test_is_valid_pattern():
    assert is_valid_pattern("a.*b")
    assert not is_valid_pattern("(")
    assert compile_pattern("x+").fullmatch("xxx")
