# tests/conftest.py - shared dictionaries for the engine tests

import pytest

from word_builder.core.scored_trie import ScoredWordTrie
from word_builder.core.trie import WordTrie

RAD_WORDS = ["rad", "radar", "radical", "radiation", "dart"]
CAB_WORDS = ["cam", "cab", "cams", "cabs"]
CAR_WORDS = ["carbon", "car", "dart", "cam", "cart", "fart", "crime", "com", "rad", "radar"]
RAD_SCORES = {"r": 1, "t": 2, "d": 3}


@pytest.fixture
def rad_trie():
    return WordTrie.from_words(RAD_WORDS)


@pytest.fixture
def cab_trie():
    return WordTrie.from_words(CAB_WORDS)


@pytest.fixture
def car_trie():
    return WordTrie.from_words(CAR_WORDS)


@pytest.fixture
def scored_rad():
    return ScoredWordTrie(WordTrie.from_words(RAD_WORDS), RAD_SCORES)


@pytest.fixture
def word_files(tmp_path):
    """Word + score files on disk, returns (words_path, scores_path)."""
    words = tmp_path / "words.txt"
    words.write_text("\n".join(RAD_WORDS) + "\n", encoding="utf-8")
    scores = tmp_path / "char_scores.txt"
    scores.write_text("r=1\nt=2\nd=3\n", encoding="utf-8")
    return words, scores
