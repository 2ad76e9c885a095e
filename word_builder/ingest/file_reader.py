# file_reader.py - loading dictionaries and letter score files

# Word file: one word per line, ASCII letters only
#   aardvark
#   aardvarks
# Score file: one `char=score` record per line
#   a=1
#   b=3
# Blank lines are skipped in both. Everything returned here is clean input for the
# engine, which does no validation of its own beyond lower-casing.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Union

from word_builder.core.scored_trie import ScoredWordTrie, ScoreTable
from word_builder.core.trie import WordTrie
from word_builder.errors import (
    InvalidCharError,
    InvalidScoreError,
    InvalidWordError,
    MissingEqualSignError,
    OpenFileError,
)
from word_builder.utils.logger_utils import Log

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

MAX_SCORE = 255


def iter_lines(path: PathLike) -> Iterator[str]:
    """Yield each line of `path` without its line ending."""
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise OpenFileError(str(path), e) from e
    with f:
        for line in f:
            yield line.rstrip("\r\n")


def _is_ascii_word(word: str) -> bool:
    return word.isascii() and word.isalpha()


def parse_word_file(path: PathLike) -> List[str]:
    """
    Read a word list.
    Raises InvalidWordError on the first line holding anything but a-z / A-Z.
    """
    words = []
    for line in iter_lines(path):
        word = line.strip()
        if not word:
            continue
        if not _is_ascii_word(word):
            raise InvalidWordError(word)
        words.append(word)
    return words


def parse_scores_file(path: PathLike) -> Dict[str, int]:
    """
    Read `char=score` records into a dict keyed by lower-case letter.
    Line numbers in errors are 1-based.
    """
    scores: Dict[str, int] = {}
    for line_no, raw in enumerate(iter_lines(path), 1):
        line = raw.strip()
        if not line:
            continue
        if "=" not in line:
            raise MissingEqualSignError(line_no, line)
        ch, _, score_text = line.partition("=")
        ch = ch.strip()
        score_text = score_text.strip()

        if len(ch) != 1 or not _is_ascii_word(ch):
            raise InvalidCharError(ch)

        try:
            score = int(score_text)
        except ValueError as e:
            raise InvalidScoreError(score_text, str(e)) from e
        if not 0 <= score <= MAX_SCORE:
            raise InvalidScoreError(score_text, f"must be between 0 and {MAX_SCORE}")

        scores[ch.lower()] = score
    return scores


def load_trie(path: PathLike) -> WordTrie:
    """Build a frozen WordTrie from a word file."""
    with Log.time_block(f"load {path}"):
        trie = WordTrie.from_words(parse_word_file(path), freeze=True)
    logger.info("loaded %d words from %s", len(trie), path)
    return trie


def load_scored_trie(words_path: PathLike, scores_path: PathLike) -> ScoredWordTrie:
    trie = load_trie(words_path)
    table = ScoreTable(parse_scores_file(scores_path))
    logger.info("loaded %d letter scores from %s", len(table), scores_path)
    return ScoredWordTrie(trie, table)
