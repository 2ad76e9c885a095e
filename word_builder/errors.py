# word_builder/errors.py
"""
Exception hierarchy shared by the engine, ingestion and front ends.

Everything raised on purpose derives from WordBuilderError so the CLI/TUI can
catch one type and render it. Nothing in the engine retries or recovers.
"""

from __future__ import annotations

from typing import Optional


class WordBuilderError(Exception):
    """Base class for all word_builder errors."""


class PatternError(WordBuilderError, ValueError):
    """Raised when a query pattern is not a valid regular expression."""

    def __init__(self, pattern: str, msg: str, pos: Optional[int] = None) -> None:
        self.pattern = pattern
        self.msg = msg
        self.pos = pos
        where = f" at position {pos}" if pos is not None else ""
        super().__init__(f"invalid pattern {pattern!r}: {msg}{where}")


class FrozenTrieError(WordBuilderError, RuntimeError):
    """Raised when inserting into a trie that has already been frozen."""


# ingestion -----------------------------------------------------------------
class ParseFileError(WordBuilderError):
    """Base class for word/score file ingestion failures."""


class OpenFileError(ParseFileError):
    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to load file from `{path}`: {cause}")


class InvalidWordError(ParseFileError):
    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(
            f'Invalid word: "{word}". Words can only contain characters between a-z or A-Z.'
        )


class MissingEqualSignError(ParseFileError):
    def __init__(self, line_no: int, line: str) -> None:
        self.line_no = line_no
        self.line = line
        super().__init__(f"Line {line_no} is missing an equal sign `=`: {line}")


class InvalidCharError(ParseFileError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"The left side of the equal sign `=` must be a single letter, got: {text}."
        )


class InvalidScoreError(ParseFileError):
    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(
            f"The right side of the equal sign `=` must be a valid score but got `{text}`: {reason}"
        )
