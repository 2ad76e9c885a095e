# word_builder/ingest/__init__.py
# word list and letter score file loading

from .file_reader import load_scored_trie, load_trie, parse_scores_file, parse_word_file

__all__ = ["load_scored_trie", "load_trie", "parse_scores_file", "parse_word_file"]
