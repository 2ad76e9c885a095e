# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_PATH = "word_builder.json"

DEFAULTS = {
    "words_path": "words.txt",
    "scores_path": "char_scores.txt",
    "min_letters": 2,  # front ends don't query below this
    "max_results": 50,
    "debounce_ms": 100,
    "log_level": "WARNING",
}


class Config:
    def __init__(self, path=DEFAULT_PATH, autosave=False):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()
        if autosave and not os.path.exists(self.path):
            self.save()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        self.data.update(loaded)

    def __getitem__(self, key):
        return self.data[key]

    def get(self, key, default=None):
        return self.data.get(key, default)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def items(self):
        return sorted(self.data.items())

    def set(self, key, val):
        """Set `key`, coercing `val` to the default's type. Unknown keys raise KeyError."""
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        self.data[key] = type(DEFAULTS[key])(val)
        self.save()
