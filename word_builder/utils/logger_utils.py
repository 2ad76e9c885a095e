# logger_utils.py - logging setup and timing helpers

import logging
import os
import time
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("word_builder.metrics")


def configure_logging(level="WARNING", path: Optional[str] = None) -> None:
    """
    Set up the `word_builder` logger hierarchy.
    Logs go to stderr, and also to `path` when given (directory created if needed).
    Safe to call more than once: previous handlers are replaced.
    """
    root = logging.getLogger("word_builder")
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    root.addHandler(stream)

    if path:
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)


class Log:
    """Metric helpers layered over the logging module."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts...).
        Example: load words.txt done: 0.123s
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label, metrics=None):
        """
        Measure execution time of a code block.
        To use:
            with Log.time_block("load words"):
                build_trie()
        Pass a Metrics instance to also record the duration under `label`.
        """
        return _Timer(label, metrics)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label, metrics=None):
        self.label = label
        self.metrics = metrics
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        if self.metrics is not None:
            self.metrics.record(self.label, self.elapsed)
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
