# metrics_tracker.py - running sums/counts for query latency and friends

import json
import os
import threading
from collections import defaultdict


class Metrics:
    """
    In-process metric accumulator.
    Kept in memory; `save()` writes a JSON snapshot when a path is configured.
    Thread-safe because the search worker records from its own thread.
    """

    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._lock = threading.Lock()

    def record(self, key, val):
        with self._lock:
            self.m[key] += val
            self.n[key] += 1

    def avg(self, key):
        with self._lock:
            if self.n[key] == 0:
                return 0.0
            return self.m[key] / self.n[key]

    def count(self, key):
        with self._lock:
            return self.n[key]

    def snapshot(self):
        with self._lock:
            return {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}

    def save(self):
        if not self.path:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.snapshot(), f, indent=2)

    def rows(self):
        """(key, count, avg) tuples sorted by key, for tables."""
        snap = self.snapshot()
        return [
            (k, v["count"], v["sum"] / v["count"] if v["count"] else 0.0)
            for k, v in sorted(snap.items())
        ]
