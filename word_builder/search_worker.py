# search_worker.py - serves queries from a background thread
"""
SearchWorker keeps the engine off the UI thread.

Requests go in through a bounded queue, responses come back on a second queue.
Debouncing: after a request arrives the worker keeps draining the queue until it
has been quiet for `debounce` seconds and only serves the newest request, so fast
typing produces one search instead of one per keystroke.

The engine is shared read-only (its trie is frozen), so no locking is needed
around queries.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from word_builder.core.protocols import RankedSearchProtocol
from word_builder.errors import PatternError
from word_builder.utils.metrics_tracker import Metrics

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE = 0.1
_STOP = object()


@dataclass(frozen=True)
class QueryRequest:
    letters: str
    pattern: str = ""


@dataclass
class QueryResponse:
    request: QueryRequest
    words: List[Tuple[str, int]] = field(default_factory=list)
    error: Optional[Exception] = None
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


class SearchWorker:
    """
    Usage:
        with SearchWorker(engine) as worker:
            worker.submit(QueryRequest("radart"))
            resp = worker.wait(timeout=1.0)
    """

    def __init__(
        self,
        engine: RankedSearchProtocol,
        debounce: float = DEFAULT_DEBOUNCE,
        limit: Optional[int] = None,
        maxsize: int = 100,
        metrics: Optional[Metrics] = None,
    ) -> None:
        self.engine = engine
        self.debounce = debounce
        self.limit = limit
        self.metrics = metrics
        self._requests: "queue.Queue" = queue.Queue(maxsize=maxsize)
        self._responses: "queue.Queue[QueryResponse]" = queue.Queue()
        self._thread = threading.Thread(target=self._run, name="search-worker", daemon=True)
        self._started = False

    # lifecycle ---------------------------------------------------------
    def start(self) -> "SearchWorker":
        if not self._started:
            self._started = True
            self._thread.start()
        return self

    def close(self, timeout: Optional[float] = None) -> None:
        """Stop the worker after it finishes any pending request."""
        if not self._started:
            return
        self._requests.put(_STOP)
        self._thread.join(timeout)

    def __enter__(self) -> "SearchWorker":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def alive(self) -> bool:
        return self._thread.is_alive()

    # client side -------------------------------------------------------
    def submit(self, request: QueryRequest) -> bool:
        """Queue a request without blocking. Returns False if it was dropped."""
        try:
            self._requests.put_nowait(request)
        except queue.Full:
            logger.debug("request queue full, dropping %r", request)
            return False
        return True

    def poll(self) -> Optional[QueryResponse]:
        """Latest available response, or None. Older pending responses are discarded."""
        latest = None
        while True:
            try:
                latest = self._responses.get_nowait()
            except queue.Empty:
                return latest

    def wait(self, timeout: Optional[float] = None) -> Optional[QueryResponse]:
        """Block until the next response arrives (None on timeout)."""
        try:
            return self._responses.get(timeout=timeout)
        except queue.Empty:
            return None

    # worker side -------------------------------------------------------
    def _run(self) -> None:
        while True:
            item = self._requests.get()
            if item is _STOP:
                return

            stopping = False
            while True:
                try:
                    newer = self._requests.get(timeout=self.debounce)
                except queue.Empty:
                    break
                if newer is _STOP:
                    stopping = True
                    break
                item = newer

            self._responses.put(self.serve(item))
            if stopping:
                return

    def serve(self, request: QueryRequest) -> QueryResponse:
        """Run one query on the calling thread."""
        t0 = time.perf_counter()
        try:
            words = self.engine.ranked_words(request.letters, request.pattern or None, self.limit)
            resp = QueryResponse(request, words)
        except PatternError as e:
            logger.debug("rejected pattern %r: %s", request.pattern, e)
            resp = QueryResponse(request, error=e)
        except Exception as e:
            # keep the thread alive, the caller sees the failure in the response
            logger.exception("query %r failed", request)
            resp = QueryResponse(request, error=e)
        resp.elapsed = time.perf_counter() - t0
        if self.metrics is not None:
            self.metrics.record("query_time", resp.elapsed)
        return resp
