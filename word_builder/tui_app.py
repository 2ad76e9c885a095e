# tui_app.py - Word Builder TUI Application
# -------------------------------------------------------
# Full screen terminal UI around the search engine.
# Features:
#  - Letters and pattern inputs, results update as you type
#  - Queries run on a SearchWorker thread (debounced), the UI polls for answers
#  - Invalid patterns are reported in the status line instead of clearing results
# -------------------------------------------------------

from __future__ import annotations

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import DataTable, Footer, Header, Input, Static

from word_builder.core.pattern_filter import is_valid_pattern
from word_builder.core.scored_trie import ScoredWordTrie
from word_builder.search_worker import QueryRequest, QueryResponse, SearchWorker
from word_builder.utils.config_manager import Config
from word_builder.utils.metrics_tracker import Metrics

POLL_INTERVAL = 0.05


class StatusLine(Static):
    """Bottom readout: result count and latency, or the pattern error."""

    def show_response(self, resp: QueryResponse):
        if resp.error is not None:
            self.update(f"[red]{escape(str(resp.error))}[/red]")
            return
        ms = round(resp.elapsed * 1000)
        self.update(f"[dim]{len(resp.words)} words in {ms}ms[/dim]")


class WordBuilderApp(App):
    """
    Architecture:
     - Input.Changed -> QueryRequest -> SearchWorker
     - interval timer -> SearchWorker.poll() -> DataTable
    """

    TITLE = "Word Builder"
    CSS = """
    #inputs { height: 3; }
    #letters { width: 1fr; }
    #pattern { width: 1fr; }
    #words { height: 1fr; }
    #status { height: 1; }
    """

    BINDINGS = [
        ("escape", "quit", "Quit"),
        ("ctrl+l", "clear", "Clear"),
    ]

    letters = reactive("")
    pattern = reactive("")

    def __init__(self, engine: ScoredWordTrie, cfg: Config):
        super().__init__()
        self.cfg = cfg
        self.metrics = Metrics()
        self.worker = SearchWorker(
            engine,
            debounce=cfg["debounce_ms"] / 1000,
            limit=cfg["max_results"],
            metrics=self.metrics,
        )

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="inputs"):
            yield Input(placeholder="Letters (* = any)", id="letters")
            yield Input(placeholder="Pattern (regex, optional)", id="pattern")
        with Container():
            yield DataTable(id="words", zebra_stripes=True)
        yield StatusLine(id="status")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#words", DataTable)
        table.add_columns("Word", "Score")
        self.worker.start()
        self.set_interval(POLL_INTERVAL, self._drain_responses)
        self.query_one("#letters", Input).focus()

    # Input handling --------------------------------------------------------
    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "letters":
            self.letters = event.value
        else:
            self.pattern = event.value
        self._send_query()

    def _send_query(self) -> None:
        status = self.query_one("#status", StatusLine)
        if len(self.letters.strip()) < self.cfg["min_letters"]:
            self._show_words([])
            status.update("")
            return
        if self.pattern and not is_valid_pattern(self.pattern):
            status.update("[yellow]pattern is not a valid regex yet[/yellow]")
            return
        self.worker.submit(QueryRequest(self.letters, self.pattern))

    def _drain_responses(self) -> None:
        resp = self.worker.poll()
        if resp is None:
            return
        # stale answer for input that has since changed
        if resp.request != QueryRequest(self.letters, self.pattern):
            return
        self.query_one("#status", StatusLine).show_response(resp)
        if resp.ok:
            self._show_words(resp.words)

    def _show_words(self, words) -> None:
        table = self.query_one("#words", DataTable)
        table.clear()
        for word, score in words:
            table.add_row(word, str(score))

    # Actions ---------------------------------------------------------------
    def action_clear(self) -> None:
        for input_id in ("#letters", "#pattern"):
            self.query_one(input_id, Input).value = ""
