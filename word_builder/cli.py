"""
cli.py - command line front end
Features:
- `find`: one-shot query, prints a ranked table (or JSON)
- `interactive`: prompt loop with an optional sticky pattern and latency stats
- `tui`: launches the textual app
- Uses Rich for tables and formatting
"""

import argparse
import json
import shlex
import sys
import time
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.markup import escape
from rich.prompt import Prompt

from word_builder.core.pattern_filter import compile_pattern
from word_builder.core.protocols import as_records
from word_builder.core.scored_trie import ScoredWordTrie
from word_builder.errors import PatternError, WordBuilderError
from word_builder.ingest.file_reader import load_scored_trie
from word_builder.utils.config_manager import DEFAULT_PATH, Config
from word_builder.utils.logger_utils import configure_logging
from word_builder.utils.metrics_tracker import Metrics

console = Console()

EXIT_OK = 0
EXIT_ERROR = 2


def _results_table(results: List[Tuple[str, int]], show_scores: bool = True) -> Table:
    table = Table(title=f"Words ({len(results)})", box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Word", style="bold")
    if show_scores:
        table.add_column("Score", justify="right", style="magenta")
    for i, (word, score) in enumerate(results, 1):
        row = [str(i), word]
        if show_scores:
            row.append(str(score))
        table.add_row(*row)
    return table


class CLI:
    """Interactive loop: type letters, get ranked words back."""

    def __init__(self, engine: ScoredWordTrie, cfg: Config, out: Optional[Console] = None):
        self.engine = engine
        self.cfg = cfg
        self.console = out or console
        self.metrics = Metrics()
        self.pattern = ""
        self.running = True

    def run(self):
        self.console.rule("[bold magenta]Word Builder[/bold magenta]")
        self.console.print("[cyan]Type your letters, use * for a blank tile.[/cyan]")
        self.console.print("Commands: /pattern [regex] /stats /config [key val] /quit\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Letters[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            self.handle(line.strip())

    def handle(self, line: str):
        if not line:
            return
        if line.startswith("/"):
            self._handle_command(line)
            return
        self.query(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str):
        head, _, rest = line.partition(" ")
        cmd = head.lower()

        # regexes are taken verbatim, shlex would eat backslashes and quotes
        if cmd == "/pattern":
            pattern = rest.strip()
            try:
                if pattern:
                    compile_pattern(pattern)
            except PatternError as e:
                self.console.print(f"[red]{escape(str(e))}[/red]")
                return
            self.pattern = pattern
            self.console.print(f"pattern: {escape(pattern) or '(none)'}")
            return

        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]bad command:[/red] {escape(str(e))}")
            return

        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")
            return

        if cmd == "/stats":
            self._show_stats()
            return

        if cmd == "/config":
            if len(parts) == 1:
                self._show_config()
            elif len(parts) == 3:
                try:
                    self.cfg.set(parts[1], parts[2])
                except (KeyError, ValueError) as e:
                    self.console.print(f"[red]{escape(str(e))}[/red]")
            else:
                self.console.print("usage: /config [key val]")
            return

        self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def query(self, letters: str):
        if len(letters) < self.cfg["min_letters"]:
            self.console.print(f"[dim](need at least {self.cfg['min_letters']} letters)[/dim]")
            return
        t0 = time.perf_counter()
        try:
            results = self.engine.ranked_words(letters, self.pattern or None, self.cfg["max_results"])
        except PatternError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        self.metrics.record("query_time", time.perf_counter() - t0)

        if not results:
            self.console.print("[dim](no words)[/dim]")
            return
        self.console.print(_results_table(results))

    # DISPLAY -------------------------------------------------------------------------------
    def _show_stats(self):
        table = Table(title="Stats", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("Avg (ms)", justify="right")
        for key, n, avg in self.metrics.rows():
            table.add_row(key, str(n), f"{avg * 1000:.2f}")
        self.console.print(table)

    def _show_config(self):
        table = Table(title="Config", box=box.MINIMAL)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in self.cfg.items():
            table.add_row(k, str(v))
        self.console.print(table)


# ENTRYPOINT ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-builder",
        description="Find dictionary words that can be built from a set of letters.",
    )
    parser.add_argument("--config", default=DEFAULT_PATH, help="JSON config file")
    parser.add_argument("--words", help="word list, one word per line")
    parser.add_argument("--scores", help="letter scores, one `char=score` per line")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    find = sub.add_parser("find", help="run a single query")
    find.add_argument("letters", help="available letters, * for a wildcard")
    find.add_argument("-p", "--pattern", default="", help="regex the whole word must match")
    find.add_argument("-n", "--limit", type=int, help="max results (default: config max_results)")
    find.add_argument("--no-scores", action="store_true", help="list words alphabetically without scores")
    find.add_argument("--json", action="store_true", help="print JSON instead of a table")

    sub.add_parser("interactive", help="prompt loop")
    sub.add_parser("tui", help="full screen terminal UI")
    return parser


def _find(engine: ScoredWordTrie, cfg: Config, args) -> int:
    limit = args.limit if args.limit is not None else cfg["max_results"]
    try:
        if args.no_scores:
            words = sorted(w for w, _ in engine.ranked_words(args.letters, args.pattern or None))
            results = [(w, 0) for w in words[:limit]]
        else:
            results = engine.ranked_words(args.letters, args.pattern or None, limit)
    except PatternError as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return EXIT_ERROR

    if args.json:
        payload = [r["word"] for r in as_records(results)] if args.no_scores else as_records(results)
        console.print_json(json.dumps(payload), highlight=False)
    elif not results:
        console.print("[dim](no words)[/dim]")
    else:
        console.print(_results_table(results, show_scores=not args.no_scores))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    configure_logging(args.log_level or cfg["log_level"])

    try:
        engine = load_scored_trie(args.words or cfg["words_path"], args.scores or cfg["scores_path"])
    except WordBuilderError as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return EXIT_ERROR

    if args.command == "find":
        return _find(engine, cfg, args)
    if args.command == "interactive":
        CLI(engine, cfg).run()
        return EXIT_OK
    if args.command == "tui":
        from word_builder.tui_app import WordBuilderApp

        app = WordBuilderApp(engine, cfg)
        try:
            app.run()
        finally:
            app.worker.close(timeout=1.0)
        return EXIT_OK
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
