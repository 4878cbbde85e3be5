"""
cli.py - command line front end for word frequency statistics
Features:
- Loads a UTF-8 text file and runs the counting pipeline on it
- Settings from a JSON config, overridable by flags
- Rich tables for the ranked words and trie lookups
- Timing metrics written through Log
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from word_frequency.core import FrequencyReport, WordFrequencyError, WordFrequencyPipeline
from word_frequency.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from word_frequency.utils.logger_utils import Log

console = Console()


def load_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="word-frequency",
        description="Count, rank and look up word frequencies in a text file.",
    )
    parser.add_argument("path", help="UTF-8 text file to analyse")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config file")
    parser.add_argument("--chunk-size", type=int, default=None, help="characters per chunk")
    parser.add_argument("--punctuation", default=None, help="characters stripped before tokenizing")
    parser.add_argument("--workers", type=int, default=None, help="counting thread pool size")
    parser.add_argument(
        "--whitespace-boundaries",
        dest="on_whitespace",
        action="store_const",
        const=True,
        default=None,
        help="cut chunks on whitespace so no word is split",
    )
    parser.add_argument("--top", type=int, default=20, help="number of ranked words to show")
    parser.add_argument("--lookup", nargs="*", default=[], help="words to look up in the trie")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def render(report: FrequencyReport, top: int, lookups: List[str]) -> None:
    table = Table(title="Word frequencies", box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("word", style="cyan")
    table.add_column("count", justify="right", style="bold")
    for i, (word, count) in enumerate(report.top(top), 1):
        table.add_row(str(i), word, str(count))
    console.print(table)
    console.print(
        f"{len(report.ranked)} distinct / {report.total_words} total words "
        f"in {report.chunk_count} chunks ({report.elapsed * 1000:.1f} ms)"
    )

    if lookups:
        lt = Table(title="Lookups", box=box.SIMPLE)
        lt.add_column("word", style="cyan")
        lt.add_column("count", justify="right")
        for w in lookups:
            lt.add_row(w, str(report.lookup(w.lower())))
        console.print(lt)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    log = Log(echo=args.verbose)

    try:
        settings = Config(args.config).settings(
            chunk_size=args.chunk_size,
            punctuation=args.punctuation,
            max_workers=args.workers,
            on_whitespace=args.on_whitespace,
        )
        text = load_text(args.path)
        with log.time_block(f"analyse {args.path}"):
            report = WordFrequencyPipeline(settings).run(text)
        log.metric("distinct_words", len(report.ranked))
        render(report, args.top, args.lookup)
    except (WordFrequencyError, OSError, ValueError) as e:
        log.error(f"{args.path}: {e}")
        console.print(f"[red]error:[/red] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
