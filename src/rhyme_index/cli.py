"""Command line interface for the rhyme index."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from tabulate import tabulate

from .formatter import FORMATTERS, format_text, render
from .index import RhymeIndex
from .ingest import build_index
from .models import RhymeResult

LOGGER = logging.getLogger("rhyme_index")

WORDLIST_ENV = "RHYME_INDEX_WORDLIST"
WORDLIST_NAME = "wordlist.txt"


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _default_wordlist_path() -> Optional[Path]:
    """Locate the word list loaded when no ``--wordlist`` is given."""

    override = os.environ.get(WORDLIST_ENV)
    if override:
        return Path(override).expanduser()

    local = Path.cwd() / WORDLIST_NAME
    if local.exists():
        return local

    data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    candidate = base / "rhyme_index" / WORDLIST_NAME
    if candidate.exists():
        return candidate
    return None


def _common_options(wordlist_dest: str) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--wordlist",
        action="append",
        dest=wordlist_dest,
        default=argparse.SUPPRESS,
        help="Word list file, http(s) URL or nltk:<corpus> (repeatable)",
    )
    common.add_argument(
        "--no-samples",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Do not seed the index with the built-in sample words",
    )
    common.add_argument(
        "--verbose", action="store_true", default=argparse.SUPPRESS, help="Enable debug logging"
    )
    return common


def _build_parser() -> argparse.ArgumentParser:
    # Global options are accepted before or after the subcommand. Word lists
    # given after it land in ``sub_wordlist`` so the subparser cannot
    # overwrite the ones given before it.
    common = _common_options("wordlist")
    sub_common = _common_options("sub_wordlist")

    parser = argparse.ArgumentParser(description="Suffix based rhyme finder", parents=[common])
    subparsers = parser.add_subparsers(dest="command", required=True)

    query_parser = subparsers.add_parser("query", help="Find words that rhyme", parents=[sub_common])
    query_parser.add_argument("words", nargs="+", help="Words to look up")
    query_parser.add_argument("--format", choices=sorted(FORMATTERS), default="text")

    groups_parser = subparsers.add_parser("groups", help="List rhyme groups", parents=[sub_common])
    groups_parser.add_argument("--min-size", type=int, default=2, help="Smallest group to show")
    groups_parser.add_argument("--limit", type=int, default=25, help="Maximum number of groups")

    subparsers.add_parser("interactive", help="Look up words read from stdin", parents=[sub_common])
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "verbose", False))

    if args.command == "query" and any(not word.strip() for word in args.words):
        parser.error("Please enter a word!")

    sources: List[str] = getattr(args, "wordlist", []) + getattr(args, "sub_wordlist", [])
    if not sources:
        default = _default_wordlist_path()
        if default is not None:
            sources = [str(default)]

    index = RhymeIndex()
    build_index(index, sources, include_samples=not getattr(args, "no_samples", False))
    LOGGER.debug("Index ready: %r", index)

    if args.command == "query":
        results = [RhymeResult(word, index.query(word)) for word in args.words]
        print(render(results, args.format))
    elif args.command == "groups":
        _print_groups(index, min_size=args.min_size, limit=args.limit)
    elif args.command == "interactive":
        _interactive(index)


def _print_groups(index: RhymeIndex, min_size: int = 2, limit: Optional[int] = None) -> None:
    groups = [(key, words) for key, words in index.groups.items() if len(words) >= min_size]
    if not groups:
        print("No groups found")
        return
    groups.sort(key=lambda item: len(item[1]), reverse=True)
    if limit is not None:
        groups = groups[:limit]
    rows = [[key, len(words), " ".join(words)] for key, words in groups]
    print(tabulate(rows, headers=["Key", "Size", "Words"]))


def _interactive(index: RhymeIndex) -> None:
    print("Enter a word (blank line to quit):")
    for line in sys.stdin:
        word = line.strip()
        if not word:
            break
        print(format_text(RhymeResult(word, index.query(word))))


if __name__ == "__main__":  # pragma: no cover
    main()
