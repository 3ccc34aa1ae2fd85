"""Word list sources for the rhyme index."""
from __future__ import annotations

import logging
import tempfile
import urllib.request
from pathlib import Path
from typing import Iterable, Iterator, List

import nltk
import nltk.corpus
from nltk.corpus.reader import CorpusReader
from nltk.corpus.util import LazyCorpusLoader
from tqdm import tqdm

from .index import RhymeIndex
from .models import LoadError, LoadReport

LOGGER = logging.getLogger(__name__)

NLTK_PREFIX = "nltk:"
URL_PREFIXES = ("http://", "https://")

SAMPLE_WORDS = [
    "cat", "hat", "bat", "rat", "mat",
    "dog", "log", "fog", "bog", "cog",
    "light", "bright", "night", "sight", "fight",
    "play", "day", "say", "way", "bay",
    "smile", "mile", "tile", "while", "pile",
    "game", "fame", "name", "same", "tame",
    "house", "mouse", "grouse",
    "cake", "bake", "take", "make", "fake",
]


def ensure_nltk_corpus(corpus: str):
    """Return the NLTK corpus reader named ``corpus``, downloading it if needed."""

    reader = getattr(nltk.corpus, corpus, None)
    if not isinstance(reader, (CorpusReader, LazyCorpusLoader)):
        raise LookupError(f"NLTK has no word corpus named {corpus!r}")
    try:
        reader.ensure_loaded()
    except LookupError:
        LOGGER.info("Downloading %s corpus via NLTK…", corpus)
        nltk.download(corpus, quiet=True)
        reader.ensure_loaded()
    return reader


def nltk_words(corpus: str = "words") -> List[str]:
    reader = ensure_nltk_corpus(corpus)
    return list(reader.words())


def download_wordlist(url: str, destination: Path | None = None) -> Path:
    """Download a word list to the destination path."""

    if destination is None:
        name = url.rstrip("/").rsplit("/", 1)[-1] or "wordlist.txt"
        destination = Path(tempfile.gettempdir()) / name
    LOGGER.info("Downloading word list from %s…", url)
    urllib.request.urlretrieve(url, destination)
    return destination


def parse_wordlist(path: Path) -> Iterator[str]:
    """Yield one word per non-blank, non-comment line of ``path``.

    Any line starting with ``#`` is a comment, so an entry such as
    ``#hashtag`` is skipped rather than loaded.
    """

    with path.open("rb") as handle:
        for raw in handle:
            try:
                line = raw.decode("utf8")
            except UnicodeDecodeError:
                line = raw.decode("latin-1")
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            yield line


def load_source(source: str | Path) -> List[str]:
    """Read every word from ``source``.

    ``source`` is a file path, an ``http(s)://`` URL or ``nltk:<corpus>``.
    Raises :class:`LoadError` when the source cannot be read.
    """

    text = str(source)
    try:
        if text.startswith(NLTK_PREFIX):
            return nltk_words(text[len(NLTK_PREFIX):] or "words")
        if text.startswith(URL_PREFIXES):
            return list(parse_wordlist(download_wordlist(text)))
        return list(parse_wordlist(Path(source)))
    except (OSError, LookupError, ValueError) as exc:
        raise LoadError(text, str(exc)) from exc


def build_index(
    index: RhymeIndex,
    sources: Iterable[str | Path] = (),
    include_samples: bool = True,
) -> List[LoadReport]:
    """Feed the sample vocabulary and every source into ``index``.

    A source that fails to load is logged and skipped; words from the
    other sources are still inserted.
    """

    reports: List[LoadReport] = []
    if include_samples:
        index.insert_all(SAMPLE_WORDS)
        reports.append(LoadReport("samples", len(SAMPLE_WORDS)))

    for source in sources:
        label = str(source)
        try:
            words = load_source(source)
        except LoadError as exc:
            LOGGER.error("%s", exc)
            reports.append(LoadReport(label, error=exc.reason))
            continue
        index.insert_all(tqdm(words, desc=Path(label).name or label, unit="word", disable=None))
        LOGGER.info("Loaded %s words from %s", len(words), label)
        reports.append(LoadReport(label, len(words)))
    return reports

