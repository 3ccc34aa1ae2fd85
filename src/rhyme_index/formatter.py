"""Render rhyme lookups for the terminal."""
from __future__ import annotations

import json
from typing import Callable, Dict, Sequence

from tabulate import tabulate

from .models import RhymeResult


def format_text(result: RhymeResult) -> str:
    if not result.rhymes:
        return f'No rhymes found for "{result.word}"'
    return f'Rhyming words for "{result.word}":\n  ' + " ".join(result.rhymes)


def format_table(results: Sequence[RhymeResult]) -> str:
    rows = [[result.word, " ".join(result.rhymes), len(result.rhymes)] for result in results]
    return tabulate(rows, headers=["Word", "Rhymes", "Count"])


def format_json(results: Sequence[RhymeResult]) -> str:
    payload = [dict(word=result.word, rhymes=list(result.rhymes)) for result in results]
    return json.dumps(payload, indent=2)


def _format_texts(results: Sequence[RhymeResult]) -> str:
    return "\n".join(format_text(result) for result in results)


FORMATTERS: Dict[str, Callable[[Sequence[RhymeResult]], str]] = {
    "text": _format_texts,
    "table": format_table,
    "json": format_json,
}


def render(results: Sequence[RhymeResult], style: str = "text") -> str:
    try:
        formatter = FORMATTERS[style]
    except KeyError:
        raise ValueError(f"Unknown output format: {style}") from None
    return formatter(results)
