"""Rhyme index package for suffix based rhyme lookups."""

from .index import RhymeIndex, normalize, rhyme_key
from .ingest import build_index, load_source
from .models import LoadError, LoadReport, RhymeResult

__all__ = [
    "RhymeIndex",
    "RhymeResult",
    "LoadError",
    "LoadReport",
    "build_index",
    "load_source",
    "normalize",
    "rhyme_key",
]
