"""Records passed between the loader, the index and the formatters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


class LoadError(Exception):
    """Raised when a word source cannot be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Unable to load {source}: {reason}")
        self.source = source
        self.reason = reason


@dataclass
class LoadReport:
    source: str
    words_read: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RhymeResult:
    word: str
    rhymes: List[str] = field(default_factory=list)
