"""In-memory rhyme index keyed by a fixed-length word suffix."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

LOGGER = logging.getLogger(__name__)

RHYME_KEY_LENGTH = 3


def normalize(word: str) -> str:
    """Trim surrounding whitespace and lower-case ``word``."""

    return word.strip().lower()


def rhyme_key(word: str) -> str:
    """Return the suffix used to group ``word`` with its rhymes.

    This is a spelling approximation, not a phonetic one: words of up to
    three characters are their own key, longer words use their last three.
    """

    word = normalize(word)
    if len(word) <= RHYME_KEY_LENGTH:
        return word
    return word[-RHYME_KEY_LENGTH:]


class RhymeIndex:
    """Group words by rhyme key and look up words sharing a key."""

    def __init__(self, words: Iterable[str] = ()):
        self._groups: Dict[str, List[str]] = {}
        self.insert_all(words)

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups.values())

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        word = normalize(word)
        return word in self._groups.get(rhyme_key(word), ())

    def __repr__(self) -> str:
        return f"RhymeIndex(keys={len(self._groups)}, words={len(self)})"

    @property
    def groups(self) -> Dict[str, Tuple[str, ...]]:
        """Snapshot of every group, in first-insertion order of the keys."""

        return {key: tuple(words) for key, words in self._groups.items()}

    def keys(self) -> List[str]:
        return list(self._groups)

    def insert(self, word: str) -> None:
        word = normalize(word)
        if not word:
            LOGGER.debug("Ignoring empty word")
            return
        group = self._groups.setdefault(rhyme_key(word), [])
        if word not in group:
            group.append(word)

    def insert_all(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert(word)

    def query(self, word: str) -> List[str]:
        """Return the words sharing ``word``'s rhyme key, excluding ``word`` itself."""

        word = normalize(word)
        if not word:
            return []
        group = self._groups.get(rhyme_key(word), [])
        return [candidate for candidate in group if candidate != word]
