from __future__ import annotations

from pathlib import Path

import pytest

from rhyme_index import cli
from rhyme_index.index import RhymeIndex
from rhyme_index.ingest import SAMPLE_WORDS


@pytest.fixture()
def sample_index() -> RhymeIndex:
    index = RhymeIndex()
    index.insert_all(SAMPLE_WORDS)
    return index


@pytest.fixture()
def wordlist(tmp_path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("Glow\nslow\n\n# comment line\n  Below  \nsnow\n", encoding="utf8")
    return path


@pytest.fixture()
def isolated_env(monkeypatch, tmp_path):
    """Keep the CLI from picking up a word list outside ``tmp_path``."""

    monkeypatch.delenv(cli.WORDLIST_ENV, raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path
