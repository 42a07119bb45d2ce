"""Shared fixtures for prngeval tests."""

from pathlib import Path
import sys

import pytest


def write_words(path: Path, words: list[int]) -> Path:
    """Write ``words`` as native-order 64-bit integers."""

    path.write_bytes(b"".join(w.to_bytes(8, sys.byteorder) for w in words))
    return path


@pytest.fixture()
def word_writer(tmp_path: Path):
    """Return a callable writing 64-bit words to a file under ``tmp_path``."""

    def _write(words: list[int], name: str = "words.bin") -> Path:
        return write_words(tmp_path / name, words)

    return _write
