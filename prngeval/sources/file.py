"""Bit source reading directly from an existing raw file."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import BinaryIO
import logging

from prngeval.errors import SourceUnavailable, StreamExhausted
from prngeval.sources.base import WordBuffer


_LOGGER = logging.getLogger(__name__)


class FileSource:
    """Stream the bits of ``path`` least-significant bit first.

    Examples
    --------
    >>> with FileSource("seq/R/aes128ctr/1") as bits:  # doctest: +SKIP
    ...     first = [bits.next() for _ in range(8)]
    """

    def __init__(self, path: str | Path) -> None:
        self.path: Path = Path(path)
        self._buffer = WordBuffer()
        self._file: BinaryIO | None = None

    @property
    def word_index(self) -> int:
        return self._buffer.word_index

    @property
    def bit_index(self) -> int:
        return self._buffer.bit_index

    @property
    def current_word(self) -> int:
        return self._buffer.current_word

    def start(self) -> None:
        if self._file is not None:
            raise RuntimeError("Bit source is already started; call stop() first.")
        try:
            self._file = self.path.open("rb")
        except OSError as e:
            raise SourceUnavailable(f"Cannot open bit source file: {self.path}") from e
        _LOGGER.debug("Opened bit source file %s", self.path)
        try:
            self._buffer.attach(self._file)
        except StreamExhausted:
            self.stop()
            raise

    def next(self) -> int:
        return self._buffer.next()

    def reset(self) -> None:
        """Close and reopen the file, then re-prime the first word."""

        self.stop()
        self.start()

    def stop(self) -> None:
        if self._file is None:
            return
        self._buffer.detach()
        self._file.close()
        self._file = None
        _LOGGER.debug("Closed bit source file %s", self.path)

    def __enter__(self) -> FileSource:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()


__all__ = ["FileSource"]
