"""Bit-level access to a byte channel of 64-bit words.

The raw format is a flat sequence of words in native byte order without any
header. Bits leave each word least-significant first::

    word 0: bit 0, bit 1, ..., bit 63, word 1: bit 0, ...

Every source variant owns a :class:`WordBuffer` and only differs in how it
acquires, rewinds and releases the channel behind it.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable
import sys

from prngeval.config import get_config
from prngeval.errors import StreamExhausted


@runtime_checkable
class BitSource(Protocol):
    """Sequential, resettable stream of single bits."""

    def start(self) -> None:
        """Open the byte channel and prime the first word."""

    def next(self) -> int:
        """Return the next bit (0 or 1)."""

    def reset(self) -> None:
        """Reposition to word 0, bit 0."""

    def stop(self) -> None:
        """Release the byte channel."""


class WordBuffer:
    """Drain a binary channel one bit at a time, one word at a time.

    Parameters
    ----------
    word_bytes:
        Width of a word in bytes. Defaults to ``Config.WORD_BYTES``.

    Notes
    -----
    ``bit_index`` stays within ``[0, word_bits - 1]``. Once the last bit of a
    word has been returned the counters move to the next word, but that word
    is only read on the following call, so the final bit of a channel is
    still delivered before :class:`StreamExhausted` is raised.
    """

    def __init__(self, word_bytes: int | None = None) -> None:
        self.word_bytes: int = int(word_bytes if word_bytes is not None else get_config().WORD_BYTES)
        if self.word_bytes <= 0:
            raise ValueError("word_bytes must be > 0")
        self.word_bits: int = self.word_bytes * 8
        self.channel: BinaryIO | None = None
        self.word_index: int = 0
        self.bit_index: int = 0
        self.current_word: int = 0
        self._pending_read: bool = False

    def attach(self, channel: BinaryIO) -> None:
        """Bind ``channel`` and prime the buffer from its current position."""

        self.channel = channel
        self.rewind()

    def detach(self) -> BinaryIO | None:
        channel = self.channel
        self.channel = None
        self._pending_read = False
        return channel

    def rewind(self) -> None:
        """Zero the counters and load the next word from the channel.

        The caller is responsible for seeking the channel to its start.
        """

        self.word_index = 0
        self.bit_index = 0
        self._pending_read = False
        self.current_word = self._read_word()

    def next(self) -> int:
        if self._pending_read:
            self.current_word = self._read_word()
            self._pending_read = False
        bit = self.current_word & 1
        if self.bit_index < self.word_bits - 1:
            self.bit_index += 1
            self.current_word >>= 1
        else:
            self.word_index += 1
            self.bit_index = 0
            self._pending_read = True
        return bit

    def _read_word(self) -> int:
        if self.channel is None:
            raise RuntimeError("Bit source must be started before reading bits.")
        chunk = self.channel.read(self.word_bytes)
        if len(chunk) < self.word_bytes:
            raise StreamExhausted(
                f"Bit stream exhausted at word {self.word_index}",
                word_index=self.word_index,
            )
        return int.from_bytes(chunk, sys.byteorder)


def read_bits(source: BitSource, count: int) -> list[int]:
    """Return the next ``count`` bits of a started ``source``."""

    if count < 0:
        raise ValueError("count must be >= 0")
    return [source.next() for _ in range(count)]


__all__ = ["BitSource", "WordBuffer", "read_bits"]
