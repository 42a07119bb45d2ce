from pathlib import Path
import sys

import pytest

from prngeval.errors import SourceUnavailable, StreamExhausted
from prngeval.sources import BitSource, FileSource, WordBuffer, read_bits


WORDS = [0x0123456789ABCDEF, 0xFFFFFFFF00000000, 0x8000000000000001]


def _expected_bits(words: list[int]) -> list[int]:
    return [(w >> i) & 1 for w in words for i in range(64)]


@pytest.fixture()
def bit_file(word_writer) -> Path:
    return word_writer(WORDS)


def test_file_source_is_bit_source(bit_file: Path):
    assert isinstance(FileSource(bit_file), BitSource)


def test_lsb_first_across_word_boundaries(bit_file: Path):
    """Every bit of every word comes out least-significant first."""

    with FileSource(bit_file) as bits:
        got = read_bits(bits, 64 * len(WORDS))
    assert got == _expected_bits(WORDS)


def test_reset_reproduces_sequence(bit_file: Path):
    with FileSource(bit_file) as bits:
        first = read_bits(bits, 100)
        bits.reset()
        assert bits.word_index == 0
        assert bits.bit_index == 0
        second = read_bits(bits, 100)
    assert first == second


def test_counters_track_position(bit_file: Path):
    with FileSource(bit_file) as bits:
        assert (bits.word_index, bits.bit_index) == (0, 0)
        assert bits.current_word == WORDS[0]
        read_bits(bits, 63)
        assert (bits.word_index, bits.bit_index) == (0, 63)
        read_bits(bits, 1)
        assert (bits.word_index, bits.bit_index) == (1, 0)
        read_bits(bits, 5)
        assert (bits.word_index, bits.bit_index) == (1, 5)
        assert 0 <= bits.bit_index <= 63


def test_exhaustion_is_distinct(bit_file: Path):
    with FileSource(bit_file) as bits:
        read_bits(bits, 64 * len(WORDS))
        with pytest.raises(StreamExhausted) as excinfo:
            bits.next()
    assert isinstance(excinfo.value, EOFError)
    assert excinfo.value.word_index == len(WORDS)


def test_trailing_partial_word_is_not_read(tmp_path: Path):
    path = tmp_path / "partial.bin"
    path.write_bytes((1).to_bytes(8, sys.byteorder) + b"\xff\xff\xff")
    with FileSource(path) as bits:
        assert read_bits(bits, 64) == [1] + [0] * 63
        with pytest.raises(StreamExhausted):
            bits.next()


def test_empty_file_is_exhausted_on_start(tmp_path: Path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    source = FileSource(path)
    with pytest.raises(StreamExhausted):
        source.start()
    # stop after a failed start is harmless
    source.stop()


def test_missing_file_is_unavailable(tmp_path: Path):
    source = FileSource(tmp_path / "missing.bin")
    with pytest.raises(SourceUnavailable) as excinfo:
        source.start()
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_stop_is_idempotent(bit_file: Path):
    source = FileSource(bit_file)
    source.start()
    source.stop()
    source.stop()


def test_buffer_without_channel_fails():
    buffer = WordBuffer()
    with pytest.raises(RuntimeError):
        buffer.rewind()


def test_read_bits_rejects_negative(bit_file: Path):
    with FileSource(bit_file) as bits:
        with pytest.raises(ValueError):
            read_bits(bits, -1)
        assert read_bits(bits, 0) == []


def test_second_start_is_refused(bit_file: Path):
    source = FileSource(bit_file)
    source.start()
    try:
        source.next()
        with pytest.raises(RuntimeError):
            source.start()
        assert source.bit_index == 1
    finally:
        source.stop()
    source.start()
    assert (source.word_index, source.bit_index) == (0, 0)
    source.stop()
