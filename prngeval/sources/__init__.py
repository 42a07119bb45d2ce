"""Bit sources: file-backed and command-backed streams of single bits.

Public API:
- BitSource (protocol), FileSource, CommandSource
- read_bits, random_name
"""

from __future__ import annotations

from prngeval.sources.base import BitSource, WordBuffer, read_bits
from prngeval.sources.command import CommandSource, random_name
from prngeval.sources.file import FileSource

__all__ = [
    "BitSource",
    "WordBuffer",
    "FileSource",
    "CommandSource",
    "read_bits",
    "random_name",
]
