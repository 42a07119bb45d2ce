"""Centralized configuration for bit sources, partitions and the CLI.

Defines immutable defaults for the word layout of raw bit files, temporary
file placement for command-backed sources, and the default partition size
and sequence length used when generating reference measures.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import tempfile


_SHM_DIR = Path("/dev/shm")


def _default_temp_dir() -> Path:
    """Prefer a memory-backed directory for materialized command output."""

    if _SHM_DIR.is_dir():
        return _SHM_DIR
    return Path(tempfile.gettempdir())


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Raw bit file layout
    WORD_BYTES: int = 8

    # Command-backed sources
    TEMP_DIR: Path = _default_temp_dir()
    TEMP_PREFIX: str = "bits-"
    TEMP_NAME_LENGTH: int = 16

    # Reference measures
    DEFAULT_PARTITION_SIZE: int = 22
    DEFAULT_SEQUENCE_LENGTH: int = 65536 * 8

    # Comparison
    DEFAULT_DISTANCE: str = "tv"


# Convenience re-exports and constants
SUPPORTED_LAWS: list[str] = ["asin", "lil"]
SUPPORTED_DISTANCES: list[str] = ["tv", "hell", "rms"]


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
