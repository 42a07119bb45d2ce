"""Bit source backed by the standard output of an external command.

The command runs once, on ``start()``, with its stdout redirected into a
randomly named temporary file. ``reset()`` rewinds that file instead of
running the command again, and ``stop()`` deletes it.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Sequence
import logging
import random
import shlex
import string
import subprocess

from prngeval.config import get_config
from prngeval.errors import SourceUnavailable, StreamExhausted
from prngeval.sources.base import WordBuffer


_LOGGER = logging.getLogger(__name__)

_NAME_ALPHABET = string.ascii_letters + string.digits


def random_name(rng: random.Random, length: int) -> str:
    """Return ``length`` alphanumeric characters drawn from ``rng``."""

    if length <= 0:
        raise ValueError("length must be > 0")
    return "".join(rng.choice(_NAME_ALPHABET) for _ in range(length))


class CommandSource:
    """Stream the bits a command writes to stdout.

    Parameters
    ----------
    command:
        Argument vector, or a string split with :func:`shlex.split`.
    rng:
        Random generator used for the temporary file name. A private
        ``random.Random()`` is created when omitted; pass a seeded one for
        deterministic names.
    temp_dir:
        Directory for the temporary file. Defaults to ``Config.TEMP_DIR``.
    """

    def __init__(
        self,
        command: Sequence[str] | str,
        *,
        rng: random.Random | None = None,
        temp_dir: Path | None = None,
    ) -> None:
        if isinstance(command, str):
            command = shlex.split(command)
        if not command:
            raise ValueError("command must not be empty")
        self.command: list[str] = [str(arg) for arg in command]
        self._rng: random.Random = rng if rng is not None else random.Random()
        self.temp_dir: Path = Path(temp_dir) if temp_dir is not None else get_config().TEMP_DIR
        self.temp_path: Path | None = None
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

    def _new_temp_path(self) -> Path:
        cfg = get_config()
        return self.temp_dir / f"{cfg.TEMP_PREFIX}{random_name(self._rng, cfg.TEMP_NAME_LENGTH)}"

    def start(self) -> None:
        if self._file is not None or self.temp_path is not None:
            raise RuntimeError("Bit source is already started; call stop() first.")
        path = self._new_temp_path()
        try:
            with path.open("xb") as out:
                self.temp_path = path
                _LOGGER.debug("Running %s into %s", shlex.join(self.command), path)
                subprocess.run(self.command, stdout=out, check=True)
            self._file = path.open("rb")
        except (OSError, subprocess.CalledProcessError) as e:
            self._remove_temp()
            raise SourceUnavailable(f"Cannot run bit source command: {shlex.join(self.command)}") from e
        try:
            self._buffer.attach(self._file)
        except StreamExhausted:
            self.stop()
            raise

    def next(self) -> int:
        return self._buffer.next()

    def reset(self) -> None:
        """Seek the materialized output back to its start; the command is not re-run."""

        if self._file is None:
            raise RuntimeError("Bit source must be started before reset.")
        self._file.seek(0)
        self._buffer.rewind()
        _LOGGER.debug("Rewound %s", self.temp_path)

    def stop(self) -> None:
        try:
            if self._file is not None:
                self._buffer.detach()
                self._file.close()
                self._file = None
        finally:
            self._remove_temp()

    def _remove_temp(self) -> None:
        if self.temp_path is None:
            return
        path, self.temp_path = self.temp_path, None
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            _LOGGER.warning("Failed to delete temporary bit file %s: %s", path, e)

    def __enter__(self) -> CommandSource:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()


__all__ = ["CommandSource", "random_name"]
