# saw:header:start
#
#   file         : io.py
#   file_relpath : src/saw/cli/io.py
#   project      : Saw
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Line input and output for the CLI.

This module intentionally focuses only on moving lines in and out:
- Input: a file path or STDIN, decoded as UTF-8, yielded one line at a time
  without the line terminator.
- Output: one line per emitted value, terminated by ``\\n``.

Errors are translated into the CLI exceptions of [`saw.cli.errors`][saw.cli.errors].
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import TYPE_CHECKING, TextIO

import click

from saw.cli.errors import SawEncodingError, SawFileNotFoundError, SawIOError
from saw.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from saw.config.logging import SawLogger

logger: SawLogger = get_logger(__name__)


# Only "\n" ends a line; a lone "\r" stays part of the line it appears in.
LINE_TERMINATOR: str = "\n"


def read_lines(stream: Iterable[str]) -> Iterator[str]:
    r"""Yield lines from ``stream`` without their ``\n`` / ``\r\n`` terminator."""
    for raw in stream:
        if raw.endswith("\n"):
            raw = raw[:-1]
            if raw.endswith("\r"):
                raw = raw[:-1]
        yield raw


@contextmanager
def open_input(path: Path | None) -> Iterator[TextIO]:
    """Open the input source: ``path`` if given, else STDIN.

    Both sources are decoded as strict UTF-8 with newline translation
    disabled, so a ``\\r`` that is not followed by ``\\n`` is kept as data.

    Args:
        path (Path | None): Input file, or None for STDIN.

    Yields:
        TextIO: A UTF-8 text stream.

    Raises:
        SawFileNotFoundError: If ``path`` does not exist.
        SawIOError: If ``path`` cannot be opened.
    """
    if path is None:
        logger.debug("Reading from STDIN")
        stdin = io.TextIOWrapper(
            click.get_binary_stream("stdin"),
            encoding="utf-8",
            errors="strict",
            newline=LINE_TERMINATOR,
        )
        try:
            yield stdin
        finally:
            # Leave the process-wide binary stream open.
            stdin.detach()
        return

    try:
        stream = path.open(encoding="utf-8", errors="strict", newline=LINE_TERMINATOR)
    except FileNotFoundError as exc:
        raise SawFileNotFoundError(f"Input file not found: {path}") from exc
    except OSError as exc:
        raise SawIOError(f"Cannot open input file {path}: {exc.strerror or exc}") from exc

    logger.debug("Reading from %s", path)
    with stream:
        yield stream


class LineSink:
    """Write output lines as UTF-8 to a text stream (STDOUT by default).

    Attributes:
        out (TextIO): Target stream.
        written (int): Number of lines written so far.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out or click.get_text_stream("stdout", encoding="utf-8", errors="strict")
        self.written = 0

    def write(self, line: str) -> None:
        """Write ``line`` followed by a newline.

        Raises:
            SawEncodingError: If the stream cannot encode ``line``.
            SawIOError: If the stream cannot be written to.
        """
        try:
            self.out.write(f"{line}\n")
        except UnicodeEncodeError as exc:
            raise SawEncodingError(
                f"Cannot encode output line {self.written + 1}: {exc.reason}"
            ) from exc
        except OSError as exc:
            raise SawIOError(f"Cannot write output: {exc.strerror or exc}") from exc
        self.written += 1

    def flush(self) -> None:
        """Flush the target stream.

        Raises:
            SawIOError: If the stream cannot be flushed.
        """
        try:
            self.out.flush()
        except OSError as exc:
            raise SawIOError(f"Cannot write output: {exc.strerror or exc}") from exc
