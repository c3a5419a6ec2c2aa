# saw:header:start
#
#   project      : Saw
#   file         : errors.py
#   file_relpath : src/saw/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Exceptions for the Saw CLI.

Usage:
    Raise these exceptions in the CLI command to signal errors with
    standardized messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from saw.cli.exit_codes import ExitCode


class SawCliError(click.ClickException):
    """Base class for all Saw CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class SawUsageError(SawCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SawConfigError(SawCliError):
    """Error for malformed programs (atoms, arguments, program files)."""

    exit_code = ExitCode.CONFIG_ERROR


class SawFileNotFoundError(SawCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SawIOError(SawCliError):
    """Error for I/O errors reading the input or writing the output."""

    exit_code = ExitCode.IO_ERROR


class SawEncodingError(SawCliError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class SawUnexpectedError(SawCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
