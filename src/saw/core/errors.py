# saw:header:start
#
#   project      : Saw
#   file         : errors.py
#   file_relpath : src/saw/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Exceptions raised while building a Saw program.

All of these are *configuration* errors: they are raised before the first
input line is read, so a malformed program never produces partial output.
The CLI layer translates them into Click exceptions with a dedicated exit
code (see [`saw.cli.errors`][saw.cli.errors]).
"""

from __future__ import annotations


class SawError(Exception):
    """Base class for all Saw library errors."""


class ProgramError(SawError):
    """A program (atom list) could not be constructed."""

    def with_context(self, message: str) -> ProgramError:
        """Return a copy of this error with ``message`` prepended.

        The concrete error class is preserved so callers can still tell the
        error kinds apart after context has been added.

        Args:
            message (str): Context line, e.g. ``"Failed parsing arguments of 'sub'"``.

        Returns:
            ProgramError: A new error of the same class.
        """
        err = self.__class__(f"{message}: {self}")
        err.__cause__ = self
        return err


class UnknownAtomError(ProgramError):
    """A token in keyword position is not a known atom keyword or alias."""


class ArityError(ProgramError):
    """An atom was given the wrong number of arguments."""


class PatternError(ProgramError):
    """A regular expression argument does not compile."""


class SelectorError(ProgramError):
    """A field/line selector argument does not follow the selector grammar."""


class NegativeIndexError(SelectorError):
    """A from-the-end index was used where the total length is unbounded."""


class TemplateError(ProgramError):
    """A replacement template refers to a capture group the pattern does not define."""


class ProgramFileError(ProgramError):
    """A TOML program file is unreadable or malformed."""
