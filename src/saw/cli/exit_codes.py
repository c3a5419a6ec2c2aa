# saw:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/saw/cli/exit_codes.py
#   project      : Saw
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Exit codes for the Saw CLI.

Saw aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Saw CLI.

    Attributes:
        SUCCESS: The whole input was processed.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (no program, conflicting
            flags). Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input or program file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading the input or writing the output. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: The program is malformed (unknown atom, wrong arity, bad
            regex, selector or replacement). Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
