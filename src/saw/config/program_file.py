# saw:header:start
#
#   project      : Saw
#   file         : program_file.py
#   file_relpath : src/saw/config/program_file.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Load atom lists from TOML program files.

A program file is a TOML document with an array of ``[[atom]]`` tables::

    [[atom]]
    name = "filter-range"
    args = ['^\\[Section 2', '^\\[']

    [[atom]]
    name = "filter"
    args = ["^name"]

Parsing is done with `tomlkit` and returned as plain ``(name, args)`` pairs;
building the atoms (and checking names and arities) is left to
[`saw.pipeline.program`][saw.pipeline.program].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from saw.config.logging import get_logger
from saw.constants import PROGRAM_FILE_ATOM_TABLE, PROGRAM_FILE_KEY_ARGS, PROGRAM_FILE_KEY_NAME
from saw.core.errors import ProgramFileError

if TYPE_CHECKING:
    from pathlib import Path

    from saw.config.logging import SawLogger

logger: SawLogger = get_logger(__name__)


class AtomEntry(NamedTuple):
    """One ``[[atom]]`` table of a program file."""

    name: str
    args: tuple[str, ...]


def parse_program_text(text: str, *, origin: str = "<string>") -> list[AtomEntry]:
    """Parse TOML program text into atom entries.

    Args:
        text (str): TOML document text.
        origin (str): Name used in error messages (usually the file path).

    Returns:
        list[AtomEntry]: Entries in file order (possibly empty).

    Raises:
        ProgramFileError: If the text is not valid TOML or the tables are malformed.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ProgramFileError(f"Error decoding TOML from {origin}: {exc}") from exc

    data: Any = doc.unwrap()
    unknown = sorted(key for key in data if key != PROGRAM_FILE_ATOM_TABLE)
    if unknown:
        raise ProgramFileError(f"{origin}: unexpected top-level key(s): {', '.join(unknown)}")

    tables: Any = data.get(PROGRAM_FILE_ATOM_TABLE, [])
    if not isinstance(tables, list):
        raise ProgramFileError(
            f"{origin}: '{PROGRAM_FILE_ATOM_TABLE}' must be an array of tables ([[atom]])"
        )

    entries: list[AtomEntry] = []
    for number, table in enumerate(tables, start=1):
        where = f"{origin}: atom #{number}"
        if not isinstance(table, dict):
            raise ProgramFileError(f"{where}: expected a table")
        name = table.get(PROGRAM_FILE_KEY_NAME)
        if not isinstance(name, str):
            raise ProgramFileError(f"{where}: '{PROGRAM_FILE_KEY_NAME}' must be a string")
        args = table.get(PROGRAM_FILE_KEY_ARGS, [])
        if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
            raise ProgramFileError(
                f"{where} ('{name}'): '{PROGRAM_FILE_KEY_ARGS}' must be an array of strings"
            )
        extra = sorted(set(table) - {PROGRAM_FILE_KEY_NAME, PROGRAM_FILE_KEY_ARGS})
        if extra:
            raise ProgramFileError(f"{where} ('{name}'): unexpected key(s): {', '.join(extra)}")
        entries.append(AtomEntry(name, tuple(args)))

    logger.debug("Loaded %d atom(s) from %s", len(entries), origin)
    return entries


def load_program_file(path: Path) -> list[AtomEntry]:
    """Load and parse a TOML program file from the filesystem.

    Args:
        path (Path): Path to the program file. Encoding is assumed to be UTF-8.

    Returns:
        list[AtomEntry]: Entries in file order.

    Raises:
        ProgramFileError: If the file cannot be read or is malformed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ProgramFileError(f"Error loading program file {path}: {exc}") from exc
    return parse_program_text(text, origin=str(path))
