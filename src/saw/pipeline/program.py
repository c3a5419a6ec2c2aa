# saw:header:start
#
#   project      : Saw
#   file         : program.py
#   file_relpath : src/saw/pipeline/program.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Build a `Pipeline` from command-line tokens or a program file.

A token program is a flat sequence: an atom keyword (or alias) followed by
exactly as many arguments as that atom takes, repeated::

    filter-range '^\\[Section 2' '^\\[' filter '^name'

Everything is validated here, before any input is read: unknown keywords,
missing arguments, invalid patterns, selectors and replacement templates all
raise a [`ProgramError`][saw.core.errors.ProgramError].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from saw.config.logging import get_logger
from saw.config.program_file import load_program_file
from saw.core.errors import ArityError
from saw.pipeline.registry import AtomRegistry
from saw.pipeline.runner import Pipeline

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from saw.config.logging import SawLogger
    from saw.config.program_file import AtomEntry
    from saw.pipeline.atoms.base import BaseAtom

logger: SawLogger = get_logger(__name__)


def parse_tokens(tokens: Sequence[str]) -> list[BaseAtom]:
    """Turn a flat token list into atoms.

    Args:
        tokens (Sequence[str]): Keyword/argument tokens, e.g. ``["sub", "a", "b", "#"]``.

    Returns:
        list[BaseAtom]: Fresh atoms, in order.

    Raises:
        UnknownAtomError: If a token in keyword position is not a known atom.
        ArityError: If an atom is missing arguments at the end of the list.
        ProgramError: If an argument is invalid.
    """
    atoms: list[BaseAtom] = []
    i = 0
    while i < len(tokens):
        name = tokens[i]
        meta = AtomRegistry.lookup(name).meta
        args = tokens[i + 1 : i + 1 + meta.arity]
        if len(args) < meta.arity:
            missing = ", ".join(meta.arg_names[len(args) :])
            raise ArityError(f"Failed parsing arguments of '{name}': Missing argument ({missing})")
        atoms.append(AtomRegistry.build(name, args))
        i += 1 + meta.arity
    return atoms


def build_entries(entries: Sequence[AtomEntry]) -> list[BaseAtom]:
    """Turn program file entries into atoms (arity must match exactly).

    Raises:
        ProgramError: If an entry names an unknown atom or has invalid arguments.
    """
    return [AtomRegistry.build(entry.name, entry.args) for entry in entries]


def build_pipeline(
    tokens: Sequence[str] = (),
    *,
    program_file: Path | None = None,
) -> Pipeline:
    """Build a pipeline from an optional program file followed by ``tokens``.

    Args:
        tokens (Sequence[str]): Command-line program tokens (appended last).
        program_file (Path | None): Optional TOML program file (atoms come first).

    Returns:
        Pipeline: The ready-to-run pipeline.

    Raises:
        ProgramError: On any configuration error.
    """
    atoms: list[BaseAtom] = []
    if program_file is not None:
        atoms.extend(build_entries(load_program_file(program_file)))
    atoms.extend(parse_tokens(tokens))
    if not atoms:
        logger.warning("Empty program: every line is passed through unchanged")
    logger.info("Program: %s", " | ".join(atom.describe() for atom in atoms) or "(empty)")
    return Pipeline(atoms)
