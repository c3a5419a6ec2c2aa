# saw:header:start
#
#   project      : Saw
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Helpers for pipeline tests: build a program from tokens and collect its output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from saw.pipeline.program import build_pipeline

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from saw.pipeline.atoms.base import BaseAtom
    from saw.pipeline.verdict import Verdict


def run_program(tokens: Sequence[str], lines: Iterable[str]) -> list[str]:
    """Run ``lines`` through the program spelled by ``tokens``.

    Args:
        tokens (Sequence[str]): Program tokens, as given on the command line.
        lines (Iterable[str]): Input lines without terminators.

    Returns:
        list[str]: The emitted lines, in order.
    """
    out: list[str] = []
    build_pipeline(tokens).run(lines, out.append)
    return out


def apply_all(atom: BaseAtom, lines: Iterable[str]) -> list[Verdict]:
    """Apply a single atom to each line in turn and collect its verdicts."""
    return [atom.apply(line) for line in lines]
