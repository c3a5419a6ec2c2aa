# saw:header:start
#
#   project      : Saw
#   file         : runner.py
#   file_relpath : src/saw/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Run input lines through an ordered list of atoms.

The pipeline is a fold over the atoms for every line:

* ``CONTINUE`` replaces the current value and moves on to the next atom;
* ``DROP`` abandons the line, nothing is written;
* ``EMIT_FINAL`` writes the value and skips the remaining atoms.

A line that makes it through every atom is written as-is. Whenever an atom
reports a block start, every atom *after* it is reset before the same line
proceeds, so counters and nested ranges restart at each new block.

Lines are processed strictly in order; line *n + 1* is only pulled from the
source once line *n* has been written or dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from saw.config.logging import get_logger
from saw.pipeline.verdict import VerdictKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from saw.config.logging import SawLogger
    from saw.pipeline.atoms.base import BaseAtom

logger: SawLogger = get_logger(__name__)


@dataclass
class RunSummary:
    """Line counts of one pipeline run.

    Attributes:
        read (int): Lines pulled from the source.
        emitted (int): Lines written to the sink (``passed + short_circuited``).
        passed (int): Lines that went through every atom.
        short_circuited (int): Lines written early by an ``EMIT_FINAL`` verdict.
        dropped (int): Lines discarded by a ``DROP`` verdict.
        resets (int): Block starts that triggered a downstream reset.
    """

    read: int = 0
    passed: int = 0
    short_circuited: int = 0
    dropped: int = 0
    resets: int = 0

    @property
    def emitted(self) -> int:
        return self.passed + self.short_circuited


class Pipeline:
    """An ordered, exclusively owned list of atoms.

    Example:
        >>> pipeline = Pipeline([Filter.from_args("^x"), Enumerate()])
        >>> pipeline.process("x: 1")
        '1 x: 1'
        >>> pipeline.process("y") is None
        True
    """

    def __init__(self, atoms: Sequence[BaseAtom] | None = None) -> None:
        self._atoms: list[BaseAtom] = list(atoms or [])
        self.summary = RunSummary()

    def _reset_after(self, position: int) -> None:
        downstream = self._atoms[position + 1 :]
        if downstream:
            logger.trace(
                "Block start at atom #%d, resetting %d downstream atom(s)",
                position + 1,
                len(downstream),
            )
        for atom in downstream:
            atom.reset()
        self.summary.resets += 1

    def process(self, line: str) -> str | None:
        """Run one line through the atoms.

        Args:
            line (str): The input line, without its line terminator.

        Returns:
            str | None: The value to write, or None if the line was dropped.
        """
        self.summary.read += 1
        current = line
        for position, atom in enumerate(self._atoms):
            verdict = atom.apply(current)
            if verdict.block_start:
                self._reset_after(position)
            if verdict.kind is VerdictKind.DROP:
                self.summary.dropped += 1
                return None
            if verdict.kind is VerdictKind.EMIT_FINAL:
                self.summary.short_circuited += 1
                return verdict.value
            current = verdict.value if verdict.value is not None else current
        self.summary.passed += 1
        return current

    def run(self, lines: Iterable[str], sink: Callable[[str], object]) -> RunSummary:
        """Process every line from ``lines``, writing results to ``sink``.

        Exceptions raised by the source or the sink propagate unchanged; lines
        already written stay written.

        Args:
            lines (Iterable[str]): Input lines, without line terminators.
            sink (Callable[[str], object]): Called once per output line, in order.

        Returns:
            RunSummary: Counts for this run (cumulative over the pipeline's lifetime).
        """
        for line in lines:
            result = self.process(line)
            if result is not None:
                sink(result)
        logger.debug(
            "Run finished: %d read, %d emitted (%d short-circuited), %d dropped, %d block start(s)",
            self.summary.read,
            self.summary.emitted,
            self.summary.short_circuited,
            self.summary.dropped,
            self.summary.resets,
        )
        return self.summary
