# saw:header:start
#
#   project      : Saw
#   file         : verdict.py
#   file_relpath : src/saw/pipeline/verdict.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""The result of applying one atom to one line.

Every atom returns exactly one `Verdict`:

* ``CONTINUE`` - hand ``value`` to the next atom (or emit it after the last one);
* ``DROP`` - discard the input line, nothing is written;
* ``EMIT_FINAL`` - write ``value`` now and skip the remaining atoms.

A ``CONTINUE`` verdict may additionally flag ``block_start``: the atom just
entered a new block, and the pipeline must reset every atom after it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VerdictKind(str, Enum):
    """Discriminator of a `Verdict`."""

    CONTINUE = "continue"
    DROP = "drop"
    EMIT_FINAL = "emit-final"


@dataclass(frozen=True)
class Verdict:
    """Tagged outcome of `BaseAtom.apply`.

    Use the constructors (`continue_with`, `drop`, `emit_final`) rather than
    building instances directly, so the value/kind pairing stays consistent.

    Attributes:
        kind (VerdictKind): Which of the three outcomes this is.
        value (str | None): The line to pass on or emit; None for ``DROP``.
        block_start (bool): True if the atom performed an outside-to-inside block
            transition while producing this verdict.
    """

    kind: VerdictKind
    value: str | None = None
    block_start: bool = False

    @classmethod
    def continue_with(cls, value: str, *, block_start: bool = False) -> Verdict:
        """Pass ``value`` on to the next atom."""
        return cls(VerdictKind.CONTINUE, value, block_start)

    @classmethod
    def drop(cls) -> Verdict:
        """Discard the current input line."""
        return _DROP

    @classmethod
    def emit_final(cls, value: str) -> Verdict:
        """Write ``value`` immediately, bypassing the remaining atoms."""
        return cls(VerdictKind.EMIT_FINAL, value)

    @property
    def is_continue(self) -> bool:
        return self.kind is VerdictKind.CONTINUE


_DROP = Verdict(VerdictKind.DROP)
