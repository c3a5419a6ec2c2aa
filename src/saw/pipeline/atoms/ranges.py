# saw:header:start
#
#   project      : Saw
#   file         : ranges.py
#   file_relpath : src/saw/pipeline/atoms/ranges.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Block-delimited atoms: `filter-range` and `match-range`.

Both atoms turn the flat line stream into *blocks*: a block opens on a line
matching START and closes on the next line matching END. Both boundary lines
belong to the block.

State machine (one `RangeState` per atom, initially ``OUTSIDE``)::

    OUTSIDE --START matches--> INSIDE     (line continues, downstream reset)
    OUTSIDE --no match-------> OUTSIDE    (filter-range: drop, match-range: emit)
    INSIDE  --END matches----> OUTSIDE    (line continues)
    INSIDE  --no match-------> INSIDE     (line continues)

END is only tested on lines *after* the opening line, so a START line that
also matches END does not close its own block. The line that closes a block is
never treated as the start of a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from saw.config.logging import get_logger
from saw.core.matcher import Matcher, compile_pattern
from saw.pipeline.atoms.base import BaseAtom
from saw.pipeline.registry import register_atom
from saw.pipeline.verdict import Verdict

logger = get_logger(__name__)


class RangeState(str, Enum):
    """Whether the atom is currently inside a block."""

    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass
class _RangeAtom(BaseAtom):
    start: Matcher
    end: Matcher
    state: RangeState = field(default=RangeState.OUTSIDE, init=False)

    @classmethod
    def from_args(cls, start: str, end: str) -> _RangeAtom:
        return cls(compile_pattern(start), compile_pattern(end))

    def outside(self, line: str) -> Verdict:
        """Verdict for a line seen outside any block that does not open one."""
        raise NotImplementedError

    def apply(self, line: str) -> Verdict:
        if self.state is RangeState.OUTSIDE:
            if not self.start.is_match(line):
                return self.outside(line)
            self.state = RangeState.INSIDE
            logger.trace("%s: block opened by %r", self.keyword, line)
            return Verdict.continue_with(line, block_start=True)

        if self.end.is_match(line):
            self.state = RangeState.OUTSIDE
            logger.trace("%s: block closed by %r", self.keyword, line)
        return Verdict.continue_with(line)

    def reset(self) -> None:
        self.state = RangeState.OUTSIDE

    def describe(self) -> str:
        return f"{self.keyword} {self.start.source!r} {self.end.source!r}"


@register_atom("filter-range", aliases=("fr",), args=("start_regex", "end_regex"))
@dataclass
class FilterRange(_RangeAtom):
    """Keep the blocks from a START line to the next END line, drop the rest."""

    def outside(self, line: str) -> Verdict:
        return Verdict.drop()


@register_atom("match-range", aliases=("mr",), args=("start_regex", "end_regex"))
@dataclass
class MatchRange(_RangeAtom):
    """Process blocks from START to END further, print the other lines unchanged."""

    def outside(self, line: str) -> Verdict:
        return Verdict.emit_final(line)
