# saw:header:start
#
#   project      : Saw
#   file         : counting.py
#   file_relpath : src/saw/pipeline/atoms/counting.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Counter atoms: `enumerate` and `lines`.

Both count the lines that *reach them*; lines dropped or emitted by an
upstream atom are never counted. The counter is pre-incremented, so the
first line an atom sees is line 1. A block-start upstream resets the counter
(see [`Pipeline`][saw.pipeline.runner.Pipeline]).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from saw.core.selector import Selector
from saw.pipeline.atoms.base import BaseAtom
from saw.pipeline.registry import register_atom
from saw.pipeline.verdict import Verdict


@register_atom("enumerate", aliases=("enum", "e", "#"))
@dataclass
class Enumerate(BaseAtom):
    """Prefix each line with its number followed by a space."""

    counter: int = field(default=0, init=False)

    @classmethod
    def from_args(cls) -> Enumerate:
        return cls()

    def apply(self, line: str) -> Verdict:
        self.counter += 1
        return Verdict.continue_with(f"{self.counter} {line}")

    def reset(self) -> None:
        self.counter = 0


@register_atom("lines", aliases=("line", "l"), args=("selector",))
@dataclass
class Lines(BaseAtom):
    """Keep the lines whose number is in SELECTOR (e.g. "1,5-"), drop the others."""

    selector: Selector
    counter: int = field(default=0, init=False)

    @classmethod
    def from_args(cls, selector: str) -> Lines:
        # Line counts are open-ended: from-the-end indices cannot be resolved.
        return cls(Selector.parse(selector, negative_allowed=False))

    def apply(self, line: str) -> Verdict:
        self.counter += 1
        if self.selector.allows(False, self.counter, None):
            return Verdict.continue_with(line)
        return Verdict.drop()

    def reset(self) -> None:
        self.counter = 0

    def describe(self) -> str:
        return f"lines {str(self.selector)!r}"
