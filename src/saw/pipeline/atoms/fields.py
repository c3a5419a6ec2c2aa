# saw:header:start
#
#   project      : Saw
#   file         : fields.py
#   file_relpath : src/saw/pipeline/atoms/fields.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""The `fields` atom: keep selected whitespace-separated fields."""

from __future__ import annotations

from dataclasses import dataclass

from saw.core.selector import Selector
from saw.pipeline.atoms.base import BaseAtom
from saw.pipeline.registry import register_atom
from saw.pipeline.verdict import Verdict


@register_atom("fields", aliases=("F",), args=("selector",))
@dataclass
class Fields(BaseAtom):
    """Keep the fields in SELECTOR (e.g. "1,3-(-2)"), joined by single spaces."""

    selector: Selector

    @classmethod
    def from_args(cls, selector: str) -> Fields:
        return cls(Selector.parse(selector))

    def apply(self, line: str) -> Verdict:
        tokens = line.split()
        total = len(tokens)
        kept = [
            token
            for position, token in enumerate(tokens, start=1)
            if self.selector.allows(True, position, total)
        ]
        return Verdict.continue_with(" ".join(kept))

    def describe(self) -> str:
        return f"fields {str(self.selector)!r}"
