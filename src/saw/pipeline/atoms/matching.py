# saw:header:start
#
#   project      : Saw
#   file         : matching.py
#   file_relpath : src/saw/pipeline/atoms/matching.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Stateless line predicates: `filter` and `match`.

Both pass matching lines on unchanged. They differ only for lines that do
not match: `filter` drops them, `match` emits them as-is and skips the rest
of the program.
"""

from __future__ import annotations

from dataclasses import dataclass

from saw.core.matcher import Matcher, compile_pattern
from saw.pipeline.atoms.base import BaseAtom
from saw.pipeline.registry import register_atom
from saw.pipeline.verdict import Verdict


@register_atom("filter", aliases=("f",), args=("regex",))
@dataclass
class Filter(BaseAtom):
    """Keep lines matching REGEX, drop the others."""

    matcher: Matcher

    @classmethod
    def from_args(cls, regex: str) -> Filter:
        return cls(compile_pattern(regex))

    def apply(self, line: str) -> Verdict:
        if self.matcher.is_match(line):
            return Verdict.continue_with(line)
        return Verdict.drop()

    def describe(self) -> str:
        return f"filter {self.matcher.source!r}"


@register_atom("match", aliases=("m",), args=("regex",))
@dataclass
class Match(BaseAtom):
    """Process lines matching REGEX further, print the others unchanged."""

    matcher: Matcher

    @classmethod
    def from_args(cls, regex: str) -> Match:
        return cls(compile_pattern(regex))

    def apply(self, line: str) -> Verdict:
        if self.matcher.is_match(line):
            return Verdict.continue_with(line)
        return Verdict.emit_final(line)

    def describe(self) -> str:
        return f"match {self.matcher.source!r}"
