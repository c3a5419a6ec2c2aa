# saw:header:start
#
#   project      : Saw
#   file         : substitute.py
#   file_relpath : src/saw/pipeline/atoms/substitute.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Regex substitution atoms: `sub` (first match) and `gsub` (every match).

The replacement is a [`Template`][saw.core.template.Template]; unknown group
references are rejected when the atom is built. Lines without a match are
passed on unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from saw.core.matcher import Matcher, compile_pattern
from saw.core.template import Template, compile_template
from saw.pipeline.atoms.base import BaseAtom
from saw.pipeline.registry import register_atom
from saw.pipeline.verdict import Verdict


@dataclass
class _Substitution(BaseAtom):
    matcher: Matcher
    template: Template

    # Maximum number of replacements per line; 0 means no limit.
    count: ClassVar[int] = 0

    @classmethod
    def from_args(cls, regex: str, replacement: str) -> _Substitution:
        matcher = compile_pattern(regex)
        return cls(matcher, compile_template(replacement, matcher))

    def apply(self, line: str) -> Verdict:
        return Verdict.continue_with(
            self.matcher.substitute(line, self.template.expand, count=self.count)
        )

    def describe(self) -> str:
        return f"{self.keyword} {self.matcher.source!r} {self.template.source!r}"


@register_atom("sub", aliases=("s",), args=("regex", "replacement"))
@dataclass
class Sub(_Substitution):
    """Replace the first match of REGEX with REPLACEMENT."""

    count: ClassVar[int] = 1


@register_atom("gsub", aliases=("g", "gs"), args=("regex", "replacement"))
@dataclass
class Gsub(_Substitution):
    """Replace every match of REGEX with REPLACEMENT."""

    count: ClassVar[int] = 0
