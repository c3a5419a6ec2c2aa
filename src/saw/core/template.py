# saw:header:start
#
#   project      : Saw
#   file         : template.py
#   file_relpath : src/saw/core/template.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Replacement templates for the `sub` and `gsub` atoms.

Syntax:
  * ``${name}`` / ``${1}`` - a named or numbered capture group;
  * ``$name`` / ``$1`` - same, the identifier being the longest run of
    ``[A-Za-z0-9_]``; use braces when the next character would extend it
    (``${1}st`` rather than ``$1st``);
  * ``$$`` - a literal dollar sign.

Any other ``$`` is kept literally. Group references are checked against the
compiled pattern when the template is compiled, so a typo in a group name is
reported before any input is read.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from saw.core.errors import TemplateError

if TYPE_CHECKING:
    from saw.core.matcher import Matcher

_IDENT_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_]+")


@dataclass(frozen=True)
class Template:
    """A compiled replacement template.

    Attributes:
        source (str): The template text as written.
        parts (tuple[str | int | _Named, ...]): Literal text, numbered group
            references (``int``) and named group references, in order.
    """

    source: str
    parts: tuple[str | int | _Named, ...]

    def expand(self, match: re.Match[str]) -> str:
        """Render the template for one match.

        Groups that did not participate in the match expand to ``""``.
        """
        out: list[str] = []
        for part in self.parts:
            if isinstance(part, str):
                out.append(part)
            else:
                out.append(match.group(part.name if isinstance(part, _Named) else part) or "")
        return "".join(out)


@dataclass(frozen=True)
class _Named:
    name: str


def _parse(source: str) -> list[str | int | _Named]:
    parts: list[str | int | _Named] = []
    literal: list[str] = []

    def push_ref(name: str) -> None:
        if literal:
            parts.append("".join(literal))
            literal.clear()
        parts.append(int(name) if name.isascii() and name.isdigit() else _Named(name))

    i = 0
    n = len(source)
    while i < n:
        char = source[i]
        if char != "$":
            literal.append(char)
            i += 1
            continue
        if source.startswith("$$", i):
            literal.append("$")
            i += 2
            continue
        if source.startswith("${", i):
            close = source.find("}", i + 2)
            if close > i + 2:
                push_ref(source[i + 2 : close])
                i = close + 1
                continue
            literal.append("$")
            i += 1
            continue
        ident = _IDENT_RE.match(source, i + 1)
        if ident is None:
            literal.append("$")
            i += 1
            continue
        push_ref(ident.group(0))
        i = ident.end()

    if literal:
        parts.append("".join(literal))
    return parts


def compile_template(source: str, matcher: Matcher) -> Template:
    """Compile ``source`` against the groups defined by ``matcher``.

    Args:
        source (str): The replacement text.
        matcher (Matcher): The pattern whose groups the template refers to.

    Returns:
        Template: The compiled template.

    Raises:
        TemplateError: If a referenced group does not exist in the pattern.
    """
    parts = _parse(source)
    for part in parts:
        if isinstance(part, _Named) and part.name not in matcher.group_names:
            raise TemplateError(
                f"Replacement {source!r} refers to unknown group '{part.name}' "
                f"in pattern {matcher.source!r}"
            )
        if isinstance(part, int) and part > matcher.group_count:
            raise TemplateError(
                f"Replacement {source!r} refers to group {part}, but pattern "
                f"{matcher.source!r} only has {matcher.group_count} group(s)"
            )
    return Template(source, tuple(parts))
