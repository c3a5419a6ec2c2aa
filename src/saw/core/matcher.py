# saw:header:start
#
#   project      : Saw
#   file         : matcher.py
#   file_relpath : src/saw/core/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Compiled regular expressions as used by the atoms.

Atoms never talk to `re` directly; they hold a `Matcher`, which exposes the
three operations the pipeline needs (`is_match`, `find_first`, `substitute`)
plus the group metadata used to validate replacement templates up front.
Matching is *unanchored*: a pattern matches a line if it matches anywhere in it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from saw.core.errors import PatternError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


@dataclass(frozen=True)
class Matcher:
    """A compiled, immutable regular expression.

    Attributes:
        pattern (re.Pattern[str]): The compiled pattern.
    """

    pattern: re.Pattern[str]

    @property
    def source(self) -> str:
        """The pattern text the matcher was compiled from."""
        return self.pattern.pattern

    @property
    def group_count(self) -> int:
        """Number of capture groups in the pattern."""
        return self.pattern.groups

    @property
    def group_names(self) -> Mapping[str, int]:
        """Mapping of named capture groups to their group number."""
        return self.pattern.groupindex

    def is_match(self, text: str) -> bool:
        """Return True if the pattern matches anywhere in ``text``."""
        return self.pattern.search(text) is not None

    def find_first(self, text: str) -> re.Match[str] | None:
        """Return the leftmost match in ``text``, if any."""
        return self.pattern.search(text)

    def substitute(
        self,
        text: str,
        expand: Callable[[re.Match[str]], str],
        *,
        count: int = 0,
    ) -> str:
        """Replace matches in ``text`` with ``expand(match)``.

        Args:
            text (str): The input text.
            expand (Callable[[re.Match[str]], str]): Produces the replacement for one match.
            count (int): Maximum number of replacements; ``0`` replaces every
                non-overlapping match, left to right.

        Returns:
            str: The rewritten text (``text`` itself when nothing matched).
        """
        return self.pattern.sub(expand, text, count=count)

    def __repr__(self) -> str:
        return f"Matcher({self.source!r})"


def compile_pattern(source: str) -> Matcher:
    """Compile ``source`` into a `Matcher`.

    Args:
        source (str): Regular expression text.

    Returns:
        Matcher: The compiled matcher.

    Raises:
        PatternError: If ``source`` is not a valid regular expression.
    """
    try:
        return Matcher(re.compile(source))
    except re.error as exc:
        raise PatternError(f"Invalid regular expression {source!r}: {exc}") from exc
