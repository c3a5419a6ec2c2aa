# saw:header:start
#
#   project      : Saw
#   file         : selector.py
#   file_relpath : src/saw/core/selector.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Selector mini-grammar shared by the `fields` and `lines` atoms.

A selector is a comma separated list of terms; each term is a single index or
an inclusive range whose bounds may be left open::

    selector := term (',' term)*
    term     := bound | bound '-' [bound] | '-' [bound]
    bound    := integer | '(' '-' integer ')'

Positive indices are 1-based positions from the start. A parenthesized
negative index counts from the end: with ``total`` elements, ``(-k)`` is
position ``total - k + 1``, so ``(-1)`` is the last element.

Examples:
    ``"1,3-(-2)"`` with 5 elements selects positions 1, 3 and 4;
    ``"2,4-"`` with 6 elements selects 2, 4, 5 and 6;
    ``"-3"`` selects the first three; ``"-"`` selects everything.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from saw.core.errors import NegativeIndexError, SelectorError

_BOUND: Final[str] = r"(?:[0-9]+|\(-[0-9]+\))"

_TERM_RE: Final[re.Pattern[str]] = re.compile(
    rf"(?P<low>{_BOUND})?(?P<dash>-)?(?P<high>{_BOUND})?"
)


@dataclass(frozen=True)
class Bound:
    """One end of a selector term.

    Attributes:
        value (int): The index magnitude as written.
        from_end (bool): True for the parenthesized ``(-k)`` form.
    """

    value: int
    from_end: bool = False

    @classmethod
    def parse(cls, text: str) -> Bound:
        """Parse ``"k"`` or ``"(-k)"``."""
        if text.startswith("("):
            return cls(int(text[2:-1]), from_end=True)
        return cls(int(text))

    def resolve(self, total: int | None) -> int:
        """Return the absolute 1-based position this bound denotes.

        Raises:
            NegativeIndexError: If the bound counts from the end and ``total`` is unknown.
        """
        if not self.from_end:
            return self.value
        if total is None:
            raise NegativeIndexError(
                f"Index (-{self.value}) counts from the end, but the total is unbounded"
            )
        return total - self.value + 1

    def __str__(self) -> str:
        return f"(-{self.value})" if self.from_end else str(self.value)


@dataclass(frozen=True)
class SelectorTerm:
    """An inclusive range; ``None`` bounds are open (1 / +infinity)."""

    low: Bound | None
    high: Bound | None

    @property
    def has_negative(self) -> bool:
        return any(b is not None and b.from_end for b in (self.low, self.high))

    def contains(self, index: int, total: int | None) -> bool:
        if self.low is not None and index < self.low.resolve(total):
            return False
        if self.high is not None and index > self.high.resolve(total):
            return False
        return True

    def __str__(self) -> str:
        if self.low is not None and self.low == self.high:
            return str(self.low)
        low = "" if self.low is None else str(self.low)
        high = "" if self.high is None else str(self.high)
        return f"{low}-{high}"


def _parse_term(text: str) -> SelectorTerm:
    match = _TERM_RE.fullmatch(text)
    if match is None or not text:
        raise SelectorError(f"Invalid selector term: {text!r}")
    low = Bound.parse(match["low"]) if match["low"] else None
    high = Bound.parse(match["high"]) if match["high"] else None
    if match["dash"] is None:
        if high is not None:
            # "1(-2)": two bounds without a separating dash
            raise SelectorError(f"Invalid selector term: {text!r}")
        return SelectorTerm(low, low)
    return SelectorTerm(low, high)


@dataclass(frozen=True)
class Selector:
    """A parsed selector: the union of its terms.

    Attributes:
        terms (tuple[SelectorTerm, ...]): Terms in the order they were written.
    """

    terms: tuple[SelectorTerm, ...]

    @classmethod
    def parse(cls, text: str, *, negative_allowed: bool = True) -> Selector:
        """Parse selector text.

        Args:
            text (str): Selector text such as ``"1,3-(-2)"``.
            negative_allowed (bool): Set to False for consumers whose total length
                is unbounded (line counters); from-the-end indices are then rejected.

        Returns:
            Selector: The parsed selector.

        Raises:
            SelectorError: If ``text`` does not follow the grammar.
            NegativeIndexError: If ``text`` uses ``(-k)`` while ``negative_allowed`` is False.
        """
        if not text:
            raise SelectorError("Empty selector")
        selector = cls(tuple(_parse_term(part) for part in text.split(",")))
        if not negative_allowed and selector.has_negative:
            raise NegativeIndexError(
                f"Selector {text!r} counts from the end, which is not supported here"
            )
        return selector

    @property
    def has_negative(self) -> bool:
        """True if any term uses a from-the-end bound."""
        return any(term.has_negative for term in self.terms)

    def allows(self, negative_allowed: bool, index: int, total: int | None) -> bool:
        """Return True if the 1-based ``index`` is selected.

        Args:
            negative_allowed (bool): Whether from-the-end bounds may be resolved.
                When False the total is treated as unbounded.
            index (int): The 1-based position to test.
            total (int | None): Number of elements, or None if unbounded.

        Returns:
            bool: True if at least one term contains ``index``.

        Raises:
            NegativeIndexError: If a from-the-end bound must be resolved without a total.
        """
        if not negative_allowed:
            if self.has_negative:
                raise NegativeIndexError(f"Selector {self} counts from the end")
            total = None
        if total is not None and not 1 <= index <= total:
            return False
        return any(term.contains(index, total) for term in self.terms)

    def __str__(self) -> str:
        return ",".join(str(term) for term in self.terms)
