# saw:header:start
#
#   project      : Saw
#   file         : test_matching_atoms.py
#   file_relpath : tests/pipeline/atoms/test_matching_atoms.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Tests for the `filter` and `match` atoms."""

from __future__ import annotations

from saw.pipeline.atoms.matching import Filter, Match
from saw.pipeline.verdict import Verdict, VerdictKind
from tests.conftest import mark_pipeline
from tests.pipeline.conftest import apply_all, run_program


@mark_pipeline
def test_filter_verdicts() -> None:
    """Matching lines continue unchanged, the others are dropped."""
    verdicts = apply_all(Filter.from_args("^a"), ["abc", "bcd"])
    assert verdicts == [Verdict.continue_with("abc"), Verdict.drop()]


@mark_pipeline
def test_match_verdicts() -> None:
    """Matching lines continue, the others are emitted as-is."""
    verdicts = apply_all(Match.from_args("^a"), ["abc", "bcd"])
    assert [v.kind for v in verdicts] == [VerdictKind.CONTINUE, VerdictKind.EMIT_FINAL]
    assert [v.value for v in verdicts] == ["abc", "bcd"]


@mark_pipeline
def test_filter_is_unanchored() -> None:
    """Patterns match anywhere in the line."""
    assert run_program(["filter", "ell"], ["hello", "world"]) == ["hello"]


@mark_pipeline
def test_filter_vs_match_on_same_input() -> None:
    """`filter` shortens the output, `match` keeps every line."""
    lines = ["a=1", "# comment", "b=2"]
    assert run_program(["filter", "=", "sub", "=", ": "], lines) == ["a: 1", "b: 2"]
    assert run_program(["match", "=", "sub", "=", ": "], lines) == ["a: 1", "# comment", "b: 2"]


@mark_pipeline
def test_match_skips_downstream_atoms() -> None:
    """An emitted line is not seen by later atoms, so it is not counted."""
    lines = ["x1", "y", "x2"]
    assert run_program(["m", "^x", "enumerate"], lines) == ["1 x1", "y", "2 x2"]


@mark_pipeline
def test_describe() -> None:
    """Descriptions name the keyword and the pattern."""
    assert Filter.from_args("^a").describe() == "filter '^a'"
    assert Match.from_args("b").describe() == "match 'b'"
