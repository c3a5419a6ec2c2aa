# saw:header:start
#
#   project      : Saw
#   file         : test_selector_property.py
#   file_relpath : tests/core/test_selector_property.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

# pyright: strict

"""Property tests for selector resolution against a brute-force model."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from saw.core.selector import Selector

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

indices = st.integers(min_value=1, max_value=40)
totals = st.integers(min_value=0, max_value=40)


@settings(max_examples=200, deadline=None)
@given(low=indices, high=indices, total=totals)
def test_closed_range_matches_model(low: int, high: int, total: int) -> None:
    """``a-b`` selects exactly the i with a <= i <= b within 1..total."""
    selector = Selector.parse(f"{low}-{high}")
    got = [i for i in range(1, total + 1) if selector.allows(True, i, total)]
    assert got == [i for i in range(1, total + 1) if low <= i <= high]


@settings(max_examples=200, deadline=None)
@given(k=indices, total=totals)
def test_from_end_index_matches_model(k: int, total: int) -> None:
    """``(-k)`` selects the k-th element from the end, if there is one."""
    selector = Selector.parse(f"({-k})")
    got = [i for i in range(1, total + 1) if selector.allows(True, i, total)]
    assert got == ([total - k + 1] if k <= total else [])


@settings(max_examples=100, deadline=None)
@given(picks=st.lists(indices, min_size=1, max_size=6), total=totals)
def test_union_of_single_indices(picks: list[int], total: int) -> None:
    """A list of single indices selects their (deduplicated) union."""
    selector = Selector.parse(",".join(str(p) for p in picks))
    got = [i for i in range(1, total + 1) if selector.allows(True, i, total)]
    assert got == sorted({p for p in picks if p <= total})


selector_texts = st.lists(
    st.one_of(
        indices.map(str),
        st.tuples(indices, indices).map(lambda t: f"{t[0]}-{t[1]}"),
        indices.map(lambda k: f"(-{k})"),
        indices.map(lambda k: f"{k}-"),
        indices.map(lambda k: f"-{k}"),
    ),
    min_size=1,
    max_size=4,
).map(",".join)


@settings(max_examples=100, deadline=None)
@given(text=selector_texts, total=totals)
def test_reparse_is_deterministic(text: str, total: int) -> None:
    """Parsing the same text twice, or its rendering, selects the same indices."""
    first = Selector.parse(text)
    second = Selector.parse(str(first))
    for i in range(1, total + 1):
        assert first.allows(True, i, total) == second.allows(True, i, total)
