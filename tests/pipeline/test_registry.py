# saw:header:start
#
#   project      : Saw
#   file         : test_registry.py
#   file_relpath : tests/pipeline/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Guardrails for the atom registry: keywords, aliases, arities and construction."""

from __future__ import annotations

import pytest

from saw.core.errors import ArityError, PatternError, UnknownAtomError
from saw.pipeline.atoms.base import BaseAtom
from saw.pipeline.atoms.ranges import FilterRange
from saw.pipeline.atoms.substitute import Gsub
from saw.pipeline.registry import AtomRegistry, register_atom
from tests.conftest import parametrize

EXPECTED_ARITY: dict[str, int] = {
    "filter": 1,
    "match": 1,
    "sub": 2,
    "gsub": 2,
    "enumerate": 0,
    "fields": 1,
    "lines": 1,
    "filter-range": 2,
    "match-range": 2,
}


def test_closed_set_of_keywords() -> None:
    """Exactly the documented atom kinds are registered."""
    assert sorted(AtomRegistry.keywords()) == sorted(EXPECTED_ARITY)


@parametrize("keyword, arity", sorted(EXPECTED_ARITY.items()))
def test_arity(keyword: str, arity: int) -> None:
    """Each atom kind declares its fixed argument count."""
    assert AtomRegistry.lookup(keyword).meta.arity == arity


@parametrize(
    "alias, keyword",
    [
        ("f", "filter"),
        ("m", "match"),
        ("s", "sub"),
        ("g", "gsub"),
        ("gs", "gsub"),
        ("#", "enumerate"),
        ("e", "enumerate"),
        ("F", "fields"),
        ("l", "lines"),
        ("fr", "filter-range"),
        ("mr", "match-range"),
    ],
)
def test_alias_resolution(alias: str, keyword: str) -> None:
    """Aliases resolve to their canonical keyword."""
    assert AtomRegistry.lookup(alias).meta.keyword == keyword


def test_names_are_unique_across_atoms() -> None:
    """No keyword or alias is shared by two atom kinds."""
    names = [name for meta in AtomRegistry.iter_meta() for name in meta.names]
    assert len(names) == len(set(names))


def test_every_atom_has_a_summary() -> None:
    """The summary (docstring first line) feeds ``--list-atoms``."""
    assert all(meta.summary for meta in AtomRegistry.iter_meta())


def test_unknown_name() -> None:
    """Unknown names are reported with the offending token."""
    assert not AtomRegistry.is_registered("frobnicate")
    with pytest.raises(UnknownAtomError, match="Not a recognized keyword: frobnicate"):
        AtomRegistry.lookup("frobnicate")


def test_build_returns_fresh_instances() -> None:
    """Two builds never share state."""
    first = AtomRegistry.build("fr", ["a", "b"])
    second = AtomRegistry.build("fr", ["a", "b"])
    assert isinstance(first, FilterRange)
    assert first is not second
    first.apply("a")
    assert first.state is not second.state


def test_build_checks_exact_arity() -> None:
    """Too many or too few arguments are rejected."""
    with pytest.raises(ArityError, match="'gsub' takes 2 argument"):
        AtomRegistry.build("g", ["a"])
    with pytest.raises(ArityError):
        AtomRegistry.build("enumerate", ["x"])


def test_build_adds_keyword_context_to_argument_errors() -> None:
    """Argument errors keep their type and name the atom as written."""
    with pytest.raises(PatternError, match="^Failed parsing arguments of 'gs': Invalid"):
        AtomRegistry.build("gs", ["(", "x"])


def test_build_uses_alias_class() -> None:
    """Building through an alias yields the canonical class."""
    assert type(AtomRegistry.build("gs", ["a", "b"])) is Gsub


def test_as_mapping_is_read_only() -> None:
    """The mapping view cannot be mutated."""
    mapping = AtomRegistry.as_mapping()
    with pytest.raises(TypeError):
        mapping["x"] = mapping["filter"]  # type: ignore[index]


def test_name_clash_is_rejected() -> None:
    """Registering an alias taken by another atom kind fails."""
    with pytest.raises(ValueError, match="already registered"):

        @register_atom("clashing", aliases=("fr",))
        class Clashing(BaseAtom):
            """Never registered."""

    assert "clashing" not in AtomRegistry.keywords()
