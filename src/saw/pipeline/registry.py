# saw:header:start
#
#   project      : Saw
#   file         : registry.py
#   file_relpath : src/saw/pipeline/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Registry of atom kinds.

This module provides a decorator to register atom classes under a canonical
keyword plus any number of aliases, and a read-only facade to look them up.

Typical usage:
    ```python
    from saw.pipeline.registry import AtomRegistry

    spec = AtomRegistry.lookup("fr")  # -> the filter-range spec
    atom = AtomRegistry.build("fr", [r"^\\[Section 2", r"^\\["])
    for meta in AtomRegistry.iter_meta():
        print(meta.keyword, meta.aliases, meta.arity)
    ```

The set of atom kinds is closed: registration happens at import time of the
modules in [`saw.pipeline.atoms`][saw.pipeline.atoms].
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from saw.config.logging import get_logger
from saw.core.errors import ArityError, ProgramError, UnknownAtomError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping, Sequence

    from saw.config.logging import SawLogger
    from saw.pipeline.atoms.base import BaseAtom

logger: SawLogger = get_logger(__name__)


@dataclass(frozen=True)
class AtomMeta:
    """Stable, serializable metadata about a registered atom kind.

    Attributes:
        keyword (str): Canonical keyword (e.g. ``"filter-range"``).
        aliases (tuple[str, ...]): Alternative names (e.g. ``("fr",)``).
        arg_names (tuple[str, ...]): Names of the positional arguments, in order.
        summary (str): One-line description.
    """

    keyword: str
    aliases: tuple[str, ...] = ()
    arg_names: tuple[str, ...] = ()
    summary: str = ""

    @property
    def arity(self) -> int:
        """Number of positional arguments the atom takes."""
        return len(self.arg_names)

    @property
    def names(self) -> tuple[str, ...]:
        """Keyword followed by its aliases."""
        return (self.keyword, *self.aliases)


@dataclass(frozen=True)
class AtomSpec:
    """A registered atom kind: its metadata and its class."""

    meta: AtomMeta
    atom_cls: type[BaseAtom]


_registry: dict[str, AtomSpec] = {}
_names: dict[str, str] = {}


def register_atom(
    keyword: str,
    *,
    aliases: Sequence[str] = (),
    args: Sequence[str] = (),
) -> Callable[[type[BaseAtom]], type[BaseAtom]]:
    """Class decorator to register an atom kind.

    The decorated class must provide a ``from_args(*args: str)`` classmethod
    taking exactly ``len(args)`` string arguments.

    Args:
        keyword (str): Canonical keyword.
        aliases (Sequence[str]): Alternative names.
        args (Sequence[str]): Names of the positional arguments (defines the arity).

    Returns:
        Callable[[type[BaseAtom]], type[BaseAtom]]: The class decorator.
    """

    def decorator(cls: type[BaseAtom]) -> type[BaseAtom]:
        """Register ``cls`` under ``keyword`` and its aliases.

        Raises:
            ValueError: If one of the names is already taken by another atom kind.
        """
        doc = (cls.__doc__ or "").strip()
        meta = AtomMeta(
            keyword=keyword,
            aliases=tuple(aliases),
            arg_names=tuple(args),
            summary=doc.splitlines()[0] if doc else "",
        )
        for name in meta.names:
            owner = _names.get(name)
            if owner is not None and owner != keyword:
                raise ValueError(f"Atom name '{name}' is already registered by '{owner}'")
        logger.debug("Registering atom %s as '%s' %s", cls.__name__, keyword, meta.aliases)
        cls.keyword = keyword
        _registry[keyword] = AtomSpec(meta, cls)
        for name in meta.names:
            _names[name] = keyword
        return cls

    return decorator


class AtomRegistry:
    """Read-only facade over the registered atom kinds."""

    @classmethod
    def _compose(cls) -> Mapping[str, AtomSpec]:
        from saw.pipeline.atoms import register_all_atoms

        register_all_atoms()
        return _registry

    @classmethod
    def keywords(cls) -> tuple[str, ...]:
        """Return the canonical keywords, in registration order."""
        return tuple(cls._compose())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Return True if ``name`` is a keyword or an alias."""
        cls._compose()
        return name in _names

    @classmethod
    def lookup(cls, name: str) -> AtomSpec:
        """Resolve a keyword or alias.

        Args:
            name (str): Keyword or alias.

        Returns:
            AtomSpec: The registered spec.

        Raises:
            UnknownAtomError: If ``name`` is not registered.
        """
        registry = cls._compose()
        keyword = _names.get(name)
        if keyword is None:
            raise UnknownAtomError(f"Not a recognized keyword: {name}")
        return registry[keyword]

    @classmethod
    def as_mapping(cls) -> Mapping[str, AtomSpec]:
        """Return a read-only keyword -> spec mapping."""
        return MappingProxyType(dict(cls._compose()))

    @classmethod
    def iter_meta(cls) -> Iterator[AtomMeta]:
        """Iterate over metadata for the registered atom kinds.

        Yields:
            AtomMeta: Serializable metadata about each atom kind.
        """
        for spec in cls._compose().values():
            yield spec.meta

    @classmethod
    def build(cls, name: str, args: Sequence[str]) -> BaseAtom:
        """Construct an atom from its name and its exact argument list.

        Args:
            name (str): Keyword or alias.
            args (Sequence[str]): Positional string arguments.

        Returns:
            BaseAtom: A fresh atom instance.

        Raises:
            UnknownAtomError: If ``name`` is not registered.
            ArityError: If ``len(args)`` differs from the atom's arity.
            ProgramError: If an argument is invalid (with the atom keyword as context).
        """
        spec = cls.lookup(name)
        meta = spec.meta
        if len(args) != meta.arity:
            expected = ", ".join(meta.arg_names) or "no arguments"
            raise ArityError(
                f"'{meta.keyword}' takes {meta.arity} argument(s) ({expected}), got {len(args)}"
            )
        try:
            atom = spec.atom_cls.from_args(*args)  # type: ignore[attr-defined]
        except ProgramError as exc:
            raise exc.with_context(f"Failed parsing arguments of '{name}'") from exc
        logger.debug("Built atom %s", atom.describe())
        return atom
