# saw:header:start
#
#   project      : Saw
#   file         : base.py
#   file_relpath : src/saw/pipeline/atoms/base.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Base class for pipeline atoms.

The pipeline invokes atoms through two operations only:

    verdict = atom.apply(line)   # decide the fate of one line
    atom.reset()                 # restore construction-time state

Design goals
------------
- Configuration (patterns, templates, selectors) is fixed at construction time;
  every configuration error surfaces from the constructor.
- Mutable state (counters, block state) is private to one atom instance.
- ``reset()`` is called by the pipeline only, never by an atom on itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from saw.pipeline.verdict import Verdict


@dataclass
class BaseAtom:
    """Reusable foundation for atoms.

    Subclass this and override ``apply()``; stateful atoms also override
    ``reset()``. Concrete atoms are registered with
    [`register_atom`][saw.pipeline.registry.register_atom], which also sets
    ``keyword``.

    Attributes:
        keyword (str): Canonical keyword of the atom kind (class-level).
    """

    keyword: ClassVar[str] = ""

    def apply(self, line: str) -> Verdict:
        """Decide what happens to ``line``.

        Args:
            line (str): The current value of the input line.

        Returns:
            Verdict: What the pipeline should do next.
        """
        raise NotImplementedError

    def reset(self) -> None:
        """Reinitialize mutable state. Stateless atoms keep the no-op default."""
        pass

    def describe(self) -> str:
        """Return a short, human-readable description for logs."""
        return self.keyword
