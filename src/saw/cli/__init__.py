# saw:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Saw CLI package.

This package groups the Click command definition and supporting utilities
for the Saw command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        saw = "saw.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main at module import time
