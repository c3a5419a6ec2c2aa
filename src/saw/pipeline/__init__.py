# saw:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Saw pipeline: atoms, verdicts, the atom registry and the line runner."""

from __future__ import annotations
