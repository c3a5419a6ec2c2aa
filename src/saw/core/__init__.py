# saw:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Core building blocks shared by the atoms: errors, matchers, selectors, templates."""

from __future__ import annotations
