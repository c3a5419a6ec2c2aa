# saw:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Saw package.

Saw is a line-oriented text transformation tool. A program is an ordered list
of *atoms* (filter, match, sub, gsub, enumerate, fields, lines, filter-range,
match-range); every input line flows through the atoms in order and each atom
decides whether the line survives, how it is rewritten, and whether the
remaining atoms are bypassed.
"""

from __future__ import annotations
