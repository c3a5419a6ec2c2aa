# saw:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Configuration helpers for Saw: logging setup and TOML program files."""

from __future__ import annotations
