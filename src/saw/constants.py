# saw:header:start
#
#   project      : Saw
#   file         : constants.py
#   file_relpath : src/saw/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Saw Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SAW_VERSION: str = get_version("saw")

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "SAW_LOG_LEVEL"

# Table names used by TOML program files.
PROGRAM_FILE_ATOM_TABLE: str = "atom"
PROGRAM_FILE_KEY_NAME: str = "name"
PROGRAM_FILE_KEY_ARGS: str = "args"
