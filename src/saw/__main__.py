# saw:header:start
#
#   project      : Saw
#   file         : __main__.py
#   file_relpath : src/saw/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Module entry point for running Saw via ``python -m saw``.

It delegates directly to :func:`saw.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how Saw is launched.

Examples:
    Keep the body of one INI section::

        python -m saw -f settings.ini filter-range '^\\[Section 2' '^\\['
"""

from __future__ import annotations

from saw.cli.main import cli

if __name__ == "__main__":
    cli()
