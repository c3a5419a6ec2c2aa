# saw:header:start
#
#   project      : Saw
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""CLI test helpers for running the ``saw`` command in-process.

Click's test runner captures both streams; since Click 8.2 ``result.output``
interleaves them the way a terminal would. Data assertions are therefore only
made on successful runs at the default log level, where nothing is written
to stderr.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from saw.cli.exit_codes import ExitCode
from saw.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``argv`` and optional standard input.

    Args:
        argv (Sequence[str]): Argument vector, e.g. ``["filter", "^a"]``.
        input_text (str | bytes | IO[Any] | None): Data fed to STDIN.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["enumerate"], input_text="a\\nb\\n")
        assert result.output == "1 a\\n2 b\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
