# saw:header:start
#
#   project      : Saw
#   file         : main.py
#   file_relpath : src/saw/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""The ``saw`` command.

Key ideas:
- Shared state (console, log level, color) is initialized once and placed into ``ctx.obj``.
- The whole program is built and validated before the first input line is read,
  so a malformed program exits non-zero without producing any output.
- Program tokens are passed through untouched: once the first program token is
  seen, nothing else is parsed as an option (regexes may start with ``-``).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from saw.cli.console import ClickConsole
from saw.cli.errors import (
    SawCliError,
    SawConfigError,
    SawEncodingError,
    SawIOError,
    SawUnexpectedError,
    SawUsageError,
)
from saw.cli.io import LineSink, open_input, read_lines
from saw.cli.options import common_color_options, common_verbose_options, resolve_log_level
from saw.config.logging import get_logger, setup_logging
from saw.constants import SAW_VERSION
from saw.core.errors import ProgramError
from saw.pipeline.program import build_pipeline
from saw.pipeline.registry import AtomRegistry

if TYPE_CHECKING:
    from saw.pipeline.runner import RunSummary

logger = get_logger(__name__)

_EPILOG = """\b
Examples:
  saw -f settings.ini filter-range '^\\[Section 2' '^\\[' filter '^name'
  ps aux | saw lines 2- fields 2,11
  saw gsub '(?P<y>\\d{4})-(?P<m>\\d{2})-(?P<d>\\d{2})' '$m/$d/$y' < dates.txt

Run 'saw --list-atoms' for the available atoms.
"""


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> ClickConsole:
    """Initialize shared state (log level & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Returns:
        ClickConsole: The console stored in ``ctx.obj["console"]``.
    """
    ctx.obj = ctx.obj or {}

    console = ClickConsole(enable_color=not no_color)
    ctx.obj["console"] = console

    log_level = resolve_log_level(verbose, quiet)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level, use_color=not no_color)

    return console


def print_atom_table(console: ClickConsole) -> None:
    """Print the keyword / aliases / arguments table of all atoms."""
    rows = [
        (
            meta.keyword,
            ", ".join(meta.aliases),
            " ".join(name.upper() for name in meta.arg_names),
            meta.summary,
        )
        for meta in AtomRegistry.iter_meta()
    ]
    width_kw = max(len(row[0]) for row in rows)
    width_alias = max(len(row[1]) for row in rows)
    width_args = max(len(row[2]) for row in rows)
    for keyword, aliases, args, summary in rows:
        console.print(
            f"{console.styled(keyword.ljust(width_kw), bold=True)}  "
            f"{aliases.ljust(width_alias)}  {args.ljust(width_args)}  {summary}"
        )


@click.command(
    name="saw",
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
    epilog=_EPILOG,
)
@click.option(
    "-f",
    "--file",
    "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read input from FILE instead of standard input.",
)
@click.option(
    "-p",
    "--program-file",
    "program_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Load atoms from a TOML program file; they run before the PROGRAM atoms.",
)
@click.option(
    "--list-atoms",
    is_flag=True,
    default=False,
    help="List the available atoms and exit.",
)
@common_verbose_options
@common_color_options
@click.version_option(SAW_VERSION, "--version", prog_name="saw")
@click.argument("program", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    input_path: Path | None,
    program_file: Path | None,
    list_atoms: bool,
    verbose: int,
    quiet: int,
    no_color: bool,
    program: tuple[str, ...],
) -> None:
    """Run every input line through PROGRAM, a sequence of atoms and their arguments."""
    console = init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if list_atoms:
        print_atom_table(console)
        return

    if not program and program_file is None:
        raise SawUsageError("Missing program: give at least one atom, or --program-file.")

    try:
        pipeline = build_pipeline(program, program_file=program_file)
    except ProgramError as exc:
        raise SawConfigError(str(exc)) from exc

    sink = LineSink()
    summary: RunSummary
    with open_input(input_path) as stream:
        try:
            summary = pipeline.run(read_lines(stream), sink.write)
        except SawCliError:
            raise
        except UnicodeDecodeError as exc:
            raise SawEncodingError(f"Input is not valid UTF-8: {exc.reason}") from exc
        except OSError as exc:
            raise SawIOError(f"Cannot read input: {exc.strerror or exc}") from exc
        except Exception as exc:
            logger.debug("Unhandled error while processing input", exc_info=exc)
            raise SawUnexpectedError(f"Unexpected error: {exc}") from exc
    sink.flush()

    logger.info("%d line(s) read, %d written", summary.read, sink.written)


if __name__ == "__main__":
    cli()
