# saw:header:start
#
#   project      : Saw
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Tests for the logging helpers."""

from __future__ import annotations

import logging

import pytest

from saw.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    SawLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from saw.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    "value, level",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("warn", logging.WARNING),
        ("10", 10),
        ("loud", None),
    ],
)
def test_parse_log_level(value: str, level: int | None) -> None:
    """Level names are case-insensitive; numbers pass through."""
    assert parse_log_level(value) == level


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable is honored when set."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
    assert resolve_env_log_level() == logging.DEBUG


def test_setup_logging_installs_a_single_stderr_handler() -> None:
    """Repeated setup replaces the handler instead of stacking them."""
    setup_logging(level=logging.INFO, use_color=False)
    setup_logging(level=logging.DEBUG, use_color=False)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ChalkFormatter)


def test_loggers_support_trace() -> None:
    """Saw loggers expose ``trace()``."""
    logger = get_logger("saw.test")
    assert isinstance(logger, SawLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_plain_formatter_has_no_escape_codes() -> None:
    """With color disabled the record is rendered as plain text."""
    record = logging.LogRecord("saw", logging.ERROR, __file__, 1, "boom %s", ("!",), None)
    assert ChalkFormatter("[%(levelname)s] %(message)s", use_color=False).format(record) == (
        "[ERROR] boom !"
    )
