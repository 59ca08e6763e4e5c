"""Unit tests for `dashkit.logging`.

Covers the third-party prefix filter, the Rich console handler factory and the
startup diagnostics emitter.
"""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from dashkit.config import CACHE_STORE_ENV
from dashkit.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    log_startup,
)

# ---------------------------------------------------------------------------
# ThirdPartyPrefixFilter
# ---------------------------------------------------------------------------


def make_record(name: str) -> logging.LogRecord:
    """Build a minimal INFO record for the given logger name."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "message", None, None)


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("click_extra.colorize", "[click_extra]"),
        ("urllib3", "[urllib3]"),
        ("dashkit.memoize", ""),
        ("dashkit", ""),
    ],
)
def test_prefix_filter(name: str, prefix: str) -> None:
    """Third-party records get a short bracketed prefix; project records none."""
    record = make_record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix


# ---------------------------------------------------------------------------
# config_console_handler
# ---------------------------------------------------------------------------


def test_console_handler_defaults() -> None:
    """Outside debug mode the handler keeps its level and adds the filter."""
    handler = config_console_handler(level=logging.WARNING, color=False)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)
    assert handler.console.stderr is True


def test_console_handler_debug_mode() -> None:
    """Debug mode forces DEBUG and drops the prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True)
    assert handler.level == logging.DEBUG
    assert not handler.filters


# ---------------------------------------------------------------------------
# log_startup
# ---------------------------------------------------------------------------


def test_log_startup_summary_and_diagnostics(caplog, monkeypatch) -> None:
    """One INFO summary line and DEBUG diagnostics are emitted."""
    monkeypatch.setenv(CACHE_STORE_ENV, "locked")
    logger = logging.getLogger("dashkit.test_startup")
    with caplog.at_level(logging.DEBUG, logger="dashkit.test_startup"):
        log_startup(
            logger,
            app_version="1.2.3",
            level=logging.WARNING,
            handlers=[logging.NullHandler()],
            logger_levels={"click_extra": logging.WARNING},
        )
    messages = [r.getMessage() for r in caplog.records]
    assert "dashkit 1.2.3 (console=WARNING)" in messages
    assert "Handlers: ['NullHandler']" in messages
    assert "Default memoize cache: locked (DASHKIT_MEMOIZE_CACHE='locked')" in messages
    assert "Per-logger overrides: {'click_extra': 'WARNING'}" in messages
