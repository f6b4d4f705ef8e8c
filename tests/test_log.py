"""Tests for diagnostic logging setup."""

import io
import logging

import pytest

from epochview.log import OFF, TRACE, configure, level_for, level_named


def test_verbosity_levels():
    """Test the level for each -v count."""
    assert level_for() == logging.ERROR
    assert level_for(1) == logging.WARNING
    assert level_for(2) == logging.INFO
    assert level_for(3) == logging.DEBUG
    assert level_for(4) == TRACE
    assert level_for(9) == TRACE


def test_quiet_turns_diagnostics_off():
    """Test that quiet wins over verbosity."""
    assert level_for(quiet=True) == OFF
    assert level_for(3, quiet=True) == OFF


def test_trace_level_is_named():
    """Test that TRACE is registered with logging."""
    assert logging.getLevelName(TRACE) == "TRACE"


def test_level_named():
    """Test level lookup by name."""
    assert level_named("debug") == logging.DEBUG
    assert level_named("WARN") == logging.WARNING
    assert level_named("trace") == TRACE
    assert level_named("off") == OFF


def test_level_named_rejects_unknown():
    """Test that unknown level names raise."""
    with pytest.raises(ValueError, match="Invalid log level 'loud'"):
        level_named("loud")


def test_configure_routes_package_messages():
    """Test that configured output uses the package format."""
    stream = io.StringIO()
    configure(logging.INFO, stream)

    logging.getLogger("epochview.reporting").info("decoded %s", "1 s")
    logging.getLogger("epochview.reporting").debug("hidden")

    assert stream.getvalue() == "INFO epochview.reporting: decoded 1 s\n"


def test_configure_replaces_previous_handler():
    """Test that configuring twice keeps a single handler."""
    first, second = io.StringIO(), io.StringIO()
    configure(logging.ERROR, first)
    configure(logging.ERROR, second)

    logging.getLogger("epochview").error("boom")

    assert first.getvalue() == ""
    assert second.getvalue() == "ERROR epochview: boom\n"
