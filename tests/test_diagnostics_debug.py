"""Tests for debug mode functionality."""

import logging
from io import StringIO

from graphkit.diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    trace,
)
from graphkit.logging import configure_logging, get_logger


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        assert not is_debug_enabled()

        set_debug_enabled(True)
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        with debug_context(True):
            with debug_context(False):
                assert not is_debug_enabled()
            assert is_debug_enabled()
        assert not is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_trace_only_emits_in_debug_mode() -> None:
    """Test that trace lines need both debug mode and a DEBUG logger level."""
    logger = get_logger("test_trace")
    stream = StringIO()
    original = is_debug_enabled()

    try:
        configure_logging(level=logging.DEBUG, stream=stream)

        set_debug_enabled(False)
        trace(logger, "hidden %s", "line")
        assert "hidden" not in stream.getvalue()

        with debug_context(True):
            trace(logger, "shown %s", "line")
        assert "shown line" in stream.getvalue()
    finally:
        set_debug_enabled(original)
        configure_logging(level=logging.WARNING)
