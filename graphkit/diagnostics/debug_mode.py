"""Debug mode management for graphkit.

Debug mode turns on step-by-step tracing inside the graph algorithms (for
example every push, pop and back edge of the cycle analyzer). The traces are
emitted at DEBUG level, so the logger level must also allow them.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterator

_DEBUG_ENV_VAR = "GRAPHKIT_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """
    Return whether graphkit debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    GRAPHKIT_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable graphkit debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode within the context.

    Example
    -------
    >>> with debug_context(True):
    ...     CycleAnalyzer(graph).find_cycles()  # traced
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def trace(logger: logging.Logger, msg: str, *args: Any) -> None:
    """
    Log an algorithm trace line when debug mode is on.

    Arguments are only formatted when the line is actually emitted, so
    callers may pass sets or lists that are expensive to render.
    """
    if _debug_enabled and logger.isEnabledFor(logging.DEBUG):
        logger.debug(msg, *args)
