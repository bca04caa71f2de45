"""structlog setup for the astroschema CLI.

Library modules only call ``structlog.get_logger(__name__)``; configuring
output is left to entry points.
"""

from __future__ import annotations

import logging
import sys

import structlog

from astroschema.config import is_debug_enabled

_configured = False


def configure_logging(debug: bool | None = None) -> None:
    """Configure structlog to render to stderr.

    Args:
        debug: Force DEBUG level on/off. None = read ASTROSCHEMA_DEBUG.
    """
    global _configured
    if _configured:
        return

    if debug is None:
        debug = is_debug_enabled()
    level = logging.DEBUG if debug else logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    _configured = True
