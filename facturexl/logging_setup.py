"""Logging configuration — stdlib logging routed through structlog.

Usage:
    from facturexl.logging_setup import configure_logging
    configure_logging()

Library modules only call ``logging.getLogger(__name__)``; the host
application decides when to configure output.
"""

from __future__ import annotations

import logging
import sys

import structlog

from facturexl.config import settings

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog once per process.

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to ``settings.log_level``.
    """
    global _configured

    if _configured:
        return

    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stdout,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    _configured = True
    logging.getLogger(__name__).debug("Logging configured (level=%s)", level_name)


def is_configured() -> bool:
    """Return True once configure_logging() has run."""
    return _configured
