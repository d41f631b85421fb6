"""Structured logging for the curriculum knowledge base.

Logs are JSON lines on stderr so they never mix with the MCP stdio stream.
"""

import logging
import os
import sys
from typing import Optional

import structlog

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog, with the level taken from ``LOG_LEVEL`` by default.

    Called by the entry points. Without an explicit ``level`` a second call
    keeps the existing configuration.
    """
    global _configured
    if _configured and level is None:
        return
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str = "soccer_curriculum_mcp") -> structlog.stdlib.BoundLogger:
    """Return a structured logger; output follows whatever configuration is active."""
    return structlog.get_logger(name)
