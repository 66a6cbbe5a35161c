"""Structured logging configuration.

This module configures structlog to emit JSON event lines on stderr.
Importing the library leaves global structlog configuration alone;
only configure_logging, which the CLI calls, installs this setup.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL
from core.errors import ToteConfigError

def configure_logging(level_name: str = DEFAULT_LOG_LEVEL) -> None:
    """Set the minimum level for all schema tote loggers.

    Args:
        level_name: Level name such as ``debug``, ``info`` or ``warning``.

    Raises:
        ToteConfigError: If the level name is unknown.
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ToteConfigError(
            f"Invalid log level '{level_name}'. "
            "Use one of: debug, info, warning, error, critical."
        )
    _configure_structlog(level)


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger; output follows the host application's
        structlog setup until configure_logging is called.
    """
    return structlog.get_logger(name)


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    # resolved per call so redirected stderr streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def _configure_structlog(level: int) -> None:
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
