"""Structured logging setup for sclc.

Internal events are emitted through structlog; user-facing diagnostics are
printed by sclc-cli and never go through the logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from sclc_core.settings import get_log_level


def configure_logging(
    *,
    log_level: str | None = None,
    json_format: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structured logging for sclc.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to SCLC_LOG_LEVEL or WARNING.
        json_format: If True, output JSON format. If False, output human-readable.
        stream: Destination for log lines. Defaults to the current sys.stderr.

    Example:
        >>> configure_logging(log_level="DEBUG", json_format=False)
    """
    level_name = (log_level or get_log_level()).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
