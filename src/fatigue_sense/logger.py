"""Structured logging configuration using *structlog*.

Log lines go to stderr so that ``fatigue-sense analyze`` can print its JSON
result on stdout untouched.
"""

from __future__ import annotations

import logging
import sys

import structlog

from fatigue_sense.config import get_settings


def setup_logging(level: str | None = None) -> None:
    """Configure *structlog* processors and the stderr sink.

    *level* defaults to ``FATIGUE_SENSE_LOG_LEVEL``.  Call once at startup;
    interactive terminals get the console renderer, everything else one JSON
    object per line with tracebacks rendered into ``exception``.
    """
    level = level or get_settings().log_level
    interactive = sys.stderr.isatty()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            *([] if interactive else [structlog.processors.format_exc_info]),
            structlog.dev.ConsoleRenderer() if interactive else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
