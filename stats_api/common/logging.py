"""Logging setup for the stats service (structlog).

Console output for local runs, one JSON object per line when
``STATS_API_LOG_JSON`` is set, both written to stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_structlog(level: int = logging.INFO, *, json_logs: bool = False) -> None:
    """Configure structlog once per application build."""
    renderer: structlog.types.Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
        tracebacks: list[structlog.types.Processor] = [structlog.processors.dict_tracebacks]
    else:
        renderer = structlog.dev.ConsoleRenderer()
        tracebacks = []

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            *tracebacks,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        # create_app may run more than once per process (tests), each time with its own level
        cache_logger_on_first_use=False,
    )
