"""Structured logging helpers.

The client never touches the host's structlog or stdlib logging setup. Each
client gets its own logger whose level only depends on ``ClientSettings.debug``.
"""

from __future__ import annotations

import logging

import structlog


def build_logger(debug: bool = False, **initial_values):
    """Return a JSON logger that drops debug events unless ``debug`` is set."""

    level = logging.DEBUG if debug else logging.WARNING
    return structlog.wrap_logger(
        structlog.PrintLogger(),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_name="algoliasearch",
        **initial_values,
    )


__all__ = ["build_logger"]
