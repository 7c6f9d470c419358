"""Structured JSON logging for bridge events."""

from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a structlog logger for a bridge module.

    Events are rendered as one JSON object per line with an ISO
    timestamp and the level name.

    Args:
        name: Module name, usually __name__.
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)
