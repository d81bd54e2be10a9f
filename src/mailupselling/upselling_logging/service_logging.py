"""Global logging configuration for the feedback service and its workers.

Provides:
1. structlog-based event logging with level filtering
2. Correlation ID injection from context
3. Global logger factory function

Events are logged by snake_case name with keyword context, e.g.::

    logger.info("nps_feedback_queued", action="nps_feedback_queued", job_id=job_id)
"""

from __future__ import annotations

import logging
import sys

import structlog

_LEVEL_HIERARCHY = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_VALID_LEVELS = frozenset(_LEVEL_HIERARCHY.keys())


def _normalize_level(level: str) -> str:
    """Normalize and validate level name."""
    normalized = level.upper()
    if normalized not in _VALID_LEVELS:
        valid = ", ".join(sorted(_VALID_LEVELS))
        raise ValueError(f"Invalid log level '{level}'. Valid levels: {valid}")
    return normalized


def configure_logging(log_level: str = "INFO", use_json: bool = False) -> None:
    """Initialize global logging configuration.

    Call once at process startup (API lifespan, worker entrypoint).

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_json: Render one JSON object per line instead of console output
    """
    level = _LEVEL_HIERARCHY[_normalize_level(log_level)]

    # RQ and httpx log through the standard library.
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )

    renderer: structlog.typing.Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a logger bound to the calling module.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("nps_worker_start", action="nps_worker_start")
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


__all__ = ["configure_logging", "get_logger"]
