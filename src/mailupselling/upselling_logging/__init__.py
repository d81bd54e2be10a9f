"""Structured logging helpers."""

from .context import get_correlation_id, set_correlation_id
from .service_logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
]
