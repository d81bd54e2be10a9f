"""Config-specific exceptions."""

from __future__ import annotations

from mailupselling.core.exceptions import MailUpsellingException


class ConfigError(MailUpsellingException):
    """Raised when configuration load, parsing, or validation fails."""

    pass


__all__ = ["ConfigError"]
