"""Integration-level exceptions."""

from __future__ import annotations

from mailupselling.core.exceptions import MailUpsellingException


class IntegrationError(MailUpsellingException):
    """Raised when an integration (feedback API, Redis, etc.) fails."""

    pass


__all__ = ["IntegrationError"]
