"""Core utilities shared across capabilities."""

from .exceptions import MailUpsellingException

__all__ = ["MailUpsellingException"]
