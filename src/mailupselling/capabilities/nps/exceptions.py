"""NPS feedback exceptions."""

from __future__ import annotations

from mailupselling.core.exceptions import MailUpsellingException


class NPSFeedbackError(MailUpsellingException):
    """Base class for NPS feedback failures."""

    pass


class InvalidJobParamsError(NPSFeedbackError):
    """Raised when stored job parameters cannot be decoded."""

    pass


class NPSFeedbackJobFailed(NPSFeedbackError):
    """Raised from the RQ entrypoint so the queue's retry policy applies."""

    pass


__all__ = ["InvalidJobParamsError", "NPSFeedbackError", "NPSFeedbackJobFailed"]
