"""Feedback API integration."""

from .client import NPSFeedbackApiClient, NPSFeedbackApiError

__all__ = ["NPSFeedbackApiClient", "NPSFeedbackApiError"]
