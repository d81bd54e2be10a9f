"""Net Promoter Score feedback capability."""

from mailupselling.capabilities.nps.models import (
    DEVICE_OS,
    NO_RATING,
    AccountAge,
    InstalledProtonApp,
    NPSFeedbackBody,
    PrimaryUser,
    SubscriptionName,
)
from mailupselling.capabilities.nps.account import AccountAgeCalculator
from mailupselling.capabilities.nps.enqueue import EnqueueNewNPSFeedback

__all__ = [
    "AccountAge",
    "AccountAgeCalculator",
    "DEVICE_OS",
    "EnqueueNewNPSFeedback",
    "InstalledProtonApp",
    "NO_RATING",
    "NPSFeedbackBody",
    "PrimaryUser",
    "SubscriptionName",
]
