"""Protocol definitions for the collaborators NPS feedback depends on."""

from __future__ import annotations

from collections.abc import Set
from typing import Optional, Protocol, runtime_checkable

from mailupselling.capabilities.nps.models import (
    AccountAge,
    InstalledProtonApp,
    NPSFeedbackBody,
    PrimaryUser,
    SubscriptionName,
)


@runtime_checkable
class PrimaryUserProvider(Protocol):
    """Resolve the signed-in user, if any."""

    async def __call__(self) -> Optional[PrimaryUser]:
        ...


@runtime_checkable
class AccountAgeProvider(Protocol):
    def __call__(self, user: PrimaryUser) -> AccountAge:
        ...


@runtime_checkable
class SubscriptionNameProvider(Protocol):
    """Look up the user's plan. May raise on lookup failure."""

    async def __call__(self, user_id: str) -> SubscriptionName:
        ...


@runtime_checkable
class AppLocaleProvider(Protocol):
    """Return the display name of the app locale, e.g. ``English``."""

    def __call__(self) -> str:
        ...


@runtime_checkable
class TimeZoneProvider(Protocol):
    """Return the display name of the default timezone, e.g. ``Greenwich Mean Time``."""

    def __call__(self) -> str:
        ...


@runtime_checkable
class InstalledAppsProvider(Protocol):
    def __call__(self) -> Set[InstalledProtonApp]:
        ...


@runtime_checkable
class NPSFeedbackRepository(Protocol):
    """Hand feedback to durable background delivery."""

    def enqueue(
        self,
        *,
        user_id: str,
        rating_value: Optional[int],
        comment: Optional[str],
        user_tier: str,
        user_country: str,
        days_from_signup: int,
        skipped: bool,
        installed_apps: Set[InstalledProtonApp],
    ) -> None:
        ...


@runtime_checkable
class NPSFeedbackRemoteDataSource(Protocol):
    """Remote feedback endpoints. Both raise IntegrationError on failure."""

    async def submit(self, user_id: str, body: NPSFeedbackBody) -> None:
        ...

    async def skip(self, user_id: str, body: NPSFeedbackBody) -> None:
        ...


__all__ = [
    "AccountAgeProvider",
    "AppLocaleProvider",
    "InstalledAppsProvider",
    "NPSFeedbackRemoteDataSource",
    "NPSFeedbackRepository",
    "PrimaryUserProvider",
    "SubscriptionNameProvider",
    "TimeZoneProvider",
]
