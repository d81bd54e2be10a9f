"""Assemble NPS feedback context and hand it to background delivery."""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from mailupselling.capabilities.nps.locale import display_with_timezone
from mailupselling.capabilities.nps.protocols import (
    AccountAgeProvider,
    AppLocaleProvider,
    InstalledAppsProvider,
    NPSFeedbackRepository,
    PrimaryUserProvider,
    SubscriptionNameProvider,
    TimeZoneProvider,
)
from mailupselling.core.scope import SupervisedScope
from mailupselling.upselling_logging.service_logging import get_logger

logger = get_logger(__name__)


class EnqueueNewNPSFeedback:
    """Record a submitted or skipped NPS survey for the primary user.

    ``skip`` and ``submit`` return immediately; the context lookups and the
    enqueue run on ``scope``. The returned task is only for callers that want
    to wait, e.g. tests or graceful shutdown.
    """

    def __init__(
        self,
        get_account_age_in_days: AccountAgeProvider,
        get_primary_user: PrimaryUserProvider,
        get_app_locale: AppLocaleProvider,
        get_default_timezone: TimeZoneProvider,
        get_subscription_name: SubscriptionNameProvider,
        scope: SupervisedScope,
        repo: NPSFeedbackRepository,
        get_installed_proton_apps: InstalledAppsProvider,
    ) -> None:
        self.get_account_age_in_days = get_account_age_in_days
        self.get_primary_user = get_primary_user
        self.get_app_locale = get_app_locale
        self.get_default_timezone = get_default_timezone
        self.get_subscription_name = get_subscription_name
        self.scope = scope
        self.repo = repo
        self.get_installed_proton_apps = get_installed_proton_apps

    def skip(self) -> asyncio.Task[Any]:
        return self.scope.launch(self.submit_or_skip(None, None, skipped=True))

    def submit(self, rating_value: int, comment: Optional[str]) -> asyncio.Task[Any]:
        return self.scope.launch(
            self.submit_or_skip(rating_value, comment, skipped=False)
        )

    async def submit_or_skip(
        self,
        rating_value: Optional[int],
        comment: Optional[str],
        skipped: bool,
    ) -> None:
        user = await self.get_primary_user()
        if user is None:
            logger.debug("nps_feedback_no_primary_user", action="nps_feedback_dropped")
            return

        user_tier = await self._subscription_name(user.user_id)
        user_country = display_with_timezone(
            self.get_app_locale(), self.get_default_timezone()
        )
        account_age = self.get_account_age_in_days(user)

        # Redis round trip; keep it off the event loop.
        await asyncio.to_thread(
            self.repo.enqueue,
            user_id=user.user_id,
            rating_value=rating_value,
            comment=comment,
            user_tier=user_tier,
            user_country=user_country,
            days_from_signup=account_age.days,
            skipped=skipped,
            installed_apps=self.get_installed_proton_apps(),
        )

    async def _subscription_name(self, user_id: str) -> str:
        """Best effort; an unknown tier is reported as empty."""
        try:
            subscription = await self.get_subscription_name(user_id)
        except Exception as exc:
            logger.warning(
                "nps_subscription_lookup_failed",
                action="nps_subscription_lookup_failed",
                user_id=user_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return ""
        return subscription.value if subscription else ""


__all__ = ["EnqueueNewNPSFeedback"]
