"""Queue-backed NPS feedback repository."""

from __future__ import annotations

from collections.abc import Set
from typing import Optional

from mailupselling.capabilities.nps.jobs.params import encode_params
from mailupselling.capabilities.nps.jobs.worker import process_nps_feedback_job
from mailupselling.capabilities.nps.models import InstalledProtonApp
from mailupselling.core.enqueuer import Enqueuer


class QueueNPSFeedbackRepository:
    """Persist each feedback event as one durable RQ job."""

    def __init__(self, enqueuer: Enqueuer) -> None:
        self.enqueuer = enqueuer

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
        params = encode_params(
            user_id=user_id,
            rating_value=rating_value,
            comment=comment,
            user_tier=user_tier,
            user_country=user_country,
            days_from_signup=days_from_signup,
            skipped=skipped,
            installed_apps=installed_apps,
        )
        self.enqueuer.enqueue(process_nps_feedback_job, user_id, params)


__all__ = ["QueueNPSFeedbackRepository"]
