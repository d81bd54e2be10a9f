"""RQ worker entrypoint for NPS feedback jobs."""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Dict

from rq import get_current_job

from mailupselling.capabilities.nps.exceptions import NPSFeedbackJobFailed
from mailupselling.capabilities.nps.jobs.params import Keys, decode_params
from mailupselling.capabilities.nps.protocols import NPSFeedbackRemoteDataSource
from mailupselling.config.settings import load_settings
from mailupselling.integrations.exceptions import IntegrationError
from mailupselling.integrations.nps_api.client import NPSFeedbackApiClient
from mailupselling.upselling_logging.context import set_correlation_id
from mailupselling.upselling_logging.service_logging import get_logger

logger = get_logger(__name__)


class WorkResult(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class NPSFeedbackWorker:
    """Deliver one stored feedback event to the skip or submit endpoint."""

    def __init__(self, data_source: NPSFeedbackRemoteDataSource) -> None:
        self.data_source = data_source

    async def do_work(self, params: Dict[str, Any]) -> WorkResult:
        user_id, skipped, body = decode_params(params)
        send = self.data_source.skip if skipped else self.data_source.submit

        try:
            await send(user_id, body)
        except IntegrationError as exc:
            logger.error(
                "nps_feedback_api_error",
                action="nps_feedback_api_error",
                user_id=user_id,
                skipped=skipped,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return WorkResult.FAILURE

        logger.info(
            "nps_feedback_delivered",
            action="nps_feedback_delivered",
            user_id=user_id,
            skipped=skipped,
            has_rating=body.has_rating,
        )
        return WorkResult.SUCCESS


def process_nps_feedback_job(params: Dict[str, Any]) -> str:
    """Background job handler for NPS feedback delivery."""
    job = get_current_job()
    set_correlation_id(job.id if job else None)
    logger.info(
        "nps_worker_start",
        action="nps_worker_start",
        skipped=params.get(Keys.SKIPPED),
    )
    settings = load_settings()
    worker = NPSFeedbackWorker(NPSFeedbackApiClient.from_settings(settings))

    result = asyncio.run(worker.do_work(params))
    if result is WorkResult.FAILURE:
        raise NPSFeedbackJobFailed("NPS feedback delivery failed; retry scheduled by queue")
    return result.value


__all__ = ["NPSFeedbackWorker", "WorkResult", "process_nps_feedback_job"]
