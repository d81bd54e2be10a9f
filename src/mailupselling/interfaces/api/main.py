"""FastAPI entry point for the NPS feedback API."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mailupselling.capabilities.nps.enqueue import EnqueueNewNPSFeedback
from mailupselling.config.settings import load_settings
from mailupselling.core.validation import ValidationError, validate_rq_workers
from mailupselling.interfaces.api.api.nps.router import nps_router
from mailupselling.upselling_logging.service_logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(feedback: EnqueueNewNPSFeedback, startup_checks: bool = True) -> FastAPI:
    """Build the API around a wired request builder.

    Account, subscription and device lookups are supplied by the host through
    ``feedback``'s collaborators. ``startup_checks`` configures logging and
    checks that a worker is listening on the feedback queue.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if startup_checks:
            settings = load_settings()
            configure_logging(settings.log_level, use_json=settings.log_json)
            try:
                await asyncio.to_thread(
                    validate_rq_workers, settings.redis_url, settings.nps_queue_name
                )
            except ValidationError as exc:
                # Jobs wait in Redis until a worker starts.
                logger.warning(
                    "nps_queue_without_workers",
                    action="nps_api_startup",
                    queue=settings.nps_queue_name,
                    error=str(exc),
                )
        logger.info("nps_api_started", action="nps_api_started")
        yield
        await feedback.scope.join()
        logger.info("nps_api_stopped", action="nps_api_stopped")

    app = FastAPI(title="Mail Upselling NPS Feedback", version="0.1.0", lifespan=lifespan)
    app.state.nps_feedback = feedback
    app.include_router(nps_router)
    return app


__all__ = ["create_app"]
