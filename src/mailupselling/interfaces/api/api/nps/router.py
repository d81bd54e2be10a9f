"""NPS feedback API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from mailupselling.capabilities.nps.enqueue import EnqueueNewNPSFeedback
from mailupselling.interfaces.api.api.nps.models import NPSAcceptedResponse, NPSSubmitRequest
from mailupselling.interfaces.api.config import api_config
from mailupselling.interfaces.api.dependencies import get_nps_feedback

nps_router = APIRouter(
    prefix=api_config.NPS_PREFIX,
    tags=["nps"],
)


@nps_router.post(
    "/submit",
    response_model=NPSAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def submit_nps(
    request: NPSSubmitRequest,
    feedback: EnqueueNewNPSFeedback = Depends(get_nps_feedback),
) -> NPSAcceptedResponse:
    """Record a rated survey for the primary user."""
    feedback.submit(request.rating, request.comment)
    return NPSAcceptedResponse()


@nps_router.post(
    "/skip",
    response_model=NPSAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def skip_nps(
    feedback: EnqueueNewNPSFeedback = Depends(get_nps_feedback),
) -> NPSAcceptedResponse:
    """Record that the primary user dismissed the survey."""
    feedback.skip()
    return NPSAcceptedResponse()
