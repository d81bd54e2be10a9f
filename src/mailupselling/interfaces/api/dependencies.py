"""FastAPI dependency providers."""

from __future__ import annotations

from fastapi import Request

from mailupselling.capabilities.nps.enqueue import EnqueueNewNPSFeedback


def get_nps_feedback(request: Request) -> EnqueueNewNPSFeedback:
    """Return the request builder wired into the running app."""
    return request.app.state.nps_feedback
