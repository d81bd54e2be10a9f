"""Pydantic models for NPS feedback API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class NPSSubmitRequest(BaseModel):
    """Rated survey submission."""

    rating: int = Field(..., ge=0, le=10, description="Score from 0 to 10")
    comment: Optional[str] = Field(None, max_length=5000, description="Optional user comment")


class NPSAcceptedResponse(BaseModel):
    """Acknowledgement; delivery happens in the background."""

    status: str = "accepted"
