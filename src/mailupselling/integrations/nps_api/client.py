"""HTTP client for the NPS feedback endpoints."""

from __future__ import annotations

from typing import Optional

import httpx

from mailupselling.capabilities.nps.models import NPSFeedbackBody
from mailupselling.config.settings import Settings
from mailupselling.integrations.exceptions import IntegrationError
from mailupselling.upselling_logging.service_logging import get_logger

logger = get_logger(__name__)


class NPSFeedbackApiError(IntegrationError):
    """Transport failure or non-success response from the feedback API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error=original_error)
        self.status_code = status_code


class NPSFeedbackApiClient:
    """Remote data source posting feedback to the submit and skip endpoints."""

    def __init__(
        self,
        base_url: str,
        submit_path: str,
        skip_path: str,
        timeout: float = 30.0,
        user_header: str = "x-pm-uid",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.submit_path = submit_path
        self.skip_path = skip_path
        self.timeout = timeout
        self.user_header = user_header
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> "NPSFeedbackApiClient":
        return cls(
            base_url=settings.nps_api_base_url,
            submit_path=settings.nps_submit_path,
            skip_path=settings.nps_skip_path,
            timeout=settings.nps_api_timeout,
            user_header=settings.nps_user_header,
            transport=transport,
        )

    async def submit(self, user_id: str, body: NPSFeedbackBody) -> None:
        await self._post(self.submit_path, user_id, body)

    async def skip(self, user_id: str, body: NPSFeedbackBody) -> None:
        await self._post(self.skip_path, user_id, body)

    async def _post(self, path: str, user_id: str, body: NPSFeedbackBody) -> None:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    path,
                    json=body.to_wire(),
                    headers={self.user_header: user_id},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise NPSFeedbackApiError(
                f"Feedback API returned {status_code} for {path}",
                status_code=status_code,
                original_error=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise NPSFeedbackApiError(
                f"Feedback API request to {path} failed: {exc}",
                original_error=exc,
            ) from exc

        logger.debug(
            "nps_api_request_ok",
            action="nps_api_request_ok",
            path=path,
            status_code=response.status_code,
        )


__all__ = ["NPSFeedbackApiClient", "NPSFeedbackApiError"]
