"""Tests for executing queued NPS feedback jobs."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from structlog.testing import capture_logs

from mailupselling.capabilities.nps.exceptions import NPSFeedbackJobFailed
from mailupselling.capabilities.nps.jobs.params import encode_params
from mailupselling.capabilities.nps.jobs.worker import (
    NPSFeedbackWorker,
    WorkResult,
    process_nps_feedback_job,
)
from mailupselling.capabilities.nps.models import InstalledProtonApp
from mailupselling.integrations.nps_api.client import NPSFeedbackApiError


def _params(skipped: bool) -> dict:
    return encode_params(
        user_id="user-1",
        rating_value=None if skipped else 7,
        comment=None if skipped else "Solid",
        user_tier="free",
        user_country="English-Greenwich Mean Time",
        days_from_signup=3,
        skipped=skipped,
        installed_apps={InstalledProtonApp.WALLET},
    )


@pytest.fixture
def data_source() -> MagicMock:
    source = MagicMock()
    source.submit = AsyncMock(return_value=None)
    source.skip = AsyncMock(return_value=None)
    return source


@pytest.mark.asyncio
async def test_skipped_job_calls_skip(data_source):
    result = await NPSFeedbackWorker(data_source).do_work(_params(skipped=True))

    assert result is WorkResult.SUCCESS
    data_source.submit.assert_not_called()
    user_id, body = data_source.skip.call_args.args
    assert user_id == "user-1"
    assert body.rating_value == -1
    assert body.comment is None
    assert body.wallet_installed is True


@pytest.mark.asyncio
async def test_submitted_job_calls_submit(data_source):
    result = await NPSFeedbackWorker(data_source).do_work(_params(skipped=False))

    assert result is WorkResult.SUCCESS
    data_source.skip.assert_not_called()
    _, body = data_source.submit.call_args.args
    assert body.rating_value == 7
    assert body.comment == "Solid"


@pytest.mark.asyncio
async def test_api_error_yields_failure(data_source):
    data_source.submit.side_effect = NPSFeedbackApiError("boom", status_code=503)

    with capture_logs() as logs:
        result = await NPSFeedbackWorker(data_source).do_work(_params(skipped=False))

    assert result is WorkResult.FAILURE
    assert any(
        entry["event"] == "nps_feedback_api_error" and entry["log_level"] == "error"
        for entry in logs
    )


def test_job_entrypoint_raises_on_failure_so_queue_retries(data_source):
    data_source.skip.side_effect = NPSFeedbackApiError("timeout")

    with patch(
        "mailupselling.capabilities.nps.jobs.worker.NPSFeedbackApiClient.from_settings",
        return_value=data_source,
    ):
        with pytest.raises(NPSFeedbackJobFailed):
            process_nps_feedback_job(_params(skipped=True))


def test_job_entrypoint_returns_success(data_source):
    with patch(
        "mailupselling.capabilities.nps.jobs.worker.NPSFeedbackApiClient.from_settings",
        return_value=data_source,
    ):
        assert process_nps_feedback_job(_params(skipped=False)) == "SUCCESS"

    data_source.submit.assert_awaited_once()
