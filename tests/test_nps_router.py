"""Tests for the NPS feedback API routes."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from mailupselling.core.scope import SupervisedScope
from mailupselling.interfaces.api.main import create_app


@pytest.fixture
def feedback() -> MagicMock:
    mock = MagicMock()
    mock.scope = SupervisedScope(name="api-test")
    return mock


@pytest.fixture
def client(feedback):
    with TestClient(create_app(feedback, startup_checks=False)) as test_client:
        yield test_client


def test_submit_is_accepted(client, feedback):
    response = client.post("/api/v1/nps/submit", json={"rating": 9, "comment": "Love it"})

    assert response.status_code == 202
    assert response.json() == {"status": "accepted"}
    feedback.submit.assert_called_once_with(9, "Love it")


def test_submit_without_comment(client, feedback):
    response = client.post("/api/v1/nps/submit", json={"rating": 0})

    assert response.status_code == 202
    feedback.submit.assert_called_once_with(0, None)


@pytest.mark.parametrize("rating", [-1, 11])
def test_submit_rejects_out_of_range_rating(client, feedback, rating):
    response = client.post("/api/v1/nps/submit", json={"rating": rating})

    assert response.status_code == 422
    feedback.submit.assert_not_called()


def test_skip_is_accepted(client, feedback):
    response = client.post("/api/v1/nps/skip")

    assert response.status_code == 202
    feedback.skip.assert_called_once_with()


def test_startup_checks_run_worker_validation_off_the_loop(feedback):
    import asyncio

    from mailupselling.core.validation import ValidationError
    from mailupselling.interfaces.api import main as api_main

    calls = []

    def no_workers(redis_url, queue_name):
        try:
            asyncio.get_running_loop()
            calls.append("event-loop")
        except RuntimeError:
            calls.append("thread")
        raise ValidationError("no workers")

    with patch.object(api_main, "configure_logging"), patch.object(
        api_main, "validate_rq_workers", side_effect=no_workers
    ):
        with TestClient(create_app(feedback)) as test_client:
            response = test_client.post("/api/v1/nps/skip")

    assert calls == ["thread"]
    assert response.status_code == 202
