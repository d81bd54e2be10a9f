"""Test that concrete adapters implement the collaborator protocols."""

from unittest.mock import MagicMock

from mailupselling.capabilities.nps.account import AccountAgeCalculator
from mailupselling.capabilities.nps.jobs.repository import QueueNPSFeedbackRepository
from mailupselling.capabilities.nps.protocols import (
    AccountAgeProvider,
    NPSFeedbackRemoteDataSource,
    NPSFeedbackRepository,
)
from mailupselling.integrations.nps_api.client import NPSFeedbackApiClient


def test_api_client_implements_remote_data_source():
    assert issubclass(
        NPSFeedbackApiClient,
        NPSFeedbackRemoteDataSource,
    ), "NPSFeedbackApiClient does not implement NPSFeedbackRemoteDataSource protocol"


def test_queue_repository_implements_repository():
    assert isinstance(
        QueueNPSFeedbackRepository(MagicMock()),
        NPSFeedbackRepository,
    ), "QueueNPSFeedbackRepository does not implement NPSFeedbackRepository protocol"


def test_account_age_calculator_implements_provider():
    assert isinstance(AccountAgeCalculator(), AccountAgeProvider)
