"""Shared fixtures for NPS feedback tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from mailupselling.capabilities.nps.enqueue import EnqueueNewNPSFeedback
from mailupselling.capabilities.nps.models import AccountAge, PrimaryUser, SubscriptionName
from mailupselling.core.scope import SupervisedScope

PRIMARY_USER = PrimaryUser(user_id="user-primary", create_time=0)


@pytest.fixture
def primary_user() -> PrimaryUser:
    return PRIMARY_USER


@pytest.fixture
def repo() -> MagicMock:
    return MagicMock()


@pytest.fixture
def collaborators(repo: MagicMock) -> dict:
    return {
        "get_account_age_in_days": MagicMock(return_value=AccountAge(7)),
        "get_primary_user": AsyncMock(return_value=PRIMARY_USER),
        "get_app_locale": MagicMock(return_value="English"),
        "get_default_timezone": MagicMock(return_value="Greenwich Mean Time"),
        "get_subscription_name": AsyncMock(return_value=SubscriptionName("free")),
        "scope": SupervisedScope(name="test"),
        "repo": repo,
        "get_installed_proton_apps": MagicMock(return_value=set()),
    }


@pytest.fixture
def sut(collaborators: dict) -> EnqueueNewNPSFeedback:
    return EnqueueNewNPSFeedback(**collaborators)
