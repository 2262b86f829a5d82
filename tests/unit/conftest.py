"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without a running relay service.
"""

import pytest
from unittest.mock import AsyncMock, Mock

from startup_validator.client.api_client import ValidationApiClient
from startup_validator.retry.policy import RetryPolicy


@pytest.fixture
def mock_sleep():
    """Recording replacement for asyncio.sleep."""
    return AsyncMock(return_value=None)


@pytest.fixture
def instant_retry_policy(mock_sleep) -> RetryPolicy:
    """Default retry limits without real waiting."""
    return RetryPolicy(max_retries=2, base_delay=1.0, sleep=mock_sleep)


@pytest.fixture
def mock_api_client():
    """Mock ValidationApiClient for orchestrator tests.

    validate returns an empty JSON object by default; set side_effect or
    return_value per test.
    """
    mock = Mock(spec=ValidationApiClient)
    mock.secondary_enabled = True
    mock.validate = AsyncMock(return_value="{}")
    mock.secondary_validate = AsyncMock(return_value=200)
    mock.check_status = AsyncMock()
    return mock
