"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
import pytest
from pathlib import Path
from typing import Dict, Any

from startup_validator.config import Settings
from startup_validator.models.input_models import RelayRequest, SubmissionRequest


SAMPLE_IDEA = (
    "A marketplace that connects small farms directly with restaurants, "
    "handling logistics and weekly invoicing."
)


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with both agents configured and no real endpoints.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.SECONDARY_API_URL = None
    """
    return Settings(
        # === Application ===
        APP_NAME="Startup Idea Validator (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Primary agent ===
        LYZR_API_KEY="test-primary-key",
        LYZR_AGENT_ID="agent-primary",
        LYZR_API_ENDPOINT="https://agent.test/v1/chat/completions",
        UPSTREAM_TIMEOUT=5.0,

        # === Secondary agent ===
        SECONDARY_API_KEY="test-secondary-key",
        SECONDARY_AGENT_ID="agent-secondary",
        SECONDARY_API_URL="https://secondary.test/v1/chat",

        # === Client ===
        VALIDATION_API_BASE_URL="http://testserver",
        CLIENT_TIMEOUT=5.0,
        SECONDARY_VALIDATION_ENABLED=True,

        # === Retry ===
        MAX_RETRIES=2,
        RETRY_BASE_DELAY=0.0,  # No real waiting in tests
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_report_data(fixtures_dir: Path) -> Dict[str, Any]:
    """Load the sample agent report fixture as dict."""
    with open(fixtures_dir / "sample_report.json") as f:
        return json.load(f)


@pytest.fixture
def sample_report_text(sample_report_data: Dict[str, Any]) -> str:
    """Sample agent report serialized the way the agent returns it."""
    return json.dumps(sample_report_data)


@pytest.fixture
def sample_submission() -> SubmissionRequest:
    """A submission that passes local form validation."""
    return SubmissionRequest(
        name="Ada Lovelace",
        email="ada@example.com",
        idea=SAMPLE_IDEA,
    )


@pytest.fixture
def create_relay_request():
    """Factory fixture to create RelayRequest with custom values.

    Usage:
        def test_something(create_relay_request):
            request = create_relay_request(session_id="session_1_abc")
    """
    def _create(
        name: str = "Ada Lovelace",
        email_id: str = "ada@example.com",
        idea: str = SAMPLE_IDEA,
        session_id: str | None = None,
    ) -> RelayRequest:
        return RelayRequest(
            name=name,
            email_id=email_id,
            idea=idea,
            session_id=session_id,
        )

    return _create
