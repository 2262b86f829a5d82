"""
Unit tests for AgentClient.

The hosted agent is replaced by an httpx.MockTransport.
"""

import json

import httpx
import pytest

from startup_validator.models.input_models import AgentPayload
from startup_validator.upstream.agent_client import AgentClient
from startup_validator.upstream.exceptions import (
    AgentConnectionError,
    AgentHTTPError,
    AgentNotConfiguredError,
    AgentTimeoutError,
)

PAYLOAD = AgentPayload(
    agent_id="agent-primary",
    session_id="session_1767225600000_abcdefghi",
    message="Name: Ada\nEmail: ada@example.com\nStartup Idea: ...",
)


def primary_client(test_settings, handler) -> AgentClient:
    return AgentClient.primary_from_settings(
        test_settings, transport=httpx.MockTransport(handler)
    )


class TestFromSettings:
    def test_primary_requires_api_key(self, test_settings):
        test_settings.LYZR_API_KEY = None

        with pytest.raises(AgentNotConfiguredError, match="LYZR_API_KEY not configured"):
            AgentClient.primary_from_settings(test_settings)

    def test_primary_requires_agent_id(self, test_settings):
        test_settings.LYZR_AGENT_ID = ""

        with pytest.raises(AgentNotConfiguredError, match="LYZR_AGENT_ID not configured"):
            AgentClient.primary_from_settings(test_settings)

    def test_secondary_needs_all_three_settings(self, test_settings):
        test_settings.SECONDARY_API_URL = None

        assert AgentClient.secondary_from_settings(test_settings) is None

    def test_secondary_configured(self, test_settings):
        client = AgentClient.secondary_from_settings(test_settings)

        assert client is not None
        assert client.endpoint == "https://secondary.test/v1/chat"
        assert client.agent_id == "agent-secondary"
        assert client.label == "Secondary API"


class TestSend:
    """Test one agent call."""

    @pytest.mark.asyncio
    async def test_request_shape(self, test_settings):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"response": "ok"})

        async with primary_client(test_settings, handler) as client:
            body = await client.send(PAYLOAD)

        assert json.loads(body) == {"response": "ok"}
        request = seen[0]
        assert str(request.url) == "https://agent.test/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer test-primary-key"
        assert request.headers["X-API-Key"] == "test-primary-key"
        assert json.loads(request.content) == PAYLOAD.model_dump()

    @pytest.mark.asyncio
    async def test_plain_text_reply_is_returned(self, test_settings):
        def handler(request):
            return httpx.Response(200, text="Strong idea.")

        async with primary_client(test_settings, handler) as client:
            assert await client.send(PAYLOAD) == "Strong idea."

    @pytest.mark.asyncio
    async def test_http_error_carries_status_and_body(self, test_settings):
        def handler(request):
            return httpx.Response(429, text="rate limit exceeded")

        async with primary_client(test_settings, handler) as client:
            with pytest.raises(AgentHTTPError) as exc_info:
                await client.send(PAYLOAD)

        assert exc_info.value.status_code == 429
        assert exc_info.value.body == "rate limit exceeded"
        assert exc_info.value.message == "Lyzr API Error (429): rate limit exceeded"

    @pytest.mark.asyncio
    async def test_timeout(self, test_settings):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with primary_client(test_settings, handler) as client:
            with pytest.raises(AgentTimeoutError):
                await client.send(PAYLOAD)

    @pytest.mark.asyncio
    async def test_connection_error(self, test_settings):
        def handler(request):
            raise httpx.ConnectError("Name or service not known", request=request)

        async with primary_client(test_settings, handler) as client:
            with pytest.raises(AgentConnectionError) as exc_info:
                await client.send(PAYLOAD)

        assert not isinstance(exc_info.value, AgentTimeoutError)
        assert exc_info.value.details["error_type"] == "ConnectError"

    def test_repr(self, test_settings):
        client = AgentClient.primary_from_settings(test_settings)

        assert "primary" in repr(client)
        assert "test-primary-key" not in repr(client)
