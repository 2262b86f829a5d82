"""Integration test fixtures.

The relay app runs in-process. Agent endpoints are replaced with an
httpx.MockTransport through the get_agent_transport dependency, so no
network access is needed.
"""

import json
from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from startup_validator.api.dependencies import get_agent_transport, get_settings
from startup_validator.main import app


class AgentStub:
    """Records agent requests and answers them with a configurable handler."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: (
            httpx.Response(200, json={"response": "{}"})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    def requests_to(self, host: str) -> list[httpx.Request]:
        return [request for request in self.requests if request.url.host == host]


@pytest.fixture
def agent_stub() -> AgentStub:
    return AgentStub()


@pytest.fixture
def relay_app(test_settings, agent_stub):
    """The relay app wired to test settings and the agent stub."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_agent_transport] = lambda: httpx.MockTransport(agent_stub)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def api_client(relay_app) -> TestClient:
    """TestClient for the relay app."""
    return TestClient(relay_app)
