"""
Agent client for the hosted AI evaluation service.

Communicates with an agent chat-completions endpoint using httpx AsyncClient.
One call per relay request: retries are the caller's decision, made on the
client side from the status code we pass through.
"""

import time
from typing import Optional

import httpx
import structlog

from startup_validator.config import Settings
from startup_validator.models.input_models import AgentPayload
from startup_validator.upstream.exceptions import (
    AgentConnectionError,
    AgentHTTPError,
    AgentNotConfiguredError,
    AgentTimeoutError,
)

logger = structlog.get_logger(__name__)


class AgentClient:
    """
    Client for one agent endpoint (primary or secondary).

    POST <endpoint> with payload:
    {
        "agent_id": "...",
        "session_id": "session_1767225600000_k3x9a0b2c",
        "message": "Name: ...\\nEmail: ...\\nStartup Idea: ..."
    }

    Headers carry the key both as a bearer token and as X-API-Key, since
    agent providers differ in which one they read.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        agent_id: str,
        timeout: float = 120.0,
        name: str = "primary",
        label: str = "Lyzr API",
        log_preview_chars: int = 500,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize agent client.

        Args:
            endpoint: Full URL of the agent chat endpoint
            api_key: Agent API key
            agent_id: Agent identifier sent in every payload
            timeout: Request timeout in seconds
            name: Label used in logs ("primary" or "secondary")
            label: Prefix of error messages passed back to our caller
            log_preview_chars: How much of the reply body to log
            transport: Optional httpx transport (used by tests)
        """
        self.endpoint = endpoint
        self.api_key = api_key
        self.agent_id = agent_id
        self.timeout = timeout
        self.name = name
        self.label = label
        self.log_preview_chars = log_preview_chars
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def primary_from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AgentClient":
        """
        Build the primary agent client.

        Raises:
            AgentNotConfiguredError: LYZR_API_KEY or LYZR_AGENT_ID is missing
        """
        if not settings.LYZR_API_KEY:
            raise AgentNotConfiguredError("LYZR_API_KEY not configured")
        if not settings.LYZR_AGENT_ID:
            raise AgentNotConfiguredError("LYZR_AGENT_ID not configured")
        return cls(
            endpoint=settings.LYZR_API_ENDPOINT,
            api_key=settings.LYZR_API_KEY,
            agent_id=settings.LYZR_AGENT_ID,
            timeout=settings.UPSTREAM_TIMEOUT,
            name="primary",
            label="Lyzr API",
            log_preview_chars=500,
            transport=transport,
        )

    @classmethod
    def secondary_from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> Optional["AgentClient"]:
        """Build the secondary agent client, or None when it is not configured."""
        if not settings.secondary_configured:
            return None
        return cls(
            endpoint=settings.SECONDARY_API_URL,
            api_key=settings.SECONDARY_API_KEY,
            agent_id=settings.SECONDARY_AGENT_ID,
            timeout=settings.UPSTREAM_TIMEOUT,
            name="secondary",
            label="Secondary API",
            log_preview_chars=200,
            transport=transport,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "X-API-Key": self.api_key,
        }

    async def send(self, payload: AgentPayload) -> str:
        """
        Send one payload to the agent.

        Returns:
            Raw response body text (2xx only)

        Raises:
            AgentTimeoutError: No answer within the timeout
            AgentConnectionError: Network-level failure
            AgentHTTPError: Non-2xx response, with status and body
        """
        start_time = time.time()

        logger.info(
            "Sending request to agent",
            agent=self.name,
            endpoint=self.endpoint,
            agent_id=payload.agent_id,
            session_id=payload.session_id,
        )

        try:
            client = await self._get_client()
            response = await client.post(
                self.endpoint,
                json=payload.model_dump(),
                headers=self._headers(),
            )
        except httpx.TimeoutException as e:
            logger.warning("Agent request timeout", agent=self.name, timeout=self.timeout)
            raise AgentTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"agent": self.name, "timeout": self.timeout},
            ) from e
        except httpx.TransportError as e:
            logger.warning("Agent network error", agent=self.name, error=str(e))
            raise AgentConnectionError(
                f"Network error: {e}",
                details={"agent": self.name, "error_type": type(e).__name__},
            ) from e

        body = response.text
        latency_ms = int((time.time() - start_time) * 1000)

        logger.info(
            "Agent responded",
            agent=self.name,
            status_code=response.status_code,
            latency_ms=latency_ms,
            body_preview=body[: self.log_preview_chars],
        )

        if not response.is_success:
            logger.error(
                "Agent returned error status",
                agent=self.name,
                status_code=response.status_code,
                body=body,
            )
            raise AgentHTTPError(
                f"{self.label} Error ({response.status_code}): {body}",
                status_code=response.status_code,
                body=body,
            )

        return body

    async def close(self) -> None:
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"name={self.name}, endpoint={self.endpoint}, "
            f"timeout={self.timeout}s)"
        )
