"""
HTTP client for the relay service.

Calls POST /api/validate (primary), POST /api/secondary-validate (secondary)
and GET /api/health-check using httpx AsyncClient. Every primary response goes
through the response classifier; a failure is raised as ValidationApiError so
the retry policy can decide what to do with it.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import httpx
import structlog

from startup_validator.client.classifier import (
    classify_response,
    classify_transport_error,
    is_json_content_type,
)
from startup_validator.client.exceptions import ValidationApiError
from startup_validator.config import Settings
from startup_validator.models.call_results import UpstreamFailure
from startup_validator.models.enums import ApiStatusKind, ErrorKind
from startup_validator.models.input_models import RelayRequest

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ApiStatus:
    """Outcome of one health check."""

    status: ApiStatusKind
    message: str
    last_checked: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class ValidationApiClient:
    """
    Async client for the relay service.

    Endpoints:
    - POST /api/validate: primary validation, returns {"response": "..."}
    - POST /api/secondary-validate: best-effort duplicate, reply ignored
    - GET /api/health-check: credentials check
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 150.0,
        validate_path: str = "/api/validate",
        secondary_path: Optional[str] = "/api/secondary-validate",
        health_path: str = "/api/health-check",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Relay service base URL
            timeout: Request timeout in seconds
            validate_path: Primary validation route
            secondary_path: Secondary route, None disables the secondary call
            health_path: Health-check route
            transport: Optional httpx transport (e.g. ASGITransport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.validate_path = validate_path
        self.secondary_path = secondary_path
        self.health_path = health_path
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ValidationApiClient":
        return cls(
            base_url=settings.VALIDATION_API_BASE_URL,
            timeout=settings.CLIENT_TIMEOUT,
            secondary_path=(
                "/api/secondary-validate" if settings.SECONDARY_VALIDATION_ENABLED else None
            ),
            transport=transport,
        )

    @property
    def secondary_enabled(self) -> bool:
        return self.secondary_path is not None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def validate(self, payload: RelayRequest) -> str:
        """
        Run one primary validation call.

        Returns:
            The relay's "response" string (may be empty)

        Raises:
            ValidationApiError: Classified failure (network, non-JSON, non-2xx)
        """
        try:
            client = await self._get_client()
            response = await client.post(
                self.validate_path, json=payload.model_dump(exclude_none=True)
            )
        except httpx.TransportError as e:
            failure = classify_transport_error(e)
            logger.warning(
                "Validation request failed before a response",
                error_type=type(e).__name__,
                error=failure.message,
            )
            raise ValidationApiError.from_failure(failure) from e

        result = classify_response(
            response.status_code, response.headers.get("content-type"), response.text
        )
        if isinstance(result, UpstreamFailure):
            logger.warning(
                "Validation request failed",
                status_code=result.status_code,
                kind=result.kind.value,
                terminal=result.terminal,
                error=result.message,
            )
            raise ValidationApiError.from_failure(result)

        return self._response_text(result.raw_body, response.status_code)

    def _response_text(self, raw_body: str, status_code: int) -> str:
        if not raw_body.strip():
            # Empty 2xx bodies are accepted as an empty report
            logger.warning("Validation succeeded with an empty body", status_code=status_code)
            return ""

        try:
            data = json.loads(raw_body)
        except json.JSONDecodeError as e:
            raise ValidationApiError(
                f"Malformed JSON body: {e.msg}",
                status=status_code,
                kind=ErrorKind.UNKNOWN,
            ) from e

        if isinstance(data, dict):
            text = data.get("response")
            if isinstance(text, str):
                return text
            if text is not None:
                return json.dumps(text, ensure_ascii=False)

        logger.warning(
            "Validation response has no response field", status_code=status_code
        )
        return ""

    async def secondary_validate(self, payload: RelayRequest) -> Optional[int]:
        """
        Run the secondary call. No retry.

        Returns:
            HTTP status code (2xx), or None when the secondary call is disabled

        Raises:
            httpx.HTTPError: Transport failures
            ValidationApiError: Non-2xx or non-JSON response

        Both are left to the caller to route to diagnostics.
        """
        if self.secondary_path is None:
            return None

        client = await self._get_client()
        response = await client.post(
            self.secondary_path, json=payload.model_dump(exclude_none=True)
        )
        logger.debug(
            "Secondary validation response",
            status_code=response.status_code,
            body_preview=response.text[:200],
        )
        result = classify_response(
            response.status_code, response.headers.get("content-type"), response.text
        )
        if isinstance(result, UpstreamFailure):
            raise ValidationApiError.from_failure(result)
        return response.status_code

    async def check_status(self) -> ApiStatus:
        """
        Query the relay health check. Never raises.
        """
        try:
            client = await self._get_client()
            response = await client.get(self.health_path)
        except httpx.HTTPError as e:
            logger.warning("Health check unreachable", error=str(e))
            return ApiStatus(
                status=ApiStatusKind.NOT_CONFIGURED,
                message="API not configured. Please check environment variables.",
            )

        if not is_json_content_type(response.headers.get("content-type")):
            return ApiStatus(
                status=ApiStatusKind.ERROR,
                message="API returned non-JSON response",
            )

        try:
            data = response.json()
        except json.JSONDecodeError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.is_success and data.get("status") == "ok":
            return ApiStatus(
                status=ApiStatusKind.CONNECTED,
                message="API credentials configured and ready",
            )
        return ApiStatus(
            status=ApiStatusKind.ERROR,
            message=data.get("error") or "API connection failed",
        )

    async def close(self) -> None:
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
