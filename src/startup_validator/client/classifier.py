"""
Response classifier for calls to the validation API.

Turns one HTTP exchange (or the transport exception raised instead of it)
into exactly one UpstreamCallResult. Pure functions: no I/O, no logging.
"""

import json
from typing import Optional

from startup_validator.client.exceptions import DEFAULT_FAILURE_MESSAGE
from startup_validator.models.call_results import (
    UpstreamCallResult,
    UpstreamFailure,
    UpstreamSuccess,
)
from startup_validator.models.enums import ErrorKind

NON_JSON_MESSAGE = "non-JSON response"

STATUS_KINDS: dict[int, ErrorKind] = {
    400: ErrorKind.INVALID_INPUT,
    401: ErrorKind.AUTH_ERROR,
    429: ErrorKind.RATE_LIMITED,
    503: ErrorKind.SERVER_UNAVAILABLE,
}


def is_json_content_type(content_type: Optional[str]) -> bool:
    """True for application/json and structured-syntax suffixes (+json)."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def _error_text(body: str) -> str:
    """The body's JSON "error" field, or the default failure message."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return DEFAULT_FAILURE_MESSAGE
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return DEFAULT_FAILURE_MESSAGE


def classify_response(
    status_code: int, content_type: Optional[str], body: str
) -> UpstreamCallResult:
    """
    Classify a received HTTP response.

    A non-JSON content type is a terminal failure whatever the status:
    it signals a misconfigured route or proxy, which a retry cannot fix.

    Args:
        status_code: HTTP status code
        content_type: Value of the Content-Type header (may be None)
        body: Raw response text

    Returns:
        UpstreamSuccess for 2xx JSON responses, UpstreamFailure otherwise
    """
    if not is_json_content_type(content_type):
        return UpstreamFailure(
            kind=ErrorKind.UNKNOWN,
            status_code=status_code,
            message=NON_JSON_MESSAGE,
            terminal=True,
        )

    if 200 <= status_code <= 299:
        return UpstreamSuccess(raw_body=body)

    return UpstreamFailure(
        kind=STATUS_KINDS.get(status_code, ErrorKind.UNKNOWN),
        status_code=status_code,
        message=_error_text(body),
    )


def classify_transport_error(exc: BaseException) -> UpstreamFailure:
    """Classify a failure that happened before any response was received."""
    return UpstreamFailure(
        kind=ErrorKind.NETWORK_ERROR,
        status_code=None,
        message=str(exc) or type(exc).__name__,
    )
