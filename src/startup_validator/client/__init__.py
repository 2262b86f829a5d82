"""
Client for the relay service.

Components:
- ValidationApiClient: httpx client for the relay routes
- classifier: Turns one HTTP exchange into an UpstreamCallResult
- exceptions: ValidationApiError, SubmissionError and user-facing messages
"""

from startup_validator.client.api_client import ApiStatus, ValidationApiClient
from startup_validator.client.classifier import (
    classify_response,
    classify_transport_error,
    is_json_content_type,
)
from startup_validator.client.exceptions import (
    API_ERROR_MESSAGES,
    ERROR_KIND_MESSAGES,
    SubmissionError,
    SubmissionInProgressError,
    ValidationApiError,
    get_error_message,
)

__all__ = [
    "ApiStatus",
    "ValidationApiClient",
    "classify_response",
    "classify_transport_error",
    "is_json_content_type",
    "API_ERROR_MESSAGES",
    "ERROR_KIND_MESSAGES",
    "SubmissionError",
    "SubmissionInProgressError",
    "ValidationApiError",
    "get_error_message",
]
